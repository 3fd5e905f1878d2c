import shutil
from datetime import date
from pathlib import Path

import pytest

from workcal.config import Configuration

EXAMPLE_DIR = Path(__file__).resolve().parents[1] / "config.example"

# The day every generated sequence in the test-suite starts on.
TODAY = date(2020, 1, 1)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock():
    return lambda: TODAY


@pytest.fixture
def nl_config():
    """Dutch default: Mon–Fri, ten years, nothing excluded."""
    return Configuration(zone="nl", workdays={1, 2, 3, 4, 5}, number_of_years=10)


@pytest.fixture
def be_config():
    return Configuration(zone="be", workdays={1, 2, 3, 4, 5}, number_of_years=10)


@pytest.fixture
def configs(nl_config, be_config):
    return {"nl": nl_config, "be": be_config}


@pytest.fixture
def config_root(tmp_path):
    """Fresh copy of config.example/ (nl.json, be.json)."""
    root = tmp_path / "config"
    shutil.copytree(EXAMPLE_DIR, root)
    return root


@pytest.fixture
def cache_root(tmp_path):
    root = tmp_path / "cache"
    root.mkdir()
    return root
