from __future__ import annotations

import random
from pathlib import Path

import pytest
from hypothesis import seed, settings

PROJECT_ROOT = Path(__file__).parent.parent
REPO_SETTINGS = PROJECT_ROOT / "config" / "settings.yaml"


def pytest_configure(config: pytest.Config) -> None:
    config.option.xfail_strict = False
    config.addinivalue_line("markers", "hypothesis: property-based test")


# ---- Deterministic Testing Configuration ---------------------

DETERMINISTIC_SEED = 42


@pytest.fixture(autouse=True)
def set_deterministic_seed():
    """Set deterministic seed for all tests"""
    random.seed(DETERMINISTIC_SEED)
    yield
    random.seed()


settings.register_profile(
    "deterministic",
    deadline=None,
    max_examples=200,
    derandomize=False,
    database=None,
)
settings.load_profile("deterministic")
seed(DETERMINISTIC_SEED)


# ---- Shared fixtures ------------------------------------------


@pytest.fixture()
def repo_settings() -> Path:
    return REPO_SETTINGS


@pytest.fixture()
def teams() -> list[str]:
    return ["New York Jets", "New York Giants", "Dallas Cowboys", "Atlanta Falcons"]


@pytest.fixture()
def books() -> list[dict[str, str]]:
    return [
        {"title": "The Hobbit", "author": "J. R. R. Tolkien"},
        {"title": "Dune", "author": "Frank Herbert"},
        {"title": "The Silmarillion", "author": "J. R. R. Tolkien"},
    ]


@pytest.fixture()
def settings_file(tmp_path: Path):
    """Write a YAML settings file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "settings.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
