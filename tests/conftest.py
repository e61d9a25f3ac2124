"""Shared pytest fixtures for all tests."""

import tempfile
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_yaml(temp_dir) -> Callable[[str, Any], Path]:
    """Write data as YAML to a path relative to ``temp_dir``."""

    def _write(relative: str, data: Any) -> Path:
        path = temp_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def conf_dir(temp_dir) -> Path:
    """Context fragment directory, e.g. ``conf/AdditionalConfiguration``."""
    path = temp_dir / "conf" / "AdditionalConfiguration"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def base_conf_vars() -> Dict[str, Any]:
    """A host configuration before any overlay is applied."""
    return {
        "SYS": {"sitename": "Site", "debug": False},
        "DB": {"host": "localhost", "port": 3306},
        "EXT": {"enabled": ["core", "frontend"]},
    }
