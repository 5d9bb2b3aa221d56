import sys
from pathlib import Path

import pytest

# Make the src/ package importable without installing it
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture()
def official_name():
    """Five-part name used across the formatting and derivative tests."""
    from namefully import Namefully

    return Namefully("Mr John Ben Smith Ph.D")


@pytest.fixture()
def settings_file(tmp_path):
    """Write a yaml settings file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "namefully.yml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
