# tests/conftest.py
import os

import pytest

# Headless Qt for widget tests; must be set before a QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def settings_path(tmp_path):
    """A settings.yaml location that never touches the real project file."""
    return str(tmp_path / "settings.yaml")
