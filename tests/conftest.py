"""Shared fixtures for icu-encode tests."""
import sys
from pathlib import Path

import pytest

# Ensure src is on path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Point settings at a temp file so ~/.config is never read."""
    settings_file = tmp_path / "config" / "settings.json"
    monkeypatch.setattr("icuencode.services.settings._SETTINGS_FILE", settings_file)
    from icuencode.services.settings import Settings
    Settings.reset_instance()
    yield settings_file
    Settings.reset_instance()
