"""Tests for action configuration loading"""

import json
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "action", "src"))

import pytest
from config import ActionConfig
from exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove action inputs inherited from the environment"""
    for name in list(os.environ):
        if name.startswith("INPUT_") or name.startswith("GITHUB_"):
            monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = ActionConfig()
    assert config.github_event == {}
    assert config.github_api_url == "https://api.github.com"
    assert config.changeset_path == "changelogs/fragments"
    assert config.max_entry_length == 50
    assert config.skip_label == "skip-changelog"
    assert config.failure_label == "failed changeset"
    assert config.dry_run is False


def test_underscored_and_hyphenated_inputs(monkeypatch):
    monkeypatch.setenv("INPUT_CHANGESET_PATH", "news")
    monkeypatch.setenv("INPUT_MAX-ENTRY-LENGTH", "72")
    config = ActionConfig()
    assert config.changeset_path == "news"
    assert config.max_entry_length == 72


def test_loads_event(monkeypatch, tmp_path):
    event_path = tmp_path / "event.json"
    event_path.write_text(json.dumps({"pull_request": {"number": 7}}))
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_path))

    assert ActionConfig().github_event == {"pull_request": {"number": 7}}


def test_invalid_event_file(monkeypatch, tmp_path):
    event_path = tmp_path / "event.json"
    event_path.write_text("{not json")
    monkeypatch.setenv("GITHUB_EVENT_PATH", str(event_path))

    assert ActionConfig().github_event == {}


@pytest.mark.parametrize("value", ["0", "-3", "many"])
def test_invalid_max_entry_length(monkeypatch, value):
    monkeypatch.setenv("INPUT_MAX_ENTRY_LENGTH", value)
    with pytest.raises(ConfigurationError):
        ActionConfig()


def test_empty_changeset_path(monkeypatch):
    monkeypatch.setenv("INPUT_CHANGESET_PATH", "/")
    with pytest.raises(ConfigurationError):
        ActionConfig()


def test_summary(monkeypatch):
    monkeypatch.setenv("INPUT_DRY_RUN", "true")
    summary = ActionConfig().get_summary()
    assert "Changeset path: changelogs/fragments" in summary
    assert "Dry-run mode: enabled" in summary
