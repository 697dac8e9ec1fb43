"""Tests for changeset file rendering"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "action", "src"))

import pytest
import yaml
from changeset_writer import (
    build_changeset_content,
    changeset_file_path,
    parse_changeset_content,
)


def test_changeset_file_path():
    assert changeset_file_path("changelogs/fragments", 42) == "changelogs/fragments/42.yml"


def test_changeset_file_path_trailing_slash():
    assert changeset_file_path("changelogs/fragments/", 7) == "changelogs/fragments/7.yml"


def test_build_changeset_content_keeps_prefix_order():
    entry_map = {
        "fix": ["Repair widget ([#1](https://github.com/o/r/pull/1))"],
        "feat": ["Add gadget ([#1](https://github.com/o/r/pull/1))"],
    }
    content = build_changeset_content(entry_map)

    assert content.index("fix:") < content.index("feat:")
    assert yaml.safe_load(content) == entry_map


def test_build_changeset_content_is_block_style():
    content = build_changeset_content({"chore": ["Bump deps"]})
    assert content == "chore:\n- Bump deps\n"


def test_parse_changeset_content():
    content = "feat:\n- Add gadget\nfix:\n- Repair widget\n- Repair gizmo\n"
    assert parse_changeset_content(content) == {
        "feat": ["Add gadget"],
        "fix": ["Repair widget", "Repair gizmo"],
    }


def test_parse_empty_changeset():
    assert parse_changeset_content("") == {}


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "feat: not a list\n",
        "feat:\n  - ok\n bad indent: [\n",
    ],
)
def test_parse_invalid_changeset(content):
    with pytest.raises(ValueError):
        parse_changeset_content(content)
