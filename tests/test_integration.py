"""Integration tests for the description-to-changeset pipeline"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "action", "src"))

import pytest
from changelog_parser import extract_changelog_entries
from changeset_writer import build_changeset_content, parse_changeset_content
from entry_validator import is_skip_entry, prepare_changeset_entry_map
from exceptions import ChangelogError, EmptyChangelogSectionError, InvalidPrefixError

PR_LINK = "https://github.com/owner/repo/pull/9"

PR_TEMPLATE = """### Description
{description}

### Issues Resolved
closes #8

## Changelog
<!--
Add a short changelog entry, e.g.
- fix: Correct the thing
Use "- skip" if no changelog is needed.
-->
{changelog}

### Check List
"""


def run_pipeline(changelog, description="Does a thing."):
    body = PR_TEMPLATE.format(description=description, changelog=changelog)
    entries = extract_changelog_entries(body)
    return prepare_changeset_entry_map(entries, 9, PR_LINK)


class TestIntegration:
    """Integration tests for complete workflows"""

    def test_workflow_valid_entries(self):
        entry_map = run_pipeline("- feat: Add widgets\n- security: Patch CVE")

        content = build_changeset_content(entry_map)

        assert parse_changeset_content(content) == {
            "feat": [f"Add widgets ([#9]({PR_LINK}))"],
            "security": [f"Patch CVE ([#9]({PR_LINK}))"],
        }

    def test_workflow_skip(self):
        assert is_skip_entry(run_pipeline("- skip"))

    def test_workflow_untouched_template(self):
        with pytest.raises(EmptyChangelogSectionError):
            run_pipeline("")

    def test_workflow_invalid_entry(self):
        with pytest.raises(InvalidPrefixError) as exc_info:
            run_pipeline("- docs: Typo in prefix")
        assert exc_info.value.should_result_in_pr_comment

    def test_every_failure_is_a_changelog_error(self):
        for changelog in ("", "no hyphen", "- fix:", "- skip\n- fix: Thing"):
            with pytest.raises(ChangelogError):
                run_pipeline(changelog)
