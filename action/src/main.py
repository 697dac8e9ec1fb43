#!/usr/bin/env python3
"""
Changeset GitHub Action - Turn the Changelog section of a PR into a changeset file
"""

import logging
import os
import sys
from typing import Dict, List, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Add src directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from changelog_parser import extract_changelog_entries
from changeset_writer import build_changeset_content, changeset_file_path
from config import ActionConfig
from entry_validator import is_skip_entry, prepare_changeset_entry_map
from exceptions import ChangelogError, ChangesetException, ConfigurationError
from github_client import GitHubClient


def set_output(name: str, value: str) -> None:
    """Append a name=value pair to GITHUB_OUTPUT"""
    # Outputs are line based, a multi-line value would corrupt the file
    value = " ".join(str(value).split("\n")).replace("\r", "")
    output_file = os.getenv("GITHUB_OUTPUT")
    if output_file:
        with open(output_file, "a") as f:
            f.write(f"{name}={value}\n")
    logger.info(f"Output: {name}={value}")


class ChangesetAction:
    """Main action class handling the workflow"""

    def __init__(
        self,
        config: Optional[ActionConfig] = None,
        github_client: Optional[GitHubClient] = None,
    ):
        """Initialize the action from environment configuration"""
        self.config = config or ActionConfig()
        self.github_event = self.config.github_event
        self.github_client = github_client or GitHubClient(
            self.config.github_token,
            self.config.github_api_url,
            self.github_event,
            self.config.github_repository,
        )

    def set_output(self, name: str, value: str) -> None:
        """Set GitHub Actions output"""
        set_output(name, value)

    def run(self) -> int:
        """Main action execution"""
        try:
            if not self._is_pr_workflow():
                logger.info("Not a PR workflow, skipping changeset check")
                return 0

            logger.info("Starting changeset action")
            logger.info(self.config.get_summary())

            description = self.github_client.get_pr_description()
            entries = extract_changelog_entries(description)
            entry_map = prepare_changeset_entry_map(
                entries,
                self.github_client.pr_number,
                self.github_client.pr_link,
                self.config.max_entry_length,
            )

            if is_skip_entry(entry_map):
                return self._handle_skip()
            return self._handle_entries(entry_map)

        except ChangelogError as e:
            return self._handle_changelog_error(e)

        except ChangesetException as e:
            logger.error(f"Action failed with error: {e}")
            self.set_output("changeset-error", str(e))
            return 1

        except Exception as e:
            logger.error(f"Action failed with error: {e}", exc_info=True)
            self.set_output("changeset-error", str(e))
            return 1

    def _is_pr_workflow(self) -> bool:
        """Check if running in a PR workflow"""
        event_name = self.config.github_event_name
        is_pr_event = event_name in ["pull_request", "pull_request_target"] and bool(
            self.github_event.get("pull_request")
        )

        if is_pr_event:
            logger.info(f"Running on {event_name} event")

        return is_pr_event

    def _changeset_path(self) -> str:
        return changeset_file_path(
            self.config.changeset_path, self.github_client.pr_number
        )

    def _commit_message(self) -> str:
        return self.config.commit_message.format(
            pr_number=self.github_client.pr_number
        )

    def _handle_skip(self) -> int:
        """Handle the 'skip' option: drop any changeset file and label the PR"""
        path = self._changeset_path()
        logger.info("Changelog section requests 'skip'")

        if self.config.dry_run:
            logger.info(f"[dry-run] Would delete {path} and add '{self.config.skip_label}'")
        else:
            sha = self.github_client.get_file_sha(path)
            if sha:
                self.github_client.delete_file(path, sha, self._commit_message())
            self.github_client.add_label(self.config.skip_label)
            self._clear_failure_label()

        self.set_output("changeset-skipped", "true")
        self.set_output("changeset-created", "false")
        return 0

    def _handle_entries(self, entry_map: Dict[str, List[str]]) -> int:
        """Write the changeset file for validated entries"""
        path = self._changeset_path()
        content = build_changeset_content(entry_map)
        count = sum(len(descriptions) for descriptions in entry_map.values())
        logger.info(f"Writing {count} entry(ies) to {path}")

        if self.config.dry_run:
            logger.info(f"[dry-run] Would write {path}:\n{content}")
        else:
            sha = self.github_client.get_file_sha(path)
            self.github_client.create_or_update_file(
                path, content, self._commit_message(), sha
            )
            self.github_client.remove_label(self.config.skip_label)
            self._clear_failure_label()

        self.set_output("changeset-skipped", "false")
        self.set_output("changeset-created", "true")
        return 0

    def _clear_failure_label(self) -> None:
        if self.config.failure_label:
            self.github_client.remove_label(self.config.failure_label)

    def _handle_changelog_error(self, error: ChangelogError) -> int:
        """Log a taxonomy error and, for content errors, tell the PR author"""
        logger.error(f"{error.name}: {error.message}")

        if error.should_result_in_pr_comment:
            comment = f"❌ **Changeset error**: {error.message}"
            if self.config.dry_run:
                logger.info(f"[dry-run] Would comment: {comment}")
            else:
                self.github_client.comment_on_pr(comment)
            if self.config.failure_label and not self.config.dry_run:
                try:
                    self.github_client.add_label(self.config.failure_label)
                except ChangelogError as label_error:
                    logger.error(f"{label_error.name}: {label_error.message}")

        self.set_output("changeset-error", error.message)
        return 1


def main():
    """Entry point"""
    try:
        action = ChangesetAction()
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        set_output("changeset-error", str(e))
        sys.exit(1)
    exit_code = action.run()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
