"""
Configuration loading and parsing for Changeset Action
"""

import json
import logging
import os
from typing import Any, Dict

from constants import MAX_ENTRY_LENGTH
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ActionConfig:
    """Loads and validates action configuration from environment variables"""

    def __init__(self):
        """Initialize configuration from environment variables"""
        # GitHub context
        self.github_event = self._load_github_event()
        self.github_event_name = os.getenv("GITHUB_EVENT_NAME", "")
        self.github_token = os.getenv("GITHUB_TOKEN", "")
        self.github_api_url = os.getenv("GITHUB_API_URL", "https://api.github.com")
        self.github_repository = os.getenv("GITHUB_REPOSITORY", "")

        # Changeset configuration
        self.changeset_path = self._get_input("changeset-path", "changelogs/fragments")
        self.max_entry_length = self._parse_int_input(
            "max-entry-length", str(MAX_ENTRY_LENGTH)
        )
        self.skip_label = self._get_input("skip-label", "skip-changelog")
        self.failure_label = self._get_input("failure-label", "failed changeset")
        self.commit_message = self._get_input(
            "commit-message", "Changeset file for PR #{pr_number}"
        )

        # Dry-run mode
        self.dry_run = self._get_input("dry-run", "false").lower() == "true"

        # Validate configuration
        self._validate_config()

    @staticmethod
    def _get_input(input_name: str, default: str = "") -> str:
        """Get input value, trying both hyphenated and underscored versions.

        GitHub Actions passes inputs with hyphens as-is in env vars (e.g., INPUT_CHANGESET-PATH),
        but also provides underscored versions (e.g., INPUT_CHANGESET_PATH).
        We try both for compatibility.

        Args:
            input_name: Input name (with hyphens)
            default: Default value if not found

        Returns:
            Input value from environment or default
        """
        underscored = "INPUT_" + input_name.upper().replace("-", "_")
        hyphenated = "INPUT_" + input_name.upper()

        value = os.getenv(underscored) or os.getenv(hyphenated) or default
        logger.debug(f"_get_input({input_name}): result={value}")
        return value

    @staticmethod
    def _parse_int_input(input_name: str, default: str) -> int:
        """Parse an integer input.

        Raises:
            ConfigurationError: If the value is not an integer
        """
        value = ActionConfig._get_input(input_name, default)
        try:
            return int(value)
        except ValueError:
            raise ConfigurationError(f"{input_name} must be an integer, got: {value}")

    @staticmethod
    def _load_github_event() -> Dict[str, Any]:
        """Load GitHub event from environment.

        Returns:
            GitHub event data as dictionary, or empty dict if not available
        """
        event_path = os.getenv("GITHUB_EVENT_PATH")
        if not event_path or not os.path.exists(event_path):
            logger.warning("GITHUB_EVENT_PATH not found or not set")
            return {}

        try:
            with open(event_path, "r") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.error(f"Failed to load GitHub event: {e}")
            return {}

    def _validate_config(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.max_entry_length <= 0:
            raise ConfigurationError(
                f"max-entry-length must be positive, got: {self.max_entry_length}"
            )

        if not self.changeset_path.strip("/"):
            raise ConfigurationError("changeset-path cannot be empty")

        if not self.skip_label:
            raise ConfigurationError("skip-label cannot be empty")

        if not self.github_token and not self.dry_run:
            logger.warning("GITHUB_TOKEN is not set, GitHub API calls will fail")

        logger.info("Configuration validated successfully")

    def get_summary(self) -> str:
        """Get a human-readable summary of the configuration.

        Returns:
            Configuration summary string
        """
        summary_lines = [
            "=== Changeset Action Configuration ===",
            f"Repository: {self.github_repository or '(unknown)'}",
            f"Changeset path: {self.changeset_path}",
            f"Max entry length: {self.max_entry_length}",
            f"Skip label: {self.skip_label}",
            f"Failure label: {self.failure_label or '(none)'}",
            f"Dry-run mode: {'enabled' if self.dry_run else 'disabled'}",
            "=" * 40,
        ]
        return "\n".join(summary_lines)
