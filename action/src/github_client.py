"""GitHub API client for PR operations"""

import base64
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from exceptions import (
    CreateChangesetFileError,
    GetGithubContentError,
    PullRequestDataExtractionError,
    UpdateChangesetFileError,
    UpdatePRLabelError,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """Client for GitHub API operations"""

    def __init__(
        self, token: str, api_url: str, event: Dict[str, Any], repository: str = ""
    ):
        """Initialize GitHub client"""
        self.token = token
        self.api_url = api_url.rstrip("/")
        self.event = event
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"token {token}",
                "Accept": "application/vnd.github.v3+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )

        # Extract PR info
        pull_request = event.get("pull_request", {})
        if not repository:
            repository = event.get("repository", {}).get("full_name", "")
        self.repository = repository
        self.pr_number = pull_request.get("number", 0)
        self.pr_link = pull_request.get("html_url", "")
        # Changeset files are committed to the PR head branch
        head = pull_request.get("head", {})
        self.head_ref = head.get("ref", "")
        self.head_repository = head.get("repo", {}).get("full_name") or repository

    @property
    def _repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.repository}"

    @property
    def _head_repo_url(self) -> str:
        return f"{self.api_url}/repos/{self.head_repository}"

    def get_pr_description(self) -> str:
        """
        Get the PR description, from the event payload or the pulls API

        Raises:
            PullRequestDataExtractionError: If the PR cannot be read
        """
        pull_request = self.event.get("pull_request")
        if pull_request and "body" in pull_request:
            return pull_request.get("body") or ""

        if not self.pr_number or not self.repository:
            logger.error("No PR number or repository found in event")
            raise PullRequestDataExtractionError()

        url = f"{self._repo_url}/pulls/{self.pr_number}"
        try:
            response = self.session.get(url)
            response.raise_for_status()
            pr_data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Failed to get PR data: {e}")
            raise PullRequestDataExtractionError() from e

        self.pr_link = self.pr_link or pr_data.get("html_url", "")
        return pr_data.get("body") or ""

    def get_file_sha(self, path: str) -> Optional[str]:
        """
        Get the blob sha of a file on the PR head branch

        Returns:
            The sha, or None when the file does not exist

        Raises:
            GetGithubContentError: On any other API failure
        """
        url = f"{self._head_repo_url}/contents/{quote(path)}"
        params = {"ref": self.head_ref} if self.head_ref else None
        try:
            response = self.session.get(url, params=params)
            if response.status_code == 404:
                logger.debug(f"{path} does not exist yet")
                return None
            response.raise_for_status()
            return response.json().get("sha")
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Failed to get content of {path}: {e}")
            raise GetGithubContentError() from e

    def create_or_update_file(
        self, path: str, content: str, message: str, sha: Optional[str] = None
    ) -> None:
        """
        Commit a file to the PR head branch

        Raises:
            CreateChangesetFileError: If creating a new file fails
            UpdateChangesetFileError: If updating an existing file (sha given) fails
        """
        url = f"{self._head_repo_url}/contents/{quote(path)}"
        payload = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if self.head_ref:
            payload["branch"] = self.head_ref
        if sha:
            payload["sha"] = sha

        try:
            response = self.session.put(url, json=payload)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to write {path}: {e}")
            if sha:
                raise UpdateChangesetFileError() from e
            raise CreateChangesetFileError() from e

        logger.info(f"{'Updated' if sha else 'Created'} {path}")

    def delete_file(self, path: str, sha: str, message: str) -> None:
        """
        Delete a file from the PR head branch

        Raises:
            UpdateChangesetFileError: If the deletion fails
        """
        url = f"{self._head_repo_url}/contents/{quote(path)}"
        payload = {"message": message, "sha": sha}
        if self.head_ref:
            payload["branch"] = self.head_ref

        try:
            response = self.session.delete(url, json=payload)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to delete {path}: {e}")
            raise UpdateChangesetFileError() from e

        logger.info(f"Deleted {path}")

    def add_label(self, label: str) -> None:
        """
        Add a label to the PR

        Raises:
            UpdatePRLabelError: If the label cannot be added
        """
        url = f"{self._repo_url}/issues/{self.pr_number}/labels"
        try:
            response = self.session.post(url, json={"labels": [label]})
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to add label '{label}': {e}")
            raise UpdatePRLabelError() from e

        logger.info(f"Added label '{label}' to PR")

    def remove_label(self, label: str) -> None:
        """
        Remove a label from the PR. A label that is not set is ignored.

        Raises:
            UpdatePRLabelError: If the label cannot be removed
        """
        url = f"{self._repo_url}/issues/{self.pr_number}/labels/{quote(label)}"
        try:
            response = self.session.delete(url)
            if response.status_code == 404:
                logger.debug(f"Label '{label}' not set on PR")
                return
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to remove label '{label}': {e}")
            raise UpdatePRLabelError() from e

        logger.info(f"Removed label '{label}' from PR")

    def comment_on_pr(self, body: str) -> bool:
        """Post a comment on the PR"""
        if not self.pr_number:
            logger.warning("No PR number found, cannot comment")
            return False

        url = f"{self._repo_url}/issues/{self.pr_number}/comments"

        try:
            response = self.session.post(url, json={"body": body})
            response.raise_for_status()
            logger.info("Successfully posted comment on PR")
            return True

        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to comment on PR: {e}")
            return False
