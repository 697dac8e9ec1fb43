"""
Custom exception hierarchy for Changeset Action
"""

from enum import Enum
from typing import Dict, Optional, Type

from constants import MAX_ENTRY_LENGTH, VALID_PREFIXES


class ChangesetException(Exception):
    """Base exception for all Changeset Action errors"""

    pass


class ConfigurationError(ChangesetException):
    """Raised when configuration is invalid or missing"""

    pass


class ErrorKind(Enum):
    """Closed set of failures reported by the changeset workflow"""

    # Infrastructure: collaborator (GitHub API) failures, logged only
    PULL_REQUEST_DATA_EXTRACTION = "PullRequestDataExtractionError"
    GET_GITHUB_CONTENT = "GetGithubContentError"
    CREATE_CHANGESET_FILE = "CreateChangesetFileError"
    UPDATE_CHANGESET_FILE = "UpdateChangesetFileError"
    UPDATE_PR_LABEL = "UpdatePRLabelError"

    # Content: problems the PR author can fix in the description
    INVALID_CHANGELOG_HEADING = "InvalidChangelogHeadingError"
    EMPTY_CHANGELOG_SECTION = "EmptyChangelogSectionError"
    ENTRY_TOO_LONG = "EntryTooLongError"
    INVALID_PREFIX = "InvalidPrefixError"
    CATEGORY_WITH_SKIP_OPTION = "CategoryWithSkipOptionError"
    CHANGELOG_ENTRY_MISSING_HYPHEN = "ChangelogEntryMissingHyphenError"
    EMPTY_ENTRY_DESCRIPTION = "EmptyEntryDescriptionError"

    @property
    def is_content_error(self) -> bool:
        return self in CONTENT_ERROR_KINDS


CONTENT_ERROR_KINDS = frozenset(
    {
        ErrorKind.INVALID_CHANGELOG_HEADING,
        ErrorKind.EMPTY_CHANGELOG_SECTION,
        ErrorKind.ENTRY_TOO_LONG,
        ErrorKind.INVALID_PREFIX,
        ErrorKind.CATEGORY_WITH_SKIP_OPTION,
        ErrorKind.CHANGELOG_ENTRY_MISSING_HYPHEN,
        ErrorKind.EMPTY_ENTRY_DESCRIPTION,
    }
)


class ChangelogError(ChangesetException):
    """A taxonomy error: kind, user-facing message and comment policy.

    Content errors are posted back to the PR author as a comment,
    infrastructure errors are only logged for maintainers.
    Subclasses bind ``kind`` and format the message; instances are never
    mutated after construction.
    """

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def should_result_in_pr_comment(self) -> bool:
        return self.kind.is_content_error

    def __repr__(self) -> str:
        return f"{self.name}({self.message!r})"


class PullRequestDataExtractionError(ChangelogError):
    kind = ErrorKind.PULL_REQUEST_DATA_EXTRACTION

    def __init__(self):
        super().__init__("Error extracting data from Pull Request")


class GetGithubContentError(ChangelogError):
    kind = ErrorKind.GET_GITHUB_CONTENT

    def __init__(self):
        super().__init__("Error retrieving content from GitHub repository")


class CreateChangesetFileError(ChangelogError):
    kind = ErrorKind.CREATE_CHANGESET_FILE

    def __init__(self):
        super().__init__("Error creating changeset file")


class UpdateChangesetFileError(ChangelogError):
    kind = ErrorKind.UPDATE_CHANGESET_FILE

    def __init__(self):
        super().__init__("Error updating changeset file")


class UpdatePRLabelError(ChangelogError):
    kind = ErrorKind.UPDATE_PR_LABEL

    def __init__(self):
        super().__init__(
            "There was an error updating the label of the pull request. "
            "Please ensure the PR is accessible and the label format is correct."
        )


class InvalidChangelogHeadingError(ChangelogError):
    """Raised when the '## Changelog' heading is missing or malformed"""

    kind = ErrorKind.INVALID_CHANGELOG_HEADING

    def __init__(self):
        super().__init__(
            "The '## Changelog' heading in your PR description is either missing "
            "or malformed. Please make sure that your PR description includes a "
            "'## Changelog' heading with with proper spelling, capitalization, "
            "spacing, and Markdown syntax."
        )


class EmptyChangelogSectionError(ChangelogError):
    """Raised when the Changelog section has no entries outside comments"""

    kind = ErrorKind.EMPTY_CHANGELOG_SECTION

    def __init__(self):
        super().__init__(
            "The Changelog section in your PR description is empty. Please add a "
            "valid changelog entry or entries. If you did add a changelog entry, "
            "check to make sure that it was not accidentally included inside the "
            "comment block in the Changelog section."
        )


class EntryTooLongError(ChangelogError):
    """Raised when an entry description exceeds the maximum length"""

    kind = ErrorKind.ENTRY_TOO_LONG

    def __init__(self, entry_length: int, max_length: Optional[int] = None):
        if max_length is None:
            max_length = MAX_ENTRY_LENGTH
        overage = entry_length - max_length
        unit = "character" if overage == 1 else "characters"
        super().__init__(
            f"Entry is {entry_length} characters long, which is {overage} {unit} "
            f"longer than the maximum allowed length of {max_length} characters. "
            "Please revise your entry to be within the maximum length."
        )
        self.entry_length = entry_length
        self.max_length = max_length


class InvalidPrefixError(ChangelogError):
    """Raised when an entry prefix is not one of VALID_PREFIXES"""

    kind = ErrorKind.INVALID_PREFIX

    def __init__(self, found_prefix: str):
        quoted = [f'"{prefix}"' for prefix in VALID_PREFIXES]
        expected = ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
        super().__init__(
            f'Invalid description prefix. Found "{found_prefix}". Expected {expected}.'
        )
        self.found_prefix = found_prefix


class CategoryWithSkipOptionError(ChangelogError):
    kind = ErrorKind.CATEGORY_WITH_SKIP_OPTION

    def __init__(self):
        super().__init__(
            "If your Changelog section includes the 'skip' option, it cannot also "
            "contain other changelog entries. Please revise your Changelog section."
        )


class ChangelogEntryMissingHyphenError(ChangelogError):
    kind = ErrorKind.CHANGELOG_ENTRY_MISSING_HYPHEN

    def __init__(self):
        super().__init__("Changelog entries must begin with a hyphen (-).")


class EmptyEntryDescriptionError(ChangelogError):
    kind = ErrorKind.EMPTY_ENTRY_DESCRIPTION

    def __init__(self, found_prefix: str):
        super().__init__(f'Description for "{found_prefix}" entry cannot be empty.')
        self.found_prefix = found_prefix


ERRORS_BY_KIND: Dict[ErrorKind, Type[ChangelogError]] = {
    cls.kind: cls for cls in ChangelogError.__subclasses__()
}
