"""Changelog entry validation module"""

import logging
from typing import Dict, List, Optional, Tuple

from constants import MAX_ENTRY_LENGTH, SKIP_PREFIX, VALID_PREFIXES
from exceptions import (
    CategoryWithSkipOptionError,
    ChangelogEntryMissingHyphenError,
    EmptyEntryDescriptionError,
    EntryTooLongError,
    InvalidPrefixError,
)

logger = logging.getLogger(__name__)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def prepare_changelog_entry(
    entry: str,
    pr_number: int,
    pr_link: str,
    max_length: Optional[int] = None,
) -> Tuple[str, str]:
    """
    Validate one entry line and format its description

    An entry looks like ``- feat: Add a thing``. The prefix is matched
    case-insensitively against VALID_PREFIXES.

    Args:
        entry: Entry line as returned by the changelog parser
        pr_number: Pull request number, appended as a link
        pr_link: URL of the pull request
        max_length: Maximum description length (defaults to MAX_ENTRY_LENGTH)

    Returns:
        Tuple of (lowercased prefix, formatted description). The description
        is empty for the skip option.
    """
    if max_length is None:
        max_length = MAX_ENTRY_LENGTH

    trimmed = entry.strip()
    if not trimmed.startswith("-"):
        raise ChangelogEntryMissingHyphenError()

    prefix, _, description = trimmed[1:].partition(":")
    prefix = prefix.strip()
    description = description.strip()

    normalized_prefix = prefix.lower()
    if normalized_prefix not in VALID_PREFIXES:
        raise InvalidPrefixError(prefix)

    if normalized_prefix == SKIP_PREFIX:
        return normalized_prefix, ""

    if not description:
        raise EmptyEntryDescriptionError(prefix)

    if len(description) > max_length:
        raise EntryTooLongError(len(description), max_length)

    formatted = f"{_capitalize_first(description)} ([#{pr_number}]({pr_link}))"
    return normalized_prefix, formatted


def prepare_changeset_entry_map(
    entries: List[str],
    pr_number: int,
    pr_link: str,
    max_length: Optional[int] = None,
) -> Dict[str, List[str]]:
    """
    Group validated entries by prefix

    Prefixes keep the order of their first appearance.

    Raises:
        CategoryWithSkipOptionError: If 'skip' is combined with other entries
    """
    entry_map: Dict[str, List[str]] = {}
    for entry in entries:
        prefix, description = prepare_changelog_entry(
            entry, pr_number, pr_link, max_length
        )
        descriptions = entry_map.setdefault(prefix, [])
        if description:
            descriptions.append(description)

    if SKIP_PREFIX in entry_map and len(entries) > 1:
        raise CategoryWithSkipOptionError()

    logger.debug(f"Prepared changeset entry map: {entry_map}")
    return entry_map


def is_skip_entry(entry_map: Dict[str, List[str]]) -> bool:
    """Check whether the changeset is the single 'skip' option"""
    return SKIP_PREFIX in entry_map
