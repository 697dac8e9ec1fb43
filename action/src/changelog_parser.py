"""Extract changelog entries from a PR description"""

import logging
from functools import reduce
from typing import List, NamedTuple, Optional, Tuple

from constants import CHANGELOG_SECTION_REGEX, COMMENT_CLOSE, COMMENT_OPEN
from exceptions import EmptyChangelogSectionError, InvalidChangelogHeadingError

logger = logging.getLogger(__name__)


class ParseState(NamedTuple):
    """Scan accumulator threaded through the lines of the Changelog section"""

    in_comment: bool
    entries: Tuple[str, ...]


def process_line(in_comment: bool, line: str) -> Tuple[bool, Optional[str]]:
    """
    Classify a single line of the Changelog section

    Args:
        in_comment: Whether the previous lines left us inside a comment block
        line: Raw line of text

    Returns:
        Tuple of (new in_comment state, trimmed entry or None)
    """
    # An opening token wins even when the same line also closes the comment
    if COMMENT_OPEN in line:
        return True, None

    if COMMENT_CLOSE in line:
        return False, None

    trimmed = line.strip()
    if in_comment or not trimmed or trimmed.startswith("#"):
        return in_comment, None

    return in_comment, trimmed


def _fold_line(state: ParseState, line: str) -> ParseState:
    in_comment, entry = process_line(state.in_comment, line)
    if entry is None:
        return ParseState(in_comment, state.entries)
    return ParseState(in_comment, state.entries + (entry,))


def find_changelog_section(description: Optional[str]) -> str:
    """
    Locate the Changelog section, heading line included

    Raises:
        InvalidChangelogHeadingError: If no '## Changelog' heading is found
    """
    match = CHANGELOG_SECTION_REGEX.search(description or "")
    if not match:
        logger.debug("No '## Changelog' heading found in PR description")
        raise InvalidChangelogHeadingError()
    return match.group(0)


def extract_changelog_entries(description: Optional[str]) -> List[str]:
    """
    Extract changelog entry lines from a PR description

    Lines inside <!-- --> comment blocks, blank lines and nested headings
    are dropped. Entries keep the order they appear in.

    Args:
        description: PR description in Markdown

    Returns:
        List of trimmed candidate entry lines

    Raises:
        InvalidChangelogHeadingError: If the heading is missing or malformed
        EmptyChangelogSectionError: If the section holds no entries
    """
    section = find_changelog_section(description)

    final_state = reduce(
        _fold_line, section.split("\n"), ParseState(in_comment=False, entries=())
    )
    if not final_state.entries:
        raise EmptyChangelogSectionError()

    logger.info(f"Extracted {len(final_state.entries)} changelog entry line(s)")
    return list(final_state.entries)
