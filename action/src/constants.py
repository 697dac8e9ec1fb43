"""Constants shared by the changelog parser and validators"""

import re

# "## Changelog" line followed by everything up to the next level-2 heading
CHANGELOG_SECTION_REGEX = re.compile(
    r"^## Changelog[ \t]*\r?$.*?(?=^## |\Z)", re.MULTILINE | re.DOTALL
)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

# Order matters: it is the order shown to PR authors
VALID_PREFIXES = (
    "breaking",
    "deprecate",
    "feat",
    "fix",
    "infra",
    "doc",
    "chore",
    "refactor",
    "security",
    "skip",
    "test",
)

SKIP_PREFIX = "skip"

MAX_ENTRY_LENGTH = 50
