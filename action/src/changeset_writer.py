"""Build changeset file content from validated entries"""

import logging
from typing import Dict, List

import yaml

logger = logging.getLogger(__name__)


def changeset_file_path(changeset_path: str, pr_number: int) -> str:
    """Path of the changeset file for a PR: <changeset_path>/<pr_number>.yml"""
    return f"{changeset_path.rstrip('/')}/{pr_number}.yml"


def build_changeset_content(entry_map: Dict[str, List[str]]) -> str:
    """
    Render an entry map as changeset YAML

    Example:
        {"feat": ["Add a thing ([#1](https://...))"]} becomes

        feat:
        - Add a thing ([#1](https://...))
    """
    content = yaml.dump(
        entry_map, default_flow_style=False, sort_keys=False, allow_unicode=True
    )
    logger.debug(f"Changeset content:\n{content}")
    return content


def parse_changeset_content(content: str) -> Dict[str, List[str]]:
    """
    Parse changeset YAML back into an entry map

    Raises:
        ValueError: If the content is not a mapping of prefixes to lists
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML: {e}") from e

    if not data:
        return {}
    if not isinstance(data, dict):
        raise ValueError("Changeset must be a dictionary/object")

    entry_map = {}
    for prefix, descriptions in data.items():
        if descriptions is None:
            descriptions = []
        if not isinstance(descriptions, list):
            raise ValueError(f'Entries for "{prefix}" must be a list')
        entry_map[str(prefix)] = [str(d) for d in descriptions]
    return entry_map
