"""Frontmatter extraction and raw value coercion.

The extractor returns the header block exactly as YAML describes it. Values
in that mapping are untyped, so every coercion below first classifies the
value into a RawKind and then dispatches on the kind.
"""

import datetime
import math
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from vault_blog.core.models import FrontmatterParseError, NoteContext


# A header block opens on the first line and closes at the next '---' line
FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)

PREVIEW_LINES = 10

_TIMESTAMP_TAG = 'tag:yaml.org,2002:timestamp'


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps date-like scalars as the strings they were written as."""


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class RawKind(Enum):
    ABSENT = 'absent'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    STRING = 'string'
    DATE = 'date'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'


def classify(value: Any) -> RawKind:
    """Return the variant a raw frontmatter value belongs to."""
    if value is None:
        return RawKind.ABSENT
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return RawKind.BOOLEAN
    if isinstance(value, (int, float)):
        return RawKind.NUMBER
    if isinstance(value, str):
        return RawKind.STRING
    if isinstance(value, (datetime.date, datetime.datetime)):
        return RawKind.DATE
    if isinstance(value, (list, tuple, set)):
        return RawKind.SEQUENCE
    if isinstance(value, dict):
        return RawKind.MAPPING
    return RawKind.STRING


def is_truthy(value: Any) -> bool:
    """Boolean coercion of a raw value.

    Empty sequences and mappings count as true; only absent values,
    false, zero, NaN and the empty string are false.
    """
    kind = classify(value)
    if kind is RawKind.ABSENT:
        return False
    if kind is RawKind.BOOLEAN:
        return value
    if kind is RawKind.NUMBER:
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if kind is RawKind.STRING:
        return str(value) != ''
    return True


def _date_string(value: Union[datetime.date, datetime.datetime]) -> str:
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    return value.strftime('%Y-%m-%d')


def stringify(value: Any) -> str:
    """String coercion of a raw value.

    Sequences join their stringified elements with commas, mappings render
    as flow-style YAML and absent values become the empty string.
    """
    kind = classify(value)
    if kind is RawKind.ABSENT:
        return ''
    if kind is RawKind.BOOLEAN:
        return 'true' if value else 'false'
    if kind is RawKind.NUMBER:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if kind is RawKind.DATE:
        return _date_string(value)
    if kind is RawKind.SEQUENCE:
        return ','.join(stringify(item) for item in value)
    if kind is RawKind.MAPPING:
        return yaml.safe_dump(value, default_flow_style=True, sort_keys=False).strip()
    return str(value)


def split_frontmatter(content: str) -> Tuple[Optional[str], str]:
    """Split file content into (header block text, body).

    Returns None as the header when the content has no header block.
    """
    match = FRONTMATTER_RE.match(content)
    if match is None:
        return None, content
    return match.group(1), content[match.end():]


def _preview(content: str) -> str:
    lines = content.split('\n')[:PREVIEW_LINES]
    return '\n'.join(f"{i}: {line}" for i, line in enumerate(lines, 1))


def parse_frontmatter(content: str, file_path: Path) -> Dict[str, Any]:
    """Parse the header block of already-read content.

    Raises:
        FrontmatterParseError: If the block is not valid YAML or not a mapping
    """
    header, _ = split_frontmatter(content)
    if header is None:
        return {}

    try:
        data = yaml.load(header, Loader=FrontmatterLoader)
    except yaml.YAMLError as e:
        raise FrontmatterParseError(file_path, str(e), _preview(content)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterParseError(
            file_path,
            f"expected a mapping, got {type(data).__name__}",
            _preview(content),
        )
    return data


def extract_raw_frontmatter(file_path: Union[str, Path]) -> Dict[str, Any]:
    """Read a document and return its raw, untyped frontmatter mapping.

    Invalid UTF-8 bytes are replaced, so an oddly encoded note only
    fails the build if its header block does not parse.

    Args:
        file_path: Absolute path to the markdown file

    Returns:
        Frontmatter dict (empty when the document has no header block)
    """
    path = Path(file_path)
    content = NoteContext(path=path).read_raw()
    return parse_frontmatter(content, path)
