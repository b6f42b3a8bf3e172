"""Validation and normalization of candidate frontmatter."""

import logging
from typing import Any, List, Optional

from vault_blog.core.dates import parse_date
from vault_blog.core.frontmatter import RawKind, classify, is_truthy, stringify
from vault_blog.core.models import POST_STATUSES, Candidate, FrontmatterValidationError, PostFrontmatter

log = logging.getLogger(__name__)


def _validate_date(candidate: Candidate, value: Any, field: str) -> str:
    if not is_truthy(value):
        raise FrontmatterValidationError(
            candidate.path, field, f"is missing required field: {field}"
        )
    date_str = stringify(value)
    try:
        parse_date(date_str)
    except ValueError:
        raise FrontmatterValidationError(
            candidate.path, field,
            f'has invalid {field}: "{date_str}". Please use a valid date format.'
        ) from None
    return date_str


def _validate_status(candidate: Candidate, value: Any) -> str:
    if classify(value) is not RawKind.STRING or value not in POST_STATUSES:
        allowed = ', '.join(POST_STATUSES)
        raise FrontmatterValidationError(
            candidate.path, 'status',
            f'has invalid status: "{stringify(value)}". Expected one of: {allowed}.'
        )
    return value


def _normalize_tags(value: Any) -> Optional[List[str]]:
    if classify(value) is RawKind.SEQUENCE:
        return [stringify(tag) for tag in value]
    if is_truthy(value):
        return [stringify(value)]
    return None


def _optional_string(value: Any) -> Optional[str]:
    return stringify(value) if is_truthy(value) else None


def validate_and_normalize(candidate: Candidate) -> PostFrontmatter:
    """Convert a candidate's raw frontmatter into a PostFrontmatter.

    Args:
        candidate: Document that already passed the visibility gate

    Returns:
        Normalized frontmatter

    Raises:
        TypeError: If called with anything but a Candidate
        FrontmatterValidationError: On a missing or invalid field
    """
    if not isinstance(candidate, Candidate):
        raise TypeError(f"expected a Candidate, got {type(candidate).__name__}")

    raw = candidate.raw
    published = _validate_date(candidate, raw.get('published'), 'published')
    updated = raw.get('updated')
    if is_truthy(updated):
        updated = _validate_date(candidate, updated, 'updated')
    else:
        updated = None

    frontmatter = PostFrontmatter(
        blog=is_truthy(raw.get('blog')),
        title=_optional_string(raw.get('title')) or '',
        description=_optional_string(raw.get('description')) or '',
        status=_validate_status(candidate, raw.get('status')),
        published=published,
        updated=updated,
        category=_optional_string(raw.get('category')),
        tags=_normalize_tags(raw.get('tags')),
        slug=_optional_string(raw.get('slug')),
    )
    log.debug("Validated frontmatter for %s", candidate.relative_path)
    return frontmatter
