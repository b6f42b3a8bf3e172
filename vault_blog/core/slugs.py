"""Slug derivation for blog posts."""

import re
from pathlib import PurePath
from typing import Union

from vault_blog.core.models import PostFrontmatter

_NON_ALPHANUMERIC = re.compile(r'[^A-Za-z0-9]+')


def slug_from_path(file_path: Union[str, PurePath]) -> str:
    """Derive a slug from a file's base name.

    Every run of non-alphanumeric characters becomes a single hyphen and the
    result is lowercased. Leading and trailing hyphens are kept, so
    "My Cool Post!.md" gives "my-cool-post-".
    """
    stem = PurePath(file_path).stem
    return _NON_ALPHANUMERIC.sub('-', stem).lower()


def resolve_slug(relative_path: Union[str, PurePath], frontmatter: PostFrontmatter) -> str:
    """Explicit frontmatter slug, verbatim, or one derived from the file name."""
    return frontmatter.slug or slug_from_path(relative_path)
