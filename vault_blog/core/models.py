"""Data models for vault-blog."""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from vault_blog.core.dates import parse_date


POST_STATUSES = ("published", "draft", "idea")


class VaultBlogError(RuntimeError):
    """Base class for every error that aborts an index build."""


class FrontmatterParseError(VaultBlogError):
    """The metadata header block of a document could not be parsed."""

    def __init__(self, path: Path, cause: str, preview: str):
        self.path = path
        self.cause = cause
        self.preview = preview
        super().__init__(
            f"Failed to parse YAML frontmatter in file: {path}\n\n"
            f"Error: {cause}\n\n"
            f"File preview (first 10 lines):\n{preview}\n\n"
            f"Please check the YAML syntax in the frontmatter section (between --- markers)."
        )


class FrontmatterValidationError(VaultBlogError):
    """A candidate post carries a missing or invalid field."""

    def __init__(self, path: Path, field: str, message: str):
        self.path = path
        self.field = field
        super().__init__(f'Blog post "{path}" {message}')


class DuplicateSlugError(VaultBlogError):
    """Two candidate posts resolved to the same slug."""

    def __init__(self, slug: str, first_path: str, second_path: str):
        self.slug = slug
        self.paths = (first_path, second_path)
        super().__init__(
            f'Duplicate slug "{slug}" found:\n'
            f"  - {first_path}\n"
            f"  - {second_path}\n\n"
            f"Please ensure each post has a unique title or add a unique 'slug' field to the frontmatter."
        )


class ConfigError(VaultBlogError):
    """The configuration file is unreadable or invalid."""


@dataclass
class NoteContext:
    """Cheapest possible document reference - just location.

    Content is read on demand so discovery never holds every note in memory.
    """
    path: Path

    def read_raw(self) -> str:
        """Read file contents on demand.

        Bytes that are not valid UTF-8 become U+FFFD instead of failing.
        """
        return self.path.read_text(encoding='utf-8', errors='replace')


@dataclass(frozen=True)
class Candidate:
    """A document that passed the visibility gate.

    Only VaultDiscovery.select_candidate creates these; the validator
    refuses anything else, so unpublished notes are never validated.
    """
    context: NoteContext
    relative_path: str
    raw: Dict[str, Any]

    @property
    def path(self) -> Path:
        return self.context.path


@dataclass
class PostFrontmatter:
    """Validated, normalized frontmatter of a blog post."""
    blog: bool
    title: str
    description: str
    status: str
    published: str
    updated: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[List[str]] = None
    slug: Optional[str] = None


@dataclass
class BlogPost:
    """Publication descriptor: one per visible, valid, uniquely slugged post."""
    slug: str
    file_path: str
    frontmatter: PostFrontmatter

    @property
    def published_at(self) -> datetime:
        """Parsed `published` value, used for chronological ordering."""
        return parse_date(self.frontmatter.published)
