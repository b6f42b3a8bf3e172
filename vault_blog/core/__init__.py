"""Core components for vault-blog."""

from vault_blog.core.models import (
    BlogPost,
    Candidate,
    ConfigError,
    DuplicateSlugError,
    FrontmatterParseError,
    FrontmatterValidationError,
    NoteContext,
    PostFrontmatter,
    VaultBlogError,
)
from vault_blog.core.discovery import VaultDiscovery
from vault_blog.core.index import (
    BlogIndex,
    find_blog_post_by_slug,
    get_all_blog_posts,
    get_all_blog_slugs,
    get_default_index,
    reset_default_index,
)

__all__ = [
    "BlogPost",
    "Candidate",
    "ConfigError",
    "DuplicateSlugError",
    "FrontmatterParseError",
    "FrontmatterValidationError",
    "NoteContext",
    "PostFrontmatter",
    "VaultBlogError",
    "VaultDiscovery",
    "BlogIndex",
    "find_blog_post_by_slug",
    "get_all_blog_posts",
    "get_all_blog_slugs",
    "get_default_index",
    "reset_default_index",
]
