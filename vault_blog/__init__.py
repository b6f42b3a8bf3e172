"""
vault-blog - Publish blog posts from a personal notes vault

Indexes a directory tree of markdown notes and derives the set of posts a
blog frontend publishes:
- Recursive document discovery
- YAML frontmatter extraction with self-diagnosing errors
- Visibility gating by `blog` flag, status and environment
- Frontmatter validation and normalization
- Slug derivation with collision detection
- A cached, explicitly clearable publication index
"""

from vault_blog.core.models import (
    BlogPost,
    ConfigError,
    DuplicateSlugError,
    FrontmatterParseError,
    FrontmatterValidationError,
    PostFrontmatter,
    VaultBlogError,
)
from vault_blog.core.discovery import VaultDiscovery
from vault_blog.core.index import (
    BlogIndex,
    find_blog_post_by_slug,
    get_all_blog_posts,
    get_all_blog_slugs,
    reset_default_index,
)
from vault_blog.config import PublisherConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "BlogPost",
    "ConfigError",
    "DuplicateSlugError",
    "FrontmatterParseError",
    "FrontmatterValidationError",
    "PostFrontmatter",
    "VaultBlogError",
    "VaultDiscovery",
    "BlogIndex",
    "find_blog_post_by_slug",
    "get_all_blog_posts",
    "get_all_blog_slugs",
    "reset_default_index",
    "PublisherConfig",
    "load_config",
]
