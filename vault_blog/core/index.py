"""Cached publication index: the read side consumed by the blog frontend."""

import logging
import threading
from types import MappingProxyType
from pathlib import Path
from typing import Any, Callable, Iterable, List, Mapping, Optional

from vault_blog.config import DEFAULT_ENVIRONMENT_VARIABLE, PublisherConfig, load_config
from vault_blog.core.discovery import DEFAULT_EXTENSIONS, VaultDiscovery
from vault_blog.core.frontmatter import split_frontmatter
from vault_blog.core.models import BlogPost, NoteContext

log = logging.getLogger(__name__)

Renderer = Callable[[str, BlogPost], Any]


class BlogIndex:
    """Slug -> BlogPost mapping, built lazily and at most once per cache generation.

    Concurrent first readers share a single build. The cache is only
    dropped by clear(); a failed build leaves it empty so the next read
    retries.
    """

    def __init__(
        self,
        vault_path: Path,
        extensions: Optional[Iterable[str]] = DEFAULT_EXTENSIONS,
        environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE,
    ):
        self.discovery = VaultDiscovery(vault_path, extensions, environment_variable)
        self._slug_map: Optional[Mapping[str, BlogPost]] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: PublisherConfig) -> "BlogIndex":
        return cls(config.vault_path, config.extensions, config.environment_variable)

    @property
    def vault_path(self) -> Path:
        return self.discovery.vault_path

    def slug_map(self) -> Mapping[str, BlogPost]:
        """Read-only slug -> post mapping, building it on first use."""
        cached = self._slug_map
        if cached is not None:
            return cached

        with self._lock:
            if self._slug_map is None:
                log.debug("Building blog index for %s", self.vault_path)
                self._slug_map = MappingProxyType(self.discovery.build_slug_map())
            return self._slug_map

    def clear(self) -> None:
        """Drop the cached map; the next read rescans the vault."""
        with self._lock:
            self._slug_map = None

    def get_all_blog_posts(self) -> List[BlogPost]:
        """All posts, oldest `published` first."""
        return sorted(self.slug_map().values(), key=lambda post: post.published_at)

    def get_all_blog_slugs(self) -> List[str]:
        return list(self.slug_map())

    def find_blog_post_by_slug(self, slug: str) -> Optional[BlogPost]:
        return self.slug_map().get(slug)

    def read_body(self, post: BlogPost) -> str:
        """Document content with the header block removed."""
        context = NoteContext(path=self.vault_path / post.file_path)
        _, body = split_frontmatter(context.read_raw())
        return body

    def render_post(self, post: BlogPost, renderer: Renderer) -> Any:
        """Hand a post's body to an external renderer."""
        return renderer(self.read_body(post), post)


_default_index: Optional[BlogIndex] = None
_default_lock = threading.Lock()


def get_default_index() -> BlogIndex:
    """Process-wide index built from load_config() on first use."""
    global _default_index
    with _default_lock:
        if _default_index is None:
            _default_index = BlogIndex.from_config(load_config())
        return _default_index


def reset_default_index() -> None:
    """Forget the process-wide index, including its configuration."""
    global _default_index
    with _default_lock:
        _default_index = None


def get_all_blog_posts() -> List[BlogPost]:
    return get_default_index().get_all_blog_posts()


def get_all_blog_slugs() -> List[str]:
    return get_default_index().get_all_blog_slugs()


def find_blog_post_by_slug(slug: str) -> Optional[BlogPost]:
    return get_default_index().find_blog_post_by_slug(slug)
