"""Vault discovery: find documents, gate them, and build the slug map."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from vault_blog.config import DEFAULT_ENVIRONMENT_VARIABLE, is_production
from vault_blog.core.frontmatter import extract_raw_frontmatter, is_truthy
from vault_blog.core.models import BlogPost, Candidate, DuplicateSlugError, NoteContext
from vault_blog.core.slugs import resolve_slug
from vault_blog.core.validation import validate_and_normalize
from vault_blog.core.walker import walk_directory_with_filter

log = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = ("md", "mdx")


class VaultDiscovery:
    """Discovers the blog posts a vault publishes."""

    def __init__(
        self,
        vault_path: Path,
        extensions: Optional[Iterable[str]] = DEFAULT_EXTENSIONS,
        environment_variable: str = DEFAULT_ENVIRONMENT_VARIABLE,
    ):
        """Initialize VaultDiscovery.

        Args:
            vault_path: Path to the vault root
            extensions: Document extensions to consider (None: every file)
            environment_variable: Variable whose value "production" hides
                                  posts that are not published
        """
        self.vault_path = Path(vault_path).absolute()
        self.extensions = list(extensions) if extensions is not None else None
        self.environment_variable = environment_variable

    def find_documents(self) -> List[Path]:
        """List every document in the vault with an allowed extension."""
        return walk_directory_with_filter(self.vault_path, self.extensions)

    def relative_path(self, path: Path) -> str:
        """Vault-relative path with forward slashes."""
        return Path(path).relative_to(self.vault_path).as_posix()

    def is_publishable(self, raw: Dict[str, Any]) -> Tuple[bool, str]:
        """Check raw frontmatter against the visibility rules.

        Only the raw `blog` and `status` values are inspected.

        Returns:
            Tuple of (is_publishable, reason)
        """
        if not is_truthy(raw.get('blog')):
            return False, "Not marked as blog post"

        if is_production(self.environment_variable) and raw.get('status') != 'published':
            return False, f"Status is {raw.get('status')!r} in production"

        return True, "OK"

    def select_candidate(self, path: Path, raw: Dict[str, Any]) -> Optional[Candidate]:
        """Apply the visibility gate, returning a Candidate or None."""
        is_pub, reason = self.is_publishable(raw)
        relative = self.relative_path(path)
        if not is_pub:
            log.debug("Skipping %s: %s", relative, reason)
            return None
        return Candidate(context=NoteContext(path=Path(path)), relative_path=relative, raw=raw)

    def build_slug_map(self) -> Dict[str, BlogPost]:
        """Scan the vault and map each published slug to its post.

        Documents are processed one at a time in walk order. The first error
        aborts the whole build.

        Raises:
            OSError: If the vault cannot be walked
            FrontmatterParseError: If a document's header block is malformed
            FrontmatterValidationError: If a candidate has an invalid field
            DuplicateSlugError: If two candidates resolve to one slug
        """
        slug_map: Dict[str, BlogPost] = {}
        documents = self.find_documents()

        for document in documents:
            raw = extract_raw_frontmatter(document)
            candidate = self.select_candidate(document, raw)
            if candidate is None:
                continue

            frontmatter = validate_and_normalize(candidate)
            slug = resolve_slug(candidate.relative_path, frontmatter)

            if slug in slug_map:
                raise DuplicateSlugError(slug, slug_map[slug].file_path, str(candidate.path))

            slug_map[slug] = BlogPost(
                slug=slug,
                file_path=candidate.relative_path,
                frontmatter=frontmatter,
            )

        log.info(
            "Indexed %d blog post(s) from %d document(s) in %s",
            len(slug_map), len(documents), self.vault_path,
        )
        return slug_map
