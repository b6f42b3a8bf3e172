"""Tests for VaultDiscovery class."""

import pytest
from pathlib import Path
import tempfile
import shutil

from vault_blog.core.discovery import VaultDiscovery
from vault_blog.core.models import (
    Candidate,
    DuplicateSlugError,
    FrontmatterParseError,
    FrontmatterValidationError,
)


class TestVaultDiscovery:
    """Tests for VaultDiscovery class."""

    @pytest.fixture
    def temp_vault(self):
        """Create a temporary vault with a mix of posts and private notes."""
        temp_dir = tempfile.mkdtemp()
        vault_path = Path(temp_dir)

        (vault_path / "posts").mkdir()
        (vault_path / "posts" / "First Post.md").write_text("""---
blog: true
title: First Post
status: published
published: 2024-01-15
tags:
  - python
---

# First Post
""")

        (vault_path / "posts" / "draft.mdx").write_text("""---
blog: true
title: Draft Post
status: draft
published: 2024-02-01
---

Work in progress.
""")

        # Private note with metadata that would never validate
        (vault_path / "journal.md").write_text("""---
title: 42
published: whenever
tags: {not: a list}
---

Dear diary.
""")

        (vault_path / "plain.md").write_text("# No frontmatter\n")
        (vault_path / "image.png").write_bytes(b"\x89PNG")

        yield vault_path

        shutil.rmtree(temp_dir)

    def test_find_documents_filters_extensions(self, temp_vault):
        discovery = VaultDiscovery(temp_vault)
        names = sorted(p.name for p in discovery.find_documents())
        assert names == ["First Post.md", "draft.mdx", "journal.md", "plain.md"]

    def test_find_documents_custom_extensions(self, temp_vault):
        discovery = VaultDiscovery(temp_vault, extensions=["mdx"])
        assert [p.name for p in discovery.find_documents()] == ["draft.mdx"]

    def test_relative_path_uses_forward_slashes(self, temp_vault):
        discovery = VaultDiscovery(temp_vault)
        assert discovery.relative_path(temp_vault / "posts" / "First Post.md") == "posts/First Post.md"

    def test_build_in_development_includes_drafts(self, temp_vault):
        slug_map = VaultDiscovery(temp_vault).build_slug_map()
        assert sorted(slug_map) == ["draft", "first-post"]

    def test_build_in_production_excludes_drafts(self, temp_vault, monkeypatch):
        monkeypatch.setenv("VAULT_BLOG_ENV", "production")
        slug_map = VaultDiscovery(temp_vault).build_slug_map()
        assert list(slug_map) == ["first-post"]
        assert slug_map["first-post"].frontmatter.status == "published"

    def test_custom_environment_variable(self, temp_vault, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        discovery = VaultDiscovery(temp_vault, environment_variable="APP_ENV")
        assert list(discovery.build_slug_map()) == ["first-post"]

    def test_post_fields(self, temp_vault):
        post = VaultDiscovery(temp_vault).build_slug_map()["first-post"]
        assert post.slug == "first-post"
        assert post.file_path == "posts/First Post.md"
        assert post.frontmatter.title == "First Post"
        assert post.frontmatter.published == "2024-01-15"
        assert post.frontmatter.tags == ["python"]

    def test_private_notes_are_never_validated(self, temp_vault):
        slug_map = VaultDiscovery(temp_vault).build_slug_map()
        assert all(post.file_path != "journal.md" for post in slug_map.values())

    def test_missing_vault_raises(self, temp_vault):
        discovery = VaultDiscovery(temp_vault / "nonexistent")
        with pytest.raises(FileNotFoundError):
            discovery.build_slug_map()


class TestVisibilityGate:
    """Tests for is_publishable and select_candidate."""

    @pytest.fixture
    def discovery(self, vault):
        return VaultDiscovery(vault.root)

    @pytest.mark.parametrize("raw,expected", [
        ({"blog": True, "status": "published"}, True),
        ({"blog": "true", "status": "draft"}, True),
        ({"blog": 1}, True),
        ({"blog": False, "status": "published"}, False),
        ({"blog": 0, "status": "published"}, False),
        ({"status": "published"}, False),
    ])
    def test_development(self, discovery, raw, expected):
        is_pub, _ = discovery.is_publishable(raw)
        assert is_pub is expected

    @pytest.mark.parametrize("raw,expected", [
        ({"blog": True, "status": "published"}, True),
        ({"blog": True, "status": "draft"}, False),
        ({"blog": True, "status": "idea"}, False),
        ({"blog": True}, False),
        ({"blog": False, "status": "published"}, False),
    ])
    def test_production(self, discovery, monkeypatch, raw, expected):
        monkeypatch.setenv("VAULT_BLOG_ENV", "production")
        is_pub, _ = discovery.is_publishable(raw)
        assert is_pub is expected

    def test_environment_is_read_per_call(self, discovery, monkeypatch):
        raw = {"blog": True, "status": "draft"}
        assert discovery.is_publishable(raw)[0] is True
        monkeypatch.setenv("VAULT_BLOG_ENV", "production")
        assert discovery.is_publishable(raw)[0] is False

    def test_reason_for_rejection(self, discovery):
        is_pub, reason = discovery.is_publishable({"blog": False})
        assert is_pub is False
        assert reason == "Not marked as blog post"

    def test_select_candidate(self, discovery, vault):
        path = vault.post("posts/a.md")
        candidate = discovery.select_candidate(path, {"blog": True})
        assert isinstance(candidate, Candidate)
        assert candidate.relative_path == "posts/a.md"
        assert candidate.path == path

    def test_select_candidate_rejects(self, discovery, vault):
        path = vault.note("private.md", blog="false")
        assert discovery.select_candidate(path, {"blog": False}) is None


class TestBuildFailures:
    """Every failure aborts the whole build."""

    def test_missing_published_aborts(self, vault):
        vault.post("good.md")
        path = vault.note("bad.md", blog="true", status="published", title="Bad")
        with pytest.raises(FrontmatterValidationError) as exc_info:
            VaultDiscovery(vault.root).build_slug_map()

        message = str(exc_info.value)
        assert "missing required field: published" in message
        assert str(path) in message

    def test_invalid_published_aborts(self, vault):
        vault.post("bad.md", published="not-a-date")
        with pytest.raises(FrontmatterValidationError, match="invalid published"):
            VaultDiscovery(vault.root).build_slug_map()

    def test_parse_error_aborts(self, vault):
        path = vault.write("broken.md", "---\nblog: true\ntitle: [oops\n---\n")
        with pytest.raises(FrontmatterParseError) as exc_info:
            VaultDiscovery(vault.root).build_slug_map()
        assert str(path) in str(exc_info.value)

    def test_duplicate_explicit_slugs(self, vault):
        vault.post("one.md", slug="duplicate-slug")
        vault.post("two.md", slug="duplicate-slug")
        with pytest.raises(DuplicateSlugError) as exc_info:
            VaultDiscovery(vault.root).build_slug_map()

        message = str(exc_info.value)
        assert 'Duplicate slug "duplicate-slug"' in message
        assert "one.md" in message
        assert "two.md" in message
        assert "unique 'slug' field" in message
        assert exc_info.value.slug == "duplicate-slug"

    def test_duplicate_derived_slugs_in_different_directories(self, vault):
        vault.post("a/duplicate-slug.md")
        vault.post("b/Duplicate Slug.md")
        with pytest.raises(DuplicateSlugError) as exc_info:
            VaultDiscovery(vault.root).build_slug_map()

        message = str(exc_info.value)
        assert 'Duplicate slug "duplicate-slug"' in message
        assert "a/duplicate-slug.md" in message
        assert "b/Duplicate Slug.md" in message

    def test_colliding_private_note_is_ignored(self, vault):
        vault.post("a/duplicate-slug.md")
        vault.note("b/duplicate-slug.md", blog="false")
        slug_map = VaultDiscovery(vault.root).build_slug_map()
        assert slug_map["duplicate-slug"].file_path == "a/duplicate-slug.md"
