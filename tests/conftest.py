"""Shared fixtures: isolated environment and an on-disk vault builder."""

from pathlib import Path

import pytest

from vault_blog.core.index import reset_default_index


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Start every test outside production with no config overrides."""
    for name in ("VAULT_BLOG_ENV", "VAULT_BLOG_VAULT_PATH", "VAULT_BLOG_EXTENSIONS",
                 "VAULT_BLOG_ENVIRONMENT_VARIABLE"):
        monkeypatch.delenv(name, raising=False)
    reset_default_index()
    yield
    reset_default_index()


class VaultBuilder:
    """Writes notes into a temporary vault."""

    def __init__(self, root: Path):
        self.root = root

    def write(self, relative: str, content: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def note(self, relative: str, body: str = "Body text.\n", **fields) -> Path:
        """Write a note whose YAML header holds the given raw field lines."""
        lines = ["---"]
        lines.extend(f"{key}: {value}" for key, value in fields.items())
        lines.append("---")
        return self.write(relative, "\n".join(lines) + "\n\n" + body)

    def post(self, relative: str, **fields) -> Path:
        """Write a published blog post; fields override the defaults."""
        defaults = {"blog": "true", "title": "Post", "status": "published", "published": "2024-01-15"}
        defaults.update(fields)
        return self.note(relative, **defaults)


@pytest.fixture
def vault(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    return VaultBuilder(root)
