"""Transforms from indexed posts to frontend-ready data."""

from vault_blog.transforms.metadata import listing, page_metadata, static_params

__all__ = [
    "listing",
    "page_metadata",
    "static_params",
]
