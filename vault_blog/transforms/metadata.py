"""Page metadata builders for the blog frontend.

These turn indexed posts into the plain dicts a page layer needs for
static route generation, listings, and head/OpenGraph tags.
"""

import titlecase as tc
from typing import Any, Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from vault_blog.core.index import BlogIndex
    from vault_blog.core.models import BlogPost


def page_metadata(post: "BlogPost", title_case: bool = False) -> Dict[str, Any]:
    """Build title, description and OpenGraph article metadata for a post.

    Args:
        post: Indexed blog post
        title_case: Convert the title to proper title case using titlecase

    Returns:
        Metadata dict with 'title', 'description' and 'openGraph'
    """
    fm = post.frontmatter
    title = tc.titlecase(fm.title) if title_case else fm.title
    open_graph: Dict[str, Any] = {
        'title': title,
        'description': fm.description,
        'type': 'article',
        'publishedTime': fm.published,
    }
    if fm.tags:
        open_graph['tags'] = list(fm.tags)
    return {
        'title': title,
        'description': fm.description,
        'openGraph': open_graph,
    }


def static_params(index: "BlogIndex") -> List[Dict[str, str]]:
    """One route parameter dict per published slug."""
    return [{'slug': slug} for slug in index.get_all_blog_slugs()]


def listing(index: "BlogIndex") -> List[Dict[str, str]]:
    """Rows for the blog listing page, oldest first."""
    return [
        {
            'slug': post.slug,
            'title': post.frontmatter.title,
            'description': post.frontmatter.description,
            'published': post.published_at.date().isoformat(),
        }
        for post in index.get_all_blog_posts()
    ]
