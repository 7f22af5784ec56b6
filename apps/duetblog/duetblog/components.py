"""Blog components.

Plain functions and coroutines that return duet trees. Async components
read their own content from the store; the evaluator awaits them.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from duet import h

from .lib.config import BlogConfig
from .lib.sanitize import sanitize
from .lib.store import ContentStore


def Router(path: str, store: ContentStore, config: BlogConfig) -> Any:
    """Pick the page for a URL path and wrap it in the layout."""
    if path in ("", "/"):
        page = h(BlogIndexPage, {"store": store})
    else:
        slug = sanitize(path.removeprefix("/"))
        page = h(BlogPostPage, {"slug": slug, "store": store})

    return h(BlogLayout, {"title": config.title, "author": config.author}, page)


def BlogLayout(children: Any, title: str, author: str) -> Any:
    return h(
        "html",
        None,
        h("head", None, h("title", None, title)),
        h(
            "body",
            None,
            h(
                "nav",
                None,
                h("a", {"href": "/"}, "Home"),
                h("hr"),
                h("input"),
                h("hr"),
            ),
            h("main", None, children),
            h(Footer, {"author": author}),
        ),
    )


async def BlogIndexPage(store: ContentStore) -> Any:
    slugs = await store.list_entries()
    return h(
        "section",
        None,
        h("h1", None, "Welcome to my blog"),
        h(
            "div",
            None,
            [h(Post, {"slug": slug, "store": store}, key=slug) for slug in slugs],
        ),
    )


async def BlogPostPage(slug: str, store: ContentStore) -> Any:
    return h(Post, {"slug": slug, "store": store})


async def Post(slug: str, store: ContentStore) -> Any:
    """A single post. Raises NotFoundError if the entry is missing."""
    content = await store.read_entry(slug)
    return h(
        "section",
        None,
        h("h2", None, h("a", {"href": f"/{slug}"}, slug)),
        h("article", None, content),
    )


def Footer(author: str, year: int | None = None) -> Any:
    year = year if year is not None else datetime.now().year
    return h(
        "footer",
        None,
        h("hr"),
        h("p", None, h("i", None, "(c) ", author, " ", year)),
    )
