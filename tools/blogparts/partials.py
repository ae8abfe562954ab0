from __future__ import annotations

from typing import Optional, Sequence

from jinja2 import Environment

from .config import ACTIVE_LINK_CLASS, SiteConfig
from .posts import PostEntry
from .templates import make_env


def page_title(page: str, site: SiteConfig) -> str:
    return f"{page} | {site.title}"


def render_navigation(
    site: SiteConfig,
    active_path: Optional[str] = None,
    env: Optional[Environment] = None,
) -> str:
    env = env or make_env()
    nav = [
        {"title": title, "url": url, "active": url == active_path}
        for title, url in site.nav
    ]
    return env.get_template("navigation.html.j2").render(
        site_title=site.title,
        nav=nav,
        active_class=ACTIVE_LINK_CLASS,
    )


def render_post_header(
    post: PostEntry, env: Optional[Environment] = None
) -> str:
    env = env or make_env()
    return env.get_template("post_header.html.j2").render(post=post)


def render_post_list(
    posts: Sequence[PostEntry], env: Optional[Environment] = None
) -> str:
    env = env or make_env()
    return env.get_template("post_list.html.j2").render(posts=posts)
