from __future__ import annotations

import math
import pathlib
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List

import yaml

from .config import SiteConfigError
from .utils import coerce_date_like, read_yaml

WORDS_PER_MINUTE = 200


@dataclass(frozen=True)
class PostEntry:
    title: str
    date: date
    slug: str
    reading_time: str

    @property
    def url(self) -> str:
        return f"/blog/{self.slug}"

    @property
    def date_text(self) -> str:
        return format_post_date(self.date)


def format_post_date(d: date) -> str:
    """`March 5, 2022` style, no zero padding on the day."""
    return f"{d:%B} {d.day}, {d.year}"


def reading_time_text(text: str = "", words: int | None = None) -> str:
    if words is None:
        words = len(text.split())
    minutes = round(words / WORDS_PER_MINUTE, 2)
    return f"{math.ceil(minutes)} min read"


def post_from_dict(item: Dict[str, Any]) -> PostEntry:
    if not isinstance(item, dict):
        raise SiteConfigError(f"bad post entry: {item!r}")
    for key in ("title", "date", "slug"):
        if not item.get(key):
            raise SiteConfigError(f"post entry missing {key}: {item!r}")

    d = coerce_date_like(item["date"])
    if not isinstance(d, date):
        raise SiteConfigError(f"post {item['slug']!r} has bad date {d!r}")

    reading_time = item.get("readingTime")
    if not reading_time:
        try:
            words = int(item.get("words") or 0)
        except (TypeError, ValueError) as e:
            raise SiteConfigError(
                f"post {item['slug']!r} has bad words count "
                f"{item.get('words')!r}"
            ) from e
        reading_time = reading_time_text(words=words)

    return PostEntry(
        title=str(item["title"]),
        date=d,
        slug=str(item["slug"]),
        reading_time=str(reading_time),
    )


def load_post_index(path: pathlib.Path) -> List[PostEntry]:
    try:
        data = read_yaml(path)
    except yaml.YAMLError as e:
        raise SiteConfigError(f"cannot parse {path.name}: {e}") from e

    items = data.get("posts", []) if isinstance(data, dict) else data
    posts = [post_from_dict(item) for item in items or []]
    posts.sort(key=lambda p: p.date, reverse=True)
    return posts
