from datetime import date

import pytest

from blogparts.config import SiteConfigError
from blogparts.posts import (
    PostEntry,
    format_post_date,
    load_post_index,
    post_from_dict,
    reading_time_text,
)


def test_format_post_date() -> None:
    assert format_post_date(date(2022, 3, 5)) == "March 5, 2022"
    assert format_post_date(date(2021, 12, 25)) == "December 25, 2021"


@pytest.mark.parametrize(
    "words,expected",
    [(0, "0 min read"), (1, "1 min read"), (200, "1 min read"),
     (250, "2 min read"), (1000, "5 min read")],
)
def test_reading_time_from_word_count(words, expected) -> None:
    assert reading_time_text(words=words) == expected


def test_reading_time_from_text() -> None:
    assert reading_time_text("word " * 450) == "3 min read"


def test_post_from_dict_fills_reading_time() -> None:
    post = post_from_dict(
        {"title": "Hi", "date": "2022-01-02", "slug": "hi", "words": 350}
    )
    assert post == PostEntry(
        title="Hi", date=date(2022, 1, 2), slug="hi", reading_time="2 min read"
    )
    assert post.url == "/blog/hi"
    assert post.date_text == "January 2, 2022"


def test_post_from_dict_keeps_given_reading_time() -> None:
    post = post_from_dict(
        {
            "title": "Hi",
            "date": date(2022, 1, 2),
            "slug": "hi",
            "readingTime": "7 min read",
        }
    )
    assert post.reading_time == "7 min read"


@pytest.mark.parametrize(
    "item",
    [
        "not a dict",
        {"date": "2022-01-02", "slug": "hi"},
        {"title": "Hi", "date": "yesterday", "slug": "hi"},
        {"title": "Hi", "date": "2022-01-02"},
        {"title": "Hi", "date": "2022-01-02", "slug": "hi", "words": "many"},
        {"title": "Hi", "date": "2022-01-02", "slug": "hi", "words": [1]},
    ],
)
def test_post_from_dict_rejects_bad_entries(item) -> None:
    with pytest.raises(SiteConfigError):
        post_from_dict(item)


def test_load_post_index_sorts_newest_first(tmp_path) -> None:
    path = tmp_path / "content-index.yml"
    path.write_text(
        "posts:\n"
        "  - {title: Old, date: 2020-05-01, slug: old, words: 10}\n"
        "  - {title: New, date: 2022-05-01, slug: new, words: 10}\n"
        "  - {title: Mid, date: 2021-05-01, slug: mid, words: 10}\n",
        encoding="utf-8",
    )
    posts = load_post_index(path)
    assert [p.slug for p in posts] == ["new", "mid", "old"]


def test_load_post_index_plain_list(tmp_path) -> None:
    path = tmp_path / "content-index.yml"
    path.write_text(
        "- {title: Only, date: 2020-05-01, slug: only}\n", encoding="utf-8"
    )
    (post,) = load_post_index(path)
    assert post.reading_time == "0 min read"


def test_load_post_index_empty(tmp_path) -> None:
    path = tmp_path / "content-index.yml"
    path.write_text("", encoding="utf-8")
    assert load_post_index(path) == []
