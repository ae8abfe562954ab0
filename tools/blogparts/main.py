#!/usr/bin/env python3
"""
HTML partials for the blog, built from site.yml.

- navigation.html: site title + nav links
- footer.html: author contact links (icons from the contact sprite)
- post-list.html: posts from content-index.yml, newest first

Partials land in public/partials/ and are only rewritten when their
content changes.

Paths resolve against the repo checkout, so run it from there:

    cd tools && python -m blogparts.main

(or `pip install -e .` and `python -m blogparts.main`).
"""

from __future__ import annotations

import pathlib
import sys
from typing import Dict

from .config import (
    CONTENT_INDEX,
    PARTIALS_OUT,
    SITE_CONFIG,
    SiteConfigError,
    load_site_config,
)
from .footer import render_footer
from .partials import render_navigation, render_post_list
from .posts import load_post_index
from .templates import make_env
from .utils import write_if_changed


def build_partials(
    site_path: pathlib.Path = SITE_CONFIG,
    index_path: pathlib.Path = CONTENT_INDEX,
) -> Dict[str, str]:
    site = load_site_config(site_path)
    env = make_env()

    partials = {
        "navigation": render_navigation(site, env=env),
        "footer": render_footer(site.contacts, env=env, credit=site.credit),
    }
    if index_path.exists():
        partials["post-list"] = render_post_list(
            load_post_index(index_path), env=env
        )
    else:
        print(f"- no {index_path.name}, skipping post list")
    return partials


def write_partials(
    partials: Dict[str, str], out_dir: pathlib.Path = PARTIALS_OUT
) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, html in partials.items():
        if write_if_changed(out_dir / f"{name}.html", html):
            print(f"✓ wrote {name}")
        else:
            print(f"= {name} unchanged, skip")


def main():
    try:
        partials = build_partials(SITE_CONFIG, CONTENT_INDEX)
    except SiteConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    write_partials(partials, PARTIALS_OUT)


if __name__ == "__main__":
    main()
