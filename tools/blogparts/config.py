from __future__ import annotations

import pathlib
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from .utils import read_yaml

# ---------- Paths

# This assumes config.py sits in tools/blogparts/ below the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
SITE_CONFIG = ROOT / "site.yml"
CONTENT_INDEX = ROOT / "content-index.yml"
TEMPLATE_DIR = ROOT / "tools" / "templates"
PARTIALS_OUT = ROOT / "public" / "partials"

# ---------- Config

ICON_SIZE = 32
ICON_SPRITE_URL = "/icons/contacts.svg"
DEFAULT_CREDIT: Tuple[str, str] = (
    "Jinja",
    "https://jinja.palletsprojects.com",
)
ACTIVE_LINK_CLASS = "navigation-bar__link--active"
DEFAULT_NAV: Tuple[Tuple[str, str], ...] = (
    ("Blog", "/blog"),
    ("About", "/about"),
)


class SiteConfigError(Exception):
    """Site configuration is missing or unusable."""


@dataclass(frozen=True)
class SiteConfig:
    title: str
    author: str = ""
    contacts: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )
    nav: Tuple[Tuple[str, str], ...] = DEFAULT_NAV
    credit: Tuple[str, str] = DEFAULT_CREDIT


def _coerce_contacts(raw: Any) -> Mapping[str, str]:
    if raw is None:
        return MappingProxyType({})
    if not isinstance(raw, dict):
        raise SiteConfigError("author.contacts must be a mapping")

    contacts: Dict[str, str] = {}
    for name, value in raw.items():
        if value is None or isinstance(value, (dict, list)):
            raise SiteConfigError(
                f"contact {name!r} must be a single value, got {value!r}"
            )
        contacts[str(name)] = str(value)
    return MappingProxyType(contacts)


def _coerce_nav(raw: Any) -> Tuple[Tuple[str, str], ...]:
    if raw is None:
        return DEFAULT_NAV
    if not isinstance(raw, list):
        raise SiteConfigError("nav must be a list of {title, url} items")

    nav: List[Tuple[str, str]] = []
    for li in raw:
        if not isinstance(li, dict) or not li.get("url"):
            raise SiteConfigError(f"bad nav entry: {li!r}")
        nav.append((str(li.get("title") or li["url"]), str(li["url"])))
    return tuple(nav)


def _coerce_credit(raw: Any) -> Tuple[str, str]:
    if raw is None:
        return DEFAULT_CREDIT
    if not isinstance(raw, dict) or not raw.get("name") or not raw.get("url"):
        raise SiteConfigError(f"credit needs a name and a url: {raw!r}")
    return (str(raw["name"]), str(raw["url"]))


def site_config_from_dict(data: Any) -> SiteConfig:
    if not isinstance(data, dict):
        raise SiteConfigError("site config must be a mapping")
    title = data.get("title")
    if not title:
        raise SiteConfigError("site config has no title")

    author = data.get("author") or {}
    if not isinstance(author, dict):
        raise SiteConfigError("author must be a mapping")

    return SiteConfig(
        title=str(title),
        author=str(author.get("name") or ""),
        contacts=_coerce_contacts(author.get("contacts")),
        nav=_coerce_nav(data.get("nav")),
        credit=_coerce_credit(data.get("credit")),
    )


def load_site_config(path: pathlib.Path = SITE_CONFIG) -> SiteConfig:
    if not path.exists():
        raise SiteConfigError(f"{path.name} missing at {path.parent}")
    try:
        data = read_yaml(path)
    except yaml.YAMLError as e:
        raise SiteConfigError(f"cannot parse {path.name}: {e}") from e
    return site_config_from_dict(data)
