"""
Contact links for the site footer.

- Channel names come from `author.contacts` in site.yml, in file order.
- Known channels get a URL template and an icon; anything else is treated
  as a literal URL and has no icon.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional


class Channel(str, Enum):
    TWITTER = "twitter"
    GITHUB = "github"
    EMAIL = "email"
    LINKEDIN = "linkedin"
    RESUME = "resume"

    @classmethod
    def parse(cls, name: str) -> Optional["Channel"]:
        """Exact, case-sensitive match; None for any other channel."""
        try:
            return cls(name)
        except ValueError:
            return None


class Icon(str, Enum):
    """Symbol ids in the contact icon sprite."""

    TWITTER = "fa-twitter"
    GITHUB = "fa-github"
    ENVELOPE = "fa-envelope"
    LINKEDIN = "fa-linkedin"
    FILE_ALT = "fa-file-alt"


HREF_TEMPLATES: Dict[Channel, str] = {
    Channel.TWITTER: "https://www.twitter.com/{value}",
    Channel.GITHUB: "https://github.com/{value}",
    Channel.EMAIL: "mailto:{value}",
    Channel.LINKEDIN: "https://www.linkedin.com/in/{value}",
    Channel.RESUME: "https://registry.jsonresume.org/{value}",
}

ICONS: Dict[Channel, Icon] = {
    Channel.TWITTER: Icon.TWITTER,
    Channel.GITHUB: Icon.GITHUB,
    Channel.EMAIL: Icon.ENVELOPE,
    Channel.LINKEDIN: Icon.LINKEDIN,
    Channel.RESUME: Icon.FILE_ALT,
}


@dataclass(frozen=True)
class ContactEntry:
    channel: str
    value: str


@dataclass(frozen=True)
class ResolvedLink:
    href: str
    title: str
    icon: Optional[Icon]


def resolve_href(channel: str, value: str) -> str:
    known = Channel.parse(channel)
    if known is None:
        return value
    # values may contain braces, so no str.format
    return HREF_TEMPLATES[known].replace("{value}", value)


def resolve_icon(channel: str) -> Optional[Icon]:
    known = Channel.parse(channel)
    if known is None:
        return None
    return ICONS[known]


def link_title(channel: str) -> str:
    return channel[:1].upper() + channel[1:]


def resolve_link(entry: ContactEntry) -> ResolvedLink:
    return ResolvedLink(
        href=resolve_href(entry.channel, entry.value),
        title=link_title(entry.channel),
        icon=resolve_icon(entry.channel),
    )


def render(contact_map: Optional[Mapping[str, str]]) -> List[ResolvedLink]:
    if not contact_map:
        return []
    return [
        resolve_link(
            ContactEntry(channel=getattr(name, "value", name), value=value)
        )
        for name, value in contact_map.items()
    ]
