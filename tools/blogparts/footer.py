from __future__ import annotations

from typing import Mapping, Optional, Tuple

from jinja2 import Environment

from .config import DEFAULT_CREDIT, SiteConfigError
from .contacts import render
from .templates import make_env


class MissingIconError(SiteConfigError):
    """A contact channel has no icon to draw in the footer."""


def render_footer(
    contact_map: Optional[Mapping[str, str]],
    env: Optional[Environment] = None,
    credit: Tuple[str, str] = DEFAULT_CREDIT,
) -> str:
    links = render(contact_map)
    for link in links:
        if link.icon is None:
            raise MissingIconError(
                f"no icon for contact channel {link.title!r} ({link.href})"
            )

    env = env or make_env()
    return env.get_template("footer.html.j2").render(
        links=links,
        credit_name=credit[0],
        credit_url=credit[1],
    )
