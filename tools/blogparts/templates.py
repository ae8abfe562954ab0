from __future__ import annotations

import pathlib

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .config import ICON_SIZE, ICON_SPRITE_URL, TEMPLATE_DIR


def make_env(template_dir: pathlib.Path = TEMPLATE_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=True,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.globals.update(icon_size=ICON_SIZE, icon_sprite=ICON_SPRITE_URL)
    return env
