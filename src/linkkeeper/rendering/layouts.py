"""Jinja2 renderer for site layouts carrying YAML front matter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml
from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound

from linkkeeper.constants import LAYOUT_EXTENSION
from linkkeeper.rendering.exceptions import LayoutNotFoundError, LayoutRenderError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class JinjaLayoutRenderer:
    """Renders ``<layouts_dir>/<name>.html``.

    The layout's front matter is exposed through :meth:`layout_data` and its
    body is compiled as a Jinja2 template.
    """

    def __init__(self, layouts_dir: Path) -> None:
        self.layouts_dir = layouts_dir
        self._env = Environment(loader=FileSystemLoader(str(layouts_dir)), autoescape=True)
        self._layouts: dict[str, frontmatter.Post] = {}

    def _load(self, layout_name: str) -> frontmatter.Post:
        if layout_name in self._layouts:
            return self._layouts[layout_name]

        filename = f"{layout_name}{LAYOUT_EXTENSION}"
        try:
            source, path, _ = self._env.loader.get_source(self._env, filename)
        except TemplateNotFound as e:
            raise LayoutNotFoundError(layout_name, self.layouts_dir) from e

        try:
            post = frontmatter.loads(source)
        except yaml.YAMLError as e:
            raise LayoutRenderError(layout_name, f"invalid front matter: {e}") from e

        logger.debug("Loaded layout %s from %s", layout_name, path)
        self._layouts[layout_name] = post
        return post

    def layout_data(self, layout_name: str) -> dict[str, Any]:
        return dict(self._load(layout_name).metadata)

    def render(self, layout_name: str, context: dict[str, Any]) -> str:
        post = self._load(layout_name)
        try:
            return self._env.from_string(post.content).render(**context)
        except TemplateError as e:
            raise LayoutRenderError(layout_name, str(e)) from e
