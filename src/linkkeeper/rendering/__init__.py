"""Layout rendering for generated pages."""

from linkkeeper.rendering.exceptions import LayoutNotFoundError, LayoutRenderError, RenderingError
from linkkeeper.rendering.layouts import JinjaLayoutRenderer

__all__ = ["JinjaLayoutRenderer", "LayoutNotFoundError", "LayoutRenderError", "RenderingError"]
