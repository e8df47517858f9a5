"""Output side of the build: writing pages and tracking them."""

from linkkeeper.output_adapters.exceptions import OutputAdapterError, PageWriteError
from linkkeeper.output_adapters.registry import PageRegistry
from linkkeeper.output_adapters.writer import SiteWriter

__all__ = ["OutputAdapterError", "PageRegistry", "PageWriteError", "SiteWriter"]
