"""Entry points of the legacy redirect pipeline.

``generate_redirects`` is the pure part: feature gate, selection, synthesis.
``build_redirects`` additionally renders and writes each page through the
collaborators it is given. Failures from either collaborator propagate and
abort the build; a partial set of redirects would leave legacy URLs broken
without a diagnostic.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from linkkeeper.redirects.selector import select_legacy_items
from linkkeeper.redirects.synthesizer import build_context, synthesize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linkkeeper.config.settings import LinkkeeperConfig
    from linkkeeper.data_primitives.document import ContentItem, RedirectPage
    from linkkeeper.data_primitives.protocols import LayoutRenderer, PageWriter

logger = logging.getLogger(__name__)


def generate_redirects(corpus: Iterable[ContentItem], config: LinkkeeperConfig) -> list[RedirectPage]:
    """Return one redirect page per legacy post, in corpus order.

    Returns an empty list without looking at the corpus when
    ``redirects.enabled`` is off.
    """
    if not config.redirects.enabled:
        logger.info("Redirect generation disabled (redirects.enabled=false)")
        return []

    return [synthesize(item) for item in select_legacy_items(corpus, config.cutoff, config.site.tzinfo)]


def build_redirects(
    corpus: Iterable[ContentItem],
    config: LinkkeeperConfig,
    renderer: LayoutRenderer,
    writer: PageWriter,
) -> list[RedirectPage]:
    """Generate, render and write redirect pages.

    Args:
        corpus: Every content item of the build.
        config: Site configuration; ``redirects`` controls the pipeline.
        renderer: Resolves ``redirects.layout`` to HTML.
        writer: Persists each rendered page.

    Returns:
        The written pages, for the caller to merge into its page registry.

    """
    pages = generate_redirects(corpus, config)
    if not pages:
        return pages

    layout_name = config.redirects.layout
    layout_data = renderer.layout_data(layout_name)
    site = config.site_payload()

    for page in pages:
        rendered = renderer.render(layout_name, build_context(page, layout_data, site))
        path = writer.write(page, rendered)
        logger.debug("Wrote redirect %s -> %s (%s)", page.url, page.target_item_id, path)

    logger.info("Generated %d legacy redirect page(s)", len(pages))
    return pages
