"""Tests for the redirect pipeline entry points."""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from linkkeeper.config.settings import LinkkeeperConfig, RedirectSettings, SiteSettings
from linkkeeper.redirects.pipeline import build_redirects, generate_redirects
from linkkeeper.rendering.exceptions import LayoutNotFoundError


class RecordingRenderer:
    def __init__(self, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls = []

    def layout_data(self, layout_name):
        return {"title": "Moved"}

    def render(self, layout_name, context):
        self.calls.append((layout_name, context))
        if context["page"]["source_url"] == self.fail_on:
            raise LayoutNotFoundError(layout_name, Path("_layouts"))
        return f"-> {context['page']['source_url']}"


class RecordingWriter:
    def __init__(self) -> None:
        self.written = []

    def write(self, page, rendered):
        self.written.append((page.output_path, rendered))
        return Path(page.output_path)


@pytest.fixture
def corpus(make_item):
    return [
        make_item("foo", date=datetime(2016, 3, 2), item_id="/foo/"),
        make_item("bar", date=datetime(2018, 1, 1), item_id="/bar/"),
        make_item("about", kind="page", date=datetime(2016, 1, 1), item_id="/about/"),
        make_item("baz", category="rust", date=datetime(2015, 6, 9), item_id="/baz/"),
    ]


def test_generate_redirects_selects_and_synthesizes(corpus, enabled_config):
    pages = generate_redirects(corpus, enabled_config)

    assert [(p.legacy_path, p.target_item_id) for p in pages] == [
        ("c++/2016/03/02/foo", "/foo/"),
        ("rust/2015/06/09/baz", "/baz/"),
    ]


def test_disabled_flag_produces_no_pages(corpus):
    config = LinkkeeperConfig(redirects=RedirectSettings(enabled=False))

    assert generate_redirects(corpus, config) == []


def test_disabled_flag_does_not_touch_the_corpus():
    corpus = MagicMock()
    config = LinkkeeperConfig()

    assert generate_redirects(corpus, config) == []
    corpus.__iter__.assert_not_called()


def test_cutoff_comes_from_configuration(corpus):
    config = LinkkeeperConfig(redirects=RedirectSettings(enabled=True, cutoff=datetime(2015, 12, 31)))

    assert [p.target_item_id for p in generate_redirects(corpus, config)] == ["/baz/"]


def test_build_redirects_renders_and_writes_in_order(corpus, enabled_config):
    renderer = RecordingRenderer()
    writer = RecordingWriter()

    pages = build_redirects(corpus, enabled_config, renderer, writer)

    assert [p.target_item_id for p in pages] == ["/foo/", "/baz/"]
    assert writer.written == [
        ("c++/2016/03/02/foo/index.html", "-> /foo/"),
        ("rust/2015/06/09/baz/index.html", "-> /baz/"),
    ]
    layout_name, context = renderer.calls[0]
    assert layout_name == "redirect"
    assert context["page"]["title"] == "Moved"
    assert context["page"]["url"] == "/c++/2016/03/02/foo/"
    assert "url" in context["site"]


def test_build_redirects_uses_configured_layout(corpus):
    config = LinkkeeperConfig(redirects=RedirectSettings(enabled=True, layout="moved"))
    renderer = RecordingRenderer()

    build_redirects(corpus, config, renderer, RecordingWriter())

    assert {name for name, _ in renderer.calls} == {"moved"}


def test_render_failure_aborts_the_build(corpus, enabled_config):
    renderer = RecordingRenderer(fail_on="/foo/")
    writer = RecordingWriter()

    with pytest.raises(LayoutNotFoundError):
        build_redirects(corpus, enabled_config, renderer, writer)

    assert writer.written == []


def test_write_failure_propagates(corpus, enabled_config):
    writer = MagicMock()
    writer.write.side_effect = OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        build_redirects(corpus, enabled_config, RecordingRenderer(), writer)

    assert writer.write.call_count == 1


def test_build_redirects_disabled_skips_collaborators(corpus):
    renderer = MagicMock()
    writer = MagicMock()

    assert build_redirects(corpus, LinkkeeperConfig(), renderer, writer) == []
    renderer.render.assert_not_called()
    writer.write.assert_not_called()


def test_naive_post_on_cutoff_is_selected_in_site_timezone(make_item):
    item = make_item("edge", date=datetime(2017, 8, 1), item_id="/edge/")
    later = make_item("later", date=datetime(2017, 8, 1, 0, 30), item_id="/later/")
    config = LinkkeeperConfig(
        redirects=RedirectSettings(enabled=True, cutoff=datetime(2017, 8, 1)),
        site=SiteSettings(timezone="Europe/Berlin"),
    )

    pages = generate_redirects([item, later], config)

    assert [p.target_item_id for p in pages] == ["/edge/"]
