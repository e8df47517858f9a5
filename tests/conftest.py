from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

import pytest

from linkkeeper.config.settings import LinkkeeperConfig, RedirectSettings
from linkkeeper.data_primitives.document import ContentItem


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LINKKEEPER_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("LINKKEEPER_"):
            monkeypatch.delenv(key)


@pytest.fixture
def make_item():
    """Build ContentItems with sensible defaults."""

    def _make(
        slug: str = "foo",
        *,
        kind: str = "post",
        date: datetime = datetime(2016, 3, 2),
        category: str = "c++",
        item_id: str | None = None,
    ) -> ContentItem:
        return ContentItem(
            id=item_id or f"/{slug}/",
            kind=kind,
            date=date,
            category=category,
            slug=slug,
        )

    return _make


@pytest.fixture
def enabled_config() -> LinkkeeperConfig:
    return LinkkeeperConfig(redirects=RedirectSettings(enabled=True, cutoff=datetime(2017, 8, 1)))


def _write_post(posts_dir: Path, filename: str, front_matter: str, body: str = "Body\n") -> Path:
    posts_dir.mkdir(parents=True, exist_ok=True)
    path = posts_dir / filename
    path.write_text(f"---\n{front_matter}---\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def write_post():
    return _write_post


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A small site with two legacy posts, one new post, one page and a redirect layout."""
    posts = tmp_path / "_posts"
    _write_post(posts, "2016-03-02-foo.md", "title: Foo\ncategory: c++\n")
    _write_post(posts, "2017-08-01-cutoff.md", "title: On the cutoff\ncategory: rust\n")
    _write_post(posts, "2018-01-01-bar.md", "title: Bar\ncategory: c++\n")
    _write_post(posts, "2016-01-01-about.md", "layout: page\ntitle: About\ncategory: misc\n")

    layouts = tmp_path / "_layouts"
    layouts.mkdir()
    (layouts / "redirect.html").write_text(
        "---\ntitle: Moved\n---\n"
        '<meta http-equiv="refresh" content="0; url={{ site.url }}{{ page.source_url }}">\n',
        encoding="utf-8",
    )

    config_dir = tmp_path / ".linkkeeper"
    config_dir.mkdir()
    (config_dir / "linkkeeper.toml").write_text(
        '[redirects]\nenabled = true\n\n[site]\nbase_url = "https://example.com"\n',
        encoding="utf-8",
    )
    return tmp_path
