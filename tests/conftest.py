from pathlib import Path

import pytest

from tinymce_field.adapters.memory import InMemoryHost, PermissionSetActor, PluginState
from tinymce_field.domain.entities import (
    CategoryGroup,
    ImageTransform,
    ProductType,
    Section,
    Site,
    SiteSettings,
    Volume,
)


class EchoTranslator:
    """Translator that tags messages with the language, for assertions."""

    def __init__(self, prefix: bool = False) -> None:
        self.prefix = prefix
        self.calls: list[tuple[str, str, str | None]] = []

    def translate(self, category: str, message: str, language: str | None = None) -> str:
        self.calls.append((category, message, language))
        if self.prefix and language:
            return f"[{language}] {message}"
        return message


def url_settings(*site_ids: int, has_urls: bool = True) -> dict[int, SiteSettings]:
    return {site_id: SiteSettings(site_id=site_id, has_urls=has_urls) for site_id in site_ids}


@pytest.fixture
def sites() -> list[Site]:
    return [
        Site(id=1, uid="site-en", name="English", language="en-US"),
        Site(id=2, uid="site-ar", name="Arabic", language="ar"),
    ]


@pytest.fixture
def host(sites: list[Site]) -> InMemoryHost:
    """A host with one of everything, commerce installed and enabled."""
    return InMemoryHost(
        sites=sites,
        current_site_id=1,
        sections=[
            Section(id=1, uid="news", name="News", type="multi", site_settings=url_settings(1)),
            Section(id=2, uid="home", name="Home", type="single", site_settings=url_settings(1)),
        ],
        category_groups=[
            CategoryGroup(id=1, uid="topics", name="Topics", site_settings=url_settings(1)),
        ],
        product_types=[
            ProductType(id=1, uid="shirts", name="Shirts", site_settings=url_settings(1)),
        ],
        volumes=[
            Volume(id=1, uid="images", name="Images", has_urls=True),
            Volume(id=2, uid="private", name="Private", has_urls=False),
        ],
        transforms=[
            ImageTransform(id=1, uid="t-thumb", name="Thumbnail", handle="thumb"),
            ImageTransform(id=2, uid="t-wide", name="Wide", handle="wide"),
        ],
        plugins={"commerce": PluginState(installed=True, enabled=True)},
    )


@pytest.fixture
def actor() -> PermissionSetActor:
    return PermissionSetActor(["viewAssets:images", "viewAssets:private"])


@pytest.fixture
def translator() -> EchoTranslator:
    return EchoTranslator()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    tinymce_dir = tmp_path / "config" / "tinymce"
    tinymce_dir.mkdir(parents=True)
    (tinymce_dir / "Default.json").write_text('{"menubar": false}')
    (tinymce_dir / "Simple.json").write_text('{"toolbar": "bold italic", "skin": "dark"}')
    purifier_dir = tmp_path / "config" / "htmlpurifier"
    purifier_dir.mkdir(parents=True)
    (purifier_dir / "Strict.json").write_text('{"HTML.Allowed": "p,b"}')
    return tmp_path / "config"
