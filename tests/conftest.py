"""Shared test fixtures."""

import pytest

from links_kit.links import LinkFactory
from links_kit.models import Link, Menu, Section
from links_kit.platforms import GITHUB, THREADS, TWITTER, SocialPlatform
from links_kit.registry import Registry, get_registry
from links_kit.sections import SectionBuilder


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Keep the process-wide registry unconfigured between tests."""
    get_registry().reset()
    yield
    get_registry().reset()


@pytest.fixture
def registry() -> Registry:
    return Registry()


@pytest.fixture
def factory(registry) -> LinkFactory:
    return LinkFactory(
        publisher_token="549314",
        host_identity=lambda: "com.example.host",
        registry=registry,
    )


@pytest.fixture
def builder(factory) -> SectionBuilder:
    return SectionBuilder(factory)


@pytest.fixture
def opened() -> list[str]:
    """URLs passed to the recording opener, in activation order."""
    return []


@pytest.fixture
def opener(opened):
    return opened.append


@pytest.fixture
def sample_sections(builder, factory) -> list[Section]:
    """The four standard sections of a settings screen."""
    return [
        builder.help_section(
            "6476773066", "https://example.com/faq", "support@example.com", title="Help"
        ),
        builder.social_menus_section(
            builder.app_social_links(
                [TWITTER, SocialPlatform.mastodon("mastodon.social"), THREADS],
                "TranslateKit",
                {TWITTER: "TranslateKitApp"},
            ),
            builder.developer_social_links([TWITTER, GITHUB], "Jeehut"),
        ),
        builder.app_discovery_section(
            [
                Section([factory.own_app("6502914189", "FreemiumKit", "cart")]),
                Section([factory.own_app("6480134993", "FreelanceKit", "timer")]),
            ],
            [Section([factory.partner_app("1249686798", "NFC.cool", "tag", "106913804")])],
        ),
        builder.legal_section("https://example.com/privacy", title="Legal"),
    ]


def nested_menus(depth: int) -> Section:
    """A section whose menu chain is `depth` levels deep, one link per level."""
    section = Section([Link(f"Leaf {depth}", "leaf", f"https://example.com/{depth}")])
    for level in range(depth - 1, 0, -1):
        section = Section(
            [
                Link(f"Leaf {level}", "leaf", f"https://example.com/{level}"),
                Menu(f"Level {level + 1}", "folder", [section]),
            ]
        )
    return section
