"""Configuration loading and saving.

Config file location: ~/.config/links-kit/config.toml

Schema:
    publisher_token = "549314"
    bundle_id = "com.example.app"      # default campaign token

    [strings]                          # optional translations
    "Rate the App" = "App bewerten"

    [[sections]]
    kind = "help"                      # help | social | apps | legal | custom
    title = "Help"                     # optional on every kind
    app_id = "6476773066"
    faq_url = "https://example.com/faq"
    support_email = "support@example.com"

    [[sections]]
    kind = "social"
    app = { handle = "MyApp", platforms = ["twitter", "mastodon:mastodon.social"] }
    developer = { handle = "Me", platforms = ["github"], overrides = { github = "me" } }

    [[sections]]
    kind = "apps"
    own = [{ apps = [{ id = "1", name = "App", icon = "cart" }] }]
    friends = [{ apps = [{ id = "2", name = "Other", icon = "tag", publisher_token = "9" }] }]

    [[sections]]
    kind = "legal"
    privacy_url = "https://example.com/privacy"

    [[sections]]
    kind = "custom"
    entries = [
        { title = "Website", icon = "globe", url = "https://example.com" },
        { title = "More", icon = "ellipsis", sections = [{ entries = [...] }] },
    ]
"""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from .links import LinkFactory
from .localization import TableLocalizer
from .models import Link, Menu, Section
from .platforms import SocialPlatform
from .registry import Registry
from .sections import SectionBuilder

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "links-kit"
CONFIG_FILE = CONFIG_DIR / "config.toml"


@dataclass
class AppConfig:
    publisher_token: str = ""
    bundle_id: str | None = None
    strings: dict[str, str] = field(default_factory=dict)
    sections: list[dict] = field(default_factory=list)


def load_config(config_path: Path = CONFIG_FILE) -> AppConfig:
    """Load config from TOML file. Section contents are checked by build_sections."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    sections = data.get("sections", [])
    if not isinstance(sections, list):
        raise ValueError("Config 'sections' must be an array of tables")

    config = AppConfig(
        publisher_token=str(data.get("publisher_token", "")),
        bundle_id=data.get("bundle_id"),
        strings=dict(data.get("strings", {})),
        sections=sections,
    )
    logger.debug("Loaded %d sections from %s", len(config.sections), config_path)
    return config


def save_config(config: AppConfig, config_path: Path = CONFIG_FILE) -> None:
    """Write config to TOML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict = {"publisher_token": config.publisher_token}
    if config.bundle_id:
        data["bundle_id"] = config.bundle_id
    if config.strings:
        data["strings"] = config.strings
    data["sections"] = config.sections

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)


def config_exists(config_path: Path = CONFIG_FILE) -> bool:
    """Check if config file exists."""
    return config_path.exists()


# ── Building the section tree ────────────────────────────────────


def make_factory(config: AppConfig, registry: Registry | None = None) -> LinkFactory:
    """A LinkFactory using the config's token, translations and bundle ID."""
    bundle_id = config.bundle_id
    kwargs = {}
    if bundle_id:
        kwargs["host_identity"] = lambda: bundle_id
    return LinkFactory(
        publisher_token=config.publisher_token,
        localize=TableLocalizer(config.strings),
        registry=registry,
        **kwargs,
    )


def build_sections(config: AppConfig, builder: SectionBuilder | None = None) -> list[Section]:
    """Turn the [[sections]] tables of a config into Section objects."""
    builder = builder or SectionBuilder(make_factory(config))
    sections = []
    for index, data in enumerate(config.sections):
        if not isinstance(data, dict):
            raise ValueError(f"Section #{index + 1} must be a table, got {data!r}")
        kind = data.get("kind", "custom")
        try:
            sections.append(_build_section(builder, kind, data))
        except (AttributeError, KeyError, TypeError) as e:
            raise ValueError(f"Invalid {kind!r} section #{index + 1}: missing or bad {e}") from e
    logger.debug(
        "Built %d sections holding %d links",
        len(sections),
        sum(len(list(s.iter_links())) for s in sections),
    )
    return sections


def _build_section(builder: SectionBuilder, kind: str, data: dict) -> Section:
    title = data.get("title")
    factory = builder.factory

    if kind == "help":
        return builder.help_section(
            app_id=str(data["app_id"]),
            faq_url=data.get("faq_url"),
            support_email=data["support_email"],
            title=title,
        )

    if kind == "social":
        app, developer = data["app"], data["developer"]
        return builder.social_menus_section(
            builder.app_social_links(
                _platforms(app), app["handle"], _overrides(app)
            ),
            builder.developer_social_links(
                _platforms(developer), developer["handle"], _overrides(developer)
            ),
            title=title,
        )

    if kind == "apps":
        own = [
            Section(
                [
                    factory.own_app(str(a["id"]), a["name"], a["icon"], a.get("campaign_token"))
                    for a in group["apps"]
                ],
                title=group.get("title"),
            )
            for group in data.get("own", [])
        ]
        friends = [
            Section(
                [
                    factory.partner_app(
                        str(a["id"]),
                        a["name"],
                        a["icon"],
                        a.get("publisher_token"),
                        a.get("campaign_token"),
                    )
                    for a in group["apps"]
                ],
                title=group.get("title"),
            )
            for group in data.get("friends", [])
        ]
        return builder.app_discovery_section(own, friends, title=title)

    if kind == "legal":
        return builder.legal_section(data["privacy_url"], title=title)

    if kind == "custom":
        return _custom_section(data)

    raise ValueError(f"Unknown section kind: {kind!r}")


def _custom_section(data: dict) -> Section:
    entries: list[Link | Menu] = []
    for entry in data["entries"]:
        if "sections" in entry:
            entries.append(
                Menu(
                    entry["title"],
                    entry.get("icon", "ellipsis.circle"),
                    [_custom_section(s) for s in entry["sections"]],
                )
            )
        else:
            entries.append(Link(entry["title"], entry.get("icon", "link"), entry["url"]))
    return Section(entries, title=data.get("title"))


def _platforms(data: dict) -> list[SocialPlatform]:
    return [SocialPlatform.parse(p) for p in data["platforms"]]


def _overrides(data: dict) -> dict[SocialPlatform, str]:
    return {SocialPlatform.parse(k): v for k, v in data.get("overrides", {}).items()}


# Written by `links-kit init`; mirrors a typical indie developer's setup.
SAMPLE_CONFIG = AppConfig(
    publisher_token="549314",
    bundle_id="com.example.translatekit",
    sections=[
        {
            "kind": "help",
            "app_id": "6476773066",
            "faq_url": "https://example.com/faq",
            "support_email": "support@example.com",
        },
        {
            "kind": "social",
            "app": {
                "handle": "TranslateKit",
                "platforms": ["twitter", "mastodon:mastodon.social", "threads"],
                "overrides": {"twitter": "TranslateKitApp"},
            },
            "developer": {
                "handle": "Jeehut",
                "platforms": ["twitter", "mastodon:iosdev.space", "threads"],
            },
        },
        {
            "kind": "apps",
            "own": [
                {
                    "apps": [
                        {"id": "6502914189", "name": "FreemiumKit: In-App Purchases", "icon": "cart"},
                        {"id": "6480134993", "name": "FreelanceKit: Time Tracking", "icon": "timer"},
                    ]
                },
                {
                    "apps": [
                        {"id": "6472669260", "name": "CrossCraft: Crossword Tests", "icon": "puzzlepiece"},
                        {"id": "6477829138", "name": "FocusBeats: Study Music Timer", "icon": "music.note"},
                    ]
                },
            ],
            "friends": [
                {
                    "apps": [
                        {
                            "id": "1249686798",
                            "name": "NFC.cool Tools: Tag Reader",
                            "icon": "tag",
                            "publisher_token": "106913804",
                        },
                    ]
                },
                {
                    "apps": [
                        {"id": "6503256642", "name": "App Exhibit: Your App Showcase", "icon": "square.grid.3x3.fill.square"},
                    ]
                },
            ],
        },
        {"kind": "legal", "privacy_url": "https://example.com/privacy"},
    ],
)
