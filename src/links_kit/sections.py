"""Composite sections and menus for the usual settings-screen groupings.

These are conveniences only. Any Section built directly from Links and
Menus works just as well.
"""

from collections.abc import Callable, Iterable, Mapping

from .links import LinkFactory
from .localization import LocalizationKey, localized
from .models import Link, Menu, Section
from .platforms import SocialPlatform

PlatformLink = Callable[[SocialPlatform, str], Link]


class SectionBuilder:
    def __init__(self, factory: LinkFactory | None = None):
        self.factory = factory or LinkFactory()

    def _text(self, key: LocalizationKey) -> str:
        return localized(self.factory.localize, key)

    # ── Sections ─────────────────────────────────────────────────

    def help_section(
        self,
        app_id: str,
        faq_url: str | None,
        support_email: str,
        title: str | None = None,
    ) -> Section:
        """Rate, FAQ and contact links. The FAQ entry is omitted without a URL."""
        links = [self.factory.rate_app(app_id)]
        if faq_url is not None:
            links.append(self.factory.faq(faq_url))
        links.append(self.factory.contact_support(support_email))
        return Section(links, title=title)

    def platform_links_section(
        self,
        platforms: Iterable[SocialPlatform],
        handle: str,
        handle_overrides: Mapping[SocialPlatform, str] | None = None,
        make_link: PlatformLink | None = None,
        title: str | None = None,
    ) -> Section:
        """One link per platform, using the override handle where one is given."""
        overrides = handle_overrides or {}
        make_link = make_link or self.factory.follow_on
        return Section(
            [make_link(p, overrides.get(p, handle)) for p in platforms],
            title=title,
        )

    def app_social_links(
        self,
        platforms: Iterable[SocialPlatform],
        handle: str,
        handle_overrides: Mapping[SocialPlatform, str] | None = None,
    ) -> Section:
        return self.platform_links_section(
            platforms, handle, handle_overrides, make_link=self.factory.app_on
        )

    def developer_social_links(
        self,
        platforms: Iterable[SocialPlatform],
        handle: str,
        handle_overrides: Mapping[SocialPlatform, str] | None = None,
    ) -> Section:
        return self.platform_links_section(
            platforms, handle, handle_overrides, make_link=self.factory.developer_on
        )

    def social_menus_section(
        self,
        app_links: Section,
        developer_links: Section,
        title: str | None = None,
    ) -> Section:
        return Section(
            [
                Menu(self._text(LocalizationKey.FOLLOW_THE_APP), "app.badge", [app_links]),
                Menu(self._text(LocalizationKey.FOLLOW_THE_DEVELOPER), "person", [developer_links]),
            ],
            title=title,
        )

    def app_discovery_section(
        self,
        own_apps: Iterable[Section],
        partner_apps: Iterable[Section],
        title: str | None = None,
    ) -> Section:
        return Section(
            [self.more_apps_from_developer(own_apps), self.apps_from_friends(partner_apps)],
            title=title,
        )

    def legal_section(self, privacy_url: str, title: str | None = None) -> Section:
        return Section(
            [self.factory.app_store_terms(), self.factory.privacy_policy(privacy_url)],
            title=title,
        )

    # ── Menus ────────────────────────────────────────────────────

    def follow_the_app(self, links: Iterable[Link]) -> Menu:
        return Menu(self._text(LocalizationKey.FOLLOW_THE_APP), "app.badge", [Section(links)])

    def follow_the_developer(self, links: Iterable[Link]) -> Menu:
        return Menu(self._text(LocalizationKey.FOLLOW_THE_DEVELOPER), "person", [Section(links)])

    def more_apps_from_developer(self, sections: Iterable[Section]) -> Menu:
        return Menu(
            self._text(LocalizationKey.MORE_APPS_FROM_DEVELOPER),
            "plus.square.on.square",
            sections,
        )

    def apps_from_friends(self, sections: Iterable[Section]) -> Menu:
        return Menu(
            self._text(LocalizationKey.APPS_FROM_FRIENDS),
            "star.square.on.square",
            sections,
        )
