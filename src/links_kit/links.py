"""Build Link objects from semantic intents (rate, FAQ, follow, apps...).

Every constructor returns a fresh Link with a new identifier. URLs are
assembled from caller-supplied components; an assembled URL that is not
absolute raises InvalidURLError, so validate inputs before calling.

App Store link formats:
    rate:    https://apps.apple.com/app/apple-store/id{id}?action=write-review
    own app: https://apps.apple.com/app/id{id}?pt={pt}&ct={ct}&mt=8
    partner: same as own app, with pt omitted when no token is known
"""

import logging
import os
from collections.abc import Callable
from urllib.parse import urlencode

from .localization import LocalizationKey, Localizer, english, localized
from .models import Link
from .platforms import SocialPlatform
from .registry import Registry, get_registry

logger = logging.getLogger(__name__)

HostIdentity = Callable[[], str]

APP_STORE_URL = "https://apps.apple.com/app"
APP_STORE_EULA_URL = "https://www.apple.com/legal/internet-services/itunes/dev/stdeula/"
DEFAULT_BUNDLE_IDENTIFIER = "com.default.identifier"
BUNDLE_ID_ENV = "LINKS_KIT_BUNDLE_ID"


def default_host_identity() -> str:
    """Bundle identifier of the host app, used as the default campaign token."""
    return os.environ.get(BUNDLE_ID_ENV) or DEFAULT_BUNDLE_IDENTIFIER


class LinkFactory:
    def __init__(
        self,
        publisher_token: str | None = None,
        localize: Localizer = english,
        host_identity: HostIdentity = default_host_identity,
        registry: Registry | None = None,
    ):
        self._publisher_token = publisher_token
        self.localize = localize
        self.host_identity = host_identity
        self.registry = registry or get_registry()

    @property
    def publisher_token(self) -> str:
        """Explicit token if one was given, else whatever the registry holds."""
        if self._publisher_token is not None:
            return self._publisher_token
        return self.registry.publisher_token

    def _text(self, key: LocalizationKey, **values: str) -> str:
        return localized(self.localize, key, **values)

    # ── Help & legal ─────────────────────────────────────────────

    def rate_app(self, store_id: str) -> Link:
        return Link(
            title=self._text(LocalizationKey.RATE_THE_APP),
            icon="star",
            url=f"{APP_STORE_URL}/apple-store/id{store_id}?action=write-review",
        )

    def faq(self, url: str) -> Link:
        return Link(self._text(LocalizationKey.FAQ), "questionmark.bubble", url)

    def contact_support(self, email: str) -> Link:
        return Link(self._text(LocalizationKey.CONTACT_SUPPORT), "envelope", f"mailto:{email}")

    def privacy_policy(self, url: str) -> Link:
        return Link(self._text(LocalizationKey.PRIVACY_POLICY), "lock.shield", url)

    def terms_and_conditions(self, url: str) -> Link:
        return Link(self._text(LocalizationKey.TERMS_AND_CONDITIONS), "text.book.closed", url)

    def app_store_terms(self) -> Link:
        """Terms and Conditions pointing at Apple's standard EULA."""
        return self.terms_and_conditions(APP_STORE_EULA_URL)

    # ── Social ───────────────────────────────────────────────────

    def _on_platform(self, key: LocalizationKey, platform: SocialPlatform, handle: str) -> Link:
        name, icon, url = platform.describe(handle)
        return Link(self._text(key, platform=name), icon, url)

    def follow_on(self, platform: SocialPlatform, handle: str) -> Link:
        return self._on_platform(LocalizationKey.FOLLOW_US_ON, platform, handle)

    def developer_on(self, platform: SocialPlatform, handle: str) -> Link:
        return self._on_platform(LocalizationKey.DEVELOPER_ON, platform, handle)

    def app_on(self, platform: SocialPlatform, handle: str) -> Link:
        return self._on_platform(LocalizationKey.APP_ON, platform, handle)

    # ── App Store listings ───────────────────────────────────────

    def own_app(
        self,
        store_id: str,
        name: str,
        icon: str,
        campaign_token: str | None = None,
    ) -> Link:
        """Link to one of your own apps, tagged with your publisher token."""
        return Link(
            title=name,
            icon=icon,
            url=_app_store_url(
                store_id,
                self.publisher_token,
                campaign_token if campaign_token is not None else self.host_identity(),
            ),
        )

    def partner_app(
        self,
        store_id: str,
        name: str,
        icon: str,
        publisher_token: str | None = None,
        campaign_token: str | None = None,
    ) -> Link:
        """Link to a friend's app.

        Without a publisher token the `pt` parameter is left out of the URL
        entirely rather than sent empty.
        """
        if publisher_token is None:
            logger.debug("Partner app %s has no publisher token", store_id)
        return Link(
            title=name,
            icon=icon,
            url=_app_store_url(
                store_id,
                publisher_token,
                campaign_token if campaign_token is not None else self.host_identity(),
            ),
        )


def _app_store_url(store_id: str, publisher_token: str | None, campaign_token: str) -> str:
    params: dict[str, str] = {}
    if publisher_token is not None:
        params["pt"] = publisher_token
    params["ct"] = campaign_token
    params["mt"] = "8"
    return f"{APP_STORE_URL}/id{store_id}?{urlencode(params)}"
