"""Tests for the link factory."""

from urllib.parse import parse_qs, urlsplit

import pytest

from links_kit.links import APP_STORE_EULA_URL, LinkFactory, default_host_identity
from links_kit.localization import TableLocalizer
from links_kit.models import InvalidURLError
from links_kit.platforms import THREADS, SocialPlatform


class TestHelpLinks:
    def test_rate_app(self, factory):
        link = factory.rate_app("6476773066")
        assert link.title == "Rate the App"
        assert link.icon == "star"
        assert link.url == "https://apps.apple.com/app/apple-store/id6476773066?action=write-review"

    def test_faq(self, factory):
        link = factory.faq("https://example.com/faq")
        assert link.title == "Frequently Asked Questions (FAQ)"
        assert link.url == "https://example.com/faq"

    def test_contact_support_uses_mailto(self, factory):
        link = factory.contact_support("support@example.com")
        assert link.title == "Contact Support"
        assert link.icon == "envelope"
        assert link.url == "mailto:support@example.com"

    def test_privacy_policy(self, factory):
        link = factory.privacy_policy("https://example.com/privacy")
        assert link.title == "Privacy Policy"
        assert link.icon == "lock.shield"

    def test_app_store_terms_points_at_apple_eula(self, factory):
        link = factory.app_store_terms()
        assert link.title == "Terms and Conditions"
        assert link.url == APP_STORE_EULA_URL

    def test_invalid_url_raises(self, factory):
        with pytest.raises(InvalidURLError):
            factory.faq("not a url")

    def test_every_link_gets_fresh_id(self, factory):
        assert factory.rate_app("1").id != factory.rate_app("1").id


class TestSocialLinks:
    def test_follow_on(self, factory):
        link = factory.follow_on(THREADS, "jeehut")
        assert link.title == "Follow us on Threads"
        assert link.icon == "at.circle"
        assert link.url == "https://www.threads.net/@jeehut"

    def test_developer_on(self, factory):
        link = factory.developer_on(SocialPlatform.mastodon("iosdev.space"), "Jeehut")
        assert link.title == "Developer on Mastodon"
        assert link.url == "https://iosdev.space/@Jeehut"

    def test_app_on(self, factory):
        assert factory.app_on(THREADS, "app").title == "App on Threads"

    def test_titles_are_localized_before_filling_platform(self, registry):
        german = TableLocalizer({"Follow us on {platform}": "Folge uns auf {platform}"})
        factory = LinkFactory(localize=german, registry=registry)
        assert factory.follow_on(THREADS, "x").title == "Folge uns auf Threads"


class TestOwnApp:
    def test_url_embeds_publisher_and_campaign_tokens(self, factory):
        link = factory.own_app("6502914189", "FreemiumKit", "cart")
        assert link.title == "FreemiumKit"
        assert link.icon == "cart"
        assert link.url == "https://apps.apple.com/app/id6502914189?pt=549314&ct=com.example.host&mt=8"

    def test_explicit_campaign_token(self, factory):
        link = factory.own_app("1", "App", "cart", campaign_token="settings")
        assert "ct=settings" in link.url

    def test_explicit_empty_campaign_token_is_kept(self, factory):
        link = factory.own_app("1", "App", "cart", campaign_token="")
        query = parse_qs(urlsplit(link.url).query, keep_blank_values=True)
        assert query["ct"] == [""]
        assert "com.example.host" not in link.url

    def test_reads_token_from_registry_when_not_given(self, registry):
        registry.configure("777", [])
        factory = LinkFactory(registry=registry, host_identity=lambda: "host")
        assert "pt=777" in factory.own_app("1", "App", "cart").url

    def test_empty_token_before_configure(self, registry):
        factory = LinkFactory(registry=registry, host_identity=lambda: "host")
        query = parse_qs(urlsplit(factory.own_app("1", "App", "cart").url).query, keep_blank_values=True)
        assert query["pt"] == [""]


class TestPartnerApp:
    def test_without_publisher_token_omits_pt(self, factory):
        link = factory.partner_app("1", "N", "i")
        assert "pt=" not in link.url
        assert link.url == "https://apps.apple.com/app/id1?ct=com.example.host&mt=8"

    def test_with_publisher_token(self, factory):
        link = factory.partner_app("1", "N", "i", publisher_token="T")
        assert "pt=T" in link.url

    def test_does_not_fall_back_to_own_token(self, factory):
        link = factory.partner_app("1", "N", "i")
        assert "549314" not in link.url

    def test_explicit_empty_campaign_token_is_kept(self, factory):
        link = factory.partner_app("1", "N", "i", campaign_token="")
        assert link.url == "https://apps.apple.com/app/id1?ct=&mt=8"


class TestHostIdentity:
    def test_default_bundle_identifier(self, monkeypatch):
        monkeypatch.delenv("LINKS_KIT_BUNDLE_ID", raising=False)
        assert default_host_identity() == "com.default.identifier"

    def test_bundle_identifier_from_environment(self, monkeypatch):
        monkeypatch.setenv("LINKS_KIT_BUNDLE_ID", "com.example.env")
        assert default_host_identity() == "com.example.env"
