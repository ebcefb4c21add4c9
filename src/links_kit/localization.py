"""Localization of built-in titles.

Every title the package generates goes through a `Localizer`, a plain
callable from key to text. Keys are the English strings themselves, so the
default localizer is the identity function. Templates containing
``{platform}`` are localized first and filled in afterwards.
"""

from collections.abc import Callable, Mapping
from enum import Enum

Localizer = Callable[[str], str]


class LocalizationKey(str, Enum):
    RATE_THE_APP = "Rate the App"
    FAQ = "Frequently Asked Questions (FAQ)"
    CONTACT_SUPPORT = "Contact Support"
    PRIVACY_POLICY = "Privacy Policy"
    TERMS_AND_CONDITIONS = "Terms and Conditions"
    FOLLOW_US_ON = "Follow us on {platform}"
    DEVELOPER_ON = "Developer on {platform}"
    APP_ON = "App on {platform}"
    FOLLOW_THE_APP = "Follow the App"
    FOLLOW_THE_DEVELOPER = "Follow the Developer"
    MORE_APPS_FROM_DEVELOPER = "More Apps from Developer"
    APPS_FROM_FRIENDS = "Apps from Friends"


def english(key: str) -> str:
    return str(key.value) if isinstance(key, LocalizationKey) else key


class TableLocalizer:
    """Look up translations in a mapping, falling back to the English key."""

    def __init__(self, table: Mapping[str, str]):
        self.table = dict(table)

    def __call__(self, key: str) -> str:
        text = english(key)
        return self.table.get(text, text)


def localized(localize: Localizer, key: LocalizationKey, **values: str) -> str:
    """Localize a key and fill in any template placeholders."""
    text = localize(key.value)
    return text.format(**values) if values else text
