"""Process-wide link configuration: the publisher token and top-level sections.

Configure once at startup, before the first render:

    from links_kit.registry import configure
    configure(publisher_token="549314", sections=[...])

The registry is write-once. A second `configure` raises
`AlreadyConfiguredError` instead of silently swapping the tree mid-session.
Reading an unconfigured registry yields an empty token and no sections.
"""

import logging
from collections.abc import Iterable

from .models import Section

logger = logging.getLogger(__name__)


class AlreadyConfiguredError(RuntimeError):
    pass


class Registry:
    def __init__(self) -> None:
        self._publisher_token = ""
        self._sections: tuple[Section, ...] = ()
        self._configured = False

    def configure(self, publisher_token: str, sections: Iterable[Section]) -> None:
        if self._configured:
            raise AlreadyConfiguredError("Links are already configured for this process")
        self._publisher_token = publisher_token
        self._sections = tuple(sections)
        self._configured = True
        logger.debug(
            "Configured %d top-level sections (publisher token %s)",
            len(self._sections),
            "set" if publisher_token else "empty",
        )

    @property
    def publisher_token(self) -> str:
        return self._publisher_token

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    @property
    def is_configured(self) -> bool:
        return self._configured

    def reset(self) -> None:
        """Return to the unconfigured state (for tests)."""
        self._publisher_token = ""
        self._sections = ()
        self._configured = False


_default_registry = Registry()


def get_registry() -> Registry:
    return _default_registry


def configure(publisher_token: str, sections: Iterable[Section]) -> None:
    """Configure the process-wide registry. May be called only once."""
    _default_registry.configure(publisher_token, sections)
