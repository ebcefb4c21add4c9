"""Data models for the link tree: links, menus, sections and their entries.

A Menu contains Sections, a Section contains Entries, and an Entry wraps
either a Link (leaf) or a Menu (nested sub-tree). All of them are frozen and
store children as tuples, so a built tree cannot be mutated into a cycle.
"""

import uuid
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from urllib.parse import urlsplit


class InvalidURLError(ValueError):
    """A link was built from a string that is not an absolute URL.

    This is a caller contract violation: validate components before building
    links. Nothing in links_kit catches it.
    """


def validate_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.scheme:
        raise InvalidURLError(f"URL has no scheme: {url!r}")
    if parts.scheme in ("http", "https") and not parts.netloc:
        raise InvalidURLError(f"URL has no host: {url!r}")
    if not (parts.netloc or parts.path):
        raise InvalidURLError(f"URL has no target: {url!r}")
    if any(c.isspace() for c in url):
        raise InvalidURLError(f"URL contains whitespace: {url!r}")
    return url


@dataclass(frozen=True)
class Link:
    title: str
    icon: str  # SF Symbol name
    url: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        validate_url(self.url)


@dataclass(frozen=True)
class Menu:
    title: str
    icon: str
    sections: tuple["Section", ...]
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sections", tuple(self.sections))


@dataclass(frozen=True)
class Entry:
    value: Link | Menu

    @classmethod
    def link(cls, link: Link) -> "Entry":
        return cls(link)

    @classmethod
    def menu(cls, menu: Menu) -> "Entry":
        return cls(menu)

    @property
    def id(self) -> uuid.UUID:
        return self.value.id

    @property
    def kind(self) -> str:
        return "menu" if isinstance(self.value, Menu) else "link"


@dataclass(frozen=True)
class Section:
    entries: tuple[Entry, ...]
    title: str | None = None  # untitled sections render without a header

    def __init__(
        self, entries: Iterable[Entry | Link | Menu], title: str | None = None
    ):
        object.__setattr__(self, "entries", tuple(_as_entry(e) for e in entries))
        object.__setattr__(self, "title", title)

    def iter_links(self) -> Iterator[Link]:
        """Yield every link reachable from this section, depth-first."""
        for entry in self.entries:
            if isinstance(entry.value, Menu):
                for section in entry.value.sections:
                    yield from section.iter_links()
            else:
                yield entry.value


def _as_entry(value: Entry | Link | Menu) -> Entry:
    if isinstance(value, Entry):
        return value
    if isinstance(value, (Link, Menu)):
        return Entry(value)
    raise TypeError(f"Section entries must be Link or Menu, got {type(value).__name__}")
