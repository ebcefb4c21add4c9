"""Render a section tree into presentation nodes, and draw those as text.

Two layouts are supported:

    sections  Each Section becomes a RenderedGroup with its title as header
              (no header for untitled sections). For settings lists.
    groups    Section entries are emitted inline, with a RenderedSeparator
              between consecutive sections but not after the last one.
              For command menus.

Menus become RenderedMenu nodes whose children are the same renderer
applied to the menu's sections, in the same layout. Rendering is a pure
projection: the same tree always renders to equal output.
"""

import logging
import uuid
import webbrowser
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from .models import Menu, Section
from .registry import Registry, get_registry

logger = logging.getLogger(__name__)

Opener = Callable[[str], None]


def default_opener(url: str) -> None:
    """Hand the URL to the system browser or mail client."""
    logger.debug("Opening %s", url)
    webbrowser.open(url)


class LayoutMode(str, Enum):
    SECTIONED = "sections"
    FLAT = "groups"


@dataclass(frozen=True)
class RenderedButton:
    id: uuid.UUID
    title: str
    icon: str
    url: str
    opener: Opener = field(default=default_opener, compare=False, repr=False)

    def activate(self) -> None:
        """Open this button's URL. Failures are the opener's concern."""
        self.opener(self.url)


@dataclass(frozen=True)
class RenderedMenu:
    id: uuid.UUID
    title: str
    icon: str
    children: tuple["RenderedNode", ...]


@dataclass(frozen=True)
class RenderedSeparator:
    pass


@dataclass(frozen=True)
class RenderedGroup:
    header: str | None
    items: tuple["RenderedButton | RenderedMenu", ...]


RenderedNode = RenderedGroup | RenderedButton | RenderedMenu | RenderedSeparator


def render_sections(
    sections: Iterable[Section],
    mode: LayoutMode | str = LayoutMode.SECTIONED,
    opener: Opener = default_opener,
) -> list[RenderedNode]:
    mode = LayoutMode(mode)
    sections = list(sections)
    nodes: list[RenderedNode] = []

    for index, section in enumerate(sections):
        items = [_render_entry(entry.value, mode, opener) for entry in section.entries]

        if mode is LayoutMode.SECTIONED:
            nodes.append(RenderedGroup(header=section.title, items=tuple(items)))
            continue

        nodes.extend(items)
        # Keyed off position: an empty section still gets its separator.
        if index < len(sections) - 1:
            nodes.append(RenderedSeparator())

    return nodes


def _render_entry(value, mode: LayoutMode, opener: Opener) -> RenderedButton | RenderedMenu:
    if isinstance(value, Menu):
        return RenderedMenu(
            id=value.id,
            title=value.title,
            icon=value.icon,
            children=tuple(render_sections(value.sections, mode, opener)),
        )
    return RenderedButton(
        id=value.id,
        title=value.title,
        icon=value.icon,
        url=value.url,
        opener=opener,
    )


def render_registry(
    mode: LayoutMode | str = LayoutMode.SECTIONED,
    opener: Opener = default_opener,
    registry: Registry | None = None,
) -> list[RenderedNode]:
    """Render the configured top-level sections.

    An unconfigured registry renders as an empty list.
    """
    registry = registry or get_registry()
    mode = LayoutMode(mode)
    if not registry.is_configured:
        logger.warning("Rendering links before configure() was called")
    nodes = render_sections(registry.sections, mode, opener)
    logger.debug(
        "Rendered %d top-level sections into %d nodes (%s)",
        len(registry.sections),
        len(nodes),
        mode.value,
    )
    return nodes


def find_button(nodes: Iterable[RenderedNode], titles: list[str]) -> RenderedButton | None:
    """Follow menu titles down the tree and return the button named last.

    Groups are transparent, so a path never names a section header.
    """
    if not titles:
        return None
    head, rest = titles[0], titles[1:]
    for node in nodes:
        if isinstance(node, RenderedGroup):
            found = find_button(node.items, titles)
            if found is not None:
                return found
        elif isinstance(node, RenderedMenu) and node.title == head and rest:
            found = find_button(node.children, rest)
            if found is not None:
                return found
        elif isinstance(node, RenderedButton) and node.title == head and not rest:
            return node
    return None


# ── Text drawing ─────────────────────────────────────────────────


def format_rendering(nodes: Iterable[RenderedNode], show_urls: bool = False) -> str:
    """Draw rendered nodes as indented text, one node per line.

    Groups print their header as "## Title", buttons as "- [icon] Title",
    menus as "+ [icon] Title" followed by their children indented, and
    separators as "---".
    """
    lines: list[str] = []
    _format_nodes(nodes, 0, show_urls, lines)
    return "\n".join(lines)


def _format_nodes(
    nodes: Iterable[RenderedNode], depth: int, show_urls: bool, lines: list[str]
) -> None:
    indent = "    " * depth
    for node in nodes:
        if isinstance(node, RenderedGroup):
            if node.header is not None:
                lines.append(f"{indent}## {node.header}")
            _format_nodes(node.items, depth, show_urls, lines)
        elif isinstance(node, RenderedMenu):
            lines.append(f"{indent}+ [{node.icon}] {node.title}")
            _format_nodes(node.children, depth + 1, show_urls, lines)
        elif isinstance(node, RenderedButton):
            line = f"{indent}- [{node.icon}] {node.title}"
            if show_urls:
                line += f" <{node.url}>"
            lines.append(line)
        else:
            lines.append(f"{indent}---")
