"""Tests for the link tree data model."""

import dataclasses

import pytest

from links_kit.models import Entry, InvalidURLError, Link, Menu, Section


class TestLink:
    def test_accepts_https_url(self):
        link = Link("Website", "globe", "https://example.com")
        assert link.url == "https://example.com"

    def test_accepts_mailto_url(self):
        link = Link("Mail", "envelope", "mailto:support@example.com")
        assert link.url == "mailto:support@example.com"

    def test_rejects_relative_url(self):
        with pytest.raises(InvalidURLError):
            Link("Broken", "xmark", "/faq")

    def test_rejects_url_without_host(self):
        with pytest.raises(InvalidURLError):
            Link("Broken", "xmark", "https://")

    def test_rejects_whitespace(self):
        with pytest.raises(InvalidURLError):
            Link("Broken", "xmark", "mailto:a b@example.com")

    def test_invalid_url_is_value_error(self):
        assert issubclass(InvalidURLError, ValueError)

    def test_fresh_id_per_link(self):
        a = Link("Same", "globe", "https://example.com")
        b = Link("Same", "globe", "https://example.com")
        assert a.id != b.id
        assert a != b

    def test_id_is_stable(self):
        link = Link("Website", "globe", "https://example.com")
        assert link.id == link.id

    def test_is_immutable(self):
        link = Link("Website", "globe", "https://example.com")
        with pytest.raises(dataclasses.FrozenInstanceError):
            link.title = "Other"


class TestEntry:
    def test_forwards_link_id(self):
        link = Link("Website", "globe", "https://example.com")
        entry = Entry.link(link)
        assert entry.id == link.id
        assert entry.kind == "link"

    def test_forwards_menu_id(self):
        menu = Menu("More", "ellipsis", [])
        entry = Entry.menu(menu)
        assert entry.id == menu.id
        assert entry.kind == "menu"


class TestSection:
    def test_wraps_links_and_menus_in_entries(self):
        link = Link("Website", "globe", "https://example.com")
        menu = Menu("More", "ellipsis", [Section([])])
        section = Section([link, menu])
        assert [e.kind for e in section.entries] == ["link", "menu"]
        assert section.entries[0].value is link

    def test_accepts_entries(self):
        link = Link("Website", "globe", "https://example.com")
        section = Section([Entry.link(link)])
        assert section.entries == (Entry(link),)

    def test_title_defaults_to_none(self):
        assert Section([]).title is None

    def test_entries_are_a_tuple(self):
        section = Section([Link("Website", "globe", "https://example.com")])
        assert isinstance(section.entries, tuple)

    def test_rejects_other_entry_types(self):
        with pytest.raises(TypeError):
            Section(["https://example.com"])

    def test_iter_links_walks_menus_depth_first(self):
        inner = Link("Inner", "b", "https://example.com/inner")
        outer = Link("Outer", "a", "https://example.com/outer")
        last = Link("Last", "c", "https://example.com/last")
        section = Section([outer, Menu("Menu", "m", [Section([inner])]), last])
        assert list(section.iter_links()) == [outer, inner, last]


class TestMenu:
    def test_sections_are_a_tuple(self):
        menu = Menu("More", "ellipsis", [Section([]), Section([])])
        assert isinstance(menu.sections, tuple)
        assert len(menu.sections) == 2
