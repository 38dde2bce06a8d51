"""Tests for pathhelper.paths.types: route entry data models."""

import dataclasses

import pytest

from pathhelper.paths.types import NavLink, PathBuilder, RouteEntry, RouteKind


class TestRouteKind:
    def test_values(self) -> None:
        assert RouteKind.STATIC == "static"
        assert RouteKind.DYNAMIC == "dynamic"

    def test_from_value(self) -> None:
        assert RouteKind("dynamic") is RouteKind.DYNAMIC


class TestRouteEntry:
    def test_defaults(self) -> None:
        entry = RouteEntry(label="About", path=PathBuilder("about"))

        assert entry.navs == []
        assert entry.group is None
        assert entry.kind is RouteKind.STATIC

    def test_kind_and_group_are_fixed(self) -> None:
        entry = RouteEntry(label="Login", path=PathBuilder("login"), group="auth")

        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.group = "admin"  # type: ignore[misc]
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.kind = RouteKind.DYNAMIC  # type: ignore[misc]

    def test_navs_mutable_in_place(self) -> None:
        entry = RouteEntry(label="About", path=PathBuilder("about"))
        entry.navs.append("main")
        assert entry.navs == ["main"]

    def test_navs_not_shared(self) -> None:
        first = RouteEntry(label="A", path=PathBuilder("a"))
        second = RouteEntry(label="B", path=PathBuilder("b"))
        first.navs.append("main")
        assert second.navs == []

    def test_equality(self) -> None:
        assert RouteEntry(label="A", path=PathBuilder("a")) == RouteEntry(
            label="A", path=PathBuilder("a")
        )


class TestPathBuilder:
    def test_replacement_text_is_literal(self) -> None:
        assert PathBuilder("files/[name]")(r"a\1b") == r"/files/a\1b"

    def test_nav_link_holds_builder(self) -> None:
        link = NavLink(label="User", path=PathBuilder("users/[id]"))
        assert link.path(3) == "/users/3"
