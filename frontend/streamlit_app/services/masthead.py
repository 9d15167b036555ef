# frontend/streamlit_app/services/masthead.py
# SPDX-License-Identifier: Apache-2.0
"""Data behind the top navigation bar.

The bar shows the signed-in user's name and a user menu. The menu ends with
the optional "manage account" and "sign out" entries; what those entries *do* belongs to the host
(they are plain callbacks here).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

Translate = Callable[..., str]
# A callback, a URL, or None for an entry that does nothing.
MenuAction = Callable[[], object] | str | None


@dataclass(frozen=True)
class MenuItem:
    """A menu entry that either runs `on_click` or links to `url`."""

    key: str
    label: str
    on_click: Callable[[], object] | None = None
    url: str | None = None


@dataclass(frozen=True)
class MastheadFeatures:
    has_logout: bool = True
    has_manage_account: bool = True
    has_username: bool = True


@dataclass(frozen=True)
class MastheadModel:
    title: str | None
    dropdown: tuple[MenuItem, ...]


def logged_in_user_name(token: Mapping[str, Any] | None, t: Translate) -> str:
    """Display name from parsed ID token claims."""
    if not token:
        return t("unknownUser")

    given_name = token.get("given_name")
    family_name = token.get("family_name")
    preferred_username = token.get("preferred_username")

    if given_name and family_name:
        return t("fullName", givenName=given_name, familyName=family_name)

    return given_name or family_name or preferred_username or t("unknownUser")


def _item(key: str, label: str, action: MenuAction) -> MenuItem:
    if isinstance(action, str):
        return MenuItem(key, label, url=action)
    return MenuItem(key, label, on_click=action)


def account_items(
    t: Translate,
    features: MastheadFeatures,
    manage_account: MenuAction = None,
    logout: MenuAction = None,
) -> list[MenuItem]:
    items = []
    if features.has_manage_account:
        items.append(_item("manageAccount", t("manageAccount"), manage_account))
    if features.has_logout:
        items.append(_item("signOut", t("signOut"), logout))
    return items


def build_masthead(
    token: Mapping[str, Any] | None,
    t: Translate,
    features: MastheadFeatures | None = None,
    dropdown_items: Sequence[MenuItem] = (),
    manage_account: MenuAction = None,
    logout: MenuAction = None,
) -> MastheadModel:
    """Assemble the title and the user menu (caller items, then account items)."""
    features = features or MastheadFeatures()
    extras = account_items(t, features, manage_account, logout)
    return MastheadModel(
        title=logged_in_user_name(token, t) if features.has_username else None,
        dropdown=(*dropdown_items, *extras),
    )
