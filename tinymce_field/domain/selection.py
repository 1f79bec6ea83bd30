"""
Tri-state selection settings.

Field settings such as ``available_volumes`` are stored as ``"*"``, a list of
uids, or an empty value. Components work with the tagged variant instead.
The stored form is carried alongside, outside equality, so the settings form
can echo it back unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

WILDCARD = "*"


@dataclass(frozen=True)
class AllSelected:
    """Every catalog entry is allowed."""


@dataclass(frozen=True)
class SubsetSelected:
    """Only the listed uids are allowed."""

    ids: frozenset[str]
    order: tuple[str, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class NoneSelected:
    """The setting is disabled."""

    stored: Any = field(default=None, compare=False)


Selection = AllSelected | SubsetSelected | NoneSelected


def parse_selection(raw: Any) -> Selection:
    """
    Convert a stored setting into a Selection.

    ``"*"`` selects everything, a non-empty iterable of uids selects a subset,
    and any falsy value disables the setting.
    """
    if not raw:
        return NoneSelected(stored=raw)
    if raw == WILDCARD:
        return AllSelected()
    if isinstance(raw, str):
        raise ValueError(f"Invalid selection setting: {raw!r}")
    if isinstance(raw, Iterable):
        order = tuple(dict.fromkeys(str(uid) for uid in raw))
        return SubsetSelected(ids=frozenset(order), order=order)
    raise ValueError(f"Invalid selection setting type: {type(raw)}")


def allows(selection: Selection, uid: str) -> bool:
    """Check whether a catalog entry passes the selection."""
    if isinstance(selection, AllSelected):
        return True
    if isinstance(selection, SubsetSelected):
        return uid in selection.ids
    return False


def is_enabled(selection: Selection) -> bool:
    return not isinstance(selection, NoneSelected)


def selection_to_setting(selection: Selection) -> Any:
    """Inverse of parse_selection, used when rendering the settings form."""
    if isinstance(selection, AllSelected):
        return WILDCARD
    if isinstance(selection, SubsetSelected):
        return list(selection.order) if selection.order else sorted(selection.ids)
    return selection.stored
