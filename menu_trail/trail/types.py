"""Typed data structures shared by the active trail resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

# Parent id of top-level links; always present in a resolved trail.
ROOT = ''

Trail = Dict[str, str]


@dataclass(frozen=True)
class MenuLink:
    """A navigational entry as seen by the resolver."""

    id: str
    url: str
    parent: str = ROOT
    title: str = ''
    weight: int = 0


def root_trail() -> Trail:
    """Return a fresh trail holding only the root sentinel."""

    return {ROOT: ROOT}
