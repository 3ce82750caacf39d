"""Collaborator interfaces consumed by the resolver.

The resolver never talks to a framework directly. Menu links, the set of
URLs denoting the current location and the trail cache are all supplied
through the small protocols below, so the core can run against the Django
models in production and against in-memory fakes in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

from .types import MenuLink, Trail


class MenuLinkSource(Protocol):
    def list_links(self, menu_name: str) -> Sequence[MenuLink]:
        """Return every link of ``menu_name`` in enumeration order."""

    def parent_ids_of(self, link_id: str) -> Sequence[str]:
        """Return the ancestor ids of ``link_id`` as the source orders them."""


class PathAliasSource(Protocol):
    def current_candidate_urls(self) -> Sequence[str]:
        """Return URLs denoting the current location, least specific first."""


class TrailCache(Protocol):
    def get(self, key: str) -> Optional[Trail]:
        ...

    def set(self, key: str, value: Trail) -> None:
        ...


@dataclass(frozen=True)
class TrailContext:
    """Ambient request state the resolver reads but does not own."""

    language: str
    path_info: str
    base_cache_key: Callable[[str], str]
