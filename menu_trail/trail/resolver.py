"""Active trail resolution.

Given a menu name and the current request, the resolver finds the menu link
whose target matches the most specific URL denoting the current location and
returns the ids of that link's ancestors, keyed by themselves, on top of the
root sentinel. Results are memoized in a trail cache under a key that
combines the menu, the route, the language and the raw path info.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Mapping, Optional, Protocol, Sequence

from .sources import MenuLinkSource, PathAliasSource, TrailCache, TrailContext
from .types import MenuLink, Trail, root_trail

logger = logging.getLogger(__name__)


class TrailStrategy(Protocol):
    def cache_key(self, menu_name: str) -> str:
        ...

    def find_active_link(self, menu_name: str) -> Optional[MenuLink]:
        ...

    def compute(self, menu_name: str) -> Trail:
        ...


def compose_cache_key(context: TrailContext, menu_name: str) -> str:
    """Extend the base key with the language and the raw path info."""

    return (
        f"{context.base_cache_key(menu_name)}"
        f":langcode:{context.language}"
        f":pathinfo:{context.path_info}"
    )


def find_active_link(
    links: Sequence[MenuLink],
    candidate_urls: Sequence[str],
    canonicalize: Callable[[str], str],
    canonicalize_candidate: Optional[Callable[[str], str]] = None,
) -> Optional[MenuLink]:
    """Return the first link matching a candidate, most specific candidate first.

    Candidates are tried from last to first; for each candidate, links are
    tried from last to first, so among links sharing a target the one
    enumerated last wins. ``canonicalize_candidate`` defaults to
    ``canonicalize``; sources that already emit canonical candidates pass a
    variant that leaves language prefixes alone.
    """

    canonicalize_candidate = canonicalize_candidate or canonicalize
    targets = [(canonicalize(link.url), link) for link in reversed(links)]
    for candidate in reversed(candidate_urls):
        wanted = canonicalize_candidate(candidate)
        for target, link in targets:
            if target == wanted:
                return link
    return None


def merge_parent_ids(trail: Trail, parent_ids: Iterable[str]) -> Trail:
    """Add ``parent_ids`` to ``trail`` without replacing existing entries."""

    for parent_id in parent_ids:
        trail.setdefault(parent_id, parent_id)
    return trail


def resolve_active_trail_ids(strategy: TrailStrategy, cache: TrailCache, menu_name: str) -> Trail:
    """Return the cached trail for ``menu_name`` or compute and store it."""

    key = strategy.cache_key(menu_name)
    cached = cache.get(key)
    if cached is not None:
        logger.debug('Active trail cache hit for %s', key)
        return dict(cached)

    logger.debug('Active trail cache miss for %s', key)
    trail = strategy.compute(menu_name)
    cache.set(key, trail)
    return trail


@dataclass(frozen=True)
class PathTrailStrategy:
    """Match menu links against URLs denoting the current path."""

    menu_links: MenuLinkSource
    path_aliases: PathAliasSource
    context: TrailContext
    canonicalize: Callable[[str], str]
    canonicalize_candidate: Optional[Callable[[str], str]] = None

    def cache_key(self, menu_name: str) -> str:
        return compose_cache_key(self.context, menu_name)

    def find_active_link(self, menu_name: str) -> Optional[MenuLink]:
        links = list(self.menu_links.list_links(menu_name))
        if not links:
            return None
        candidates = list(self.path_aliases.current_candidate_urls())
        return find_active_link(links, candidates, self.canonicalize, self.canonicalize_candidate)

    def compute(self, menu_name: str) -> Trail:
        # Parent ids are used both as key and value to ensure uniqueness.
        trail = root_trail()
        active_link = self.find_active_link(menu_name)
        if active_link is not None:
            merge_parent_ids(trail, self.menu_links.parent_ids_of(active_link.id))
        return trail


class ActiveTrailResolver:
    """Resolve active trails for any menu of the current request.

    ``strategy`` handles every menu not listed in ``menu_strategies``. A menu
    whose strategy is ``None`` has path-based trails switched off and always
    resolves to the root trail.
    """

    def __init__(
        self,
        strategy: Optional[TrailStrategy],
        cache: TrailCache,
        *,
        menu_strategies: Mapping[str, Optional[TrailStrategy]] | None = None,
    ) -> None:
        self.strategy = strategy
        self.cache = cache
        self.menu_strategies: Dict[str, Optional[TrailStrategy]] = dict(menu_strategies or {})

    def strategy_for(self, menu_name: str) -> Optional[TrailStrategy]:
        return self.menu_strategies.get(menu_name, self.strategy)

    def resolve_active_trail_ids(self, menu_name: str) -> Trail:
        strategy = self.strategy_for(menu_name)
        if strategy is None:
            return root_trail()
        return resolve_active_trail_ids(strategy, self.cache, menu_name)

    def find_active_link(self, menu_name: str) -> Optional[MenuLink]:
        strategy = self.strategy_for(menu_name)
        if strategy is None:
            return None
        return strategy.find_active_link(menu_name)
