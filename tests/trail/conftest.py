"""Shared fixtures and in-memory collaborators for resolver tests."""

from __future__ import annotations

from functools import partial
from typing import Dict, Iterable, List, Optional, Sequence

import pytest

from menu_trail.trail.paths import canonicalize_url
from menu_trail.trail.resolver import ActiveTrailResolver, PathTrailStrategy
from menu_trail.trail.sources import TrailContext
from menu_trail.trail.types import MenuLink, Trail


class FakeMenuLinks:
    """Menu links held in memory; counts enumeration calls."""

    def __init__(
        self,
        menus: Dict[str, Sequence[MenuLink]],
        parents: Dict[str, Sequence[str]] | None = None,
    ) -> None:
        self.menus = {name: list(links) for name, links in menus.items()}
        self.parents = {link_id: list(ids) for link_id, ids in (parents or {}).items()}
        self.list_calls = 0

    def list_links(self, menu_name: str) -> List[MenuLink]:
        self.list_calls += 1
        return list(self.menus.get(menu_name, []))

    def parent_ids_of(self, link_id: str) -> List[str]:
        return list(self.parents.get(link_id, []))


class FakePathAliases:
    def __init__(self, urls: Iterable[str]) -> None:
        self.urls = list(urls)

    def current_candidate_urls(self) -> List[str]:
        return list(self.urls)


class FakeTrailCache:
    def __init__(self) -> None:
        self.store: Dict[str, Trail] = {}

    def get(self, key: str) -> Optional[Trail]:
        return self.store.get(key)

    def set(self, key: str, value: Trail) -> None:
        self.store[key] = dict(value)


def make_link(link_id: str, url: str, parent: str = "", *, title: str | None = None) -> MenuLink:
    return MenuLink(id=link_id, url=url, parent=parent, title=title or link_id)


def make_context(language: str = "en", path_info: str = "/", route: str = "menu_trail:page") -> TrailContext:
    return TrailContext(
        language=language,
        path_info=path_info,
        base_cache_key=lambda menu_name: f"test:1:{menu_name}:route:{route}:route_parameters:",
    )


def make_strategy(
    menu_links: FakeMenuLinks,
    candidates: Iterable[str],
    *,
    language: str = "en",
    path_info: str = "/",
) -> PathTrailStrategy:
    return PathTrailStrategy(
        menu_links=menu_links,
        path_aliases=FakePathAliases(candidates),
        context=make_context(language, path_info),
        canonicalize=partial(canonicalize_url, language=language),
    )


def make_resolver(
    menu_links: FakeMenuLinks,
    candidates: Iterable[str],
    cache: FakeTrailCache,
    *,
    language: str = "en",
    path_info: str = "/",
) -> ActiveTrailResolver:
    strategy = make_strategy(menu_links, candidates, language=language, path_info=path_info)
    return ActiveTrailResolver(strategy, cache)


@pytest.fixture()
def trail_cache() -> FakeTrailCache:
    return FakeTrailCache()
