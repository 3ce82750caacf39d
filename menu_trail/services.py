"""Django-backed collaborators for the active trail resolver.

These functions and classes connect the framework-free resolver in
:mod:`menu_trail.trail` to the database models, the Django cache framework
and the current request. They are kept here so views, middleware and
template tags can share a single way of building a resolver.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from functools import lru_cache, partial
from typing import Callable, Dict, List, Optional, Sequence

from django.conf import settings
from django.core.cache import BaseCache, caches
from django.core.exceptions import ImproperlyConfigured
from django.db.models import Q
from django.http import HttpRequest
from django.urls import NoReverseMatch, reverse
from django.utils import translation

from . import models
from .trail.config import TrailConfig, TrailConfigError, load_config
from .trail.paths import canonicalize_url, path_prefixes, unique
from .trail.resolver import ActiveTrailResolver, PathTrailStrategy
from .trail.sources import TrailContext
from .trail.types import ROOT, MenuLink, Trail

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_trail_config() -> TrailConfig:
    """Return the configuration built from Django settings.

    ``settings.MENU_TRAIL_CONFIG_FILE`` (YAML) is merged over the defaults
    first, then ``settings.MENU_TRAIL``. Invalid values raise
    ``ImproperlyConfigured``. The result is cached until a relevant setting
    changes.
    """

    try:
        return load_config(
            getattr(settings, 'MENU_TRAIL_CONFIG_FILE', None),
            getattr(settings, 'MENU_TRAIL', None),
        )
    except TrailConfigError as exc:
        raise ImproperlyConfigured(f'Invalid menu trail configuration: {exc}') from exc


class DjangoTrailCache:
    """Store trails in a Django cache backend with a fixed timeout."""

    def __init__(self, cache: BaseCache, timeout: int | None) -> None:
        self.cache = cache
        self.timeout = timeout

    def get(self, key: str) -> Optional[Trail]:
        return self.cache.get(key)

    def set(self, key: str, value: Trail) -> None:
        self.cache.set(key, value, timeout=self.timeout)


def trail_cache(config: TrailConfig | None = None) -> DjangoTrailCache:
    config = config or get_trail_config()
    return DjangoTrailCache(caches[config.cache_alias], config.cache_timeout)


def generation_key(config: TrailConfig) -> str:
    return f"{config.cache_key_prefix}:generation"


def current_generation(config: TrailConfig | None = None) -> int:
    """Return the cache generation, initialising it on first use."""

    config = config or get_trail_config()
    cache = caches[config.cache_alias]
    key = generation_key(config)
    cache.add(key, 1, timeout=None)
    return int(cache.get(key, 1))


def bump_generation(config: TrailConfig | None = None) -> int:
    """Invalidate every stored trail by moving to a new cache generation."""

    config = config or get_trail_config()
    cache = caches[config.cache_alias]
    key = generation_key(config)
    cache.add(key, 1, timeout=None)
    generation = cache.incr(key)
    logger.debug('Menu trail cache generation is now %s', generation)
    return generation


def base_cache_key(
    config: TrailConfig,
    generation: int,
    request: HttpRequest,
) -> Callable[[str], str]:
    """Return the per-menu base key for the route of ``request``."""

    resolved = getattr(request, 'resolver_match', None)
    route_name = getattr(resolved, 'view_name', '') or ''
    route_kwargs = getattr(resolved, 'kwargs', None) or {}
    route_parameters = '&'.join(f"{name}={route_kwargs[name]}" for name in sorted(route_kwargs))

    def compose(menu_name: str) -> str:
        return (
            f"{config.cache_key_prefix}:{generation}:{menu_name}"
            f":route:{route_name}:route_parameters:{route_parameters}"
        )

    return compose


def resolve_link_url(link: models.MenuLink) -> str:
    """Return the target of ``link``, reversing named routes.

    Links pointing at routes that cannot be reversed get an empty URL.
    """

    if link.route_name:
        try:
            return reverse(link.route_name)
        except NoReverseMatch:
            logger.warning('Menu link %s points at unknown route %s', link.link_id, link.route_name)
            return ''
    return link.url


def flatten_menu(rows: Sequence[models.MenuLink]) -> List[models.MenuLink]:
    """Return ``rows`` depth-first from the top level, siblings by weight.

    Links whose parent is missing from ``rows`` cannot be reached and are
    left out.
    """

    children: Dict[str, List[models.MenuLink]] = defaultdict(list)
    for row in rows:
        children[row.parent].append(row)
    for siblings in children.values():
        siblings.sort(key=lambda row: (row.weight, row.title, row.link_id))

    ordered: List[models.MenuLink] = []
    seen: set[str] = set()
    stack = list(reversed(children.get(ROOT, [])))
    while stack:
        row = stack.pop()
        if row.link_id in seen:
            continue
        seen.add(row.link_id)
        ordered.append(row)
        stack.extend(reversed(children.get(row.link_id, [])))
    return ordered


class DatabaseMenuLinkSource:
    """Serve menu links from the ``MenuLink`` model."""

    def __init__(self, language: str) -> None:
        self.language = language

    def list_links(self, menu_name: str) -> List[MenuLink]:
        rows = list(
            models.MenuLink.objects
            .filter(menu__name=menu_name, enabled=True)
            .filter(Q(language='') | Q(language=self.language))
        )
        links: List[MenuLink] = []
        for row in flatten_menu(rows):
            url = resolve_link_url(row)
            if not url:
                continue
            links.append(MenuLink(id=row.link_id, url=url, parent=row.parent, title=row.title, weight=row.weight))
        return links

    def parent_ids_of(self, link_id: str) -> List[str]:
        """Return ``link_id`` followed by its ancestors, nearest first."""

        link = models.MenuLink.objects.get(link_id=link_id)
        parent_ids = [link.link_id]
        parent = link.parent
        while parent:
            if parent in parent_ids:
                logger.warning('Menu link %s has a cyclic parent chain at %s', link_id, parent)
                break
            row = models.MenuLink.objects.filter(link_id=parent).only('link_id', 'parent').first()
            if row is None:
                logger.warning('Menu link %s references missing parent %s', link_id, parent)
                break
            parent_ids.append(row.link_id)
            parent = row.parent
        return parent_ids


class DatabasePathAliasSource:
    """Build candidate URLs for the current path from ``PathAlias`` rows.

    With ``exact`` set only the current path and its aliases are returned;
    otherwise every ancestor path contributes, shortest first.
    """

    def __init__(
        self,
        path_info: str,
        language: str,
        *,
        max_path_parts: int = 0,
        strip_language_prefix: bool = True,
        exact: bool = False,
    ) -> None:
        self.path_info = path_info
        self.language = language
        self.max_path_parts = max_path_parts
        self.strip_language_prefix = strip_language_prefix
        self.exact = exact

    def current_candidate_urls(self) -> List[str]:
        path = canonicalize_url(
            self.path_info,
            self.language,
            strip_language_prefix=self.strip_language_prefix,
        )
        prefixes = [path] if self.exact else path_prefixes(path, self.max_path_parts)
        urls: List[str] = []
        for prefix in prefixes:
            urls.extend(self.equivalent_urls(prefix))
        return unique(urls)

    def equivalent_urls(self, path: str) -> List[str]:
        """Return the system path behind ``path`` followed by its aliases."""

        languages = Q(language='') | Q(language=self.language)
        aliased = models.PathAlias.objects.filter(languages, alias=path).order_by('-language', 'id').first()
        system_path = aliased.path if aliased is not None else path
        aliases = (
            models.PathAlias.objects
            .filter(languages, path=system_path)
            .order_by('-language', 'id')
            .values_list('alias', flat=True)
        )
        return [system_path, *aliases]


def request_language(request: HttpRequest) -> str:
    return getattr(request, 'LANGUAGE_CODE', None) or translation.get_language() or settings.LANGUAGE_CODE


def build_resolver(request: HttpRequest, config: TrailConfig | None = None) -> ActiveTrailResolver:
    """Assemble an :class:`ActiveTrailResolver` for ``request``."""

    config = config or get_trail_config()
    language = request_language(request)
    path_info = request.path_info
    context = TrailContext(
        language=language,
        path_info=path_info,
        base_cache_key=base_cache_key(config, current_generation(config), request),
    )
    menu_links = DatabaseMenuLinkSource(language)
    canonicalize = partial(
        canonicalize_url,
        language=language,
        strip_language_prefix=config.strip_language_prefix,
    )

    def strategy(source: str) -> Optional[PathTrailStrategy]:
        if source == 'disabled':
            return None
        path_aliases = DatabasePathAliasSource(
            path_info,
            language,
            max_path_parts=config.max_path_parts,
            strip_language_prefix=config.strip_language_prefix,
            exact=source == 'exact',
        )
        # Candidates leave the alias source canonical and language-stripped.
        return PathTrailStrategy(menu_links, path_aliases, context, canonicalize, canonicalize_url)

    return ActiveTrailResolver(
        strategy(config.default_source),
        trail_cache(config),
        menu_strategies={name: strategy(config.trail_source(name)) for name in config.menus},
    )
