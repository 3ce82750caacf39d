"""Template context for rendering menus with their active trails."""

from __future__ import annotations

from typing import Any, Dict, Optional

from django.http import HttpRequest

from .services import build_resolver
from .trail.resolver import ActiveTrailResolver
from .trail.types import MenuLink, Trail


def get_resolver(request: HttpRequest) -> ActiveTrailResolver:
    """Return the resolver attached by the middleware, or build one."""

    resolver = getattr(request, 'menu_trail', None)
    if resolver is None:
        resolver = build_resolver(request)
        request.menu_trail = resolver
    return resolver


class MenuTrails:
    """Mapping-style access so templates can write ``menu_trails.main``."""

    def __init__(self, request: HttpRequest) -> None:
        self.request = request

    def __getitem__(self, menu_name: str) -> Trail:
        return get_resolver(self.request).resolve_active_trail_ids(menu_name)


class ActiveLinks:
    def __init__(self, request: HttpRequest) -> None:
        self.request = request

    def __getitem__(self, menu_name: str) -> Optional[MenuLink]:
        return get_resolver(self.request).find_active_link(menu_name)


def active_trail(request: HttpRequest) -> Dict[str, Any]:
    return {
        'menu_trails': MenuTrails(request),
        'active_links': ActiveLinks(request),
    }
