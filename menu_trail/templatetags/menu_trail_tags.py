"""Template tags for rendering menus and highlighting their active trails."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, List

from django import template

from ..context_processors import get_resolver
from ..services import DatabaseMenuLinkSource, request_language
from ..trail.types import ROOT, MenuLink, Trail, root_trail

register = template.Library()


@register.simple_tag(takes_context=True)
def active_trail_ids(context, menu_name: str) -> Trail:
    """Return the active trail of ``menu_name`` for the current request.

    Usage: ``{% active_trail_ids 'main' as trail %}``
    """
    request = context.get('request')
    if request is None:
        return root_trail()
    return get_resolver(request).resolve_active_trail_ids(menu_name)


@register.simple_tag(takes_context=True)
def is_in_active_trail(context, menu_name: str, link_id: str, css_class: str = 'active-trail') -> str:
    """Return ``css_class`` when ``link_id`` lies on the active trail."""
    trail = active_trail_ids(context, menu_name)
    return css_class if link_id and link_id in trail else ''


def build_menu_tree(links: List[MenuLink], trail: Trail, active_id: str | None) -> List[Dict[str, Any]]:
    """Nest flattened ``links`` under their parents, flagging the trail."""

    children: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
    for link in links:
        children[link.parent].append(
            {
                'link': link,
                'in_trail': link.id in trail,
                'active': link.id == active_id,
                'children': children[link.id],
            }
        )
    return children[ROOT]


@register.inclusion_tag('menu_trail/menu.html', takes_context=True)
def render_menu(context, menu_name: str) -> Dict[str, Any]:
    """Render ``menu_name`` as nested lists with active trail classes."""
    request = context.get('request')
    if request is None:
        return {'menu_name': menu_name, 'items': []}

    resolver = get_resolver(request)
    links = DatabaseMenuLinkSource(request_language(request)).list_links(menu_name)
    trail = resolver.resolve_active_trail_ids(menu_name)
    active_link = resolver.find_active_link(menu_name)
    return {
        'menu_name': menu_name,
        'items': build_menu_tree(links, trail, active_link.id if active_link else None),
    }
