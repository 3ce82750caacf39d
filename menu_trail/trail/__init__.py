"""Framework-independent active trail resolution."""

from .resolver import ActiveTrailResolver, PathTrailStrategy, find_active_link, resolve_active_trail_ids
from .sources import MenuLinkSource, PathAliasSource, TrailCache, TrailContext
from .types import ROOT, MenuLink, Trail

__all__ = [
    'ActiveTrailResolver',
    'MenuLink',
    'MenuLinkSource',
    'PathAliasSource',
    'PathTrailStrategy',
    'ROOT',
    'Trail',
    'TrailCache',
    'TrailContext',
    'find_active_link',
    'resolve_active_trail_ids',
]
