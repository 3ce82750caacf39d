"""Configuration helpers for the active trail resolver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

TRAIL_SOURCES = ('path', 'exact', 'disabled')


class TrailConfigError(ValueError):
    """Raised when configuration values cannot be used."""


@dataclass(frozen=True)
class TrailConfig:
    """Typed wrapper around the trail configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    @property
    def cache_alias(self) -> str:
        return self.raw.get('cache_alias', 'default')

    @property
    def cache_timeout(self) -> int | None:
        return self.raw.get('cache_timeout')

    @property
    def cache_key_prefix(self) -> str:
        return self.raw.get('cache_key_prefix', DEFAULTS['cache_key_prefix'])

    @property
    def max_path_parts(self) -> int:
        return int(self.raw.get('max_path_parts', 0))

    @property
    def strip_language_prefix(self) -> bool:
        return bool(self.raw.get('strip_language_prefix', True))

    @property
    def default_source(self) -> str:
        return self.raw.get('default_source', 'path')

    @property
    def menus(self) -> Dict[str, str]:
        return dict(self.raw.get('menus') or {})

    def trail_source(self, menu_name: str) -> str:
        return self.menus.get(menu_name, self.default_source)


DEFAULTS: Dict[str, Any] = {
    'cache_alias': 'default',
    'cache_timeout': 3600,
    'cache_key_prefix': 'menu_trail:active-trail',
    'max_path_parts': 0,
    'strip_language_prefix': True,
    'default_source': 'path',
    'menus': {},
}


def load_config(
    path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> TrailConfig:
    """Load configuration from YAML and ``overrides``, merging with defaults."""

    data: Dict[str, Any] = DEFAULTS.copy()
    data['menus'] = dict(DEFAULTS['menus'])

    if path is not None and Path(path).exists():
        with Path(path).open('r', encoding='utf-8') as stream:
            user = yaml.safe_load(stream) or {}
        if not isinstance(user, dict):
            raise TrailConfigError(f'{path}: expected a mapping at the top level')
        merge_into(data, user)

    if overrides:
        merge_into(data, dict(overrides))

    validate(data)
    return TrailConfig(data)


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value


def validate(data: Dict[str, Any]) -> None:
    default_source = data.get('default_source')
    if default_source not in TRAIL_SOURCES:
        raise TrailConfigError(f'Unknown default_source: {default_source!r}')

    menus = data.get('menus') or {}
    if not isinstance(menus, dict):
        raise TrailConfigError('menus must map menu names to trail sources')
    for menu_name, source in menus.items():
        if source not in TRAIL_SOURCES:
            raise TrailConfigError(f'Unknown trail source for menu {menu_name!r}: {source!r}')

    try:
        max_parts = int(data.get('max_path_parts', 0))
    except (TypeError, ValueError) as exc:
        raise TrailConfigError('max_path_parts must be an integer') from exc
    if max_parts < 0:
        raise TrailConfigError('max_path_parts must not be negative')

    timeout = data.get('cache_timeout')
    if timeout is not None and (not isinstance(timeout, int) or timeout < 0):
        raise TrailConfigError('cache_timeout must be a non-negative integer or null')
