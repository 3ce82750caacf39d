"""URL canonicalization and path-prefix helpers.

Menu link targets and candidate URLs are compared by plain string equality,
so both sides must be reduced to the same representation first: query
strings and fragments are dropped, trailing slashes removed and, when a
language is active, its ``/<language>`` path prefix resolved away.
"""

from __future__ import annotations

from typing import Iterable, List
from urllib.parse import unquote, urlsplit


def canonicalize_url(
    url: str,
    language: str | None = None,
    *,
    strip_language_prefix: bool = True,
) -> str:
    """Return the comparable form of ``url``.

    Parameters
    ----------
    url:
        A site-relative path or an absolute URL.
    language:
        Active language code. When given and ``strip_language_prefix`` is
        set, a leading ``/<language>`` segment is removed.
    strip_language_prefix:
        Disable to keep language prefixes significant.

    Returns
    -------
    str
        ``/`` for an empty path, otherwise the percent-decoded path without
        trailing slash, prefixed with the lowercased scheme and host for absolute URLs.
    """

    parts = urlsplit((url or '').strip())
    # Request paths arrive decoded; stored and reversed URLs may be encoded.
    path = unquote(parts.path) or '/'
    if not path.startswith('/'):
        path = '/' + path
    if path != '/':
        path = path.rstrip('/') or '/'

    if language and strip_language_prefix:
        path = strip_language(path, language)

    if parts.netloc:
        scheme = (parts.scheme or 'https').lower()
        return f"{scheme}://{parts.netloc.lower()}{'' if path == '/' else path}"
    return path


def strip_language(path: str, language: str) -> str:
    """Remove a leading ``/<language>`` segment from an already clean path."""

    prefix = '/' + language.lower()
    lowered = path.lower()
    if lowered == prefix:
        return '/'
    if lowered.startswith(prefix + '/'):
        return path[len(prefix):]
    return path


def path_prefixes(path: str, max_parts: int = 0) -> List[str]:
    """Return the ancestor paths of ``path`` and the path itself, shortest first.

    ``/a/b/c`` yields ``['/a', '/a/b', '/a/b/c']`` and ``/`` yields ``['/']``.
    A positive ``max_parts`` keeps only the deepest ``max_parts`` entries.
    """

    segments = [segment for segment in path.split('/') if segment]
    if not segments:
        return ['/']

    prefixes = ['/' + '/'.join(segments[:depth]) for depth in range(1, len(segments) + 1)]
    if max_parts > 0:
        prefixes = prefixes[-max_parts:]
    return prefixes


def unique(values: Iterable[str]) -> List[str]:
    """De-duplicate ``values`` keeping the first occurrence of each."""

    seen: set[str] = set()
    ordered: List[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return ordered
