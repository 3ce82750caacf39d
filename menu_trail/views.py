"""Django views for the menu_trail app.

The app only ships a catch-all page view. It renders the configured menu
so the active trail of any site path, aliased or not, can be inspected.
"""

from __future__ import annotations

from django.conf import settings
from django.db.models import Q
from django.http import HttpRequest, HttpResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from .models import PathAlias
from .services import request_language
from .trail.paths import canonicalize_url


@require_GET
def page(request: HttpRequest, path: str = '') -> HttpResponse:
    """Render a placeholder page for ``path`` with the site menu."""

    language = request_language(request)
    title = canonicalize_url(request.path_info, language)
    alias = (
        PathAlias.objects
        .filter(Q(language='') | Q(language=language), alias=title)
        .order_by('-language', 'id')
        .first()
    )
    if alias is not None:
        title = alias.path

    return render(
        request,
        'menu_trail/page.html',
        {
            'title': title,
            'menu_name': getattr(settings, 'MENU_TRAIL_PAGE_MENU', 'main'),
        },
    )
