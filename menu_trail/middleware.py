from __future__ import annotations

from typing import Callable

from django.http import HttpRequest, HttpResponse
from django.utils.functional import SimpleLazyObject

from .services import build_resolver, get_trail_config


class MenuTrailMiddleware:
    """Attach a lazily built active trail resolver to every request.

    The resolver is only assembled when a view, context processor or
    template first touches ``request.menu_trail``, so requests that render
    no menu pay nothing. It must run after ``LocaleMiddleware`` so the
    request language is known.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.menu_trail = SimpleLazyObject(lambda: build_resolver(request, get_trail_config()))
        return self.get_response(request)
