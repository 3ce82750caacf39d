"""Project URL configuration.

Site pages are served under language prefixes (none for the default
language) so the active trail can be resolved per language.
"""

from django.conf.urls.i18n import i18n_patterns
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
]

urlpatterns += i18n_patterns(
    path('', include('menu_trail.urls')),
    prefix_default_language=False,
)
