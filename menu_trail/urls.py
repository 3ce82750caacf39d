"""URL configuration for the menu_trail app.

The page view matches every path, so include these patterns last.
"""

from django.urls import path, re_path

from . import views

app_name = 'menu_trail'

urlpatterns = [
    path('', views.page, name='home'),
    re_path(r'^(?P<path>.+)$', views.page, name='page'),
]
