"""Database models for the menu_trail app.

A site stores named menus and their links, plus path aliases that give
system paths friendlier, optionally per-language, URLs. Links reference
their parent by ``link_id`` so menus can be imported and exported without
depending on database primary keys.
"""

from __future__ import annotations

from django.db import models

from .trail.paths import canonicalize_url


class Menu(models.Model):
    """A named navigation menu such as ``main`` or ``footer``."""

    name = models.SlugField(max_length=64, unique=True)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ['name']

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return self.title or self.name


class MenuLink(models.Model):
    """A single entry of a menu, optionally nested under another entry."""

    menu = models.ForeignKey(Menu, on_delete=models.CASCADE, related_name='links')
    link_id = models.CharField(max_length=255, unique=True)
    title = models.CharField(max_length=255)
    url = models.CharField(max_length=2048, blank=True)
    route_name = models.CharField(max_length=255, blank=True)
    parent = models.CharField(max_length=255, blank=True, db_index=True)
    weight = models.IntegerField(default=0)
    enabled = models.BooleanField(default=True)
    language = models.CharField(max_length=16, blank=True, db_index=True)

    class Meta:
        ordering = ['menu', 'weight', 'title', 'link_id']

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return f"{self.menu.name} · {self.title}"


class PathAlias(models.Model):
    """Maps a system path to an alias, for one language or for all."""

    path = models.CharField(max_length=2048, db_index=True)
    alias = models.CharField(max_length=2048, db_index=True)
    language = models.CharField(max_length=16, blank=True, db_index=True)

    class Meta:
        ordering = ['id']
        verbose_name_plural = 'path aliases'

    def save(self, *args, **kwargs) -> None:
        # Lookups in services compare canonical forms only.
        self.path = canonicalize_url(self.path)
        self.alias = canonicalize_url(self.alias)
        super().save(*args, **kwargs)

    def __str__(self) -> str:  # pragma: no cover - convenience display
        return f"{self.alias} → {self.path}"
