"""Signal handlers keeping the trail cache in step with menu data."""

from __future__ import annotations

from django.core.signals import setting_changed
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .models import Menu, MenuLink, PathAlias
from .services import bump_generation, get_trail_config


@receiver(post_save, sender=Menu)
@receiver(post_save, sender=MenuLink)
@receiver(post_save, sender=PathAlias)
@receiver(post_delete, sender=Menu)
@receiver(post_delete, sender=MenuLink)
@receiver(post_delete, sender=PathAlias)
def invalidate_active_trails(sender, **kwargs) -> None:
    bump_generation()


@receiver(setting_changed)
def reset_trail_config(sender, setting: str, **kwargs) -> None:
    if setting in ('MENU_TRAIL', 'MENU_TRAIL_CONFIG_FILE', 'CACHES'):
        get_trail_config.cache_clear()
