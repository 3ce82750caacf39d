from django.apps import AppConfig


class MenuTrailConfig(AppConfig):
    """Configuration for the menu_trail Django app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'menu_trail'

    def ready(self) -> None:
        from . import signals  # noqa: F401
