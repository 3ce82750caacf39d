"""Project settings tests."""

from __future__ import annotations

from django.conf import settings

from menu_trail_site import settings as site_settings


def test_pytest_import_counts_as_test_run():
    assert site_settings.RUNNING_TESTS is True
    assert settings.SECRET_KEY
