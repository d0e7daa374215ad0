"""Tests for settings loading and the application clock."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from portal.config import get_settings, reset_settings_cache
from portal.utils import now_in_app_timezone, parse_timezone


@pytest.fixture()
def env(monkeypatch):
    yield monkeypatch
    monkeypatch.undo()
    reset_settings_cache()


def test_reset_settings_cache_reloads_timezone(env) -> None:
    assert now_in_app_timezone().utcoffset() == timedelta(hours=7)

    env.setenv("APP_TIMEZONE", "UTC-3")
    reset_settings_cache()

    assert get_settings().app_timezone == "UTC-3"
    assert now_in_app_timezone().utcoffset() == timedelta(hours=-3)


@pytest.mark.parametrize(
    ("name", "offset"),
    [
        ("UTC+7", timedelta(hours=7)),
        ("GMT-03:30", timedelta(hours=-3, minutes=-30)),
        ("utc+0545", timedelta(hours=5, minutes=45)),
        ("Not/AZone", timedelta(hours=7)),
        ("", timedelta(hours=7)),
    ],
)
def test_parse_timezone(name: str, offset: timedelta) -> None:
    assert datetime(2025, 1, 1, tzinfo=parse_timezone(name)).utcoffset() == offset
