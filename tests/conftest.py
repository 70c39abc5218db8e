"""Shared test fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest


@pytest.fixture
def afternoon():
    return datetime(2026, 2, 25, 18, 21, 42)


@pytest.fixture
def new_year_sunday():
    return date(2023, 1, 1)


@pytest.fixture
def cet_morning():
    return datetime(2024, 7, 4, 9, 5, 7, tzinfo=timezone(timedelta(hours=2), "CEST"))
