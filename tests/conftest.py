from __future__ import annotations

from datetime import date, datetime

import pytest


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 2)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 2, 9, 15, 0)
