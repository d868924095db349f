from __future__ import annotations

from datetime import date

import pytest

from timesheet_tracker.main import create_app


@pytest.fixture
def fixed_today() -> date:
    # Wednesday
    return date(2026, 1, 14)


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
