from types import SimpleNamespace

import pytest

from app.core import db_check


async def test_zero_retries_gives_up_without_connecting(monkeypatch):
    attempts = []
    monkeypatch.setattr(db_check, "engine", SimpleNamespace(connect=lambda: attempts.append(1)))

    with pytest.raises(RuntimeError):
        await db_check.wait_for_db(retries=0)

    assert attempts == []


async def test_retries_default_to_settings(monkeypatch):
    attempts = []

    def failing_connect():
        attempts.append(1)
        raise ConnectionError("db down")

    monkeypatch.setattr(db_check, "engine", SimpleNamespace(connect=failing_connect))
    monkeypatch.setattr(db_check.settings, "DB_CONNECT_RETRIES", 3)

    with pytest.raises(RuntimeError):
        await db_check.wait_for_db(delay=0)

    assert len(attempts) == 3
