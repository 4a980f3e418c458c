from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest

from fluentsql.adapters.aiosqlite import AiosqliteGateway


@pytest.fixture
async def aiosqlite_gateway() -> AsyncGenerator[AiosqliteGateway, None]:
    async with AiosqliteGateway() as gateway:
        await gateway(
            "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, dept TEXT, salary REAL)", []
        )
        yield gateway
