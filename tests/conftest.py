from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def restore_fluentsql_logger() -> Generator[logging.Logger, None, None]:
    """Undo handler, level, and propagation changes made to the ``fluentsql`` logger."""
    logger = logging.getLogger("fluentsql")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
