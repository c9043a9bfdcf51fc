import asyncio

import pytest

from tickwork import MemoryDocument


@pytest.fixture
def loop():
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def drain(loop):
    """Run the loop for one idle turn so pending publishes fire."""

    def _drain():
        loop.run_until_complete(asyncio.sleep(0))

    return _drain


@pytest.fixture
def document():
    return MemoryDocument()
