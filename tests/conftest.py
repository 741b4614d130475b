import asyncio

import pytest

from campus.moderation.models import RemoteClassification


class FakeRemote:
    """Scriptable stand-in for a remote moderation classifier."""

    def __init__(self, result=None, error=None, delay=0.0):
        self.result = result or RemoteClassification(flagged=False)
        self.error = error
        self.delay = delay
        self.calls = []

    async def classify(self, text):
        self.calls.append(text)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


# Run anyio-marked tests on asyncio only (avoid requiring 'trio')
@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_remote():
    return FakeRemote


@pytest.fixture
def fake_remote():
    return FakeRemote()
