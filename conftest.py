"""Shared fixtures for the Polyglot test suite."""
import asyncio
import pytest

import ratelimit


@pytest.fixture(autouse=True)
def reset_rate_limits():
    ratelimit.rate_limit_reset()
    yield
    ratelimit.rate_limit_reset()


@pytest.fixture()
def make_detector():
    """Build a fake external detector that records the texts it was asked about.

    ``answer`` is returned as-is, ``raises`` is raised, and ``delay`` makes the
    detector sleep first (to exercise the timeout).
    """
    def _make(answer=None, raises=None, delay=0.0):
        calls = []

        async def _detect(text):
            calls.append(text)
            if delay:
                await asyncio.sleep(delay)
            if raises is not None:
                raise raises
            return answer

        _detect.calls = calls
        return _detect
    return _make
