"""Tests for running coroutines from synchronous code."""

import asyncio

import pytest

from juck.utils.async_utils import safe_async_run


async def _answer() -> int:
    await asyncio.sleep(0)
    return 42


async def _boom() -> None:
    raise RuntimeError("boom")


class TestSafeAsyncRun:
    """Test safe_async_run outside and inside a running loop."""

    def test_returns_result(self):
        assert safe_async_run(_answer()) == 42

    def test_propagates_exceptions(self):
        with pytest.raises(RuntimeError, match="boom"):
            safe_async_run(_boom())

    def test_cancels_leftover_tasks(self):
        started = []
        cancelled = []

        async def straggler() -> None:
            started.append(True)
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.append(True)
                raise

        async def main() -> str:
            asyncio.get_running_loop().create_task(straggler())
            await asyncio.sleep(0.01)
            return "done"

        assert safe_async_run(main()) == "done"
        assert started and cancelled

    @pytest.mark.asyncio
    async def test_runs_in_thread_when_loop_is_running(self):
        assert safe_async_run(_answer()) == 42
