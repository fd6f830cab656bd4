import threading
import time

import pytest

from curveforge.awaitable import async_call


def _slow_add(a, b):
    time.sleep(0.15)
    return a + b


def _slow_greeting():
    time.sleep(0.1)
    return "hello from async_call"


@pytest.mark.asyncio
async def test_sum_with_arguments():
    assert await async_call(_slow_add, 20, 22) == 42


@pytest.mark.asyncio
async def test_string_result():
    assert await async_call(_slow_greeting) == "hello from async_call"


@pytest.mark.asyncio
async def test_void_call_runs_side_effect():
    done = []

    def work():
        time.sleep(0.05)
        done.append(True)

    result = await async_call(work)
    assert result is None
    assert done == [True]


@pytest.mark.asyncio
async def test_runs_on_another_thread():
    caller = threading.get_ident()
    worker = await async_call(threading.get_ident)
    assert worker != caller


@pytest.mark.asyncio
async def test_exception_is_reraised():
    def fail():
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        await async_call(fail)


@pytest.mark.asyncio
async def test_lazy_until_awaited():
    calls = []
    pending = async_call(calls.append, 1)
    assert calls == []
    await pending
    assert calls == [1]