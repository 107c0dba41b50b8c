"""
Tests for alfa_trading/services/keyed_lock.py
"""

import asyncio

import pytest

from alfa_trading.services.keyed_lock import KeyedLock


class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_entry_dropped_after_release(self):
        locks = KeyedLock()
        async with locks.hold("alice"):
            assert len(locks) == 1
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_entry_dropped_when_body_raises(self):
        locks = KeyedLock()
        with pytest.raises(RuntimeError):
            async with locks.hold("alice"):
                raise RuntimeError("boom")
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_same_key_serializes(self):
        """Concurrency: holders of one key never overlap."""
        locks = KeyedLock()
        active = 0
        peak = 0

        async def worker():
            nonlocal active, peak
            async with locks.hold("alice"):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0)
                active -= 1

        await asyncio.gather(*(worker() for _ in range(10)))
        assert peak == 1
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_waiter_keeps_entry_alive(self):
        """Edge case: the lock survives the first release while another task waits on it."""
        locks = KeyedLock()
        order = []

        async def second():
            async with locks.hold("alice"):
                order.append("second")

        async with locks.hold("alice"):
            task = asyncio.create_task(second())
            await asyncio.sleep(0)
            order.append("first")
        assert len(locks) == 1

        await task
        assert order == ["first", "second"]
        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_different_keys_do_not_block(self):
        locks = KeyedLock()
        async with locks.hold("alice"):
            async with locks.hold("bob"):
                assert len(locks) == 2
        assert len(locks) == 0
