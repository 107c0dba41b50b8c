"""
Per-key asyncio locks that are dropped once nobody holds or waits on them.

Used by the ledger and the order processor to serialize work per user
without keeping one lock per user ever seen.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict


class KeyedLock:
    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._holders: Dict[str, int] = {}  # key -> holders + waiters

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        if key not in self._locks:
            self._locks[key] = asyncio.Lock()
        lock = self._locks[key]
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if self._holders[key] == 0:
                del self._holders[key]
                del self._locks[key]

    def __len__(self) -> int:
        return len(self._locks)
