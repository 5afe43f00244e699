# site_distill/crawler/frontier.py
"""
BFS frontier shared by the crawler workers.
"""
from __future__ import annotations

import asyncio
from typing import FrozenSet, Optional, Set


class Frontier:
    """FIFO queue of pending URLs plus the set of URLs already claimed.

    A URL may sit in the queue several times; :meth:`claim` is what guarantees
    it is processed once. Workers must call :meth:`task_done` for every URL
    they take out, claimed or not, so that :meth:`join` returns exactly when
    the crawl is exhausted.
    """

    def __init__(self, seed: str) -> None:
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._visited: Set[str] = set()
        self._claimed = 0
        self.offer(seed)

    def offer(self, url: str) -> bool:
        """Append *url* unless it was already claimed. Returns True if queued."""
        if url in self._visited:
            return False
        self._queue.put_nowait(url)
        return True

    async def next(self) -> str:
        return await self._queue.get()

    def next_nowait(self) -> Optional[str]:
        """Pop the front of the queue, ``None`` when it is empty."""
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            return None

    def claim(self, url: str) -> Optional[int]:
        """Mark *url* visited and return its claim sequence number.

        Returns ``None`` when another worker already claimed it. There is no
        ``await`` between the check and the mark, so the transition is atomic
        for every task on the loop.
        """
        if url in self._visited:
            return None
        self._visited.add(url)
        seq = self._claimed
        self._claimed += 1
        return seq

    def task_done(self) -> None:
        self._queue.task_done()

    async def join(self) -> None:
        await self._queue.join()

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    @property
    def claimed(self) -> int:
        return self._claimed

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def __len__(self) -> int:
        return self._queue.qsize()
