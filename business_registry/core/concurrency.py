import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class MutationGate:
    """
    Serializes registry mutations.

    Every create/update/delete reads the whole document, changes it and
    writes it back. Two such cycles overlapping would let the second write
    drop the first one's change, so all of them run inside this gate.
    Reads never enter it.
    """

    def __init__(self):
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def exclusive(self) -> AsyncIterator[None]:
        async with self._lock:
            yield

    @property
    def busy(self) -> bool:
        return self._lock.locked()
