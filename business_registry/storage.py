"""
Record store for the business registry.

The whole registry lives in one pretty-printed JSON array. Every operation
reads the full document and every mutation writes it back; there is no
row-level access. Writes go to a temporary file in the same directory that is
then moved over the document, so a reader sees either the old or the new
registry, never a partial one.
"""
import json
import logging
import uuid
from pathlib import Path
from typing import List, Sequence, Union

import aiofiles
import aiofiles.os

from business_registry.core.exceptions import StorageError
from business_registry.models.business import BusinessRecord

logger = logging.getLogger(__name__)


class JsonRecordStore:
    """Owns the on-disk registry document"""

    def __init__(self, path: Union[str, Path], read_failure_as_empty: bool = False):
        self.path = Path(path)
        self.read_failure_as_empty = read_failure_as_empty

    async def load_all(self) -> List[BusinessRecord]:
        """
        Read every record in document order.

        A missing document is an empty registry. An unreadable or corrupt one
        raises StorageError unless the store was built with
        ``read_failure_as_empty``.
        """
        if not await aiofiles.os.path.exists(self.path):
            return []

        try:
            async with aiofiles.open(self.path, mode="r", encoding="utf-8") as f:
                content = await f.read()
            if not content.strip():
                return []
            raw = json.loads(content)
            if not isinstance(raw, list):
                raise ValueError("registry document must be a JSON array")
            return [BusinessRecord.model_validate(item) for item in raw]
        except (OSError, ValueError) as e:
            if self.read_failure_as_empty:
                logger.error(f"Error reading businesses from {self.path}, serving empty registry: {e}")
                return []
            logger.error(f"Error reading businesses from {self.path}: {e}")
            raise StorageError(f"Could not read registry document: {e}") from e

    async def save_all(self, records: Sequence[BusinessRecord]) -> None:
        """Replace the document with ``records``"""
        payload = json.dumps(
            [record.to_document() for record in records],
            indent=2,
            ensure_ascii=False,
        )
        tmp_path = self.path.with_name(f".{self.path.name}.{uuid.uuid4().hex}.tmp")

        try:
            await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
            async with aiofiles.open(tmp_path, mode="w", encoding="utf-8") as f:
                await f.write(payload)
            await aiofiles.os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing businesses to {self.path}: {e}")
            await self._discard(tmp_path)
            raise StorageError(f"Could not write registry document: {e}") from e

        logger.debug(f"Saved {len(records)} businesses to {self.path}")

    async def ensure_initialized(self, seed: Sequence[BusinessRecord]) -> bool:
        """Write ``seed`` when no document exists yet. Returns True if it did."""
        await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
        if await aiofiles.os.path.exists(self.path):
            return False

        await self.save_all(seed)
        logger.info(f"Sample data initialized at {self.path} ({len(seed)} businesses)")
        return True

    async def _discard(self, tmp_path: Path) -> None:
        try:
            if await aiofiles.os.path.exists(tmp_path):
                await aiofiles.os.remove(tmp_path)
        except OSError as e:
            logger.warning(f"Could not remove temporary file {tmp_path}: {e}")
