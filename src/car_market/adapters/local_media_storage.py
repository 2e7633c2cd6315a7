"""Filesystem implementation of MediaStorage."""

from __future__ import annotations

import logging
import secrets
import shutil
import time
from pathlib import Path, PurePath
from typing import BinaryIO, Callable

from car_market.domain.errors import PersistenceError
from car_market.ports.media_storage import MediaStorage

logger = logging.getLogger(__name__)


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class LocalMediaStorage(MediaStorage):
    """
    Stores uploads as flat files in a single upload directory.

    Stored names are ``<epoch-millis>-<8 hex chars><original extension>``,
    e.g. ``1627382938473-9f86d081.jpg``. The random token keeps uploads
    landing in the same millisecond apart, and files are opened in
    exclusive-create mode so an existing file is never overwritten.
    """

    def __init__(
        self,
        root: Path,
        clock: Callable[[], int] = _epoch_millis,
        token: Callable[[], str] = lambda: secrets.token_hex(4),
    ) -> None:
        """
        Args:
            root: Upload directory (created on first store if missing)
            clock: Millisecond timestamp source
            token: Random suffix source
        """
        self._root = root
        self._clock = clock
        self._token = token

    @property
    def root(self) -> Path:
        return self._root

    def store(self, original_filename: str, content: BinaryIO) -> str:
        # Only the extension survives; directory parts of the client name are dropped
        extension = PurePath(original_filename).suffix.lower()
        name = f"{self._clock()}-{self._token()}{extension}"
        path = self._root / name

        try:
            self._root.mkdir(parents=True, exist_ok=True)
            with path.open("xb") as target:
                shutil.copyfileobj(content, target)
        except OSError as exc:
            logger.error(
                "Failed to store uploaded file",
                exc_info=exc,
                extra={"original_filename": original_filename, "stored_name": name},
            )
            raise PersistenceError("Failed to store uploaded image", reason=str(exc)) from exc

        logger.info("Stored uploaded file", extra={"stored_name": name})
        return name
