from __future__ import annotations

from abc import ABC, abstractmethod
from typing import BinaryIO


class MediaStorage(ABC):
    """
    Port for durable storage of uploaded files.

    Implementations choose the stored name and return it as the file's
    reference. Failures must surface as PersistenceError.
    """

    @abstractmethod
    def store(self, original_filename: str, content: BinaryIO) -> str:
        """
        Write the uploaded bytes and return the stored reference.

        Args:
            original_filename: Client-supplied filename (only its extension is kept)
            content: Readable binary stream positioned at the start of the upload

        Returns:
            Reference string kept on the listing
        """
        ...
