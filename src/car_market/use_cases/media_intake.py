from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from car_market.ports.media_storage import MediaStorage


@dataclass(frozen=True, slots=True)
class UploadedImage:
    """An uploaded file as handed over by the protocol layer."""

    filename: str
    content: BinaryIO


class MediaIntake:
    """
    Turns an optional upload into the list of image references kept on a listing.

    No type or size validation happens here; that belongs to the upload
    handling in front of this service.
    """

    def __init__(self, media_storage: MediaStorage) -> None:
        self._storage = media_storage

    def intake(self, upload: UploadedImage | None) -> list[str]:
        """
        Store the upload, if any.

        Args:
            upload: Uploaded image, or None when the request carried no file

        Returns:
            [] without a file, otherwise a single-element list with the stored reference

        Raises:
            PersistenceError: If the file could not be written
        """
        # Multipart clients send an empty part with no filename when no file is chosen
        if upload is None or not upload.filename:
            return []

        return [self._storage.store(upload.filename, upload.content)]
