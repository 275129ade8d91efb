"""
Blob Store
Key -> bytes storage for page images
"""

from abc import ABC, abstractmethod
from pathlib import Path
import logging

from ims_release.errors import BlobKeyExistsError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


class BlobStore(ABC):
    """Interface of the page image storage"""

    @abstractmethod
    def set(self, key: str, data: bytes) -> None:
        """Store data under a new key; existing keys are never overwritten"""

    @abstractmethod
    def get(self, key: str) -> bytes:
        """Return the bytes stored under key"""

    @abstractmethod
    def unset(self, key: str) -> None:
        """Remove key"""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Check whether key holds data"""


class FileBlobStore(BlobStore):
    """
    Blob store backed by a directory tree

    Key "1/2/001.png" is stored at "<root>/1/2/001.png".
    """

    def __init__(self, root):
        self.root = Path(root).resolve()

    def _path(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if path == self.root or self.root not in path.parents:
            raise ValidationError(f"Invalid blob key: {key!r}.")
        return path

    def set(self, key: str, data: bytes) -> None:
        path = self._path(key)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "xb") as f:
                f.write(data)
        except FileExistsError:
            raise BlobKeyExistsError()
        except OSError as e:
            logger.error(f"Failed to write blob {key}: {e}")
            raise StorageError()
        logger.debug(f"Stored blob {key} ({len(data)} bytes)")

    def get(self, key: str) -> bytes:
        path = self._path(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise NotFoundError(f"No stored file for {key}.")
        except OSError as e:
            logger.error(f"Failed to read blob {key}: {e}")
            raise StorageError()

    def unset(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            raise NotFoundError(f"No stored file for {key}.")
        except OSError as e:
            logger.error(f"Failed to delete blob {key}: {e}")
            raise StorageError()
        logger.debug(f"Removed blob {key}")

    def exists(self, key: str) -> bool:
        return self._path(key).is_file()
