"""
Blob storage backends for Study Tracker
Key-value string storage used to persist the serialized task list

Usage:
    # File backed (default, one JSON file per key under the storage directory)
    store = get_blob_store(config)

    # In memory (tests, embedding)
    store = MemoryBlobStore()
"""

import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from .config import Config

_KEY_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class BlobStore(ABC):
    """Abstract base class for key-value blob storage"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under key, or None if absent"""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Replace the blob stored under key"""
        pass


class MemoryBlobStore(BlobStore):
    """Dictionary backed blob store"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._blobs: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._blobs


class FileBlobStore(BlobStore):
    """One JSON file per key inside a directory"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        if not _KEY_RE.match(key):
            raise ValueError(f"Invalid blob key: {key!r}")
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        # Write beside the target then swap it in, so readers never see a partial blob
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.directory)
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


def get_blob_store(config: Config) -> BlobStore:
    """
    Factory function to get the configured blob store.

    Uses the in-memory store when storage_backend is "memory", otherwise a
    file store rooted at the configured storage directory.
    """
    backend = str(config.get("storage_backend", default="file")).lower()
    if backend == "memory":
        return MemoryBlobStore()
    if backend != "file":
        raise ValueError(f"Unknown storage backend: {backend}")
    return FileBlobStore(config.get_storage_directory())
