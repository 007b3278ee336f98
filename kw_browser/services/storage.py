from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class StorageBackend(ABC):
    """
    Where saved keyword views are written. Paths are relative to the backend.
    """

    @abstractmethod
    def write_text(self, path: str, text: str) -> None:
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_files(self, suffix: str = "") -> List[str]:
        """Saved file names ending with suffix, sorted."""
        pass


class LocalFileSystemStorage(StorageBackend):
    """
    Saved views as UTF-8 files in one flat export directory.
    """

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    def _resolve(self, path: str) -> Path:
        # Only plain file names directly under root
        full_path = (self.root / path).resolve()
        if full_path.parent != self.root:
            raise ValueError(f"Access denied: {path}")
        return full_path

    def write_text(self, path: str, text: str) -> None:
        self._resolve(path).write_text(text, encoding="utf-8")

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def list_files(self, suffix: str = "") -> List[str]:
        return sorted(f.name for f in self.root.glob(f"*{suffix}") if f.is_file())
