# gitcrypt_demo/core/resource_store.py

import logging
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

from .file_reference import FileReference

logger = logging.getLogger(__name__)


class ResourceStore:
    """
    A read-only set of bundled resources, addressed by filename.

    The resolver only ever talks to this interface, so it never needs to know
    whether the bytes come from disk, a frozen bundle or memory.
    """

    def lookup(self, reference: FileReference) -> Optional[bytes]:
        """Returns the resource's bytes, or None if it is not part of the bundle."""
        raise NotImplementedError

    def names(self) -> List[str]:
        """The filenames available in this store, sorted."""
        raise NotImplementedError

    def __contains__(self, filename: str) -> bool:
        return FileReference.from_filename(filename).filename in self.names()


class MappingResourceStore(ResourceStore):
    """An in-memory store built from a filename -> bytes mapping."""

    def __init__(self, resources: Mapping[str, bytes]):
        # A proxy over a private copy: later changes to the caller's dict do not leak in.
        self._resources = MappingProxyType(dict(resources))

    def lookup(self, reference: FileReference) -> Optional[bytes]:
        return self._resources.get(reference.filename)

    def names(self) -> List[str]:
        return sorted(self._resources)


class DirectoryResourceStore(ResourceStore):
    """
    Resources stored as plain files inside a single directory, which is how
    they ship both in the source tree and inside a PyInstaller bundle.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root).resolve()

    def _path_for(self, reference: FileReference) -> Optional[Path]:
        path = (self.root / reference.filename).resolve()
        # Never serve anything from outside the resource directory.
        if path.parent != self.root:
            return None
        return path

    def lookup(self, reference: FileReference) -> Optional[bytes]:
        # Resolving or stat-ing a bad name (too long, NUL byte, no permission) can fail
        # before any read happens; all of it means "not in the bundle".
        try:
            path = self._path_for(reference)
            if path is None or not path.is_file():
                return None
            return path.read_bytes()
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read resource '{reference.filename}': {e}")
            return None

    def names(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir() if p.is_file())
