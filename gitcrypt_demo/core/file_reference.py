# gitcrypt_demo/core/file_reference.py

from dataclasses import dataclass
from pathlib import PurePosixPath


@dataclass(frozen=True)
class FileReference:
    """
    A filename split into its base name and extension, the way a bundled
    resource is looked up (e.g. 'Secret.txt' -> ('Secret', 'txt')).
    """
    base_name: str
    extension: str
    # Set for names like 'Secret.' whose extension is empty but whose dot is real.
    trailing_dot: bool = False

    @classmethod
    def from_filename(cls, filename: str) -> "FileReference":
        """
        Builds a reference from a filename string.

        Only the last path component is kept. The extension is whatever follows
        the last '.', and a name without a '.' has an empty extension.
        """
        # Windows-style separators are normalised so 'docs\\Secret.txt' behaves like 'docs/Secret.txt'.
        name = PurePosixPath(filename.replace("\\", "/")).name
        base_name, dot, extension = name.rpartition(".")
        if not dot:
            return cls(base_name=name, extension="")
        return cls(base_name=base_name, extension=extension, trailing_dot=not extension)

    @property
    def filename(self) -> str:
        """The base name and extension joined back together."""
        if not self.extension and not self.trailing_dot:
            return self.base_name
        return f"{self.base_name}.{self.extension}"

    def __str__(self) -> str:
        return self.filename
