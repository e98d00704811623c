# gitcrypt_demo/core/content_resolver.py

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .decoding import DEFAULT_ENCODING, Decoded, decode_text, first_line
from .file_reference import FileReference
from .resource_store import ResourceStore

logger = logging.getLogger(__name__)

FILE_MISSING_MESSAGE = "File missing!"
ENCRYPTED_MESSAGE_TEMPLATE = "file {filename} looks encrypted"


class LookupStatus(Enum):
    """What happened when a single file was looked up and decoded."""
    TEXT = auto()
    UNDECODABLE = auto()
    MISSING = auto()


@dataclass(frozen=True)
class LineLookup:
    """The outcome of reading the first line of one bundled file."""
    filename: str
    status: LookupStatus
    line: Optional[str] = None
    reason: str = ""

    @property
    def has_text(self) -> bool:
        return self.status is LookupStatus.TEXT


class FileContentResolver:
    """
    Decides which line of text to display: the first line of the primary
    (secret) file if it is readable, otherwise the first line of the fallback
    file, otherwise a placeholder describing why nothing could be read.

    Nothing is ever raised to the caller, so a view can show the result as-is.
    """

    def __init__(self, store: ResourceStore, encoding: str = DEFAULT_ENCODING):
        self.store = store
        self.encoding = encoding

    def read_first_line(self, filename: str) -> LineLookup:
        """Locates a bundled file and returns its first line, if it is text."""
        reference = FileReference.from_filename(filename)
        data = self.store.lookup(reference)
        if data is None:
            logger.warning(f"Cannot find file {filename} in bundle.")
            return LineLookup(filename, LookupStatus.MISSING, reason="not found in bundle")

        result = decode_text(data, self.encoding)
        if isinstance(result, Decoded):
            return LineLookup(filename, LookupStatus.TEXT, line=first_line(result.text))

        logger.warning(f"File {filename} is not a text file: {result.reason}.")
        return LineLookup(filename, LookupStatus.UNDECODABLE, reason=result.reason)

    def resolve(self, primary_file: str, fallback_file: str) -> str:
        """
        Returns the string to display for a primary/fallback pair.

        Args:
            primary_file: The preferred file, e.g. 'Secret.txt'.
            fallback_file: The plaintext stand-in, e.g. 'Unsecret.txt'.
        """
        primary = self.read_first_line(primary_file)
        if primary.has_text:
            logger.debug(f"Showing first line of primary file {primary_file}.")
            return primary.line

        fallback = self.read_first_line(fallback_file)
        if fallback.has_text:
            logger.debug(f"Primary file {primary_file} unavailable; showing {fallback_file}.")
            return fallback.line
        if fallback.status is LookupStatus.MISSING:
            return FILE_MISSING_MESSAGE
        return ENCRYPTED_MESSAGE_TEMPLATE.format(filename=fallback_file)
