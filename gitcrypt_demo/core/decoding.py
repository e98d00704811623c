# gitcrypt_demo/core/decoding.py

from dataclasses import dataclass
from typing import Union

# Every file encrypted by git-crypt starts with this header: "GITCRYPT" framed by NUL bytes.
GITCRYPT_MARKER = b"\x00GITCRYPT\x00"

DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class Decoded:
    """The bytes were readable text."""
    text: str


@dataclass(frozen=True)
class DecodeFailure:
    """The bytes could not be read as text. `reason` is for the logs only."""
    reason: str


# Decoding is an ordinary branch of the resolution flow, so it returns a
# result variant instead of raising.
DecodeResult = Union[Decoded, DecodeFailure]


def looks_encrypted(data: bytes) -> bool:
    """True if the data carries the git-crypt header."""
    return data.startswith(GITCRYPT_MARKER)


def decode_text(data: bytes, encoding: str = DEFAULT_ENCODING) -> DecodeResult:
    """
    Attempts to interpret raw file bytes as text.

    A decoded NUL character never appears in a text file, so text containing
    one is rejected as binary. The check runs on the decoded characters, not
    the raw bytes, because UTF-16 and UTF-32 text is full of zero bytes.
    """
    if looks_encrypted(data):
        return DecodeFailure("data starts with the git-crypt header")
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as e:
        return DecodeFailure(f"not valid {encoding} text ({e.reason} at byte {e.start})")
    except LookupError:
        return DecodeFailure(f"unknown text encoding '{encoding}'")
    if "\x00" in text:
        return DecodeFailure("data contains NUL characters")
    return Decoded(text)


def first_line(text: str) -> str:
    """Everything up to, but not including, the first newline."""
    return text.split("\n", 1)[0]
