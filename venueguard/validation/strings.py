"""Byte-level cleaning of untrusted text before it goes on the wire.

The rules are a fixed table shared with other clients, so they are applied
to the UTF-8 bytes directly instead of through Unicode normalization:

- bytes 0-8, 11, 12, 14-31 and 127 become a single space
- ``\\r`` (13) is dropped, ``\\t`` and ``\\n`` are kept
- U+2028..U+202E (``E2 80 A8``..``E2 80 AE``: line/paragraph separators and
  bidi embedding marks) are dropped
- U+0333, U+033F and U+030A (``CC B3``, ``CC BF``, ``CC 8A``) are dropped

The result is cut to ``MAX_STRING_LENGTH`` characters and trimmed.
"""
import logging
from typing import Union

from venueguard.core.exceptions import InvalidUtf8Error

logger = logging.getLogger(__name__)

MAX_STRING_LENGTH = 35000

_SPACE = 0x20
_CARRIAGE_RETURN = 0x0D

_CONTROL_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B, 0x0C] + list(range(0x0E, 0x20)) + [0x7F]
)

_DROPPED_SEQUENCES = frozenset(
    [bytes([0xE2, 0x80, trail]) for trail in range(0xA8, 0xAF)]
    + [b"\xcc\xb3", b"\xcc\xbf", b"\xcc\x8a"]
)


def utf8_char_len(lead_byte: int) -> int:
    """Length in bytes of the UTF-8 sequence starting with ``lead_byte``."""
    if lead_byte < 0x80:
        return 1
    if lead_byte & 0xE0 == 0xC0:
        return 2
    if lead_byte & 0xF0 == 0xE0:
        return 3
    if lead_byte & 0xF8 == 0xF0:
        return 4
    # Continuation or invalid lead byte
    return 1


def _to_utf8_bytes(value: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidUtf8Error(f"String is not encodable as UTF-8: {e.reason}") from e
    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
        try:
            data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8Error(
                f"Invalid UTF-8 byte at position {e.start}: {e.reason}"
            ) from e
        return data
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")


def clean_input_string(value: Union[str, bytes, bytearray]) -> str:
    """
    Sanitize untrusted text.

    Args:
        value: Text as ``str`` or raw UTF-8 ``bytes``

    Returns:
        Cleaned string: valid UTF-8, no control characters other than tab
        and newline, no carriage returns, at most ``MAX_STRING_LENGTH``
        characters, no leading or trailing whitespace

    Raises:
        InvalidUtf8Error: If the input is not valid UTF-8
    """
    data = _to_utf8_bytes(value)

    result = bytearray()
    chars = 0
    i = 0
    size = len(data)
    while i < size and chars < MAX_STRING_LENGTH:
        byte = data[i]

        if byte in _CONTROL_BYTES:
            result.append(_SPACE)
            chars += 1
            i += 1
            continue

        if byte == _CARRIAGE_RETURN:
            i += 1
            continue

        # Input is valid UTF-8, so the whole character is always present
        width = utf8_char_len(byte)
        char = data[i:i + width]
        i += width
        if char in _DROPPED_SEQUENCES:
            continue
        result += char
        chars += 1

    if i < size:
        logger.debug(f"Truncated input string to {MAX_STRING_LENGTH} characters")

    return result.decode("utf-8").strip()
