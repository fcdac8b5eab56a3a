"""Reading and writing the preferences file of length-prefixed records."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Mapping

PREFS_FILE_NAME = "CandyCrisisPrefs.bin"

PREF_KEYS = (
    "MusicOn",
    "SoundOn",
    "KeyBindings",
    "HighScores",
    "BestCombo",
    "Fullscreen",
    "Widescreen",
    "CrispUpscaling",
)

_LENGTH = struct.Struct("<I")


def encode_records(records: Mapping[str, bytes]) -> bytes:
    """Encode records as key length byte, key, 32-bit value length and value."""
    parts = []
    for name, value in records.items():
        key = name.encode("ascii")
        if len(key) > 255:
            raise ValueError(f"preference key too long: {name!r}")
        parts.append(bytes([len(key)]) + key + _LENGTH.pack(len(value)) + bytes(value))
    return b"".join(parts)


def _scan(data: bytes):
    pos = 0
    while pos < len(data):
        key_length = data[pos]
        pos += 1
        key = data[pos:pos + key_length]
        pos += key_length
        header = data[pos:pos + _LENGTH.size]
        if len(header) < _LENGTH.size:
            return
        (length,) = _LENGTH.unpack(header)
        pos += _LENGTH.size
        yield key, length, pos
        pos += length


def read_records(data: bytes, expected: Mapping[str, int]) -> dict[str, bytes]:
    """Pick out the expected records whose stored length matches.

    Each name is looked up from the start of the data; a stored key matches
    when it begins with the name. A match of the wrong length ends the search
    for that name.
    """
    found: dict[str, bytes] = {}
    for name, size in expected.items():
        wanted = name.encode("ascii")
        for key, length, start in _scan(data):
            if key.startswith(wanted):
                value = data[start:start + length]
                if length == size and len(value) == size:
                    found[name] = value
                break
    return found


def prefs_path(base_dir: str | Path) -> Path:
    """Return the preferences file location inside a user data folder."""
    return Path(base_dir) / PREFS_FILE_NAME


def load_prefs(path: str | Path, expected: Mapping[str, int]) -> dict[str, bytes]:
    """Load the expected records; a missing or unreadable file yields nothing."""
    try:
        data = Path(path).read_bytes()
    except OSError:
        return {}
    return read_records(data, expected)


def save_prefs(path: str | Path, records: Mapping[str, bytes]) -> bool:
    """Write all records, returning False when the file cannot be written."""
    target = Path(path)
    payload = encode_records(records)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(payload)
    except OSError:
        return False
    return True