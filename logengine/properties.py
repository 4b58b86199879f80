"""Named string properties with typed accessors."""

from __future__ import annotations

import re

from logengine.hashes import SortedHash

_LONG_MAX = 2**63 - 1
_ATOI = re.compile(r"\s*([+-]?\d+)")
_TRUE_WORDS = frozenset({"true", "1", "yes"})


def _str_to_bool(value: str) -> bool:
    return value.lower() in _TRUE_WORDS


def _parse_unsigned(digits: str) -> int:
    """Parse a digit string as C's strtoul with base 0 would."""
    if len(digits) > 1 and digits.startswith("0"):
        octal = re.match(r"[0-7]*", digits).group(0)
        return int(octal, 8) if octal else 0
    return int(digits)


class Properties(SortedHash):
    """String properties keyed by name, read back as int, bool or str."""

    def __init__(self) -> None:
        super().__init__()

    def get_int(self, name: str, default: int = 0) -> int:
        """Leading integer of the trimmed value; ``default`` if absent or blank.

        Text with no leading number reads as 0.
        """
        if name not in self:
            return default
        value = self[name].strip()
        if not value:
            return default
        match = _ATOI.match(value)
        return int(match.group(1)) if match else 0

    def get_uint(self, name: str, default: int = 0) -> int:
        """Unsigned value; ``default`` unless the trimmed value is all digits.

        A leading zero means octal. Values above the signed long range
        give ``default``.
        """
        if name not in self:
            return default
        value = self[name].strip()
        if not value or not value.isascii() or not value.isdigit():
            return default
        result = _parse_unsigned(value)
        return default if result > _LONG_MAX else result

    def get_bool(self, name: str, default: bool = False) -> bool:
        """True for "true", "yes" or "1" in any case; ``default`` if absent."""
        if name not in self:
            return default
        return _str_to_bool(self[name].strip())

    def get_string(self, name: str, default: str = "") -> str:
        if name not in self:
            return default
        return self[name]