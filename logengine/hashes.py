"""Sorted key/value hashes built on the dynamic arrays.

``SortedHash`` keeps its keys in a sorted array and its values in a
parallel array. ``Hash2`` is a two-level hash of such sections.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from logengine.arrays import DynArray, SortedArray

KeyFunc = Optional[Callable[[Any], Any]]


class SortedHash:
    """Mapping whose keys are kept sorted and looked up by binary search.

    ``key`` maps a key to the value it is ordered and compared by, for
    example ``str.lower`` for case-insensitive string keys. Iteration
    yields keys in sorted order.
    """

    def __init__(self, key: KeyFunc = None) -> None:
        self._key = key
        self._keys = SortedArray(key=key)
        self._values = DynArray()

    def _find(self, name: Any) -> int:
        return self._keys.index_of(name)

    def _remove(self, name: Any) -> bool:
        """Remove ``name`` and its value; return whether it was present."""
        index = self._find(name)
        if index < 0:
            return False
        self._keys.delete(index)
        self._values.delete(index)
        return True

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._keys))

    def __getitem__(self, name: Any) -> Any:
        index = self._find(name)
        if index < 0:
            raise KeyError(name)
        return self._values[index]

    def __setitem__(self, name: Any, value: Any) -> None:
        index = self._find(name)
        if index >= 0:
            self._values[index] = value
        else:
            position = self._keys.add(name)
            self._values.insert(position, value)

    def __delitem__(self, name: Any) -> None:
        """Remove ``name``; removing a key that is absent does nothing."""
        self._remove(name)

    def __contains__(self, name: object) -> bool:
        return self._find(name) >= 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedHash):
            return NotImplemented
        return self._keys == other._keys and self._values == other._values

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SortedHash):
            return NotImplemented
        return self._keys > other._keys and self._values > other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def get(self, name: Any, default: Any = None) -> Any:
        index = self._find(name)
        return self._values[index] if index >= 0 else default

    def key_at(self, index: int) -> Any:
        """Key at position ``index`` in sorted order."""
        return self._keys[index]

    def keys(self) -> list[Any]:
        return list(self._keys)

    def values(self) -> list[Any]:
        return list(self._values)

    def items(self) -> list[tuple[Any, Any]]:
        return list(zip(self._keys, self._values))

    def clear(self) -> None:
        self._keys.clear()
        self._values.clear()


class Hash2:
    """Two-level hash: sections named by ``key1``, each a ``SortedHash``.

    The length is the total number of values held in all sections.
    """

    def __init__(self, key: KeyFunc = None) -> None:
        self._key = key
        self._sections = SortedHash(key=key)

    def _new_section(self) -> SortedHash:
        return SortedHash(key=self._key)

    def __len__(self) -> int:
        return sum(len(section) for section in self._sections.values())

    def set(self, key1: Any, key2: Any, value: Any) -> None:
        section = self._sections.get(key1)
        if section is None:
            section = self._new_section()
            self._sections[key1] = section
        section[key2] = value

    def set_section(self, key1: Any, section: Optional[SortedHash] = None) -> None:
        """Store a copy of ``section`` under ``key1``.

        Without ``section`` an empty section is created, unless ``key1``
        already exists, in which case nothing changes.
        """
        if section is None:
            if key1 not in self._sections:
                self._sections[key1] = self._new_section()
            return
        copy = self._new_section()
        for name, value in section.items():
            copy[name] = value
        self._sections[key1] = copy

    def get(self, key1: Any, key2: Any) -> Any:
        return self.section(key1)[key2]

    def section(self, key1: Any) -> SortedHash:
        return self._sections[key1]

    def find(self, key1: Any, key2: Any) -> Any:
        """Value under ``key1``/``key2``, or ``None`` when either is absent."""
        section = self._sections.get(key1)
        if section is None:
            return None
        return section.get(key2)

    def delete(self, key1: Any, key2: Any) -> None:
        section = self._sections.get(key1)
        if section is not None:
            section._remove(key2)

    def delete_section(self, key1: Any) -> bool:
        """Remove the section ``key1`` with all its values.

        Returns whether the section existed; an absent section is ignored.
        """
        return self._sections._remove(key1)

    def contains(self, key1: Any, key2: Any) -> bool:
        section = self._sections.get(key1)
        return section is not None and key2 in section

    def has_section(self, key1: Any) -> bool:
        return key1 in self._sections

    def key_at(self, index: int) -> Any:
        return self._sections.key_at(index)

    def section_keys(self) -> list[Any]:
        return self._sections.keys()

    def clear(self) -> None:
        self._sections.clear()