"""
Type registry

Collects every distinct member type spelling seen during a run and assigns
each one a stable ordinal in order of first appearance. The ordinals become
the Meta_Type enumeration in generated code.
"""

from typing import Iterator, Optional


class TypeRegistry:
    """Insertion-ordered, deduplicating set of type spellings"""

    def __init__(self):
        self._ordinals: dict[str, int] = {}

    def register(self, name: str) -> int:
        """Register a type spelling and return its ordinal

        Registering a spelling that is already known returns the existing
        ordinal. Comparison is by exact, case-sensitive content.
        """
        ordinal = self._ordinals.get(name)
        if ordinal is None:
            ordinal = len(self._ordinals)
            self._ordinals[name] = ordinal
        return ordinal

    def ordinal(self, name: str) -> Optional[int]:
        """Get the ordinal of a registered spelling, or None"""
        return self._ordinals.get(name)

    def names(self) -> list[str]:
        """Spellings in registration order"""
        return list(self._ordinals)

    def __contains__(self, name: str) -> bool:
        return name in self._ordinals

    def __len__(self) -> int:
        return len(self._ordinals)

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordinals)
