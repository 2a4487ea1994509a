"""
Commit Type Module

The closed set of emoji commit types. Each type carries a display emoji,
a one-line description and the semver bump it implies.

Usage:
    for commit_type in CommitType.all_variants():
        print(f"{commit_type.emoji()}  - {commit_type.description()}")
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterator, Optional


class BumpLevel(Enum):
    """A semver bump level."""
    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"
    NONE = "None"

    def label(self) -> str:
        """Return the display name of this bump level."""
        return self.value


class CommitType(Enum):
    """A specific commit type."""
    BREAKING = "breaking"
    FEATURE = "feature"
    BUGFIX = "bugfix"
    OTHER = "other"
    META = "meta"

    @classmethod
    def first_variant(cls) -> 'CommitType':
        """Return the first commit type (BREAKING)."""
        return _DECLARED_ORDER[0]

    @classmethod
    def last_variant(cls) -> 'CommitType':
        """Return the last commit type (META)."""
        return _DECLARED_ORDER[-1]

    @classmethod
    def all_variants(cls) -> list['CommitType']:
        """Return every commit type in declared order, as a new list."""
        return list(_DECLARED_ORDER)

    @classmethod
    def iter_variants(cls) -> 'CommitTypeIterator':
        """Return a fresh iterator over all commit types."""
        return CommitTypeIterator(cls.first_variant())

    def next_variant(self) -> Optional['CommitType']:
        """Return the commit type after this one, or None for the last."""
        index = _DECLARED_ORDER.index(self) + 1
        return _DECLARED_ORDER[index] if index < len(_DECLARED_ORDER) else None

    def prev_variant(self) -> Optional['CommitType']:
        """Return the commit type before this one, or None for the first."""
        index = _DECLARED_ORDER.index(self)
        return _DECLARED_ORDER[index - 1] if index > 0 else None

    def emoji(self) -> str:
        """Return the emoji for this commit type."""
        return COMMIT_TYPE_EMOJI[self]

    def description(self) -> str:
        """Return the description for this commit type."""
        return COMMIT_TYPE_DESCRIPTIONS[self]

    def bump_level(self) -> BumpLevel:
        """Return the bump level for this commit type."""
        return COMMIT_TYPE_BUMP_LEVELS[self]

    def __repr__(self) -> str:
        return f"<CommitType {self.emoji()}>"


class CommitTypeIterator:
    """Walks commit types forward from a starting variant."""

    def __init__(self, start: Optional[CommitType]):
        self._current = start

    def __iter__(self) -> Iterator[CommitType]:
        return self

    def __next__(self) -> CommitType:
        if self._current is None:
            raise StopIteration
        commit_type = self._current
        self._current = commit_type.next_variant()
        return commit_type

    def __len__(self) -> int:
        if self._current is None:
            return 0
        return len(_DECLARED_ORDER) - _DECLARED_ORDER.index(self._current)

    def __length_hint__(self) -> int:
        return len(self)


# Fixed enumeration order
_DECLARED_ORDER = (
    CommitType.BREAKING,
    CommitType.FEATURE,
    CommitType.BUGFIX,
    CommitType.OTHER,
    CommitType.META,
)

COMMIT_TYPE_EMOJI = MappingProxyType({
    CommitType.BREAKING: '\U0001F4A5',  # 💥
    CommitType.FEATURE: '\U0001F389',   # 🎉
    CommitType.BUGFIX: '\U0001F41B',    # 🐛
    CommitType.OTHER: '\U0001F525',     # 🔥
    CommitType.META: '\U0001F339',      # 🌹
})

COMMIT_TYPE_DESCRIPTIONS = MappingProxyType({
    CommitType.BREAKING: 'Breaking change',
    CommitType.FEATURE: 'New functionality',
    CommitType.BUGFIX: 'Bugfix',
    CommitType.OTHER: 'Cleanup / Performance',
    CommitType.META: 'Meta',
})

COMMIT_TYPE_BUMP_LEVELS = MappingProxyType({
    CommitType.BREAKING: BumpLevel.MAJOR,
    CommitType.FEATURE: BumpLevel.MINOR,
    CommitType.BUGFIX: BumpLevel.PATCH,
    CommitType.OTHER: BumpLevel.PATCH,
    CommitType.META: BumpLevel.NONE,
})


__all__ = [
    "BumpLevel",
    "CommitType",
    "CommitTypeIterator",
    "COMMIT_TYPE_EMOJI",
    "COMMIT_TYPE_DESCRIPTIONS",
    "COMMIT_TYPE_BUMP_LEVELS",
]
