"""
Emoji Commit Type

The closed set of emoji commit types: each with an emoji, a description
and the semver bump it implies.
"""

__version__ = "1.0.0"

from emoji_commit_type.commit_type import (
    BumpLevel,
    CommitType,
    CommitTypeIterator,
    COMMIT_TYPE_EMOJI,
    COMMIT_TYPE_DESCRIPTIONS,
    COMMIT_TYPE_BUMP_LEVELS,
)

__all__ = [
    "__version__",
    "BumpLevel",
    "CommitType",
    "CommitTypeIterator",
    "COMMIT_TYPE_EMOJI",
    "COMMIT_TYPE_DESCRIPTIONS",
    "COMMIT_TYPE_BUMP_LEVELS",
]
