"""JSON Feed revision identifiers.

A document declares its revision as a URL string. Two revisions are
recognized; any other string is kept verbatim as an unknown version so
that it round-trips and never validates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


VERSION_1 = "https://jsonfeed.org/version/1"
VERSION_1_1 = "https://jsonfeed.org/version/1.1"


class VersionKind(str, Enum):
    """Tag of a Version value."""

    VERSION_1 = "VERSION_1"
    VERSION_1_1 = "VERSION_1_1"
    UNKNOWN = "UNKNOWN"


# Ordering of recognized revisions; a later revision accepts documents
# declaring an earlier one.
_RANK = {
    VersionKind.VERSION_1: 1,
    VersionKind.VERSION_1_1: 2,
}


@dataclass(frozen=True)
class Version:
    """A declared or target JSON Feed revision."""
    identifier: str

    @property
    def kind(self) -> VersionKind:
        if self.identifier == VERSION_1:
            return VersionKind.VERSION_1
        if self.identifier == VERSION_1_1:
            return VersionKind.VERSION_1_1
        return VersionKind.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self.kind is not VersionKind.UNKNOWN

    @property
    def rank(self) -> int:
        """Position among recognized revisions (0 for unknown)."""
        return _RANK.get(self.kind, 0)

    @classmethod
    def parse(cls, value: Union["Version", str]) -> "Version":
        """Coerce a Version or identifier string to a Version."""
        if isinstance(value, Version):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Version identifier must be a string, got {type(value).__name__}")
        return cls(value)

    def accepts(self, declared: "Version") -> bool:
        """Whether a document declaring ``declared`` may validate against this target.

        Both sides must be recognized, and the declared revision must not be
        later than this one. Only the declared string is consulted, never the
        fields a document actually uses.
        """
        if not (self.is_known and declared.is_known):
            return False
        return declared.rank <= self.rank

    def __str__(self) -> str:
        return self.identifier


Version.V1 = Version(VERSION_1)
Version.V1_1 = Version(VERSION_1_1)

KNOWN_VERSIONS = (Version.V1, Version.V1_1)
