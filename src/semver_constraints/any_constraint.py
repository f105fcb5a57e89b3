from __future__ import annotations

from typing import TYPE_CHECKING

from semver_constraints.version_constraint import VersionConstraint


if TYPE_CHECKING:
    from semver_constraints.exceptions import AdmissionError
    from semver_constraints.version import Version


class AnyConstraint(VersionConstraint):
    """
    The set of all versions, the identity element of intersection.
    """

    def is_empty(self) -> bool:
        return False

    def is_any(self) -> bool:
        return True

    def admits(self, version: Version) -> AdmissionError | None:
        return None

    def admits_any(self) -> bool:
        return True

    def intersect(self, other: VersionConstraint) -> VersionConstraint:
        return other

    def union(self, other: VersionConstraint) -> VersionConstraint:
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyConstraint)

    def __hash__(self) -> int:
        return hash("*")

    def __str__(self) -> str:
        return "*"
