from __future__ import annotations

from typing import TYPE_CHECKING

from semver_constraints.exceptions import EMPTY_CONSTRAINT_ERROR
from semver_constraints.version_constraint import VersionConstraint


if TYPE_CHECKING:
    from semver_constraints.exceptions import AdmissionError
    from semver_constraints.version import Version


class EmptyConstraint(VersionConstraint):
    """
    The set of no versions. Intersecting anything with it yields it again,
    which is how an unsatisfiable set of requirements is signalled.
    """

    def is_empty(self) -> bool:
        return True

    def is_any(self) -> bool:
        return False

    def admits(self, version: Version) -> AdmissionError | None:
        return EMPTY_CONSTRAINT_ERROR

    def admits_any(self) -> bool:
        return False

    def intersect(self, other: VersionConstraint) -> VersionConstraint:
        return self

    def union(self, other: VersionConstraint) -> VersionConstraint:
        return other

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptyConstraint)

    def __hash__(self) -> int:
        return hash("<empty>")

    def __str__(self) -> str:
        return "<empty>"
