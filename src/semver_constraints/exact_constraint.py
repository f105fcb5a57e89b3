from __future__ import annotations

from typing import TYPE_CHECKING

from semver_constraints.empty_constraint import EmptyConstraint
from semver_constraints.exceptions import NotExactVersionError
from semver_constraints.version_constraint import VersionConstraint
from semver_constraints.version_constraint import check_constraint


if TYPE_CHECKING:
    from semver_constraints.exceptions import AdmissionError
    from semver_constraints.version import Version


class ExactConstraint(VersionConstraint):
    """
    A constraint matching a single version.
    """

    def __init__(self, version: Version) -> None:
        self._version = version

    @property
    def version(self) -> Version:
        return self._version

    def is_empty(self) -> bool:
        return False

    def is_any(self) -> bool:
        return False

    def admits(self, version: Version) -> AdmissionError | None:
        if version == self._version:
            return None

        return NotExactVersionError(version, self._version)

    def admits_any(self) -> bool:
        return True

    def intersect(self, other: VersionConstraint) -> VersionConstraint:
        if check_constraint(other).allows(self._version):
            return self

        return EmptyConstraint()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactConstraint):
            return False

        return self._version == other.version

    def __hash__(self) -> int:
        return hash(self._version)

    def __str__(self) -> str:
        return f"=={self._version}"
