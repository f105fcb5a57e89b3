from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from semver_constraints.exceptions import AdmissionError
    from semver_constraints.version import Version


class VersionConstraint:
    """
    A set of versions.

    The set of implementations is closed: AnyConstraint, EmptyConstraint,
    ExactConstraint, VersionRange and VersionUnion. Operators dispatch over
    exactly these and raise InvalidConstraintError for anything else.
    """

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def is_any(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def admits(self, version: Version) -> AdmissionError | None:
        """
        Returns None if the version satisfies the constraint,
        or an error describing why it does not.
        """
        raise NotImplementedError()

    def allows(self, version: Version) -> bool:
        return self.admits(version) is None

    @abstractmethod
    def admits_any(self) -> bool:
        raise NotImplementedError()

    @abstractmethod
    def intersect(self, other: VersionConstraint) -> VersionConstraint:
        raise NotImplementedError()

    def union(self, other: VersionConstraint) -> VersionConstraint:
        from semver_constraints.operations import union

        return union(self, other)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self}>"

    def __str__(self) -> str:
        raise NotImplementedError()

    def __hash__(self) -> int:
        raise NotImplementedError()

    def __eq__(self, other: object) -> bool:
        raise NotImplementedError()


def check_constraint(constraint: object) -> VersionConstraint:
    """
    Returns the constraint unchanged if it is one of the known variants.
    """
    from semver_constraints.any_constraint import AnyConstraint
    from semver_constraints.empty_constraint import EmptyConstraint
    from semver_constraints.exact_constraint import ExactConstraint
    from semver_constraints.exceptions import InvalidConstraintError
    from semver_constraints.version_range import VersionRange
    from semver_constraints.version_union import VersionUnion

    if type(constraint) not in {
        AnyConstraint,
        EmptyConstraint,
        ExactConstraint,
        VersionRange,
        VersionUnion,
    }:
        raise InvalidConstraintError(
            f"Unknown VersionConstraint type {type(constraint).__name__}."
        )

    assert isinstance(constraint, VersionConstraint)

    return constraint
