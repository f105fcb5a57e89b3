from __future__ import annotations

import logging

from typing import TYPE_CHECKING

from semver_constraints.any_constraint import AnyConstraint
from semver_constraints.empty_constraint import EmptyConstraint
from semver_constraints.exact_constraint import ExactConstraint
from semver_constraints.exceptions import EMPTY_CONSTRAINT_ERROR
from semver_constraints.exceptions import UnionAdmissionError
from semver_constraints.version_constraint import VersionConstraint
from semver_constraints.version_constraint import check_constraint


if TYPE_CHECKING:
    from collections.abc import Iterable

    from semver_constraints.exceptions import AdmissionError
    from semver_constraints.version import Version
    from semver_constraints.version_range import VersionRange


logger = logging.getLogger(__name__)


class VersionUnion(VersionConstraint):
    """
    A version constraint representing a union of multiple version constraints.

    Members built through VersionUnion.of() are disjoint, non-adjacent and
    sorted, and are either exact versions or ranges. The constructor keeps
    whatever it is given.

    When no member admits a version, admits() reports either every member's
    error ("aggregate") or only the last one ("last"), depending on
    error_reporting or, when it is not given, the configuration.
    """

    def __init__(
        self, *ranges: VersionConstraint, error_reporting: str | None = None
    ) -> None:
        if error_reporting is None:
            from semver_constraints.config import Config

            error_reporting = Config.create().union_error_reporting

        self._ranges = list(ranges)
        self._error_reporting = error_reporting

    @property
    def ranges(self) -> list[VersionConstraint]:
        return self._ranges

    @property
    def error_reporting(self) -> str:
        return self._error_reporting

    @classmethod
    def of(cls, *ranges: VersionConstraint) -> VersionConstraint:
        from semver_constraints.version_range import VersionRange

        flattened = [
            constraint for constraint in _flatten(ranges) if not constraint.is_empty()
        ]

        if not flattened:
            return EmptyConstraint()

        if any(constraint.is_any() for constraint in flattened):
            return AnyConstraint()

        # Exact versions are merged as one-version ranges
        # and turned back into exact versions at the end.
        intervals: list[VersionRange] = []
        for constraint in flattened:
            if isinstance(constraint, VersionRange):
                constraint = constraint.normalize()

                if constraint.is_empty():
                    continue

                if constraint.is_any():
                    return AnyConstraint()

            if isinstance(constraint, ExactConstraint):
                intervals.append(
                    VersionRange(
                        constraint.version,
                        constraint.version,
                        include_min=True,
                        include_max=True,
                        allow_prereleases=False,
                    )
                )
            else:
                assert isinstance(constraint, VersionRange)
                intervals.append(constraint)

        intervals.sort()

        merged: list[VersionRange] = []
        for interval in intervals:
            # Merge this range with the previous one, but only if they touch.
            if merged and _can_merge(merged[-1], interval):
                merged[-1] = _merge(merged[-1], interval)
            else:
                merged.append(interval)

        normalized: list[VersionConstraint] = []
        for interval in merged:
            constraint = interval.normalize()
            if constraint.is_any():
                return AnyConstraint()

            if not constraint.is_empty():
                normalized.append(constraint)

        logger.debug(
            "Normalized union of %d constraints into %d",
            len(flattened),
            len(normalized),
        )

        if not normalized:
            return EmptyConstraint()

        if len(normalized) == 1:
            return normalized[0]

        return VersionUnion(*normalized)

    def is_empty(self) -> bool:
        return False

    def is_any(self) -> bool:
        return False

    def admits(self, version: Version) -> AdmissionError | None:
        errors = []
        for constraint in self._ranges:
            error = constraint.admits(version)
            if error is None:
                return None

            errors.append(error)

        if not errors:
            return EMPTY_CONSTRAINT_ERROR

        if self._error_reporting == "last":
            return errors[-1]

        return UnionAdmissionError(version, errors)

    def admits_any(self) -> bool:
        return True

    def intersect(self, other: VersionConstraint) -> VersionConstraint:
        from semver_constraints.operations import union
        from semver_constraints.version_range import VersionRange

        check_constraint(other)

        if isinstance(other, EmptyConstraint):
            return other

        if isinstance(other, AnyConstraint):
            return self

        their_ranges: list[VersionConstraint]
        if isinstance(other, VersionUnion):
            their_ranges = other.ranges
        else:
            assert isinstance(other, (ExactConstraint, VersionRange))
            their_ranges = [other]

        new_ranges = []
        for our_range in self._ranges:
            for their_range in their_ranges:
                intersection = our_range.intersect(their_range)

                if not intersection.is_empty():
                    new_ranges.append(intersection)

        return union(*new_ranges)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionUnion):
            return False

        return self._ranges == other.ranges

    def __hash__(self) -> int:
        return hash(tuple(self._ranges))

    def __str__(self) -> str:
        return " || ".join(str(r) for r in self._ranges)


def _flatten(constraints: Iterable[VersionConstraint]) -> list[VersionConstraint]:
    flattened: list[VersionConstraint] = []
    for constraint in constraints:
        check_constraint(constraint)

        if isinstance(constraint, VersionUnion):
            flattened += _flatten(constraint.ranges)
        else:
            flattened.append(constraint)

    return flattened


def _can_merge(lower: VersionRange, higher: VersionRange) -> bool:
    return lower.overlaps(higher) or lower.is_adjacent_to(higher)


def _merge(lower: VersionRange, higher: VersionRange) -> VersionRange:
    from semver_constraints.version_range import VersionRange

    # The pre-release policy only matters at the lower bound.
    if lower.allows_lower(higher):
        union_min = lower.min
        union_include_min = lower.include_min
        allow_prereleases = lower.allow_prereleases
    else:
        union_min = higher.min
        union_include_min = higher.include_min
        allow_prereleases = higher.allow_prereleases

    if lower.allows_higher(higher):
        union_max = lower.max
        union_include_max = lower.include_max
    else:
        union_max = higher.max
        union_include_max = higher.include_max

    # A version stays excluded only if the other range does not admit it either.
    excluded = [v for v in lower.excluded if not higher.allows(v)]
    excluded += [v for v in higher.excluded if not lower.allows(v)]

    return VersionRange(
        union_min,
        union_max,
        union_include_min,
        union_include_max,
        excluded,
        allow_prereleases=allow_prereleases,
    )
