from __future__ import annotations

import re

from typing import TYPE_CHECKING

from semver_constraints.any_constraint import AnyConstraint
from semver_constraints.exact_constraint import ExactConstraint
from semver_constraints.exceptions import ParseConstraintError
from semver_constraints.operations import intersection
from semver_constraints.operations import union
from semver_constraints.patterns import ANY_CONSTRAINT
from semver_constraints.patterns import BASIC_CONSTRAINT
from semver_constraints.patterns import CARET_CONSTRAINT
from semver_constraints.patterns import TILDE_CONSTRAINT
from semver_constraints.patterns import X_CONSTRAINT
from semver_constraints.version import Version
from semver_constraints.version_range import VersionRange


if TYPE_CHECKING:
    from semver_constraints.version_constraint import VersionConstraint


def parse_constraint(constraints: str) -> VersionConstraint:
    if constraints.strip() == "*":
        return AnyConstraint()

    or_constraints = re.split(r"\s*\|\|?\s*", constraints.strip())
    or_groups = []
    for or_constraint in or_constraints:
        and_constraints = re.split(
            "(?<!^)(?<![=>< ,~^]) *(?<!-)[, ](?!-) *(?!,|$)", or_constraint
        )

        constraint_objects = [
            parse_single_constraint(constraint.strip())
            for constraint in and_constraints
        ]

        or_groups.append(intersection(*constraint_objects))

    return union(*or_groups)


def parse_single_constraint(constraint: str) -> VersionConstraint:
    if not constraint:
        raise ParseConstraintError("Could not parse an empty version constraint")

    if ANY_CONSTRAINT.match(constraint):
        return AnyConstraint()

    # Tilde range
    m = TILDE_CONSTRAINT.match(constraint)
    if m:
        version = Version.parse(m.group(1))

        high = version.stable.next_minor
        if version.precision == 1:
            high = version.stable.next_major

        return VersionRange.of(version, high, include_min=True)

    # Caret range
    m = CARET_CONSTRAINT.match(constraint)
    if m:
        version = Version.parse(m.group(1))

        return VersionRange.of(version, version.next_breaking, include_min=True)

    # X Range
    m = X_CONSTRAINT.match(constraint)
    if m:
        op = m.group(1)
        major = int(m.group(2))
        minor = m.group(3)

        low: Version | None

        if minor is not None:
            low = Version(major, int(minor), 0)
            high = low.next_minor
            result = VersionRange.of(low, high, include_min=True)
        elif major == 0:
            low = None
            high = Version(1, 0, 0)
            result = VersionRange.of(max=high)
        else:
            low = Version(major, 0, 0)
            high = low.next_major
            result = VersionRange.of(low, high, include_min=True)

        if op == "!=":
            # Everything outside of [low, high)
            outside_high = VersionRange.of(min=high, include_min=True)
            if low is None:
                return outside_high

            return union(VersionRange.of(max=low), outside_high)

        return result

    # Basic comparator
    m = BASIC_CONSTRAINT.match(constraint)
    if m:
        op = m.group(1)
        version = Version.parse(m.group(2))

        if op == "<":
            return VersionRange.of(max=version)
        elif op == "<=":
            return VersionRange.of(max=version, include_max=True)
        elif op == ">":
            return VersionRange.of(min=version)
        elif op == ">=":
            return VersionRange.of(min=version, include_min=True)
        elif op in {"!=", "<>"}:
            return VersionRange.of(excluded=[version])
        else:
            return ExactConstraint(version)

    raise ParseConstraintError(f"Could not parse version constraint: {constraint}")
