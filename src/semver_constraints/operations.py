from __future__ import annotations

from semver_constraints.any_constraint import AnyConstraint
from semver_constraints.empty_constraint import EmptyConstraint
from semver_constraints.exact_constraint import ExactConstraint
from semver_constraints.version_constraint import VersionConstraint
from semver_constraints.version_constraint import check_constraint
from semver_constraints.version_union import VersionUnion


def intersection(*constraints: VersionConstraint) -> VersionConstraint:
    """
    Computes the intersection of all the given constraints, as compactly as
    possible.

    Being unsatisfiable is not an error: check the result with is_empty_set().
    """
    if not constraints:
        return EmptyConstraint()

    if len(constraints) == 1:
        return constraints[0]

    for constraint in constraints:
        check_constraint(constraint)

        if constraint.is_empty():
            return constraint

    # An exact version decides the whole intersection:
    # it survives only if every other constraint admits it.
    for constraint in constraints:
        if isinstance(constraint, ExactConstraint):
            if all(other.allows(constraint.version) for other in constraints):
                return constraint

            return EmptyConstraint()

    head, *tail = constraints
    for constraint in tail:
        head = head.intersect(constraint)

    return head


def union(*constraints: VersionConstraint) -> VersionConstraint:
    """
    Computes the union of all the given constraints, as compactly as possible.

    Nested unions are flattened, overlapping or adjacent ranges merged and
    exact versions folded into the ranges that touch them.
    """
    if not constraints:
        return EmptyConstraint()

    if len(constraints) == 1:
        return constraints[0]

    for constraint in constraints:
        if check_constraint(constraint).is_any():
            return AnyConstraint()

    return VersionUnion.of(*constraints)


def is_empty_set(constraint: VersionConstraint) -> bool:
    return constraint.is_empty()


def is_universal(constraint: VersionConstraint) -> bool:
    return constraint.is_any()
