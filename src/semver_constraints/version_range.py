from __future__ import annotations

from typing import TYPE_CHECKING

from semver_constraints.any_constraint import AnyConstraint
from semver_constraints.empty_constraint import EmptyConstraint
from semver_constraints.exact_constraint import ExactConstraint
from semver_constraints.exceptions import AboveMaximumError
from semver_constraints.exceptions import BelowMinimumError
from semver_constraints.exceptions import ExcludedVersionError
from semver_constraints.version_constraint import VersionConstraint
from semver_constraints.version_constraint import check_constraint


if TYPE_CHECKING:
    from collections.abc import Iterable

    from semver_constraints.exceptions import AdmissionError
    from semver_constraints.version import Version


class VersionRange(VersionConstraint):
    """
    Versions between an optional lower and an optional upper bound,
    minus a set of explicitly excluded versions.

    The constructor takes its arguments literally. Use VersionRange.of()
    to get the simplest equivalent constraint, which may be an Exact,
    Empty or Any constraint rather than a range.

    With allow_prereleases, an inclusive lower bound on a release also
    admits the pre-releases of that release, e.g. >=1.0.0 admits 1.0.0-beta.
    When it is not given, the default comes from the configuration.
    VersionRange.of() turns it off wherever it cannot change anything.
    """

    def __init__(
        self,
        min: Version | None = None,
        max: Version | None = None,
        include_min: bool = False,
        include_max: bool = False,
        excluded: Iterable[Version] = (),
        allow_prereleases: bool | None = None,
    ) -> None:
        if allow_prereleases is None:
            from semver_constraints.config import Config

            allow_prereleases = Config.create().allow_prereleases

        self._min = min
        self._max = max
        self._include_min = include_min
        self._include_max = include_max
        self._excluded = tuple(sorted(set(excluded)))
        self._allow_prereleases = allow_prereleases

    @classmethod
    def of(
        cls,
        min: Version | None = None,
        max: Version | None = None,
        include_min: bool = False,
        include_max: bool = False,
        excluded: Iterable[Version] = (),
        allow_prereleases: bool | None = None,
    ) -> VersionConstraint:
        bounds = cls(
            min, max, include_min, include_max, allow_prereleases=allow_prereleases
        )
        kept = {v for v in excluded if bounds._admits_bounds(v) is None}

        lower = bounds.lower_bound
        if lower is not None and max is not None:
            if lower > max:
                return EmptyConstraint()

            if lower == max:
                if include_min and include_max and lower not in kept:
                    return ExactConstraint(lower)

                return EmptyConstraint()

        # An excluded bound is just an exclusive one, unless the
        # pre-releases below it are still admitted.
        if min is not None and min in kept and lower == min:
            include_min = False
            kept.discard(min)

        if max is not None and max in kept:
            include_max = False
            kept.discard(max)

        if min is None and max is None and not kept:
            return AnyConstraint()

        return cls(
            min,
            max,
            include_min,
            include_max,
            kept,
            allow_prereleases=_policy_applies(
                min, include_min, bounds.allow_prereleases
            ),
        )

    def normalize(self) -> VersionConstraint:
        return VersionRange.of(
            self._min,
            self._max,
            self._include_min,
            self._include_max,
            self._excluded,
            allow_prereleases=self._allow_prereleases,
        )

    @property
    def min(self) -> Version | None:
        return self._min

    @property
    def max(self) -> Version | None:
        return self._max

    @property
    def include_min(self) -> bool:
        return self._include_min

    @property
    def include_max(self) -> bool:
        return self._include_max

    @property
    def excluded(self) -> tuple[Version, ...]:
        return self._excluded

    @property
    def allow_prereleases(self) -> bool:
        return self._allow_prereleases

    def is_empty(self) -> bool:
        return False

    def is_any(self) -> bool:
        return self._min is None and self._max is None and not self._excluded

    def admits(self, version: Version) -> AdmissionError | None:
        error = self._admits_bounds(version)
        if error is not None:
            return error

        if version in self._excluded:
            return ExcludedVersionError(version)

        return None

    def _admits_bounds(self, version: Version) -> AdmissionError | None:
        lower = self.lower_bound
        if lower is not None:
            assert self._min is not None

            if self._include_min:
                if version < lower:
                    return BelowMinimumError(version, self._min, True)
            elif version <= lower:
                return BelowMinimumError(version, self._min, False)

        if self._max is not None:
            if self._include_max:
                if version > self._max:
                    return AboveMaximumError(version, self._max, True)
            elif version >= self._max:
                return AboveMaximumError(version, self._max, False)

        return None

    @property
    def lower_bound(self) -> Version | None:
        """
        The lowest version the lower bound lets through, inclusive as
        include_min says. When the pre-releases of min are admitted,
        this is the lowest pre-release of min rather than min itself.
        """
        if self._min is not None and _policy_applies(
            self._min, self._include_min, self._allow_prereleases
        ):
            return self._min.lowest_prerelease

        return self._min

    def admits_any(self) -> bool:
        # Not an emptiness check: a literal range with crossed bounds
        # still answers True. VersionRange.of() never builds one.
        return True

    def intersect(self, other: VersionConstraint) -> VersionConstraint:
        from semver_constraints.version_union import VersionUnion

        check_constraint(other)

        if isinstance(other, AnyConstraint):
            return self

        if isinstance(other, EmptyConstraint):
            return other

        if isinstance(other, VersionUnion):
            return other.intersect(self)

        # A range and an exact version just yields the version if it's in the range.
        if isinstance(other, ExactConstraint):
            if self.allows(other.version):
                return other

            return EmptyConstraint()

        assert isinstance(other, VersionRange)

        # Take the tighter of both bounds. Lower bounds compare through
        # lower_bound, so the pre-release policy follows the bound it belongs to.
        if self.allows_lower(other):
            intersect_min = other.min
            intersect_include_min = other.include_min
            allow_prereleases = other.allow_prereleases
        else:
            intersect_min = self._min
            intersect_include_min = self._include_min
            allow_prereleases = self._allow_prereleases

        if self.allows_higher(other):
            intersect_max = other.max
            intersect_include_max = other.include_max
        else:
            intersect_max = self._max
            intersect_include_max = self._include_max

        return VersionRange.of(
            intersect_min,
            intersect_max,
            intersect_include_min,
            intersect_include_max,
            self._excluded + other.excluded,
            allow_prereleases=allow_prereleases,
        )

    def allows_lower(self, other: VersionRange) -> bool:
        return self._compare_min(other) < 0

    def allows_higher(self, other: VersionRange) -> bool:
        return self._compare_max(other) > 0

    def is_strictly_lower(self, other: VersionRange) -> bool:
        other_lower = other.lower_bound
        if self.max is None or other_lower is None:
            return False

        if self.max < other_lower:
            return True

        if self.max > other_lower:
            return False

        return not self.include_max or not other.include_min

    def is_strictly_higher(self, other: VersionRange) -> bool:
        return other.is_strictly_lower(self)

    def overlaps(self, other: VersionRange) -> bool:
        """
        Whether the bounds of both ranges share at least one version,
        exclusions left aside.
        """
        return not self.is_strictly_lower(other) and not self.is_strictly_higher(
            other
        )

    def is_adjacent_to(self, other: VersionRange) -> bool:
        if self.max is None or self.max != other.lower_bound:
            return False

        return (
            self.include_max
            and not other.include_min
            or not self.include_max
            and other.include_min
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRange):
            return False

        return (
            self._min == other.min
            and self._max == other.max
            and self._include_min == other.include_min
            and self._include_max == other.include_max
            and self._excluded == other.excluded
            and self._allow_prereleases == other.allow_prereleases
        )

    def __lt__(self, other: VersionRange) -> bool:
        return self._cmp(other) < 0

    def _cmp(self, other: VersionRange) -> int:
        return self._compare_min(other) or self._compare_max(other)

    def _compare_min(self, other: VersionRange) -> int:
        lower = self.lower_bound
        other_lower = other.lower_bound

        if lower is None:
            return 0 if other_lower is None else -1
        elif other_lower is None:
            return 1

        if lower < other_lower:
            return -1

        if lower > other_lower:
            return 1

        if self.include_min != other.include_min:
            return -1 if self.include_min else 1

        return 0

    def _compare_max(self, other: VersionRange) -> int:
        if self.max is None:
            if other.max is None:
                return 0

            return 1
        elif other.max is None:
            return -1

        if self.max < other.max:
            return -1

        if self.max > other.max:
            return 1

        if self.include_max != other.include_max:
            return 1 if self.include_max else -1

        return 0

    def __str__(self) -> str:
        parts = []

        if self.min is not None:
            parts.append(f"{'>=' if self.include_min else '>'}{self.min}")

        if self.max is not None:
            parts.append(f"{'<=' if self.include_max else '<'}{self.max}")

        parts.extend(f"!={version}" for version in self._excluded)

        if not parts:
            return "*"

        return ",".join(parts)

    def __hash__(self) -> int:
        return hash(
            (
                self.min,
                self.max,
                self.include_min,
                self.include_max,
                self._excluded,
                self._allow_prereleases,
            )
        )


def _policy_applies(
    min: Version | None, include_min: bool, allow_prereleases: bool
) -> bool:
    # Only an inclusive lower bound on a release has pre-releases below it to admit.
    return (
        allow_prereleases
        and include_min
        and min is not None
        and not min.is_prerelease()
    )
