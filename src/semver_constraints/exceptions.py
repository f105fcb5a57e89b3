from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

    from semver_constraints.version import Version


class SemverConstraintsError(Exception):
    pass


class AdmissionError(SemverConstraintsError):
    """
    The reason a constraint does not admit a version.

    Instances are returned by ``admits()``, they are never raised by the
    constraint operators themselves.
    """

    def __init__(self, message: str, version: Version | None = None) -> None:
        super().__init__(message)

        self._version = version

    @property
    def version(self) -> Version | None:
        return self._version


class BelowMinimumError(AdmissionError):
    def __init__(self, version: Version, bound: Version, inclusive: bool) -> None:
        if inclusive:
            message = f"{version} is less than {bound}"
        else:
            message = f"{version} is less than or equal to {bound}"

        super().__init__(message, version)

        self.bound = bound
        self.inclusive = inclusive


class AboveMaximumError(AdmissionError):
    def __init__(self, version: Version, bound: Version, inclusive: bool) -> None:
        if inclusive:
            message = f"{version} is greater than {bound}"
        else:
            message = f"{version} is greater than or equal to {bound}"

        super().__init__(message, version)

        self.bound = bound
        self.inclusive = inclusive


class ExcludedVersionError(AdmissionError):
    def __init__(self, version: Version) -> None:
        super().__init__(f"Version {version} is specifically disallowed.", version)


class NotExactVersionError(AdmissionError):
    def __init__(self, version: Version, expected: Version) -> None:
        super().__init__(f"{version} is not {expected}", version)

        self.expected = expected


class EmptyConstraintError(AdmissionError):
    pass


class UnionAdmissionError(AdmissionError):
    def __init__(self, version: Version, errors: Sequence[AdmissionError]) -> None:
        reasons = "; ".join(str(error) for error in errors)

        super().__init__(f"No member of the union admits {version}: {reasons}", version)

        self.errors = list(errors)


class InvalidConstraintError(SemverConstraintsError, ValueError):
    pass


class ParseVersionError(SemverConstraintsError, ValueError):
    pass


class ParseConstraintError(SemverConstraintsError, ValueError):
    pass


class ConfigError(SemverConstraintsError):
    pass


# Shared by every EmptyConstraint, whatever the version being checked.
EMPTY_CONSTRAINT_ERROR = EmptyConstraintError(
    "The empty constraint admits no versions."
)
