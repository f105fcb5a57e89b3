from __future__ import annotations

from semver_constraints.__version__ import __version__
from semver_constraints.any_constraint import AnyConstraint
from semver_constraints.config import Config
from semver_constraints.empty_constraint import EmptyConstraint
from semver_constraints.exact_constraint import ExactConstraint
from semver_constraints.exceptions import EMPTY_CONSTRAINT_ERROR
from semver_constraints.exceptions import AboveMaximumError
from semver_constraints.exceptions import AdmissionError
from semver_constraints.exceptions import BelowMinimumError
from semver_constraints.exceptions import ConfigError
from semver_constraints.exceptions import EmptyConstraintError
from semver_constraints.exceptions import ExcludedVersionError
from semver_constraints.exceptions import InvalidConstraintError
from semver_constraints.exceptions import NotExactVersionError
from semver_constraints.exceptions import ParseConstraintError
from semver_constraints.exceptions import ParseVersionError
from semver_constraints.exceptions import SemverConstraintsError
from semver_constraints.exceptions import UnionAdmissionError
from semver_constraints.operations import intersection
from semver_constraints.operations import is_empty_set
from semver_constraints.operations import is_universal
from semver_constraints.operations import union
from semver_constraints.parser import parse_constraint
from semver_constraints.version import Version
from semver_constraints.version_constraint import VersionConstraint
from semver_constraints.version_range import VersionRange
from semver_constraints.version_union import VersionUnion


__all__ = (
    "EMPTY_CONSTRAINT_ERROR",
    "AboveMaximumError",
    "AdmissionError",
    "AnyConstraint",
    "BelowMinimumError",
    "Config",
    "ConfigError",
    "EmptyConstraint",
    "EmptyConstraintError",
    "ExactConstraint",
    "ExcludedVersionError",
    "InvalidConstraintError",
    "NotExactVersionError",
    "ParseConstraintError",
    "ParseVersionError",
    "SemverConstraintsError",
    "UnionAdmissionError",
    "Version",
    "VersionConstraint",
    "VersionRange",
    "VersionUnion",
    "__version__",
    "intersection",
    "is_empty_set",
    "is_universal",
    "parse_constraint",
    "union",
)
