from __future__ import annotations

import functools

from typing import Union

from semver_constraints.exceptions import ParseVersionError
from semver_constraints.patterns import COMPLETE_VERSION


Identifier = Union[int, str]
_Key = tuple[tuple[int, ...], tuple[int, tuple], tuple[int, tuple]]


@functools.total_ordering
class Version:
    """
    A semantic version number.

    The release is made of up to four numeric segments. It can be followed
    by a pre-release ("-beta.2") and by build metadata ("+exp.sha.5114f85"),
    both lists of dot separated identifiers.

    Versions compare release segment by release segment. A pre-release
    sorts before its release. Pre-release identifiers compare numerically
    when both are numbers and lexically otherwise, numbers sort before
    words and a shorter list sorts before a longer one it prefixes.
    Build metadata only breaks ties: 1.0.0 < 1.0.0+build.
    """

    def __init__(
        self,
        major: int,
        minor: int | None = None,
        patch: int | None = None,
        rest: int | None = None,
        pre: str | None = None,
        build: str | None = None,
        text: str | None = None,
        precision: int | None = None,
    ) -> None:
        if precision is None:
            precision = 1 + sum(
                segment is not None for segment in (minor, patch, rest)
            )

        self._release = (int(major), int(minor or 0), int(patch or 0), int(rest or 0))
        self._precision = precision
        self._prerelease = _split_identifiers(pre)
        self._build = _split_identifiers(build)
        self._text = text if text is not None else self._format()

    @classmethod
    def parse(cls, text: str) -> Version:
        if not isinstance(text, str):
            raise ParseVersionError(f'Unable to parse "{text}".')

        text = text.strip()
        match = COMPLETE_VERSION.match(text)
        if match is None:
            raise ParseVersionError(f'Unable to parse "{text}".')

        major, minor, patch, rest = (
            None if segment is None else int(segment)
            for segment in match.group(1, 2, 3, 4)
        )

        return cls(
            major,  # type: ignore[arg-type]
            minor,
            patch,
            rest,
            pre=match.group(5),
            build=match.group(6),
            text=text,
        )

    @property
    def major(self) -> int:
        return self._release[0]

    @property
    def minor(self) -> int:
        return self._release[1]

    @property
    def patch(self) -> int:
        return self._release[2]

    @property
    def rest(self) -> int:
        return self._release[3]

    @property
    def release(self) -> tuple[int, int, int, int]:
        return self._release

    @property
    def prerelease(self) -> tuple[Identifier, ...]:
        return self._prerelease

    @property
    def build(self) -> tuple[Identifier, ...]:
        return self._build

    @property
    def text(self) -> str:
        return self._text

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def stable(self) -> Version:
        """
        The release this version is a pre-release of, or the version itself.
        """
        if not self.is_prerelease():
            return self

        return Version(*self._release, precision=self._precision)

    @property
    def lowest_prerelease(self) -> Version:
        """
        The lowest possible pre-release of this version's release.
        Every pre-release of the release sorts at or above it.
        """
        return Version(*self._release, pre="0", precision=self._precision)

    @property
    def next_major(self) -> Version:
        if self.is_prerelease() and self._release[1:] == (0, 0, 0):
            return self.stable

        return self._bump(0)

    @property
    def next_minor(self) -> Version:
        if self.is_prerelease() and self._release[2:] == (0, 0):
            return self.stable

        return self._bump(1)

    @property
    def next_patch(self) -> Version:
        if self.is_prerelease() and self.rest == 0:
            return self.stable

        return self._bump(2)

    @property
    def next_breaking(self) -> Version:
        # Below 1.0.0 the first non-zero segment is the breaking one.
        if self.major == 0:
            if self.minor != 0 or self._precision == 2:
                return self._bump(1)

            if self._precision == 1:
                return self._bump(0)

            return self._bump(2)

        return self._bump(0)

    def is_prerelease(self) -> bool:
        return bool(self._prerelease)

    def equals_without_prerelease(self, other: Version) -> bool:
        return self._release == other.release

    def _bump(self, index: int) -> Version:
        segments = list(self._release[:index]) + [self._release[index] + 1]
        segments += [0] * (4 - len(segments))

        return Version(*segments, precision=self._precision)

    def _format(self) -> str:
        # The known segments, and any later one that is not zero.
        shown = self._precision
        for index, segment in enumerate(self._release):
            if segment:
                shown = max(shown, index + 1)

        text = ".".join(str(segment) for segment in self._release[:shown])
        if self._prerelease:
            text += "-" + ".".join(str(part) for part in self._prerelease)

        if self._build:
            text += "+" + ".".join(str(part) for part in self._build)

        return text

    def _key(self) -> _Key:
        if self._prerelease:
            pre = (0, tuple(_identifier_key(part) for part in self._prerelease))
        else:
            pre = (1, ())

        build = (
            1 if self._build else 0,
            tuple(_identifier_key(part) for part in self._build),
        )

        return self._release, pre, build

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self._key() < other._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"<Version {self}>"


def _split_identifiers(text: str | None) -> tuple[Identifier, ...]:
    if not text:
        return ()

    return tuple(int(part) if part.isdigit() else part for part in text.split("."))


def _identifier_key(part: Identifier) -> tuple[int, int, str]:
    if isinstance(part, int):
        return 0, part, ""

    return 1, 0, part
