from __future__ import annotations

import pytest

from semver_constraints.exceptions import ParseVersionError
from semver_constraints.version import Version


@pytest.mark.parametrize(
    "text,version",
    [
        ("1.0.0", Version(1, 0, 0)),
        ("1", Version(1, 0, 0)),
        ("1.0", Version(1, 0, 0)),
        ("v1.2.3", Version(1, 2, 3)),
        ("1b1", Version(1, 0, 0, pre="b1")),
        ("1.0b1", Version(1, 0, 0, pre="b1")),
        ("1.0.0-b1", Version(1, 0, 0, pre="b1")),
        ("1.0.0-beta.1", Version(1, 0, 0, pre="beta.1")),
        ("1.0.0-beta.1.2", Version(1, 0, 0, pre="beta.1.2")),
        ("1.0.0-1", Version(1, 0, 0, pre="1")),
        ("1.0.0-foo", Version(1, 0, 0, pre="foo")),
        ("1.0.0+1", Version(1, 0, 0, build="1")),
        (
            "1.0.0-rc.1+exp.sha.5114f85",
            Version(1, 0, 0, pre="rc.1", build="exp.sha.5114f85"),
        ),
        ("1.0.0.0", Version(1, 0, 0)),
    ],
)
def test_parse_valid(text: str, version: Version) -> None:
    parsed = Version.parse(text)

    assert parsed == version
    assert parsed.text == text


@pytest.mark.parametrize("text", [None, "", "example", "1.2.3 garbage"])
def test_parse_invalid(text: str) -> None:
    with pytest.raises(ParseVersionError):
        Version.parse(text)


def test_comparison() -> None:
    versions = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0-rc.1+build.1",
        "1.0.0",
        "1.0.0+0.3.7",
        "1.3.7+build",
        "1.3.7+build.2.b8f12d7",
        "1.3.7+build.11.e0f985a",
        "2.0.0",
        "2.1.0",
        "2.2.0",
        "2.11.0",
        "2.11.1",
    ]

    for i in range(len(versions)):
        for j in range(len(versions)):
            a = Version.parse(versions[i])
            b = Version.parse(versions[j])

            assert (a < b) == (i < j)
            assert (a > b) == (i > j)
            assert (a <= b) == (i <= j)
            assert (a >= b) == (i >= j)
            assert (a == b) == (i == j)
            assert (a != b) == (i != j)


def test_equality_ignores_text() -> None:
    assert Version.parse("1.0") == Version.parse("1.0.0")
    assert hash(Version.parse("1.0")) == hash(Version.parse("1.0.0"))
    assert Version.parse("1.0") != "1.0"


def test_prerelease() -> None:
    prerelease = Version.parse("1.0.0-beta.1")

    assert prerelease.is_prerelease()
    assert prerelease.prerelease == ("beta", 1)
    assert not Version.parse("1.0.0").is_prerelease()
    assert prerelease.equals_without_prerelease(Version.parse("1.0.0"))
    assert not prerelease.equals_without_prerelease(Version.parse("1.0.1"))


@pytest.mark.parametrize("text", ["1.0.0-beta.1.2", "1.0.0-foo", "1.0.0-1"])
def test_prerelease_sorts_below_its_release(text: str) -> None:
    version = Version.parse(text)
    release = Version.parse("1.0.0")

    assert version.is_prerelease()
    assert version != release
    assert version < release
    assert version > Version.parse("0.9.9")


def test_prerelease_identifiers_compare_per_identifier() -> None:
    versions = [
        "1.0.0-1",
        "1.0.0-2",
        "1.0.0-10",
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]

    parsed = [Version.parse(text) for text in versions]

    assert sorted(reversed(parsed)) == parsed
    assert Version.parse("1.0.0-beta.1") != Version.parse("1.0.0-beta.1.2")


def test_build_metadata_is_not_a_prerelease() -> None:
    version = Version.parse("1.0.0+build.5")

    assert not version.is_prerelease()
    assert version.build == ("build", 5)
    assert version > Version.parse("1.0.0")
    assert version < Version.parse("1.0.1-alpha")


def test_lowest_prerelease() -> None:
    lowest = Version.parse("1.2.0").lowest_prerelease

    assert lowest.is_prerelease()
    assert lowest.equals_without_prerelease(Version.parse("1.2.0"))
    assert lowest < Version.parse("1.2.0-0.1")
    assert lowest < Version.parse("1.2.0-alpha")
    assert lowest > Version.parse("1.1.9")
    assert str(lowest) == "1.2.0-0"


@pytest.mark.parametrize(
    "text,next_major,next_minor,next_patch,next_breaking",
    [
        ("1.2.3", "2.0.0", "1.3.0", "1.2.4", "2.0.0"),
        ("0.2.3", "1.0.0", "0.3.0", "0.2.4", "0.3.0"),
        ("0.0.3", "1.0.0", "0.1.0", "0.0.4", "0.0.4"),
        ("1.0.0-rc.1", "1.0.0", "1.0.0", "1.0.0", "2.0.0"),
    ],
)
def test_next_versions(
    text: str, next_major: str, next_minor: str, next_patch: str, next_breaking: str
) -> None:
    version = Version.parse(text)

    assert version.next_major == Version.parse(next_major)
    assert version.next_minor == Version.parse(next_minor)
    assert version.next_patch == Version.parse(next_patch)
    assert version.next_breaking == Version.parse(next_breaking)


def test_stable() -> None:
    assert Version.parse("1.2.3").stable == Version.parse("1.2.3")
    assert Version.parse("1.2.3-beta.1").stable == Version.parse("1.2.3")


def test_string_representation() -> None:
    assert str(Version(1, 2, 3, pre="rc1")) == "1.2.3-rc1"
    assert str(Version.parse("v1.2")) == "v1.2"
    assert repr(Version(1, 2, 3)) == "<Version 1.2.3>"
