from __future__ import annotations

import pytest

from gitsemver.core.comparator import compare, is_older
from gitsemver.models import Ordering, SemanticVersion


def v(text: str) -> SemanticVersion:
    return SemanticVersion.parse(text)


@pytest.mark.unit
class TestCompare:
    """Tests for major.minor.patch ordering."""

    def test_patch_less(self) -> None:
        assert compare(v("1.2.3"), v("1.2.4")) is Ordering.LESS

    def test_major_greater_beats_lower_fields(self) -> None:
        assert compare(v("2.0.0"), v("1.9.9")) is Ordering.GREATER

    def test_equal(self) -> None:
        assert compare(v("1.2.3"), v("1.2.3")) is Ordering.EQUAL

    def test_minor_decides_when_major_equal(self) -> None:
        assert compare(v("1.3.0"), v("1.2.9")) is Ordering.GREATER
        assert compare(v("1.2.9"), v("1.3.0")) is Ordering.LESS

    def test_numeric_not_lexicographic(self) -> None:
        """``1.10.0`` is newer than ``1.9.0`` even though "10" < "9" as text."""
        assert compare(v("1.10.0"), v("1.9.0")) is Ordering.GREATER

    @pytest.mark.parametrize(
        "left, right",
        [
            ("1.2.3-alpha", "1.2.3"),
            ("1.2.3", "1.2.3+build.7"),
            ("1.2.3-rc.1+a", "1.2.3-beta+b"),
        ],
        ids=["prerelease", "build", "both"],
    )
    def test_prerelease_and_build_are_ignored(self, left: str, right: str) -> None:
        assert compare(v(left), v(right)) is Ordering.EQUAL
        assert compare(v(right), v(left)) is Ordering.EQUAL

    def test_antisymmetric(self) -> None:
        a, b = v("3.1.4"), v("3.2.0")
        assert compare(a, b) is Ordering.LESS
        assert compare(b, a) is Ordering.GREATER


@pytest.mark.unit
class TestIsOlder:
    """Tests for is_older helper."""

    def test_older(self) -> None:
        assert is_older(v("1.0.0"), v("1.1.0")) is True

    def test_equal_is_not_older(self) -> None:
        assert is_older(v("1.1.0"), v("1.1.0-rc.1")) is False

    def test_newer_is_not_older(self) -> None:
        assert is_older(v("1.2.0"), v("1.1.0")) is False
