"""Unit tests for version parsing and categorization."""

import random

import pytest

from dockmatrix import EmptyAxisError, MalformedVersionError, categorize, parse_version


def _flags(version):
    return (
        version.is_major_representative,
        version.is_minor_representative,
        version.is_patch_representative,
        version.is_latest,
    )


@pytest.mark.unit
class TestParseVersion:
    """Tests for parse_version."""

    def test_parses_three_components(self):
        """Verify a well-formed string becomes an integer triple."""
        assert parse_version("2.7.1") == (2, 7, 1)

    def test_parses_multi_digit_components(self):
        """Verify components are parsed numerically."""
        assert parse_version("1.50.10") == (1, 50, 10)

    @pytest.mark.parametrize(
        "raw",
        ["1.2", "1.2.3.4", "1.x.3", "", "v1.2.3", "1.2.3-rc1", "-1.2.3", " 1.2.3", "1..3"],
    )
    def test_rejects_malformed_strings(self, raw):
        """Verify anything but three dot-separated integers is rejected."""
        with pytest.raises(MalformedVersionError):
            parse_version(raw)

    @pytest.mark.parametrize("raw", [1.5, 3, None, ["1", "2", "3"]])
    def test_rejects_non_strings(self, raw):
        """Verify YAML scalars that are not strings are rejected."""
        with pytest.raises(MalformedVersionError):
            parse_version(raw)

    def test_error_names_axis_and_string(self):
        """Verify the error identifies the axis and the offending string."""
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("1.2", axis="ruby")

        assert exc_info.value.axis == "ruby"
        assert exc_info.value.raw == "1.2"
        assert "ruby" in str(exc_info.value)
        assert "'1.2'" in str(exc_info.value)


@pytest.mark.unit
class TestCategorize:
    """Tests for categorize."""

    def test_mixed_major_lines(self):
        """Verify flags for two major lines with a shared minor line."""
        result = categorize({"2.7.0", "2.7.1", "3.0.0"})
        by_version = {v.full: v for v in result}

        assert _flags(by_version["3.0.0"]) == (True, True, True, True)
        assert _flags(by_version["2.7.1"]) == (True, True, True, False)
        assert _flags(by_version["2.7.0"]) == (False, False, True, False)

    def test_sorted_descending(self):
        """Verify output is newest first."""
        result = categorize(["2.7.0", "3.0.0", "2.7.1"])

        assert [v.full for v in result] == ["3.0.0", "2.7.1", "2.7.0"]

    def test_sorts_numerically_not_lexicographically(self):
        """Verify 2.10.0 sorts above 2.9.9."""
        result = categorize(["2.9.9", "2.10.0", "10.0.0", "9.1.1"])

        assert [v.full for v in result] == ["10.0.0", "9.1.1", "2.10.0", "2.9.9"]
        assert result[0].is_latest

    def test_single_version_gets_every_flag(self):
        """Verify a single-element axis is representative of everything."""
        (only,) = categorize(["1.50.0"])

        assert _flags(only) == (True, True, True, True)

    def test_minor_representative_per_minor_line(self):
        """Verify each (major, minor) line gets its own representative."""
        result = categorize(["2.6.5", "2.6.6", "2.7.1", "2.7.2", "3.0.0"])
        minors = [v.full for v in result if v.is_minor_representative]
        majors = [v.full for v in result if v.is_major_representative]

        assert minors == ["3.0.0", "2.7.2", "2.6.6"]
        assert majors == ["3.0.0", "2.7.2"]

    def test_duplicates_are_ignored(self):
        """Verify duplicate strings collapse into one version."""
        result = categorize(["1.0.0", "1.0.0", "1.1.0"])

        assert [v.full for v in result] == ["1.1.0", "1.0.0"]

    def test_empty_axis_raises(self):
        """Verify an empty axis is a configuration error."""
        with pytest.raises(EmptyAxisError) as exc_info:
            categorize(set(), axis="rust")

        assert exc_info.value.axis == "rust"
        assert "rust" in str(exc_info.value)

    def test_malformed_version_aborts(self):
        """Verify one bad string fails the whole axis."""
        with pytest.raises(MalformedVersionError):
            categorize({"1.2.3", "1.2"})

    def test_is_pure(self):
        """Verify repeated calls give identical results."""
        versions = {"2.7.0", "2.7.1", "3.0.0", "2.6.9"}

        assert categorize(versions) == categorize(versions)


@pytest.mark.unit
class TestCategorizeInvariants:
    """Property checks over randomly generated axes."""

    @pytest.fixture(params=range(25))
    def raw_versions(self, request):
        """Generate a random, possibly duplicated, version list."""
        rng = random.Random(request.param)
        count = rng.randint(1, 30)
        return [
            f"{rng.randint(0, 3)}.{rng.randint(0, 4)}.{rng.randint(0, 12)}"
            for _ in range(count)
        ]

    def test_cardinality_matches_unique_input(self, raw_versions):
        """Verify one output version per distinct input string."""
        assert len(categorize(raw_versions)) == len(set(raw_versions))

    def test_single_latest_is_maximum(self, raw_versions):
        """Verify exactly one latest version, the numeric maximum."""
        result = categorize(raw_versions)
        latest = [v for v in result if v.is_latest]

        assert len(latest) == 1
        assert latest[0].key == max(parse_version(raw) for raw in raw_versions)

    def test_one_major_representative_per_major(self, raw_versions):
        """Verify each major line has exactly one representative, its maximum."""
        result = categorize(raw_versions)

        for major in {v.major for v in result}:
            group = [v for v in result if v.major == major]
            reps = [v for v in group if v.is_major_representative]
            assert len(reps) == 1
            assert reps[0].key == max(v.key for v in group)

    def test_one_minor_representative_per_minor(self, raw_versions):
        """Verify each minor line has exactly one representative, its maximum."""
        result = categorize(raw_versions)

        for line in {(v.major, v.minor) for v in result}:
            group = [v for v in result if (v.major, v.minor) == line]
            reps = [v for v in group if v.is_minor_representative]
            assert len(reps) == 1
            assert reps[0].key == max(v.key for v in group)

    def test_every_version_is_patch_representative(self, raw_versions):
        """Verify the patch flag is unconditional."""
        assert all(v.is_patch_representative for v in categorize(raw_versions))
