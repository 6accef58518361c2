"""Tests for the individual constraint checkers, run through the engine.

Each directive is exercised on passing values, failing values, and the
values it deliberately skips.
"""

import pytest


def _check(engine, value, **directives):
    """Validate a single parameter ``p`` carrying the given directives."""
    return engine.validate([{"name": "p", **directives}], {"p": value})


class TestTypeDirective:
    """Numeric types parse leniently; string and boolean check runtime types."""

    @pytest.mark.parametrize("value", ["42", "42abc", "  -7", "+3", 42, 4.9])
    def test_int_accepts_numeric_prefix(self, engine, value):
        assert _check(engine, value, type="int") is None

    @pytest.mark.parametrize("value", ["abc", "", "x42", True, None, {}])
    def test_int_rejects_non_numeric(self, engine, value):
        assert _check(engine, value, type="int").message == "p should be an integer"

    @pytest.mark.parametrize("value", ["3.14", "3.14xyz", ".5", "1e3", "-Infinity", 2])
    def test_float_accepts_numeric_prefix(self, engine, value):
        assert _check(engine, value, type="float") is None

    @pytest.mark.parametrize("value", ["abc", ".", "e5", False])
    def test_float_rejects_non_numeric(self, engine, value):
        assert _check(engine, value, type="float").message == "p should be a floating point number"

    def test_string(self, engine):
        assert _check(engine, "hello", type="string") is None
        assert _check(engine, 5, type="string").message == "p should be a string"

    def test_boolean(self, engine):
        assert _check(engine, False, type="boolean") is None
        assert _check(engine, "true", type="boolean").message == "p should be a boolean"
        assert _check(engine, 1, type="boolean").message == "p should be a boolean"

    @pytest.mark.parametrize("value", [
        "2024-01-15",
        "2024-01-15T10:30:00Z",
        "2024-01-15T10:30:00+02:00",
        "January 15, 2024",
        "01/15/2024",
        "Mon, 15 Jan 2024 10:30:00 GMT",
        1705312200000,
    ])
    def test_date_accepts_common_layouts(self, engine, value):
        assert _check(engine, value, type="date") is None

    @pytest.mark.parametrize("value", ["2024-02-30", "not a date", "", float("nan"), 9e15])
    def test_date_rejects_invalid(self, engine, value):
        assert _check(engine, value, type="date").message == "p should be a valid date"


class TestLengthDirective:

    def test_exact_length(self, engine):
        assert _check(engine, "abc", length=3) is None
        assert _check(engine, "abcd", length=3).message == "p should have a length of 3"

    def test_non_strings_skipped(self, engine):
        assert _check(engine, 12345, length=3) is None
        assert _check(engine, ["a", "b"], length=3) is None

    def test_zero_length_is_enforced(self, engine):
        assert _check(engine, "x", length=0).message == "p should have a length of 0"


class TestRangeDirective:

    def test_inclusive_bounds(self, engine):
        assert _check(engine, 1, range=[1, 10]) is None
        assert _check(engine, 10, range=[1, 10]) is None
        assert _check(engine, 11, range=[1, 10]).message == "p should be in the range [1, 10]"

    def test_fractional_bounds_in_message(self, engine):
        assert _check(engine, 3, range=[0.5, 2.5]).message == "p should be in the range [0.5, 2.5]"

    def test_whole_float_bounds_render_as_integers(self, engine):
        assert _check(engine, 0, range=[1.0, 10.0]).message == "p should be in the range [1, 10]"

    @pytest.mark.parametrize("value", ["11", True, None, [50]])
    def test_non_numbers_skipped(self, engine, value):
        assert _check(engine, value, range=[1, 10]) is None


class TestValuesDirective:

    def test_every_token_must_be_allowed(self, engine):
        allowed = ["admin", "user"]

        assert _check(engine, "admin user", values=allowed) is None
        assert _check(engine, "admin guest", values=allowed).message == "p should have a value among admin, user"

    def test_empty_allowed_set_rejects_everything(self, engine):
        assert _check(engine, "x", values=[]).message == "p should have a value among "

    def test_non_string_values_compared_as_text(self, engine):
        assert _check(engine, 42, values=["42"]) is None


class TestRegexDirective:

    def test_anchored_pattern(self, engine):
        assert _check(engine, "123", regex="^[0-9]{3}$") is None
        assert _check(engine, "12a", regex="^[0-9]{3}$").message == "p should match the format /^[0-9]{3}$/"

    def test_unanchored_pattern_searches(self, engine):
        assert _check(engine, "ab1", regex="[0-9]") is None

    def test_dollar_matches_before_trailing_newline(self, engine):
        assert _check(engine, "123\n", regex="^[0-9]{3}$") is None
        assert _check(engine, "123\n", regex=r"^[0-9]{3}\Z") is not None

    def test_empty_pattern_is_not_applied(self, engine):
        assert _check(engine, "anything", regex="") is None


class TestEmailDirective:

    @pytest.mark.parametrize("value", ["user@example.com", "first.last+tag@sub.domain.io"])
    def test_valid(self, engine, value):
        assert _check(engine, value, isEmail=True) is None

    @pytest.mark.parametrize("value", ["not-an-email", "a b@c.d", "a@b", "a@@b.c", "user@example.com\n"])
    def test_invalid(self, engine, value):
        assert _check(engine, value, isEmail=True).message == "p should be a valid email address"

    def test_false_flag_is_not_applied(self, engine):
        assert _check(engine, "nope", isEmail=False) is None


class TestStrongPasswordDirective:

    MESSAGE = (
        "p should be a strong password (at least 8 characters, including uppercase, "
        "lowercase, number, and special character)"
    )

    def test_strong(self, engine):
        assert _check(engine, "Passw0rd!", isStrongPassword=True) is None

    @pytest.mark.parametrize("value", ["password", "Passw0rd", "passw0rd!", "PASSW0RD!", "Pa0!", "Pass w0rd!"])
    def test_weak(self, engine, value):
        assert _check(engine, value, isStrongPassword=True).message == self.MESSAGE


class TestPatternContainsDirective:

    def test_substring(self, engine):
        assert _check(engine, "#python", patternContains="#") is None
        assert _check(engine, "python", patternContains="#").message == 'p should contain the pattern "#"'

    def test_list_membership(self, engine):
        assert _check(engine, ["a", "#"], patternContains="#") is None
        assert _check(engine, ["#a"], patternContains="#") is not None


class TestArrayDirectives:

    def test_array_length(self, engine):
        assert _check(engine, [1, 2], arrayLength=2) is None
        assert _check(engine, [1], arrayLength=2).message == "p should be an array with length of 2"
        assert _check(engine, "ab", arrayLength=2).message == "p should be an array with length of 2"

    def test_array_of_numbers(self, engine):
        assert _check(engine, [1, 2.5], isArrayOfNumbers=True) is None
        assert _check(engine, [], isArrayOfNumbers=True) is None

    @pytest.mark.parametrize("value", [[1, "2"], [True], "1,2", 3])
    def test_not_array_of_numbers(self, engine, value):
        assert _check(engine, value, isArrayOfNumbers=True).message == "p should be an array of numbers"


class TestIpRangeDirective:
    """Addresses compare on their folded 32-bit form."""

    RANGE = ["192.168.1.1", "192.168.1.255"]

    def test_inside_and_on_bounds(self, engine):
        assert _check(engine, "192.168.1.1", ipRange=self.RANGE) is None
        assert _check(engine, "192.168.1.255", ipRange=self.RANGE) is None

    def test_outside(self, engine):
        failure = _check(engine, "192.168.2.1", ipRange=self.RANGE)

        assert failure.message == "p should be in the IP range 192.168.1.1 - 192.168.1.255"

    def test_private_ten_block(self, engine):
        ten = ["10.0.0.0", "10.255.255.255"]

        assert _check(engine, "10.1.2.3", ipRange=ten) is None
        assert _check(engine, "11.0.0.1", ipRange=ten) is not None

    def test_octets_are_not_range_checked(self, engine):
        # 10.0.0.300 folds to the same number as 10.0.1.44
        assert _check(engine, "10.0.0.300", ipRange=["10.0.0.0", "10.0.1.255"]) is None

    def test_non_numeric_address_is_not_rejected(self, engine):
        assert _check(engine, "not-an-ip", ipRange=self.RANGE) is None


class TestDateRangeDirective:

    RANGE = ["2024-01-01", "2024-12-31"]
    MESSAGE = "p should be a date between 2024-01-01 and 2024-12-31"

    @pytest.mark.parametrize("value", ["2024-01-01", "2024-06-15", "2024-12-31"])
    def test_inside_inclusive(self, engine, value):
        assert _check(engine, value, dateRange=self.RANGE) is None

    @pytest.mark.parametrize("value", ["2023-12-31", "2025-01-01", "2024-12-31T12:00:00Z", "garbage"])
    def test_outside_or_invalid(self, engine, value):
        assert _check(engine, value, dateRange=self.RANGE).message == self.MESSAGE

    def test_unparseable_bound_does_not_constrain(self, engine):
        assert _check(engine, "2030-01-01", dateRange=["2024-01-01", "someday"]) is None


class TestJsonDirective:

    @pytest.mark.parametrize("value", ['{"a": 1}', "[1, 2]", "  true ", 42, None])
    def test_valid(self, engine, value):
        assert _check(engine, value, isJSON=True) is None

    @pytest.mark.parametrize("value", ["{a:1}", "", "NaN", "[1,]", {"a": 1}, "[" * 100_000])
    def test_invalid(self, engine, value):
        assert _check(engine, value, isJSON=True).message == "p should be a valid JSON string"
