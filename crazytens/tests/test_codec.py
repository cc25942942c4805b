"""
Tests for the numeral codec.

Tests:
- Base spec validation
- Normalization (whitespace, signs, aliases, leading zeros)
- Integer conversion in both directions
- Round trip
- Narrowing conversions
"""

import pytest

from ..errors import InvalidNumberFormat
from ..numerals import (
    BaseSpec,
    DECIMAL_SPEC,
    DOZENAL_SPEC,
    MAX_SAFE_INTEGER,
    validate_base_spec,
    normalize,
    is_valid,
    to_integer,
    from_integer,
    to_safe_int,
    from_number,
)


class TestValidateBaseSpec:
    """Tests for base spec validation."""

    def test_builtin_specs_are_valid(self):
        validate_base_spec(DECIMAL_SPEC)
        validate_base_spec(DOZENAL_SPEC)

    def test_radix_below_two_rejected(self):
        with pytest.raises(InvalidNumberFormat):
            validate_base_spec(BaseSpec(radix=1, digits=("0",)))

    def test_alphabet_length_must_match_radix(self):
        with pytest.raises(InvalidNumberFormat):
            validate_base_spec(BaseSpec(radix=3, digits=("0", "1")))

    def test_duplicate_symbol_rejected(self):
        with pytest.raises(InvalidNumberFormat):
            validate_base_spec(BaseSpec(radix=3, digits=("0", "1", "1")))

    def test_empty_symbol_rejected(self):
        with pytest.raises(InvalidNumberFormat):
            validate_base_spec(BaseSpec(radix=2, digits=("0", "")))

    def test_invalid_spec_fails_conversions(self):
        bad = BaseSpec(radix=2, digits=("0", "0"))
        with pytest.raises(InvalidNumberFormat):
            normalize("1", bad)
        with pytest.raises(InvalidNumberFormat):
            from_integer(1, bad)


class TestNormalize:
    """Tests for normalize()."""

    def test_outer_whitespace_trimmed(self):
        assert normalize("  42\n", DECIMAL_SPEC) == "42"

    def test_interior_whitespace_rejected(self):
        with pytest.raises(InvalidNumberFormat):
            normalize("4 2", DECIMAL_SPEC)

    def test_empty_rejected(self):
        for text in ("", "   "):
            with pytest.raises(InvalidNumberFormat):
                normalize(text, DECIMAL_SPEC)

    def test_minus_kept(self):
        assert normalize("-17", DECIMAL_SPEC) == "-17"

    def test_plus_dropped_when_allowed(self):
        assert normalize("+17", DECIMAL_SPEC) == "17"

    def test_plus_rejected_when_not_allowed(self):
        spec = BaseSpec(radix=2, digits=("0", "1"), allow_plus_sign=False)
        with pytest.raises(InvalidNumberFormat):
            normalize("+1", spec)
        assert normalize("-1", spec) == "-1"

    def test_sign_without_digits_rejected(self):
        with pytest.raises(InvalidNumberFormat):
            normalize("-", DECIMAL_SPEC)

    def test_dozenal_aliases_map_to_canonical_digits(self):
        assert normalize("A", DOZENAL_SPEC) == "↊"
        assert normalize("x", DOZENAL_SPEC) == "↊"
        assert normalize("B", DOZENAL_SPEC) == "↋"
        assert normalize("e", DOZENAL_SPEC) == "↋"
        assert normalize("1a", DOZENAL_SPEC) == "1↊"

    def test_unmapped_symbol_rejected(self):
        with pytest.raises(InvalidNumberFormat):
            normalize("Z", DOZENAL_SPEC)
        with pytest.raises(InvalidNumberFormat):
            normalize("A", DECIMAL_SPEC)

    def test_leading_zeros_stripped(self):
        assert normalize("007", DECIMAL_SPEC) == "7"
        assert normalize("000", DECIMAL_SPEC) == "0"
        assert normalize("-007", DECIMAL_SPEC) == "-7"

    def test_leading_zeros_kept_when_disabled(self):
        spec = BaseSpec(radix=10, digits=DECIMAL_SPEC.digits, strip_leading_zeros=False)
        assert normalize("007", spec) == "007"

    def test_negative_zero_is_plain_zero(self):
        assert normalize("-0", DECIMAL_SPEC) == "0"

    def test_is_valid(self):
        assert is_valid("↋", DOZENAL_SPEC)
        assert is_valid("E", DOZENAL_SPEC)
        assert not is_valid("Z", DOZENAL_SPEC)
        assert not is_valid("1 0", DOZENAL_SPEC)


class TestConversion:
    """Tests for to_integer() and from_integer()."""

    @pytest.mark.parametrize("text,value", [
        ("0", 0),
        ("↊", 10),
        ("↋", 11),
        ("10", 12),
        ("50", 60),
        ("100", 144),
        ("-1↊", -22),
    ])
    def test_dozenal_values(self, text, value):
        assert to_integer(text, DOZENAL_SPEC) == value
        assert from_integer(value, DOZENAL_SPEC) == text

    def test_zero_is_single_zero_digit(self):
        assert from_integer(0, DECIMAL_SPEC) == "0"
        assert from_integer(0, DOZENAL_SPEC) == "0"

    def test_arbitrary_precision(self):
        big = 12**40 + 5
        text = from_integer(big, DOZENAL_SPEC)
        assert text == "1" + "0" * 39 + "5"
        assert to_integer(text, DOZENAL_SPEC) == big

    def test_custom_alphabet(self):
        spec = BaseSpec(radix=2, digits=("o", "i"))
        assert to_integer("iio", spec) == 6
        assert from_integer(6, spec) == "iio"

    def test_from_integer_rejects_non_ints(self):
        with pytest.raises(InvalidNumberFormat):
            from_integer(True, DECIMAL_SPEC)
        with pytest.raises(InvalidNumberFormat):
            from_integer(1.0, DECIMAL_SPEC)


class TestRoundTrip:
    """format(parse(s)) == normalize(s) for valid strings."""

    @pytest.mark.parametrize("text", [
        "0", "00", "+0", "-0", "7", "0007", "1↊", "a", "-b", "+E0",
        "10", "↋↋↋", "X0X", "1000000000000000000000000",
    ])
    def test_dozenal_round_trip(self, text):
        assert from_integer(to_integer(text, DOZENAL_SPEC), DOZENAL_SPEC) == normalize(text, DOZENAL_SPEC)

    def test_round_trip_over_a_range(self):
        for spec in (DECIMAL_SPEC, DOZENAL_SPEC):
            for n in range(-300, 300):
                text = from_integer(n, spec)
                assert to_integer(text, spec) == n
                assert normalize(text, spec) == text


class TestNarrowing:
    """Tests for to_safe_int() and from_number()."""

    def test_safe_range_accepted(self):
        text = from_integer(MAX_SAFE_INTEGER, DOZENAL_SPEC)
        assert to_safe_int(text, DOZENAL_SPEC) == MAX_SAFE_INTEGER

    def test_beyond_safe_range_rejected(self):
        text = from_integer(MAX_SAFE_INTEGER + 1, DOZENAL_SPEC)
        with pytest.raises(InvalidNumberFormat):
            to_safe_int(text, DOZENAL_SPEC)
        with pytest.raises(InvalidNumberFormat):
            to_safe_int("-" + text, DOZENAL_SPEC)

    def test_from_number_accepts_integral_floats(self):
        assert from_number(12.0, DOZENAL_SPEC) == "10"
        assert from_number(144, DOZENAL_SPEC) == "100"

    @pytest.mark.parametrize("value", [1.5, float("inf"), float("nan"), True, 2.0**60, 2**60])
    def test_from_number_rejects_lossy_inputs(self, value):
        with pytest.raises(InvalidNumberFormat):
            from_number(value, DECIMAL_SPEC)

    def test_invalid_number_format_is_a_value_error(self):
        with pytest.raises(ValueError):
            to_integer("?", DECIMAL_SPEC)
