"""Unit tests for gender digit and hospital sequence resolution."""

import pytest

from isikukood_util.codec.gender import (
    GENDER_DIGITS,
    determine_gender,
    encode_gender_digit,
)
from isikukood_util.codec.hospital import (
    HOSPITAL_RANGES,
    determine_hospital,
    determine_hospital_or_birth_sequence,
)
from isikukood_util.models.identification import Gender, GenderCenturyInfo, HospitalInfo
from isikukood_util.utils.exceptions import (
    InvalidGenderDigitError,
    InvalidSequenceNumberError,
    InvalidYearRangeError,
)


class TestDetermineGender:
    """Test suite for determine_gender function."""

    @pytest.mark.parametrize(
        "digit,gender,century",
        [
            (1, Gender.MALE, 1800),
            (2, Gender.FEMALE, 1800),
            (3, Gender.MALE, 1900),
            (4, Gender.FEMALE, 1900),
            (5, Gender.MALE, 2000),
            (6, Gender.FEMALE, 2000),
            (7, Gender.MALE, 2100),
            (8, Gender.FEMALE, 2100),
        ],
    )
    def test_all_digits(self, digit, gender, century):
        """Test every valid leading digit."""
        assert determine_gender(digit) == GenderCenturyInfo(gender, century)

    @pytest.mark.parametrize("digit", [0, 9, -1, 10])
    def test_invalid_digit_raises(self, digit):
        """Test digits outside 1-8 raise InvalidGenderDigitError."""
        # Act & Assert
        with pytest.raises(InvalidGenderDigitError) as exc_info:
            determine_gender(digit)

        assert exc_info.value.digit == digit
        assert exc_info.value.kind == "InvalidGenderDigit"

    def test_mapping_is_read_only(self):
        """Test the digit table cannot be mutated."""
        with pytest.raises(TypeError):
            GENDER_DIGITS[9] = GenderCenturyInfo(Gender.MALE, 2200)  # type: ignore[index]


class TestEncodeGenderDigit:
    """Test suite for encode_gender_digit function."""

    @pytest.mark.parametrize(
        "gender,year,expected",
        [
            (Gender.MALE, 1800, 1),
            (Gender.FEMALE, 1899, 2),
            (Gender.MALE, 1976, 3),
            (Gender.FEMALE, 1950, 4),
            (Gender.MALE, 2000, 5),
            (Gender.FEMALE, 2099, 6),
            (Gender.MALE, 2199, 7),
            (Gender.FEMALE, 2100, 8),
        ],
    )
    def test_encoding(self, gender, year, expected):
        """Test sex and year map to the expected digit."""
        assert encode_gender_digit(gender, year) == expected

    def test_inverse_of_determine_gender(self):
        """Test encoding round-trips through the digit table."""
        for digit, info in GENDER_DIGITS.items():
            assert encode_gender_digit(info.gender, info.century + 42) == digit

    @pytest.mark.parametrize("year", [1799, 2200])
    def test_out_of_range_year_raises(self, year):
        """Test years outside 1800-2199 raise InvalidYearRangeError."""
        with pytest.raises(InvalidYearRangeError, match=str(year)):
            encode_gender_digit(Gender.MALE, year)


class TestHospitalTable:
    """Test the hospital range table itself."""

    def test_ranges_sorted_and_disjoint(self):
        """Test ranges are ordered and never overlap."""
        for previous, current in zip(HOSPITAL_RANGES, HOSPITAL_RANGES[1:]):
            assert previous.upper < current.lower

    def test_offsets_start_order_at_one(self):
        """Test each range's lower bound maps to birth order 1."""
        for hospital_range in HOSPITAL_RANGES:
            assert hospital_range.lower - hospital_range.offset == 1

    def test_fifteen_ranges(self):
        """Test the table covers 15 hospitals or regions."""
        assert len(HOSPITAL_RANGES) == 15


class TestDetermineHospital:
    """Test suite for determine_hospital function."""

    @pytest.mark.parametrize(
        "sequence,name,order",
        [
            (1, "Kuressaare haigla", "1"),
            (10, "Kuressaare haigla", "10"),
            (11, "Tartu Ülikooli Naistekliinik", "1"),
            (19, "Tartu Ülikooli Naistekliinik", "9"),
            (21, "Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn)", "1"),
            (29, "Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn)", "9"),
            (150, "Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn)", "130"),
            (151, "Keila haigla", "1"),
            (375, "Narva haigla", "5"),
            (600, "Valga haigla", "30"),
            (700, "Lõuna-Eesti haigla (Võru), Põlva haigla", "50"),
        ],
    )
    def test_boundaries(self, sequence, name, order):
        """Test lookups at and inside range boundaries."""
        assert determine_hospital(sequence) == HospitalInfo(birth_order=order, name=name)

    @pytest.mark.parametrize("sequence", [0, 20, 701, 999])
    def test_unassigned_sequence_raises(self, sequence):
        """Test sequences outside every range raise InvalidSequenceNumberError."""
        # Act & Assert
        with pytest.raises(InvalidSequenceNumberError) as exc_info:
            determine_hospital(sequence)

        assert exc_info.value.sequence == sequence
        assert f"{sequence:03d}" in str(exc_info.value)


class TestDetermineHospitalOrBirthSequence:
    """Test suite for determine_hospital_or_birth_sequence function."""

    def test_before_2013_uses_hospital_table(self):
        """Test births before 2013 resolve a hospital."""
        result = determine_hospital_or_birth_sequence(29, 2012)

        assert result.name == "Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn)"
        assert result.birth_order == "9"

    def test_from_2013_uses_flat_ordinal(self):
        """Test births from 2013 keep the sequence as is, without hospital."""
        result = determine_hospital_or_birth_sequence(29, 2013)

        assert result == HospitalInfo(birth_order="29", name=None)

    def test_from_2013_accepts_any_sequence(self):
        """Test sequences outside the hospital table are fine after 2013."""
        assert determine_hospital_or_birth_sequence(999, 2020).birth_order == "999"
        assert determine_hospital_or_birth_sequence(0, 2020).birth_order == "0"

    def test_before_2013_unassigned_sequence_raises(self):
        """Test pre-2013 sequence 20 is rejected."""
        with pytest.raises(InvalidSequenceNumberError):
            determine_hospital_or_birth_sequence(20, 1990)
