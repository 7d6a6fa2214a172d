"""Unit tests for plain-text rendering of decoded codes."""

from isikukood_util.cli.rendering import describe_birth, render_identification_report
from isikukood_util.codec import parse_identification


class TestDescribeBirth:
    """Test describe_birth function."""

    def test_pre_2013_mentions_hospital(self):
        """Test hospital and local birth order for older codes."""
        sentence = describe_birth(parse_identification("37605030299"))

        assert sentence == (
            "The person was born on 03.05.1976. They were born in "
            "Ida-Tallinna keskhaigla, Pelgulinna sünnitusmaja (Tallinn) "
            "and was the 9 Male born"
        )

    def test_post_2013_uses_sequence(self):
        """Test centrally issued codes use the raw sequence."""
        sentence = describe_birth(parse_identification("51507200014"))

        assert sentence == "The person was born on 20.07.2015. They were the 1 Male born"

    def test_female(self):
        """Test gender wording for women."""
        sentence = describe_birth(parse_identification("60001010018"))

        assert sentence.endswith("Kuressaare haigla and was the 1 Female born")


class TestRenderIdentificationReport:
    """Test render_identification_report function."""

    def test_valid_report(self):
        """Test layout of a report for a valid code."""
        # Arrange
        parsed = parse_identification("37605030299")

        # Act
        report = render_identification_report("37605030299", parsed)

        # Assert
        lines = report.splitlines()
        assert lines[0] == "Your government ID 37605030299 Details:"
        assert lines[2] == "Checksum Validation:"
        assert lines[3] == "- Valid: Yes"
        assert lines[4] == "- Calculation: First calculation with weight 1:"
        assert "- Expected Checksum: 9" in lines
        assert "- Provided Checksum: 9" in lines
        assert lines[-1].startswith("- The person was born on 03.05.1976.")

    def test_invalid_report(self):
        """Test a checksum mismatch is shown as invalid."""
        parsed = parse_identification("37605160010")

        report = render_identification_report("37605160010", parsed)

        assert "- Valid: No" in report
        assert "- Expected Checksum: 2" in report
        assert "- Provided Checksum: 0" in report
