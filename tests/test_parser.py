"""
Tests for the result page parser.
"""

from conftest import result_page
from result_checker.parser import parse_result_page


class TestParseResultPage:
    """Test name and marks extraction."""

    def test_student_found_with_subject(self):
        """Test the last cell of the matching row is the mark."""
        html = result_page("HAMZA MUNIR", [
            ["1", "ENGLISH", "60", "0", "60"],
            ["2", "PHYSICS", "50", "35", "85"],
        ])

        assert parse_result_page(html, "PHYSICS") == ("HAMZA MUNIR", "85", True)

    def test_name_is_trimmed(self):
        """Test whitespace around the name is removed."""
        html = result_page("  \n HAMZA MUNIR \t", [["1", "PHYSICS", "50", "35", "85"]])

        name, _, found = parse_result_page(html, "PHYSICS")
        assert name == "HAMZA MUNIR"
        assert found

    def test_empty_name_means_not_found(self):
        """Test an empty name element reports no record."""
        html = result_page("", [["1", "PHYSICS", "50", "35", "85"]])

        assert parse_result_page(html, "PHYSICS") == ("N/A", "N/A", False)

    def test_missing_name_element(self):
        """Test a page without the name element reports no record."""
        assert parse_result_page("<html><body></body></html>", "PHYSICS") == ("N/A", "N/A", False)

    def test_subject_not_listed(self):
        """Test a found student without the subject gets N/A marks."""
        html = result_page("AYESHA KHAN", [["1", "BIOLOGY", "40", "20", "60"]])

        assert parse_result_page(html, "PHYSICS") == ("AYESHA KHAN", "N/A", True)

    def test_missing_table(self):
        """Test a found student with no subjects table."""
        html = '<span id="ContentPlaceHolder1_lblNameValue">AYESHA KHAN</span>'

        assert parse_result_page(html, "PHYSICS") == ("AYESHA KHAN", "N/A", True)

    def test_first_match_wins(self):
        """Test only the first row mentioning the subject is used."""
        html = result_page("BILAL AHMED", [
            ["1", "PHYSICS (THEORY)", "50", "", "50"],
            ["2", "PHYSICS (PRACTICAL)", "", "25", "25"],
        ])

        _, marks, _ = parse_result_page(html, "PHYSICS")
        assert marks == "50"

    def test_match_is_case_sensitive(self):
        """Test a lower-case subject name does not match."""
        html = result_page("BILAL AHMED", [["1", "Physics", "50", "35", "85"]])

        _, marks, _ = parse_result_page(html, "PHYSICS")
        assert marks == "N/A"

    def test_marks_returned_as_text(self):
        """Test non-numeric marks are passed through untouched."""
        html = result_page("SANA IQBAL", [["1", "PHYSICS", "ABS", "ABS", " ABSENT "]])

        _, marks, _ = parse_result_page(html, "PHYSICS")
        assert marks == "ABSENT"

    def test_empty_last_cell(self):
        """Test an empty marks cell becomes N/A."""
        html = result_page("SANA IQBAL", [["1", "PHYSICS", "50", "35", ""]])

        _, marks, found = parse_result_page(html, "PHYSICS")
        assert marks == "N/A"
        assert found

    def test_nested_markup_keeps_inner_spaces(self):
        """Test words in separate elements stay separated in name and marks."""
        html = """
        <span id="ContentPlaceHolder1_lblNameValue"> <b>HAMZA</b> <b>MUNIR</b> </span>
        <table id="ContentPlaceHolder1_gvSubjects">
          <tr><td>1</td><td>PHYSICS</td><td> <span>85</span> <i>(A+)</i> </td></tr>
        </table>
        """

        assert parse_result_page(html, "PHYSICS") == ("HAMZA MUNIR", "85 (A+)", True)
