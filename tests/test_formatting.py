import pytest

from mapbook.utils.formatting import (
    percent,
    with_commas,
    hard_wrap,
    split_string_into_n_parts,
    format_table_as_text,
)

TITLE = "Median household income by census tract across the five boroughs of New York City"


class TestPercent:
    def test_default_precision(self):
        assert percent(0.1524) == "15.24%"

    def test_custom_precision(self):
        assert percent(0.5, decimals=0) == "50%"
        assert percent(1 / 3, decimals=1) == "33.3%"

    def test_over_one_and_negative(self):
        assert percent(1.25) == "125.00%"
        assert percent(-0.05) == "-5.00%"


class TestWithCommas:
    def test_integer(self):
        assert with_commas(1234567) == "1,234,567"

    def test_small_and_negative(self):
        assert with_commas(999) == "999"
        assert with_commas(-1234567) == "-1,234,567"

    def test_float_is_rounded(self):
        assert with_commas(1234567.89) == "1,234,568"

    def test_decimals(self):
        assert with_commas(1234567.891, decimals=2) == "1,234,567.89"

    def test_large_int_keeps_precision(self):
        assert with_commas(12345678901234567890) == "12,345,678,901,234,567,890"

    @pytest.mark.parametrize("n", [0, 7, 1000, 65536, 987654321, -42000])
    def test_parses_back(self, n):
        assert int(with_commas(n).replace(",", "")) == n


class TestHardWrap:
    @pytest.mark.parametrize("width", [10, 20, 35])
    def test_lines_within_width(self, width):
        for line in hard_wrap(TITLE, width).splitlines():
            assert len(line) <= width

    def test_words_are_kept_whole(self):
        assert hard_wrap(TITLE, 20).split() == TITLE.split()

    def test_long_word_gets_own_line(self):
        wrapped = hard_wrap("a supercalifragilistic word", 10)
        assert wrapped.splitlines() == ["a", "supercalifragilistic", "word"]

    def test_existing_newlines_kept(self):
        assert hard_wrap("first line\nsecond", 40) == "first line\nsecond"

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            hard_wrap(TITLE, 0)


class TestSplitStringIntoNParts:
    @pytest.mark.parametrize("n", [1, 2, 3, 4, 7])
    def test_returns_exactly_n_parts(self, n):
        assert len(split_string_into_n_parts(TITLE, n)) == n

    @pytest.mark.parametrize("n", [2, 3, 4])
    def test_breaks_on_spaces(self, n):
        parts = split_string_into_n_parts(TITLE, n)
        assert " ".join(parts) == TITLE
        assert all(not p.startswith(" ") and not p.endswith(" ") for p in parts)

    def test_two_words(self):
        assert split_string_into_n_parts("hello world", 2) == ["hello", "world"]

    def test_parts_are_balanced(self):
        parts = split_string_into_n_parts(TITLE, 3)
        lengths = [len(p) for p in parts]
        assert max(lengths) - min(lengths) < len(TITLE) // 3

    def test_no_whitespace_splits_mid_word(self):
        parts = split_string_into_n_parts("abcdefghij", 2)
        assert parts == ["abcde", "fghij"]

    def test_short_text_pads_with_empty_parts(self):
        parts = split_string_into_n_parts("ab", 4)
        assert len(parts) == 4
        assert "".join(parts) == "ab"

    def test_single_part_is_whole_text(self):
        assert split_string_into_n_parts(TITLE, 1) == [TITLE]

    def test_invalid_n(self):
        with pytest.raises(ValueError):
            split_string_into_n_parts(TITLE, 0)


class TestFormatTableAsText:
    def test_layout(self):
        text = format_table_as_text(["Borough", "Trips"], [["Manhattan", 125000], ["Queens", 21000]])
        lines = text.splitlines()
        assert len(lines) == 4
        assert "Borough" in lines[0] and "Trips" in lines[0]
        assert set(lines[1]) == {"-"}
        assert len(lines[1]) == len(lines[0])
        assert "Manhattan" in lines[2] and "125000" in lines[2]

    def test_no_rows(self):
        assert format_table_as_text(["a", "b"], []) == "a  b\n----"

    def test_ragged_row_raises(self):
        with pytest.raises(ValueError):
            format_table_as_text(["a", "b"], [[1, 2], [3]])


class TestRoundingAndLayoutDetails:
    @pytest.mark.parametrize("number, expected", [
        (0.5, "1"),
        (2.5, "3"),
        (1234.5, "1,235"),
        (-2.5, "-3"),
    ])
    def test_with_commas_rounds_half_up(self, number, expected):
        assert with_commas(number) == expected

    def test_with_commas_half_up_with_decimals(self):
        assert with_commas(1.125, decimals=2) == "1.13"

    def test_table_keeps_values_as_given(self):
        text = format_table_as_text(["x", "name"], [[1, "a"], [2.5, "bb"]])
        lines = text.splitlines()
        assert lines[2].split() == ["1", "a"]
        assert lines[3].split() == ["2.5", "bb"]

    def test_split_only_breaks_on_spaces(self):
        text = "line one\nline two"
        parts = split_string_into_n_parts(text, 2)
        assert len(parts) == 2
        assert " ".join(parts) == text
        assert "\n" in "".join(parts)
