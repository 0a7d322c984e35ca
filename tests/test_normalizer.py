import pytest

from src.normalizer.api import InvalidConfiguration, calc_tabs, normalize_line, normalize_lines


@pytest.mark.parametrize("spaces,expected", [(0, 0), (1, 1), (4, 1), (5, 2), (8, 2)])
def test_calc_tabs_rounds_up(spaces, expected):
    assert calc_tabs(spaces, 4) == expected


def test_calc_tabs_width_one():
    assert calc_tabs(7, 1) == 7


def test_leading_spaces():
    assert normalize_line("    return 0;", 4) == "\treturn 0;"
    assert normalize_line("      return 0;", 4) == "\t\treturn 0;"
    assert normalize_line(" x", 8) == "\tx"


def test_leading_run_count_matches_calc_tabs():
    for n in range(1, 13):
        out = normalize_line(" " * n + "foo();", 4)
        assert out == "\t" * calc_tabs(n, 4) + "foo();"


def test_no_leading_space_untouched():
    assert normalize_line("\t  x = 1;", 4) == "\t  x = 1;"
    assert normalize_line("x  =  1;", 4) == "x  =  1;"


def test_only_spaces():
    assert normalize_line("     ", 4) == "\t\t"


def test_comment_at_start_unchanged():
    assert normalize_line("// comment", 4) == "// comment"


def test_spaces_before_comment():
    assert normalize_line("int x;    // note", 4) == "int x;\t// note"
    assert normalize_line("int x; // note", 4) == "int x;\t// note"


def test_combined():
    assert normalize_line("     x = 1;   // set", 4) == "\t\tx = 1;\t// set"


def test_indented_comment_line():
    # leading run is converted first, then nothing is left in front of //
    assert normalize_line("    // note", 4) == "\t// note"


def test_comment_without_spaces_before():
    assert normalize_line("x;// note", 4) == "x;// note"


def test_only_adjacent_run_before_comment():
    assert normalize_line("a  b   // c", 4) == "a  b\t// c"


def test_only_first_marker_counts():
    assert normalize_line("a // b   // c", 4) == "a\t// b   // c"


def test_marker_inside_string_literal_still_converted():
    line = 'url = "http:  //example";'
    assert normalize_line(line, 4) == 'url = "http:\t//example";'


def test_empty_line():
    assert normalize_line("", 4) == ""


@pytest.mark.parametrize("line", [
    "",
    "plain",
    "   a = 1;",
    "     x = 1;   // set",
    "  //",
    " a  //  b  // c",
    "\t  y;  // z",
])
@pytest.mark.parametrize("width", [1, 2, 4, 8])
def test_idempotent(line, width):
    once = normalize_line(line, width)
    assert normalize_line(once, width) == once


@pytest.mark.parametrize("width", [0, -4, True, 4.0, "4"])
def test_invalid_tab_width(width):
    with pytest.raises(InvalidConfiguration):
        normalize_line("    x", width)


def test_invalid_tab_width_rejected_before_any_line():
    with pytest.raises(InvalidConfiguration):
        normalize_lines([], 0)


def test_normalize_lines_preserves_line_count():
    inp = ["    a", "", "b  // c", "\td"]
    out = normalize_lines(inp, 4)
    assert out == ["\ta", "", "b\t// c", "\td"]
