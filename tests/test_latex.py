import pytest

from baize.latex import (
    convert_formula,
    convert_matrix_to_markdown,
    convert_text_with_formulas,
    render,
)


def test_convert_formula_inline_collapses_whitespace():
    assert convert_formula("  a   +\t b ", True) == "$a + b$"


def test_convert_formula_block():
    assert convert_formula(" x  =  1 ", False) == "$$\nx = 1\n$$"


def test_convert_formula_defaults_to_inline():
    assert convert_formula("y") == "$y$"


def test_inline_formula_normalised():
    assert convert_text_with_formulas("x $a   b$ y") == "x $a b$ y"


def test_bracket_display_formula():
    assert convert_text_with_formulas("\\[ x \\]") == "$$\nx\n$$"


def test_starred_environment():
    text = "\\begin{align*}a = b\\end{align*}"
    assert convert_text_with_formulas(text) == "$$\na = b\n$$"


def test_plain_text_unchanged():
    assert convert_text_with_formulas("no math here") == "no math here"


def test_matrix_to_table():
    text = "\\begin{bmatrix}1 & 2 \\\\ 3 & 4\\end{bmatrix}"
    assert convert_matrix_to_markdown(text) == "\n| 1 | 2 |\n| --- | --- |\n| 3 | 4 |\n"


def test_matrix_empty_cell_becomes_space():
    text = "\\begin{bmatrix}1 & \\\\ & 2\\end{bmatrix}"
    result = convert_matrix_to_markdown(text)
    lines = result.strip("\n").split("\n")
    assert lines[0] == "| 1 |   |"
    assert lines[2] == "|   | 2 |"


def test_several_matrices_all_converted():
    one = "\\begin{bmatrix}a & b\\end{bmatrix}"
    result = convert_matrix_to_markdown(f"{one} and {one}")
    assert "bmatrix" not in result
    assert result.count("| a | b |") == 2
    assert " and " in result


def test_separator_matches_column_count():
    text = "\\begin{bmatrix}a & b & c\\end{bmatrix}"
    lines = convert_matrix_to_markdown(text).strip("\n").split("\n")
    assert lines[1].count("---") == 3


def test_text_without_matrix_unchanged():
    assert convert_matrix_to_markdown("plain") == "plain"


def test_render_fraction():
    assert render("\\frac{a}{b}") == "(a)/(b)"


def test_render_roots():
    assert render("\\sqrt[3]{x}") == "root(x, 3)"
    assert render("\\sqrt{x}") == "√(x)"


@pytest.mark.parametrize(
    "command, letter",
    [("\\alpha", "α"), ("\\beta", "β"), ("\\eta", "η"), ("\\theta", "θ"), ("\\omega", "ω")],
)
def test_render_greek(command, letter):
    assert render(command) == letter


def test_render_inline_formula_with_greek():
    assert render("$\\pi  r$") == "$π r$"