"""Turn LaTeX snippets in editor text into Markdown-friendly notation."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_INLINE = re.compile(r"\$([^$]+)\$")
_BLOCK = re.compile(r"\\\[(.*?)\\\]|\$\$(.*?)\$\$", re.DOTALL)
_ENVIRONMENT = re.compile(r"\\begin\{([a-z]+)\*\}(.*?)\\end\{\1\*\}", re.DOTALL)
_MATRIX = re.compile(r"\\begin\{bmatrix\}(.*?)\\end\{bmatrix\}", re.DOTALL)
_FRACTION = re.compile(r"\\frac\{([^{}]+)\}\{([^{}]+)\}")
_ROOT = re.compile(r"\\sqrt\[([^]]+)\]\{([^{}]+)\}")
_SQUARE_ROOT = re.compile(r"\\sqrt\{([^{}]+)\}")

_GREEK = {
    "\\alpha": "α", "\\beta": "β", "\\gamma": "γ", "\\delta": "δ",
    "\\epsilon": "ε", "\\zeta": "ζ", "\\eta": "η", "\\theta": "θ",
    "\\iota": "ι", "\\kappa": "κ", "\\lambda": "λ", "\\mu": "μ",
    "\\nu": "ν", "\\xi": "ξ", "\\pi": "π", "\\rho": "ρ",
    "\\sigma": "σ", "\\tau": "τ", "\\upsilon": "υ", "\\phi": "φ",
    "\\chi": "χ", "\\psi": "ψ", "\\omega": "ω",
}


def convert_formula(formula: str, inline: bool = True) -> str:
    """Collapse whitespace in a formula and wrap it in Markdown math markers."""
    converted = _WHITESPACE.sub(" ", formula.strip())
    if inline:
        return f"${converted}$"
    return f"$$\n{converted}\n$$"


def convert_text_with_formulas(text: str) -> str:
    """Normalise inline, display and starred-environment formulas in ``text``."""
    result = text

    for match in _INLINE.finditer(text):
        formula = match.group(1)
        result = result.replace(f"${formula}$", convert_formula(formula, True))

    for match in _BLOCK.finditer(text):
        formula = match.group(1) or match.group(2) or ""
        result = result.replace(match.group(0), convert_formula(formula, False))

    for match in _ENVIRONMENT.finditer(text):
        result = result.replace(match.group(0), convert_formula(match.group(2), False))

    return result


def _matrix_table(body: str) -> str:
    rows = []
    for row in body.strip().split("\\\\"):
        cells = [cell.strip() or " " for cell in row.split("&")]
        rows.append("| " + " | ".join(cells) + " |")
    separator = "|" + " --- |" * (rows[0].count("|") - 1)
    rows.insert(1, separator)
    return "\n" + "\n".join(rows) + "\n"


def convert_matrix_to_markdown(text: str) -> str:
    """Replace every ``bmatrix`` environment with a Markdown table."""
    result = text
    pos = 0
    while (match := _MATRIX.search(result, pos)) is not None:
        replacement = _matrix_table(match.group(1))
        result = result[: match.start()] + replacement + result[match.end():]
        pos = match.start() + len(replacement)
    return result


def render(text: str) -> str:
    """Convert formulas, matrices, fractions, roots and Greek letters in ``text``."""
    output = convert_text_with_formulas(text)
    output = convert_matrix_to_markdown(output)
    output = _FRACTION.sub(r"(\1)/(\2)", output)
    output = _ROOT.sub(r"root(\2, \1)", output)
    output = _SQUARE_ROOT.sub(r"√(\1)", output)
    for command, letter in _GREEK.items():
        output = output.replace(command, letter)
    return output