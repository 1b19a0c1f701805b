# atomlab/display_format_v1.py
# Shared display helpers for formulas and ion charges.
# Pure string formatting, no chemistry decisions.

from __future__ import annotations

from atomlab.ion_registry_v1 import Ion


SUBSCRIPT_DIGITS = ("₀", "₁", "₂", "₃", "₄", "₅", "₆", "₇", "₈", "₉")

PLUS_GLYPH = "⁺"
MINUS_GLYPH = "⁻"


def to_subscript(n: int) -> str:
    """
    12 -> "₁₂". Digit-by-digit over the decimal representation.
    """
    if n < 0:
        raise ValueError("subscript counts must be >= 0")
    return "".join(SUBSCRIPT_DIGITS[int(d)] for d in str(n))


def charge_display(charge: int) -> str:
    """
    +1 -> "⁺", -1 -> "⁻", +2 -> "2⁺", -3 -> "3⁻"
    """
    sign = PLUS_GLYPH if charge > 0 else MINUS_GLYPH
    magnitude = abs(charge)
    return sign if magnitude == 1 else f"{magnitude}{sign}"


def ion_label(ion: Ion) -> str:
    return f"{ion.symbol}{charge_display(ion.charge)}"


def pair_label(cation: Ion, anion: Ion) -> str:
    return f"{ion_label(cation)} + {ion_label(anion)}"


def symbol_with_count(symbol: str, count: int) -> str:
    # a count of 1 is never written
    return symbol if count == 1 else f"{symbol}{to_subscript(count)}"


SUPERSCRIPT_DIGITS = ("⁰", "¹", "²", "³", "⁴", "⁵", "⁶", "⁷", "⁸", "⁹")


def superscript_charge(charge: int) -> str:
    """
    Fully raised form used in prose: +1 -> "⁺", +2 -> "²⁺", -3 -> "³⁻"
    """
    sign = PLUS_GLYPH if charge > 0 else MINUS_GLYPH
    magnitude = abs(charge)
    if magnitude == 1:
        return sign
    return "".join(SUPERSCRIPT_DIGITS[int(d)] for d in str(magnitude)) + sign


def ion_text_label(ion: Ion) -> str:
    # "Ca²⁺", as written in explanation sentences
    return f"{ion.symbol}{superscript_charge(ion.charge)}"
