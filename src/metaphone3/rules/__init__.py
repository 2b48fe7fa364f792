"""
Per-letter rule groups and the dispatcher that routes to them.

Each rule group takes the scan context, emits zero or more key symbols,
and moves the cursor forward by at least one position.
"""

from __future__ import annotations

from typing import Callable

from metaphone3._context import ScanContext, is_vowel
from metaphone3.rules._b import encode_b
from metaphone3.rules._c import encode_c
from metaphone3.rules._d import encode_d
from metaphone3.rules._f import encode_f
from metaphone3.rules._g import encode_g
from metaphone3.rules._h import encode_h
from metaphone3.rules._j import encode_j
from metaphone3.rules._k import encode_k
from metaphone3.rules._l import encode_l
from metaphone3.rules._m import encode_m
from metaphone3.rules._n import encode_n
from metaphone3.rules._p import encode_p
from metaphone3.rules._q import encode_q
from metaphone3.rules._r import encode_r
from metaphone3.rules._s import encode_s
from metaphone3.rules._t import encode_t
from metaphone3.rules._v import encode_v
from metaphone3.rules._vowels import encode_vowels
from metaphone3.rules._w import encode_w
from metaphone3.rules._x import encode_x
from metaphone3.rules._z import encode_z

__all__ = ["LETTER_RULES", "PASSTHROUGH", "encode_next"]

RuleGroup = Callable[[ScanContext], None]

# =============================================================================
# Dispatch Tables
# =============================================================================

LETTER_RULES: dict[str, RuleGroup] = {
    "B": encode_b,
    "C": encode_c,
    "D": encode_d,
    "F": encode_f,
    "G": encode_g,
    "H": encode_h,
    "J": encode_j,
    "K": encode_k,
    "L": encode_l,
    "M": encode_m,
    "N": encode_n,
    "P": encode_p,
    "Q": encode_q,
    "R": encode_r,
    "S": encode_s,
    "T": encode_t,
    "V": encode_v,
    "W": encode_w,
    "X": encode_x,
    "Z": encode_z,
}

# Extended letters that always encode to one fixed symbol
PASSTHROUGH: dict[str, str] = {
    "ß": "S",
    "Ç": "S",
    "Ñ": "N",
    "Ð": "0",  # eth
    "Þ": "0",  # thorn
    "Š": "X",
    "Ž": "S",
}


def encode_next(ctx: ScanContext) -> None:
    """
    Encode whatever starts at the cursor.

    Letters go to their rule group, vowels (accented ones included) to
    the vowel rules. Anything else, digits and punctuation among them,
    is skipped without emitting a symbol.
    """
    char = ctx.char_at(ctx.current)

    rule = LETTER_RULES.get(char)
    if rule is not None:
        rule(ctx)
        return

    symbol = PASSTHROUGH.get(char)
    if symbol is not None:
        ctx.add(symbol)
        ctx.current += 1
        return

    if is_vowel(char):
        encode_vowels(ctx)
        return

    ctx.current += 1
