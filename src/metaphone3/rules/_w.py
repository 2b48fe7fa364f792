"""
Rules for 'W'.

'W' is only a consonant before a vowel at the start of a word; elsewhere
it is part of a vowel sound and skipped. Germanic and Slavic names carry
a 'V'/'F' alternate so both pronunciations can be found.
"""

from __future__ import annotations

from metaphone3._context import ScanContext, VOWEL_PLACEHOLDER
from metaphone3.rules._names import germanic_or_slavic_name_beginning_with_w

__all__ = ["encode_w"]


def encode_w(ctx: ScanContext) -> None:
    if (
        _encode_silent_w_at_beginning(ctx)
        or _encode_witz_wicz(ctx)
        or _encode_wr(ctx)
        or _encode_initial_w_vowel(ctx)
        or _encode_wh(ctx)
        or _encode_eastern_european_w(ctx)
    ):
        return

    # 'zimbabwe'
    if ctx.encode_vowels and ctx.string_at(ctx.current, 2, "WE") and ctx.current + 1 == ctx.last:
        ctx.add("A")

    ctx.current += 1


def _encode_silent_w_at_beginning(ctx: ScanContext) -> bool:
    if ctx.current == 0 and ctx.string_at(0, 2, "WR"):
        ctx.current += 1
        return True

    return False


def _encode_witz_wicz(ctx: ScanContext) -> bool:
    """
    Polish patronymic '-wicz' and its spelling '-witz'.

    Both spellings map to one key, and the Eastern European reading goes
    in the alternate: 'filipowicz'.
    """
    if not (ctx.current + 3 == ctx.last and ctx.string_at(ctx.current, 4, "WICZ", "WITZ")):
        return False

    if ctx.encode_vowels:
        if ctx.primary.endswith(VOWEL_PLACEHOLDER):
            ctx.add("TS", "FAX")
        else:
            ctx.add("ATS", "FAX")
    else:
        ctx.add("TS", "FX")
    ctx.current += 4
    return True


def _encode_wr(ctx: ScanContext) -> bool:
    """'W' is always silent before 'R', also mid-word."""
    if ctx.string_at(ctx.current, 2, "WR"):
        ctx.add("R")
        ctx.current += 2
        return True

    return False


def _encode_initial_w_vowel(ctx: ScanContext) -> bool:
    if not (ctx.current == 0 and ctx.is_vowel_at(1)):
        return False

    # 'witter' should match 'vitter'
    if germanic_or_slavic_name_beginning_with_w(ctx):
        if ctx.encode_vowels:
            ctx.add_exact_approx_alt("A", "VA", "A", "FA")
        else:
            ctx.add_exact_approx_alt("A", "V", "A", "F")
    else:
        ctx.add("A")

    ctx.current = ctx.skip_vowels(1)
    return True


def _encode_wh(ctx: ScanContext) -> bool:
    """"-WH-" as 'H' ('who', 'whole') or as a vowel sound ('what')."""
    current = ctx.current
    if not ctx.string_at(current, 2, "WH"):
        return False

    if ctx.char_at(current + 2) == "O" and not (
        ctx.string_at(current + 2, 4, "OOSH")
        or ctx.string_at(current + 2, 3, "OOP", "OMP", "ORL", "ORT")
        or ctx.string_at(current + 2, 2, "OA", "OP")
    ):
        ctx.add("H")
        ctx.advance_counter(3, 2)
        return True

    # Combining forms: 'hollowhearted', 'rawhide'
    if (
        ctx.string_at(current + 2, 3, "IDE", "ARD", "EAD", "AWK", "ERD", "OOK", "AND", "OLE",
                      "OOD")
        or ctx.string_at(current + 2, 4, "EART", "OUSE", "OUND")
        or ctx.string_at(current + 2, 5, "AMMER")
    ):
        ctx.add("H")
        ctx.current += 2
        return True

    if current == 0:
        ctx.add("A")
        ctx.current = ctx.skip_vowels(current + 2)
        return True

    ctx.current += 2
    return True


def _encode_eastern_european_w(ctx: ScanContext) -> bool:
    """'arnow' should match 'arnoff'."""
    current = ctx.current
    if (
        (current == ctx.last and ctx.is_vowel_at(current - 1))
        or ctx.string_at(current - 1, 5, "EWSKI", "EWSKY", "OWSKI", "OWSKY")
        or (ctx.string_at(current, 5, "WICKI", "WACKI") and current + 4 == ctx.last)
        or (ctx.string_at(current, 4, "WIAK") and current + 3 == ctx.last)
        or ctx.string_at(0, 3, "SCH")
    ):
        ctx.add_exact_approx_alt("", "V", "", "F")
        ctx.current += 1
        return True

    return False
