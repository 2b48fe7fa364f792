"""Rules for 'X'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_x"]


def encode_x(ctx: ScanContext) -> None:
    if (
        _encode_initial_x(ctx)
        or _encode_greek_x(ctx)
        or _encode_x_special_cases(ctx)
        or _encode_x_to_h(ctx)
        or _encode_x_vowel(ctx)
    ):
        return

    _encode_french_x_final(ctx)

    # Eat redundant 'X', 'Z' or 'S'; also 'excite', 'exceed'
    if ctx.string_at(ctx.current + 1, 1, "X", "Z", "S") or ctx.string_at(
        ctx.current + 1, 2, "CI", "CE"
    ):
        ctx.current += 2
    else:
        ctx.current += 1


def _encode_initial_x(ctx: ScanContext) -> bool:
    # Current Chinese pinyin
    if ctx.string_at(0, 3, "XIA", "XIO", "XIE") or ctx.string_at(0, 2, "XU"):
        ctx.add("X")
        ctx.current += 1
        return True

    # Otherwise initial 'X' is usually 'S'
    if ctx.current == 0:
        ctx.add("S")
        ctx.current += 1
        return True

    return False


def _encode_greek_x(ctx: ScanContext) -> bool:
    """'xylophone', 'xylem', 'xanthoma', 'xeno-'"""
    if ctx.string_at(ctx.current + 1, 3, "YLO", "YLE", "ENO") or ctx.string_at(
        ctx.current + 1, 4, "ANTH"
    ):
        ctx.add("S")
        ctx.current += 1
        return True

    return False


def _encode_x_special_cases(ctx: ScanContext) -> bool:
    if ctx.string_at(ctx.current - 2, 5, "LUXUR"):
        ctx.add_exact_approx("GJ", "KJ")
        ctx.current += 1
        return True

    # Portuguese and Galician name
    if ctx.string_at(0, 7, "TEXEIRA") or ctx.string_at(0, 8, "TEIXEIRA"):
        ctx.add("X")
        ctx.current += 1
        return True

    return False


def _encode_x_to_h(ctx: ScanContext) -> bool:
    """Spanish 'X' as 'H': 'oaxaca', 'quixote'."""
    if ctx.string_at(ctx.current - 2, 6, "OAXACA") or ctx.string_at(ctx.current - 3, 7, "QUIXOTE"):
        ctx.add("H")
        ctx.current += 1
        return True

    return False


def _encode_x_vowel(ctx: ScanContext) -> bool:
    """'sexual', 'noxious', British 'connexion'; 'KS' as the alternate."""
    if ctx.string_at(ctx.current + 1, 3, "UAL", "ION", "IOU"):
        ctx.add("KX", "KS")
        ctx.advance_counter(3, 1)
        return True

    return False


def _encode_french_x_final(ctx: ScanContext) -> None:
    """Emit 'KS' unless this is the silent final 'X' of 'breaux' or 'paix'."""
    current = ctx.current
    silent = current == ctx.last and (
        ctx.string_at(current - 3, 3, "IAU", "EAU", "IEU")
        or ctx.string_at(current - 2, 2, "AI", "AU", "OU", "OI", "EU")
    )
    if not silent:
        ctx.add("KS")
