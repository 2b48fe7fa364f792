"""Rules for 'R'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_r"]


def encode_r(ctx: ScanContext) -> None:
    if _encode_rz(ctx):
        return

    if not _test_silent_r(ctx) and not _encode_vowel_re_transposition(ctx):
        ctx.add("R")

    # Eat redundant 'R'; also skip the 'S' of 'poitiers'
    if ctx.char_at(ctx.current + 1) == "R" or ctx.string_at(ctx.current - 6, 8, "POITIERS"):
        ctx.current += 2
    else:
        ctx.current += 1


def _encode_rz(ctx: ScanContext) -> bool:
    """"-RZ-" with American and Polish readings."""
    current = ctx.current
    if (
        ctx.string_at(current - 2, 4, "GARZ", "KURZ", "MARZ", "MERZ", "HERZ", "PERZ", "WARZ")
        or ctx.string_at(current, 5, "RZANO", "RZOLA")
        or ctx.string_at(current - 1, 4, "ARZA", "ARZN")
    ):
        return False

    # Silent 'Z' in the United States, 'X' in Poland
    if ctx.string_at(current - 4, 11, "YASTRZEMSKI"):
        ctx.add("R", "X")
        ctx.current += 2
        return True

    # Two American readings, neither authentically Polish
    if ctx.string_at(current - 1, 10, "BRZEZINSKI"):
        ctx.add("RS", "RJ")
        ctx.current += 4
        return True

    # After a voiceless consonant, a vowel or at the start: Polish 'X'
    if ctx.string_at(current - 1, 3, "TRZ", "PRZ", "KRZ") or (
        ctx.string_at(current, 2, "RZ") and (ctx.is_vowel_at(current - 1) or current == 0)
    ):
        ctx.add("RS", "X")
        ctx.current += 2
        return True

    # After a voiced consonant: Polish 'J'
    if ctx.string_at(current - 1, 3, "BRZ", "DRZ", "GRZ"):
        ctx.add("RS", "J")
        ctx.current += 2
        return True

    return False


def _test_silent_r(ctx: ScanContext) -> bool:
    """French endings and dropped 'R's: 'rogier', 'monsieur', 'worcester'."""
    current = ctx.current
    return (
        (
            current == ctx.last
            and ctx.string_at(current - 2, 3, "IER")
            and (
                # 'metier'
                ctx.string_at(current - 5, 3, "MET", "VIV", "LUC")
                # 'cartier', 'bustier'
                or ctx.string_at(current - 6, 4, "CART", "DOSS", "FOUR", "OLIV", "BUST", "DAUM",
                                 "ATEL", "SONN", "CORM", "MERC", "PELT", "POIR", "BERN", "FORT",
                                 "GREN", "SAUC", "GAGN", "GAUT", "GRAN", "FORC", "MESS", "LUSS",
                                 "MEUN", "POTH", "HOLL", "CHEN")
                # 'croupier'
                or ctx.string_at(current - 7, 5, "CROUP", "TORCH", "CLOUT", "FOURN", "GAUTH",
                                 "TROTT", "DEROS", "CHART")
                # 'chevalier'
                or ctx.string_at(current - 8, 6, "CHEVAL", "LAVOIS", "PELLET", "SOMMEL", "TREPAN",
                                 "LETELL", "COLOMB")
                or ctx.string_at(current - 9, 7, "CHARCUT")
                or ctx.string_at(current - 10, 8, "CHARPENT")
            )
        )
        or ctx.string_at(current - 2, 7, "SURBURB", "WORSTED")
        or ctx.string_at(current - 2, 9, "WORCESTER")
        or ctx.string_at(current - 7, 8, "MONSIEUR")
        or ctx.string_at(current - 6, 8, "POITIERS")
    )


def _encode_vowel_re_transposition(ctx: ScanContext) -> bool:
    """"-RE" said "-ER" when encoding vowels: 'fibre' => FABAR, 'centre' => SANTAR."""
    current = ctx.current
    if (
        ctx.encode_vowels
        and ctx.char_at(current + 1) == "E"
        and ctx.length > 3
        and not ctx.string_at(0, 5, "OUTRE", "LIBRE", "ANDRE")
        and not (ctx.string_at(0, 4, "FRED", "TRES") and ctx.length == 4)
        and not ctx.string_at(current - 2, 5, "LDRED", "LFRED", "NDRED", "NFRED", "NDRES", "IFRED")
        and not ctx.is_vowel_at(current - 1)
        and (
            current + 1 == ctx.last
            or (current + 2 == ctx.last and ctx.string_at(current + 2, 1, "D", "S"))
        )
    ):
        ctx.add("AR")
        return True

    return False
