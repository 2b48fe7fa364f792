"""Rules for 'M', including the silent 'B' of "-MB" and silent 'N' of "-MN"."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_m"]


def encode_m(ctx: ScanContext) -> None:
    if (
        _encode_silent_m_at_beginning(ctx)
        or _encode_mr_and_mrs(ctx)
        or _encode_mac(ctx)
        or _encode_mpt(ctx)
    ):
        return

    _encode_mb(ctx)
    ctx.add("M")


def _encode_silent_m_at_beginning(ctx: ScanContext) -> bool:
    """'mnemonic'"""
    if ctx.current == 0 and ctx.string_at(0, 2, "MN"):
        ctx.current += 1
        return True

    return False


def _encode_mr_and_mrs(ctx: ScanContext) -> bool:
    """Abbreviations 'Mr' and 'Mrs' said in full."""
    if not (ctx.current == 0 and ctx.string_at(0, 2, "MR")):
        return False

    if ctx.length == 2:
        ctx.add("MASTAR" if ctx.encode_vowels else "MSTR")
        ctx.current += 2
        return True

    if ctx.length == 3 and ctx.string_at(0, 3, "MRS"):
        ctx.add("MASAS" if ctx.encode_vowels else "MSS")
        ctx.current += 3
        return True

    return False


def _encode_mac(ctx: ScanContext) -> bool:
    """Scottish 'Mac-' and 'Mc-': 'macintosh', 'mcgee'."""
    if not (
        ctx.current == 0
        and (
            ctx.string_at(0, 7, "MACIVER", "MACEWEN")
            or ctx.string_at(0, 8, "MACELROY", "MACILROY")
            or ctx.string_at(0, 9, "MACINTOSH")
            or ctx.string_at(0, 2, "MC")
        )
    ):
        return False

    ctx.add("MAK" if ctx.encode_vowels else "MK")

    if ctx.string_at(0, 2, "MC"):
        # Swallow a 'K' sound right after 'Mc', but not the 'G' of 'mcgeorge'
        if ctx.string_at(2, 1, "K", "G", "Q") and not ctx.string_at(2, 4, "GEOR"):
            ctx.current += 3
        else:
            ctx.current += 2
    else:
        ctx.current += 3
    return True


def _encode_mpt(ctx: ScanContext) -> bool:
    """'comptroller', 'accompt'"""
    if ctx.string_at(ctx.current - 2, 8, "COMPTROL") or ctx.string_at(ctx.current - 4, 7, "ACCOMPT"):
        ctx.add("N")
        ctx.current += 2
        return True

    return False


# =============================================================================
# MB and MN
# =============================================================================


def _test_silent_mb_1(ctx: ScanContext) -> bool:
    """Combining roots: 'thumb', 'dumb', 'lamb', 'tomb'."""
    current = ctx.current
    return (current == 3 and ctx.string_at(current - 3, 5, "THUMB")) or (
        current == 2
        and ctx.string_at(current - 2, 4, "DUMB", "BOMB", "DAMN", "LAMB", "NUMB", "TOMB")
    )


def _test_pronounced_mb(ctx: ScanContext) -> bool:
    current = ctx.current
    return (
        ctx.string_at(current - 2, 6, "NUMBER")
        or (ctx.string_at(current + 2, 1, "A") and not ctx.string_at(current - 2, 7, "DUMBASS"))
        or ctx.string_at(current + 2, 1, "O")
        or ctx.string_at(current - 2, 6, "LAMBEN", "LAMBER", "LAMBET", "TOMBIG", "LAMBRE")
    )


def _test_silent_mb_2(ctx: ScanContext) -> bool:
    """"-MB-" ending a root, possibly followed by a suffix: 'climbing', 'bomber'."""
    current = ctx.current
    last = ctx.last
    return (
        ctx.char_at(current + 1) == "B"
        and current > 1
        and (
            current + 1 == last
            or ctx.string_at(current + 2, 3, "ING", "ABL")
            or ctx.string_at(current + 2, 4, "LIKE")
            or (ctx.char_at(current + 2) == "S" and current + 2 == last)
            or ctx.string_at(current - 5, 7, "BUNCOMB")
            or (
                ctx.string_at(current + 2, 2, "ED", "ER")
                and current + 3 == last
                # not 'beachcomber'
                and (
                    ctx.string_at(0, 5, "CLIMB", "PLUMB")
                    or not ctx.string_at(current - 1, 5, "IMBER", "AMBER", "EMBER", "UMBER")
                )
                and not ctx.string_at(current - 2, 6, "CUMBER", "SOMBER")
            )
        )
    )


def _test_pronounced_mb_2(ctx: ScanContext) -> bool:
    """'bombastic', 'umbrage', 'flamboyant'"""
    return ctx.string_at(ctx.current - 1, 5, "OMBAS", "OMBAD", "UMBRA") or ctx.string_at(
        ctx.current - 3, 4, "FLAM"
    )


def _test_mn(ctx: ScanContext) -> bool:
    """Silent 'N' after 'M' at the end of a root: 'damn', 'hymns', 'condemning'."""
    current = ctx.current
    last = ctx.last
    return ctx.char_at(current + 1) == "N" and (
        current + 1 == last
        or (ctx.string_at(current + 2, 3, "ING", "EST") and current + 4 == last)
        or (ctx.char_at(current + 2) == "S" and current + 2 == last)
        or (ctx.string_at(current + 2, 2, "LY", "ER", "ED") and current + 3 == last)
        or ctx.string_at(current - 2, 9, "DAMNEDEST")
        or ctx.string_at(current - 5, 9, "GODDAMNIT")
    )


def _encode_mb(ctx: ScanContext) -> None:
    """Advance past the 'M' and any letter it silences."""
    if _test_silent_mb_1(ctx):
        ctx.current += 1 if _test_pronounced_mb(ctx) else 2
    elif _test_silent_mb_2(ctx):
        ctx.current += 1 if _test_pronounced_mb_2(ctx) else 2
    elif _test_mn(ctx):
        ctx.current += 2
    elif ctx.char_at(ctx.current + 1) == "M":
        ctx.current += 2
    else:
        ctx.current += 1
