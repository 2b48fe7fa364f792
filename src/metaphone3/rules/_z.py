"""Rules for 'Z'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_z"]


def encode_z(ctx: ScanContext) -> None:
    if (
        _encode_zz(ctx)
        or _encode_zu_zier_zs(ctx)
        or _encode_french_ez(ctx)
        or _encode_german_z(ctx)
        or _encode_zh(ctx)
    ):
        return

    ctx.add("S")

    if ctx.char_at(ctx.current + 1) == "Z":
        ctx.current += 2
    else:
        ctx.current += 1


def _encode_zz(ctx: ScanContext) -> bool:
    """Italian "-ZZ-" as 'TS': 'abruzzi', 'pizza'."""
    current = ctx.current
    if ctx.char_at(current + 1) == "Z" and (
        (ctx.string_at(current + 2, 1, "I", "O", "A") and current + 2 == ctx.last)
        or ctx.string_at(current - 2, 9, "MOZZARELL", "PIZZICATO", "PUZZONLAN")
    ):
        ctx.add("TS", "S")
        ctx.current += 2
        return True

    return False


def _encode_zu_zier_zs(ctx: ScanContext) -> bool:
    """'azure', 'brazier', 'zsa zsa'"""
    current = ctx.current
    if (
        (current == 1 and ctx.string_at(current - 1, 4, "AZUR"))
        or (ctx.string_at(current, 4, "ZIER") and not ctx.string_at(current - 2, 6, "VIZIER", "ROZIER"))
        or ctx.string_at(current, 3, "ZSA")
    ):
        ctx.add("J", "S")

        if ctx.string_at(current, 3, "ZSA"):
            ctx.current += 2
        else:
            ctx.current += 1
        return True

    return False


def _encode_french_ez(ctx: ScanContext) -> bool:
    """Silent 'Z' of French "-EZ": 'chez', 'rendezvous'."""
    current = ctx.current
    if (current == 3 and ctx.string_at(current - 3, 4, "CHEZ")) or ctx.string_at(
        current - 5, 6, "RENDEZ"
    ):
        ctx.current += 1
        return True

    return False


def _encode_german_z(ctx: ScanContext) -> bool:
    current = ctx.current
    if (
        (current == 2 and current + 1 == ctx.last and ctx.string_at(current - 2, 4, "NAZI"))
        or ctx.string_at(current - 2, 6, "NAZIFY", "MOZART")
        or ctx.string_at(current - 3, 4, "HOLZ", "HERZ", "MERZ", "FITZ")
        or (ctx.string_at(current - 3, 4, "GANZ") and not ctx.is_vowel_at(current + 1))
        or ctx.string_at(current - 4, 5, "STOLZ", "PRINZ")
        or ctx.string_at(current - 4, 7, "VENEZIA")
        or ctx.string_at(current - 3, 6, "HERZOG")
        # German words with "SCH-", but not 'schlimazel', 'schmooze'
        or ("SCH" in ctx.text and not ctx.string_at(ctx.last - 2, 3, "IZE", "OZE", "ZEL"))
        or (current > 0 and ctx.string_at(current, 4, "ZEIT"))
        or ctx.string_at(current - 3, 4, "WEIZ")
    ):
        if current > 0 and ctx.char_at(current - 1) == "T":
            ctx.add("S")
        else:
            ctx.add("TS")
        ctx.current += 1
        return True

    return False


def _encode_zh(ctx: ScanContext) -> bool:
    """Pinyin 'zhao', and 'ZH' in English phonetic spellings."""
    if ctx.char_at(ctx.current + 1) == "H":
        ctx.add("J")
        ctx.current += 2
        return True

    return False
