"""Rules for 'P'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_p"]


def encode_p(ctx: ScanContext) -> None:
    if (
        _encode_silent_p_at_beginning(ctx)
        or _encode_pt(ctx)
        or _encode_ph(ctx)
        or _encode_pph(ctx)
        or _encode_rps(ctx)
        or _encode_coup(ctx)
        or _encode_pneum(ctx)
        or _encode_psych(ctx)
        or _encode_psalm(ctx)
    ):
        return

    # 'campbell', 'raspberry'
    if ctx.string_at(ctx.current + 1, 1, "P", "B"):
        ctx.current += 2
    else:
        ctx.current += 1

    ctx.add("P")


def _encode_silent_p_at_beginning(ctx: ScanContext) -> bool:
    if ctx.current == 0 and ctx.string_at(0, 2, "PN", "PF", "PS", "PT"):
        ctx.current += 1
        return True

    return False


def _encode_pt(ctx: ScanContext) -> bool:
    """'pterodactyl', 'receipt', 'asymptote'"""
    current = ctx.current
    if ctx.char_at(current + 1) != "T":
        return False

    if (
        (current == 0 and ctx.string_at(current, 5, "PTERO"))
        or ctx.string_at(current - 5, 7, "RECEIPT")
        or ctx.string_at(current - 4, 8, "ASYMPTOT")
    ):
        ctx.add("T")
        ctx.current += 2
        return True

    return False


def _encode_ph(ctx: ScanContext) -> bool:
    """
    "-PH-", usually 'F'.

    Silent in 'phthalein'; 'P' alone where the 'H' starts the second
    half of a compound ('shepherd', 'upheaval', 'cupholder').
    """
    current = ctx.current
    if ctx.char_at(current + 1) != "H":
        return False

    if (
        ctx.string_at(current, 9, "PHTHALEIN")
        or (current == 0 and ctx.string_at(current, 4, "PHTH"))
        or ctx.string_at(current - 3, 10, "APOPHTHEGM")
    ):
        ctx.add("0")
        ctx.current += 4
    elif (
        current > 0
        and (
            ctx.string_at(current + 2, 3, "EAD", "OLE", "ELD", "ILL", "OLD", "EAP", "ERD", "ARD",
                          "ANG", "ORN", "EAV", "ART")
            or ctx.string_at(current + 2, 4, "OUSE")
            or (ctx.string_at(current + 2, 2, "AM") and not ctx.string_at(current - 1, 5, "LPHAM"))
            or ctx.string_at(current + 2, 5, "AMMER", "AZARD", "UGGER")
            or ctx.string_at(current + 2, 6, "OLSTER")
        )
        and not ctx.string_at(current - 3, 5, "LYMPH", "NYMPH")
    ):
        ctx.add("P")
        ctx.advance_counter(3, 2)
    else:
        ctx.add("F")
        ctx.current += 2
    return True


def _encode_pph(ctx: ScanContext) -> bool:
    """'sappho'"""
    if ctx.char_at(ctx.current + 1) == "P" and ctx.char_at(ctx.current + 2) == "H":
        ctx.add("F")
        ctx.current += 3
        return True

    return False


def _encode_rps(ctx: ScanContext) -> bool:
    """'corps', 'corpsman' but not 'corpse'"""
    if ctx.string_at(ctx.current - 3, 5, "CORPS") and not ctx.string_at(ctx.current - 3, 6, "CORPSE"):
        ctx.current += 2
        return True

    return False


def _encode_coup(ctx: ScanContext) -> bool:
    """'coup' but not 'recoup'"""
    current = ctx.current
    if (
        current == ctx.last
        and ctx.string_at(current - 3, 4, "COUP")
        and not ctx.string_at(current - 5, 6, "RECOUP")
    ):
        ctx.current += 1
        return True

    return False


def _encode_pneum(ctx: ScanContext) -> bool:
    if ctx.string_at(ctx.current + 1, 4, "NEUM"):
        ctx.add("N")
        ctx.current += 2
        return True

    return False


def _encode_psych(ctx: ScanContext) -> bool:
    """"-PSYCH-" needs both the 'S' and the 'K' in one step."""
    if ctx.string_at(ctx.current + 1, 4, "SYCH"):
        ctx.add("SAK" if ctx.encode_vowels else "SK")
        ctx.current += 5
        return True

    return False


def _encode_psalm(ctx: ScanContext) -> bool:
    if ctx.string_at(ctx.current + 1, 4, "SALM"):
        ctx.add("SAM" if ctx.encode_vowels else "SM")
        ctx.current += 5
        return True

    return False
