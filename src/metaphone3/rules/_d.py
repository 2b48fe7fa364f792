"""Rules for 'D'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_d"]


def encode_d(ctx: ScanContext) -> None:
    if (
        _encode_dg(ctx)
        or _encode_dj(ctx)
        or _encode_dt_dd(ctx)
        or _encode_d_to_j(ctx)
        or _encode_dous(ctx)
        or _encode_silent_d(ctx)
    ):
        return

    if ctx.encode_exact:
        # Final devoicing: 'missed' == 'mist'
        if ctx.current == ctx.last and ctx.string_at(ctx.current - 3, 4, "SSED"):
            ctx.add("T")
        else:
            ctx.add("D")
    else:
        ctx.add("T")
    ctx.current += 1


def _encode_dg(ctx: ScanContext) -> bool:
    if not ctx.string_at(ctx.current, 2, "DG"):
        return False

    current = ctx.current
    # Exceptions ('edgar') and 'g' starting a combining form
    # ('handgun', 'waldglas', 'midgut', 'handgrip', 'mudguard', 'woodgrouse')
    if (
        ctx.string_at(current + 2, 1, "A", "O")
        or ctx.string_at(current + 1, 3, "GUN", "GUT")
        or ctx.string_at(current + 1, 4, "GEAR", "GLAS", "GRIP", "GREN", "GILL", "GRAF")
        or ctx.string_at(current + 1, 5, "GUARD", "GUILT", "GRAVE", "GRASS")
        or ctx.string_at(current + 1, 6, "GROUSE")
    ):
        ctx.add_exact_approx("DG", "TK")
    else:
        # "edge", "abridgment"
        ctx.add("J")
    ctx.current += 2
    return True


def _encode_dj(ctx: ScanContext) -> bool:
    """'adjacent'"""
    if ctx.string_at(ctx.current, 2, "DJ"):
        ctx.add("J")
        ctx.current += 2
        return True

    return False


def _encode_dt_dd(ctx: ScanContext) -> bool:
    """Eat a redundant 'T' or 'D'."""
    if not ctx.string_at(ctx.current, 2, "DT", "DD"):
        return False

    if ctx.string_at(ctx.current, 3, "DTH"):
        ctx.add_exact_approx("D0", "T0")
        ctx.current += 3
    else:
        if ctx.encode_exact:
            # Devoice it
            if ctx.string_at(ctx.current, 2, "DT"):
                ctx.add("T")
            else:
                ctx.add("D")
        else:
            ctx.add("T")
        ctx.current += 2
    return True


def _encode_d_to_j(ctx: ScanContext) -> bool:
    """"-DU-", "-DI-" and "-DE-" pronounced 'J'."""
    current = ctx.current
    if (
        # "module", "adulate"
        (
            ctx.string_at(current, 3, "DUL")
            and ctx.is_vowel_at(current - 1)
            and ctx.is_vowel_at(current + 3)
        )
        # "soldier", "grandeur", "procedure"
        or (
            current + 3 == ctx.last
            and ctx.string_at(current - 1, 5, "LDIER", "NDEUR", "EDURE", "RDURE")
        )
        or ctx.string_at(current - 3, 7, "CORDIAL")
        # "pendulum", "education"
        or ctx.string_at(current - 1, 5, "NDULA", "NDULU", "EDUCA")
        # "individual", "residuum"
        or ctx.string_at(current - 1, 4, "ADUA", "IDUA", "IDUU")
    ):
        ctx.add_exact_approx_alt("J", "D", "J", "T")
        ctx.advance_counter(2, 1)
        return True

    return False


def _encode_dous(ctx: ScanContext) -> bool:
    """Latinate "-DOUS" with 'D' as 'J': "assiduous", "arduous"."""
    if ctx.string_at(ctx.current + 1, 4, "UOUS"):
        ctx.add_exact_approx_alt("J", "D", "J", "T")
        ctx.advance_counter(4, 1)
        return True

    return False


def _encode_silent_d(ctx: ScanContext) -> bool:
    current = ctx.current
    if (
        # 'wednesday', 'handsome'
        ctx.string_at(current - 2, 9, "WEDNESDAY")
        or ctx.string_at(current - 3, 7, "HANDKER", "HANDSOM", "WINDSOR")
        # French final D in words and names familiar to Americans
        or ctx.string_at(current - 5, 6, "PERNOD", "ARTAUD", "RENAUD")
        or ctx.string_at(current - 6, 7, "RIMBAUD", "MICHAUD", "BICHAUD")
    ):
        ctx.current += 1
        return True

    return False
