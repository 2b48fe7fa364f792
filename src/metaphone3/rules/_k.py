"""Rules for 'K'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_k"]


def encode_k(ctx: ScanContext) -> None:
    if _encode_silent_k(ctx):
        return

    ctx.add("K")

    # Eat redundant 'K's and 'Q's
    if ctx.char_at(ctx.current + 1) in ("K", "Q"):
        ctx.current += 2
    else:
        ctx.current += 1


def _encode_silent_k(ctx: ScanContext) -> bool:
    current = ctx.current
    if (
        current == 0
        and ctx.string_at(current, 2, "KN")
        and not (
            ctx.string_at(current + 2, 5, "ESSET", "IEVEL") or ctx.string_at(current + 2, 3, "ISH")
        )
    ):
        ctx.current += 1
        return True

    # 'know', 'knit', 'knob'; 'slipknot' but not 'banknote'
    if (
        (
            ctx.string_at(current + 1, 3, "NOW", "NIT", "NOT", "NOB")
            and not ctx.string_at(0, 8, "BANKNOTE")
        )
        or ctx.string_at(current + 1, 4, "NOCK", "NUCK", "NIFE", "NACK")
        or ctx.string_at(current + 1, 5, "NIGHT")
    ):
        # 'N' already encoded: 'penknife'
        if current > 0 and ctx.char_at(current - 1) == "N":
            ctx.current += 2
        else:
            ctx.current += 1
        return True

    return False
