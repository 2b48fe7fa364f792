"""Rules for 'N'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_n"]


def encode_n(ctx: ScanContext) -> None:
    if _encode_nce(ctx):
        return

    if ctx.char_at(ctx.current + 1) == "N":
        ctx.current += 2
    else:
        ctx.current += 1

    # 'monsieur'; 'aloneness'
    if not ctx.string_at(ctx.current - 3, 8, "MONSIEUR") and not ctx.string_at(
        ctx.current - 3, 6, "NENESS"
    ):
        ctx.add("N")


def _encode_nce(ctx: ScanContext) -> bool:
    """"-NCE-" and "-NSE-": 'entrance' is said exactly like 'entrants'."""
    current = ctx.current
    if (
        ctx.string_at(current + 1, 1, "C", "S")
        and ctx.string_at(current + 2, 1, "E", "Y", "I")
        and (
            current + 2 == ctx.last
            or (current + 3 == ctx.last and ctx.char_at(current + 3) == "S")
        )
    ):
        ctx.add("NTS")
        ctx.current += 2
        return True

    return False
