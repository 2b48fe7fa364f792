"""Rules for 'B'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_b"]


def encode_b(ctx: ScanContext) -> None:
    if _encode_silent_b(ctx):
        return

    # "-mb" ("dumb") is already skipped over under 'M'
    ctx.add_exact_approx("B", "P")

    next_char = ctx.char_at(ctx.current + 1)
    if next_char == "B" or (
        next_char == "P"
        and ctx.current + 1 < ctx.last
        and ctx.char_at(ctx.current + 2) != "H"
    ):
        ctx.current += 2
    else:
        ctx.current += 1


def _encode_silent_b(ctx: ScanContext) -> bool:
    """Silent 'B' outside of "-mb-": 'debt', 'doubt', 'subtle'."""
    current = ctx.current
    if (
        ctx.string_at(current - 2, 4, "DEBT")
        or ctx.string_at(current - 2, 5, "SUBTL")
        or ctx.string_at(current - 2, 6, "SUBTIL")
        or ctx.string_at(current - 3, 5, "DOUBT")
    ):
        ctx.add("T")
        ctx.current += 2
        return True

    return False
