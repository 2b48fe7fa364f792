"""Rules for 'Q'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_q"]


def encode_q(ctx: ScanContext) -> None:
    # Current pinyin
    if ctx.string_at(ctx.current, 3, "QIN"):
        ctx.add("X")
        ctx.current += 1
        return

    if ctx.char_at(ctx.current + 1) == "Q":
        ctx.current += 2
    else:
        ctx.current += 1

    ctx.add("K")
