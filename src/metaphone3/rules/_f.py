"""Rules for 'F'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_f"]


def encode_f(ctx: ScanContext) -> None:
    # "-FT-" where the 'T' is usually silent: 'often', 'soften'
    if ctx.string_at(ctx.current - 1, 5, "OFTEN"):
        ctx.add("F", "FT")
        ctx.current += 2
        return

    # Eat a redundant 'F'
    if ctx.char_at(ctx.current + 1) == "F":
        ctx.current += 2
    else:
        ctx.current += 1

    ctx.add("F")
