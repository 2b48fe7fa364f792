"""Rules for 'V'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_v"]


def encode_v(ctx: ScanContext) -> None:
    if ctx.char_at(ctx.current + 1) == "V":
        ctx.current += 2
    else:
        ctx.current += 1

    ctx.add_exact_approx("V", "F")
