"""Rules for 'H'."""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_h"]


def encode_h(ctx: ScanContext) -> None:
    if (
        _encode_initial_silent_h(ctx)
        or _encode_initial_hs(ctx)
        or _encode_initial_hu_hw(ctx)
        or _encode_non_initial_silent_h(ctx)
    ):
        return

    # Only kept when first and before a vowel, or between two vowels;
    # skipping here also takes care of 'HH'
    if not _encode_h_pronounced(ctx):
        ctx.current += 1


def _encode_initial_silent_h(ctx: ScanContext) -> bool:
    """'hour', 'herb', 'heir', 'honor', 'honest'"""
    current = ctx.current
    if not (
        ctx.string_at(current + 1, 3, "OUR", "ERB", "EIR")
        or ctx.string_at(current + 1, 4, "ONOR")
        or ctx.string_at(current + 1, 5, "ONOUR", "ONEST")
    ):
        return False

    # 'H' for the name, none for the plant
    if ctx.string_at(current, 4, "HERB"):
        if ctx.encode_vowels:
            ctx.add("HA", "A")
        else:
            ctx.add("H", "A")
    elif current == 0 or ctx.encode_vowels:
        ctx.add("A")

    ctx.current = ctx.skip_vowels(current + 1)
    return True


def _encode_initial_hs(ctx: ScanContext) -> bool:
    """Old Chinese transliteration, e.g. 'hsiao'."""
    if ctx.current == 0 and ctx.string_at(0, 2, "HS"):
        ctx.add("X")
        ctx.current += 2
        return True

    return False


def _encode_initial_hu_hw(ctx: ScanContext) -> bool:
    """Spanish spellings and Chinese pinyin where 'HU-' is a diphthong."""
    if not ctx.string_at(0, 3, "HUA", "HUE", "HWA") or ctx.string_at(ctx.current, 4, "HUEY"):
        return False

    ctx.add("A")
    if not ctx.encode_vowels:
        ctx.current += 3
    else:
        ctx.current += 1
        while ctx.is_vowel_at(ctx.current) or ctx.char_at(ctx.current) == "W":
            ctx.current += 1
    return True


def _encode_non_initial_silent_h(ctx: ScanContext) -> bool:
    """Silent 'H' between vowels: 'nihilism', 'graham', 'prohibition' (not 'prohibit')."""
    current = ctx.current
    if (
        ctx.string_at(current - 2, 5, "NIHIL", "VEHEM", "LOHEN", "NEHEM", "MAHON", "MAHAN",
                      "COHEN", "GAHAN")
        or ctx.string_at(current - 3, 6, "GRAHAM", "PROHIB", "FRAHER", "TOOHEY", "TOUHEY")
        or ctx.string_at(current - 3, 5, "TOUHY")
        or ctx.string_at(0, 9, "CHIHUAHUA")
    ):
        if not ctx.encode_vowels:
            ctx.current += 2
        else:
            ctx.current = ctx.skip_vowels(current + 1)
        return True

    return False


def _encode_h_pronounced(ctx: ScanContext) -> bool:
    current = ctx.current
    if (
        (
            current == 0
            or ctx.is_vowel_at(current - 1)
            or (current > 0 and ctx.char_at(current - 1) == "W")
        )
        and ctx.is_vowel_at(current + 1)
    ) or (
        # 'alwahhab'
        ctx.char_at(current + 1) == "H"
        and ctx.is_vowel_at(current + 2)
    ):
        ctx.add("H")
        ctx.advance_counter(2, 1)
        return True

    return False
