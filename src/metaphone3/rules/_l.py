"""
Rules for 'L'.

Besides the silent-'L' contexts ('walk', 'would', 'salmon') this group
handles the vowel/'L' transposition heard in 'bristle' or 'goggle',
where the written "-LE" is spoken as "-EL".
"""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_l"]


def encode_l(ctx: ScanContext) -> None:
    save_current = ctx.current

    _interpolate_vowel_when_cons_l_at_end(ctx)

    if (
        _encode_lely_to_l(ctx)
        or _encode_colonel(ctx)
        or _encode_french_ault(ctx)
        or _encode_french_euil(ctx)
        or _encode_french_oulx(ctx)
        or _encode_silent_l_in_lm(ctx)
        or _encode_silent_l_in_lk_lv(ctx)
        or _encode_silent_l_in_ould(ctx)
    ):
        return

    if _encode_ll_as_vowel_cases(ctx):
        return

    _encode_le_cases(ctx, save_current)


def _interpolate_vowel_when_cons_l_at_end(ctx: ScanContext) -> None:
    """Schwa before a final 'L' after D, G or T: 'ertl', 'vogl'."""
    if (
        ctx.encode_vowels
        and ctx.current == ctx.last
        and ctx.string_at(ctx.current - 1, 1, "D", "G", "T")
    ):
        ctx.add("A")


def _encode_lely_to_l(ctx: ScanContext) -> bool:
    """'agilely', 'docilely'"""
    if ctx.string_at(ctx.current - 1, 5, "ILELY") and ctx.current + 3 == ctx.last:
        ctx.add("L")
        ctx.current += 3
        return True

    return False


def _encode_colonel(ctx: ScanContext) -> bool:
    if ctx.string_at(ctx.current - 2, 7, "COLONEL"):
        ctx.add("R")
        ctx.current += 2
        return True

    return False


def _encode_french_ault(ctx: ScanContext) -> bool:
    """'renault' and 'foucault', but not 'fault'."""
    current = ctx.current
    if (
        current > 3
        and (
            ctx.string_at(current - 3, 5, "RAULT", "NAULT", "BAULT", "SAULT", "GAULT", "CAULT")
            or ctx.string_at(current - 4, 6, "REAULT", "RIAULT", "NEAULT", "BEAULT")
        )
        and not (
            ctx.root_or_inflections("ASSAULT")
            or ctx.string_at(current - 8, 10, "SOMERSAULT")
            or ctx.string_at(current - 9, 11, "SUMMERSAULT")
        )
    ):
        ctx.current += 2
        return True

    return False


def _encode_french_euil(ctx: ScanContext) -> bool:
    """'auteuil'"""
    if ctx.string_at(ctx.current - 3, 4, "EUIL") and ctx.current == ctx.last:
        ctx.current += 1
        return True

    return False


def _encode_french_oulx(ctx: ScanContext) -> bool:
    """'proulx'"""
    if ctx.string_at(ctx.current - 2, 4, "OULX") and ctx.current + 1 == ctx.last:
        ctx.current += 2
        return True

    return False


def _encode_silent_l_in_lm(ctx: ScanContext) -> bool:
    current = ctx.current
    if not ctx.string_at(current, 2, "LM", "LN"):
        return False

    # 'lincoln', 'holmes', 'psalm', 'salmon'
    silent = (
        ctx.string_at(current - 2, 4, "COLN", "CALM", "BALM", "MALM", "PALM")
        or (ctx.string_at(current - 1, 3, "OLM") and current + 1 == ctx.last)
        or ctx.string_at(current - 3, 5, "PSALM", "QUALM")
        or ctx.string_at(current - 2, 6, "SALMON", "HOLMES")
        or ctx.string_at(current - 1, 6, "ALMOND")
        or (current == 1 and ctx.string_at(current - 1, 4, "ALMS"))
    ) and not (
        ctx.string_at(current + 2, 1, "A")
        or ctx.string_at(current - 2, 5, "BALMO")
        or ctx.string_at(current - 2, 6, "PALMER", "PALMOR", "BALMER")
        or ctx.string_at(current - 3, 5, "THALM")
    )

    if not silent:
        ctx.add("L")
    ctx.current += 1
    return True


def _encode_silent_l_in_lk_lv(ctx: ScanContext) -> bool:
    """'walk', 'folk', 'half', 'calve', 'solder'"""
    current = ctx.current
    if (
        (
            ctx.string_at(current - 2, 4, "WALK", "YOLK", "FOLK", "HALF", "TALK", "CALF",
                          "BALK", "CALK")
            or (
                ctx.string_at(current - 2, 4, "POLK")
                and not ctx.string_at(current - 2, 5, "POLKA", "WALKO")
            )
            or (
                ctx.string_at(current - 2, 4, "HALV")
                and not ctx.string_at(current - 2, 5, "HALVA", "HALVO")
            )
            or (
                ctx.string_at(current - 3, 5, "CAULK", "CHALK", "BAULK", "FAULK")
                and not ctx.string_at(current - 4, 6, "SCHALK")
            )
            or (
                (
                    ctx.string_at(current - 2, 5, "SALVE", "CALVE")
                    or ctx.string_at(current - 2, 6, "SOLDER")
                )
                and not ctx.string_at(current - 2, 6, "SALVER", "CALVER")
            )
        )
        # 'L' pronounced after all
        and not ctx.string_at(current - 5, 9, "GONSALVES", "GONCALVES")
        and not ctx.string_at(current - 2, 6, "BALKAN", "TALKAL")
        and not ctx.string_at(current - 3, 5, "PAULK", "CHALF")
    ):
        ctx.current += 1
        return True

    return False


def _encode_silent_l_in_ould(ctx: ScanContext) -> bool:
    """'would', 'could', 'should' (not 'shoulder')"""
    current = ctx.current
    if ctx.string_at(current - 3, 5, "WOULD", "COULD") or (
        ctx.string_at(current - 4, 6, "SHOULD") and not ctx.string_at(current - 4, 8, "SHOULDER")
    ):
        ctx.add_exact_approx("D", "T")
        ctx.current += 2
        return True

    return False


# =============================================================================
# LL
# =============================================================================


def _encode_ll_as_vowel_special_cases(ctx: ScanContext) -> bool:
    """Spanish and French "-ILLA-"/"-ILLE-" known to be said with a 'Y'."""
    current = ctx.current
    if (
        ctx.string_at(current - 5, 8, "TORTILLA")
        or ctx.string_at(current - 8, 11, "RATATOUILLE")
        # 'guillermo', 'veillard'; 'guillotine' keeps its 'L'
        or (
            ctx.string_at(0, 5, "GUILL", "VEILL", "GAILL")
            and not (
                ctx.string_at(current - 3, 7, "GUILLOT", "GUILLOR", "GUILLEN")
                or (ctx.string_at(0, 5, "GUILL") and ctx.length == 5)
            )
        )
        # 'brouillard', 'gremillion'
        or ctx.string_at(0, 7, "BROUILL", "GREMILL", "ROBILL")
        # 'mireille' but not 'reveille'
        or (
            ctx.string_at(current - 2, 5, "EILLE")
            and current + 2 == ctx.last
            and not ctx.string_at(current - 5, 8, "REVEILLE")
        )
    ):
        ctx.current += 2
        return True

    return False


def _encode_ll_as_vowel(ctx: ScanContext) -> bool:
    """
    Other Spanish "-LL-" said as 'Y'.

    Both pronunciations are kept since an American may say 'cabrillo'
    either way; 'gorilla' and 'ballerina' are caught here too.
    """
    current = ctx.current
    last = ctx.last
    if (
        (current + 3 == ctx.length and ctx.string_at(current - 1, 4, "ILLO", "ILLA", "ALLE"))
        or (
            (
                ctx.string_at(last - 1, 2, "AS", "OS")
                or ctx.string_at(last, 2, "AS", "OS")
                or ctx.string_at(last, 1, "A", "O")
            )
            and ctx.string_at(current - 1, 2, "AL", "IL")
            and not ctx.string_at(current - 1, 4, "ALLA")
        )
        or ctx.string_at(0, 5, "VILLE", "VILLA")
        or ctx.string_at(0, 8, "GALLARDO", "VALLADAR", "MAGALLAN", "CAVALLAR", "BALLASTE")
        or ctx.string_at(0, 3, "LLA")
    ):
        ctx.add("L", "")
        ctx.current += 2
        return True

    return False


def _encode_ll_as_vowel_cases(ctx: ScanContext) -> bool:
    """Handle "-LL-"; otherwise step past the 'L' (or both) and return ``False``."""
    if ctx.char_at(ctx.current + 1) == "L":
        if _encode_ll_as_vowel_special_cases(ctx) or _encode_ll_as_vowel(ctx):
            return True
        ctx.current += 2
    else:
        ctx.current += 1

    return False


# =============================================================================
# LE
# =============================================================================


def _encode_vowel_le_transposition(ctx: ScanContext, save_current: int) -> bool:
    """'bristle', 'dazzle', 'goggle' => KAKAL"""
    at = save_current
    if not (
        ctx.encode_vowels
        and at > 1
        and not ctx.is_vowel_at(at - 1)
        and ctx.char_at(at + 1) == "E"
        and ctx.char_at(at - 1) not in ("L", "R", "H", "W")
        and not ctx.is_vowel_at(at + 2)
    ):
        return False

    if (
        ctx.string_at(0, 7, "ECCLESI", "COMPLEC", "COMPLEJ", "ROBLEDO")
        or ctx.string_at(0, 5, "MCCLE", "MCLEL")
        or ctx.string_at(0, 6, "EMBLEM", "KADLEC")
        or (at + 2 == ctx.last and ctx.string_at(at, 3, "LET"))
        or ctx.string_at(at, 7, "LETTING")
        or ctx.string_at(at, 6, "LETELY", "LETTER", "LETION", "LETIAN", "LETING", "LETORY")
        or ctx.string_at(at, 5, "LETUS", "LETIV")
        or ctx.string_at(at, 4, "LESS", "LESQ", "LECT", "LEDG", "LETE", "LETH", "LETS", "LETT")
        or ctx.string_at(at, 3, "LEG", "LER", "LEX")
        # 'complement' is not KAMPALMENT
        or (
            ctx.string_at(at, 6, "LEMENT")
            and not (
                ctx.string_at(ctx.current - 5, 6, "BATTLE", "TANGLE", "PUZZLE", "RABBLE", "BABBLE")
                or ctx.string_at(ctx.current - 4, 5, "TABLE")
            )
        )
        or (at + 2 == ctx.last and ctx.string_at(at - 2, 5, "OCLES", "ACLES", "AKLES"))
        or ctx.string_at(at - 3, 5, "LISLE", "AISLE")
        or ctx.string_at(0, 4, "ISLE")
        or ctx.string_at(0, 6, "ROBLES")
        or ctx.string_at(at - 4, 7, "PROBLEM", "RESPLEN")
        or ctx.string_at(at - 3, 6, "REPLEN")
        or ctx.string_at(at - 2, 4, "SPLE")
    ):
        return False

    ctx.add("AL")
    ctx.flag_al_inversion = True

    # Eat redundant 'L'
    if ctx.char_at(at + 2) == "L":
        ctx.current = at + 3
    return True


def _encode_vowel_preserve_vowel_after_l(ctx: ScanContext, save_current: int) -> bool:
    """Keep the vowel after 'L' where the final 'E' is sounded; not 'hustled'."""
    at = save_current
    if (
        ctx.encode_vowels
        and not ctx.is_vowel_at(at - 1)
        and ctx.char_at(at + 1) == "E"
        and at > 1
        and at + 1 != ctx.last
        and not (ctx.string_at(at + 1, 2, "ES", "ED") and at + 2 == ctx.last)
        and not ctx.string_at(at - 1, 5, "RLEST")
    ):
        ctx.add("LA")
        ctx.current = ctx.skip_vowels(ctx.current)
        return True

    return False


def _encode_le_cases(ctx: ScanContext, save_current: int) -> None:
    if _encode_vowel_le_transposition(ctx, save_current):
        return
    if _encode_vowel_preserve_vowel_after_l(ctx, save_current):
        return

    ctx.add("L")
