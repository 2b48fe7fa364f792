"""
Rules for 'G'.

'G' is the most context-dependent consonant in English spelling: it can
be hard ('gift'), soft ('gem'), silent ('sign', 'night'), or part of an
'F' sound ('laugh'). The cascade below tries the narrowest contexts
first and falls back to a hard 'G'/'K'.
"""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_g"]


def encode_g(ctx: ScanContext) -> None:
    if (
        _encode_silent_g_at_beginning(ctx)
        or _encode_gg(ctx)
        or _encode_gk(ctx)
        or _encode_gh(ctx)
        or _encode_silent_g(ctx)
        or _encode_gn(ctx)
        or _encode_gl(ctx)
        or _encode_initial_g_front_vowel(ctx)
        or _encode_nger(ctx)
        or _encode_ger(ctx)
        or _encode_gel(ctx)
        or _encode_non_initial_g_front_vowel(ctx)
        or _encode_ga_to_j(ctx)
    ):
        return

    if not ctx.string_at(ctx.current - 1, 1, "C", "K", "G", "Q"):
        ctx.add_exact_approx("G", "K")
    ctx.current += 1


def _add_hard_g(ctx: ScanContext) -> None:
    """Hard 'G', with a soft alternate unless the word looks Germanic or Slavic."""
    if ctx.slavo_germanic():
        ctx.add_exact_approx("G", "K")
    else:
        ctx.add_exact_approx_alt("G", "J", "K", "J")


def _add_soft_g(ctx: ScanContext) -> None:
    ctx.add_exact_approx_alt("J", "G", "J", "K")


# =============================================================================
# Silent, doubled and clustered G
# =============================================================================


def _encode_silent_g_at_beginning(ctx: ScanContext) -> bool:
    """'gnome', 'gnostic'"""
    if ctx.current == 0 and ctx.string_at(0, 2, "GN"):
        ctx.current += 1
        return True

    return False


def _encode_gg(ctx: ScanContext) -> bool:
    if ctx.char_at(ctx.current + 1) != "G":
        return False

    current = ctx.current
    # Italian 'ggi' and 'gge': 'loggia', 'suggest', 'exaggerate'
    if (
        ctx.string_at(current - 1, 5, "AGGIA", "OGGIA", "AGGIO", "EGGIO", "EGGIA", "IGGIO")
        # 'ruggiero' but not 'snuggies'
        or (
            ctx.string_at(current - 1, 5, "UGGIE")
            and not (current + 3 == ctx.last or current + 4 == ctx.last)
        )
        or (current + 2 == ctx.last and ctx.string_at(current - 1, 4, "AGGI", "OGGI"))
        or ctx.string_at(current - 2, 6, "SUGGES", "XAGGER", "REGGIE")
    ):
        # 'suggest': both G's pronounced
        if ctx.string_at(current - 2, 7, "SUGGEST"):
            ctx.add_exact_approx("G", "K")

        ctx.add("J")
        ctx.advance_counter(3, 2)
    else:
        ctx.add_exact_approx("G", "K")
        ctx.current += 2
    return True


def _encode_gk(ctx: ScanContext) -> bool:
    """'gingko'"""
    if ctx.char_at(ctx.current + 1) == "K":
        ctx.add("K")
        ctx.current += 2
        return True

    return False


def _encode_silent_g(ctx: ScanContext) -> bool:
    current = ctx.current
    # 'phlegm', 'apothegm', 'voigt'
    if (
        current + 1 == ctx.last
        and (ctx.string_at(current - 1, 3, "EGM", "IGM", "AGM") or ctx.string_at(current, 2, "GT"))
    ) or (ctx.string_at(0, 5, "HUGES") and ctx.length == 5):
        ctx.current += 1
        return True

    # Vietnamese names, e.g. "Nguyen" but not "Ng"
    if ctx.string_at(0, 2, "NG") and current != ctx.last:
        ctx.current += 1
        return True

    return False


def _encode_gn(ctx: ScanContext) -> bool:
    if ctx.char_at(ctx.current + 1) != "N":
        return False

    current = ctx.current
    # 'align', 'sign', 'resign' but not 'resignation';
    # 'impugn', 'impugnable' but not 'repugnant'
    silent = (
        current > 1
        and (
            ctx.string_at(current - 1, 1, "I", "U", "E")
            or ctx.string_at(current - 3, 9, "LORGNETTE")
            or ctx.string_at(current - 2, 9, "LAGNIAPPE")
            or ctx.string_at(current - 2, 6, "COGNAC")
            or ctx.string_at(current - 3, 7, "CHAGNON")
            or ctx.string_at(current - 5, 9, "COMPAGNIE")
            or ctx.string_at(current - 4, 6, "BOLOGN")
        )
        # 'G' pronounced: 'assignation', 'signal', 'ignite'
        and not (
            ctx.string_at(current + 2, 5, "ATION")
            or ctx.string_at(current + 2, 4, "ATOR")
            or ctx.string_at(current + 2, 3, "ATE", "ITY")
            or (
                ctx.string_at(current + 2, 2, "AN", "AC", "IA", "UM")
                and not (
                    ctx.string_at(current - 3, 8, "POIGNANT")
                    or ctx.string_at(current - 2, 6, "COGNAC")
                )
            )
            or ctx.string_at(0, 7, "SPIGNER", "STEGNER")
            or (ctx.string_at(0, 5, "SIGNE") and ctx.length == 5)
            or ctx.string_at(current - 2, 5, "LIGNI", "LIGNO", "REGNA", "DIGNI", "WEGNE",
                             "TIGNE", "RIGNE", "REGNE", "TIGNO")
            or ctx.string_at(current - 2, 6, "SIGNAL", "SIGNIF", "SIGNAT")
            or ctx.string_at(current - 1, 5, "IGNIT")
        )
        and not ctx.string_at(current - 2, 6, "SIGNET", "LIGNEO")
    ) or (
        # not 'cagney', 'magna'
        current + 2 == ctx.last
        and ctx.string_at(current, 3, "GNE", "GNA")
        and not ctx.string_at(current - 2, 5, "SIGNA", "MAGNA", "SIGNE")
    )

    if silent:
        ctx.add_exact_approx_alt("N", "GN", "N", "KN")
    else:
        ctx.add_exact_approx("GN", "KN")
    ctx.current += 2
    return True


def _encode_gl(ctx: ScanContext) -> bool:
    """'tagliaro', 'puglia'; alternate keeps the 'K' Americans often say."""
    if ctx.string_at(ctx.current + 1, 3, "LIA", "LIO", "LIE") and ctx.is_vowel_at(ctx.current - 1):
        ctx.add_exact_approx_alt("L", "GL", "L", "KL")
        ctx.current += 2
        return True

    return False


# =============================================================================
# GH
# =============================================================================


def _encode_gh(ctx: ScanContext) -> bool:
    if ctx.char_at(ctx.current + 1) != "H":
        return False

    if (
        _encode_gh_after_consonant(ctx)
        or _encode_initial_gh(ctx)
        or _encode_gh_to_j(ctx)
        or _encode_gh_to_h(ctx)
        or _encode_ught(ctx)
        or _encode_gh_h_part_of_other_word(ctx)
        or _encode_silent_gh(ctx)
        or _encode_gh_to_f(ctx)
    ):
        return True

    ctx.add_exact_approx("G", "K")
    ctx.current += 2
    return True


def _encode_gh_after_consonant(ctx: ScanContext) -> bool:
    # 'burgher', 'bingham'; not 'halgh' at the end
    current = ctx.current
    if (
        current > 0
        and not ctx.is_vowel_at(current - 1)
        and not (ctx.string_at(current - 3, 5, "HALGH") and current + 1 == ctx.last)
    ):
        ctx.add_exact_approx("G", "K")
        ctx.current += 2
        return True

    return False


def _encode_initial_gh(ctx: ScanContext) -> bool:
    if ctx.current == 0:
        # 'ghislane', 'ghiradelli'
        if ctx.char_at(ctx.current + 2) == "I":
            ctx.add("J")
        else:
            ctx.add_exact_approx("G", "K")
        ctx.current += 2
        return True

    return False


def _encode_gh_to_j(ctx: ScanContext) -> bool:
    """Scottish 'greenhalgh'"""
    if ctx.string_at(ctx.current - 2, 4, "ALGH") and ctx.current + 1 == ctx.last:
        ctx.add("J", "")
        ctx.current += 2
        return True

    return False


def _encode_gh_to_h(ctx: ScanContext) -> bool:
    """'donoghue', 'donaghy', 'callaghan'"""
    current = ctx.current
    if (
        ctx.string_at(current - 4, 4, "DONO", "DONA") and ctx.is_vowel_at(current + 2)
    ) or ctx.string_at(current - 5, 9, "CALLAGHAN"):
        ctx.add("H")
        ctx.current += 2
        return True

    return False


def _encode_ught(ctx: ScanContext) -> bool:
    """'ought', 'aught', 'daughter', 'slaughter'"""
    current = ctx.current
    if not ctx.string_at(current - 1, 4, "UGHT"):
        return False

    if (
        ctx.string_at(current - 3, 5, "LAUGH")
        and not (
            ctx.string_at(current - 4, 7, "SLAUGHT") or ctx.string_at(current - 3, 7, "LAUGHTO")
        )
    ) or ctx.string_at(current - 4, 6, "DRAUGH"):
        ctx.add("FT")
    else:
        ctx.add("T")
    ctx.current += 3
    return True


def _encode_gh_h_part_of_other_word(ctx: ScanContext) -> bool:
    # The 'H' starts another word or syllable: 'doghouse', 'bighorn'
    if ctx.string_at(ctx.current + 1, 4, "HOUS", "HEAD", "HOLE", "HORN", "HARN"):
        ctx.add_exact_approx("G", "K")
        ctx.current += 2
        return True

    return False


def _encode_silent_gh(ctx: ScanContext) -> bool:
    current = ctx.current
    last = ctx.last

    # Parker's rule, with refinements: 'hugh', 'bough', 'broughton', 'plough'
    preceded = (
        (current > 1 and ctx.string_at(current - 2, 1, "B", "H", "D", "G", "L"))
        or (
            current > 2
            and ctx.string_at(current - 3, 1, "B", "H", "D", "K", "W", "N", "P", "V")
            and not ctx.string_at(0, 6, "ENOUGH")
        )
        or (current > 3 and ctx.string_at(current - 4, 1, "B", "H"))
        or (current > 3 and ctx.string_at(current - 4, 2, "PL", "SL"))
        or (
            current > 0
            and (
                # 'sigh', 'light'
                ctx.char_at(current - 1) == "I"
                or ctx.string_at(0, 4, "PUGH")
                # 'mcdonagh', 'murtagh', 'creagh'
                or (ctx.string_at(current - 1, 3, "AGH") and current + 1 == last)
                or ctx.string_at(current - 4, 6, "GERAGH", "DRAUGH")
                or (
                    ctx.string_at(current - 3, 5, "GAUGH", "GEOGH", "MAUGH")
                    and not ctx.string_at(0, 9, "MCGAUGHEY")
                )
                # not 'tough', 'rough', 'lough'
                or (
                    ctx.string_at(current - 2, 4, "OUGH")
                    and current > 3
                    and not ctx.string_at(current - 4, 6, "CCOUGH", "ENOUGH", "TROUGH", "CLOUGH")
                )
            )
        )
    )

    # Suffixes starting with a vowel after which "-GH-" stays silent
    followed = (
        ctx.string_at(current - 3, 5, "VAUGH", "FEIGH", "LEIGH")
        or ctx.string_at(current - 2, 4, "HIGH", "TIGH")
        or current + 1 == last
        or (
            ctx.string_at(current + 2, 2, "IE", "EY", "ES", "ER", "ED", "TY")
            and current + 3 == last
            and not ctx.string_at(current - 5, 9, "GALLAGHER")
        )
        or (ctx.string_at(current + 2, 1, "Y") and current + 2 == last)
        or (ctx.string_at(current + 2, 3, "ING", "OUT") and current + 4 == last)
        or (ctx.string_at(current + 2, 4, "ERTY") and current + 5 == last)
        or not ctx.is_vowel_at(current + 2)
        or ctx.string_at(current - 3, 5, "GAUGH", "GEOGH", "MAUGH")
        or ctx.string_at(current - 4, 8, "BROUGHAM")
    )

    # '-G-' pronounced
    pronounced = (
        ctx.string_at(0, 6, "BALOGH", "SABAGH")
        or ctx.string_at(current - 2, 7, "BAGHDAD")
        or ctx.string_at(current - 3, 5, "WHIGH")
        or ctx.string_at(current - 5, 7, "SABBAGH", "AKHLAGH")
    )

    if preceded and followed and not pronounced:
        ctx.current += 2
        return True

    return False


def _encode_gh_special_cases(ctx: ScanContext) -> bool:
    current = ctx.current
    # 'hiccough' == 'hiccup'
    if ctx.string_at(current - 6, 8, "HICCOUGH"):
        ctx.add("P")
    # 'lough', the Irish spelling of 'loch'
    elif ctx.string_at(0, 5, "LOUGH"):
        ctx.add("K")
    # Hungarian
    elif ctx.string_at(0, 6, "BALOGH"):
        ctx.add_exact_approx_alt("G", "", "K", "")
    # 'maclaughlin'
    elif ctx.string_at(current - 3, 8, "LAUGHLIN", "COUGHLAN", "LOUGHLIN"):
        ctx.add("K", "F")
    elif ctx.string_at(current - 3, 5, "GOUGH") or ctx.string_at(current - 7, 9, "COLCLOUGH"):
        ctx.add("", "F")
    else:
        return False

    ctx.current += 2
    return True


def _encode_gh_to_f(ctx: ScanContext) -> bool:
    if _encode_gh_special_cases(ctx):
        return True

    current = ctx.current
    # 'laugh', 'cough', 'rough', 'tough'
    if (
        current > 2
        and ctx.char_at(current - 1) == "U"
        and ctx.is_vowel_at(current - 2)
        and ctx.string_at(current - 3, 1, "C", "G", "L", "R", "T", "N", "S")
        and not ctx.string_at(current - 4, 8, "BREUGHEL", "FLAUGHER")
    ):
        ctx.add("F")
        ctx.current += 2
        return True

    return False


# =============================================================================
# G before a front vowel
# =============================================================================


def _encode_initial_g_front_vowel(ctx: ScanContext) -> bool:
    current = ctx.current
    if not (current == 0 and ctx.front_vowel(current + 1)):
        return False

    # 'gila' as in 'gila monster'
    if ctx.string_at(current + 1, 3, "ILA") and ctx.length == 4:
        ctx.add("H")
    elif _initial_g_soft(ctx):
        _add_soft_g(ctx)
    elif ctx.char_at(current + 1) in ("E", "I"):
        # Alternate 'J' only before a true front vowel
        ctx.add_exact_approx_alt("G", "J", "K", "J")
    else:
        ctx.add_exact_approx("G", "K")

    ctx.advance_counter(2, 1)
    return True


def _initial_g_soft(ctx: ScanContext) -> bool:
    at = ctx.current + 1
    return (
        (
            ctx.string_at(at, 2, "EL", "EM", "EN", "EO", "ER", "ES", "IA", "IN", "IO", "IP",
                          "IU", "YM", "YN", "YP", "YR", "EE")
            or ctx.string_at(at, 3, "IRA", "IRO")
        )
        # Smaller set where it stays hard: 'gerber'
        and not (
            ctx.string_at(at, 3, "ELD", "ELT", "ERT", "INZ", "ERH", "ITE", "ERD", "ERL", "ERN",
                          "INT", "EES", "EEK", "ELB", "EER")
            or ctx.string_at(at, 4, "ERSH", "ERST", "INSB", "INGR", "EROW", "ERKE", "EREN")
            or ctx.string_at(at, 5, "ELLER", "ERDIE", "ERBER", "ESUND", "ESNER", "INGKO",
                             "INKGO", "IPPER", "ESELL", "IPSON", "EEZER", "ERSON", "ELMAN")
            or ctx.string_at(at, 6, "ESTALT", "ESTAPO", "INGHAM", "ERRITY", "ERRISH", "ESSNER",
                             "ENGLER")
            or ctx.string_at(at, 7, "YNAECOL", "YNECOLO", "ENTHNER", "ERAGHTY")
            or ctx.string_at(at, 8, "INGERICH", "EOGHEGAN")
        )
    ) or (
        ctx.is_vowel_at(at)
        and (
            ctx.string_at(at, 3, "EE ", "EEW")
            or (
                ctx.string_at(at, 3, "IGI", "IRA", "IBE", "AOL", "IDE", "IGL")
                and not ctx.string_at(at, 5, "IDEON")
            )
            or ctx.string_at(at, 4, "ILES", "INGI", "ISEL")
            or (ctx.string_at(at, 5, "INGER") and not ctx.string_at(at, 8, "INGERICH"))
            or ctx.string_at(at, 5, "IBBER", "IBBET", "IBLET", "IBRAN", "IGOLO", "IRARD", "IGANT")
            or ctx.string_at(at, 6, "IRAFFE", "EEWHIZ")
            or ctx.string_at(at, 7, "ILLETTE", "IBRALTA")
        )
    )


def _encode_nger(ctx: ScanContext) -> bool:
    current = ctx.current
    if not (current > 1 and ctx.string_at(current - 1, 4, "NGER")):
        return False

    # Soft by default: 'ranger', 'stranger', 'messenger', 'harbinger', 'passenger'
    hard = (
        ctx.root_or_inflections("ANGER")
        or ctx.root_or_inflections("LINGER")
        or ctx.root_or_inflections("MALINGER")
        or ctx.root_or_inflections("FINGER")
        or (
            ctx.string_at(current - 3, 4, "HUNG", "FING", "BUNG", "WING", "RING", "DING", "ZENG",
                          "ZING", "JUNG", "LONG", "PING", "CONG", "MONG", "BANG", "GANG", "HANG",
                          "LANG", "SANG", "SING", "WANG", "ZANG")
            # Soft after all
            and not (
                ctx.string_at(current - 6, 7, "BOULANG", "SLESING", "KISSING", "DERRING")
                or ctx.string_at(current - 8, 9, "SCHLESING")
                or ctx.string_at(current - 5, 6, "SALING", "BELANG")
                or ctx.string_at(current - 6, 7, "BARRING")
                or ctx.string_at(current - 6, 9, "PHALANGER")
                or ctx.string_at(current - 4, 5, "CHANG")
            )
        )
        or ctx.string_at(current - 4, 5, "STING", "YOUNG")
        or ctx.string_at(current - 5, 6, "STRONG")
        or ctx.string_at(0, 3, "UNG", "ENG", "ING")
        or ctx.string_at(0, 6, "SENGER")
        or ctx.string_at(current, 6, "GERICH")
        or ctx.string_at(current - 3, 6, "WENGER", "MUNGER", "SONGER", "KINGER")
        or ctx.string_at(current - 4, 7, "FLINGER", "SLINGER", "STANGER", "STENGER", "KLINGER",
                         "CLINGER")
        or ctx.string_at(current - 5, 8, "SPRINGER", "SPRENGER")
        or ctx.string_at(current - 3, 7, "LINGERF")
        or ctx.string_at(current - 2, 7, "ANGERLY", "ANGERBO", "INGERSO")
    )

    if hard:
        ctx.add_exact_approx_alt("G", "J", "K", "J")
    else:
        _add_soft_g(ctx)

    ctx.advance_counter(2, 1)
    return True


def _encode_ger(ctx: ScanContext) -> bool:
    current = ctx.current
    if not (current > 0 and ctx.string_at(current + 1, 2, "ER")):
        return False

    # Hard: 'jager', 'tiger', 'lager', 'auger', 'eager', 'kruger'
    hard = (
        (
            current == 2
            and ctx.is_vowel_at(current - 1)
            and not ctx.is_vowel_at(current - 2)
            and not ctx.string_at(current - 2, 5, "PAGER", "WAGER", "NIGER", "ROGER", "LEGER",
                                  "CAGER")
        )
        or ctx.string_at(current - 2, 5, "AUGER", "EAGER", "INGER", "YAGER")
        or ctx.string_at(current - 3, 6, "SEEGER", "JAEGER", "GEIGER", "KRUGER", "SAUGER",
                         "BURGER", "MEAGER", "MARGER", "RIEGER", "YAEGER", "STEGER", "PRAGER",
                         "SWIGER", "YERGER", "TORGER", "FERGER", "HILGER", "ZEIGER", "YARGER",
                         "COWGER", "CREGER", "KROGER", "KREGER", "GRAGER", "STIGER", "BERGER")
        # 'berger' but not 'bergerac'
        or (ctx.string_at(current - 3, 6, "BERGER") and current + 2 == ctx.last)
        or ctx.string_at(current - 4, 7, "KREIGER", "KRUEGER", "METZGER", "KRIEGER", "KROEGER",
                         "STEIGER", "DRAEGER", "BUERGER", "BOERGER", "FIBIGER")
        # 'harshbarger', 'winebarger'
        or (ctx.string_at(current - 3, 6, "BARGER") and current > 4)
        # 'weisgerber'
        or (ctx.string_at(current, 6, "GERBER") and current > 0)
        or ctx.string_at(current - 5, 8, "SCHWAGER", "LYBARGER", "SPRENGER", "GALLAGER",
                         "WILLIGER")
        or ctx.string_at(0, 4, "HARGER")
        or (ctx.string_at(0, 4, "AGER", "EGER") and ctx.length == 4)
        or ctx.string_at(current - 1, 6, "YGERNE")
        or ctx.string_at(current - 6, 9, "SCHWEIGER")
    ) and not (
        ctx.string_at(current - 5, 10, "BELLIGEREN")
        or ctx.string_at(0, 7, "MARGERY")
        or ctx.string_at(current - 3, 8, "BERGERAC")
    )

    if hard:
        _add_hard_g(ctx)
    else:
        _add_soft_g(ctx)

    ctx.advance_counter(2, 1)
    return True


def _encode_gel(ctx: ScanContext) -> bool:
    current = ctx.current
    if not (ctx.string_at(current + 1, 2, "EL") and current > 0):
        return False

    # Mostly soft, except 'bagel', 'hegel', 'kugel', 'vogel' and combining forms
    hard = (
        (
            ctx.length == 5
            and ctx.is_vowel_at(current - 1)
            and not ctx.is_vowel_at(current - 2)
            and not ctx.string_at(current - 2, 5, "NIGEL", "RIGEL")
        )
        or ctx.string_at(current - 2, 5, "ENGEL", "HEGEL", "NAGEL", "VOGEL")
        or ctx.string_at(current - 3, 6, "MANGEL", "WEIGEL", "FLUGEL", "RANGEL", "HAUGEN",
                         "RIEGEL", "VOEGEL")
        or ctx.string_at(current - 4, 7, "SPEIGEL", "STEIGEL", "WRANGEL", "SPIEGEL")
        or ctx.string_at(current - 4, 8, "DANEGELD")
    )

    if hard:
        _add_hard_g(ctx)
    else:
        _add_soft_g(ctx)

    ctx.advance_counter(2, 1)
    return True


def _encode_non_initial_g_front_vowel(ctx: ScanContext) -> bool:
    current = ctx.current
    if not ctx.string_at(current + 1, 1, "E", "I", "Y"):
        return False

    if ctx.string_at(current, 2, "GE") and current == ctx.last - 1:
        # '-ge' at the end is almost always soft
        if _hard_ge_at_end(ctx):
            _add_hard_g(ctx)
        else:
            ctx.add("J")
    elif _internal_hard_g(ctx):
        # No 'KG' or 'KK' for 'mcgill', 'macgee'
        if not (
            (current == 2 and ctx.string_at(0, 2, "MC"))
            or (current == 3 and ctx.string_at(0, 3, "MAC"))
        ):
            _add_hard_g(ctx)
    else:
        _add_soft_g(ctx)

    ctx.advance_counter(2, 1)
    return True


def _hard_ge_at_end(ctx: ScanContext) -> bool:
    """German names and other words with a hard "-ge" at the end."""
    return (
        ctx.string_at(0, 6, "RENEGE", "STONGE", "STANGE", "PRANGE", "KRESGE")
        or ctx.string_at(0, 5, "BYRGE", "BIRGE", "BERGE", "HAUGE")
        or ctx.string_at(0, 4, "HAGE")
        or ctx.string_at(0, 5, "LANGE", "SYNGE", "BENGE", "RUNGE", "HELGE")
        or ctx.string_at(0, 4, "INGE", "LAGE")
    )


def _internal_hard_g(ctx: ScanContext) -> bool:
    """Hard 'G' before a front vowel, away from a final "-GE"."""
    if ctx.current + 1 == ctx.last and ctx.char_at(ctx.current + 1) == "E":
        return False

    return (
        _internal_hard_ng(ctx)
        or _internal_hard_gen_gin_get_git(ctx)
        or _internal_hard_g_open_syllable(ctx)
        or _internal_hard_g_other(ctx)
    )


def _internal_hard_g_other(ctx: ScanContext) -> bool:
    current = ctx.current
    return (
        (
            ctx.string_at(current, 4, "GETH", "GEAR", "GEIS", "GIRL", "GIVI", "GIVE", "GIFT",
                          "GIRD", "GIRT", "GILV", "GILD", "GELD")
            and not ctx.string_at(current - 3, 6, "GINGIV")
        )
        # 'gish' but not 'largish'
        or (ctx.string_at(current + 1, 3, "ISH") and current > 0 and not ctx.string_at(0, 4, "LARG"))
        or (ctx.string_at(current - 2, 5, "MAGED", "MEGID") and current + 2 != ctx.last)
        or ctx.string_at(current, 3, "GEZ")
        or ctx.string_at(0, 4, "WEGE", "HAGE")
        or (
            ctx.string_at(current - 2, 6, "ONGEST", "UNGEST")
            and current + 3 == ctx.last
            and not ctx.string_at(current - 3, 7, "CONGEST")
        )
        or ctx.string_at(0, 5, "VOEGE", "BERGE", "HELGE")
        or (ctx.string_at(0, 4, "ENGE", "BOGY") and ctx.length == 4)
        or ctx.string_at(current, 6, "GIBBON")
        or ctx.string_at(0, 10, "CORREGIDOR")
        or ctx.string_at(0, 8, "INGEBORG")
        or (
            ctx.string_at(current, 4, "GILL")
            and (current + 3 == ctx.last or current + 4 == ctx.last)
            and not ctx.string_at(0, 8, "STURGILL")
        )
    )


def _internal_hard_g_open_syllable(ctx: ScanContext) -> bool:
    """'-gy-', '-gie-', '-gee-' and '-gio-' with a hard 'G': 'fogy', 'carnegie'."""
    current = ctx.current
    return (
        ctx.string_at(current + 1, 3, "EYE")
        or ctx.string_at(current - 2, 4, "FOGY", "POGY", "YOGI")
        or ctx.string_at(current - 2, 5, "MAGEE", "HAGIO")
        or ctx.string_at(current - 1, 4, "RGEY", "OGEY")
        or ctx.string_at(current - 3, 5, "HOAGY", "STOGY", "PORGY")
        or ctx.string_at(current - 5, 8, "CARNEGIE")
        or (ctx.string_at(current - 1, 4, "OGEY", "OGIE") and current + 2 == ctx.last)
    )


def _internal_hard_gen_gin_get_git(ctx: ScanContext) -> bool:
    current = ctx.current
    return (
        (
            ctx.string_at(current - 3, 6, "FORGET", "TARGET", "MARGIT", "MARGET", "TURGEN",
                          "BERGEN", "MORGEN", "JORGEN", "HAUGEN", "JERGEN", "JURGEN", "LINGEN",
                          "BORGEN", "LANGEN", "KLAGEN", "STIGER", "BERGER")
            and not ctx.string_at(current, 7, "GENETIC", "GENESIS")
            and not ctx.string_at(current - 4, 8, "PLANGENT")
        )
        or (ctx.string_at(current - 3, 6, "BERGIN", "FEAGIN", "DURGIN") and current + 2 == ctx.last)
        or (ctx.string_at(current - 2, 5, "ENGEN") and not ctx.string_at(current + 3, 3, "DER", "ETI", "ESI"))
        or ctx.string_at(current - 4, 7, "JUERGEN")
        or ctx.string_at(0, 5, "NAGIN", "MAGIN", "HAGIN")
        or (ctx.string_at(0, 5, "ENGIN", "DEGEN", "LAGEN", "MAGEN", "NAGIN") and ctx.length == 5)
        or (
            ctx.string_at(current - 2, 5, "BEGET", "BEGIN", "HAGEN", "FAGIN", "BOGEN", "WIGIN",
                          "NTGEN", "EIGEN", "WEGEN", "WAGEN")
            and not ctx.string_at(current - 5, 8, "OSPHAGEN")
        )
    )


def _internal_hard_ng(ctx: ScanContext) -> bool:
    """'-ng-' before a front vowel that keeps a hard 'G': 'singer', 'longer'."""
    current = ctx.current
    return (
        (
            ctx.string_at(current - 3, 4, "DANG", "FANG", "SING")
            and not ctx.string_at(current - 5, 8, "DISINGEN")
        )
        or ctx.string_at(0, 5, "INGEB", "ENGEB")
        or (
            ctx.string_at(current - 3, 4, "RING", "WING", "HANG", "LONG")
            and not (
                ctx.string_at(current - 4, 5, "CRING", "FRING", "ORANG", "TWING", "CHANG", "PHANG")
                or ctx.string_at(current - 5, 6, "SYRING")
                or ctx.string_at(current - 3, 7, "RINGENC", "RINGENT", "LONGITU", "LONGEVI")
                # 'longino', 'mastrangelo'
                or (ctx.string_at(current, 4, "GELO", "GINO") and current + 3 == ctx.last)
            )
        )
        or (
            ctx.string_at(current - 1, 3, "NGY")
            and not (
                ctx.string_at(current - 3, 5, "RANGY", "MANGY", "MINGY")
                or ctx.string_at(current - 4, 6, "SPONGY", "STINGY")
            )
        )
    )


def _encode_ga_to_j(ctx: ScanContext) -> bool:
    """'margary', 'margarine', 'gaol', 'algae'"""
    current = ctx.current
    if (
        (
            ctx.string_at(current - 3, 7, "MARGARY", "MARGARI")
            # not Spanish 'margarita'
            and not ctx.string_at(current - 3, 8, "MARGARIT")
        )
        or ctx.string_at(0, 4, "GAOL")
        or ctx.string_at(current - 2, 5, "ALGAE")
    ):
        _add_soft_g(ctx)
        ctx.advance_counter(2, 1)
        return True

    return False
