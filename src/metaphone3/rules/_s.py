"""
Rules for 'S'.

Covers the 'SH'/'ZH' palatalisations ('pressure', 'vision'), silent
French and English 'S' ('debris', 'island'), German and Scandinavian
spellings ('schmidt', 'sjoberg') and the plain 'S' default.
"""

from __future__ import annotations

from metaphone3._context import ScanContext
from metaphone3.rules._names import (
    names_beginning_with_sw_that_get_alt_sv,
    names_beginning_with_sw_that_get_alt_xv,
)

__all__ = ["encode_s"]


def encode_s(ctx: ScanContext) -> None:
    if (
        _encode_skj(ctx)
        or _encode_special_sw(ctx)
        or _encode_sj(ctx)
        or _encode_silent_french_s_final(ctx)
        or _encode_silent_french_s_internal(ctx)
        or _encode_isl(ctx)
        or _encode_stl(ctx)
        or _encode_christmas(ctx)
        or _encode_sthm(ctx)
        or _encode_isten(ctx)
        or _encode_sugar(ctx)
        or _encode_sh(ctx)
        or _encode_sch(ctx)
        or _encode_sur(ctx)
        or _encode_su(ctx)
        or _encode_ssio(ctx)
        or _encode_ss(ctx)
        or _encode_sia(ctx)
        or _encode_sio(ctx)
        or _encode_anglicisations(ctx)
        or _encode_sc(ctx)
        or _encode_sea_sui_sier(ctx)
        or _encode_sea(ctx)
    ):
        return

    ctx.add("S")

    if ctx.string_at(ctx.current + 1, 1, "S", "Z") and not ctx.string_at(ctx.current + 1, 2, "SH"):
        ctx.current += 2
    else:
        ctx.current += 1


# =============================================================================
# Names and loanwords
# =============================================================================


def _encode_special_sw(ctx: ScanContext) -> bool:
    """Native 'SV' or 'XV' alternates for Scandinavian, Slavic and German names."""
    if ctx.current != 0:
        return False

    if names_beginning_with_sw_that_get_alt_sv(ctx):
        ctx.add("S", "SV")
        ctx.current += 2
        return True

    if names_beginning_with_sw_that_get_alt_xv(ctx):
        ctx.add("S", "XV")
        ctx.current += 2
        return True

    return False


def _encode_skj(ctx: ScanContext) -> bool:
    """Scandinavian "-SKJ-": Americans say 'hammarskjold' as 'hammer-shold'."""
    if ctx.string_at(ctx.current, 4, "SKJO", "SKJU") and ctx.is_vowel_at(ctx.current + 3):
        ctx.add("X")
        ctx.current += 3
        return True

    return False


def _encode_sj(ctx: ScanContext) -> bool:
    """Initial Swedish 'SJ-'."""
    if ctx.string_at(0, 2, "SJ"):
        ctx.add("X")
        ctx.current += 2
        return True

    return False


def _encode_silent_french_s_final(ctx: ScanContext) -> bool:
    current = ctx.current
    at_end = current == ctx.last

    # 'louis' gets both pronunciations
    if ctx.string_at(0, 5, "LOUIS") and at_end:
        ctx.add("S", "")
        ctx.current += 1
        return True

    # French words familiar to Americans with a silent final 'S'
    if (
        at_end
        and (
            ctx.string_at(0, 4, "YVES")
            or (ctx.string_at(0, 4, "HORS") and current == 3)
            or ctx.string_at(current - 4, 5, "CAMUS", "YPRES")
            or ctx.string_at(current - 5, 6, "MESNES", "DEBRIS", "BLANCS", "INGRES", "CANNES")
            or ctx.string_at(current - 6, 7, "CHABLIS", "APROPOS", "JACQUES", "ELYSEES",
                             "OEUVRES", "GEORGES", "DESPRES")
            or ctx.string_at(0, 8, "ARKANSAS", "FRANCAIS", "CRUDITES", "BRUYERES")
            or ctx.string_at(0, 9, "DESCARTES", "DESCHUTES", "DESCHAMPS", "DESROCHES",
                             "DESCHENES")
            or ctx.string_at(0, 10, "RENDEZVOUS")
            or ctx.string_at(0, 11, "CONTRETEMPS", "DESLAURIERS")
        )
    ) or (
        at_end
        and ctx.string_at(current - 2, 2, "AI", "OI", "UI")
        and not ctx.string_at(0, 4, "LOIS", "LUIS")
    ):
        ctx.current += 1
        return True

    return False


def _encode_silent_french_s_internal(ctx: ScanContext) -> bool:
    current = ctx.current
    if (
        ctx.string_at(current - 2, 9, "DESCARTES")
        or ctx.string_at(current - 2, 7, "DESCHAM", "DESPRES", "DESROCH", "DESROSI", "DESJARD",
                         "DESMARA", "DESCHEN", "DESHOTE", "DESLAUR")
        or ctx.string_at(current - 2, 6, "MESNES")
        or ctx.string_at(current - 5, 8, "DUQUESNE", "DUCHESNE")
        or ctx.string_at(current - 7, 10, "BEAUCHESNE")
        or ctx.string_at(current - 3, 7, "FRESNEL")
        or ctx.string_at(current - 3, 9, "GROSVENOR")
        or ctx.string_at(current - 4, 10, "LOUISVILLE")
        or ctx.string_at(current - 7, 10, "ILLINOISAN")
    ):
        ctx.current += 1
        return True

    return False


# =============================================================================
# Silent S and T
# =============================================================================


def _encode_isl(ctx: ScanContext) -> bool:
    """'island', 'isle', 'carlisle', 'carlysle'"""
    current = ctx.current
    if (
        ctx.string_at(current - 2, 4, "LISL", "LYSL", "AISL")
        and not ctx.string_at(current - 3, 7, "PAISLEY", "BAISLEY", "ALISLAM", "ALISLAH",
                              "ALISLAA")
    ) or (
        current == 1
        and (ctx.string_at(current - 1, 4, "ISLE") or ctx.string_at(current - 1, 5, "ISLAN"))
        and not ctx.string_at(current - 1, 5, "ISLEY", "ISLER")
    ):
        ctx.current += 1
        return True

    return False


def _encode_stl(ctx: ScanContext) -> bool:
    """Silent 'T' in 'hustle', 'whistle'; silent 'C' in 'corpuscle'."""
    current = ctx.current
    if not (
        (
            ctx.string_at(current, 4, "STLE", "STLI")
            and not ctx.string_at(current + 2, 4, "LESS", "LIKE", "LINE")
        )
        or ctx.string_at(current - 3, 7, "THISTLY", "BRISTLY", "GRISTLY")
        or ctx.string_at(current - 1, 5, "USCLE")
    ):
        return False

    # Names that keep the 'T', and "-LING" as a nominalizing suffix
    if (
        ctx.string_at(0, 7, "KRISTEN", "KRYSTLE", "CRYSTLE", "KRISTLE")
        or ctx.string_at(0, 11, "CHRISTENSEN", "CHRISTENSON")
        or ctx.string_at(current - 3, 9, "FIRSTLING")
        or ctx.string_at(current - 2, 8, "NESTLING", "WESTLING")
    ):
        ctx.add("ST")
        ctx.current += 2
        return True

    if (
        ctx.encode_vowels
        and ctx.char_at(current + 3) == "E"
        and ctx.char_at(current + 4) != "R"
        and not ctx.string_at(current + 3, 4, "ETTE", "ETTA")
        and not ctx.string_at(current + 3, 2, "EY")
    ):
        ctx.add("SAL")
        ctx.flag_al_inversion = True
    else:
        ctx.add("SL")
    ctx.current += 3
    return True


def _encode_christmas(ctx: ScanContext) -> bool:
    """Americans say 'krissmuss'."""
    if ctx.string_at(ctx.current - 4, 8, "CHRISTMA"):
        ctx.add("SM")
        ctx.current += 3
        return True

    return False


def _encode_sthm(ctx: ScanContext) -> bool:
    """'asthma', 'isthmus'"""
    if ctx.string_at(ctx.current, 4, "STHM"):
        ctx.add("SM")
        ctx.current += 4
        return True

    return False


def _encode_isten(ctx: ScanContext) -> bool:
    current = ctx.current

    # 'T' silent in the verb, pronounced in the name
    if ctx.string_at(0, 8, "CHRISTEN"):
        if ctx.root_or_inflections("CHRISTEN") or ctx.string_at(0, 11, "CHRISTENDOM"):
            ctx.add("S", "ST")
        else:
            # 'christenson', 'christene'
            ctx.add("ST")
        ctx.current += 2
        return True

    # 'glisten', 'listen', 'fasten', 'mustn't'
    if ctx.string_at(current - 2, 6, "LISTEN", "RISTEN", "HASTEN", "FASTEN", "MUSTNT") or (
        ctx.string_at(current - 3, 7, "MOISTEN")
    ):
        ctx.add("S")
        ctx.current += 2
        return True

    return False


# =============================================================================
# SH, SCH and palatal S
# =============================================================================


def _encode_sugar(ctx: ScanContext) -> bool:
    if ctx.string_at(ctx.current, 5, "SUGAR"):
        ctx.add("X")
        ctx.current += 1
        return True

    return False


def _encode_sh(ctx: ScanContext) -> bool:
    """'SH' as 'X', except where 'S' and 'H' belong to different roots."""
    current = ctx.current
    if not ctx.string_at(current, 2, "SH"):
        return False

    if ctx.string_at(current - 2, 8, "CASHMERE"):
        ctx.add("J")
        ctx.current += 2
        return True

    # Combining forms: 'clotheshorse', 'mishap', 'dishonor', 'grasshopper'
    if current > 0 and (
        (ctx.string_at(current + 1, 3, "HAP") and current + 3 == ctx.last)
        or ctx.string_at(current + 1, 4, "HEIM", "HOEK", "HOLM", "HOLZ", "HOOD", "HEAD", "HEID",
                         "HAAR", "HORS", "HOLE", "HUND", "HELM", "HAWK", "HILL")
        or ctx.string_at(current + 1, 5, "HEART", "HATCH", "HOUSE", "HOUND", "HONOR")
        or (ctx.string_at(current + 2, 3, "EAR") and current + 4 == ctx.last)
        or (ctx.string_at(current + 2, 3, "ORN") and not ctx.string_at(current - 2, 7, "UNSHORN"))
        # 'newshour' but not 'bashour', 'manshour'
        or (
            ctx.string_at(current + 1, 4, "HOUR")
            and not (
                ctx.string_at(0, 7, "BASHOUR")
                or ctx.string_at(0, 8, "MANSHOUR")
                or ctx.string_at(0, 6, "ASHOUR")
            )
        )
        or ctx.string_at(current + 2, 5, "ARMON", "ONEST", "ALLOW", "OLDER", "OPPER", "EIMER",
                         "ANDLE", "ONOUR")
        # 'dishabille', 'transhumance'
        or ctx.string_at(current + 2, 6, "ABILLE", "UMANCE", "ABITUA")
    ):
        if not ctx.string_at(current - 1, 1, "S"):
            ctx.add("S")
    else:
        ctx.add("X")

    ctx.current += 2
    return True


def _encode_sch(ctx: ScanContext) -> bool:
    """
    "-SCH-": 'S' + 'CH' in old combining forms, 'SK' in Dutch, Italian
    and Greek words, 'X' in German ones.
    """
    current = ctx.current
    if not ctx.string_at(current + 1, 2, "CH"):
        return False

    # 'mischief', 'escheat', 'mischance', 'eschew'
    if current > 0 and (
        ctx.string_at(current + 3, 3, "IEF", "EAT")
        or ctx.string_at(current + 3, 4, "ANCE", "ARGE")
        or ctx.string_at(0, 6, "ESCHEW")
    ):
        ctx.add("S")
        ctx.current += 1
        return True

    # Schlesinger's rule: 'school', 'schooner', 'schiavone', 'schiz-'
    if (
        (
            ctx.string_at(current + 3, 2, "OO", "ER", "EN", "UY", "ED", "EM", "IA", "IZ", "IS", "OL")
            and not ctx.string_at(current, 6, "SCHOLT", "SCHISL", "SCHERR")
        )
        or ctx.string_at(current + 3, 3, "ISZ")
        or (
            ctx.string_at(current - 1, 6, "ESCHAT", "ASCHIN", "ASCHAL", "ISCHAE", "ISCHIA")
            and not ctx.string_at(current - 2, 8, "FASCHING")
        )
        or (ctx.string_at(current - 1, 5, "ESCHI") and current + 3 == ctx.last)
        or ctx.char_at(current + 3) == "Y"
    ):
        # 'schermerhorn', 'schenker', 'schistose'
        if ctx.string_at(current + 3, 2, "ER", "EN", "IS") and (
            current + 4 == ctx.last or ctx.string_at(current + 3, 3, "ENK", "ENB", "IST")
        ):
            ctx.add("X", "SK")
        else:
            ctx.add("SK")
    else:
        ctx.add("X")

    ctx.current += 3
    return True


def _encode_sur(ctx: ScanContext) -> bool:
    """'erasure', 'usury'; 'X' in 'sure', 'ensure'"""
    current = ctx.current
    if not ctx.string_at(current + 1, 3, "URE", "URA", "URY"):
        return False

    if current == 0 or ctx.string_at(current - 1, 1, "N", "K") or ctx.string_at(current - 2, 2, "NO"):
        ctx.add("X")
    else:
        ctx.add("J")

    ctx.advance_counter(2, 1)
    return True


def _encode_su(ctx: ScanContext) -> bool:
    """'sensuous', 'consensual'; 'persuade' keeps 'S', 'casual' gets 'J'."""
    current = ctx.current
    if not (ctx.string_at(current + 1, 2, "UO", "UA") and current != 0):
        return False

    if ctx.string_at(current - 1, 4, "RSUA"):
        ctx.add("S")
    elif ctx.is_vowel_at(current - 1):
        ctx.add("J", "S")
    else:
        ctx.add("X", "S")

    ctx.advance_counter(3, 1)
    return True


def _encode_ssio(ctx: ScanContext) -> bool:
    current = ctx.current
    if not ctx.string_at(current + 1, 4, "SION"):
        return False

    # 'abscission'
    if ctx.string_at(current - 2, 2, "CI"):
        ctx.add("J")
    # 'mission'
    elif ctx.is_vowel_at(current - 1):
        ctx.add("X")

    ctx.advance_counter(4, 2)
    return True


def _encode_ss(ctx: ScanContext) -> bool:
    """'russian', 'pressure', 'hessian', 'assurance'"""
    current = ctx.current
    if ctx.string_at(current - 1, 5, "USSIA", "ESSUR", "ISSUR", "ISSUE") or ctx.string_at(
        current - 1, 6, "ESSIAN", "ASSURE", "ASSURA", "ISSUAB", "ISSUAN", "ASSIUS"
    ):
        ctx.add("X")
        ctx.advance_counter(3, 2)
        return True

    return False


def _encode_sia(ctx: ScanContext) -> bool:
    current = ctx.current

    # 'controversial'; 'fuchsia' with the 'CH' silent
    if ctx.string_at(current - 2, 5, "CHSIA") or ctx.string_at(current - 1, 5, "RSIAL"):
        ctx.add("X")
        ctx.advance_counter(3, 1)
        return True

    # Names generally get 'X' where terms like 'aphasia' get 'J'
    if (
        (
            ctx.string_at(0, 6, "ALESIA", "ALYSIA", "ALISIA", "STASIA")
            and current == 3
            and not ctx.string_at(0, 9, "ANASTASIA")
        )
        or ctx.string_at(current - 5, 9, "DIONYSIAN")
        or ctx.string_at(current - 5, 8, "THERESIA")
    ):
        ctx.add("X", "S")
        ctx.advance_counter(3, 1)
        return True

    if (
        (ctx.string_at(current, 3, "SIA") and current + 2 == ctx.last)
        or (ctx.string_at(current, 4, "SIAN") and current + 3 == ctx.last)
        or ctx.string_at(current - 5, 9, "AMBROSIAL")
    ):
        # Not compounds built on names, or French or Greek words
        if (ctx.is_vowel_at(current - 1) or ctx.string_at(current - 1, 1, "R")) and not (
            ctx.string_at(0, 5, "JAMES", "NICOS", "PEGAS", "PEPYS")
            or ctx.string_at(0, 6, "HOBBES", "HOLMES", "JAQUES", "KEYNES")
            or ctx.string_at(0, 7, "MALTHUS", "HOMOOUS")
            or ctx.string_at(0, 8, "MAGLEMOS", "HOMOIOUS")
            or ctx.string_at(0, 9, "LEVALLOIS", "TARDENOIS")
            or ctx.string_at(current - 4, 5, "ALGES")
        ):
            ctx.add("J")
        else:
            ctx.add("S")

        ctx.advance_counter(2, 1)
        return True

    return False


def _encode_sio(ctx: ScanContext) -> bool:
    current = ctx.current

    # Irish name
    if ctx.string_at(0, 7, "SIOBHAN"):
        ctx.add("X")
        ctx.advance_counter(3, 1)
        return True

    if ctx.string_at(current + 1, 3, "ION"):
        # 'vision', 'version' but 'declension'
        if ctx.is_vowel_at(current - 1) or ctx.string_at(current - 2, 2, "ER", "UR"):
            ctx.add("J")
        else:
            ctx.add("X")

        ctx.advance_counter(3, 1)
        return True

    return False


def _encode_anglicisations(ctx: ScanContext) -> bool:
    """
    German spellings and their anglicised forms.

    The alternate key carries the German 'X' so 'smith' meets 'schmidt'
    and 'snider' meets 'schneider'; Slavic "-SZ-" is treated the same way.
    """
    current = ctx.current
    if (current == 0 and ctx.string_at(current + 1, 1, "M", "N", "L")) or ctx.string_at(
        current + 1, 1, "Z"
    ):
        ctx.add("S", "X")

        if ctx.string_at(current + 1, 1, "Z"):
            ctx.current += 2
        else:
            ctx.current += 1
        return True

    return False


def _encode_sc(ctx: ScanContext) -> bool:
    current = ctx.current
    if not ctx.string_at(current, 2, "SC"):
        return False

    if ctx.string_at(current - 2, 8, "VISCOUNT"):
        ctx.current += 1
        return True

    # "-SC<front vowel>-"
    if ctx.string_at(current + 2, 1, "I", "E", "Y"):
        # 'conscious', 'prosciutto', 'omniscient', 'fascism'
        if (
            ctx.string_at(current + 2, 4, "IOUS")
            or ctx.string_at(current + 2, 3, "IUT")
            or ctx.string_at(current - 4, 9, "OMNISCIEN")
            or ctx.string_at(current - 3, 8, "CONSCIEN", "CRESCEND", "CONSCION")
            or ctx.string_at(current - 2, 6, "FASCIS")
        ):
            ctx.add("X")
        elif (
            ctx.string_at(current, 7, "SCEPTIC", "SCEPSIS")
            or ctx.string_at(current, 5, "SCIVV", "SCIRO")
            # as commonly said in the U.S.
            or ctx.string_at(current, 6, "SCIPIO")
            or ctx.string_at(current - 2, 10, "PISCITELLI")
        ):
            ctx.add("SK")
        else:
            ctx.add("S")
        ctx.current += 2
        return True

    ctx.add("SK")
    ctx.current += 2
    return True


def _encode_sea_sui_sier(ctx: ScanContext) -> bool:
    """'nausea' alone, 'casuistry', 'frasier', 'hoosier'"""
    current = ctx.current
    if (
        (ctx.string_at(current - 3, 6, "NAUSEA") and current + 2 == ctx.last)
        or ctx.string_at(current - 2, 5, "CASUI")
        or (
            ctx.string_at(current - 1, 5, "OSIER", "ASIER")
            and not (
                ctx.string_at(0, 6, "EASIER")
                or ctx.string_at(0, 5, "OSIER")
                or ctx.string_at(current - 2, 6, "ROSIER", "MOSIER")
            )
        )
    ):
        ctx.add("J", "X")
        ctx.advance_counter(3, 1)
        return True

    return False


def _encode_sea(ctx: ScanContext) -> bool:
    """'sean', 'nauseous' (but not 'nauseate')"""
    current = ctx.current
    if (ctx.string_at(0, 4, "SEAN") and current + 3 == ctx.last) or (
        ctx.string_at(current - 3, 6, "NAUSEO") and not ctx.string_at(current - 3, 7, "NAUSEAT")
    ):
        ctx.add("X")
        ctx.advance_counter(3, 1)
        return True

    return False
