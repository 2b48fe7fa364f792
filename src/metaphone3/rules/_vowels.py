"""
Vowel rules: A, E, I, O, U, Y and their accented forms.

Initial vowels always encode to 'A'. Non-initial vowels are encoded
only when vowel encoding is enabled, and then a large part of the work
is deciding when an 'E' is silent ("grapes", "wholeness", "firestone")
and when it is pronounced after all ("herakles", "robles", "karate").
"""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = ["encode_vowels"]


def encode_vowels(ctx: ScanContext) -> None:
    """Encode a vowel (or vowel run) at the cursor."""
    if ctx.current == 0:
        # All initial vowels map to 'A'
        ctx.add("A")
    elif ctx.encode_vowels:
        if ctx.char_at(ctx.current) != "E":
            if _skip_silent_ue(ctx):
                return

            if _o_silent(ctx):
                ctx.current += 1
                return

            # Encode all vowels and diphthongs to the same value
            ctx.add("A")
        else:
            _encode_e_pronounced(ctx)

    if not (
        not ctx.is_vowel_at(ctx.current - 2)
        and ctx.string_at(ctx.current - 1, 4, "LEWA", "LEWO", "LEWI")
    ):
        ctx.current = ctx.skip_vowels(ctx.current)
    else:
        ctx.current += 1


def _encode_e_pronounced(ctx: ScanContext) -> None:
    """
    Encode non-initial 'E' where it is pronounced.

    Only reached with vowel encoding turned on.
    """
    # Two pronunciations: 'agape', 'lame', 'resume'
    if (
        (ctx.string_at(0, 4, "LAME", "SAKE", "PATE") and ctx.length == 4)
        or (ctx.string_at(0, 5, "AGAPE") and ctx.length == 5)
        or (ctx.current == 5 and ctx.string_at(0, 6, "RESUME"))
    ):
        ctx.add("", "A")
        return

    # "inge" => 'INGA', 'INJ'
    if ctx.string_at(0, 4, "INGE") and ctx.length == 4:
        ctx.add("A", "")
        return

    # Two pronunciations of the '-D'
    if ctx.current == 5 and ctx.string_at(0, 7, "BLESSED", "LEARNED"):
        ctx.add_exact_approx_alt("D", "AD", "T", "AT")
        ctx.current += 2
        return

    if (
        not _e_silent(ctx) and not ctx.flag_al_inversion and not _silent_internal_e(ctx)
    ) or _e_pronounced_exceptions(ctx):
        ctx.add("A")

    # The vowel in question has now been visited
    ctx.flag_al_inversion = False


def _o_silent(ctx: ScanContext) -> bool:
    """'O' of "iron" at the beginning or end of a word, but not "irony"."""
    if ctx.char_at(ctx.current) == "O" and ctx.string_at(ctx.current - 2, 4, "IRON"):
        if (
            ctx.string_at(0, 4, "IRON")
            or (ctx.string_at(ctx.current - 2, 4, "IRON") and ctx.last == ctx.current + 1)
        ) and not ctx.string_at(ctx.current - 2, 6, "IRONIC"):
            return True

    return False


def _e_silent(ctx: ScanContext) -> bool:
    """Non-initial 'E' that is never pronounced."""
    if _e_pronounced_at_end(ctx):
        return False

    current = ctx.current
    # Silent when last letter, and before plural 's' or past tense 'd'
    # ('grapes', 'banished' => PNXT), but not 'nested', 'rises', 'pieces'
    if (
        current == ctx.last
        or (
            ctx.string_at(ctx.last, 1, "S", "D")
            and current > 1
            and current + 1 == ctx.last
            and not (
                ctx.string_at(current - 1, 3, "TED", "SES", "CES")
                or ctx.string_at(0, 9, "ANTIPODES", "ANOPHELES")
                or ctx.string_at(0, 8, "MOHAMMED", "MUHAMMED", "MOUHAMED")
                or ctx.string_at(0, 7, "MOHAMED")
                or ctx.string_at(0, 6, "NORRED", "MEDVED", "MERCED", "ALLRED", "KHALED",
                                 "RASHED", "MASJED")
                or ctx.string_at(0, 5, "JARED", "AHMED", "HAMED", "JAVED")
                or ctx.string_at(0, 4, "ABED", "IMED")
            )
        )
        # 'wholeness', 'boneless', 'barely'
        or (ctx.string_at(current + 1, 4, "NESS", "LESS") and current + 4 == ctx.last)
        or (
            ctx.string_at(current + 1, 2, "LY")
            and current + 2 == ctx.last
            and not ctx.string_at(0, 6, "CICELY")
        )
    ):
        return True

    return False


def _e_pronounced_at_end(ctx: ScanContext) -> bool:
    """
    Final 'E' that is pronounced.

    Mostly Greek, Spanish, Japanese, Italian and French words that would
    carry an acute accent, plus German names in -KE and short words.
    """
    if ctx.current != ctx.last:
        return False

    length = ctx.length
    return (
        ctx.string_at(ctx.current - 6, 7, "STROPHE")
        # A vowel before the 'E' will already have been eaten;
        # consonant + 'E' needs the 'E' pronounced
        or length == 2
        or (length == 3 and not ctx.is_vowel_at(0))
        # German name endings with the 'e' pronounced
        or (
            ctx.string_at(ctx.last - 2, 3, "BKE", "DKE", "FKE", "KKE", "LKE", "NKE",
                          "MKE", "PKE", "TKE", "VKE", "ZKE")
            and not ctx.string_at(0, 5, "FINKE", "FUNKE")
            and not ctx.string_at(0, 6, "FRANKE")
        )
        or ctx.string_at(ctx.last - 4, 5, "SCHKE")
        or (
            ctx.string_at(0, 4, "ACME", "NIKE", "CAFE", "RENE", "LUPE", "JOSE", "ESME")
            and length == 4
        )
        or (
            ctx.string_at(0, 5, "LETHE", "CADRE", "TILDE", "SIGNE", "POSSE", "LATTE",
                          "ANIME", "DOLCE", "CROCE", "ADOBE", "OUTRE", "JESSE", "JAIME",
                          "JAFFE", "BENGE", "RUNGE", "CHILE", "DESME", "CONDE", "URIBE",
                          "LIBRE", "ANDRE")
            and length == 5
        )
        or (
            ctx.string_at(0, 6, "HECATE", "PSYCHE", "DAPHNE", "PENSKE", "CLICHE", "RECIPE",
                          "TAMALE", "SESAME", "SIMILE", "FINALE", "KARATE", "RENATE",
                          "SHANTE", "OBERLE", "COYOTE", "KRESGE", "STONGE", "STANGE",
                          "SWAYZE", "FUENTE", "SALOME", "URRIBE")
            and length == 6
        )
        or (
            ctx.string_at(0, 7, "ECHIDNE", "ARIADNE", "MEINEKE", "PORSCHE", "ANEMONE",
                          "EPITOME", "SYNCOPE", "SOUFFLE", "ATTACHE", "MACHETE", "KARAOKE",
                          "BUKKAKE", "VICENTE", "ELLERBE", "VERSACE")
            and length == 7
        )
        or (
            ctx.string_at(0, 8, "PENELOPE", "CALLIOPE", "CHIPOTLE", "ANTIGONE", "KAMIKAZE",
                          "EURIDICE", "YOSEMITE", "FERRANTE")
            and length == 8
        )
        or (ctx.string_at(0, 9, "HYPERBOLE", "GUACAMOLE", "XANTHIPPE") and length == 9)
        or (ctx.string_at(0, 10, "SYNECDOCHE") and length == 10)
    )


def _silent_internal_e(ctx: ScanContext) -> bool:
    """Internal silent 'E', e.g. "roseman", "firestone"; 'olesen' but not 'olen'."""
    return (
        (
            ctx.string_at(0, 3, "OLE")
            and _e_silent_suffix(ctx, 3)
            and not _e_pronouncing_suffix(ctx, 3)
        )
        or (
            ctx.string_at(0, 4, "BARE", "FIRE", "FORE", "GATE", "HAGE", "HAVE", "HAZE",
                          "HOLE", "CAPE", "HUSE", "LACE", "LINE", "LIVE", "LOVE", "MORE",
                          "MOSE", "MORE", "NICE", "RAKE", "ROBE", "ROSE", "SISE", "SIZE",
                          "WARE", "WAKE", "WISE", "WINE")
            and _e_silent_suffix(ctx, 4)
            and not _e_pronouncing_suffix(ctx, 4)
        )
        or (
            ctx.string_at(0, 5, "BLAKE", "BRAKE", "BRINE", "CARLE", "CLEVE", "DUNNE",
                          "HEDGE", "HOUSE", "JEFFE", "LUNCE", "STOKE", "STONE", "THORE",
                          "WEDGE", "WHITE")
            and _e_silent_suffix(ctx, 5)
            and not _e_pronouncing_suffix(ctx, 5)
        )
        or (
            ctx.string_at(0, 6, "BRIDGE", "CHEESE")
            and _e_silent_suffix(ctx, 6)
            and not _e_pronouncing_suffix(ctx, 6)
        )
        or ctx.string_at(0, 7, "CHARLES")
    )


def _e_silent_suffix(ctx: ScanContext, at: int) -> bool:
    """Conditions for the 'E' before position ``at`` not to be pronounced."""
    return (
        ctx.current == at - 1
        and ctx.length > at + 1
        and (
            ctx.is_vowel_at(at + 1)
            or (ctx.string_at(at, 2, "ST", "SL") and ctx.length > at + 2)
        )
    )


def _e_pronouncing_suffix(ctx: ScanContext, at: int) -> bool:
    """Endings at ``at`` that cause the preceding 'E' to be pronounced."""
    length = ctx.length

    # 'bridgewood': the other vowels get eaten, so one goes in here
    if length == at + 4 and ctx.string_at(at, 4, "WOOD"):
        return True

    if length == at + 5 and ctx.string_at(at, 5, "WATER", "WORTH"):
        return True

    # 'bridgette'
    if length == at + 3 and ctx.string_at(at, 3, "TTE", "LIA", "NOW", "ROS", "RAS"):
        return True

    # 'olena'
    if length == at + 2 and ctx.string_at(at, 2, "TA", "TT", "NA", "NO", "NE", "RS",
                                          "RE", "LA", "AU", "RO", "RA"):
        return True

    # 'bridget'
    if length == at + 1 and ctx.string_at(at, 1, "T", "R"):
        return True

    return False


def _e_pronounced_exceptions(ctx: ScanContext) -> bool:
    """
    'E' pronounced where it usually would not be.

    Greek names ("herakles"), Hispanic names ("robles"), and spots
    where the 'LE' transposition does not apply so the vowel is
    encoded here instead.
    """
    current = ctx.current
    return (
        (
            current + 1 == ctx.last
            and (
                ctx.string_at(current - 3, 5, "OCLES", "ACLES", "AKLES")
                or ctx.string_at(0, 4, "INES")
                or ctx.string_at(0, 5, "LOPES", "ESTES", "GOMES", "NUNES", "ALVES", "ICKES",
                                 "INNES", "PERES", "WAGES", "NEVES", "BENES", "DONES")
                or ctx.string_at(0, 6, "CORTES", "CHAVES", "VALDES", "ROBLES", "TORRES",
                                 "FLORES", "BORGES", "NIEVES", "MONTES", "SOARES", "VALLES",
                                 "GEDDES", "ANDRES", "VIAJES", "CALLES", "FONTES", "HERMES",
                                 "ACEVES", "BATRES", "MATHES")
                or ctx.string_at(0, 7, "DELORES", "MORALES", "DOLORES", "ANGELES", "ROSALES",
                                 "MIRELES", "LINARES", "PERALES", "PAREDES", "BRIONES",
                                 "SANCHES", "CAZARES", "REVELES", "ESTEVES", "ALVARES",
                                 "MATTHES", "SOLARES", "CASARES", "CACERES", "STURGES",
                                 "RAMIRES", "FUNCHES", "BENITES", "FUENTES", "PUENTES",
                                 "TABARES", "HENTGES", "VALORES")
                or ctx.string_at(0, 8, "GONZALES", "MERCEDES", "FAGUNDES", "JOHANNES",
                                 "GONSALES", "BERMUDES", "CESPEDES", "BETANCES", "TERRONES",
                                 "DIOGENES", "CORRALES", "CABRALES", "MARTINES", "GRAJALES")
                or ctx.string_at(0, 9, "CERVANTES", "FERNANDES", "GONCALVES", "BENEVIDES",
                                 "CIFUENTES", "SIFUENTES", "SERVANTES", "HERNANDES",
                                 "BENAVIDES")
                or ctx.string_at(0, 10, "ARCHIMEDES", "CARRIZALES", "MAGALLANES")
            )
        )
        or ctx.string_at(current - 2, 4, "FRED", "DGES", "DRED", "GNES")
        or ctx.string_at(current - 5, 7, "PROBLEM", "RESPLEN")
        or ctx.string_at(current - 4, 6, "REPLEN")
        or ctx.string_at(current - 3, 4, "SPLE")
    )


def _skip_silent_ue(ctx: ScanContext) -> bool:
    """Skip a silent "-UE" ("league", "vague"), except for the listed words."""
    current = ctx.current
    if (
        ctx.string_at(current - 1, 3, "QUE", "GUE")
        and not ctx.string_at(0, 8, "BARBEQUE", "PALENQUE", "APPLIQUE")
        # '-que' cases, usually French missing the acute accent
        and not ctx.string_at(0, 6, "RISQUE")
        and not ctx.string_at(current - 3, 5, "ARGUE", "SEGUE")
        and not ctx.string_at(0, 7, "PIROGUE", "ENRIQUE")
        and not ctx.string_at(0, 10, "COMMUNIQUE")
        and current > 1
        and (current + 1 == ctx.last or ctx.string_at(0, 7, "JACQUES"))
    ):
        ctx.current = ctx.skip_vowels(current)
        return True

    return False
