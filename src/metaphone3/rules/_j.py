"""Rules for 'J'."""

from __future__ import annotations

from metaphone3._context import ScanContext
from metaphone3.rules._names import names_beginning_with_j_that_get_alt_y

__all__ = ["encode_j"]


def encode_j(ctx: ScanContext) -> None:
    if _encode_spanish_j(ctx) or _encode_spanish_oj_uj(ctx):
        return

    _encode_other_j(ctx)


def _encode_spanish_j(ctx: ScanContext) -> bool:
    current = ctx.current
    last = ctx.last

    # Obviously Spanish: 'jose', 'san jacinto'
    if (
        (
            ctx.string_at(current + 1, 3, "UAN", "ACI", "ALI", "EFE", "ICA", "IME", "OAQ", "UAR")
            and not ctx.string_at(current, 8, "JIMERSON", "JIMERSEN")
        )
        or (ctx.string_at(current + 1, 3, "OSE") and current + 3 == last)
        or ctx.string_at(current + 1, 4, "EREZ", "UNTA", "AIME", "AVIE", "AVIA")
        or ctx.string_at(current + 1, 6, "IMINEZ", "ARAMIL")
        or (current + 2 == last and ctx.string_at(current - 2, 5, "MEJIA"))
        or ctx.string_at(current - 2, 5, "TEJED", "TEJAD", "LUJAN", "FAJAR", "BEJAR", "BOJOR",
                         "CAJIG", "DEJAS", "DUJAR", "DUJAN", "MIJAR", "MEJOR", "NAJAR",
                         "NOJOS", "RAJED", "RIJAL", "REJON", "TEJAN", "UIJAN")
        or ctx.string_at(current - 3, 8, "ALEJANDR", "GUAJARDO", "TRUJILLO")
        or (ctx.string_at(current - 2, 5, "RAJAS") and current > 2)
        or (ctx.string_at(current - 2, 5, "MEJIA") and not ctx.string_at(current - 2, 6, "MEJIAN"))
        or ctx.string_at(current - 1, 5, "OJEDA")
        or ctx.string_at(current - 3, 5, "LEIJA", "MINJA")
        or ctx.string_at(current - 3, 6, "VIAJES", "GRAJAL")
        or ctx.string_at(current, 8, "JAUREGUI")
        or ctx.string_at(current - 4, 8, "HINOJOSA")
        or ctx.string_at(0, 4, "SAN ")
        or (
            current + 1 == last
            and ctx.char_at(current + 1) == "O"
            and not (
                ctx.string_at(0, 4, "TOJO")
                or ctx.string_at(0, 5, "BANJO")
                or ctx.string_at(0, 6, "MARYJO")
            )
        )
    ):
        # Americans say 'juan', 'marijuana' and 'tijuana' without
        # the 'H', so treat the 'J' as a vowel there
        if not ctx.string_at(current, 4, "JUAN", "JOAQ"):
            ctx.add("H")
        elif current == 0:
            ctx.add("A")
        ctx.advance_counter(2, 1)
        return True

    # 'jorge' gets 'HRH' as alternate; also 'julio', 'jesus'
    if ctx.string_at(current + 1, 4, "ORGE", "ULIO", "ESUS") and not ctx.string_at(0, 6, "JORGEN"):
        if ctx.string_at(current + 1, 4, "ORGE"):
            if ctx.encode_vowels:
                ctx.add("JARJ", "HARHA")
            else:
                ctx.add("JRJ", "HRH")
            ctx.advance_counter(5, 5)
            return True

        ctx.add("J", "H")
        ctx.advance_counter(2, 1)
        return True

    return False


def _encode_german_j(ctx: ScanContext) -> bool:
    current = ctx.current
    if (
        ctx.string_at(current + 1, 2, "AH")
        or (ctx.string_at(current + 1, 5, "OHANN") and current + 5 == ctx.last)
        or (ctx.string_at(current + 1, 3, "UNG") and not ctx.string_at(current + 1, 4, "UNGL"))
        or ctx.string_at(current + 1, 3, "UGO")
    ):
        ctx.add("A")
        ctx.advance_counter(2, 1)
        return True

    return False


def _encode_spanish_oj_uj(ctx: ScanContext) -> bool:
    """'jojoba', 'jujuy'"""
    if ctx.string_at(ctx.current + 1, 5, "OJOBA", "UJUY "):
        if ctx.encode_vowels:
            ctx.add("HAH")
        else:
            ctx.add("HH")
        ctx.advance_counter(4, 3)
        return True

    return False


def _encode_j_to_j(ctx: ScanContext) -> bool:
    """Initial 'J'. Returns ``True`` only when no vowel follows."""
    if ctx.is_vowel_at(ctx.current + 1):
        if ctx.current == 0 and names_beginning_with_j_that_get_alt_y(ctx):
            # 'Y' is a vowel, so the alternate is a vowel placeholder
            if ctx.encode_vowels:
                ctx.add("JA", "A")
            else:
                ctx.add("J", "A")
        elif ctx.encode_vowels:
            ctx.add("JA")
        else:
            ctx.add("J")

        ctx.current = ctx.skip_vowels(ctx.current + 1)
        return False

    ctx.add("J")
    ctx.current += 1
    return True


def _encode_spanish_j_2(ctx: ScanContext) -> bool:
    """Spanish 'J' toward the end: 'brujo', 'badajoz'."""
    current = ctx.current
    last = ctx.last
    if (
        (
            current - 2 == 0
            and ctx.string_at(current - 2, 4, "BOJA", "BAJA", "BEJA", "BOJO", "MOJA", "MOJI",
                              "MEJI")
        )
        or (
            current - 3 == 0
            and ctx.string_at(current - 3, 5, "FRIJO", "BRUJO", "BRUJA", "GRAJE", "GRIJA",
                              "LEIJA", "QUIJA")
        )
        or (current + 3 == last and ctx.string_at(current - 1, 5, "AJARA"))
        or (
            current + 2 == last
            and ctx.string_at(current - 1, 4, "AJOS", "EJOS", "OJAS", "OJOS", "UJON", "AJOZ",
                              "AJAL", "UJAR", "EJON", "EJAN")
        )
        or (
            current + 1 == last
            and ctx.string_at(current - 1, 3, "OJA", "EJA")
            and not ctx.string_at(0, 4, "DEJA")
        )
    ):
        ctx.add("H")
        ctx.advance_counter(2, 1)
        return True

    return False


def _encode_j_as_vowel(ctx: ScanContext) -> bool:
    current = ctx.current
    if ctx.string_at(current, 5, "JEWSK"):
        ctx.add("J", "")
        return True

    # Dutch, Scandinavian and Eastern European spellings: 'stijl', 'sejm', 'fjord'
    return (
        (
            ctx.string_at(current + 1, 1, "L", "T", "K", "S", "N", "M")
            # not words from Hindi and Arabic
            and not ctx.string_at(current + 2, 1, "A")
        )
        or ctx.string_at(0, 9, "HALLELUJA", "LJUBLJANA")
        or ctx.string_at(0, 4, "LJUB", "BJOR")
        or ctx.string_at(0, 5, "HAJEK")
        or ctx.string_at(0, 3, "WOJ")
        or ctx.string_at(0, 2, "FJ")
        # 'rekjavik', 'blagojevic'
        or ctx.string_at(current, 5, "JAVIK", "JEVIC")
        or (current + 1 == ctx.last and ctx.string_at(0, 5, "SONJA", "TANJA", "TONJA"))
    )


def _encode_other_j(ctx: ScanContext) -> None:
    if ctx.current == 0:
        if not _encode_german_j(ctx):
            _encode_j_to_j(ctx)
        return

    if _encode_spanish_j_2(ctx):
        return
    if not _encode_j_as_vowel(ctx):
        ctx.add("J")

    # 'hajj'
    if ctx.char_at(ctx.current + 1) == "J":
        ctx.current += 2
    else:
        ctx.current += 1
