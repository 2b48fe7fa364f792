"""
Name lists that earn an alternate pronunciation.

Each list is grouped by prefix length and matched against the start of
the word, so "SWANSON" also covers "SWANSONS".
"""

from __future__ import annotations

from metaphone3._context import ScanContext

__all__ = [
    "germanic_or_slavic_name_beginning_with_w",
    "names_beginning_with_j_that_get_alt_y",
    "names_beginning_with_sw_that_get_alt_sv",
    "names_beginning_with_sw_that_get_alt_xv",
]

# Swedish, Dutch and Slavic names spelled "SW-" but said "SV-"
SW_ALT_SV = {
    7: ("SWANSON", "SWENSON", "SWINSON", "SWENSEN", "SWOBODA"),
    9: ("SWIDERSKI", "SWARTHOUT"),
    10: ("SWEARENGIN",),
}

# German names spelled "SW-" for an original "SCHW-"
SW_ALT_XV = {
    5: ("SWART",),
    6: ("SWARTZ", "SWARTS", "SWIGER"),
    7: ("SWITZER", "SWANGER", "SWIGERT", "SWIGART", "SWIHART"),
    8: ("SWEITZER", "SWATZELL", "SWINDLER"),
    9: ("SWINEHART",),
    10: ("SWEARINGEN",),
}

# Germanic and Slavic names whose 'W' may be said 'V'
GERMANIC_OR_SLAVIC_W = {
    3: ("WEE", "WIX", "WAX"),
    4: (
        "WOLF", "WEIS", "WAHL", "WALZ", "WEIL", "WERT", "WINE", "WILK", "WALT", "WOLL",
        "WADA", "WULF", "WEHR", "WURM", "WYSE", "WENZ", "WIRT", "WOLK", "WEIN", "WYSS",
        "WASS", "WANN", "WINT", "WINK", "WILE", "WIKE", "WIER", "WELK", "WISE",
    ),
    5: (
        "WIRTH", "WIESE", "WITTE", "WENTZ", "WOLFF", "WENDT", "WERTZ", "WILKE", "WALTZ",
        "WEISE", "WOOLF", "WERTH", "WEESE", "WURTH", "WINES", "WARGO", "WIMER", "WISER",
        "WAGER", "WILLE", "WILDS", "WAGAR", "WERTS", "WITTY", "WIENS", "WIEBE", "WIRTZ",
        "WYMER", "WULFF", "WIBLE", "WINER", "WIEST", "WALKO", "WALLA", "WEBRE", "WEYER",
        "WYBLE", "WOMAC", "WILTZ", "WURST", "WOLAK", "WELKE", "WEDEL", "WEIST", "WYGAN",
        "WUEST", "WEISZ", "WALCK", "WEITZ", "WYDRA", "WANDA", "WILMA", "WEBER",
    ),
    6: (
        "WETZEL", "WEINER", "WENZEL", "WESTER", "WALLEN", "WENGER", "WALLIN", "WEILER",
        "WIMMER", "WEIMER", "WYRICK", "WEGNER", "WINNER", "WESSEL", "WILKIE", "WEIGEL",
        "WOJCIK", "WENDEL", "WITTER", "WIENER", "WEISER", "WEXLER", "WACKER", "WISNER",
        "WITMER", "WINKLE", "WELTER", "WIDMER", "WITTEN", "WINDLE", "WASHER", "WOLTER",
        "WILKEY", "WIDNER", "WARMAN", "WEYANT", "WEIBEL", "WANNER", "WILKEN", "WILTSE",
        "WARNKE", "WALSER", "WEIKEL", "WESNER", "WITZEL", "WROBEL", "WAGNON", "WINANS",
        "WENNER", "WOLKEN", "WILNER", "WYSONG", "WYCOFF", "WUNDER", "WINKEL", "WIDMAN",
        "WELSCH", "WEHNER", "WEIGLE", "WETTER", "WUNSCH", "WHITTY", "WAXMAN", "WILKER",
        "WILHAM", "WITTIG", "WITMAN", "WESTRA", "WEHRLE", "WASSER", "WILLER", "WEGMAN",
        "WARFEL", "WYNTER", "WERNER", "WAGNER", "WISSER",
    ),
    7: (
        "WISEMAN", "WINKLER", "WILHELM", "WELLMAN", "WAMPLER", "WACHTER", "WALTHER",
        "WYCKOFF", "WEIDNER", "WOZNIAK", "WEILAND", "WILFONG", "WIEGAND", "WILCHER",
        "WIELAND", "WILDMAN", "WALDMAN", "WORTMAN", "WYSOCKI", "WEIDMAN", "WITTMAN",
        "WIDENER", "WOLFSON", "WENDELL", "WEITZEL", "WILLMAN", "WALDRUP", "WALTMAN",
        "WALCZAK", "WEIGAND", "WESSELS", "WIDEMAN", "WOLTERS", "WIREMAN", "WILHOIT",
        "WEGENER", "WOTRING", "WINGERT", "WIESNER", "WAYMIRE", "WHETZEL", "WENTZEL",
        "WINEGAR", "WESTMAN", "WYNKOOP", "WALLICK", "WURSTER", "WINBUSH", "WILBERT",
        "WALLACH", "WEISSER", "WEISNER", "WINDERS", "WILLMON", "WILLEMS", "WIERSMA",
        "WACHTEL", "WARNICK", "WEIDLER", "WALTRIP", "WHETSEL", "WHELESS", "WELCHER",
        "WALBORN", "WILLSEY", "WEINMAN", "WAGAMAN", "WOMMACK", "WINGLER", "WINKLES",
        "WIEDMAN", "WHITNER", "WOLFRAM", "WARLICK", "WEEDMAN", "WHISMAN", "WINLAND",
        "WEESNER", "WARTHEN", "WETZLER", "WENDLER", "WALLNER", "WOLBERT", "WITTMER",
        "WISHART", "WILLIAM",
    ),
    8: (
        "WESTPHAL", "WICKLUND", "WEISSMAN", "WESTLUND", "WOLFGANG", "WILLHITE", "WEISBERG",
        "WALRAVEN", "WOLFGRAM", "WILHOITE", "WECHSLER", "WENDLING", "WESTBERG", "WENDLAND",
        "WININGER", "WHISNANT", "WESTRICK", "WESTLING", "WESTBURY", "WEITZMAN", "WEHMEYER",
        "WEINMANN", "WISNESKI", "WHELCHEL", "WEISHAAR", "WAGGENER", "WALDROUP", "WESTHOFF",
        "WIEDEMAN", "WASINGER", "WINBORNE",
    ),
    9: (
        "WHISENANT", "WEINSTEIN", "WESTERMAN", "WASSERMAN", "WITKOWSKI", "WEINTRAUB",
        "WINKELMAN", "WINKFIELD", "WANAMAKER", "WIECZOREK", "WIECHMANN", "WOJTOWICZ",
        "WALKOWIAK", "WEINSTOCK", "WILLEFORD", "WARKENTIN", "WEISINGER", "WINKLEMAN",
        "WILHEMINA",
    ),
    10: (
        "WISNIEWSKI", "WUNDERLICH", "WHISENHUNT", "WEINBERGER", "WROBLEWSKI", "WAGUESPACK",
        "WEISGERBER", "WESTERVELT", "WESTERLUND", "WASILEWSKI", "WILDERMUTH", "WESTENDORF",
        "WESOLOWSKI", "WEINGARTEN", "WINEBARGER", "WESTERBERG", "WANNAMAKER", "WEISSINGER",
    ),
    11: ("WALDSCHMIDT", "WEINGARTNER", "WINEBRENNER"),
    12: ("WOLFENBARGER",),
    13: ("WOJCIECHOWSKI",),
}

# 'J' names that should also match a 'Y' sound: 'John' ~ 'Ian', 'Joseph' ~ 'Yusef'
J_ALT_Y = {
    3: ("JAN", "JON", "JIN", "JEN"),
    4: (
        "JUHL", "JULY", "JOEL", "JOHN", "JOSH", "JUDE", "JUNE", "JONI", "JULI", "JENA",
        "JUNG", "JINA", "JANA", "JENI", "JANN", "JONA", "JENE", "JULE", "JANI", "JONG",
        "JEAN", "JONE", "JARA", "JUST", "JOST", "JAHN", "JACO", "JANG",
    ),
    5: (
        "JOANN", "JANEY", "JANAE", "JOANA", "JUTTA", "JULEE", "JANAY", "JANEE", "JETTA",
        "JOHNA", "JOANE", "JAYNA", "JANES", "JONAS", "JONIE", "JUSTA", "JUNIE", "JUNKO",
        "JENAE", "JULIO", "JINNY", "JOHNS", "JACOB", "JETER", "JAFFE", "JESKE", "JANKE",
        "JAGER", "JANIK", "JANDA", "JOSHI", "JULES", "JANTZ", "JEANS", "JUDAH", "JANUS",
        "JENNY", "JENEE", "JONAH", "JOSUE", "JOSEF", "JULIE", "JULIA", "JANIE", "JANIS",
        "JENNA", "JANNA", "JEANA", "JENNI", "JEANE", "JONNA",
    ),
    6: (
        "JORDAN", "JORDON", "JOSEPH", "JOSHUA", "JOSIAH", "JOSPEH", "JUDSON", "JULIAN",
        "JULIUS", "JUNIOR", "JUDITH", "JOESPH", "JOHNIE", "JOANNE", "JEANNE", "JOANNA",
        "JOSEFA", "JULIET", "JANNIE", "JANELL", "JASMIN", "JANINE", "JOHNNY", "JEANIE",
        "JEANNA", "JOHNNA", "JOELLE", "JOVITA", "JONNIE", "JANEEN", "JANINA", "JOANIE",
        "JAZMIN", "JANENE", "JONELL", "JENELL", "JANETT", "JANETH", "JENINE", "JOELLA",
        "JOEANN", "JOHANA", "JENICE", "JANNET", "JANISE", "JULENE", "JANEAN", "JAIMEE",
        "JOETTE", "JANYCE", "JENEVA", "JACOBS", "JENSEN", "JANSEN", "JAEGER", "JACOBY",
        "JENSON", "JARMAN", "JOSLIN", "JESSEN", "JAHNKE", "JACOBO", "JULIEN", "JEPSON",
        "JANSON", "JACOBI", "JARBOE", "JOHSON", "JANZEN", "JETTON", "JUNKER", "JONSON",
        "JAROSZ", "JENNER", "JAGGER", "JEPSEN", "JORDEN", "JANNEY", "JUHASZ", "JERGEN",
    ),
    7: (
        "JOHNSON", "JOHNNIE", "JASMINE", "JEANNIE", "JOHANNA", "JANELLE", "JANETTE",
        "JULIANA", "JUSTINA", "JOSETTE", "JOELLEN", "JENELLE", "JULIETA", "JULIANN",
        "JULISSA", "JENETTE", "JANETTA", "JOSELYN", "JONELLE", "JESENIA", "JANESSA",
        "JAZMINE", "JEANENE", "JOANNIE", "JADWIGA", "JOLANDA", "JULIANE", "JANUARY",
        "JEANICE", "JANELLA", "JEANETT", "JENNINE", "JOHANNE", "JOHNSIE", "JANIECE",
        "JENNELL", "JAMISON", "JANSSEN", "JOHNSEN", "JARDINE", "JAGGERS", "JURGENS",
        "JOURDAN", "JULIANO", "JOSEPHS", "JHONSON", "JOZWIAK", "JANICKI", "JELINEK",
        "JANSSON", "JOACHIM", "JACOBUS", "JENNING", "JANTZEN",
    ),
    8: (
        "JOSEFINA", "JEANNINE", "JULIANNE", "JULIANNA", "JONATHAN", "JONATHON", "JEANETTE",
        "JANNETTE", "JEANETTA", "JOHNETTA", "JENNEFER", "JULIENNE", "JOSPHINE", "JEANELLE",
        "JOHNETTE", "JULIEANN", "JOSEFINE", "JULIETTA", "JOHNSTON", "JACOBSON", "JACOBSEN",
        "JOHANSEN", "JOHANSON", "JAWORSKI", "JENNETTE", "JELLISON", "JOHANNES", "JASINSKI",
        "JUERGENS", "JARNAGIN", "JEREMIAH", "JEPPESEN", "JARNIGAN", "JANOUSEK",
    ),
    9: (
        "JOHNATHAN", "JOHNATHON", "JORGENSEN", "JEANMARIE", "JOSEPHINA", "JEANNETTE",
        "JOSEPHINE", "JEANNETTA", "JORGENSON", "JANKOWSKI", "JOHNSTONE", "JABLONSKI",
        "JOSEPHSON", "JOHANNSEN", "JURGENSEN", "JIMMERSON", "JOHANSSON",
    ),
    10: ("JAKUBOWSKI",),
}


def _starts_with_any(ctx: ScanContext, table: dict[int, tuple[str, ...]]) -> bool:
    return any(ctx.string_at(0, length, *names) for length, names in table.items())


def names_beginning_with_sw_that_get_alt_sv(ctx: ScanContext) -> bool:
    return _starts_with_any(ctx, SW_ALT_SV)


def names_beginning_with_sw_that_get_alt_xv(ctx: ScanContext) -> bool:
    return _starts_with_any(ctx, SW_ALT_XV)


def germanic_or_slavic_name_beginning_with_w(ctx: ScanContext) -> bool:
    return _starts_with_any(ctx, GERMANIC_OR_SLAVIC_W)


def names_beginning_with_j_that_get_alt_y(ctx: ScanContext) -> bool:
    return _starts_with_any(ctx, J_ALT_Y)
