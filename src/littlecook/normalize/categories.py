"""Keyword-based grocery categories for ingredient names."""

from littlecook.normalize.text import fold_text

FALLBACK_CATEGORY = "autres"

# Checked in order; the first category with a keyword contained in the name wins.
CATEGORY_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "légumes",
        (
            "tomate",
            "oignon",
            "carotte",
            "poivron",
            "courgette",
            "aubergine",
            "pomme de terre",
            "pommes de terre",
            "patate",
            "champignon",
            "épinards",
            "salade",
            "laitue",
            "concombre",
            "radis",
            "navet",
            "chou",
            "brocoli",
            "chou-fleur",
            "haricot",
            "petit pois",
            "petits pois",
            "artichaut",
            "asperge",
        ),
    ),
    (
        "fruits",
        (
            "pomme",
            "poire",
            "banane",
            "orange",
            "citron",
            "lime",
            "fraise",
            "cerise",
            "pêche",
            "abricot",
            "prune",
            "raisin",
            "melon",
            "pastèque",
            "ananas",
            "kiwi",
            "mangue",
            "avocat",
        ),
    ),
    (
        "viandes",
        (
            "bœuf",
            "porc",
            "agneau",
            "veau",
            "poulet",
            "poule",
            "canard",
            "dinde",
            "lapin",
            "jambon",
            "lard",
            "bacon",
            "saucisse",
            "merguez",
            "chorizo",
            "steak",
            "escalope",
            "côte",
            "rôti",
        ),
    ),
    (
        "poissons",
        (
            "saumon",
            "thon",
            "cabillaud",
            "morue",
            "sole",
            "truite",
            "bar",
            "dorade",
            "sardine",
            "anchois",
            "maquereau",
            "hareng",
            "crevette",
            "moule",
            "huître",
            "crabe",
            "homard",
            "calamar",
        ),
    ),
    (
        "produits laitiers",
        (
            "lait",
            "crème",
            "beurre",
            "fromage",
            "yaourt",
            "yogourt",
            "mascarpone",
            "ricotta",
            "mozzarella",
            "gruyère",
            "emmental",
            "parmesan",
            "chèvre",
            "roquefort",
            "camembert",
            "brie",
        ),
    ),
    (
        "céréales",
        (
            "farine",
            "riz",
            "pâtes",
            "spaghetti",
            "macaroni",
            "quinoa",
            "boulgour",
            "semoule",
            "avoine",
            "orge",
            "blé",
            "pain",
            "biscottes",
            "céréales",
        ),
    ),
    (
        "épices",
        (
            "sel",
            "poivre",
            "paprika",
            "cumin",
            "curry",
            "thym",
            "romarin",
            "basilic",
            "persil",
            "ciboulette",
            "origan",
            "laurier",
            "cannelle",
            "vanille",
            "gingembre",
            "ail",
            "échalote",
            "moutarde",
        ),
    ),
    (
        "condiments",
        (
            "huile",
            "vinaigre",
            "mayonnaise",
            "ketchup",
            "sauce soja",
            "tabasco",
            "worcestershire",
        ),
    ),
    (
        FALLBACK_CATEGORY,
        (
            "œuf",
            "sucre",
            "miel",
            "levure",
            "bicarbonate",
            "gélatine",
            "chocolat",
            "cacao",
            "café",
            "thé",
            "eau",
        ),
    ),
)

_FOLDED_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = tuple(
    (category, tuple(fold_text(keyword) for keyword in keywords))
    for category, keywords in CATEGORY_KEYWORDS
)


def categorize(name: str) -> str:
    """
    Classify an ingredient name into a grocery category.

    Matching is a case- and diacritic-insensitive substring test, so
    "Crème fraîche" lands in "produits laitiers" and "lardons" in "viandes".
    Names matching nothing fall back to "autres".
    """
    folded = fold_text(name)
    if not folded:
        return FALLBACK_CATEGORY

    for category, keywords in _FOLDED_KEYWORDS:
        if any(keyword in folded for keyword in keywords):
            return category

    return FALLBACK_CATEGORY
