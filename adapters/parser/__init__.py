from .precedence_parser import PrecedenceParser
from .top_down_parser import TopDownParser

PARSERS = {
    "top_down": TopDownParser,
    "precedence": PrecedenceParser,
}


def get_parser(name: str = "top_down"):
    """Zwraca instancję parsera po nazwie z PARSERS."""
    try:
        return PARSERS[name]()
    except KeyError:
        raise ValueError(
            f"Nieznany parser: {name!r} (dostępne: {', '.join(PARSERS)})"
        ) from None


__all__ = [
    "PARSERS",
    "PrecedenceParser",
    "TopDownParser",
    "get_parser",
]
