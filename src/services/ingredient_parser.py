"""Deterministic parsing of free-text ingredient lists."""


class IngredientParser:
    """Turn raw recipe ingredient text into pantry keys."""

    @staticmethod
    def normalize(name: str) -> str:
        """Normalize a single ingredient name to its pantry key.

        Pantry keys are lowercase and trimmed, so "  Sal " and "sal" refer
        to the same entry.
        """
        return name.strip().lower()

    @staticmethod
    def parse(raw: str | None) -> list[str]:
        """Split a comma-separated ingredient list into normalized keys.

        Rules:
        - Split on commas only (no "and", no quantities stripped)
        - Trim and lowercase each piece
        - Drop empty pieces
        - Keep input order and duplicates

        Examples:
        - "2 ovos, Sal , queijo ralado,," -> ["2 ovos", "sal", "queijo ralado"]
        - "" -> []
        """
        if not raw:
            return []

        pieces = (IngredientParser.normalize(piece) for piece in raw.split(","))
        return [piece for piece in pieces if piece]
