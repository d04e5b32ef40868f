"""Utilitaires texte."""


def normalize_whitespace(text: str) -> str:
    """Remplace les séquences d'espaces/blancs par un seul espace (et retire ceux des bords)."""
    return " ".join(text.split())


def join_fragments(fragments: list[str]) -> str:
    """
    Concatène des fragments de texte avec un espace, en ignorant les fragments vides.
    Le résultat est normalisé (jamais deux espaces consécutifs).
    """
    return normalize_whitespace(" ".join(f for f in fragments if f))
