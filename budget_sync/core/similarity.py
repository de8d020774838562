"""
String similarity used for fuzzy vendor matching.

Scores are in [0.0, 1.0] and case-insensitive:
- exact match scores 1.0
- containment scores len(shorter) / len(longer)
- anything else scores 1 - levenshtein / max(len)
"""
from rapidfuzz.distance import Levenshtein


def string_similarity(a: str, b: str) -> float:
    """
    Similarity ratio between two strings.

    Containment is checked before edit distance, so a short name inside a
    long one scores by length ratio ("Tesco" vs "Tesco Superstore" -> 0.3125),
    never by a flat bonus.

    Args:
        a: First string
        b: Second string

    Returns:
        Float between 0.0 and 1.0
    """
    la = a.lower()
    lb = b.lower()

    if la == lb:
        return 1.0

    shorter, longer = sorted((la, lb), key=len)
    if shorter in longer:
        return len(shorter) / len(longer)

    # Unit-cost insert / delete / substitute
    distance = Levenshtein.distance(la, lb)
    return 1.0 - distance / len(longer)
