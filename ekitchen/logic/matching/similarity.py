"""Name similarity for matching model-written ingredient names against the pantry."""

__all__ = ["levenshtein_distance", "similarity"]


def levenshtein_distance(s1: str, s2: str) -> int:
    """Edit distance with unit cost for insertion, deletion and substitution."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)
    if len(s2) == 0:
        return len(s1)
    prev_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        curr_row = [i + 1]
        for j, c2 in enumerate(s2):
            curr_row.append(min(
                prev_row[j + 1] + 1,
                curr_row[j] + 1,
                prev_row[j] + (c1 != c2),
            ))
        prev_row = curr_row
    return prev_row[-1]


def similarity(a: str, b: str) -> float:
    """Return 1 - distance/len(longer), in [0, 1]. Two empty strings are identical."""
    longer, shorter = (a, b) if len(a) >= len(b) else (b, a)
    if not longer:
        return 1.0
    return (len(longer) - levenshtein_distance(longer, shorter)) / len(longer)
