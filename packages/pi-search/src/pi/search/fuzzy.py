"""Fuzzy matching utilities.

Matches if all query characters appear in order (not necessarily consecutive).
Matching is case-insensitive; highlighting keeps the original casing.
"""

from __future__ import annotations

from collections.abc import Iterable

MARK_OPEN = "<mark>"
MARK_CLOSE = "</mark>"


def fuzzy_match_with_indices(text: str, search: str) -> list[int] | None:
    """Return the positions in ``text`` that matched ``search``, or None.

    The scan is greedy-leftmost: every query character takes the first
    remaining text character equal to it. An empty search matches with no
    positions.
    """
    text_lower = text.lower()
    search_lower = search.lower()

    indices: list[int] = []
    search_index = 0

    for i, char in enumerate(text_lower):
        if search_index >= len(search_lower):
            break
        if char == search_lower[search_index]:
            indices.append(i)
            search_index += 1

    if search_index < len(search_lower):
        return None
    return indices


def highlight_matches(
    text: str,
    indices: Iterable[int] | None,
    open_tag: str = MARK_OPEN,
    close_tag: str = MARK_CLOSE,
) -> str:
    """Wrap each character of ``text`` at a matched position in tags."""
    if not indices:
        return text

    positions = set(indices)
    parts: list[str] = []
    for i, char in enumerate(text):
        if i in positions:
            parts.append(f"{open_tag}{char}{close_tag}")
        else:
            parts.append(char)
    return "".join(parts)


def levenshtein_distance(a: str, b: str) -> int:
    """Case-insensitive edit distance with unit-cost insert, delete and substitute."""
    a = a.lower()
    b = b.lower()

    if len(a) == 0:
        return len(b)
    if len(b) == 0:
        return len(a)

    # rows follow b, columns follow a
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]
    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],
                    matrix[i][j - 1],
                    matrix[i - 1][j],
                )

    return matrix[len(b)][len(a)]
