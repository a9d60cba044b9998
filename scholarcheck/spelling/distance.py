"""
Edit distance with keyboard-proximity weighting.

Damerau-Levenshtein distance (insert, delete, substitute and adjacent
transposition all cost 1) where substituting a key for one of its
neighbours on a QWERTY grid costs only 0.5. Fat-finger typos therefore
rank closer than arbitrary substitutions.
"""

from __future__ import annotations

from collections.abc import Mapping

# =============================================================================
# CONSTANTS
# =============================================================================

QWERTY_ROWS = ("qwertyuiop", "asdfghjkl", "zxcvbnm")

# Row/column of every letter on the grid
KEY_POSITIONS = {
    char: (row, col) for row, keys in enumerate(QWERTY_ROWS) for col, char in enumerate(keys)
}

# Distance reported when either character is not a letter key
NON_KEYBOARD_DISTANCE = 5

# Keys closer than this are treated as neighbours
ADJACENT_KEY_THRESHOLD = 2

ADJACENT_SUBSTITUTION_COST = 0.5


def keyboard_distance(char1: str, char2: str) -> int:
    """
    Manhattan distance between two keys on the QWERTY grid.

    Args:
        char1: First character (case-insensitive).
        char2: Second character (case-insensitive).

    Returns:
        Grid distance, or NON_KEYBOARD_DISTANCE if either is not a letter key.

    Example:
        >>> keyboard_distance("e", "r")
        1
        >>> keyboard_distance("a", "p")
        10
    """
    pos1 = KEY_POSITIONS.get(char1.lower())
    pos2 = KEY_POSITIONS.get(char2.lower())
    if pos1 is None or pos2 is None:
        return NON_KEYBOARD_DISTANCE
    return abs(pos1[0] - pos2[0]) + abs(pos1[1] - pos2[1])


def weighted_edit_distance(word1: str, word2: str) -> float:
    """
    Keyboard-weighted Damerau-Levenshtein distance (case-insensitive).

    Args:
        word1: First string.
        word2: Second string.

    Returns:
        Edit distance; multiples of 0.5.

    Example:
        >>> weighted_edit_distance("teh", "the")
        1
        >>> weighted_edit_distance("wprd", "word")  # p is next to o
        0.5
    """
    a = word1.lower()
    b = word2.lower()
    len1, len2 = len(a), len(b)

    matrix: list[list[float]] = [[0] * (len2 + 1) for _ in range(len1 + 1)]
    for i in range(len1 + 1):
        matrix[i][0] = i
    for j in range(len2 + 1):
        matrix[0][j] = j

    for i in range(1, len1 + 1):
        for j in range(1, len2 + 1):
            char1 = a[i - 1]
            char2 = b[j - 1]

            if char1 == char2:
                matrix[i][j] = matrix[i - 1][j - 1]
                continue

            cost = min(
                matrix[i - 1][j - 1] + 1,  # substitution
                matrix[i][j - 1] + 1,  # insertion
                matrix[i - 1][j] + 1,  # deletion
            )

            if i > 1 and j > 1 and char1 == b[j - 2] and a[i - 2] == char2:
                cost = min(cost, matrix[i - 2][j - 2] + 1)

            if keyboard_distance(char1, char2) < ADJACENT_KEY_THRESHOLD:
                cost = min(cost, matrix[i - 1][j - 1] + ADJACENT_SUBSTITUTION_COST)

            matrix[i][j] = cost

    return matrix[len1][len2]


def phonetic_key(word: str, phonetic_map: Mapping[str, str]) -> str:
    """
    Reduce a word to a rough phonetic spelling.

    Digraphs are replaced before single letters, scanning left to right,
    so "phonic" and "fonik" share the key "fonik".

    Args:
        word: Word to encode.
        phonetic_map: Letter sequence -> phonetic class.

    Returns:
        The encoded word.
    """
    w = word.lower()
    sequences = sorted(phonetic_map, key=len, reverse=True)
    out: list[str] = []
    i = 0
    while i < len(w):
        for seq in sequences:
            if w.startswith(seq, i):
                out.append(phonetic_map[seq])
                i += len(seq)
                break
        else:
            out.append(w[i])
            i += 1
    return "".join(out)
