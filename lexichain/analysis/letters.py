"""Letter tables used by board analysis."""

from typing import Dict, FrozenSet


VOWELS: FrozenSet[str] = frozenset("AEIOU")

# Most frequent letters in English text
COMMON_LETTERS: FrozenSet[str] = frozenset("EARIOTNS")

RARE_LETTERS: FrozenSet[str] = frozenset("QXZJKVWY")
UNCOMMON_LETTERS: FrozenSet[str] = frozenset("BCFGHMP")

# Rarity weight per tile class
RARE_WEIGHT = 300
UNCOMMON_WEIGHT = 150
COMMON_WEIGHT = 50

# Simplified Scrabble-style letter values
LETTER_VALUES: Dict[str, int] = {
    "A": 1, "E": 1, "I": 1, "O": 1, "U": 1, "L": 1, "N": 1, "S": 1, "T": 1, "R": 1,
    "D": 2, "G": 2,
    "B": 3, "C": 3, "M": 3, "P": 3,
    "F": 4, "H": 4, "V": 4, "W": 4, "Y": 4,
    "K": 5,
    "J": 8, "X": 8,
    "Q": 10, "Z": 10,
}

COMMON_PAIRS: FrozenSet[str] = frozenset({
    "TH", "HE", "IN", "ER", "AN", "RE", "ED", "ND", "ON", "EN",
    "AT", "OU", "IT", "ES", "TE", "OR", "TI", "HI", "AS", "TO",
    "ST", "NG", "SE", "HA", "VE", "DE", "OF", "LE", "CO", "NT",
})


def rarity_weight(letter: str) -> int:
    """Rarity weight of a single tile; letters outside every class weigh nothing."""
    if letter in RARE_LETTERS:
        return RARE_WEIGHT
    if letter in UNCOMMON_LETTERS:
        return UNCOMMON_WEIGHT
    if letter in COMMON_LETTERS:
        return COMMON_WEIGHT
    return 0


def letter_value(letter: str) -> int:
    return LETTER_VALUES.get(letter, 1)


def is_common_pair(first: str, second: str) -> bool:
    """True if the two letters form a common bigram in either order."""
    return first + second in COMMON_PAIRS or second + first in COMMON_PAIRS
