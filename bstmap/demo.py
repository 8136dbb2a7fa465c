"""Small demonstration: insert words into a map and print them in order."""

from __future__ import annotations

from collections.abc import Sequence

from bstmap.treemap import TreeMap

WORDS = ("saco", "cese", "case", "cosa", "casa", "cesa", "cose", "seco", "saca")


def lower_than_string(key1: str, key2: str) -> bool:
    """Order strings lexicographically."""
    return key1 < key2


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample words in key order, one per line."""
    word_map = TreeMap(lower_than_string)
    for word in WORDS:
        word_map.insert(word, word)
    for pair in word_map:
        print(pair.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())