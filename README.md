# bstmap

An ordered key/value map stored in a plain (unbalanced) binary search tree.
Keys are ordered by a comparator you supply: a function `lower_than(a, b)`
that is true when `a` sorts before `b`. Two keys are equal when neither is
lower than the other (`TreeMap.is_equal`).

The map keeps a cursor, `current`, so you can walk it in order with
`first()` and `next()`, or simply iterate over it.

## Installation

```
pip install .
```

## Usage

```python
from bstmap.treemap import TreeMap

tree = TreeMap(lambda a, b: a < b)
for word in ["saco", "cese", "case", "cosa"]:
    tree.insert(word, word.upper())

tree.search("cosa").value      # 'COSA'
tree.search("nope")            # None
tree.upper_bound("cat").key    # 'cese' -- smallest key not lower than 'cat'

pair = tree.first()
while pair is not None:
    print(pair.key, pair.value)
    pair = tree.next()

tree.erase("cese")
[p.key for p in tree]          # ['case', 'cosa', 'saco']
```

Entries come back as `Pair` objects with `key` and `value` attributes. The
tree itself is made of `TreeNode` objects (`pair`, `left`, `right`,
`parent`), reachable from `tree.root`.

Behaviour to be aware of:

- `insert` ignores a key that is already present; the first value stays.
- `search`, `insert`, `upper_bound`, `first` and `next` move `current`.
  A failed `search` clears it, and `next()` returns `None` once the walk is
  past the last key.
- `upper_bound(key)` returns the pair stored under `key` if there is one,
  otherwise the pair with the smallest greater key, or `None`.
- `erase(key)` does nothing when the key is absent. A node with two
  children takes over its in-order successor's pair, and the successor node
  is unlinked instead.
- Iterating with `for pair in tree` uses `first()` and `next()`, so it moves
  `current` as well.
- `minimum(node)` from `bstmap.treemap` returns the leftmost node of a
  subtree; `TreeMap.remove_node(node)` unlinks a given node.

## Commands

```
bstmap-demo
```

Inserts nine four-letter words (`bstmap.demo.WORDS`) into a map ordered by
`lower_than_string` and prints them one per line in sorted order.

```
bstmap-selfcheck [TEST_ID]
```

Runs scored checks of the map operations against a small fixed tree
(`bstmap.selfcheck.initialize_tree()`) and prints `[OK]`, `[FAILED]` and
`[ INFO ]` lines with a partial score per section. Without an argument every
section runs and a total out of 70 is printed. With a check number (0–11)
only the section holding that check runs, and `SUCCESS` is printed as soon
as that check passes. An unscored check of `minimum` always runs.

The same checks are available from Python: `run_checks(test_id=-1)` returns
a `CheckReport` with the output `lines`, `total_score`, `all_correct` and
`succeeded`.

## What it does not do

The tree is never rebalanced, so keys inserted in sorted order give a tree
as deep as it is long. The map has no `len()`, `in` or item-access
operators, does not store anything on disk, and is not safe to share between
threads without your own locking.

## Running the tests

```
pip install .[test]
pytest
```