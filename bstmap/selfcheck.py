"""Graded self-check of the tree map operations.

Each section exercises one operation on a small hand-built tree, prints
``[OK]``, ``[FAILED]`` and ``[ INFO ]`` lines, and awards points when all
of its checks pass. Selecting a single check id stops with ``SUCCESS`` as
soon as that check passes.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial

from bstmap.treemap import Pair, TreeMap, TreeNode, minimum


@dataclass
class Word:
    """A numbered word stored as a map value."""

    id: int
    word: str


@dataclass
class CheckReport:
    """Output lines and scores from one self-check run."""

    lines: list[str] = field(default_factory=list)
    total_score: int = 0
    all_correct: bool = True
    succeeded: bool = False


class _Success(Exception):
    """Raised when the selected check id has passed."""


class _Log:
    def __init__(self, lines: list[str]) -> None:
        self.lines = lines

    def ok(self, msg: str) -> None:
        self.lines.append(f"   [OK] {msg}")

    def err(self, msg: str) -> None:
        self.lines.append(f"   [FAILED] {msg.rstrip()}")

    def info(self, msg: str) -> None:
        self.lines.append(f"   [ INFO ] {msg}")


def lower_than_int(key1: int, key2: int) -> bool:
    """True when ``key1`` is numerically lower than ``key2``."""
    return key1 < key2


def _node(word_id: int, word: str) -> TreeNode:
    return TreeNode(Pair(word_id, Word(word_id, word)))


def _attach_left(parent: TreeNode, child: TreeNode) -> None:
    parent.left = child
    child.parent = parent


def _attach_right(parent: TreeNode, child: TreeNode) -> None:
    parent.right = child
    child.parent = parent


def initialize_tree() -> TreeMap:
    """Build the fixed four-node tree the checks start from.

    ::

              5239 auto
             /         \\
        1273 reto    8213 rayo
                     /
                6980 hoja
    """
    tree = TreeMap(lower_than_int)
    tree.root = _node(5239, "auto")
    _attach_right(tree.root, _node(8213, "rayo"))
    _attach_left(tree.root.right, _node(6980, "hoja"))
    _attach_left(tree.root, _node(1273, "reto"))
    return tree


def _fresh_tree(log: _Log) -> TreeMap:
    log.info("inicializando el arbol...")
    return initialize_tree()


def _key(node: TreeNode) -> int:
    return node.pair.key


def _word_id(pair: Pair | None) -> int | None:
    return pair.value.id if pair is not None else None


# --- createTreeMap ---------------------------------------------------------

def _create_check(log: _Log) -> bool:
    tree = TreeMap(lower_than_int)
    log.ok("createTreeMap retorna un objeto")
    if tree.root is not None:
        log.err("root debe ser NULL")
        return False
    log.ok("root==NULL")
    if tree.lower_than is not lower_than_int or not tree.lower_than(10, 15):
        log.err("la funcion lower_than no fue guardada de forma correcta")
        return False
    log.ok("Funcion de comparcion inicializada correctamente")
    return True


# --- searchTreeMap ---------------------------------------------------------

def _search_found(tree: TreeMap, key: int, expected: Callable[[TreeMap], TreeNode],
                  log: _Log) -> bool:
    pair = tree.search(key)
    if _word_id(pair) != key:
        log.err(f"no encuentra dato con clave {key}")
        return False
    log.ok(f"encuentra dato con clave {key}")
    if tree.current is not expected(tree):
        log.err(f"no actualiza current correctamente ({key})")
        return False
    log.ok("current actualizado correctamente")
    return True


def _search_missing(tree: TreeMap, log: _Log) -> bool:
    key = 7010
    if tree.search(key) is not None:
        log.err(f"retorna dato y clave no existe ({key})")
        return False
    log.ok(f"retorna NULL: search(key={key})")
    return True


# --- insertTreeMap ---------------------------------------------------------

def _insert_repeated(tree: TreeMap, log: _Log) -> bool:
    word = Word(1273, "repetido")
    tree.insert(word.id, word)
    node = tree.root.left
    if node.left is not None or node.right is not None:
        log.err("se inserta dato repetido")
        return False
    log.ok("no inserta dato repetido")
    return True


def _insert_new(log: _Log) -> bool:
    tree = _fresh_tree(log)
    word = Word(900, "maicol")
    log.info("insertando dato con clave 900")
    tree.insert(word.id, word)
    new = tree.root.left.left
    if new is None or new.pair.value is not word:
        log.err("dato insertado no se encuentra en root->left->left")
        return False
    log.ok("dato insertado correctamente")
    if new.pair.key != word.id:
        log.err("clave de dato no se guarda correctamente")
        return False
    if new.parent is not tree.root.left:
        log.err("no se inicializa el padre del nuevo nodo")
        return False
    if tree.current is not new:
        log.err("no se actualiza el current")
        return False
    log.ok("current actualizado correctamente")
    return True


# --- minimum ---------------------------------------------------------------

def _minimum_check(log: _Log) -> bool:
    tree = _fresh_tree(log)
    node = minimum(tree.root)
    if _key(node) != 1273:
        log.err(f"minimum retorna nodo con clave {_key(node)} (deberia retornar 1273)")
        return False
    log.ok("minimum retorna el nodo con clave 1273")
    minimum(tree.root.left)
    log.info("agregando nodo con clave 100")
    _attach_left(tree.root.left, _node(100, "first_word"))
    node = minimum(tree.root)
    if _key(node) != 100:
        log.err(f"minimum retorna nodo con clave {_key(node)} (deberia retornar 100)")
        return False
    log.ok("minimum retorna el nodo con clave 100")
    return True


# --- removeNode ------------------------------------------------------------

def _erase_leaf(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("eliminando dato con clave 1273 (nodo sin hijos)")
    tree.erase(1273)
    if tree.root.left is not None:
        log.err("el dato no se elimino correctamente: tree->root->left != NULL")
        return False
    log.ok("dato eliminado correctamente")
    return True


def _erase_one_child(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("eliminando dato con clave 8213 (nodo con un hijo)")
    tree.erase(8213)
    if tree.root.right is None or _key(tree.root.right) != 6980:
        log.err("el dato no se elimino correctamente root->right!=6980")
        return False
    if tree.root.right.parent is not tree.root:
        log.err("falta actualizar el parent de nodo 6980")
        return False
    log.ok("dato eliminado correctamente")
    return True


def _erase_two_children(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("eliminando dato con clave 5239 (nodo con dos hijos)")
    tree.erase(5239)
    if _key(tree.root) != 6980:
        log.err("el dato no se elimino correctamente root!=6980")
        return False
    if tree.root.right is None or _key(tree.root.right) != 8213:
        log.err("el dato no se elimino correctamente root->right!=8213")
        return False
    log.ok("dato eliminado correctamente")
    return True


# --- firstTreeMap ----------------------------------------------------------

def _first_plain(tree: TreeMap, log: _Log) -> bool:
    pair = tree.first()
    if pair is None:
        log.err("first retorna NULL")
        return False
    if _word_id(pair) != 1273:
        log.err("first no retorna nodo 1273")
        return False
    log.ok("first retorna nodo 1273")
    return True


def _first_deeper(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("agregando nodo con clave 100")
    _attach_left(tree.root.left, _node(100, "first_word"))
    if _word_id(tree.first()) != 100:
        log.err("first no retorna nodo 100")
        return False
    log.ok("first retorna nodo 100")
    return True


# --- nextTreeMap -----------------------------------------------------------

def _next_right_child(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("agregando nodo con clave 2000")
    _attach_right(tree.root.left, _node(2000, "next_word"))
    log.info("actualizando current -> nodo 1273")
    tree.current = tree.root.left
    pair = tree.next()
    if pair is None:
        log.err("next retorna NULL")
        return False
    if _word_id(pair) != 2000:
        log.err("next no retorna nodo 2000")
        return False
    log.ok("next retorna nodo 2000")
    return True


def _next_to_end(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("actualizando current -> root")
    tree.current = tree.root
    for expected in (6980, 8213):
        if _word_id(tree.next()) != expected:
            log.err(f"next no retorna nodo {expected}")
            return False
        log.ok(f"next retorna nodo {expected}")
    if tree.next() is not None:
        log.err("next != NULL")
        return False
    log.ok("next retorna NULL")
    return True


def _next_up(log: _Log) -> bool:
    tree = _fresh_tree(log)
    log.info("agregando nodo con clave 2000")
    _attach_right(tree.root.left, _node(2000, "next_word"))
    log.info("actualizando current -> nodo 2000")
    tree.current = tree.root.left.right
    if _word_id(tree.next()) != 5239:
        log.err("next no retorna nodo 5239")
        return False
    log.ok("next retorna nodo 5239")
    return True


# --- upperBound ------------------------------------------------------------

def _upper_bound_found(tree: TreeMap, key: int, expected: int, log: _Log) -> bool:
    pair = tree.upper_bound(key)
    if pair is None:
        log.err(f"upperbound de {key} retorna NULL")
        return False
    found = _word_id(pair)
    if found != expected:
        log.err(f"upperbound de {key} retorna {found}")
        return False
    log.ok(f"upperbound de {key} retorna {found}")
    return True


def _upper_bound_none(tree: TreeMap, log: _Log) -> bool:
    key = 8214
    if tree.upper_bound(key) is not None:
        log.err(f"upperbound de {key} retorna NULL")
        return False
    log.ok(f"upperbound de {key} retona NULL")
    return True


# --- sections --------------------------------------------------------------

Check = Callable[[_Log], bool]
Stage = tuple[Sequence[Check], int, int]


def _create_stages(log: _Log) -> list[Stage]:
    _fresh_tree(log)
    return [([_create_check], 5, 0)]


def _search_stages(log: _Log) -> list[Stage]:
    tree = _fresh_tree(log)
    checks = [
        partial(_search_found, tree, 5239, lambda t: t.root),
        partial(_search_found, tree, 8213, lambda t: t.root.right),
        partial(_search_found, tree, 6980, lambda t: t.root.right.left),
        partial(_search_missing, tree),
    ]
    return [(checks, 10, 1)]


def _insert_stages(log: _Log) -> list[Stage]:
    tree = _fresh_tree(log)
    return [([partial(_insert_repeated, tree), _insert_new], 10, 2)]


def _erase_stages(log: _Log) -> list[Stage]:
    return [([_erase_leaf], 5, 3), ([_erase_one_child], 5, 4), ([_erase_two_children], 5, 5)]


def _first_stages(log: _Log) -> list[Stage]:
    tree = _fresh_tree(log)
    return [([partial(_first_plain, tree), _first_deeper], 5, 6)]


def _next_stages(log: _Log) -> list[Stage]:
    return [([_next_right_child], 5, 7), ([_next_to_end], 5, 8), ([_next_up], 5, 9)]


def _upper_bound_stages(log: _Log) -> list[Stage]:
    tree = _fresh_tree(log)
    return [
        (
            [
                partial(_upper_bound_found, tree, 6980, 6980),
                partial(_upper_bound_found, tree, 6979, 6980),
                partial(_upper_bound_found, tree, 6981, 8213),
            ],
            5,
            10,
        ),
        ([partial(_upper_bound_none, tree)], 5, 11),
    ]


_SCORED_BEFORE_MINIMUM = [
    ("Test createTreeMap...", 5, _create_stages),
    ("Test searchTreeMap...", 10, _search_stages),
    ("Test insertTreeMap...", 10, _insert_stages),
]

_SCORED_AFTER_MINIMUM = [
    ("Test removeNode...", 15, _erase_stages),
    ("Test firstTreeMap...", 5, _first_stages),
    ("Test nextTreeMap...", 15, _next_stages),
    ("Test upperBound...", 10, _upper_bound_stages),
]

_MAX_TOTAL = 70


def _run_section(report: CheckReport, log: _Log, test_id: int, title: str,
                 max_score: int, build: Callable[[_Log], list[Stage]]) -> None:
    report.lines.extend(["", title])
    stages = build(log)
    if test_id != -1 and test_id not in {stage_id for _, _, stage_id in stages}:
        # Title already printed only when the section is selected.
        raise AssertionError("section run for an unrelated test id")
    score = 0
    passed = True
    for checks, points, stage_id in stages:
        if not all(check(log) for check in checks):
            passed = False
            break
        score += points
        if test_id == stage_id:
            raise _Success
    report.all_correct &= passed
    report.lines.append(f"   partial_score: {score}/{max_score}")
    report.total_score += score


def _section_selected(test_id: int, build: Callable[[_Log], list[Stage]]) -> bool:
    if test_id == -1:
        return True
    return test_id in {stage_id for _, _, stage_id in build(_Log([]))}


def run_checks(test_id: int = -1) -> CheckReport:
    """Run every section, or only the one holding ``test_id``.

    With ``test_id`` of -1 all sections run and the total is reported. The
    minimum check always runs, unscored.
    """
    report = CheckReport()
    log = _Log(report.lines)
    try:
        for title, max_score, build in _SCORED_BEFORE_MINIMUM:
            if _section_selected(test_id, build):
                _run_section(report, log, test_id, title, max_score, build)
        report.lines.extend(["", "Test minimum..."])
        report.all_correct &= _minimum_check(log)
        for title, max_score, build in _SCORED_AFTER_MINIMUM:
            if _section_selected(test_id, build):
                _run_section(report, log, test_id, title, max_score, build)
    except _Success:
        report.lines.append("SUCCESS")
        report.succeeded = True
    return report


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the self-check; an optional first argument selects one check id."""
    args = list(sys.argv[1:] if argv is None else argv)
    test_id = _leading_int(args[0]) if args else -1
    report = run_checks(test_id)
    for line in report.lines:
        print(line)
    if not args and not report.succeeded:
        print()
        print(f"total_score: {report.total_score}/{_MAX_TOTAL}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())