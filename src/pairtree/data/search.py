from typing import Callable, TypeVar

from .lifting import lift_partial, lift_predicate
from .tree import Empty, Node, PairedTree, leaves

T = TypeVar('T')
R = TypeVar('R')


def exists(predicate: Callable[[T], bool], tree: PairedTree[T]) -> bool:
    # the predicate at depth k covers 2^k leaves, each leaf is tested at most once
    match tree:
        case Empty(): return False
        case Node(head, rest): return predicate(head) or exists(lift_predicate(predicate), rest)
        case _: raise ValueError


def first(function: Callable[[T], R | None], tree: PairedTree[T]) -> R | None:
    match tree:
        case Empty(): return None
        case Node(head, rest):
            if (result := function(head)) is not None:
                return result
            return first(lift_partial(function), rest)
        case _: raise ValueError


def find(predicate: Callable[[T], bool], tree: PairedTree[T]) -> tuple[T] | None:
    """Returns `(leaf,)` for the first leaf satisfying the predicate, or None if there is none."""
    return first(lambda leaf: (leaf,) if predicate(leaf) else None, tree)


def find_all(predicate: Callable[[T], bool], tree: PairedTree[T]) -> list[T]:
    return [leaf for leaf in leaves(tree) if predicate(leaf)]
