from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from functools import reduce
from typing import Any, Callable, TypeVar

from .tree import Empty, Node, PairedTree

T = TypeVar('T')
K = TypeVar('K')


@unique
class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


@unique
class Pick(Enum):
    LEFT = 0
    RIGHT = 1

    def select(self, pair: tuple[Any, Any]) -> Any:
        return pair[self.value]


Comparator = Callable[[T], Ordering]


@dataclass(frozen=True)
class AccessorChain:
    """Left/right picks in the order they were made; the first pick selects the outermost half."""
    picks: tuple[Pick, ...] = ()

    def apply(self, value: Any) -> Any:
        return reduce(lambda acc, pick: pick.select(acc), self.picks, value)

    def deepen(self, pick: Pick) -> AccessorChain:
        return AccessorChain((*self.picks, pick))

    @property
    def length(self) -> int:
        return len(self.picks)


@dataclass(frozen=True)
class StackedAccessorChain(AccessorChain):
    """Do not use: stacks each new pick in front of the older ones, reversing the path past level 1."""
    def deepen(self, pick: Pick) -> StackedAccessorChain:
        return StackedAccessorChain((pick, *self.picks))


def _descend(compare: Comparator[T], tree: PairedTree[Any], chain: AccessorChain) -> tuple[T] | None:
    match tree:
        case Empty(): return None
        case Node(head, rest):
            leaf = chain.apply(head)
            match compare(leaf):
                case Ordering.EQUAL: return (leaf,)
                case Ordering.LESS: return _descend(compare, rest, chain.deepen(Pick.LEFT))
                case Ordering.GREATER: return _descend(compare, rest, chain.deepen(Pick.RIGHT))
                case other: raise ValueError(f'Comparator returned {other!r}, expected an Ordering.')
        case _: raise ValueError


def ordered_find(compare: Comparator[T],
                 tree: PairedTree[T],
                 chain: AccessorChain = AccessorChain()) -> tuple[T] | None:
    """Returns `(leaf,)` for the leaf `compare` deems equal, or None. The tree must be search-ordered."""
    return _descend(compare, tree, chain)


def ordered_search(compare: Comparator[T],
                   tree: PairedTree[T],
                   chain: AccessorChain = AccessorChain()) -> bool:
    return _descend(compare, tree, chain) is not None


def compare_to(query: K, key: Callable[[T], K] | None = None) -> Comparator[T]:
    """Builds a comparator placing `query` relative to `key(leaf)` by natural ordering."""
    def compare(leaf: T) -> Ordering:
        other = leaf if key is None else key(leaf)
        if query < other:
            return Ordering.LESS
        if query == other:
            return Ordering.EQUAL
        return Ordering.GREATER
    return compare


def contains(query: K, tree: PairedTree[T], key: Callable[[T], K] | None = None) -> bool:
    return ordered_search(compare_to(query, key), tree)
