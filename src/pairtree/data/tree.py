from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from .lifting import lift_map, lift_zip

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')

Pair = tuple[T, T]


class PairedTree(ABC, Generic[T]):
    """A perfect binary tree whose element type doubles into pairs at every level."""
    def __init__(self):
        raise ValueError("Can't instantiate abstract class PairedTree")


@dataclass(frozen=True)
class Empty(PairedTree[T]):
    def __repr__(self) -> str:
        return 'Empty'


@dataclass(frozen=True)
class Node(PairedTree[T]):
    head: T
    rest: PairedTree[Pair[T]]

    def __repr__(self) -> str:
        return f'{self.head!r} :: {self.rest!r}'


def is_empty(tree: PairedTree[T]) -> bool:
    match tree:
        case Empty(): return True
        case Node(): return False
        case _: raise ValueError


def size(tree: PairedTree[T]) -> int:
    match tree:
        case Empty(): return 0
        case Node(_, rest): return 1 + 2 * size(rest)
        case _: raise ValueError


def depth(tree: PairedTree[T]) -> int:
    match tree:
        case Empty(): return 0
        case Node(_, rest): return 1 + depth(rest)
        case _: raise ValueError


def nest(values: Sequence[T], level: int) -> Any:
    """Packs 2^level values into a single level-nested value by pairing adjacent halves."""
    if len(values) != 2 ** level:
        raise ValueError(f'Expected {2 ** level} values at level {level}, got {len(values)}.')
    packed: list[Any] = list(values)
    for _ in range(level):
        packed = [(packed[i], packed[i + 1]) for i in range(0, len(packed), 2)]
    return packed[0]


def unpair(value: Any, level: int) -> list[Any]:
    """Flattens a level-nested value into its 2^level leaves, left to right."""
    if level == 0:
        return [value]
    left, right = value
    return [*unpair(left, level - 1), *unpair(right, level - 1)]


def _perfect_depth(count: int) -> int:
    d = (count + 1).bit_length() - 1
    if 2 ** d - 1 != count:
        raise ValueError(f'A perfect tree holds 2^d - 1 leaves, got {count}.')
    return d


def from_levels(levels: Sequence[Any]) -> PairedTree[Any]:
    """Builds a tree from already nested level values, e.g. `[3, (1, 6), ((0, 2), (5, 7))]`."""
    match levels:
        case []: return Empty()
        case [head, *rest]: return Node(head, from_levels(rest))
        case _: raise ValueError(f'Expected a sequence of levels, got {levels!r}.')


def from_level_order(values: Iterable[T]) -> PairedTree[T]:
    """Builds a tree from 2^d - 1 leaves; level k consumes the next 2^k of them."""
    values = list(values)
    return from_levels([nest(values[2 ** k - 1: 2 ** (k + 1) - 1], k)
                        for k in range(_perfect_depth(len(values)))])


def from_sorted(values: Iterable[T]) -> PairedTree[T]:
    """Builds a search-ordered tree from 2^d - 1 strictly ascending values."""
    values = list(values)
    if any(not a < b for a, b in zip(values, values[1:])):
        raise ValueError('Values must be strictly ascending.')
    d = _perfect_depth(len(values))
    return from_level_order([values[(2 * j + 1) * 2 ** (d - 1 - k) - 1]
                             for k in range(d) for j in range(2 ** k)])


def leaves(tree: PairedTree[T]) -> list[T]:
    def go(_tree: PairedTree[Any], level: int) -> list[T]:
        match _tree:
            case Empty(): return []
            case Node(head, rest): return [*unpair(head, level), *go(rest, level + 1)]
            case _: raise ValueError
    return go(tree, 0)


def tree_map(function: Callable[[T], U], tree: PairedTree[T]) -> PairedTree[U]:
    match tree:
        case Empty(): return Empty()
        case Node(head, rest): return Node(function(head), tree_map(lift_map(function), rest))
        case _: raise ValueError


def tree_zip_with(combine: Callable[[T, U], V], left: PairedTree[T], right: PairedTree[U]) -> PairedTree[V]:
    match left, right:
        case Node(h1, r1), Node(h2, r2): return Node(combine(h1, h2), tree_zip_with(lift_zip(combine), r1, r2))
        case Empty(), Empty(): return Empty()
        case _: raise ValueError(f'Cannot zip trees of depth {depth(left)} and {depth(right)}.')


def tree_zip(left: PairedTree[T], right: PairedTree[U]) -> PairedTree[tuple[T, U]]:
    return tree_zip_with(lambda x, y: (x, y), left, right)
