from typing import Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
R = TypeVar('R')
F = TypeVar('F')

Pair = tuple[A, A]


def lift_predicate(predicate: Callable[[A], bool]) -> Callable[[Pair[A]], bool]:
    def lifted(pair: Pair[A]) -> bool:
        left, right = pair
        return predicate(left) or predicate(right)
    return lifted


def lift_partial(function: Callable[[A], R | None]) -> Callable[[Pair[A]], R | None]:
    def lifted(pair: Pair[A]) -> R | None:
        left, right = pair
        if (result := function(left)) is not None:
            return result
        return function(right)
    return lifted


def lift_map(function: Callable[[A], B]) -> Callable[[Pair[A]], Pair[B]]:
    def lifted(pair: Pair[A]) -> Pair[B]:
        left, right = pair
        return function(left), function(right)
    return lifted


def lift_zip(combine: Callable[[A, B], C]) -> Callable[[Pair[A], Pair[B]], Pair[C]]:
    def lifted(first: Pair[A], second: Pair[B]) -> Pair[C]:
        (l1, r1), (l2, r2) = first, second
        return combine(l1, l2), combine(r1, r2)
    return lifted


def lift_times(lift: Callable[[F], F], function: F, times: int) -> F:
    """Applies a lifting combinator `times` times, yielding the function for level `times`."""
    if times < 0:
        raise ValueError(f'Cannot lift a negative number of times: {times}')
    for _ in range(times):
        function = lift(function)
    return function
