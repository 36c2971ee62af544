from typing import Callable

from .schemas import TreePayload, read_json
from ..data.tree import PairedTree, depth, size
from ..data.search import exists, find
from ..data.ordered import contains

Leaf = int | float

OPERATORS: dict[str, Callable[[Leaf, Leaf | None], bool]] = {
    'eq': lambda leaf, value: leaf == value,
    'lt': lambda leaf, value: leaf < value,
    'gt': lambda leaf, value: leaf > value,
    'odd': lambda leaf, _: leaf % 2 == 1,
    'even': lambda leaf, _: leaf % 2 == 0,
}


def make_predicate(op: str, value: Leaf | None) -> Callable[[Leaf], bool]:
    if op not in OPERATORS:
        raise ValueError(f'Unrecognized operator {op}')
    if op in {'eq', 'lt', 'gt'} and value is None:
        raise ValueError(f'Operator {op} requires a value')
    operator = OPERATORS[op]
    return lambda leaf: operator(leaf, value)


def load_tree(file: str) -> PairedTree[Leaf]:
    try:
        return TreePayload.model_validate(read_json(file)).to_tree()
    except (OSError, ValueError) as e:
        print(f'Invalid tree file {file}: {e}')
        raise SystemExit(1) from e


def main_size(file: str):
    tree = load_tree(file)
    print(f'{size(tree)} leaves (depth {depth(tree)})')


def main_exists(file: str, op: str, value: Leaf | None):
    print(exists(make_predicate(op, value), load_tree(file)))


def main_find(file: str, op: str, value: Leaf | None):
    match find(make_predicate(op, value), load_tree(file)):
        case (leaf,): print(leaf)
        case None: print('No matching leaf.')


def main_search(file: str, query: Leaf):
    print(contains(query, load_tree(file)))
