from argparse import ArgumentParser

OPERATORS = ('eq', 'lt', 'gt', 'odd', 'even')


def main(argv: list[str] | None = None):
    parser = ArgumentParser(prog='pairtree')
    subparsers = parser.add_subparsers(dest='command', required=True)

    size_parser = subparsers.add_parser('size', help='Count the leaves of a tree')
    size_parser.add_argument('-file', type=str, required=True, help='Path to a json tree file')

    exists_parser = subparsers.add_parser('exists', help='Check whether any leaf satisfies a predicate')
    find_parser = subparsers.add_parser('find', help='Print the first leaf satisfying a predicate')
    for predicate_parser in (exists_parser, find_parser):
        predicate_parser.add_argument('-file', type=str, required=True, help='Path to a json tree file')
        predicate_parser.add_argument('-op', type=str, choices=OPERATORS, required=True, help='Predicate operator')
        predicate_parser.add_argument('--value', type=float, default=None, help='Operand for eq, lt and gt')

    search_parser = subparsers.add_parser('search', help='Binary-search a search-ordered tree')
    search_parser.add_argument('-file', type=str, required=True, help='Path to a json tree file')
    search_parser.add_argument('-query', type=float, required=True, help='Value to look for')

    args = parser.parse_args(argv)

    match args.command:
        case 'size':
            from .query import main_size
            main_size(file=args.file)
        case 'exists':
            from .query import main_exists
            main_exists(file=args.file, op=args.op, value=args.value)
        case 'find':
            from .query import main_find
            main_find(file=args.file, op=args.op, value=args.value)
        case 'search':
            from .query import main_search
            main_search(file=args.file, query=args.query)
        case _:
            raise ValueError(f'Unrecognized command {args.command}')
