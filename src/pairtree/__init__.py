from .data.tree import PairedTree, Empty, Node, is_empty, size, depth, from_levels, from_level_order, from_sorted, leaves
from .data.search import exists, find, find_all
from .data.ordered import Ordering, AccessorChain, ordered_search, ordered_find, compare_to, contains
