from snailfish.core.number import Leaf, Pair, SnailNumber, pair_of  # noqa: F401
from snailfish.core.parser import format_number, parse_lines, parse_number  # noqa: F401
