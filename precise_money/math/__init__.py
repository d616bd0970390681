"""Integer math primitives for precise_money.

- digits: int <-> digit string conversion without the str/int length limit
- pow10: cached powers of ten and decimals validation
- rounding: the four rounding policies over integer division
"""

from precise_money.math.digits import describe, digits_to_int, int_to_digits
from precise_money.math.pow10 import pow10, require_decimals
from precise_money.math.rounding import Rounding, div_round, round_adjust

__all__ = [
    "digits_to_int",
    "int_to_digits",
    "describe",
    "pow10",
    "require_decimals",
    "Rounding",
    "div_round",
    "round_adjust",
]
