"""Exact decimal arithmetic over integer minor units.

Usage:
    from precise_money import Rounding, from_minor, slippage_down, to_minor

    amount = to_minor("1.234,56", 6)        # 1234560000
    min_out = slippage_down(amount, 50)     # 0.5% slippage, floored
    from_minor(min_out, 6)                  # "1228.387200"
"""

from precise_money.bps import (
    apply_bps,
    apply_slippage,
    clamp_bps,
    min_out_for_exact_in,
    mul_div,
    slippage_down,
    slippage_up,
)
from precise_money.codec import from_minor, to_minor
from precise_money.errors import (
    DivisionByZero,
    InvalidAmountFormat,
    InvalidBps,
    InvalidDecimals,
    InvalidLotSize,
    InvalidQuantity,
    InvalidScale,
    NegativePrice,
    PreciseMoneyError,
)
from precise_money.lots import split_amount
from precise_money.math import Rounding, div_round, pow10
from precise_money.parsing import NumericAmount, ParsedAmount, TextAmount, normalize_amount_input
from precise_money.pricing import (
    PriceRatio,
    avg_fiat_price_per_unit,
    convert_units_by_decimals,
    div_to_decimal_string,
    price_ratio_decimals,
)
from precise_money.registry import AssetId, Chain, DecimalsRegistry
from precise_money.result import MoneyError, MoneyResult
from precise_money.scaling import scale_units

__version__ = "0.1.0"

__all__ = [
    # Parsing & codec
    "TextAmount",
    "NumericAmount",
    "ParsedAmount",
    "normalize_amount_input",
    "to_minor",
    "from_minor",
    # Rounding
    "Rounding",
    "div_round",
    "pow10",
    # Scaling
    "scale_units",
    # Basis points
    "mul_div",
    "apply_bps",
    "clamp_bps",
    "apply_slippage",
    "min_out_for_exact_in",
    "slippage_down",
    "slippage_up",
    # Lots
    "split_amount",
    # Pricing
    "PriceRatio",
    "price_ratio_decimals",
    "convert_units_by_decimals",
    "div_to_decimal_string",
    "avg_fiat_price_per_unit",
    # Registry
    "Chain",
    "AssetId",
    "DecimalsRegistry",
    # Errors & results
    "PreciseMoneyError",
    "InvalidAmountFormat",
    "InvalidDecimals",
    "InvalidScale",
    "DivisionByZero",
    "NegativePrice",
    "InvalidBps",
    "InvalidLotSize",
    "InvalidQuantity",
    "MoneyError",
    "MoneyResult",
    "__version__",
]
