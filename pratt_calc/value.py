import math
from typing import Optional

import numpy as np

Number = np.float32


def parse_number(text: str) -> Optional[Number]:
    """Returns None when the text is not a float literal (i.e. it should be a variable name)"""
    try:
        with np.errstate(over="ignore"):
            return Number(text)
    except ValueError:
        return None


def format_number(value: Number) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # shortest digits that round-trip through float32, no exponent, "6" rather than "6."
    return np.format_float_positional(Number(value), trim="-")
