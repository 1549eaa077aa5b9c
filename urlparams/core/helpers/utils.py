import logging
import math
from decimal import Decimal


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)-8s [%(name)s:%(funcName)s] : %(message)s',
    )


def format_float(value: float) -> str:
    """
    Render a float in its shortest round-tripping form, without exponent and
    without a trailing fractional zero: 0.0 → "0", 3.14 → "3.14",
    1e20 → "100000000000000000000".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
