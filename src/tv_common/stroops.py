"""Integer helpers for XLM amounts.

Horizon reports fees in stroops as decimal strings. 1 XLM = 10,000,000 stroops.
No float: display strings are built with integer division only.
"""

STROOPS_PER_XLM = 10_000_000


def parse_stroops(value: str) -> int:
    """Parse a non-negative stroop string ('100') to int."""
    stroops = int(value)
    if stroops < 0:
        raise ValueError(f"Stroop amount must be non-negative, got {value}")
    return stroops


def stroops_to_display(stroops: int) -> str:
    """100 -> '0.00001 XLM', 25000000 -> '2.5 XLM', 0 -> '0 XLM'."""
    whole, frac = divmod(stroops, STROOPS_PER_XLM)
    if frac == 0:
        return f"{whole:,} XLM"
    frac_str = f"{frac:07d}".rstrip("0")
    return f"{whole:,}.{frac_str} XLM"


def fee_to_display(fee_charged: str) -> str:
    """Render Horizon's fee_charged string; unparseable input is echoed back."""
    try:
        return stroops_to_display(parse_stroops(fee_charged))
    except ValueError:
        return fee_charged
