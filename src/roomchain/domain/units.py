"""Millimetre/inch conversion and dimension formatting."""

MM_PER_INCH = 25.4

_SIXTEENTHS = [
    "", "¹⁄₁₆", "⅛", "³⁄₁₆", "¼", "⁵⁄₁₆", "⅜", "⁷⁄₁₆",
    "½", "⁹⁄₁₆", "⅝", "¹¹⁄₁₆", "¾", "¹³⁄₁₆", "⅞", "¹⁵⁄₁₆",
]


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def inches_to_mm(inches: float) -> float:
    return inches * MM_PER_INCH


def format_dim(mm: float, use_inches: bool = False) -> str:
    """Format a millimetre value for display.

    Metric output has one decimal place (``"1234.5mm"``). Imperial output is
    rounded to the nearest 1/16 inch and uses vulgar fractions
    (``"48 ½″"``).

    Examples:
        >>> format_dim(1219.2)
        '1219.2mm'
        >>> format_dim(1219.2, use_inches=True)
        '48″'
    """
    if not use_inches:
        return f"{mm:.1f}mm"
    total = mm_to_inches(mm)
    whole = int(total // 1)
    sixteenths = round((total - whole) * 16)
    if sixteenths == 0:
        return f"{whole}″"
    if sixteenths == 16:
        return f"{whole + 1}″"
    prefix = f"{whole} " if whole > 0 else ""
    return f"{prefix}{_SIXTEENTHS[sixteenths]}″"
