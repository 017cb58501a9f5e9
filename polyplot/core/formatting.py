"""
Number formatting shared by legends and point labels.

Values are printed in shortest round-trip form with an integral float's
trailing ".0" dropped, so 5.0 prints as "5" and 0.25 as "0.25".
"""


def format_number(value: float, precision: int | None = None) -> str:
    """
    Format a float for display on a chart.

    Args:
        value: Number to format
        precision: If given, fixed number of decimal places instead of
            the shortest round-trip representation

    Returns:
        The formatted number
    """
    value = float(value)
    if precision is not None:
        return f"{value:.{precision}f}"
    text = repr(value)
    if text.endswith('.0'):
        text = text[:-2]
    return text
