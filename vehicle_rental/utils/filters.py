"""Number formatting helpers for descriptions, reports and the save file."""


def fmt_number(value) -> str:
    """
    Render a number for humans in general format, the way the rental desk
    prints prices and mileage:
      - 100.0  -> '100'
      - 12.5   -> '12.5'
      - 1/3    -> '0.333333'
    Non-numeric values are returned as-is (so reports never go blank).
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return str(value)
    try:
        return f"{float(value):g}"
    except (TypeError, ValueError):
        return str(value)


def fmt_field(value) -> str:
    """
    Render a number for the save file without losing precision.
    Integral floats drop the fractional part ('5' rather than '5.0').
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    f = float(value)
    if f.is_integer():
        return str(int(f))
    return repr(f)
