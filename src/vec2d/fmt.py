import math


def round_half_up(x, decimals=0):
    """Round to `decimals` places, with halves going toward +inf.

    This is not Python's `round()`, which rounds halves to even:
    round_half_up(2.5) == 3.0 and round_half_up(-2.5) == -2.0.

    Args:
        x (float): Value to round. inf and nan are returned unchanged.
        decimals (int): Number of decimal places to keep.

    Returns:
        float: The rounded value.
    """
    x = float(x)
    if not math.isfinite(x):
        return x
    scale = 10 ** decimals
    scaled = x * scale
    # Scaling overflowed, propagate inf
    if not math.isfinite(scaled):
        return scaled / scale
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return whole / scale


def format_axis(x, round_to_int=False):
    """Render a single axis value the way it appears in "(x, y)".

    Whole numbers drop the fractional part (645 rather than 645.0),
    everything else uses the shortest repr that round-trips.
    """
    x = float(x)
    if round_to_int:
        x = round_half_up(x)
    if x.is_integer() and abs(x) < 1e16:
        return f"{int(x)}"
    return repr(x)


def format_pair(x, y, round_to_int=False):
    return f"({format_axis(x, round_to_int)}, {format_axis(y, round_to_int)})"
