NEUTRAL_SCORE = 50.0


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def safe_score(value, fallback: float = NEUTRAL_SCORE) -> float:
    """
    Coerce a raw slider value into a 0-100 score.

    Booleans, None, strings that don't parse and NaN all fall back to the
    neutral midpoint instead of raising.
    """
    if value is None or isinstance(value, bool):
        return fallback

    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback

    if number != number:  # NaN
        return fallback

    return clamp(number)


def mean_or_neutral(values: list[float]) -> float:
    if not values:
        return NEUTRAL_SCORE
    return sum(values) / len(values)
