BASE_WEIGHT = 1.0

# Dimensions the catalog flags as a destination's main draw count double
PRIMARY_DRIVER_WEIGHT = 2.0


def dimension_weights(breakdown: dict[str, float], primary_dimensions=()) -> dict[str, float]:
    primary = set(primary_dimensions)
    return {
        name: PRIMARY_DRIVER_WEIGHT if name in primary else BASE_WEIGHT
        for name in breakdown
    }


def aggregate_match(breakdown: dict[str, float], primary_dimensions=()) -> float:
    """
    Aggregate per-dimension alignment into a single fit score.

    Unweighted mean of the available dimensions unless the destination
    flags primary drivers. An empty breakdown has nothing to fit on and
    scores 0.
    """
    if not breakdown:
        return 0.0

    weights = dimension_weights(breakdown, primary_dimensions)
    total_weight = sum(weights.values())

    return sum(weights[name] * value for name, value in breakdown.items()) / total_weight
