# core/utils.py

# Tolerance for float comparisons and the over/under point offset.
EPSILON = 1e-5


def float_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    if a == b:
        return True
    return abs(a - b) < epsilon
