def clamp(value: int, low: int, high: int) -> int:
    """
    Restricts value to the closed range [low, high].
    """
    return max(low, min(value, high))
