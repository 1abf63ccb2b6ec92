import numpy as np


def map_range(value, in_min, in_max, out_min, out_max):
    """
    將數值從一個範圍映射到另一個範圍。
    例如：將滑鼠的 x (0~1280) 映射到 response (0.2~1.0)
    """
    # 先算出正規化比例 (0.0 ~ 1.0)
    norm = (value - in_min) / (in_max - in_min)
    # 限制在 0.0 ~ 1.0 之間 (Clamping)
    norm = max(0.0, min(1.0, norm))
    # 映射到輸出範圍
    return out_min + norm * (out_max - out_min)


def approximately_equal(a, b, epsilon):
    """True if every component of a and b differs by at most epsilon."""
    return bool(np.all(np.abs(np.asarray(a) - np.asarray(b)) <= epsilon))


def approximately_zero(v, epsilon):
    return bool(np.all(np.abs(np.asarray(v)) <= epsilon))


def clamp_vector(v, lower, upper):
    """
    Component-wise clamp, in place when v is an ndarray.
    :return: the clamped vector
    """
    if isinstance(v, np.ndarray):
        return np.clip(v, lower, upper, out=v)
    return np.clip(v, lower, upper)


def validate_range(lower, upper):
    """
    :param lower: (N,) lower bounds
    :param upper: (N,) upper bounds
    :raises ValueError: when shapes differ or any lower > upper
    """
    lower = np.asarray(lower)
    upper = np.asarray(upper)
    if lower.shape != upper.shape:
        raise ValueError(
            f"clamping bounds must have the same shape, got {lower.shape} and {upper.shape}"
        )
    inverted = lower > upper
    if np.any(inverted):
        idx = np.flatnonzero(inverted).tolist()
        raise ValueError(f"clamping range is inverted at component(s) {idx}")
    return lower, upper
