from abc import ABC, abstractmethod
from dataclasses import dataclass
import numbers

import numpy as np

from Const import DEFAULT_DTYPE


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def center(self):
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)


class VectorAdapter(ABC):
    """
    Maps a domain value (float, Point, Rect, ...) to a flat numeric vector
    and back. The spring only ever sees the vector.
    """

    width = 0

    def __init__(self, dtype=DEFAULT_DTYPE):
        self.dtype = np.dtype(dtype)

    @abstractmethod
    def to_vector(self, value) -> np.ndarray:
        pass

    @abstractmethod
    def from_vector(self, vector: np.ndarray):
        pass

    def zero(self):
        return self.from_vector(np.zeros(self.width, dtype=self.dtype))

    def zero_vector(self) -> np.ndarray:
        return np.zeros(self.width, dtype=self.dtype)


class ScalarAdapter(VectorAdapter):
    width = 1

    def to_vector(self, value):
        if np.ndim(value) != 0:
            raise ValueError(f"expected a single number, got shape {np.shape(value)}")
        return np.array([value], dtype=self.dtype)

    def from_vector(self, vector):
        return float(vector[0])


class SequenceAdapter(VectorAdapter):
    """Tuples / lists of a fixed length. Always hands back tuples."""

    def __init__(self, width, dtype=DEFAULT_DTYPE):
        super().__init__(dtype)
        self.width = width

    def to_vector(self, value):
        vec = np.array(value, dtype=self.dtype).reshape(-1)
        if vec.shape[0] != self.width:
            raise ValueError(f"expected {self.width} components, got {vec.shape[0]}")
        return vec

    def from_vector(self, vector):
        return tuple(float(c) for c in vector)


class ArrayAdapter(VectorAdapter):
    """
    numpy arrays of a fixed shape, flattened for the spring and reshaped on
    the way out. Copies both ways so callers never alias the state.
    """

    def __init__(self, width, dtype=DEFAULT_DTYPE, shape=None):
        super().__init__(dtype)
        self.width = width
        self.shape = (width,) if shape is None else tuple(shape)
        if int(np.prod(self.shape)) != width:
            raise ValueError(f"shape {self.shape} does not hold {width} components")

    def to_vector(self, value):
        arr = np.array(value, dtype=self.dtype)
        if arr.shape != self.shape:
            raise ValueError(f"expected shape {self.shape}, got {arr.shape}")
        return arr.reshape(-1)

    def from_vector(self, vector):
        return np.array(vector, dtype=self.dtype).reshape(self.shape)


class PointAdapter(VectorAdapter):
    width = 2

    def to_vector(self, value):
        return np.array([value.x, value.y], dtype=self.dtype)

    def from_vector(self, vector):
        return Point(float(vector[0]), float(vector[1]))


class SizeAdapter(VectorAdapter):
    width = 2

    def to_vector(self, value):
        return np.array([value.width, value.height], dtype=self.dtype)

    def from_vector(self, vector):
        return Size(float(vector[0]), float(vector[1]))


class RectAdapter(VectorAdapter):
    width = 4

    def to_vector(self, value):
        return np.array([value.x, value.y, value.width, value.height], dtype=self.dtype)

    def from_vector(self, vector):
        return Rect(*(float(c) for c in vector))


def adapter_for(value, dtype=DEFAULT_DTYPE):
    """
    Pick an adapter from a sample value.
    :raises TypeError: for value types with no vector representation
    """
    if isinstance(value, Point):
        return PointAdapter(dtype)
    if isinstance(value, Size):
        return SizeAdapter(dtype)
    if isinstance(value, Rect):
        return RectAdapter(dtype)
    if isinstance(value, np.ndarray):
        if value.dtype.kind == "f":
            dtype = value.dtype
        return ArrayAdapter(value.size, dtype, shape=value.shape)
    if isinstance(value, numbers.Real):
        return ScalarAdapter(dtype)
    if isinstance(value, (tuple, list)):
        return SequenceAdapter(len(value), dtype)
    raise TypeError(f"cannot animate values of type {type(value).__name__}")
