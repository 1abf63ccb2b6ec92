import unittest
import numpy as np
import sys
import os

# Ensure src is in path
sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "src"))

from vector_types import (
    ArrayAdapter,
    Point,
    PointAdapter,
    Rect,
    RectAdapter,
    ScalarAdapter,
    SequenceAdapter,
    Size,
    SizeAdapter,
    adapter_for,
)


class TestAdapterFor(unittest.TestCase):
    def test_inference(self):
        self.assertIsInstance(adapter_for(1.5), ScalarAdapter)
        self.assertIsInstance(adapter_for(3), ScalarAdapter)
        self.assertIsInstance(adapter_for(np.float32(1.0)), ScalarAdapter)
        self.assertIsInstance(adapter_for(Point()), PointAdapter)
        self.assertIsInstance(adapter_for(Size()), SizeAdapter)
        self.assertIsInstance(adapter_for(Rect()), RectAdapter)
        self.assertIsInstance(adapter_for((1, 2, 3)), SequenceAdapter)
        self.assertIsInstance(adapter_for(np.zeros(5)), ArrayAdapter)

    def test_widths(self):
        self.assertEqual(adapter_for(1.0).width, 1)
        self.assertEqual(adapter_for(Point()).width, 2)
        self.assertEqual(adapter_for(Rect()).width, 4)
        self.assertEqual(adapter_for([0.0] * 7).width, 7)
        self.assertEqual(adapter_for(np.zeros(64)).width, 64)

    def test_array_keeps_float_dtype(self):
        self.assertEqual(adapter_for(np.zeros(3, dtype=np.float32)).dtype, np.float32)
        self.assertEqual(adapter_for(np.zeros(3, dtype=np.int64)).dtype, np.float64)

    def test_unsupported(self):
        for value in ("abc", None, {"x": 1}):
            with self.assertRaises(TypeError):
                adapter_for(value)


class TestAdapters(unittest.TestCase):
    def test_scalar(self):
        adapter = ScalarAdapter()
        vec = adapter.to_vector(2.5)
        np.testing.assert_array_equal(vec, [2.5])
        self.assertEqual(adapter.from_vector(vec), 2.5)
        self.assertEqual(adapter.zero(), 0.0)

    def test_sequence_returns_tuple(self):
        adapter = SequenceAdapter(3)
        self.assertEqual(adapter.from_vector(adapter.to_vector([1, 2, 3])), (1.0, 2.0, 3.0))
        self.assertEqual(adapter.zero(), (0.0, 0.0, 0.0))
        with self.assertRaises(ValueError):
            adapter.to_vector((1, 2))

    def test_array_copies(self):
        adapter = ArrayAdapter(3)
        source = np.array([1.0, 2.0, 3.0])
        vec = adapter.to_vector(source)
        vec[0] = 99.0
        self.assertEqual(source[0], 1.0)

        out = adapter.from_vector(vec)
        out[1] = -1.0
        self.assertEqual(vec[1], 2.0)

        with self.assertRaises(ValueError):
            adapter.to_vector(np.zeros(4))

    def test_scalar_rejects_sequences(self):
        adapter = ScalarAdapter()
        for bad in ([1.0, 2.0], (1.0,), np.zeros(3)):
            with self.assertRaises(ValueError):
                adapter.to_vector(bad)
        np.testing.assert_array_equal(adapter.to_vector(np.float64(4.0)), [4.0])

    def test_array_shape_round_trip(self):
        source = np.arange(6.0).reshape(2, 3)
        adapter = adapter_for(source)
        self.assertEqual(adapter.width, 6)
        vec = adapter.to_vector(source)
        self.assertEqual(vec.shape, (6,))
        out = adapter.from_vector(vec)
        self.assertEqual(out.shape, (2, 3))
        np.testing.assert_array_equal(out, source)
        self.assertEqual(adapter.zero().shape, (2, 3))

        with self.assertRaises(ValueError):
            adapter.to_vector(np.zeros(6))
        with self.assertRaises(ValueError):
            ArrayAdapter(6, shape=(4, 2))

    def test_geometry(self):
        self.assertEqual(PointAdapter().from_vector(PointAdapter().to_vector(Point(1, 2))), Point(1, 2))
        self.assertEqual(SizeAdapter().zero(), Size(0.0, 0.0))
        rect = Rect(1, 2, 30, 40)
        np.testing.assert_array_equal(RectAdapter().to_vector(rect), [1, 2, 30, 40])
        self.assertEqual(rect.center, Point(16.0, 22.0))

    def test_dtype(self):
        adapter = PointAdapter(np.float32)
        self.assertEqual(adapter.to_vector(Point(1, 2)).dtype, np.float32)
        self.assertEqual(adapter.zero_vector().dtype, np.float32)


if __name__ == "__main__":
    unittest.main()
