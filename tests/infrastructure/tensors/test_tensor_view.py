from unittest import TestCase
import unittest

import numpy as np

from tenview.domain._access_mode import AccessMode, set_access_mode
from tenview.domain._errors import (
    EmptyViewError,
    ExtentMismatchError,
    IndexOutOfRangeError,
    RankMismatchError,
)
from tenview.domain._tensor_view import IMutableTensorView, ITensorView
from tenview.infrastructure.range import MultiAxisRange, SingleAxisRange
from tenview.infrastructure.storage import ConstDataSpan, DataSpan
from tenview.infrastructure.tensor import MutableTensorView, ReadOnlyTensorView


class TestReadOnlyTensorView(TestCase):

    def setUp(self):
        self._previous = set_access_mode(AccessMode.CHECKED)
        self.buf = np.arange(12.0)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_strided_view_reads(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange([(2, 6), (3, 1)]))
        self.assertEqual(v.rank(), 2)
        self.assertEqual(v.extents(), (2, 3))
        self.assertEqual(v.stride(1), 6)
        self.assertEqual(v.size(), 6)
        self.assertEqual(v(1, 1), 0.0)
        self.assertEqual(v(2, 1), 6.0)
        self.assertEqual(v(2, 3), 8.0)
        self.assertEqual(v[1, 2], 1.0)
        self.assertEqual(v((2, 2)), 7.0)
        np.testing.assert_array_equal(v.values(), [0, 6, 1, 7, 2, 8])

    def test_single_axis_view(self):
        v = ReadOnlyTensorView(self.buf, SingleAxisRange(4, 3))
        self.assertEqual(v.rank(), 1)
        self.assertEqual(v(4), 9.0)
        self.assertEqual(v[2], 3.0)
        np.testing.assert_array_equal(v.values(), [0, 3, 6, 9])

    def test_single_axis_view_checked_access(self):
        v = ReadOnlyTensorView(self.buf, SingleAxisRange(4, 3))
        with self.assertRaises(IndexOutOfRangeError) as ctx:
            v(5)
        self.assertEqual((ctx.exception.axis, ctx.exception.extent), (1, 4))
        with self.assertRaises(RankMismatchError):
            v(1, 1)

    def test_out_of_range_error_reports_axis(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange([(2, 6), (3, 1)]))
        with self.assertRaises(IndexOutOfRangeError) as ctx:
            v(1, 4)
        self.assertEqual(ctx.exception.axis, 2)
        self.assertEqual(ctx.exception.index, 4)

    def test_float_index_rejected(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(3, 4))
        with self.assertRaises(TypeError):
            v(1.5, 2)

    def test_transpose_view_to_numpy(self):
        buf = np.arange(6.0)
        v = ReadOnlyTensorView(buf, MultiAxisRange([(3, 2), (2, 1)]))
        expected = buf.reshape((2, 3), order="F").T
        np.testing.assert_array_equal(v.to_numpy(), expected)

    def test_rank_zero_view(self):
        v = ReadOnlyTensorView(np.array([4.5]), MultiAxisRange())
        self.assertEqual(v.rank(), 0)
        self.assertEqual(v(), 4.5)
        self.assertEqual(v.size(), 1)

    def test_wrong_index_count(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(3, 4))
        with self.assertRaises(RankMismatchError):
            v(1)
        with self.assertRaises(RankMismatchError):
            v(1, 1, 1)

    def test_out_of_range_index(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(3, 4))
        with self.assertRaises(IndexOutOfRangeError):
            v(4, 1)
        with self.assertRaises(IndexOutOfRangeError):
            v(1, 0)

    def test_range_must_fit_storage(self):
        with self.assertRaises(ExtentMismatchError):
            ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(4, 4))
        with self.assertRaises(ExtentMismatchError):
            ReadOnlyTensorView(self.buf, SingleAxisRange(3, -1))

    def test_storage_without_range_rejected(self):
        with self.assertRaises(ValueError):
            ReadOnlyTensorView(self.buf)

    def test_empty_view(self):
        v = ReadOnlyTensorView()
        self.assertFalse(v)
        self.assertEqual(v.size(), 0)
        self.assertIsNone(v.range())
        with self.assertRaises(EmptyViewError):
            v(1)
        with self.assertRaises(EmptyViewError):
            v.rank()
        with self.assertRaises(EmptyViewError):
            v.values()

    def test_clear_drops_reference_only(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(12))
        v.clear()
        self.assertFalse(v)
        self.assertIsInstance(v.store(), ConstDataSpan)
        np.testing.assert_array_equal(self.buf, np.arange(12.0))

    def test_data_window_is_read_only(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(12))
        with self.assertRaises(ValueError):
            v.data()[0] = 1.0

    def test_view_over_span_with_offset(self):
        span = ConstDataSpan(self.buf, offset=6, size=6)
        v = ReadOnlyTensorView(span, MultiAxisRange.from_dims(2, 3))
        self.assertEqual(v(1, 1), 6.0)
        np.testing.assert_array_equal(v.values(), np.arange(6.0, 12.0))

    def test_read_only_view_has_no_write_surface(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(12))
        self.assertFalse(hasattr(v, "assign_from"))
        self.assertFalse(hasattr(v, "set"))
        with self.assertRaises(TypeError):
            v[1] = 2.0

    def test_protocols(self):
        v = ReadOnlyTensorView(self.buf, MultiAxisRange.from_dims(12))
        self.assertIsInstance(v, ITensorView)
        self.assertNotIsInstance(v, IMutableTensorView)

    def test_str_and_repr(self):
        v = ReadOnlyTensorView(np.arange(4.0), MultiAxisRange.from_dims(2, 2))
        self.assertEqual(
            str(v), "r=2 (extent=2,stride=1)(extent=2,stride=2)\n{0 1 2 3}"
        )
        self.assertIn("owns_range=True", repr(v))
        self.assertIn("empty", repr(ReadOnlyTensorView()))
        self.assertIn("ConstDataSpan", v.debug_storage_repr())


class TestMutableTensorView(TestCase):

    def setUp(self):
        self._previous = set_access_mode(AccessMode.CHECKED)
        self.buf = np.zeros(12)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_element_writes(self):
        v = MutableTensorView(self.buf, MultiAxisRange([(2, 6), (3, 1)]))
        v[2, 3] = 5.0
        self.assertEqual(self.buf[8], 5.0)
        v.set(4.0, 1, 2)
        self.assertEqual(self.buf[1], 4.0)
        v.at(2, 1).value = 3.0
        self.assertEqual(self.buf[6], 3.0)
        self.assertEqual(float(v.at(2, 1)), 3.0)

    def test_write_out_of_range(self):
        v = MutableTensorView(self.buf, MultiAxisRange.from_dims(3, 4))
        with self.assertRaises(IndexOutOfRangeError):
            v[4, 1] = 1.0

    def test_fill_touches_only_addressed_elements(self):
        v = MutableTensorView(self.buf, MultiAxisRange([(2, 6), (3, 1)]))
        v.fill(1.0)
        expected = np.zeros(12)
        expected[[0, 1, 2, 6, 7, 8]] = 1.0
        np.testing.assert_array_equal(self.buf, expected)

    def test_mutable_view_is_usable_as_read_only(self):
        v = MutableTensorView(self.buf, MultiAxisRange.from_dims(12))
        self.assertIsInstance(v, ReadOnlyTensorView)
        self.assertIsInstance(v, ITensorView)
        self.assertIsInstance(v, IMutableTensorView)

    def test_read_only_span_rejected(self):
        with self.assertRaises(TypeError):
            MutableTensorView(ConstDataSpan(self.buf), MultiAxisRange.from_dims(12))

    def test_data_span_used_as_given(self):
        span = DataSpan(self.buf, offset=2, size=4)
        v = MutableTensorView(span, MultiAxisRange.from_dims(4))
        self.assertIs(v.store(), span)
        v[1] = 9.0
        self.assertEqual(self.buf[2], 9.0)
        self.assertTrue(v.data().flags.writeable)

    def test_empty_mutable_view_rejects_writes(self):
        v = MutableTensorView()
        with self.assertRaises(EmptyViewError):
            v[1] = 1.0
        with self.assertRaises(EmptyViewError):
            v.fill(0.0)


if __name__ == "__main__":
    unittest.main()
