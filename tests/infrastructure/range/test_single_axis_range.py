from unittest import TestCase
import copy
import unittest

from tenview.domain._access_mode import AccessMode, access_mode, set_access_mode
from tenview.domain._errors import AxisIndexError, IndexOutOfRangeError
from tenview.domain._range import IRange
from tenview.infrastructure.range import (
    AxisDescriptor,
    SingleAxisRange,
    SingleAxisRangeIter,
)


class TestAxisDescriptor(TestCase):

    def test_default_stride_is_one(self):
        self.assertEqual(AxisDescriptor(5), AxisDescriptor(5, 1))

    def test_negative_extent_rejected(self):
        with self.assertRaises(ValueError):
            AxisDescriptor(-1, 1)

    def test_non_integer_values_rejected(self):
        with self.assertRaises(ValueError):
            AxisDescriptor(2.5, 1)
        with self.assertRaises(ValueError):
            AxisDescriptor(2, 1.5)

    def test_str(self):
        self.assertEqual(str(AxisDescriptor(3, 2)), "(extent=3,stride=2)")


class TestSingleAxisRange(TestCase):

    def setUp(self):
        self._previous = set_access_mode(AccessMode.CHECKED)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_geometry(self):
        r = SingleAxisRange(4, 2)
        self.assertEqual(r.rank(), 1)
        self.assertEqual(r.extent(), 4)
        self.assertEqual(r.extent(1), 4)
        self.assertEqual(r.stride(1), 2)
        self.assertEqual(r.total_count(), 4)
        self.assertEqual(len(r), 4)
        self.assertFalse(r.is_contiguous())
        self.assertTrue(SingleAxisRange(4).is_contiguous())
        self.assertIsInstance(r, IRange)

    def test_axis_other_than_one_rejected(self):
        r = SingleAxisRange(4, 2)
        with self.assertRaises(AxisIndexError):
            r.extent(2)
        with self.assertRaises(AxisIndexError):
            r.stride(0)

    def test_offset(self):
        r = SingleAxisRange(4, 3)
        self.assertEqual(r.offset(1), 0)
        self.assertEqual(r.offset(4), 9)

    def test_offset_out_of_range_checked(self):
        r = SingleAxisRange(4, 3)
        with self.assertRaises(IndexOutOfRangeError):
            r.offset(5)
        with self.assertRaises(IndexOutOfRangeError):
            r.offset(0)

    def test_offset_out_of_range_unchecked_is_plain_arithmetic(self):
        r = SingleAxisRange(4, 3)
        with access_mode(AccessMode.UNCHECKED):
            self.assertEqual(r.offset(6), 15)

    def test_iteration_yields_strided_offsets(self):
        self.assertEqual(list(SingleAxisRange(4, 2)), [0, 2, 4, 6])

    def test_empty_range_yields_nothing(self):
        r = SingleAxisRange(0, 5)
        self.assertEqual(list(r), [])
        self.assertEqual(r.total_count(), 0)

    def test_zero_stride_yields_extent_offsets(self):
        self.assertEqual(list(SingleAxisRange(3, 0)), [0, 0, 0])

    def test_negative_stride_walks_backwards(self):
        self.assertEqual(list(SingleAxisRange(3, -2)), [0, -2, -4])

    def test_normalized(self):
        r = SingleAxisRange(4, 3).normalized()
        self.assertEqual(r, SingleAxisRange(4, 1))
        self.assertTrue(r.is_normal())

    def test_equality_and_hash(self):
        self.assertEqual(SingleAxisRange(4, 2), SingleAxisRange(4, 2))
        self.assertNotEqual(SingleAxisRange(4, 2), SingleAxisRange(4, 1))
        self.assertEqual(hash(SingleAxisRange(4, 2)), hash(SingleAxisRange(4, 2)))

    def test_copy_is_equal_but_distinct(self):
        r = SingleAxisRange(4, 2)
        c = copy.copy(r)
        self.assertEqual(r, c)
        self.assertIsNot(r, c)

    def test_str_and_repr(self):
        r = SingleAxisRange(4, 2)
        self.assertEqual(str(r), "(extent=4,stride=2)")
        self.assertIn("SingleAxisRange", repr(r))


class TestSingleAxisRangeIter(TestCase):

    def setUp(self):
        self._previous = set_access_mode(AccessMode.CHECKED)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_begin_and_end_indices(self):
        r = SingleAxisRange(4, 2)
        it = r.begin()
        self.assertEqual(it.index, 1)
        self.assertEqual(it.offset, 0)
        end = r.end()
        self.assertEqual(end.index, 9)
        self.assertEqual(end.offset, 8)

    def test_walk_reaches_end(self):
        r = SingleAxisRange(4, 2)
        it = r.begin()
        seen = []
        while it != r.end():
            seen.append(it.index)
            it += 1
        self.assertEqual(seen, [1, 3, 5, 7])
        self.assertTrue(it == r.end())

    def test_advance_by_n_and_retreat(self):
        it = SingleAxisRangeIter(3)
        it.advance(2)
        self.assertEqual(it.index, 7)
        it -= 1
        self.assertEqual(it.index, 4)
        it.retreat()
        self.assertEqual(it.offset, 0)

    def test_binary_add_sub_do_not_mutate(self):
        it = SingleAxisRangeIter(2)
        moved = it + 3
        self.assertEqual(moved.index, 7)
        self.assertEqual(it.index, 1)
        back = moved - 1
        self.assertEqual(back.index, 5)

    def test_ordering(self):
        a = SingleAxisRangeIter(2, 1)
        b = SingleAxisRangeIter(2, 5)
        self.assertTrue(a < b)
        self.assertFalse(b < a)

    def test_different_strides_rejected_in_checked_mode(self):
        a = SingleAxisRangeIter(2, 1)
        b = SingleAxisRangeIter(3, 1)
        with self.assertRaises(ValueError):
            a == b

    def test_different_strides_compare_offsets_unchecked(self):
        a = SingleAxisRangeIter(2, 1)
        b = SingleAxisRangeIter(3, 1)
        with access_mode(AccessMode.UNCHECKED):
            self.assertTrue(a == b)

    def test_iterators_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(SingleAxisRangeIter(1))


if __name__ == "__main__":
    unittest.main()
