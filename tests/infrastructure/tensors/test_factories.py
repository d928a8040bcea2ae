from unittest import TestCase
import unittest

import numpy as np

from tenview.domain._access_mode import AccessMode, set_access_mode
from tenview.domain._errors import TemporarySourceError
from tenview.infrastructure.range import MultiAxisRange, SingleAxisRange
from tenview.infrastructure.storage import ConstDataSpan, DataSpan
from tenview.infrastructure.tensor import (
    ExternalRange,
    MutableTensorView,
    ReadOnlyTensorView,
    TensorContainer,
    make_ref,
    make_refc,
    make_ten_ref,
)


class TestMakeRef(TestCase):

    def setUp(self):
        self._previous = set_access_mode(AccessMode.CHECKED)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_make_ref_of_container(self):
        t = TensorContainer(2, 2)
        v = make_ref(t)
        self.assertIsInstance(v, MutableTensorView)
        v[1, 2] = 3.0
        self.assertEqual(t(1, 2), 3.0)

    def test_make_ref_of_mutable_view_copies_view(self):
        t = TensorContainer(2)
        v = make_ref(t)
        w = make_ref(v)
        self.assertIsNot(v, w)
        self.assertIs(w.range(), v.range())
        w[2] = 1.0
        self.assertEqual(t(2), 1.0)

    def test_make_ref_rejects_read_only_view(self):
        t = TensorContainer(2)
        with self.assertRaises(TemporarySourceError):
            make_ref(make_refc(t))

    def test_make_ref_rejects_non_tensor(self):
        with self.assertRaises(TemporarySourceError):
            make_ref(np.zeros(3))
        with self.assertRaises(TemporarySourceError):
            make_ref(TensorContainer())

    def test_make_refc_of_container_over_read_only_buffer(self):
        buf = np.arange(6.0)
        buf.flags.writeable = False
        t = TensorContainer.from_storage(buf, MultiAxisRange.from_dims(2, 3))
        v = make_refc(t)
        self.assertIs(type(v), ReadOnlyTensorView)
        self.assertEqual(v(2, 3), 5.0)
        np.testing.assert_array_equal(v.values(), buf)
        self.assertFalse(v.data().flags.writeable)

    def test_make_ref_of_container_over_read_only_buffer_rejected(self):
        buf = np.arange(6.0)
        buf.flags.writeable = False
        t = TensorContainer.from_storage(buf, MultiAxisRange.from_dims(2, 3))
        with self.assertRaises(ValueError):
            make_ref(t)

    def test_make_refc_of_container_and_views(self):
        t = TensorContainer(3)
        c = make_refc(t)
        self.assertIs(type(c), ReadOnlyTensorView)
        self.assertIs(type(make_refc(make_ref(t))), ReadOnlyTensorView)
        self.assertIs(type(make_refc(c)), ReadOnlyTensorView)
        with self.assertRaises(TemporarySourceError):
            make_refc("not a tensor")


class TestMakeTenRef(TestCase):

    def setUp(self):
        self._previous = set_access_mode(AccessMode.CHECKED)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_writeable_buffer_gives_mutable_view(self):
        buf = np.zeros(6)
        v = make_ten_ref(buf, MultiAxisRange.from_dims(2, 3))
        self.assertIsInstance(v, MutableTensorView)
        v[2, 3] = 1.0
        self.assertEqual(buf[5], 1.0)
        self.assertIsNone(v.source())

    def test_read_only_buffer_gives_read_only_view(self):
        buf = np.arange(4.0)
        buf.flags.writeable = False
        v = make_ten_ref(buf, SingleAxisRange(4))
        self.assertIs(type(v), ReadOnlyTensorView)
        self.assertEqual(v(4), 3.0)

    def test_readonly_flag_forces_read_only_view(self):
        v = make_ten_ref(np.zeros(4), SingleAxisRange(4), readonly=True)
        self.assertIs(type(v), ReadOnlyTensorView)

    def test_offset_and_size_window(self):
        buf = np.arange(10.0)
        v = make_ten_ref(buf, SingleAxisRange(2, 2), offset=5, size=3)
        np.testing.assert_array_equal(v.values(), [5.0, 7.0])

    def test_spans_are_used_as_given(self):
        buf = np.arange(4.0)
        self.assertIsInstance(
            make_ten_ref(DataSpan(buf), SingleAxisRange(4)), MutableTensorView
        )
        self.assertIs(
            type(make_ten_ref(ConstDataSpan(buf), SingleAxisRange(4))),
            ReadOnlyTensorView,
        )

    def test_range_ownership_flags(self):
        rng = MultiAxisRange.from_dims(2, 2)
        buf = np.zeros(4)
        self.assertIs(make_ten_ref(buf, ExternalRange(rng)).range(), rng)
        self.assertIs(make_ten_ref(buf, rng, transfer=True).range(), rng)
        self.assertIsNot(make_ten_ref(buf, rng).range(), rng)

    def test_rejects_non_buffer(self):
        with self.assertRaises(TemporarySourceError):
            make_ten_ref([0.0, 1.0], SingleAxisRange(2))


if __name__ == "__main__":
    unittest.main()
