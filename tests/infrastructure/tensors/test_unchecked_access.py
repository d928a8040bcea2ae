from unittest import TestCase
import unittest

import numpy as np

from tenview.domain._access_mode import AccessMode, set_access_mode
from tenview.domain._errors import RankMismatchError
from tenview.infrastructure.range import MultiAxisRange
from tenview.infrastructure.tensor import ReadOnlyTensorView, TensorContainer


class TestUncheckedAccess(TestCase):
    """Unchecked mode keeps only the index-count check."""

    def setUp(self):
        self._previous = set_access_mode(AccessMode.UNCHECKED)

    def tearDown(self):
        set_access_mode(self._previous)

    def test_in_range_reads_match_checked_mode(self):
        v = ReadOnlyTensorView(np.arange(12.0), MultiAxisRange([(2, 6), (3, 1)]))
        self.assertEqual(v(2, 3), 8.0)
        self.assertEqual(v.access_mode, AccessMode.UNCHECKED)

    def test_out_of_range_index_is_not_validated(self):
        # Index 3 on an extent-2 axis lands on the next column.
        v = ReadOnlyTensorView(np.arange(6.0), MultiAxisRange.from_dims(2, 3))
        self.assertEqual(v(3, 1), 2.0)

    def test_index_count_still_checked(self):
        t = TensorContainer(2, 3)
        with self.assertRaises(RankMismatchError):
            t(1)

    def test_range_fit_not_validated_at_construction(self):
        v = ReadOnlyTensorView(np.arange(4.0), MultiAxisRange.from_dims(4, 4))
        self.assertEqual(v(4, 1), 3.0)


if __name__ == "__main__":
    unittest.main()
