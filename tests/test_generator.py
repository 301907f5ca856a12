import unittest

import numpy as np

from tspsearch.generator import generate_map


class TestGenerateMap(unittest.TestCase):
    def test_symmetric_with_zero_diagonal(self):
        matrix = generate_map(5, (25, 40))
        self.assertIsNotNone(matrix)
        self.assertEqual(matrix.shape, (5, 5))
        np.testing.assert_array_equal(matrix, matrix.T)
        np.testing.assert_array_equal(np.diag(matrix), np.zeros(5))

    def test_weights_in_half_open_range(self):
        matrix = generate_map(30, (25, 40), rng=0)
        off_diagonal = matrix[~np.eye(30, dtype=bool)]
        self.assertGreaterEqual(off_diagonal.min(), 25)
        self.assertLess(off_diagonal.max(), 40)

    def test_single_weight_range(self):
        matrix = generate_map(4, (3, 4), rng=0)
        self.assertTrue(np.all(matrix == 3 * (1 - np.eye(4, dtype=np.uint16))))

    def test_seeded(self):
        np.testing.assert_array_equal(generate_map(6, (0, 300), rng=11), generate_map(6, (0, 300), rng=11))

    def test_dtype(self):
        self.assertEqual(generate_map(3, (0, 10)).dtype, np.uint16)

    def test_degenerate_range_rejected(self):
        for n in (0, 1, 5, 10):
            for w in (0, 1, 300):
                with self.assertLogs("tspsearch.generator", level="ERROR") as logs:
                    self.assertIsNone(generate_map(n, (w, w)))
                self.assertIn("reversed or empty", logs.output[0])

    def test_reversed_range_rejected(self):
        with self.assertLogs("tspsearch.generator", level="ERROR"):
            self.assertIsNone(generate_map(5, (40, 25)))

    def test_range_outside_uint16_rejected(self):
        with self.assertLogs("tspsearch.generator", level="ERROR"):
            self.assertIsNone(generate_map(5, (-1, 10)))
        with self.assertLogs("tspsearch.generator", level="ERROR"):
            self.assertIsNone(generate_map(5, (0, 70000)))

    def test_full_uint16_range(self):
        self.assertIsNotNone(generate_map(5, (0, 65536), rng=0))

    def test_negative_city_count_rejected(self):
        with self.assertLogs("tspsearch.generator", level="ERROR"):
            self.assertIsNone(generate_map(-1, (0, 10)))

    def test_zero_cities(self):
        matrix = generate_map(0, (0, 10))
        self.assertEqual(matrix.shape, (0, 0))


if __name__ == '__main__':
    unittest.main()
