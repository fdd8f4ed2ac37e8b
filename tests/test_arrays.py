import unittest

import numpy as np

from simple_graphs import MAX_VERTICES, AdjacencyMatrix, GraphStateError, from_numpy, to_numpy


class ToNumpyTest(unittest.TestCase):
    def test_triangle(self):
        mat = to_numpy(AdjacencyMatrix("Bw"))
        self.assertEqual(mat.dtype, np.uint8)
        np.testing.assert_array_equal(mat, np.ones((3, 3), dtype=np.uint8) - np.eye(3, dtype=np.uint8))

    def test_empty(self):
        self.assertEqual(to_numpy(AdjacencyMatrix("?")).shape, (0, 0))

    def test_dtype(self):
        mat = to_numpy(AdjacencyMatrix("DQc"), dtype=bool)
        self.assertEqual(mat.dtype, np.bool_)
        self.assertTrue(mat[0, 4])
        self.assertFalse(mat[0, 1])

    def test_gap_rejected(self):
        g = AdjacencyMatrix("Bw")
        g.delete_vertex(0)
        with self.assertRaises(GraphStateError):
            to_numpy(g)


class FromNumpyTest(unittest.TestCase):
    def test_matches_graph6(self):
        g = AdjacencyMatrix("DQc")
        self.assertEqual(from_numpy(to_numpy(g)), g)

    def test_nested_lists(self):
        g = from_numpy([[0, 1, 0], [1, 0, 1], [0, 1, 0]])
        self.assertEqual(g.vertices(), {0, 1, 2})
        self.assertEqual(g.edges(), {(0, 1), (1, 2)})

    def test_rejects_bad_matrices(self):
        with self.assertRaises(ValueError):
            from_numpy(np.zeros((2, 3)))
        with self.assertRaises(ValueError):
            from_numpy(np.zeros(4))
        with self.assertRaises(ValueError):
            from_numpy(np.zeros((MAX_VERTICES + 1, MAX_VERTICES + 1)))
        with self.assertRaises(ValueError):
            from_numpy([[0, 1], [0, 0]])
        with self.assertRaises(ValueError):
            from_numpy([[1, 0], [0, 0]])


if __name__ == "__main__":
    unittest.main()
