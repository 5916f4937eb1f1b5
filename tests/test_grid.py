import unittest
import sys
import os

# Add project root to path so we can import maze_tracer
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_tracer.core.graph import (
    GridGraph, Edge, EdgeState, VertexLabel, new_maze, cell_id, cell_coords
)

class TestGridGraph(unittest.TestCase):
    def test_initialization(self):
        side = 3
        graph = new_maze(side)
        self.assertEqual(graph.size, side * side)
        self.assertEqual(graph.side, side)

        for cid in range(graph.size):
            self.assertEqual(graph.vertices[cid], VertexLabel.NONE)
            for edge in graph.get_edges(cid):
                self.assertEqual(edge.state, EdgeState.CLOSED)

    def test_neighbor_counts(self):
        graph = new_maze(3)
        # Corner 2, border 3, centre 4
        self.assertEqual(len(graph.get_edges(0)), 2)
        self.assertEqual(len(graph.get_edges(1)), 3)
        self.assertEqual(len(graph.get_edges(4)), 4)

        targets = sorted(e.target for e in graph.get_edges(4))
        self.assertEqual(targets, [1, 3, 5, 7])

    def test_each_pair_recorded_from_both_ends(self):
        graph = new_maze(4)
        total = sum(len(graph.get_edges(cid)) for cid in range(graph.size))
        # 2 * side * (side - 1) undirected pairs, each stored twice
        self.assertEqual(total, 2 * 2 * 4 * 3)

        for cid in range(graph.size):
            for edge in graph.get_edges(cid):
                self.assertIsNotNone(graph.get_edge(edge.target, cid))
                # Independent records
                self.assertIsNot(graph.get_edge(edge.target, cid), edge)

    def test_single_cell(self):
        graph = new_maze(1)
        self.assertEqual(graph.size, 1)
        self.assertIsNone(graph.get_edges(0))

    def test_invalid_side(self):
        with self.assertRaises(ValueError):
            new_maze(0)
        with self.assertRaises(ValueError):
            new_maze(-3)

    def test_coordinates(self):
        self.assertEqual(cell_id(2, 2, 5), 12) # 2 * 5 + 2
        self.assertEqual(cell_coords(12, 5), (2, 2))
        self.assertEqual(cell_coords(3, 2), (1, 1))

        with self.assertRaises(IndexError):
            cell_id(-1, 0, 5)
        with self.assertRaises(IndexError):
            cell_id(0, 5, 5)
        with self.assertRaises(IndexError):
            cell_coords(4, 2)

    def test_push_edge_does_not_deduplicate(self):
        graph = GridGraph(2)
        graph.push_edge(0, 1, EdgeState.CLOSED)
        graph.push_edge(0, 1, EdgeState.CLOSED)
        self.assertEqual(len(graph.get_edges(0)), 2)
        # Never a source
        self.assertIsNone(graph.get_edges(1))

    def test_push_vertex_overwrites(self):
        graph = GridGraph(3)
        graph.push_vertex(1, VertexLabel.START)
        graph.push_vertex(1, VertexLabel.END)
        self.assertEqual(graph.vertices[1], VertexLabel.END)

    def test_out_of_range_ids(self):
        graph = GridGraph(3)
        with self.assertRaises(IndexError):
            graph.push_edge(0, 3)
        with self.assertRaises(IndexError):
            graph.get_edges(-1)
        with self.assertRaises(ValueError):
            GridGraph(0)

    def test_get_edges_is_read_only_view(self):
        graph = new_maze(2)
        view = graph.get_edges(0)
        self.assertIsInstance(view, tuple)

        live = graph.get_mut_edges(0)
        live[0].state = EdgeState.OPEN
        self.assertTrue(graph.get_edges(0)[0].is_open)

    def test_open_passage(self):
        graph = new_maze(2)
        # 0,0  1,0
        # 0,1  1,1
        graph.open_passage(0, 1)

        self.assertTrue(graph.is_open(0, 1))
        self.assertTrue(graph.is_open(1, 0))
        # Others remain
        self.assertFalse(graph.is_open(0, 2))
        self.assertFalse(graph.is_open(1, 3))
        self.assertEqual(list(graph.open_neighbors(0)), [1])

    def test_open_passage_without_reciprocal(self):
        graph = GridGraph(2)
        graph.push_edge(0, 1)
        graph.open_passage(0, 1)
        self.assertTrue(graph.is_open(0, 1))
        self.assertIsNone(graph.get_edge(1, 0))

        with self.assertRaises(KeyError):
            graph.open_passage(1, 0)

    def test_set_state(self):
        graph = new_maze(2)
        self.assertTrue(graph.set_state(0, 2, EdgeState.OPEN))
        self.assertTrue(graph.is_open(0, 2))
        self.assertFalse(graph.is_open(2, 0))
        # 0 and 3 are not neighbours
        self.assertFalse(graph.set_state(0, 3, EdgeState.OPEN))

    def test_copy_is_independent(self):
        graph = new_maze(3)
        graph.open_passage(0, 1)
        clone = graph.copy()

        clone.open_passage(4, 5)
        self.assertTrue(clone.is_open(0, 1))
        self.assertFalse(graph.is_open(4, 5))
        self.assertEqual(sorted(graph.open_edges()), [(0, 1), (1, 0)])

    def test_edge_equality(self):
        self.assertEqual(Edge(3, EdgeState.OPEN), Edge(3, EdgeState.OPEN))
        self.assertNotEqual(Edge(3, EdgeState.OPEN), Edge(3, EdgeState.CLOSED))

if __name__ == '__main__':
    unittest.main()
