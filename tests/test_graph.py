"""
Unit tests for the graph store.
"""

import unittest

from indexgraph.core.exceptions import InvalidIndexError
from indexgraph.graph.indices import EdgeIndex, NodeIndex
from indexgraph.graph.store import Edge, Graph, Node


class TestIndices(unittest.TestCase):
    """Tests for node and edge handles."""

    def test_equality_and_hashing(self):
        self.assertEqual(NodeIndex(3), NodeIndex(3))
        self.assertNotEqual(NodeIndex(3), NodeIndex(4))
        self.assertEqual(len({NodeIndex(1), NodeIndex(1), NodeIndex(2)}), 2)

    def test_ordering(self):
        self.assertLess(NodeIndex(1), NodeIndex(2))
        self.assertEqual(sorted([EdgeIndex(2), EdgeIndex(0)]), [EdgeIndex(0), EdgeIndex(2)])

    def test_int_and_repr(self):
        self.assertEqual(int(NodeIndex(7)), 7)
        self.assertEqual(repr(EdgeIndex(2)), "EdgeIndex(2)")

    def test_node_and_edge_are_distinct(self):
        self.assertNotEqual(NodeIndex(0), EdgeIndex(0))


class TestGraphConstruction(unittest.TestCase):
    """Tests for adding nodes and edges."""

    def setUp(self):
        self.graph = Graph()

    def test_empty_graph(self):
        """Test empty graph creation."""
        self.assertEqual(self.graph.node_count, 0)
        self.assertEqual(self.graph.edge_count, 0)
        self.assertEqual(len(self.graph), 0)
        self.assertEqual(self.graph.nodes(), [])
        self.assertEqual(self.graph.edges(), [])

    def test_add_node_assigns_dense_indices(self):
        indices = [self.graph.add_node(value) for value in "abc"]

        self.assertEqual(indices, [NodeIndex(0), NodeIndex(1), NodeIndex(2)])
        self.assertEqual(self.graph.node_count, 3)

    def test_add_edge_assigns_dense_indices(self):
        a = self.graph.add_node("a")
        b = self.graph.add_node("b")

        self.assertEqual(self.graph.add_edge(a, b), EdgeIndex(0))
        self.assertEqual(self.graph.add_edge(b, a), EdgeIndex(1))
        self.assertEqual(self.graph.edges(), [EdgeIndex(0), EdgeIndex(1)])

    def test_nodes_in_insertion_order(self):
        a = self.graph.add_node("a")
        b = self.graph.add_node("b")

        self.assertEqual(self.graph.nodes(), [(a, "a"), (b, "b")])

    def test_index_stability(self):
        """Earlier indices resolve to the same data after more insertions."""
        nodes = [self.graph.add_node(i * 10) for i in range(5)]
        first_edge = self.graph.add_edge(nodes[0], nodes[1])

        for i in range(5, 50):
            extra = self.graph.add_node(i * 10)
            self.graph.add_edge(nodes[i % 5], extra)

        for i, node in enumerate(nodes):
            self.assertEqual(self.graph.node_value(node), i * 10)
        self.assertEqual(self.graph.edge_target(first_edge), nodes[1])

    def test_edge_list_threading(self):
        a = self.graph.add_node("a")
        b = self.graph.add_node("b")
        c = self.graph.add_node("c")
        first = self.graph.add_edge(a, b)
        second = self.graph.add_edge(a, c)

        self.assertEqual(self.graph.outgoing_edges(a), [second, first])
        self.assertEqual(self.graph.outgoing_edges(b), [])
        self.assertEqual(self.graph._edges[second.index], Edge(c, first))
        self.assertEqual(self.graph._nodes[a.index], Node("a", second))

    def test_self_loop(self):
        a = self.graph.add_node("a")
        self.graph.add_edge(a, a)

        self.assertEqual(list(self.graph.successors(a)), [a])


class TestSuccessors(unittest.TestCase):
    """Tests for successor enumeration."""

    def setUp(self):
        self.graph = Graph()
        self.source = self.graph.add_node(0)
        self.targets = [self.graph.add_node(i) for i in range(1, 4)]
        for target in self.targets:
            self.graph.add_edge(self.source, target)

    def test_reverse_insertion_order(self):
        t1, t2, t3 = self.targets
        self.assertEqual(list(self.graph.successors(self.source)), [t3, t2, t1])

    def test_completeness(self):
        """Successor count equals the number of edges added from each node."""
        self.graph.add_edge(self.targets[0], self.source)
        self.graph.add_edge(self.targets[0], self.targets[1])

        expected = {self.source: 3, self.targets[0]: 2, self.targets[1]: 0, self.targets[2]: 0}
        for node, count in expected.items():
            self.assertEqual(len(list(self.graph.successors(node))), count)

    def test_parallel_edges_repeat_target(self):
        self.graph.add_edge(self.source, self.targets[0])

        successors = list(self.graph.successors(self.source))
        self.assertEqual(successors.count(self.targets[0]), 2)

    def test_fresh_iterator_per_call(self):
        successors = self.graph.successors(self.source)
        next(successors)

        self.assertEqual(len(list(successors)), 2)
        self.assertEqual(len(list(self.graph.successors(self.source))), 3)

    def test_exhausted_iterator_stays_exhausted(self):
        successors = self.graph.successors(self.source)
        list(successors)

        self.assertEqual(list(successors), [])

    def test_size_hint(self):
        lower, upper = self.graph.successors(self.source).size_hint()

        self.assertEqual(lower, 0)
        self.assertGreaterEqual(upper, 3)


class TestNodeValues(unittest.TestCase):
    """Tests for value access and lookup."""

    def setUp(self):
        self.graph = Graph()

    def test_node_value(self):
        node = self.graph.add_node({"name": "x"})
        self.assertEqual(self.graph.node_value(node), {"name": "x"})

    def test_set_node_value(self):
        node = self.graph.add_node(1)
        other = self.graph.add_node(2)

        self.graph.set_node_value(node, 10)

        self.assertEqual(self.graph.node_value(node), 10)
        self.assertEqual(self.graph.node_value(other), 2)
        self.assertEqual(self.graph.find_node(10), node)

    def test_mutable_value_updated_in_place(self):
        node = self.graph.add_node([])
        self.graph.node_value(node).append("x")

        self.assertEqual(self.graph.node_value(node), ["x"])

    def test_find_node_empty(self):
        self.assertIsNone(self.graph.find_node(1))

    def test_find_node_singleton(self):
        node = self.graph.add_node(1)

        self.assertEqual(self.graph.find_node(1), node)
        self.assertIsNone(self.graph.find_node(2))

    def test_find_node_many(self):
        one = self.graph.add_node(1)
        two = self.graph.add_node(2)

        self.assertEqual(self.graph.find_node(1), one)
        self.assertEqual(self.graph.find_node(2), two)
        self.assertIsNone(self.graph.find_node(3))

    def test_find_node_returns_first_duplicate(self):
        first = self.graph.add_node("dup")
        self.graph.add_node("dup")

        self.assertEqual(self.graph.find_node("dup"), first)

    def test_find_or_add_is_idempotent(self):
        for _ in range(5):
            if self.graph.find_node(1) is None:
                self.graph.add_node(1)

        self.assertIsNotNone(self.graph.find_node(1))
        self.assertEqual(len(self.graph.nodes()), 1)


class TestInvalidIndices(unittest.TestCase):
    """Tests for fail-fast handling of invalid indices."""

    def setUp(self):
        self.graph = Graph()
        self.a = self.graph.add_node("a")
        self.b = self.graph.add_node("b")
        self.graph.add_edge(self.a, self.b)

    def test_node_value_out_of_range(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.node_value(NodeIndex(2))

    def test_negative_index_is_not_wrapped(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.node_value(NodeIndex(-1))

    def test_set_node_value_out_of_range(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.set_node_value(NodeIndex(5), "x")

    def test_successors_out_of_range(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.successors(NodeIndex(9))

    def test_edge_target_out_of_range(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.edge_target(EdgeIndex(1))

    def test_invalid_source_leaves_graph_unchanged(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.add_edge(NodeIndex(7), self.a)

        self.assertEqual(self.graph.edge_count, 1)
        self.assertEqual(list(self.graph.successors(self.a)), [self.b])

    def test_invalid_target_leaves_graph_unchanged(self):
        with self.assertRaises(InvalidIndexError):
            self.graph.add_edge(self.a, NodeIndex(7))

        self.assertEqual(self.graph.edge_count, 1)
        self.assertEqual(list(self.graph.successors(self.a)), [self.b])

    def test_is_an_index_error(self):
        with self.assertRaises(IndexError):
            self.graph.node_value(NodeIndex(2))

    def test_error_details(self):
        with self.assertRaises(InvalidIndexError) as ctx:
            self.graph.node_value(NodeIndex(4))

        self.assertEqual(ctx.exception.details["index"], 4)
        self.assertEqual(ctx.exception.details["size"], 2)
        self.assertIn("[Graph]", str(ctx.exception))

    def test_raw_int_rejected(self):
        with self.assertRaises(TypeError):
            self.graph.node_value(0)

    def test_edge_index_is_not_a_node_index(self):
        with self.assertRaises(TypeError):
            self.graph.node_value(EdgeIndex(0))

    def test_contains(self):
        self.assertIn(self.a, self.graph)
        self.assertNotIn(NodeIndex(2), self.graph)
        self.assertNotIn(NodeIndex(-1), self.graph)
        self.assertNotIn(0, self.graph)


class TestGraphEquality(unittest.TestCase):
    """Tests for comparison and copying."""

    def _build(self):
        graph = Graph()
        a = graph.add_node("a")
        b = graph.add_node("b")
        graph.add_edge(a, b)
        return graph

    def test_equal_graphs(self):
        self.assertEqual(self._build(), self._build())

    def test_edge_order_matters(self):
        first = Graph()
        second = Graph()
        for graph in (first, second):
            graph.add_node(0)
            graph.add_node(1)
        first.add_edge(NodeIndex(0), NodeIndex(1))
        first.add_edge(NodeIndex(1), NodeIndex(0))
        second.add_edge(NodeIndex(1), NodeIndex(0))
        second.add_edge(NodeIndex(0), NodeIndex(1))

        self.assertNotEqual(first, second)

    def test_copy_is_independent(self):
        graph = self._build()
        clone = graph.copy()

        self.assertEqual(clone, graph)

        clone.set_node_value(NodeIndex(0), "z")
        clone.add_edge(NodeIndex(1), NodeIndex(0))

        self.assertEqual(graph.node_value(NodeIndex(0)), "a")
        self.assertEqual(graph.edge_count, 1)
        self.assertNotEqual(clone, graph)

    def test_not_hashable(self):
        with self.assertRaises(TypeError):
            hash(Graph())

    def test_repr(self):
        self.assertEqual(repr(self._build()), "Graph(nodes=2, edges=1)")


if __name__ == "__main__":
    unittest.main()
