#!/usr/bin/env python3
"""
Tests for graph traversal and verification.

These check that traversal visits each node once, and that the verifier
tells uninitialized cells, true cycles and benign sharing apart.
"""

import unittest
from cellgraph import cell, int_, list_, iter_nodes, count_nodes, node_identity
from cellgraph.config import CellGraphConfig, VerifierConfig, set_config, reset_config
from cellgraph.verify import (
    iter_paths, check_initialized, check_acyclic, check_depth, check_node_count, verify_value
)


def make_cycle():
    x = cell()
    y = list_([int_(1), int_(2), int_(3), x, x, x])
    x.resolve(y)
    return x


class TestTraversal(unittest.TestCase):
    """Test cases for iter_nodes and count_nodes."""

    def test_single_leaf(self):
        value = int_(3)
        nodes = list(iter_nodes(value))
        self.assertEqual(nodes, [(None, None, value)])

    def test_preorder_list(self):
        value = list_([int_(1), list_([int_(2)]), int_(3)])
        kinds = [node.kind for _, _, node in iter_nodes(value)]
        self.assertEqual(kinds, ['list', 'int', 'list', 'int', 'int'])

    def test_parent_and_index(self):
        value = list_([int_(1), int_(2)])
        nodes = list(iter_nodes(value))
        self.assertIs(nodes[1][0], value)
        self.assertEqual(nodes[1][1], 0)
        self.assertEqual(nodes[2][1], 1)

    def test_cycle_visited_once(self):
        x = make_cycle()
        nodes = list(iter_nodes(x))
        self.assertEqual([node.kind for _, _, node in nodes], ['cell', 'list', 'int', 'int', 'int'])
        identities = [node_identity(node) for _, _, node in nodes]
        self.assertEqual(len(identities), len(set(identities)))

    def test_cell_contents_index(self):
        x = cell()
        x.resolve(int_(1))
        nodes = list(iter_nodes(x))
        self.assertIs(nodes[1][0], x)
        self.assertEqual(nodes[1][1], 0)

    def test_count_nodes(self):
        self.assertEqual(count_nodes(int_(1)), 1)
        self.assertEqual(count_nodes(list_([])), 1)
        self.assertEqual(count_nodes(make_cycle()), 5)

        shared = cell()
        self.assertEqual(count_nodes(list_([shared, shared])), 2)


class TestChecks(unittest.TestCase):
    """Test cases for the individual checks."""

    def test_paths(self):
        x = make_cycle()
        paths = [path for path, _ in iter_paths(x)]
        self.assertEqual(paths, [
            "root", "root.contents", "root.contents[0]",
            "root.contents[1]", "root.contents[2]",
        ])

    def test_check_initialized(self):
        is_valid, errors = check_initialized(list_([int_(1)]))
        self.assertTrue(is_valid)
        self.assertEqual(errors, [])

        x = cell()
        is_valid, errors = check_initialized(list_([int_(1), x, x]))
        self.assertFalse(is_valid)
        self.assertEqual(errors, ["Uninitialized cell at root[1]"])

    def test_check_acyclic_reports_cycle(self):
        is_valid, errors = check_acyclic(make_cycle())
        self.assertFalse(is_valid)
        self.assertEqual(errors, [
            "Cycle: root.contents[3] leads back to root",
            "Cycle: root.contents[4] leads back to root",
            "Cycle: root.contents[5] leads back to root",
        ])

    def test_check_acyclic_allows_sharing(self):
        shared = cell()
        shared.resolve(list_([int_(5)]))
        is_valid, errors = check_acyclic(list_([shared, shared, list_([shared])]))
        self.assertTrue(is_valid, errors)

    def test_check_acyclic_self_reference(self):
        x = cell()
        x.resolve(x.clone())
        is_valid, errors = check_acyclic(x)
        self.assertFalse(is_valid)
        self.assertEqual(errors, ["Cycle: root.contents leads back to root"])

    def test_check_depth(self):
        value = list_([list_([list_([int_(1)])])])
        self.assertTrue(check_depth(value, max_depth=4)[0])

        is_valid, errors = check_depth(value, max_depth=3)
        self.assertFalse(is_valid)
        self.assertIn("depth 4", errors[0])

    def test_check_depth_terminates_on_cycle(self):
        is_valid, errors = check_depth(make_cycle(), max_depth=3)
        self.assertTrue(is_valid, errors)
        self.assertFalse(check_depth(make_cycle(), max_depth=2)[0])

    def test_check_node_count(self):
        value = list_([int_(i) for i in range(10)])
        self.assertTrue(check_node_count(value, max_nodes=11)[0])

        is_valid, errors = check_node_count(value, max_nodes=5)
        self.assertFalse(is_valid)
        self.assertIn("11 nodes", errors[0])


class TestVerifyValue(unittest.TestCase):
    """Test cases for verify_value."""

    def tearDown(self):
        reset_config()

    def test_cycle_is_valid(self):
        is_valid, errors = verify_value(make_cycle())
        self.assertTrue(is_valid, errors)

    def test_rejects_non_value(self):
        is_valid, errors = verify_value([1, 2, 3])
        self.assertFalse(is_valid)
        self.assertEqual(errors, ["Root must be a Value"])

    def test_collects_all_errors(self):
        value = list_([cell(), list_([list_([cell()])])])
        is_valid, errors = verify_value(value, max_depth=2, max_nodes=3)
        self.assertFalse(is_valid)
        self.assertEqual(len(errors), 4)

    def test_uses_configured_limits(self):
        set_config(CellGraphConfig(verifier=VerifierConfig(max_depth=1)))
        is_valid, errors = verify_value(list_([int_(1)]))
        self.assertFalse(is_valid)
        self.assertEqual(len(errors), 1)


if __name__ == '__main__':
    unittest.main()
