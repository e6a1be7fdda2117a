import unittest
from Probing import (Available, Found, LinearProbing, ProbingStrategy, QuadraticProbing,
                     STRATEGIES, get_strategy, walk)
from SlotTable import CapacityExceededException, SlotTable

"""
Tests Probing.py on hand built tables. Integer keys are used so home slots
are known: key % 10 % capacity
"""


class LinearProbingTestCase(unittest.TestCase):

    def setUp(self) -> None:
        """
        Creates a 7 slot table and a linear strategy
        """
        self.table = SlotTable(7)
        self.probing = LinearProbing()

    def test_probe_sequence(self) -> None:
        """
        Candidates advance one slot at a time and wrap
        """
        self.assertEqual([self.probing.probe(5, i, 7) for i in range(1, 5)], [6, 0, 1, 2])

    def test_empty_home(self) -> None:
        """
        Empty home slot is available immediately
        """
        self.assertEqual(self.probing.locate(self.table, 3, 3), Available(3))

    def test_collision(self) -> None:
        """
        Colliding keys are pushed to the next slot and found there
        """
        self.table.place(3, 3, "a")
        self.assertEqual(self.probing.locate(self.table, 3, 13), Available(4))

        self.table.place(4, 13, "b")
        self.assertEqual(self.probing.locate(self.table, 3, 3), Found(3))
        self.assertEqual(self.probing.locate(self.table, 3, 13), Found(4))
        self.assertEqual(self.probing.locate(self.table, 3, 23), Available(5))

    def test_tombstone(self) -> None:
        """
        Probing passes tombstones and offers the first one for new keys
        """
        self.table.place(3, 3, "a")
        self.table.place(4, 13, "b")
        self.table.place(5, 23, "c")
        self.table.markRemoved(3)
        self.table.markRemoved(4)

        # Live key behind tombstones is still found
        self.assertEqual(self.probing.locate(self.table, 3, 23), Found(5))

        # New key takes the first tombstone, not the terminating empty slot
        self.assertEqual(self.probing.locate(self.table, 3, 33), Available(3))

        # Removed key is not found
        self.assertEqual(self.probing.locate(self.table, 3, 13), Available(3))

    def test_wraps_around(self) -> None:
        """
        Probe sequence wraps past the last slot
        """
        self.table.place(6, 6, "a")
        self.assertEqual(self.probing.locate(self.table, 6, 16), Available(0))

    def test_full_table(self) -> None:
        """
        A table with no empty slot ends the walk after one pass
        """
        for i in range(7):
            self.table.place(i, 100 + i, i)
        self.assertEqual(self.probing.locate(self.table, 2, 104), Found(4))
        self.assertRaises(CapacityExceededException, self.probing.locate, self.table, 2, 999)

        # A tombstone becomes the fallback
        self.table.markRemoved(5)
        self.assertEqual(self.probing.locate(self.table, 2, 999), Available(5))


class QuadraticProbingTestCase(unittest.TestCase):

    def setUp(self) -> None:
        """
        Creates a 7 slot table and a quadratic strategy
        """
        self.table = SlotTable(7)
        self.probing = QuadraticProbing()

    def test_probe_sequence(self) -> None:
        """
        Candidates are home + i^2, always offset from home
        """
        self.assertEqual([self.probing.probe(3, i, 7) for i in range(1, 5)], [4, 0, 5, 5])
        self.assertEqual([self.probing.probe(0, i, 11) for i in range(1, 5)], [1, 4, 9, 5])

    def test_empty_home(self) -> None:
        """
        Empty home slot is available immediately
        """
        self.assertEqual(self.probing.locate(self.table, 3, 3), Available(3))

    def test_collision(self) -> None:
        """
        Colliding keys land on home + 1, home + 4, ...
        """
        self.table.place(3, 3, "a")
        self.assertEqual(self.probing.locate(self.table, 3, 13), Available(4))

        self.table.place(4, 13, "b")
        self.assertEqual(self.probing.locate(self.table, 3, 23), Available(0))

        self.table.place(0, 23, "c")
        self.assertEqual(self.probing.locate(self.table, 3, 23), Found(0))
        self.assertEqual(self.probing.locate(self.table, 3, 33), Available(5))

    def test_tombstone(self) -> None:
        """
        First tombstone on the sequence is reused
        """
        self.table.place(3, 3, "a")
        self.table.place(4, 13, "b")
        self.table.place(0, 23, "c")
        self.table.markRemoved(4)

        self.assertEqual(self.probing.locate(self.table, 3, 23), Found(0))
        self.assertEqual(self.probing.locate(self.table, 3, 33), Available(4))

    def test_full_table(self) -> None:
        """
        Walk is bounded when no empty slot is reachable
        """
        for i in range(7):
            self.table.place(i, 100 + i, i)
        self.assertRaises(CapacityExceededException, self.probing.locate, self.table, 3, 999)


class StrategyRegistryTestCase(unittest.TestCase):

    def test_get_strategy(self) -> None:
        """
        Strategies are built by name
        """
        self.assertIsInstance(get_strategy("linear"), LinearProbing)
        self.assertIsInstance(get_strategy(" Quadratic "), QuadraticProbing)
        self.assertEqual(sorted(STRATEGIES), ["linear", "quadratic"])
        self.assertRaises(KeyError, get_strategy, "cubic")

    def test_resolved_index(self) -> None:
        """
        Found and Available compare by kind and index
        """
        self.assertEqual(Found(2), Found(2))
        self.assertNotEqual(Found(2), Available(2))
        self.assertNotEqual(Found(2), Found(3))
        self.assertTrue(Found(1).isFound())
        self.assertFalse(Available(1).isFound())
        self.assertEqual(Available(4).getIndex(), 4)
        self.assertEqual(repr(Found(2)), "Found(2)")

        # Compared, never used as dict keys
        self.assertRaises(TypeError, hash, Found(2))

    def test_walk_with_any_sequence(self) -> None:
        """
        walk() takes the candidate sequence as a plain callable
        """
        table = SlotTable(7)
        table.place(3, 3, "a")
        table.place(5, 13, "b")

        def stride_two(home: int, step: int, tableSz: int) -> int:
            return (home + 2 * step) % tableSz

        self.assertEqual(walk(table, 3, 13, stride_two), Found(5))
        self.assertEqual(walk(table, 3, 23, stride_two), Available(0))
        self.assertEqual(walk(table, 1, 1, stride_two), Available(1))

    def test_interface_has_no_behavior(self) -> None:
        """
        The strategy base only declares the interface
        """
        table = SlotTable(7)
        self.assertRaises(NotImplementedError, ProbingStrategy().locate, table, 0, 0)
        self.assertRaises(NotImplementedError, ProbingStrategy().probe, 0, 1, 7)


if __name__ == '__main__':
    unittest.main()
