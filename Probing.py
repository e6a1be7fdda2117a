from typing import Any, Callable, Dict

from SlotTable import CapacityExceededException, SlotTable

"""
Collision resolution strategies for the open addressing hash table.
A strategy walks the probe sequence starting at a key's home slot and
resolves it into either the slot holding that key or the slot a new
entry for that key should go to.
"""


class ResolvedIndex:
    """
    Outcome of a probe walk
    """
    __index: int

    def __init__(self, index: int) -> None:
        self.__index = index

    def getIndex(self) -> int:
        return self.__index

    def isFound(self) -> bool:
        return False

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.__index == other.getIndex()

    def __repr__(self) -> str:
        return type(self).__name__ + "(" + str(self.__index) + ")"


class Found(ResolvedIndex):
    """Slot holds a live entry whose key equals the probed key"""

    def isFound(self) -> bool:
        return True


class Available(ResolvedIndex):
    """Slot a new entry for the probed key should be written to"""
    pass


def walk(table: SlotTable, startIndex: int, key: Any, probe: Callable[[int, int, int], int]) -> ResolvedIndex:
    """
    Walks candidate slots until key is matched or an empty slot ends the
    chain. The first tombstone seen is remembered and handed out instead of
    the terminating empty slot so removed slots get reused.

    Param:
        table: table to search
        startIndex: home slot of key
        key: key to resolve
        probe: probe(home, step, tableSz) -> candidate slot at step, starting at 1
    Raise: CapacityExceededException if tableSz candidates hold neither an
        empty slot, a tombstone nor key
    Return: Found(index) if key is live in table, Available(index) otherwise
    """
    slot = table.getSlot(startIndex)

    # The home slot is available
    if slot.isEmpty():
        return Available(startIndex)

    tableSz = table.getCapacity()
    tombstone = -1      # Index of first tombstoned slot
    curr = startIndex
    step = 1

    # One pass over at most tableSz candidates
    while step <= tableSz:
        if slot.isEmpty():
            return Available(curr if tombstone == -1 else tombstone)

        if slot.isOccupied():
            if slot.getKey() == key:
                return Found(curr)
        elif tombstone == -1:
            tombstone = curr

        curr = probe(startIndex, step, tableSz)
        slot = table.getSlot(curr)
        step += 1

    if tombstone != -1:
        return Available(tombstone)

    raise CapacityExceededException("Probe sequence from slot " + str(startIndex) +
                                    " found no available slot in a table of " + str(tableSz))


class ProbingStrategy:
    """
    Interface the hash table is given a strategy through. Holds no behavior,
    each strategy defines its own candidate sequence and locate()
    """
    name = ""

    def probe(self, home: int, step: int, tableSz: int) -> int:
        """
        Returns the candidate slot at step of the probe sequence

        Param:
            home: home slot
            step: nth step in the sequence, starting at 1
            tableSz: size of hash table
        Return: candidate slot
        """
        raise NotImplementedError

    def locate(self, table: SlotTable, startIndex: int, key: Any) -> ResolvedIndex:
        """
        Resolves key against table starting at startIndex

        Return: Found(index) if key is live in table, Available(index) otherwise
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return type(self).__name__ + "()"


class LinearProbing(ProbingStrategy):
    """
    Visits home, home + 1, home + 2, ... wrapping around the table. Every
    slot is a candidate, so only a table with no empty slot and no tombstone
    makes locate() raise
    """
    name = "linear"

    def probe(self, home: int, step: int, tableSz: int) -> int:
        return (home + step) % tableSz

    def locate(self, table: SlotTable, startIndex: int, key: Any) -> ResolvedIndex:
        return walk(table, startIndex, key, self.probe)


class QuadraticProbing(ProbingStrategy):
    """
    Visits home, home + 1, home + 4, home + 9, ... always offset from the
    home slot, never from the previous candidate. On a prime table of p slots
    only (p + 1) / 2 distinct slots are reachable from one home slot, so with
    a load factor above 0.5 locate() can raise CapacityExceededException while
    other slots are still empty.
    """
    name = "quadratic"

    def probe(self, home: int, step: int, tableSz: int) -> int:
        return (home + step * step) % tableSz

    def locate(self, table: SlotTable, startIndex: int, key: Any) -> ResolvedIndex:
        return walk(table, startIndex, key, self.probe)


STRATEGIES: Dict[str, type] = {
    LinearProbing.name: LinearProbing,
    QuadraticProbing.name: QuadraticProbing,
}


def get_strategy(name: str) -> ProbingStrategy:
    """
    Builds a strategy from its registered name

    Param:
        name: "linear" or "quadratic", case insensitive
    Raise: KeyError if name is not registered
    Return: new strategy instance
    """
    return STRATEGIES[name.strip().lower()]()
