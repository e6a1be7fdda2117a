import logging
from typing import Any, Optional, Tuple
from typing import TypeVar, Generic

from Probing import ProbingStrategy, STRATEGIES, get_strategy
from SlotTable import (DEFAULT_CAPACITY, MAX_CAPACITY, CapacityExceededException, Error,
                       InvalidArgumentException, InvalidConfigurationException,
                       NoSuchElementException, SlotTable)

K = TypeVar('K')
V = TypeVar('V')
DEFAULT_LOAD_FACTOR = 0.5

__all__ = ["HashTable", "KeyIterator", "ValueIterator", "ItemIterator", "Error",
           "InvalidArgumentException", "InvalidConfigurationException",
           "CapacityExceededException", "NoSuchElementException",
           "DEFAULT_CAPACITY", "DEFAULT_LOAD_FACTOR", "MAX_CAPACITY"]


class HashTable(Generic[K, V]):
    """
    Open addressing hash table mapping unique keys to values. Collisions are
    resolved with a pluggable probing strategy (linear or quadratic) and
    removed entries are tombstoned. The table grows to the next prime after
    twice its capacity once the number of entries passes capacity * load factor,
    dropping every tombstone in the process.

    Lookups through getValue() and contains() only read the key's home slot
    unless chained_lookup is set, put() and remove() always walk the full
    probe sequence.

    Not thread safe, callers sharing a table across threads must lock it
    themselves.
    """
    __table: SlotTable
    __numEntries: int
    __loadFactor: float
    __probing: ProbingStrategy
    __chainedLookup: bool

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY, load_factor: float = DEFAULT_LOAD_FACTOR,
                 probing: ProbingStrategy | str = "linear", chained_lookup: bool = False) -> None:
        """
        Construct a hash table. Initial size is the smallest prime >= initial_capacity

        Param:
            initial_capacity: requested number of slots, 1 to MAX_CAPACITY
            load_factor: fraction of slots that may be used before growth, in (0, 1].
                Above 0.5 quadratic probing can raise CapacityExceededException
                from put() before the table is full
            probing: ProbingStrategy instance or registered name ("linear", "quadratic")
            chained_lookup: walk the probe sequence in getValue() and contains()
        Raise:
            InvalidConfigurationException on non positive capacity, load factor
                outside (0, 1] or unknown probing strategy
            CapacityExceededException if initial_capacity > MAX_CAPACITY
        """
        if initial_capacity <= 0 or load_factor <= 0:
            logging.critical("Initial capacity and load factor must be greater than 0")
            raise InvalidConfigurationException("Initial capacity and load factor must be greater than 0")
        if load_factor > 1:
            logging.critical("Load factor " + str(load_factor) + " is larger than 1")
            raise InvalidConfigurationException("Load factor must not be larger than 1")
        if initial_capacity > MAX_CAPACITY:
            logging.critical("Requested capacity " + str(initial_capacity) + " is over " + str(MAX_CAPACITY))
            raise CapacityExceededException("Attempt to create a table whose capacity is larger than " +
                                            str(MAX_CAPACITY))

        if isinstance(probing, str):
            try:
                probing = get_strategy(probing)
            except KeyError:
                logging.critical("Unknown probing strategy -> " + probing)
                raise InvalidConfigurationException("Probing strategy must be one of " +
                                                    ", ".join(STRATEGIES)) from None

        self.__loadFactor = load_factor
        self.__probing = probing
        self.__chainedLookup = chained_lookup
        self.__numEntries = 0
        self.__table = SlotTable(initial_capacity)

    # Core Functions #################################################

    def put(self, key: K, value: V) -> Optional[V]:
        """
        Adds an entry to the table. If key already exists its value is replaced
        and the size does not change. Grows the table afterwards if needed

        Param:
            key: key of the entry
            value: value of the entry
        Raise: InvalidArgumentException if key or value is None
        Return: value previously associated with key, None if key was new
        """
        if key is None or value is None:
            raise InvalidArgumentException("Key and value must not be None")

        oldValue = None
        resolved = self.__resolve(key)
        index = resolved.getIndex()

        if resolved.isFound():
            slot = self.__table.getSlot(index)
            oldValue = slot.getValue()
            slot.setValue(value)
        else:
            self.__table.place(index, key, value)
            self.__numEntries += 1

        if self.isFull():
            self.__enlargeHashTable()
        return oldValue

    def remove(self, key: K) -> Optional[V]:
        """
        Tombstones the entry of key if it is in the table

        Param:
            key: key of the entry to remove
        Return: removed value, None if key was not in the table
        """
        if key is None:
            return None

        resolved = self.__resolve(key)
        if not resolved.isFound():
            return None

        self.__numEntries -= 1
        return self.__table.markRemoved(resolved.getIndex())

    def getValue(self, key: K) -> Optional[V]:
        """
        Looks up the value of key. Only the home slot of key is read, entries
        displaced by a collision are not found unless chained_lookup is set

        Param:
            key: key to look up
        Return: value of key, None if not found
        """
        if key is None:
            return None

        if self.__chainedLookup:
            resolved = self.__resolve(key)
            if resolved.isFound():
                return self.__table.getSlot(resolved.getIndex()).getValue()
            return None

        slot = self.__table.getSlot(self.__table.hashBucket(key))
        if slot.isOccupied() and slot.getKey() == key:
            return slot.getValue()
        return None

    def contains(self, key: K) -> bool:
        """
        Checks if getValue() finds key

        Param:
            key: key to search for
        Return: True if found, False if not
        """
        return self.getValue(key) is not None

    def clear(self) -> None:
        """
        Removes every entry, capacity is kept
        """
        self.__table = SlotTable(self.__table.getCapacity())
        self.__numEntries = 0
        logging.debug("Hash table cleared")

    # Getters ########################################################

    def size(self) -> int:
        """
        Get number of entries

        Return: number of live entries
        """
        return self.__numEntries

    def isEmpty(self) -> bool:
        return self.__numEntries == 0

    def isFull(self) -> bool:
        """
        Checks if the number of entries is greater than the load factor allows

        Return: True if the table should grow, False if not
        """
        return self.__numEntries > self.__table.getCapacity() * self.__loadFactor

    def getCapacity(self) -> int:
        """
        Get number of slots

        Return: current table length
        """
        return self.__table.getCapacity()

    def getLoadFactor(self) -> float:
        return self.__loadFactor

    def getProbing(self) -> ProbingStrategy:
        return self.__probing

    def keys(self) -> "KeyIterator[K]":
        """
        Returns an iterator over the keys of live entries
        """
        return KeyIterator(self.__table, self.__numEntries)

    def values(self) -> "ValueIterator[V]":
        """
        Returns an iterator over the values of live entries
        """
        return ValueIterator(self.__table, self.__numEntries)

    def items(self) -> "ItemIterator":
        """
        Returns an iterator over (key, value) tuples of live entries
        """
        return ItemIterator(self.__table, self.__numEntries)

    def dump(self) -> str:
        """
        Returns every slot of the table, one per line, in the format
        <index> empty
        <index> removed
        <index> <key> <value>
        """
        return str(self.__table)

    # Utility #######################################################

    def __resolve(self, key: K):
        """
        Walks the probe sequence of key with the active strategy

        Param:
            key: key to resolve
        Return: Found or Available index
        """
        return self.__probing.locate(self.__table, self.__table.hashBucket(key), key)

    def __enlargeHashTable(self) -> None:
        """
        Swaps in an empty table of the next prime after twice the capacity and
        puts every live entry back. Tombstones are dropped
        """
        oldTable = self.__table
        live = list(oldTable.liveEntries())

        self.__table = oldTable.grown()
        self.__numEntries = 0
        for key, value in live:
            self.put(key, value)

        logging.debug("Hash table grown from " + str(oldTable.getCapacity()) + " to " +
                      str(self.__table.getCapacity()) + " slots, " + str(len(live)) + " entries rehashed")

    def __len__(self) -> int:
        return self.__numEntries

    def __iter__(self) -> "KeyIterator[K]":
        return self.keys()

    def __contains__(self, key) -> bool:
        return self.contains(key)

    def __str__(self) -> str:
        return self.dump()

    def __repr__(self) -> str:
        return "HashTable(size=" + str(self.__numEntries) + ", capacity=" + str(self.getCapacity()) + \
            ", load_factor=" + str(self.__loadFactor) + ", probing=" + self.__probing.name + ")"


class _SlotIterator:
    """
    Forward only cursor over the live slots of a table. The number of items
    handed out is fixed when the iterator is created, the table itself is read
    live so mutating it while iterating is undefined
    """
    __table: SlotTable
    __currentIndex: int     # Current position in hash table
    __numberLeft: int       # Number of entries left in iteration

    def __init__(self, table: SlotTable, numEntries: int) -> None:
        self.__table = table
        self.__currentIndex = 0
        self.__numberLeft = numEntries

    def hasNext(self) -> bool:
        return self.__numberLeft > 0

    def next(self) -> Any:
        """
        Returns the next live entry

        Raise: NoSuchElementException if the iterator is exhausted
        """
        if not self.hasNext():
            raise NoSuchElementException()

        # Skip table locations that do not contain a live entry
        while not self.__table.getSlot(self.__currentIndex).isOccupied():
            self.__currentIndex += 1

        slot = self.__table.getSlot(self.__currentIndex)
        self.__numberLeft -= 1
        self.__currentIndex += 1
        return self._extract(slot)

    def _extract(self, slot) -> Any:
        raise NotImplementedError

    def __iter__(self):
        return self

    def __next__(self):
        if not self.hasNext():
            raise StopIteration
        return self.next()


class KeyIterator(_SlotIterator, Generic[K]):
    """Iterates keys of live entries"""

    def _extract(self, slot) -> K:
        return slot.getKey()


class ValueIterator(_SlotIterator, Generic[V]):
    """Iterates values of live entries"""

    def _extract(self, slot) -> V:
        return slot.getValue()


class ItemIterator(_SlotIterator):
    """Iterates (key, value) tuples of live entries"""

    def _extract(self, slot) -> Tuple[Any, Any]:
        return slot.getKey(), slot.getValue()
