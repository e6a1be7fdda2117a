import logging
from typing import Any, Iterator, List, Tuple

"""
Flat slot array used by the open addressing hash table. Each slot is either
empty, occupied by a live key/value pair or tombstoned after a removal.
Table sizes are always prime.
"""
DEFAULT_CAPACITY = 27
MAX_CAPACITY = 10000
BUCKET_CLASSES = 10     # Keys are folded into this many classes before the final modulo


class Error(Exception):
    """Base class for other exceptions"""
    pass


class InvalidArgumentException(Error):
    """Raised when a key or value given to the table is None"""
    pass


class InvalidConfigurationException(Error):
    """Raised when a table is built with a bad capacity, load factor or strategy"""
    pass


class CapacityExceededException(Error):
    """Raised when a requested capacity is above MAX_CAPACITY or no slot is available"""
    pass


class NoSuchElementException(Error):
    """Raised when an exhausted iterator is advanced"""
    pass


class Slot:
    """
    Base class for the three slot states
    """

    def isEmpty(self) -> bool:
        return False

    def isOccupied(self) -> bool:
        return False

    def isTombstone(self) -> bool:
        return False


class Empty(Slot):
    """
    Slot never used since the table was created or last resized
    """

    def isEmpty(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Empty()"

    def __str__(self) -> str:
        return "empty"


class Tombstoned(Slot):
    """
    Slot whose entry was removed. Kept so probe sequences that passed through
    it still reach entries placed after it
    """

    def isTombstone(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Tombstoned()"

    def __str__(self) -> str:
        return "removed"


# Stateless, shared by every table
EMPTY = Empty()
TOMBSTONE = Tombstoned()


class Occupied(Slot):
    """
    Slot holding a live entry. Key is read-only once placed, value may be
    replaced in place
    """
    __key: Any
    __value: Any

    def __init__(self, key: Any, value: Any) -> None:
        """
        Initializes a live entry

        Param:
            key: key of the entry
            value: value of the entry
        """
        self.__key = key
        self.__value = value

    def isOccupied(self) -> bool:
        return True

    def getKey(self) -> Any:
        """
        Returns key
        Return: key
        """
        return self.__key

    def getValue(self) -> Any:
        """
        Returns value
        Return: value
        """
        return self.__value

    def setValue(self, newValue: Any) -> None:
        """
        Set value
        Param: newValue
        """
        self.__value = newValue

    def __repr__(self) -> str:
        return "Occupied(" + repr(self.__key) + ", " + repr(self.__value) + ")"

    def __str__(self) -> str:
        return str(self.__key) + " " + str(self.__value)


def isPrime(integer: int) -> bool:
    """
    Checks if integer is prime using trial division by odd divisors

    Param:
        integer: number to test
    Return: True if prime, False if not
    """
    # 1 and even numbers are not prime, 2 is the exception
    if integer == 2 or integer == 3:
        return True
    if integer < 2 or integer % 2 == 0:
        return False

    divisor = 3
    while divisor * divisor <= integer:
        if integer % divisor == 0:
            return False
        divisor += 2
    return True


def nextPrime(integer: int) -> int:
    """
    Returns the smallest prime >= integer. Even numbers are bumped to the
    next odd number before testing so the result is never even

    Param:
        integer: lower bound
    Return: prime >= integer
    """
    if integer % 2 == 0:
        integer += 1

    while not isPrime(integer):
        integer += 2
    return integer


class SlotTable:
    """
    Fixed length array of slots. The length is always the smallest prime
    >= the requested capacity. Tables are never resized in place, growth
    builds a new table and the owner swaps it in.
    """
    __slots: List[Slot]
    __capacity: int

    def __init__(self, capacity: int) -> None:
        """
        Creates an all empty table

        Param:
            capacity: requested number of slots, rounded up to a prime
        """
        self.__capacity = nextPrime(capacity)
        self.__slots = [EMPTY] * self.__capacity
        logging.debug("Created slot table with " + str(self.__capacity) + " slots")

    # Core Functions #################################################

    def hashBucket(self, key: Any) -> int:
        """
        Computes the home slot of key. The hash is reduced through
        BUCKET_CLASSES before the capacity modulo, so at most 10 distinct
        home slots exist regardless of table size

        Param:
            key: hashable key
        Return: home slot index
        """
        return (abs(hash(key)) % BUCKET_CLASSES) % self.__capacity

    def getSlot(self, index: int) -> Slot:
        """
        Returns slot at index
        """
        return self.__slots[index]

    def place(self, index: int, key: Any, value: Any) -> None:
        """
        Stores a new live entry at index, replacing an empty or tombstoned slot

        Param:
            index: slot to write
            key: key of the entry
            value: value of the entry
        Pre: slot at index is not occupied
        """
        self.__slots[index] = Occupied(key, value)

    def markRemoved(self, index: int) -> Any:
        """
        Tombstones a live slot

        Param:
            index: slot to tombstone
        Return: value that was stored in the slot
        Pre: slot at index is occupied
        """
        value = self.__slots[index].getValue()
        self.__slots[index] = TOMBSTONE
        return value

    def liveEntries(self) -> Iterator[Tuple[Any, Any]]:
        """
        Yields every live (key, value) pair in index order, tombstones and
        empty slots are skipped
        """
        for slot in self.__slots:
            if slot.isOccupied():
                yield slot.getKey(), slot.getValue()

    def countOccupied(self) -> int:
        """
        Counts live slots with a full scan

        Return: number of occupied slots
        """
        return sum(1 for slot in self.__slots if slot.isOccupied())

    # Growth #########################################################

    def grown(self) -> "SlotTable":
        """
        Builds the empty table that replaces this one on growth. New capacity
        is the next prime after twice the current capacity. The construction
        ceiling is not applied here

        Return: new all empty table
        """
        table = SlotTable(self.__capacity * 2)
        if table.getCapacity() > MAX_CAPACITY:
            logging.warning("Slot table grew to {} slots, past the construction limit of {}".format(
                table.getCapacity(), MAX_CAPACITY))
        return table

    # Getters ########################################################

    def getCapacity(self) -> int:
        """
        Get number of slots

        Return: number of slots
        """
        return self.__capacity

    def __len__(self) -> int:
        return self.__capacity

    def __str__(self) -> str:
        """
        One line per slot in the form "<index> <state>" where state is
        "empty", "removed" or "<key> <value>"
        """
        return "\n".join(str(i) + " " + str(slot) for i, slot in enumerate(self.__slots))
