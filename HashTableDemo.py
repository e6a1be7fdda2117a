import logging
import sys
import time
from datetime import timedelta

from tqdm import tqdm

from HashTable import DEFAULT_CAPACITY, DEFAULT_LOAD_FACTOR, HashTable, Error
from Probing import STRATEGIES

"""
Sample session for the open addressing hash table. Runs the purchases
example with linear and/or quadratic probing, or stress inserts integer keys.
"""
NAMES = ["Pax", "Eleven", "Angel", "Abigail", "Jack"]
PURCHASES = [654, 341, 70, 867, 5309]


def purchases_demo(purchases: HashTable) -> list[tuple]:
    """
    Runs the purchases session on an empty table, logging each step

    Param:
        purchases: empty table to fill
    Return: (key, value) pairs enumerated by lock-step key and value iterators
        at the end of the session
    """
    probing = purchases.getProbing().name
    for name, amount in zip(NAMES, PURCHASES):
        purchases.put(name, amount)
    logging.info("Contents with " + probing + " probing:\n" + purchases.dump())

    logging.info("Replaced old value was " + str(purchases.put(NAMES[1], 170)))
    logging.info("Contents after changing Eleven to 170:\n" + purchases.dump())

    logging.info("Calling getValue() on Pax, Eleven, & Angel:")
    for name in NAMES[:3]:
        logging.info("\t" + name + ": " + str(purchases.getValue(name)))

    purchases.remove(NAMES[0])
    purchases.remove(NAMES[2])
    logging.info("Contents after removing Pax & Angel:\n" + purchases.dump())

    purchases.put("Gino", 348)
    logging.info("Contents after adding Gino:\n" + purchases.dump())

    keyIter = purchases.keys()
    valueIter = purchases.values()
    pairs = []
    logging.info("Contents of the hash table:")
    while keyIter.hasNext():
        pair = (keyIter.next(), valueIter.next())
        logging.info("Key-" + str(pair[0]) + " : Value-" + str(pair[1]))
        pairs.append(pair)
    return pairs


def stress(table: HashTable, count: int, quiet: bool = False) -> HashTable:
    """
    Inserts count integer keys, each mapped to its square

    Param:
        table: table to fill
        count: number of keys to insert
        quiet: hide the progress bar
    Return: table
    """
    start_capacity = table.getCapacity()
    for i in tqdm(range(count), desc=table.getProbing().name, unit='put', leave=False, disable=quiet):
        table.put(i, i * i)

    logging.info("Inserted {n} keys, size -> {sz}, capacity {start} -> {cap}".format(
        n=count, sz=table.size(), start=start_capacity, cap=table.getCapacity()))
    return table


def parse_args(argv: list[str]) -> dict:
    """
    Reads command line switches

    Param:
        argv: arguments without the program name
    Raise: ValueError if a numeric switch is given a non numeric value
    Return: dict with keys probing, capacity, loadfactor, stress, logging, help
    """
    config = {
        "probing": ["linear", "quadratic"],
        "capacity": DEFAULT_CAPACITY,
        "loadfactor": DEFAULT_LOAD_FACTOR,
        "stress": 0,
        "logging": 1,
        "help": False,
    }

    pointer = 0
    while len(argv) > pointer:
        if (argv[pointer] == '-p' or argv[pointer] == '--probing') and len(argv) > pointer + 1:
            choice = argv[pointer + 1].strip().lower()
            config["probing"] = list(STRATEGIES) if choice == "both" else [choice]
            pointer += 2
        elif (argv[pointer] == '-c' or argv[pointer] == '--capacity') and len(argv) > pointer + 1:
            config["capacity"] = int(argv[pointer + 1])
            pointer += 2
        elif (argv[pointer] == '-l' or argv[pointer] == '--loadfactor') and len(argv) > pointer + 1:
            config["loadfactor"] = float(argv[pointer + 1])
            pointer += 2
        elif (argv[pointer] == '-s' or argv[pointer] == '--stress') and len(argv) > pointer + 1:
            config["stress"] = int(argv[pointer + 1])
            pointer += 2
        elif (argv[pointer] == '-q' or argv[pointer] == '--logging') and len(argv) > pointer + 1:
            config["logging"] = int(argv[pointer + 1])
            pointer += 2
        elif argv[pointer] == '-h' or argv[pointer] == '--help':
            config["help"] = True
            pointer += 1
        else:
            logging.warning("Unknown switch ignored -> " + argv[pointer])
            pointer += 1
    return config


def setup_logging(level: int) -> None:
    """
    Configures the root logger

    Param:
        level: 1 == info, 2 == debug, 3 == debug written to log.txt
    """
    match level:
        case 2:
            logging.basicConfig(level=logging.DEBUG, force=True)
        case 3:
            logging.basicConfig(level=logging.DEBUG, filename='log.txt', filemode='w', force=True)
        case _:
            logging.basicConfig(level=logging.INFO, format='%(asctime)s %(message)s',
                                datefmt='%m/%d/%Y %I:%M:%S %p', force=True)


def help() -> None:
    """
    Displays help information on invocating this program
    """
    logging.info("TABLE CONFIG - How tables are built\n\
        -p --probing <linear|quadratic|both> : Collision resolution to run (default is both)\n\
        -c --capacity <#> : Initial capacity, rounded up to a prime (default is 27, max is 10000)\n\
        -l --loadfactor <#> : Fraction of slots used before the table grows (default is 0.5)\n")

    logging.info("RUN MODE - What to do with the table\n\
        -s --stress <#> : Insert # integer keys instead of running the purchases session\n\
        -q --logging <#> : Set logging level. 1 == info (default), 2 == debug, 3 == debug but print output to log.txt\n\
        -h --help : Help\n")


def main(argv: list[str] = None) -> int:
    """
    Program runner

    Return: exit code
    """
    start_time = time.monotonic()
    try:
        config = parse_args(sys.argv[1:] if argv is None else argv)
    except ValueError as e:
        setup_logging(1)
        logging.critical("Bad switch value: " + str(e))
        return 2

    setup_logging(config["logging"])
    if config["help"]:
        help()
        return 0

    for probing in config["probing"]:
        try:
            table = HashTable(config["capacity"], config["loadfactor"], probing=probing)
        except Error as e:
            logging.critical(e.__class__.__name__ + ": " + str(e))
            return 1

        if config["stress"] > 0:
            stress(table, config["stress"])
        else:
            purchases_demo(table)

    # Report time
    end_time = time.monotonic()
    logging.info(timedelta(seconds=end_time - start_time))
    return 0


if __name__ == "__main__":
    sys.exit(main())
