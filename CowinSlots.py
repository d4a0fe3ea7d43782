#!/usr/bin/python
# -*- coding: utf-8 -*-

import logging
import sys

from colorama import Fore, init

from slotutils.config import ClientConfig
from slotutils.displayData import displaySlotsTable
from slotutils.errors import CowinSlotsException, NoCentersAvailable
from slotutils.getData import fetchDistricts, fetchSlots, fetchStates
from slotutils.selectLocation import selectOption

init()


def run(config, date=None):
    """
    This function
        1. Fetches the states and asks for one,
        2. Fetches its districts and asks for one,
        3. Fetches the slot calendar of that district, and
        4. Prints one row per center session
    """
    print(f"{Fore.CYAN}", end="")
    print("Fetching states...")
    print(f"{Fore.RESET}", end="")
    states = fetchStates(config)
    state = selectOption("Select States", states.keys(), config)

    districts = fetchDistricts(states[state], config)
    district = selectOption("Select Districts", districts.keys(), config)

    print(f"{Fore.CYAN}", end="")
    print(f"Fetching slots for {district}, {state}...")
    print(f"{Fore.RESET}", end="")
    slots = fetchSlots(districts[district], config, date=date)
    if len(slots.centers) < 1:
        raise NoCentersAvailable("There are no vaccination centers available")

    displaySlotsTable(slots.centers)
    return slots


def main():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        run(ClientConfig())
    except CowinSlotsException as e:
        print(f"{Fore.RED}{e.message}{Fore.RESET}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"{Fore.RED}Interrupted{Fore.RESET}", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
