#!/usr/bin/env python3
import argparse
import logging
import re
import sys

from backing_store import BackingStore, BackingStoreError
from main_memory import memory, FRAMES
from page_table import NUM_PAGES

INTEGER = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


def read_addresses(stream):
    # reading stops at the first token that does not start with a decimal
    # integer; a token like "6x" still yields 6 before the stream ends
    for line in stream:
        for token in line.split():
            found = INTEGER.match(token)
            if found is None:
                logger.debug("stopping at non-numeric token %r", token)
                return
            yield int(found.group())
            if found.end() != len(token):
                logger.debug("stopping after trailing text in token %r", token)
                return


def frame_count(value):
    if not value.isdigit() or not 1 <= int(value) <= NUM_PAGES:
        raise argparse.ArgumentTypeError(
            f"FRAMES must be an integer between 1 and {NUM_PAGES} inclusive")
    return int(value)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="memSim.py",
        description="Translate logical addresses through a TLB and a FIFO-paged page table.")
    parser.add_argument("address_file", help="text file of decimal logical addresses")
    parser.add_argument("--frames", type=frame_count, default=FRAMES,
                        help=f"number of physical frames (default {FRAMES})")
    parser.add_argument("--backing-store", default="BACKING_STORE.bin",
                        help="path of the 65536 byte backing store")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log faults, evictions and TLB replacements")
    return parser


# ./memSim.py <address-file.txt>
def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        address_file = open(args.address_file, "r", errors="replace")
    except OSError as e:
        print(f"Error opening address file: {e.strerror}", file=sys.stderr)
        return 1

    with address_file:
        try:
            bs = BackingStore(args.backing_store)
        except OSError as e:
            print(f"Error opening backing store: {e.strerror}", file=sys.stderr)
            return 1
        mem = memory(args.frames, bs)

        try:
            for address in read_addresses(address_file):
                result = mem.translate(address)
                print(f"Logical address: {result.logical} "
                      f"Physical address: {result.physical} Value: {result.value}")
        except BackingStoreError as e:
            print(f"Error reading backing store: {e}", file=sys.stderr)
            return 1

    print()
    print(mem.stats)
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
