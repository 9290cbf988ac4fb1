import logging

TLB_SIZE = 16

logger = logging.getLogger(__name__)


class TLBEntry:
    def __init__(self):
        self.valid = False
        self.page = None
        self.frame = None
        self.stamp = 0

    def fill(self, page_number, frame_number, stamp):
        self.valid = True
        self.page = page_number
        self.frame = frame_number
        self.stamp = stamp

    def clear(self):
        self.valid = False
        self.page = None
        self.frame = None

    def __repr__(self):
        if not self.valid:
            return "TLBEntry(empty)"
        return f"TLBEntry(page={self.page}, frame={self.frame}, stamp={self.stamp})"


class tlb:
    """Fixed-size translation cache with LRU replacement.

    Every hit and every insertion takes the next value of a single counter,
    so the slot with the smallest stamp is the least recently used one.
    """

    def __init__(self, maxsize=TLB_SIZE):
        self.maxsize = maxsize
        self.entries = [TLBEntry() for _ in range(maxsize)]
        self.counter = 0

    def _tick(self):
        self.counter += 1
        return self.counter

    def lookup(self, page_number):
        for entry in self.entries:
            if entry.valid and entry.page == page_number:
                entry.stamp = self._tick()
                return entry.frame
        return None

    def add(self, page_number, frame_number):
        victim = None
        for entry in self.entries:
            if not entry.valid:
                victim = entry
                break
            # strict < keeps the lowest index on equal stamps
            if victim is None or entry.stamp < victim.stamp:
                victim = entry

        if victim.valid:
            logger.debug("TLB replaces page %d (frame %d) with page %d",
                         victim.page, victim.frame, page_number)
        victim.fill(page_number, frame_number, self._tick())

    def invalidate(self, page_number):
        for entry in self.entries:
            if entry.valid and entry.page == page_number:
                entry.clear()

    def valid_count(self):
        return sum(1 for entry in self.entries if entry.valid)

    def pages(self):
        return [entry.page for entry in self.entries if entry.valid]
