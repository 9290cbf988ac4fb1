import logging
from collections import deque, namedtuple

from backing_store import PAGE_SIZE
from page_table import PageTable, NUM_PAGES
from stats import Statistics
from TLB import tlb, TLB_SIZE

# Constants
FRAMES = 128

logger = logging.getLogger(__name__)

Translation = namedtuple("Translation", ["logical", "physical", "value"])


def split_address(address):
    page_number = (address >> 8) & 0xFF
    offset = address & 0xFF
    return page_number, offset


class ReplacementQueue:
    """Bounded FIFO of frame numbers in the order they were loaded."""

    def __init__(self, capacity):
        self.capacity = capacity
        self.queue = deque()

    def enqueue(self, frame_number):
        if len(self.queue) >= self.capacity:
            raise OverflowError(f"replacement queue is full ({self.capacity} frames)")
        self.queue.append(frame_number)

    def dequeue(self):
        if not self.queue:
            raise IndexError("dequeue from an empty replacement queue")
        return self.queue.popleft()

    def __len__(self):
        return len(self.queue)

    def __iter__(self):
        return iter(self.queue)


class FrameAllocator:
    def __init__(self, frames):
        # popped from the end, so frames come out 0, 1, 2, ...
        self.free_frames = list(range(frames - 1, -1, -1))

    def has_free_frame(self):
        return len(self.free_frames) > 0

    def allocate(self):
        return self.free_frames.pop()

    def __len__(self):
        return len(self.free_frames)


class memory:
    def __init__(self, size, store, tlb_size=TLB_SIZE):
        if size < 1 or size > NUM_PAGES:
            raise ValueError(f"frame count must be between 1 and {NUM_PAGES}, got {size}")
        self.size = size
        self.memory = bytearray(size * PAGE_SIZE)
        self.page_table = PageTable()
        self.tlb = tlb(tlb_size)
        self.allocator = FrameAllocator(size)
        self.insert_order = ReplacementQueue(size)
        self.loaded_pages = [None] * size  # frame -> page
        self.stats = Statistics()
        self.store = store

    def translate(self, address):
        self.stats.record_translation()
        page_number, offset = split_address(address)
        frame_number = self.get_page(page_number)
        physical_address = frame_number * PAGE_SIZE + offset
        return Translation(address, physical_address, self.read_byte(physical_address))

    def read_byte(self, physical_address):
        byte = self.memory[physical_address]
        return byte - 256 if byte > 127 else byte

    def get_page(self, page_number):
        # check if page is in TLB
        frame_number = self.tlb.lookup(page_number)
        if frame_number is not None:
            self.stats.record_tlb_hit()
            return frame_number
        self.stats.record_tlb_miss()

        # if not, check the page table, faulting it in if absent
        frame_number = self.page_table.lookup(page_number)
        if frame_number is not None:
            self.stats.record_page_table_hit()
        else:
            frame_number = self.page_fault(page_number)

        self.tlb.add(page_number, frame_number)
        return frame_number

    def page_fault(self, page_number):
        self.stats.record_page_fault()
        if self.allocator.has_free_frame():
            frame_number = self.allocator.allocate()
        else:
            # this will only hit when all frames are full
            frame_number = self.fifo()
        logger.debug("page fault: page %d -> frame %d", page_number, frame_number)
        return self.load_from_bs(page_number, frame_number)

    def fifo(self):
        # remove the oldest page, hits on it since loading do not matter
        frame_number = self.insert_order.dequeue()
        oldest = self.loaded_pages[frame_number]

        self.page_table.invalidate(oldest)
        self.tlb.invalidate(oldest)
        self.loaded_pages[frame_number] = None
        logger.debug("evicted page %d from frame %d", oldest, frame_number)
        return frame_number

    def load_from_bs(self, page_number, frame_number):
        data = self.store.read_page(page_number)
        start = frame_number * PAGE_SIZE
        self.memory[start:start + PAGE_SIZE] = data
        self.loaded_pages[frame_number] = page_number
        self.page_table.install(page_number, frame_number)
        self.insert_order.enqueue(frame_number)
        return frame_number

    def occupied_frames(self):
        return {frame for frame, page in enumerate(self.loaded_pages) if page is not None}
