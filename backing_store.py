import logging

from page_table import NUM_PAGES

PAGE_SIZE = 256
STORE_SIZE = PAGE_SIZE * NUM_PAGES

logger = logging.getLogger(__name__)


class BackingStoreError(OSError):
    pass


class BackingStore:
    def __init__(self, filename="BACKING_STORE.bin"):
        self.filename = filename
        self.store = self.fill_store()
        if len(self.store) != STORE_SIZE:
            logger.warning("%s is %d bytes, expected %d",
                           filename, len(self.store), STORE_SIZE)

    def read_page(self, page_number):
        # read 256 byte page from the backing store
        if page_number < 0 or page_number >= NUM_PAGES:
            raise BackingStoreError(f"page {page_number} is outside the backing store")
        start = page_number * PAGE_SIZE
        end = start + PAGE_SIZE
        page = self.store[start:end]
        if len(page) != PAGE_SIZE:
            raise BackingStoreError(
                f"short read of page {page_number} from {self.filename}: "
                f"got {len(page)} of {PAGE_SIZE} bytes")
        return page

    def fill_store(self):
        with open(self.filename, "rb") as file:
            return file.read()
