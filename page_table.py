NUM_PAGES = 256


class PageTable:
    """Direct-indexed page number -> frame number map.

    An entry is either a frame number or None (unmapped).
    """

    def __init__(self, num_entries=NUM_PAGES):
        self.num_entries = num_entries
        self.table = [None] * num_entries

    def lookup(self, page_number):
        return self.table[page_number]

    def is_mapped(self, page_number):
        return self.table[page_number] is not None

    def install(self, page_number, frame_number):
        if self.table[page_number] is not None:
            raise ValueError(f"page {page_number} is already mapped to frame "
                             f"{self.table[page_number]}")
        self.table[page_number] = frame_number

    def invalidate(self, page_number):
        self.table[page_number] = None

    def mapped_frames(self):
        return {frame for frame in self.table if frame is not None}

    def mapped_pages(self):
        return [page for page, frame in enumerate(self.table) if frame is not None]
