from simulation_errors import InvalidPage


class PageTableEntry:
    def __init__(self, page):
        self.page = page
        self.frame_index = None  # None means not in memory
        self.arrival_time = None  # For FIFO
        self.last_access_time = None  # For LRU
        self.reference_count = None  # For LFU

    def is_resident(self):
        return self.frame_index is not None

    def load(self, frame_index, clock):
        self.frame_index = frame_index
        self.arrival_time = clock
        self.last_access_time = clock
        self.reference_count = 1

    def touch(self, clock):
        # arrival_time stays put on a hit
        self.last_access_time = clock
        self.reference_count += 1

    def evict(self):
        self.frame_index = None
        self.arrival_time = None
        self.last_access_time = None
        self.reference_count = None

    def __repr__(self):
        return (f"PageTableEntry(page={self.page}, frame={self.frame_index}, "
                f"arrival={self.arrival_time}, last={self.last_access_time}, "
                f"count={self.reference_count})")


class PageTable:
    def __init__(self, num_pages=None):
        self.num_pages = num_pages
        self.entries = {}  # page -> PageTableEntry

    def check_page(self, page):
        if isinstance(page, bool) or not isinstance(page, int):
            raise InvalidPage(f"Page must be an integer: {page!r}")
        if page < 0:
            raise InvalidPage(f"Page must be non-negative: {page}")
        if self.num_pages is not None and page >= self.num_pages:
            raise InvalidPage(f"Page {page} outside range 0..{self.num_pages - 1}")

    def get_entry(self, page):
        self.check_page(page)
        if page not in self.entries:
            self.entries[page] = PageTableEntry(page)
        return self.entries[page]

    def is_resident(self, page):
        entry = self.entries.get(page)
        return entry is not None and entry.is_resident()

    def resident_entries(self):
        return [entry for entry in self.entries.values() if entry.is_resident()]
