class Statistics:
    def __init__(self):
        self.total_translations = 0
        self.page_faults = 0
        self.tlb_hits = 0
        self.tlb_misses = 0
        self.page_table_hits = 0

    def record_translation(self):
        self.total_translations += 1

    def record_tlb_hit(self):
        self.tlb_hits += 1

    def record_tlb_miss(self):
        self.tlb_misses += 1

    def record_page_table_hit(self):
        self.page_table_hits += 1

    def record_page_fault(self):
        self.page_faults += 1

    def _rate(self, count):
        # no translations yet: report 0 instead of dividing by zero
        if self.total_translations == 0:
            return 0.0
        return count / self.total_translations * 100

    @property
    def fault_rate(self):
        return self._rate(self.page_faults)

    @property
    def tlb_hit_rate(self):
        return self._rate(self.tlb_hits)

    def reconciles(self):
        return (self.total_translations == self.tlb_hits + self.tlb_misses
                and self.tlb_misses == self.page_table_hits + self.page_faults)

    def report(self):
        return [
            f"Total Translations: {self.total_translations}",
            f"Page Faults: {self.page_faults}",
            f"Page Fault Rate: {self.fault_rate:.3f}%",
            f"TLB Hits: {self.tlb_hits}",
            f"TLB Hit Rate: {self.tlb_hit_rate:.3f}%",
        ]

    def __str__(self):
        return "\n".join(self.report())
