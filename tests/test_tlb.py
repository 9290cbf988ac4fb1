from TLB import tlb, TLB_SIZE


class TestLookup:
    def test_empty_miss(self):
        cache = tlb()
        assert cache.lookup(0) is None

    def test_hit_returns_frame(self):
        cache = tlb()
        cache.add(4, 12)
        assert cache.lookup(4) == 12

    def test_frame_zero_is_a_hit(self):
        cache = tlb()
        cache.add(7, 0)
        assert cache.lookup(7) == 0

    def test_hit_bumps_stamp(self):
        cache = tlb()
        cache.add(1, 1)
        before = cache.entries[0].stamp
        cache.lookup(1)
        assert cache.entries[0].stamp > before


class TestAdd:
    def test_fills_lowest_empty_slot(self):
        cache = tlb()
        for page in range(3):
            cache.add(page, page)
        assert [e.page for e in cache.entries[:3]] == [0, 1, 2]

    def test_capacity_never_exceeded(self):
        cache = tlb()
        for page in range(100):
            cache.add(page, page % 8)
            assert cache.valid_count() <= TLB_SIZE
        assert cache.valid_count() == TLB_SIZE

    def test_evicts_least_recently_used(self):
        cache = tlb()
        for page in range(TLB_SIZE):
            cache.add(page, page)
        # page 0 is refreshed, so page 1 becomes the oldest
        cache.lookup(0)
        cache.add(100, 50)
        assert cache.lookup(1) is None
        assert cache.lookup(0) == 0
        assert cache.lookup(100) == 50
        assert cache.entries[1].page == 100

    def test_reuses_invalidated_slot_before_evicting(self):
        cache = tlb()
        for page in range(TLB_SIZE):
            cache.add(page, page)
        cache.invalidate(5)
        cache.add(200, 3)
        assert cache.entries[5].page == 200
        assert sorted(cache.pages()) == sorted(set(range(TLB_SIZE)) - {5} | {200})

    def test_first_empty_slot_wins_over_lower_stamp(self):
        cache = tlb()
        for page in range(TLB_SIZE):
            cache.add(page, page)
        cache.invalidate(9)
        cache.invalidate(4)
        cache.add(300, 1)
        assert cache.entries[4].page == 300
        assert not cache.entries[9].valid


class TestInvalidate:
    def test_clears_matching_slot(self):
        cache = tlb()
        cache.add(2, 8)
        cache.add(3, 9)
        cache.invalidate(2)
        assert cache.lookup(2) is None
        assert cache.lookup(3) == 9
        assert cache.valid_count() == 1

    def test_unknown_page_is_noop(self):
        cache = tlb()
        cache.add(2, 8)
        cache.invalidate(99)
        assert cache.valid_count() == 1
