from collections import deque


class PolicyState:
    def __init__(self, num_frames):
        self.load_order = deque()  # For FIFO, oldest arrival at the left
        self.current_time = 0  # Logical clock for LRU
        self.last_access_time = {}  # page -> stamp, for LRU
        self.access_count = {}  # page -> count, for LFU
        self.reference = [False] * num_frames  # Used bit per slot, for SC/Clock
        self.clock_hand = 0

    def touch(self, page):
        self.last_access_time[page] = self.current_time
        self.current_time += 1

    def advance_hand(self):
        self.clock_hand = (self.clock_hand + 1) % len(self.reference)

    def forget(self, page):
        self.last_access_time.pop(page, None)
        self.access_count.pop(page, None)
