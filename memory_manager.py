class CapacityError(RuntimeError):
    pass


class FrameTable:
    def __init__(self, num_frames):
        self.num_frames = num_frames
        # Each slot stores a resident page id or None if free
        self.frames = [None] * num_frames
        self.occupied = 0

    def lookup(self, page):
        for i, frame in enumerate(self.frames):
            if frame is not None and frame == page:
                return i
        return None

    def is_full(self):
        return self.occupied >= self.num_frames

    def insert_into_free_slot(self, page):
        if self.is_full():
            raise CapacityError(f"No free slot for page {page}: all {self.num_frames} frames occupied")
        # Slots fill left to right, so the next free slot is the occupied count
        frame_num = self.occupied
        self.frames[frame_num] = page
        self.occupied += 1
        return frame_num

    def replace_slot(self, frame_num, page):
        if self.frames[frame_num] is None:
            raise CapacityError(f"Cannot replace empty frame {frame_num}")
        self.frames[frame_num] = page

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def pages(self):
        return [page for page in self.frames if page is not None]

    def snapshot(self):
        return tuple(self.frames)


class Statistics:
    def __init__(self):
        self.references = 0
        self.page_faults = 0
        self.hits = 0

    def record_page_fault(self):
        self.references += 1
        self.page_faults += 1

    def record_hit(self):
        self.references += 1
        self.hits += 1

    def hit_rate(self):
        return self.hits / self.references if self.references else 0.0

    def __str__(self):
        return (f"References: {self.references}\n"
                f"Page Faults: {self.page_faults}\n"
                f"Hits: {self.hits}\n"
                f"Hit Rate: {self.hit_rate():.2%}")
