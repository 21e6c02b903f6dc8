from simulation_errors import InvalidCapacity


class PhysicalMemory:
    def __init__(self, num_frames):
        if isinstance(num_frames, bool) or not isinstance(num_frames, int) or num_frames <= 0:
            raise InvalidCapacity(f"Number of frames must be a positive integer: {num_frames!r}")
        self.num_frames = num_frames
        # Each frame stores the resident page number or None if free
        self.frames = [None] * num_frames

    def find_free_frame(self):
        for i, frame in enumerate(self.frames):
            if frame is None:
                return i
        return None

    def allocate_frame(self, frame_num, page):
        self.frames[frame_num] = page

    def free_frame(self, frame_num):
        self.frames[frame_num] = None

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def is_full(self):
        return self.find_free_frame() is None

    def resident_count(self):
        return sum(1 for frame in self.frames if frame is not None)

    def snapshot(self):
        return tuple(self.frames)


class Statistics:
    def __init__(self):
        self.hits = 0
        self.page_faults = 0
        self.evictions = 0

    @property
    def references(self):
        return self.hits + self.page_faults

    def record_hit(self):
        self.hits += 1

    def record_page_fault(self, evicted=False):
        self.page_faults += 1
        if evicted:
            self.evictions += 1

    def fault_rate(self):
        """Fault rate as a percentage; 0.0 when nothing was referenced."""
        if self.references == 0:
            return 0.0
        return self.page_faults / self.references * 100.0

    def __str__(self):
        return (f"refs={self.references} hits={self.hits} "
                f"faults={self.page_faults} fault_rate={self.fault_rate():.2f}%")
