import argparse
import sys

from page_table import PageTable
from memory_manager import PhysicalMemory, Statistics
from simulation_errors import InvalidClock, SimulationError, UnknownPolicy

POLICIES = ('FIFO', 'LRU', 'LFU')

HIT = 'HIT'
FAULT = 'FAULT'


def parse_policy(name):
    if isinstance(name, str) and name.strip().upper() in POLICIES:
        return name.strip().upper()
    raise UnknownPolicy(f"Unknown algorithm: {name!r} (expected one of {', '.join(POLICIES)})")


class RunResult:
    def __init__(self):
        self.trace = []
        self.frames = []  # slot contents after each reference
        self.evicted = []  # victim page per reference, None if nothing was evicted
        self.counts = []  # reference_count of the accessed page after each reference
        self.stats = Statistics()

    @property
    def fault_count(self):
        return self.trace.count(FAULT)

    @property
    def hit_count(self):
        return self.trace.count(HIT)

    def __len__(self):
        return len(self.trace)


class ReplacementTable:
    """
    Frame table for one simulation run under a single replacement policy.

    Each table owns its frames, page metadata, statistics and logical clock;
    nothing is shared between tables, so several policies can be replayed
    over the same references without affecting one another.
    """

    def __init__(self, capacity, policy='FIFO', num_pages=None):
        self.physical_memory = PhysicalMemory(num_frames=capacity)
        self.policy = parse_policy(policy)
        self.page_table = PageTable(num_pages=num_pages)
        self.stats = Statistics()
        self.current_time = 0
        self.last_evicted = None

    @property
    def capacity(self):
        return self.physical_memory.num_frames

    def check_clock(self, clock):
        if isinstance(clock, bool) or not isinstance(clock, int) or clock < 1:
            raise InvalidClock(f"Clock must be a positive integer: {clock!r}")
        if clock < self.current_time:
            raise InvalidClock(f"Clock went backwards: {clock} < {self.current_time}")

    def access(self, page, clock):
        # Validate everything before the first mutation
        self.page_table.check_page(page)
        self.check_clock(clock)

        self.current_time = clock
        entry = self.page_table.get_entry(page)

        if entry.is_resident():
            entry.touch(clock)
            self.stats.record_hit()
            self.last_evicted = None
            return HIT

        frame_num = self.physical_memory.find_free_frame()
        victim_page = None
        if frame_num is None:
            frame_num, victim_page = self.select_victim_page()

        self.physical_memory.allocate_frame(frame_num, page)
        entry.load(frame_num, clock)
        self.stats.record_page_fault(evicted=victim_page is not None)
        self.last_evicted = victim_page
        return FAULT

    def resident_entries(self):
        entries = []
        for frame_num in range(self.physical_memory.num_frames):
            page = self.physical_memory.get_frame_info(frame_num)
            if page is not None:
                entries.append(self.page_table.get_entry(page))
        return entries

    def select_victim_page(self):
        if self.policy == 'FIFO':
            return self.select_victim_fifo()
        elif self.policy == 'LRU':
            return self.select_victim_lru()
        elif self.policy == 'LFU':
            return self.select_victim_lfu()
        else:
            raise UnknownPolicy(f"Unknown algorithm: {self.policy}")

    def select_victim_fifo(self):
        victim = min(self.resident_entries(),
                     key=lambda e: (e.arrival_time, e.frame_index))
        return self.evict_page(victim.frame_index)

    def select_victim_lru(self):
        victim = min(self.resident_entries(),
                     key=lambda e: (e.last_access_time, e.arrival_time, e.frame_index))
        return self.evict_page(victim.frame_index)

    def select_victim_lfu(self):
        victim = min(self.resident_entries(),
                     key=lambda e: (e.reference_count, e.arrival_time, e.frame_index))
        return self.evict_page(victim.frame_index)

    def evict_page(self, frame_num):
        page = self.physical_memory.get_frame_info(frame_num)
        self.page_table.get_entry(page).evict()
        self.physical_memory.free_frame(frame_num)
        return frame_num, page

    def run(self, references):
        references = list(references)
        # Reject the whole run if any reference is bad
        for page in references:
            self.page_table.check_page(page)

        result = RunResult()
        for page in references:
            outcome = self.access(page, self.current_time + 1)
            result.trace.append(outcome)
            result.frames.append(self.physical_memory.snapshot())
            result.evicted.append(self.last_evicted)
            result.counts.append(self.page_table.get_entry(page).reference_count)
            if outcome == HIT:
                result.stats.record_hit()
            else:
                result.stats.record_page_fault(evicted=self.last_evicted is not None)
        return result


def initialize(capacity, policy, num_pages=None):
    return ReplacementTable(capacity, policy, num_pages=num_pages)


def access(table, page, clock):
    return table.access(page, clock)


def run(table, references):
    return table.run(references)


def compare_policies(references, capacity, policies=POLICIES, num_pages=None):
    """Replay the same references under each policy, each on a fresh table."""
    references = list(references)
    results = {}
    for policy in policies:
        table = initialize(capacity, policy, num_pages=num_pages)
        results[table.policy] = table.run(references)
    return results


def format_frames(frames):
    return "[" + " ".join(" ." if page is None else f" {page}" for page in frames) + " ]"


def print_run(policy, capacity, references, result, out=None):
    out = out or sys.stdout
    print(f"=== {policy} (frames={capacity}) ===", file=out)
    for page, outcome, frames, count in zip(references, result.trace, result.frames, result.counts):
        label = outcome
        if outcome == HIT and policy == 'LFU':
            label = f"HIT (freq={count})"
        print(f"{page:3d}: {format_frames(frames)}  {label}", file=out)
    print(f"Summary: {result.stats}\n", file=out)


def parse_references(text):
    return [int(token) for token in text.split()]


def build_parser():
    parser = argparse.ArgumentParser(
        description="Simulate FIFO, LRU and LFU page replacement over a reference string.")
    parser.add_argument("algorithm", type=str,
                        help="FIFO | LRU | LFU | ALL (case-insensitive)")
    parser.add_argument("frames", type=int, help="number of physical frames")
    parser.add_argument("refs", type=int, nargs="*",
                        help="page references; read from stdin when omitted")
    parser.add_argument("-p", "--pages", type=int, default=None,
                        help="size of the addressable page range (default: unbounded)")
    return parser


def main(argv=None, stdin=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    references = args.refs
    if not references:
        line = (stdin or sys.stdin).readline()
        try:
            references = parse_references(line)
        except ValueError as e:
            parser.error(f"could not parse references: {e}")
    if not references:
        parser.error("no references provided")

    if args.algorithm.strip().upper() == 'ALL':
        policies = POLICIES
    else:
        policies = (args.algorithm,)

    try:
        results = compare_policies(references, args.frames, policies, num_pages=args.pages)
    except SimulationError as e:
        parser.error(str(e))

    for policy, result in results.items():
        print_run(policy, args.frames, references, result)
    return results


if __name__ == '__main__':
    main()
