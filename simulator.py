import argparse
import sys
from collections import namedtuple
from enum import Enum

from memory_manager import FrameTable, Statistics
from policy_state import PolicyState
import report


class PolicyKind(Enum):
    FIFO = "FIFO"
    OPT = "OPT"
    LRU = "LRU"
    LFU = "LFU"
    SECOND_CHANCE = "SECOND_CHANCE"
    CLOCK = "CLOCK"


# Short names accepted on the command line
POLICY_NAMES = {
    'fifo': PolicyKind.FIFO,
    'opt': PolicyKind.OPT,
    'lru': PolicyKind.LRU,
    'lfu': PolicyKind.LFU,
    'sc': PolicyKind.SECOND_CHANCE,
    'c': PolicyKind.CLOCK,
}

USAGE = "Usage:\n\tmsim <file> <frames> <fifo|opt|lru|lfu|sc|c>"

TraceRecord = namedtuple('TraceRecord', ['reference', 'frame_snapshot', 'is_fault'])


class SimulationError(Exception):
    pass


class InvalidCapacity(SimulationError, ValueError):
    def __init__(self, num_frames):
        super().__init__(f"Invalid number of frames {num_frames}: expected positive integer")
        self.num_frames = num_frames


class UnknownPolicy(SimulationError, ValueError):
    def __init__(self, name):
        super().__init__(f"Unknown page replacement algorithm {name}")
        self.name = name


class SourceUnavailable(SimulationError, OSError):
    def __init__(self, path):
        super().__init__(f"Failed to open {path} for input")
        self.path = path


def parse_policy(name):
    if isinstance(name, PolicyKind):
        return name
    key = str(name).strip()
    if key.lower() in POLICY_NAMES:
        return POLICY_NAMES[key.lower()]
    if key.upper() in PolicyKind.__members__:
        return PolicyKind[key.upper()]
    raise UnknownPolicy(name)


def load_reference_string(filename, skipped=None):
    """
    Read whitespace-separated page ids from a file.

    Tokens that are not integers are left out of the reference string; when
    a list is passed as `skipped` they are appended to it.
    """
    try:
        with open(filename, 'r') as f:
            tokens = f.read().split()
    except OSError as e:
        raise SourceUnavailable(filename) from e

    references = []
    for token in tokens:
        try:
            references.append(int(token))
        except ValueError:
            if skipped is not None:
                skipped.append(token)
    return tuple(references)


class PageReplacementSimulator:
    """
    Steps a frame table through a reference string under one replacement policy.

    A simulator owns its frame table, policy state and statistics and is meant
    for a single pass over `run()`; build a new one to replay the same input.
    """

    def __init__(self, reference_string, num_frames, policy):
        if num_frames < 1:
            raise InvalidCapacity(num_frames)
        self.policy = parse_policy(policy)
        self.reference_string = tuple(reference_string)
        self.num_frames = num_frames
        self.frame_table = FrameTable(num_frames)
        self.state = PolicyState(num_frames)
        self.stats = Statistics()

    def run(self):
        for index in range(len(self.reference_string)):
            yield self.handle_memory_reference(index)

    def handle_memory_reference(self, index):
        page = self.reference_string[index]
        frame_num = self.frame_table.lookup(page)

        if frame_num is not None:
            self.stats.record_hit()
            self.update_after_hit(page, frame_num)
            fault = False
        else:
            self.stats.record_page_fault()
            self.handle_page_fault(index, page)
            fault = True

        return TraceRecord(page, self.frame_table.snapshot(), fault)

    def handle_page_fault(self, index, page):
        if not self.frame_table.is_full():
            frame_num = self.frame_table.insert_into_free_slot(page)
            self.update_after_insert(page, frame_num)
            return

        frame_num = self.select_victim_page(index)
        victim = self.frame_table.get_frame_info(frame_num)
        self.frame_table.replace_slot(frame_num, page)
        self.state.forget(victim)
        # The new page is bookkept exactly like a load into a free slot
        self.update_after_insert(page, frame_num)

    def update_after_hit(self, page, frame_num):
        if self.policy in (PolicyKind.FIFO, PolicyKind.OPT):
            # Arrival order and lookahead don't depend on hits
            return
        elif self.policy == PolicyKind.LRU:
            self.state.touch(page)
        elif self.policy == PolicyKind.LFU:
            self.state.access_count[page] += 1
        elif self.policy in (PolicyKind.SECOND_CHANCE, PolicyKind.CLOCK):
            self.state.reference[frame_num] = True
        else:
            raise ValueError(f"Unknown algorithm: {self.policy}")

    def update_after_insert(self, page, frame_num):
        if self.policy == PolicyKind.FIFO:
            self.state.load_order.append(page)
        elif self.policy == PolicyKind.OPT:
            return
        elif self.policy == PolicyKind.LRU:
            self.state.touch(page)
        elif self.policy == PolicyKind.LFU:
            self.state.access_count[page] = 1
        elif self.policy == PolicyKind.SECOND_CHANCE:
            self.state.reference[frame_num] = False
        elif self.policy == PolicyKind.CLOCK:
            self.state.reference[frame_num] = True
        else:
            raise ValueError(f"Unknown algorithm: {self.policy}")

    def select_victim_page(self, index):
        if self.policy == PolicyKind.FIFO:
            return self.select_victim_fifo()
        elif self.policy == PolicyKind.OPT:
            return self.select_victim_optimal(index)
        elif self.policy == PolicyKind.LRU:
            return self.select_victim_lru()
        elif self.policy == PolicyKind.LFU:
            return self.select_victim_lfu()
        elif self.policy in (PolicyKind.SECOND_CHANCE, PolicyKind.CLOCK):
            return self.select_victim_clock()
        else:
            raise ValueError(f"Unknown algorithm: {self.policy}")

    def select_victim_fifo(self):
        oldest = self.state.load_order.popleft()
        return self.frame_table.lookup(oldest)

    def select_victim_optimal(self, index):
        """
        Optimal algorithm: Replace the page that will be used furthest in the future
        (or never used again).

        Every resident page referenced again is struck from the candidates until
        only one is left. If the stream runs out first, the remaining candidates
        are never used again and the lowest frame among them is chosen.
        """
        candidates = list(range(self.num_frames))

        for idx in range(index + 1, len(self.reference_string)):
            if len(candidates) == 1:
                break
            frame_num = self.frame_table.lookup(self.reference_string[idx])
            if frame_num in candidates:
                candidates.remove(frame_num)

        return candidates[0]

    def select_victim_lru(self):
        lru_time = float('inf')
        victim_frame = 0

        for frame_num in range(self.num_frames):
            page = self.frame_table.get_frame_info(frame_num)
            last_access_time = self.state.last_access_time[page]
            # Strict comparison keeps the lowest frame on a tie
            if last_access_time < lru_time:
                lru_time = last_access_time
                victim_frame = frame_num

        return victim_frame

    def select_victim_lfu(self):
        lowest_count = float('inf')
        victim_frame = 0

        for frame_num in range(self.num_frames):
            page = self.frame_table.get_frame_info(frame_num)
            access_count = self.state.access_count[page]
            if access_count < lowest_count:
                lowest_count = access_count
                victim_frame = frame_num

        return victim_frame

    def select_victim_clock(self):
        # Terminates within two sweeps: the first clears every used bit
        while True:
            frame_num = self.state.clock_hand
            self.state.advance_hand()
            if self.state.reference[frame_num]:
                self.state.reference[frame_num] = False
            else:
                return frame_num


def run_simulation(reference_string, num_frames, policy):
    """
    Run one policy over a reference string.

    Returns the list of trace records, one per reference, and the total number
    of page faults. Raises InvalidCapacity if num_frames < 1 and UnknownPolicy
    for an unrecognized policy name.
    """
    simulator = PageReplacementSimulator(reference_string, num_frames, policy)
    trace = list(simulator.run())
    return trace, simulator.stats.page_faults


def compare_policies(reference_string, num_frames, policies=None):
    if policies is None:
        policies = list(PolicyKind)

    results = {}
    for policy in policies:
        simulator = PageReplacementSimulator(reference_string, num_frames, policy)
        for _ in simulator.run():
            pass
        results[simulator.policy] = simulator.stats
    return results


def parse_frames(value):
    try:
        num_frames = int(value)
    except ValueError:
        raise InvalidCapacity(value)
    if num_frames < 1:
        raise InvalidCapacity(num_frames)
    return num_frames


def args(argv=None):
    parser = argparse.ArgumentParser(prog='msim', description='Page replacement simulator for FIFO, OPT, LRU, LFU, Second Chance and Clock')
    parser.add_argument("file", nargs='?', help="File of whitespace-separated page references")
    parser.add_argument("frames", nargs='?', help="Number of frames")
    parser.add_argument("policy", nargs='?', help="Replacement algorithm: fifo, opt, lru, lfu, sc or c")
    parser.add_argument("--compare", action='store_true', help="Run every algorithm and print a summary table")
    parser.add_argument("-v", "--verbose", action='store_true', help="Print a banner and statistics around the trace")
    return parser.parse_args(argv)


def main(argv=None):
    arg = args(argv)

    if arg.file is None or arg.frames is None or (arg.policy is None and not arg.compare):
        print(USAGE)
        return 0

    skipped = []
    try:
        reference_string = load_reference_string(arg.file, skipped)
        num_frames = parse_frames(arg.frames)
        policy = None if arg.compare else parse_policy(arg.policy)
    except SimulationError as e:
        print(e)
        return 1

    if arg.verbose and skipped:
        print(f"Skipped {len(skipped)} malformed token(s): {' '.join(skipped)}", file=sys.stderr)

    if arg.compare:
        results = compare_policies(reference_string, num_frames)
        report.print_summary(arg.file, num_frames, results)
        return 0

    simulator = PageReplacementSimulator(reference_string, num_frames, policy)

    if arg.verbose:
        print(f"{'='*60}")
        print(f"Running {policy.value} algorithm on {arg.file}")
        print(f"{'='*60}")

    report.print_trace(simulator.run(), report.page_width(reference_string))
    print()
    print(report.format_fault_total(simulator.stats.page_faults))

    if arg.verbose:
        print(f"\nResults:")
        print(simulator.stats)
        print(f"{'='*60}")

    return 0


if __name__ == '__main__':
    sys.exit(main())
