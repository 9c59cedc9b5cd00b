from memory_manager import Statistics
from report import format_fault_total, format_trace_line, page_width, print_summary, print_trace
from simulator import PolicyKind, TraceRecord, run_simulation


def test_page_width_counts_sign():
    assert page_width([1, 22, 3]) == 2
    assert page_width([5, -10]) == 3
    assert page_width([0]) == 1
    assert page_width([]) == 1


def test_format_trace_line_pads_to_width():
    record = TraceRecord(5, (-10, 5, None), True)
    assert format_trace_line(record, 3) == "  5 -> | -10 |   5 |     | FAULT"


def test_format_trace_line_hit_has_no_marker():
    record = TraceRecord(2, (1, 2), False)
    assert format_trace_line(record, 1) == "2 -> | 1 | 2 |"


def test_format_fault_total():
    assert format_fault_total(7) == "page faults: 7"


def test_print_trace(capsys):
    reference_string = [10, 2, 10]
    trace, _ = run_simulation(reference_string, 2, PolicyKind.FIFO)
    print_trace(trace, page_width(reference_string))
    assert capsys.readouterr().out.splitlines() == [
        "10 -> | 10 |    | FAULT",
        " 2 -> | 10 |  2 | FAULT",
        "10 -> | 10 |  2 |",
    ]


def test_print_summary(capsys):
    stats = Statistics()
    stats.record_page_fault()
    stats.record_hit()
    print_summary('refs.txt', 2, {PolicyKind.LRU: stats})

    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "refs.txt (2 frames):"
    assert lines[2].split() == ['Algorithm', 'Page', 'Faults', 'Hits', 'Hit', 'Rate']
    assert lines[4].split() == ['LRU', '1', '1', '50.00%']
