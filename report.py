def page_width(reference_string):
    # Widest page id over the whole stream, minus sign included
    return max((len(str(page)) for page in reference_string), default=1)


def format_trace_line(record, width):
    line = f"{record.reference:>{width}} -> "
    for page in record.frame_snapshot:
        cell = "" if page is None else page
        line += f"| {cell:>{width}} "
    line += "|"
    if record.is_fault:
        line += " FAULT"
    return line


def format_fault_total(page_faults):
    return f"page faults: {page_faults}"


def print_trace(trace, width):
    for record in trace:
        print(format_trace_line(record, width))


def print_summary(source, num_frames, results):
    print(f"\n{source} ({num_frames} frames):")
    print(f"{'Algorithm':<15} {'Page Faults':<15} {'Hits':<15} {'Hit Rate':<15}")
    print("-" * 60)
    for policy, stats in results.items():
        print(f"{policy.value:<15} {stats.page_faults:<15} {stats.hits:<15} {stats.hit_rate():<15.2%}")
