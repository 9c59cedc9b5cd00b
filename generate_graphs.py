import argparse
import random
import sys

import matplotlib.pyplot as plt

from simulator import PolicyKind, SimulationError, compare_policies, load_reference_string

DEFAULT_FRAME_RANGE = range(1, 11)
DEFAULT_OUTPUT = 'algorithm_comparison.png'


def generate_reference_string(length, page_range, seed=None):
    rng = random.Random(seed)
    return tuple(rng.randint(1, page_range) for _ in range(length))


def collect_fault_counts(reference_string, frame_range=DEFAULT_FRAME_RANGE):
    results = {policy: [] for policy in PolicyKind}
    for num_frames in frame_range:
        stats = compare_policies(reference_string, num_frames)
        for policy in PolicyKind:
            results[policy].append(stats[policy].page_faults)
    return results


def plot_fault_counts(results, frame_range, output=DEFAULT_OUTPUT, show=False):
    frames = list(frame_range)
    fig, axes = plt.subplots(1, 2, figsize=(15, 5))
    fig.suptitle('Page Replacement Algorithm Comparison', fontsize=14, fontweight='bold')

    ax = axes[0]
    for policy, faults in results.items():
        ax.plot(frames, faults, label=policy.value, marker='o')
    ax.set_title('Page Faults vs Number of Frames')
    ax.set_xlabel('Number of Frames')
    ax.set_ylabel('Page Faults')
    ax.grid(True, alpha=0.3)
    ax.legend()

    # Bars at the largest frame count
    ax = axes[1]
    policies = list(results)
    x = range(len(policies))
    bars = ax.bar(x, [results[policy][-1] for policy in policies])
    for bar in bars:
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width()/2., height,
                f'{int(height)}', ha='center', va='bottom', fontsize=9)
    ax.set_title(f'Page Faults with {frames[-1]} Frames')
    ax.set_xticks(list(x))
    ax.set_xticklabels([policy.value for policy in policies])
    ax.grid(axis='y', alpha=0.3)

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    if show:
        plt.show()
    plt.close(fig)
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot page faults of every replacement algorithm across frame counts')
    parser.add_argument("file", nargs='?', help="Reference file; a random reference string is generated if omitted")
    parser.add_argument("--frames", type=int, default=DEFAULT_FRAME_RANGE.stop - 1, help="Largest number of frames to simulate")
    parser.add_argument("--length", type=int, default=1000, help="Length of a generated reference string")
    parser.add_argument("--pages", type=int, default=20, help="Number of distinct pages in a generated reference string")
    parser.add_argument("--seed", type=int, help="Seed for the generated reference string")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="Where to save the graph")
    parser.add_argument("--show", action='store_true', help="Open the graph in a window")
    arg = parser.parse_args(argv)
    if arg.frames < 1:
        parser.error(f"--frames must be a positive integer, got {arg.frames}")

    if arg.file:
        try:
            reference_string = load_reference_string(arg.file)
        except SimulationError as e:
            print(e)
            return 1
    else:
        reference_string = generate_reference_string(arg.length, arg.pages, arg.seed)

    frame_range = range(1, arg.frames + 1)
    print("Running simulations...")
    results = collect_fault_counts(reference_string, frame_range)
    plot_fault_counts(results, frame_range, arg.output, show=arg.show)
    print(f"\nGraph saved as '{arg.output}'")
    return 0


if __name__ == '__main__':
    sys.exit(main())
