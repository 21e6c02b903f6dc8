import argparse

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from simulator import POLICIES, compare_policies

BELADY_REFERENCES = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


def collect_fault_counts(references, frame_counts, policies=POLICIES):
    """Return {policy: [fault_count for each frame count]}."""
    results = {policy: [] for policy in policies}
    for frames in frame_counts:
        runs = compare_policies(references, frames, policies)
        for policy in policies:
            results[policy].append(runs[policy].fault_count)
    return results


def plot_fault_counts(results, frame_counts, output='policy_comparison.png'):
    fig, ax = plt.subplots(figsize=(8, 5))
    fig.suptitle('Page Replacement Policy Comparison', fontsize=14, fontweight='bold')

    for policy, faults in results.items():
        ax.plot(list(frame_counts), faults, marker='o', label=policy)
        for x, y in zip(frame_counts, faults):
            ax.annotate(f'{y}', (x, y), textcoords='offset points', xytext=(0, 6),
                        ha='center', fontsize=8)

    ax.set_xlabel('Frames')
    ax.set_ylabel('Page Faults')
    ax.set_xticks(list(frame_counts))
    ax.grid(alpha=0.3)
    ax.legend(frameon=True)

    plt.tight_layout()
    plt.savefig(output, dpi=300, bbox_inches='tight')
    plt.close(fig)
    return output


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot page faults against frame count per policy.")
    parser.add_argument("refs", type=int, nargs="*", help="page references (default: Belady's string)")
    parser.add_argument("-m", "--max-frames", type=int, default=6)
    parser.add_argument("-o", "--output", default='policy_comparison.png')
    args = parser.parse_args(argv)

    references = args.refs or BELADY_REFERENCES
    frame_counts = range(1, args.max_frames + 1)

    print("Running simulations...")
    results = collect_fault_counts(references, frame_counts)
    print(f"{'Frames':<8}" + "".join(f"{policy:<8}" for policy in results))
    for i, frames in enumerate(frame_counts):
        print(f"{frames:<8}" + "".join(f"{results[policy][i]:<8}" for policy in results))

    output = plot_fault_counts(results, frame_counts, args.output)
    print(f"\nGraph saved as '{output}'")
    return results


if __name__ == '__main__':
    main()
