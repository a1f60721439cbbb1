# sqrtdecomp/utils/visualization.py

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd


def plot_block_size_sweep(results, save_path=None, show=False):
    """Plot query time against block size, one line per sequence length

    Args:
        results: List of run summaries with 'n', 'block_size' and 'blocked_seconds'
            keys, optionally 'naive_seconds'
        save_path: Where to save the figure
        show: Display the figure interactively

    Returns:
        matplotlib.figure.Figure: The plotted figure
    """
    df = pd.DataFrame(results)

    fig, axes = plt.subplots(1, 2, figsize=(15, 6))
    fig.suptitle('Block Size Sweep')

    # Time per block size
    sns.lineplot(data=df, x='block_size', y='blocked_seconds', hue='n',
                 marker='o', palette='viridis', ax=axes[0])
    axes[0].set_title('Blocked Accumulator Query Time')
    axes[0].set_xlabel('Block Size')
    axes[0].set_ylabel('Time (s)')
    axes[0].set_xscale('log')

    # Best block size against sqrt(n)
    best = df.loc[df.groupby('n')['blocked_seconds'].idxmin()]
    axes[1].plot(best['n'], best['block_size'], marker='o', label='fastest block size')
    axes[1].plot(best['n'], best['n'] ** 0.5, linestyle='--', label='sqrt(n)')
    if 'naive_seconds' in df and df['naive_seconds'].notna().any():
        ax_time = axes[1].twinx()
        ax_time.plot(best['n'], best['naive_seconds'] / best['blocked_seconds'],
                     color='gray', marker='x', label='speedup over naive')
        ax_time.set_ylabel('Speedup')
        ax_time.legend(loc='lower right')
    axes[1].set_title('Fastest Block Size per Length')
    axes[1].set_xlabel('Sequence Length (n)')
    axes[1].set_ylabel('Block Size')
    axes[1].legend(loc='upper left')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path)
        print(f"Saved block size sweep plot to {save_path}")

    if show:
        plt.show()

    return fig
