# tests/test_visualization.py

import matplotlib.pyplot as plt

from sqrtdecomp.utils.visualization import plot_block_size_sweep


def test_plot_block_size_sweep(tmp_path):
    results = [
        {'n': 100, 'block_size': 4, 'blocked_seconds': 0.02, 'naive_seconds': 0.05},
        {'n': 100, 'block_size': 10, 'blocked_seconds': 0.01, 'naive_seconds': 0.05},
        {'n': 400, 'block_size': 4, 'blocked_seconds': 0.06, 'naive_seconds': 0.2},
        {'n': 400, 'block_size': 20, 'blocked_seconds': 0.03, 'naive_seconds': 0.2}
    ]
    save_path = tmp_path / "sweep.png"

    fig = plot_block_size_sweep(results, save_path)

    assert save_path.exists()
    assert len(fig.axes) == 3
    plt.close(fig)


def test_plot_without_naive_baseline():
    results = [
        {'n': 100, 'block_size': 4, 'blocked_seconds': 0.02, 'naive_seconds': None},
        {'n': 100, 'block_size': 10, 'blocked_seconds': 0.01, 'naive_seconds': None}
    ]
    fig = plot_block_size_sweep(results)
    assert len(fig.axes) == 2
    plt.close(fig)
