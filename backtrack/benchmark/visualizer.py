"""Charts for strategy comparison results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for selection strategy benchmark results.

    Each chart is a bar per strategy, averaged over all puzzles.
    """

    COLORS = {
        "first": "#95a5a6",   # Grey
        "min": "#2ecc71",     # Green
        "freq": "#3498db",    # Blue
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="whitegrid")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self._plot_metric("time_seconds", "Average Time (seconds)",
                              "Average Solve Time by Strategy", "time_comparison.png"),
            self._plot_metric("backtracks", "Average Backtracks",
                              "Average Backtracks by Strategy", "backtracks_comparison.png"),
        ]

    def _plot_metric(self, metric: str, ylabel: str, title: str, filename: str) -> str:
        fig, ax = plt.subplots(figsize=(8, 5))

        strategies = sorted(set(r.strategy for r in self.results))
        averages = [
            np.mean([getattr(r, metric) for r in self.results if r.strategy == name])
            for name in strategies
        ]
        colors = [self.COLORS.get(name, "#e67e22") for name in strategies]

        bars = ax.bar(strategies, averages, color=colors, edgecolor='black', linewidth=0.5)

        for bar, value in zip(bars, averages):
            ax.annotate(f'{value:.4g}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Strategy', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
