"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Visualization generator for ordering-policy benchmark results.

    Creates charts comparing how much search each policy needs per puzzle.
    """

    # Natural order gets a fixed color; shuffled runs share the palette.
    NATURAL_COLOR = "#2ecc71"

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

        sns.set_style("whitegrid")
        sns.set_palette("husl")

    def _policies(self) -> List[str]:
        # keep first-seen order so "natural" stays leftmost
        return list(dict.fromkeys(r.policy for r in self.results))

    def _puzzles(self) -> List[str]:
        return list(dict.fromkeys(r.puzzle_id for r in self.results))

    def _colors(self, policies: List[str]) -> List:
        palette = sns.color_palette("husl", len(policies))
        return [self.NATURAL_COLOR if p == "natural" else c for p, c in zip(policies, palette)]

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_comparison(),
            self.plot_nodes_by_puzzle(),
            self.plot_time_distribution(),
        ]

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times per policy."""
        fig, ax = plt.subplots(figsize=(10, 6))

        policies = self._policies()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.policy == policy])
            for policy in policies
        ]

        bars = ax.bar(policies, avg_times, color=self._colors(policies),
                      edgecolor='black', linewidth=0.5)

        # Add value labels on bars
        for bar, time in zip(bars, avg_times):
            height = bar.get_height()
            ax.annotate(f'{time:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, height),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Ordering Policy', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Ordering Policy', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_comparison.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_nodes_by_puzzle(self) -> str:
        """Create grouped bar chart of assignments tried per puzzle and policy."""
        fig, ax = plt.subplots(figsize=(12, 6))

        policies = self._policies()
        puzzles = self._puzzles()
        colors = self._colors(policies)

        x = np.arange(len(puzzles))
        width = 0.8 / len(policies)

        for i, policy in enumerate(policies):
            nodes = []
            for puzzle_id in puzzles:
                counts = [
                    r.nodes_explored for r in self.results
                    if r.policy == policy and r.puzzle_id == puzzle_id
                ]
                # log scale cannot show zero
                nodes.append(max(np.mean(counts), 1) if counts else 1)

            offset = (i - len(policies) / 2 + 0.5) * width
            ax.bar(x + offset, nodes, width,
                   label=policy,
                   color=colors[i],
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Assignments Tried (Log Scale)', fontsize=12)
        ax.set_title('Search Effort by Puzzle and Ordering Policy', fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels(puzzles)
        ax.legend(title='Policy', bbox_to_anchor=(1.05, 1), loc='upper left')
        ax.set_yscale('log')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "nodes_by_puzzle.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_distribution(self) -> str:
        """Create box plot showing time distribution per puzzle across policies."""
        fig, ax = plt.subplots(figsize=(12, 6))

        puzzles = self._puzzles()
        data = [
            [r.time_seconds for r in self.results if r.puzzle_id == puzzle_id]
            for puzzle_id in puzzles
        ]

        bp = ax.boxplot(data, patch_artist=True)
        for patch in bp['boxes']:
            patch.set_facecolor(self.NATURAL_COLOR)
            patch.set_alpha(0.7)

        ax.set_xticks(np.arange(1, len(puzzles) + 1))
        ax.set_xticklabels(puzzles)
        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time Spread Across Ordering Policies', fontsize=14, fontweight='bold')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Policy | Solved | Avg Time | Avg Memory | Avg Assignments | Avg Backtracks |",
            "|--------|--------|----------|------------|-----------------|----------------|"
        ]

        for policy in self._policies():
            policy_results = [r for r in self.results if r.policy == policy]

            solved = sum(1 for r in policy_results if r.solved)
            accuracy = (solved / len(policy_results)) * 100 if policy_results else 0

            avg_time = np.mean([r.time_seconds for r in policy_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in policy_results])
            avg_nodes = np.mean([r.nodes_explored for r in policy_results])
            avg_backtracks = np.mean([r.backtracks for r in policy_results])

            lines.append(
                f"| {policy} | {accuracy:.1f}% | {avg_time:.4f}s | {avg_memory:.2f} MB "
                f"| {int(avg_nodes):,} | {int(avg_backtracks):,} |"
            )

        content = "\n".join(lines) + "\n"

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write(content)

        return path
