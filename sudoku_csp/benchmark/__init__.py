"""Benchmark module for comparing candidate ordering policies."""

from .benchmark import Benchmark, BenchmarkResult, OrderFactory, default_policies
from .visualizer import Visualizer

__all__ = ["Benchmark", "BenchmarkResult", "OrderFactory", "Visualizer", "default_policies"]
