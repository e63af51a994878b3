from .graph_bench import BenchConfig, run_benchmarks

__all__ = ["BenchConfig", "run_benchmarks"]
