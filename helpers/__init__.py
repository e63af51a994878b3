from . import benchmark, interop, models
from .benchmark import Benchmark, exec_time, med_exec_time
from .models import GRAPHS, GraphData, get_model

__all__ = [
    "Benchmark",
    "GRAPHS",
    "GraphData",
    "benchmark",
    "exec_time",
    "get_model",
    "interop",
    "med_exec_time",
    "models",
]
