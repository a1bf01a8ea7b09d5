"""
Benchmark harness.

    from sortkit.bench.measure import time_sort_call
    from sortkit.bench.runner import run_experiment
"""
