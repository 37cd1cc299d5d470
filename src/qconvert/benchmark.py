import random
import time
from collections import defaultdict
from typing import Callable
import pandas as pd
import plotly.graph_objects as go
import numpy as np
from tqdm import tqdm

from ._interface import MAX_BITS
from .convert import (
    bits_to_int,
    bool_array_as_result_array,
    int_to_bits,
    measurements_to_int,
)


def benchmark(
    passes: int = 1000,
    max_bits: int = MAX_BITS,
    sample_width: Callable[[], int] | None = None,
):
    """
    Round-trip random values through int_to_bits -> bits_to_int and
    int_to_bits -> results -> measurements_to_int.

    Returns:
        dict with
            timings: width -> list of seconds per round trip
            passes: number of passes run
            mismatches: number of round trips that did not reproduce the value
    """
    if sample_width is None:
        sample_width = lambda: random.randint(0, max_bits)  # noqa: E731

    timings = defaultdict(list)

    init_pat = 3
    patience = init_pat
    mismatch = 0

    for _ in tqdm(range(passes)):
        width = sample_width()
        number = random.getrandbits(width) if width > 0 else 0

        start = time.perf_counter()
        bits = int_to_bits(number, width)
        decoded = bits_to_int(bits)
        measured = measurements_to_int(bool_array_as_result_array(bits))
        timings[width].append(time.perf_counter() - start)

        assert bits.shape == (width,) and bits.dtype == np.bool_, (
            "Encoded bits have invalid format"
        )

        if decoded != number or measured != number:
            if patience > 0:
                print(
                    f"Round-trip mismatch at width {width}: expected {number}, "
                    f"got {decoded} (bits) / {measured} (results)"
                )
                patience -= 1
            mismatch += 1

    print(f"{passes} round trips over {len(timings)} widths.")
    if mismatch > 0:
        print(f"{mismatch} MISMATCHES!!!")
    return {"timings": dict(timings), "passes": passes, "mismatches": mismatch}


def compute_width_stats(benchmark_result: dict) -> pd.DataFrame:
    """
    Summarise per-width timings:
        - calls
        - mean_us, p95_us (microseconds per round trip)
    """
    rows = []
    for width, samples in benchmark_result["timings"].items():
        us = np.asarray(samples, dtype=float) * 1e6
        rows.append(
            {
                "width": int(width),
                "calls": int(us.size),
                "mean_us": float(us.mean()),
                "p95_us": float(np.percentile(us, 95)),
            }
        )

    df = pd.DataFrame(rows, columns=["width", "calls", "mean_us", "p95_us"])
    return df.sort_values("width").reset_index(drop=True)


def render_timings(stats: pd.DataFrame):
    if stats is None or stats.empty:
        print("Nothing to plot.")
        return None

    fig = go.Figure()

    fig.add_trace(
        go.Bar(
            x=stats["width"],
            y=stats["mean_us"],
            name="mean",
            marker_color="steelblue",
            opacity=0.6,
        )
    )

    fig.add_trace(
        go.Scatter(
            x=stats["width"],
            y=stats["p95_us"],
            mode="lines+markers",
            name="p95",
            line=dict(color="firebrick", width=2),
        )
    )

    fig.update_layout(
        title="Round-trip time per bit width",
        xaxis_title="bit width",
        yaxis_title="microseconds",
        template="plotly_white",
    )

    fig.show()
    return fig


def visual_benchmark(passes: int = 1000, max_bits: int = MAX_BITS):
    stats = compute_width_stats(benchmark(passes, max_bits))
    render_timings(stats)
    return stats


if __name__ == "__main__":
    visual_benchmark()
