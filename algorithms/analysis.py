"""Summaries rendered by the results panel once a run has completed."""

from collections import Counter

from algorithms.parameters import classical_sample_count


def phase_histogram(phase_results: list, limit: int = 8) -> list:
    """
    Count each measured bitstring.

    Returns up to ``limit`` dicts sorted by the integer value of the
    bitstring, each with keys: bits, count, percentage, phase
    (phase = int(bits, 2) / 2^len(bits)).
    """
    if not phase_results:
        return []
    total = len(phase_results)
    counts = Counter(phase_results)
    rows = []
    for bits in sorted(counts, key=lambda b: int(b, 2))[:limit]:
        rows.append({
            "bits": bits,
            "count": counts[bits],
            "percentage": 100 * counts[bits] / total,
            "phase": int(bits, 2) / 2 ** len(bits),
        })
    return rows


def sampling_statistics(sampling_results: list) -> dict:
    ones = sum(1 for r in sampling_results if r == "1")
    zeros = sum(1 for r in sampling_results if r == "0")
    n = len(sampling_results)
    return {
        "samples": n,
        "ones": ones,
        "zeros": zeros,
        "ratio": ones / n if n else 0.0,
    }


def advantage_summary(epsilon: float, circuit_depth: int) -> dict:
    """Classical sample count against quantum depth for the same ε."""
    samples = classical_sample_count(epsilon)
    return {
        "classical_samples": samples,
        "circuit_depth": circuit_depth,
        "speedup": samples / circuit_depth if circuit_depth else 0.0,
        "resource_reduction": (1 - circuit_depth / samples) * 100,
    }


def accuracy_summary(epsilon: float, accuracy: float) -> dict:
    return {
        "target": 1 - epsilon,
        "achieved": accuracy,
        "error_rate": 1 - accuracy,
    }
