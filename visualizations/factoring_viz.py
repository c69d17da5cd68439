from math import gcd

import matplotlib.pyplot as plt


def plot_derivation(derivation: dict):
    """
    Matplotlib figure with a plain-text breakdown of how the period r of
    aˣ mod N leads to the factors.

    Args:
        derivation: dict from ``algorithms.factoring.period_finding_derivation``
    """
    n = derivation["n"]
    a = derivation["a"]
    period = derivation["period"]
    x = derivation["half_power"]
    f1, f2 = derivation["factors"]

    lines = [
        f"Shor's Reduction: Factoring N = {n}",
        "",
        f"  Step 1 — Choose a = {a}  (coprime to {n})",
        "  Step 2 — Period finding (the phase estimation step):",
        "            Find r such that a^r ≡ 1 (mod N)",
        f"            r = {period}",
        f"            Verify: {a}^{period} mod {n} = {pow(a, period, n)} ✓",
        "",
        f"  Step 3 — Compute factor candidates (r = {period} is even ✓):",
        f"            x = a^(r/2) mod N = {x}",
        "",
        f"            gcd(x - 1, N) = gcd({x - 1}, {n}) = {gcd(x - 1, n)}",
        f"            gcd(x + 1, N) = gcd({x + 1}, {n}) = {gcd(x + 1, n)}",
        "",
        f"  Result:   {n} = {f1} × {f2}",
    ]

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.axis("off")
    ax.text(
        0.05,
        0.95,
        "\n".join(lines),
        transform=ax.transAxes,
        fontsize=13,
        verticalalignment="top",
        fontfamily="monospace",
        bbox=dict(boxstyle="round,pad=0.8", facecolor="#ffeaa7", alpha=0.8),
    )
    ax.set_title("Factor Derivation", fontsize=14, pad=10)
    plt.tight_layout()
    return fig
