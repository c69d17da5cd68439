import time

import matplotlib.pyplot as plt
import streamlit as st

from config import (
    ANCILLA_MAX,
    ANCILLA_MIN,
    EPSILON_MAX,
    EPSILON_MIN,
    EPSILON_STEP,
    NOISE_MAX,
    NOISE_MIN,
    NOISE_STEP,
    configure_logging,
    get_settings,
)
from algorithms.analysis import (
    accuracy_summary,
    advantage_summary,
    phase_histogram,
    sampling_statistics,
)
from algorithms.factoring import (
    DERIVATION_LIMIT,
    FactoringInputError,
    factorize,
    period_finding_derivation,
)
from algorithms.phase_estimation import (
    ALGORITHM_STEPS,
    DEFAULT_AMPLITUDE,
    DEFAULT_PHASE,
    build_qpe_circuit,
    circuit_stage,
)
from algorithms.sensing import GRID_SIZE, phase_shift_map
from algorithms.session import SimulationSession
from visualizations import factoring_viz, plotly_viz, qpe_viz


def plt_close(fig):
    """Close a matplotlib figure to avoid memory leaks across Streamlit reruns."""
    plt.close(fig)


# ---------------------------------------------------------------------------
# Cached circuit construction
# ---------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def cached_qpe_circuit(ancilla_qubits: int):
    """Build the phase estimation circuit; cached per register size."""
    return build_qpe_circuit(ancilla_qubits, phase=DEFAULT_PHASE)


# ---------------------------------------------------------------------------
# Slider callbacks (run before the script reruns)
# ---------------------------------------------------------------------------

def _on_epsilon_change():
    session = st.session_state["simulation"]
    session.change_epsilon(st.session_state["epsilon_slider"])
    # ε drives the ancilla slider; keep the widget in step with the session
    st.session_state["ancilla_slider"] = session.parameters.ancilla_qubits


def _on_ancilla_change():
    st.session_state["simulation"].change_ancillas(st.session_state["ancilla_slider"])


def _on_noise_change():
    st.session_state["simulation"].change_noise(st.session_state["noise_slider"])


# ===========================================================================
# SESSION SETUP
# ===========================================================================

st.set_page_config(page_title="Quantum Phase Estimation Simulator", layout="wide")

try:
    settings = get_settings()
except ValueError as e:
    st.error(f"Invalid configuration: {e}")
    st.stop()

configure_logging(settings["log_level"])

if "simulation" not in st.session_state:
    st.session_state["simulation"] = SimulationSession(settings=settings)
session = st.session_state["simulation"]

session.poll()
for note in session.drain_notifications():
    st.toast(f"**{note.title}**  \n{note.description}" if note.description else f"**{note.title}**")

params = session.parameters
derived = session.derived

st.session_state.setdefault("epsilon_slider", params.epsilon)
st.session_state.setdefault("ancilla_slider", params.ancilla_qubits)
st.session_state.setdefault("noise_slider", params.noise_level)

st.title("Quantum Phase Estimation Simulator")
st.caption(
    "Interactive demonstration of quantum phase estimation for single-qubit "
    "Pauli operator measurement · Sampling vs QPE · Sensing · Factoring"
)

m1, m2, m3, m4 = st.columns(4)
m1.metric("Nsample", f"~ {derived.classical_samples:,}")
m2.metric("Ancillas", params.ancilla_qubits)
m3.metric("Depth", f"~ {derived.circuit_depth}")
m4.metric("ε", params.epsilon)

st.divider()

tab_qpe, tab_sensing, tab_crypto = st.tabs(
    ["Phase Estimation", "Quantum Sensing", "Post-Quantum Cryptography"]
)

# ===========================================================================
# PHASE ESTIMATION TAB
# ===========================================================================
with tab_qpe:
    st.subheader("Simulation Controls")

    c_eps, c_anc, c_noise, c_run = st.columns(4)

    with c_eps:
        st.slider(
            "Accuracy Parameter (ε)",
            min_value=EPSILON_MIN,
            max_value=EPSILON_MAX,
            step=EPSILON_STEP,
            key="epsilon_slider",
            on_change=_on_epsilon_change,
            disabled=session.is_running,
            help="Lower ε means higher accuracy but more resources",
        )
        st.markdown(
            f"""
            | | |
            |---|---|
            | Classical samples | `{derived.classical_samples:,}` |
            | Quantum depth | `{derived.circuit_depth}` |
            """
        )

    with c_anc:
        st.slider(
            "Ancilla Qubits",
            min_value=ANCILLA_MIN,
            max_value=ANCILLA_MAX,
            step=1,
            key="ancilla_slider",
            on_change=_on_ancilla_change,
            disabled=session.is_running,
            help="Number of ancilla qubits: m = ⌈-log₂(ε)⌉",
        )
        st.markdown(
            f"""
            | | |
            |---|---|
            | Phase resolution | `2^-{params.ancilla_qubits} = {derived.phase_resolution:.4f}` |
            | Basis states | `2^{params.ancilla_qubits} = {derived.basis_states}` |
            """
        )

    with c_noise:
        st.slider(
            "Noise Level",
            min_value=NOISE_MIN,
            max_value=NOISE_MAX,
            step=NOISE_STEP,
            key="noise_slider",
            on_change=_on_noise_change,
            disabled=session.is_running,
            help="Simulates depolarizing noise on qubits",
        )
        st.caption(f"Noise: **{params.noise_level * 100:.0f}%** (display only)")

    with c_run:
        st.button(
            "⏸ Pause Simulation" if session.is_running else "▶ Run Algorithm",
            key="run_toggle",
            type="secondary" if session.is_running else "primary",
            on_click=session.toggle_run,
            width="stretch",
        )
        st.button(
            "↺ Reset",
            key="reset",
            on_click=session.reset,
            disabled=session.is_running,
            width="stretch",
        )
        steps = []
        for i, label in enumerate(ALGORITHM_STEPS, start=1):
            marker = "**→**" if session.is_running and i == session.current_step else ""
            steps.append(f"{i}. {label} {marker}")
        st.markdown("**Algorithm Steps:**\n" + "\n".join(steps))

    if derived.required_ancillas != params.ancilla_qubits:
        st.caption(
            f"ε = {params.epsilon} needs m = ⌈-log₂(ε)⌉ = {derived.required_ancillas} ancillas; "
            f"the register currently has {params.ancilla_qubits}."
        )

    st.divider()

    col_sampling, col_qpe = st.columns(2)

    # ── Direct sampling ────────────────────────────────────────────────────
    with col_sampling:
        st.markdown("### Direct Sampling Approach")
        st.markdown(
            """
            The classical route: prepare the target qubit, measure it, repeat.
            The estimate's error shrinks like 1/√N, so reaching precision ε
            takes **~1/ε² samples**.
            """
        )
        st.markdown("#### Target Qubit")
        fig_bloch = qpe_viz.plot_bloch_sphere(
            DEFAULT_PHASE, DEFAULT_AMPLITUDE,
            rotation=session.bloch_rotation, animating=session.is_running,
        )
        st.pyplot(fig_bloch)
        plt_close(fig_bloch)

        s1, s2, s3 = st.columns(3)
        s1.metric("Required Samples", f"~ {session.nsample:,}")
        s2.metric("Accuracy Parameter", f"ε = {params.epsilon}")
        s3.metric("Scaling", "O(1/ε²)")

        if session.is_running:
            st.progress(session.sampling_progress / 100,
                        text=f"Sampling Progress {session.sampling_progress}%")

        bits = session.display_sampling_results
        if bits:
            st.plotly_chart(plotly_viz.plotly_sampling_grid(bits), width="stretch")

        st.warning(
            "Classical sampling requires quadratically many measurements "
            "for accurate phase estimation."
        )

    # ── Quantum phase estimation ───────────────────────────────────────────
    with col_qpe:
        st.markdown("### Quantum Phase Estimation")
        st.markdown(
            """
            The quantum route: kick the phase of U back onto an ancilla register
            with controlled-U^(2ᵏ) gates, then read it out through the inverse
            QFT. Precision ε needs **⌈-log₂(ε)⌉ ancillas** and depth **~1/ε**.
            """
        )
        st.markdown("#### Quantum Circuit")
        fig_circuit = qpe_viz.plot_circuit(cached_qpe_circuit(params.ancilla_qubits))
        st.pyplot(fig_circuit)
        plt_close(fig_circuit)

        if session.is_running and session.current_step >= 2:
            gate, what = circuit_stage(session.circuit_step)
            st.info(f"**{gate}**: {what}")

        q1, q2, q3 = st.columns(3)
        q1.metric("Required Ancillas", f"m = {params.ancilla_qubits}")
        q2.metric("Circuit Depth", f"~ {derived.circuit_depth}")
        q3.metric("Complexity", "O(1/ε)")

        if session.is_running and session.current_step >= 2:
            st.progress(session.qft_progress / 100,
                        text=f"Quantum Fourier Transform {session.qft_progress}%")

        if session.results.phase_results:
            st.markdown("#### Measurement Results")
            st.markdown(" ".join(f"`|{r}⟩`" for r in session.results.phase_results[:16]))

        st.success("Quadratic speedup: O(1/ε) vs O(1/ε²) scaling!")

    # ── Results analysis ───────────────────────────────────────────────────
    if session.has_results:
        results = session.results
        st.divider()
        st.markdown("### Results Analysis")

        acc = accuracy_summary(params.epsilon, results.accuracy)
        adv = advantage_summary(params.epsilon, results.circuit_depth)
        samp = sampling_statistics(results.sampling_results)
        hist = phase_histogram(results.phase_results)

        r1, r2, r3 = st.columns(3)
        with r1:
            st.markdown("#### Accuracy Analysis")
            st.progress(min(1.0, acc["achieved"]),
                        text=f"Phase Estimation Accuracy {acc['achieved'] * 100:.1f}%")
            st.markdown(
                f"""
                | | |
                |---|---|
                | Target accuracy | `{acc['target'] * 100:.1f}%` |
                | Achieved accuracy | `{acc['achieved'] * 100:.1f}%` |
                | Error rate | `{acc['error_rate'] * 100:.1f}%` |
                """
            )
        with r2:
            st.markdown("#### Phase Measurement Histogram")
            if hist:
                st.plotly_chart(plotly_viz.plotly_phase_histogram(hist), width="stretch")
        with r3:
            st.markdown("#### Quantum Advantage")
            st.metric("Speedup Factor", f"{adv['speedup']:.1f}×")
            st.markdown(
                f"""
                | | |
                |---|---|
                | Classical complexity | O(1/ε²) |
                | Quantum complexity | O(1/ε) |
                | Resource reduction | `{adv['resource_reduction']:.1f}%` |
                | Classical samples needed | `{adv['classical_samples']:,}` |
                | Quantum circuit depth | `{adv['circuit_depth']}` |
                | Efficiency gain | `{adv['speedup']:.0f}× faster` |
                """
            )

        if samp["samples"]:
            st.markdown("#### Method Comparison")
            mc1, mc2 = st.columns(2)
            with mc1:
                st.markdown(
                    f"""
                    **Classical Sampling**
                    - Samples collected: {samp['samples']}
                    - |1⟩ probability: {samp['ratio'] * 100:.1f}%
                    - Required samples: {adv['classical_samples']:,}
                    """
                )
            with mc2:
                st.markdown(
                    f"""
                    **Quantum Phase Estimation**
                    - Circuit depth: {results.circuit_depth}
                    - Phase accuracy: {results.accuracy * 100:.1f}%
                    - Measurements: {len(results.phase_results)}
                    """
                )

        with st.expander("Why are these results synthetic?"):
            st.markdown(
                """
                Nothing on this page executes a circuit. The sampling bits are fair coin
                flips and the phase outcomes are the first eight basis states of the
                ancilla register, listed in order. The accuracy is ``max(0.7, 1 − ε)``.

                The numbers exist to show the *shape* of the comparison: how the
                classical sample count explodes as ε shrinks while the phase estimation
                depth grows only linearly in 1/ε.
                """
            )

    st.divider()
    st.markdown("### Resource Scaling")
    st.plotly_chart(plotly_viz.plotly_scaling_comparison(params.epsilon), width="stretch")

# ===========================================================================
# QUANTUM SENSING TAB
# ===========================================================================
with tab_sensing:
    st.subheader("Quantum Sensing · Magnetic Anomaly Detection")
    st.markdown(
        """
        A magnetic anomaly shifts the phase of nearby sensor qubits; phase estimation
        on every cell of the grid reads that shift back out. The shift decays with
        distance from the anomaly as **φ(d) = π·e^(−d/5)**, so the heatmap lights
        up around the target.
        """
    )

    st.session_state.setdefault("sensing_target", None)
    st.session_state.setdefault("sensing_map", None)

    col_place, col_map = st.columns(2)
    with col_place:
        px, py = st.columns(2)
        tx = px.number_input("Target x", min_value=0, max_value=GRID_SIZE - 1, value=GRID_SIZE // 2, step=1)
        ty = py.number_input("Target y", min_value=0, max_value=GRID_SIZE - 1, value=GRID_SIZE // 2, step=1)

        b1, b2 = st.columns(2)
        if b1.button("Place Target", key="place_target", width="stretch"):
            st.session_state["sensing_target"] = (int(tx), int(ty))
            st.session_state["sensing_map"] = None
        if b2.button("Scan Grid", key="scan_grid", type="primary", width="stretch",
                     disabled=st.session_state["sensing_target"] is None):
            try:
                st.session_state["sensing_map"] = phase_shift_map(st.session_state["sensing_target"])
            except ValueError as e:
                st.error(str(e))

        st.plotly_chart(
            plotly_viz.plotly_target_grid(st.session_state["sensing_target"], GRID_SIZE),
            width="stretch",
        )

    with col_map:
        if st.session_state["sensing_map"] is not None:
            st.plotly_chart(
                plotly_viz.plotly_sensing_heatmap(st.session_state["sensing_map"]),
                width="stretch",
            )
        else:
            st.info("Place a target and scan the grid to see the phase map.")

# ===========================================================================
# CRYPTOGRAPHY TAB
# ===========================================================================
with tab_crypto:
    st.subheader("Post-Quantum Cryptography")
    st.markdown(
        """
        **The threat to modern cryptography:** RSA relies on the difficulty of
        factoring large numbers. Shor's algorithm, run on a sufficiently powerful
        quantum computer, factors them exponentially faster than any known
        classical algorithm.
        """
    )
    st.info(
        "**Quantum Phase Estimation and Shor's Algorithm.** Shor's algorithm uses "
        "phase estimation at its core: the period of aˣ mod N appears as a phase, "
        "and the period gives away the factors. This demo simplifies the process to "
        "illustrate the concept."
    )

    st.markdown("### Interactive Factoring Demonstration")
    raw_n = st.text_input("Number to factor", value="15")

    if st.button("Factor with Simulated QPE", key="factor", type="primary"):
        try:
            factors = factorize(raw_n)
        except FactoringInputError as e:
            st.error(str(e))
        else:
            n = factors[0] if len(factors) == 1 else factors[0] * factors[1]
            if len(factors) == 1:
                st.success(f"{n} is prime: its only factor is **{n}**.")
            else:
                st.success(f"The factors of {n} are **{factors[0]} and {factors[1]}**.")

            derivation = period_finding_derivation(n)
            if derivation is not None:
                fig = factoring_viz.plot_derivation(derivation)
                st.pyplot(fig)
                plt_close(fig)
            elif len(factors) == 2:
                st.caption(
                    "The period-finding walkthrough covers odd N up to "
                    f"{DERIVATION_LIMIT:,} that are not prime powers; this one was "
                    "split by trial division alone."
                )

    st.markdown("### The Importance of Post-Quantum Cryptography")
    st.markdown(
        """
        To counter the threat, new cryptographic standards, known as **Post-Quantum
        Cryptography (PQC)**, are being developed. They rest on mathematical problems
        believed to be hard for both classical and quantum computers to solve.
        """
    )

# ---------------------------------------------------------------------------
# Keep polling while a run is active so the timers advance
# ---------------------------------------------------------------------------
if session.is_running:
    time.sleep(settings["poll_interval"])
    st.rerun()
