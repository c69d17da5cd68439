"""
Interactive state for one dashboard session.

``SimulationSession`` is the mutable context the Streamlit script keeps in
``st.session_state``. It owns the parameters, the last run's results, the
Idle/Running state and the cosmetic animation cursors, and exposes one
handler per user action:

    change_epsilon · change_ancillas · change_noise · toggle_run · reset

A run is a set of timeline tasks sharing one ``CancellationToken``: the
deferred completion plus the step cursor, sampling, inverse-QFT and Bloch
rotation tickers. Pausing or resetting cancels the token, so a completion
scheduled before the pause can never land afterwards.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum

import numpy as np

from config import get_settings
from algorithms.mock_run import (
    MockRunGenerator,
    RunGenerator,
    SimulationResults,
    mock_sampling_bits,
)
from algorithms.parameters import (
    DerivedQuantities,
    SimulationParameters,
    auto_ancillas,
    circuit_depth,
    clamp_ancillas,
    clamp_epsilon,
    clamp_noise,
    derive,
)
from algorithms.timeline import CancellationToken, Timeline

logger = logging.getLogger(__name__)

FINAL_STEP = 5             # set on completion
LAST_ANIMATED_STEP = 4     # the step cursor stops here while running
LOCAL_SAMPLE_LIMIT = 20    # bits shown by the sampling animation
SAMPLING_INCREMENT = 10
QFT_INCREMENT = 15
BLOCH_INCREMENT = 2


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str = ""


class SimulationSession:
    """
    Args:
        generator: anything with ``run(parameters) -> SimulationResults``
        timeline:  timeline the run tasks are scheduled on
        settings:  dict from ``config.get_settings()``
    """

    def __init__(self, generator: RunGenerator = None, timeline: Timeline = None,
                 settings: dict = None):
        self.settings = settings if settings is not None else get_settings()
        self.generator = generator or MockRunGenerator(seed=self.settings["seed"])
        self.timeline = timeline or Timeline()
        self.rng = np.random.default_rng(self.settings["seed"])

        self.parameters = SimulationParameters()
        self.results = SimulationResults.empty()
        self.run_state = RunState.IDLE
        self.current_step = 0

        self._token = None
        self._notifications: list = []
        self._clear_animation()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    @property
    def derived(self) -> DerivedQuantities:
        return derive(self.parameters)

    @property
    def nsample(self) -> int:
        return self.derived.classical_samples

    @property
    def has_results(self) -> bool:
        return not self.results.is_empty

    @property
    def display_sampling_results(self) -> list:
        if self.results.sampling_results:
            return self.results.sampling_results
        return self.local_sampling_results

    # ------------------------------------------------------------------
    # Parameter changes
    # ------------------------------------------------------------------

    def change_epsilon(self, value: float) -> None:
        epsilon = clamp_epsilon(value)
        self.parameters.epsilon = epsilon
        self.parameters.ancilla_qubits = auto_ancillas(epsilon)
        self.results.circuit_depth = circuit_depth(epsilon)
        logger.debug("epsilon=%s ancillas=%d", epsilon, self.parameters.ancilla_qubits)

    def change_ancillas(self, value: int) -> None:
        # Manual override; epsilon is left alone even if they now disagree.
        self.parameters.ancilla_qubits = clamp_ancillas(value)
        logger.debug("ancillas=%d", self.parameters.ancilla_qubits)

    def change_noise(self, value: float) -> None:
        self.parameters.noise_level = clamp_noise(value)
        logger.debug("noise=%s", self.parameters.noise_level)

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------

    def toggle_run(self) -> None:
        """Start a run when idle, pause the active run otherwise."""
        if self.is_running:
            self._pause()
        else:
            self._start()

    def reset(self) -> None:
        self._cancel_active()
        self.run_state = RunState.IDLE
        self.current_step = 0
        self.results = SimulationResults.empty()
        self._clear_animation()
        logger.info("session reset")
        self._notify("Simulation reset")

    def poll(self, now: float = None) -> int:
        return self.timeline.poll(now)

    def drain_notifications(self) -> list:
        pending, self._notifications = self._notifications, []
        return pending

    def _start(self) -> None:
        snapshot = replace(self.parameters)
        token = CancellationToken()
        self._token = token
        self.run_state = RunState.RUNNING
        self.current_step = 0
        self._clear_animation()

        s = self.settings
        self.timeline.call_later(s["run_latency"], lambda: self._complete(token, snapshot), token)
        self.timeline.call_every(s["step_interval"], self._advance_step, token)
        self.timeline.call_every(s["bloch_tick"], self._rotate_bloch, token)

        logger.info(
            "run started: epsilon=%s ancillas=%d noise=%s",
            snapshot.epsilon, snapshot.ancilla_qubits, snapshot.noise_level,
        )
        self._notify(
            "Quantum Phase Estimation Started",
            f"Running with ε={snapshot.epsilon}, {snapshot.ancilla_qubits} ancilla qubits",
        )

    def _pause(self) -> None:
        self._cancel_active()
        self.run_state = RunState.IDLE
        logger.info("run paused at step %d", self.current_step)
        self._notify("Simulation paused")

    def _complete(self, token: CancellationToken, snapshot: SimulationParameters) -> None:
        if token.cancelled:
            return
        # Stops the animation tickers sharing this token.
        token.cancel()
        self._token = None
        self.results = self.generator.run(snapshot)
        self.run_state = RunState.IDLE
        self.current_step = FINAL_STEP
        logger.info("run complete: accuracy=%.3f depth=%d",
                    self.results.accuracy, self.results.circuit_depth)
        self._notify(
            "Simulation Complete",
            f"Phase estimation accuracy: {self.results.accuracy * 100:.1f}%",
        )

    def _cancel_active(self) -> None:
        if self._token is not None:
            self._token.cancel()
            self._token = None

    # ------------------------------------------------------------------
    # Animation tickers
    # ------------------------------------------------------------------

    def _clear_animation(self) -> None:
        self.sampling_progress = 0
        self.local_sampling_results = []
        self.qft_progress = 0
        self.circuit_step = 0
        self.bloch_rotation = 0

    def _advance_step(self) -> bool:
        self.current_step += 1
        token = self._token
        if self.current_step == 1:
            self.timeline.call_every(self.settings["sampling_tick"], self._tick_sampling, token)
        elif self.current_step == 2:
            self.timeline.call_every(self.settings["qft_tick"], self._tick_qft, token)
        return self.current_step < LAST_ANIMATED_STEP

    def _tick_sampling(self) -> bool:
        self.sampling_progress += SAMPLING_INCREMENT
        if self.sampling_progress >= 100:
            self.sampling_progress = 100
            self.local_sampling_results = mock_sampling_bits(
                min(LOCAL_SAMPLE_LIMIT, self.nsample), self.rng
            )
            return False
        return True

    def _tick_qft(self) -> bool:
        self.qft_progress = min(100, self.qft_progress + QFT_INCREMENT)
        self.circuit_step = (self.circuit_step + 1) % 4
        return self.qft_progress < 100

    def _rotate_bloch(self) -> None:
        self.bloch_rotation = (self.bloch_rotation + BLOCH_INCREMENT) % 360

    def _notify(self, title: str, description: str = "") -> None:
        self._notifications.append(Notification(title, description))
