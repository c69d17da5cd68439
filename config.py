import logging
import os

# ---------------------------------------------------------------------------
# Slider bounds (value, step) for the control panel
# ---------------------------------------------------------------------------

EPSILON_MIN, EPSILON_MAX, EPSILON_STEP = 0.01, 0.5, 0.01
ANCILLA_MIN, ANCILLA_MAX = 3, 8
NOISE_MIN, NOISE_MAX, NOISE_STEP = 0.0, 0.2, 0.01

DEFAULT_EPSILON = 0.1
DEFAULT_ANCILLAS = 4
DEFAULT_NOISE = 0.0

# ---------------------------------------------------------------------------
# Run timing (seconds)
# ---------------------------------------------------------------------------

RUN_LATENCY = 3.0          # delay before a run completes
STEP_INTERVAL = 0.5        # algorithm step cursor advances 1..4
SAMPLING_TICK = 0.2        # sampling progress bar, +10% per tick
QFT_TICK = 0.25           # inverse QFT progress bar, +15% per tick
BLOCH_TICK = 0.05          # Bloch sphere rotation, +2 degrees per tick
POLL_INTERVAL = 0.25       # Streamlit rerun cadence while a run is active

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_float(env: dict, name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0, got {raw!r}")
    return value


def get_settings(env: dict = None) -> dict:
    """
    Collect runtime settings for the dashboard.

    Values come from the module defaults, overridden by environment
    variables when present.

    Returns a dict with keys:
        run_latency, poll_interval, step_interval,
        sampling_tick, qft_tick, bloch_tick,
        seed (int or None), log_level (str)
    """
    env = os.environ if env is None else env

    seed_raw = env.get("QPE_SEED")
    seed = None
    if seed_raw not in (None, ""):
        try:
            seed = int(seed_raw)
        except ValueError:
            raise ValueError(f"QPE_SEED must be an integer, got {seed_raw!r}") from None

    log_level = (env.get("QPE_LOG_LEVEL") or "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"QPE_LOG_LEVEL is not a logging level: {log_level!r}")

    return {
        "run_latency": _positive_float(env, "QPE_RUN_LATENCY", RUN_LATENCY),
        "poll_interval": _positive_float(env, "QPE_POLL_INTERVAL", POLL_INTERVAL),
        "step_interval": STEP_INTERVAL,
        "sampling_tick": SAMPLING_TICK,
        "qft_tick": QFT_TICK,
        "bloch_tick": BLOCH_TICK,
        "seed": seed,
        "log_level": log_level,
    }


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the root logger once per process."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_LOG_FORMAT)
    else:
        root.setLevel(level)
