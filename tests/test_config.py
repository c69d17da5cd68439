from __future__ import annotations

import logging

import pytest

import config


def test_defaults_without_environment() -> None:
    s = config.get_settings({})
    assert s["run_latency"] == 3.0
    assert s["poll_interval"] == config.POLL_INTERVAL
    assert s["sampling_tick"] == 0.2
    assert s["qft_tick"] == 0.3
    assert s["bloch_tick"] == 0.05
    assert s["seed"] is None
    assert s["log_level"] == "INFO"


def test_environment_overrides() -> None:
    s = config.get_settings({
        "QPE_RUN_LATENCY": "1.5",
        "QPE_POLL_INTERVAL": "0.1",
        "QPE_SEED": "42",
        "QPE_LOG_LEVEL": "debug",
    })
    assert s["run_latency"] == 1.5
    assert s["poll_interval"] == 0.1
    assert s["seed"] == 42
    assert s["log_level"] == "DEBUG"


@pytest.mark.parametrize(
    "env, name",
    [
        ({"QPE_RUN_LATENCY": "0"}, "QPE_RUN_LATENCY"),
        ({"QPE_RUN_LATENCY": "soon"}, "QPE_RUN_LATENCY"),
        ({"QPE_POLL_INTERVAL": "-1"}, "QPE_POLL_INTERVAL"),
        ({"QPE_SEED": "x"}, "QPE_SEED"),
        ({"QPE_LOG_LEVEL": "LOUD"}, "QPE_LOG_LEVEL"),
    ],
)
def test_invalid_values_name_the_variable(env, name) -> None:
    with pytest.raises(ValueError, match=name):
        config.get_settings(env)


def test_reads_os_environ(monkeypatch) -> None:
    monkeypatch.setenv("QPE_RUN_LATENCY", "2")
    assert config.get_settings()["run_latency"] == 2.0


def test_configure_logging_sets_level() -> None:
    config.configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING
    config.configure_logging("INFO")
    assert logging.getLogger().level == logging.INFO
