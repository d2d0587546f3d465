"""
Shared pytest fixtures for termcodec tests.
"""

from __future__ import annotations

from typing import Callable, Generator

import pytest

from termcodec.config import (
    ENV_MAX_COMMAND_CHARACTERS,
    ENV_MAX_KEY_CHARACTERS,
    ENV_MAX_PARAMETER_VALUE,
    ENV_MAX_PARAMETERS,
)
from termcodec.types import InputDecodeState, OutputDecodeState, ParseResult


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_limit_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test with the default codec limits."""
    for name in (
        ENV_MAX_PARAMETERS,
        ENV_MAX_COMMAND_CHARACTERS,
        ENV_MAX_KEY_CHARACTERS,
        ENV_MAX_PARAMETER_VALUE,
    ):
        monkeypatch.delenv(name, raising=False)
    yield


# =============================================================================
# Decoder Fixtures
# =============================================================================


@pytest.fixture
def output_state() -> OutputDecodeState:
    return OutputDecodeState()


@pytest.fixture
def input_state() -> InputDecodeState:
    return InputDecodeState()


@pytest.fixture
def feed_output(output_state: OutputDecodeState) -> Callable[[bytes], list[ParseResult]]:
    """Feed bytes to the output decoder and collect each result."""
    from termcodec.commands import decode_output

    def _feed(data: bytes) -> list[ParseResult]:
        return [decode_output(output_state, byte) for byte in data]

    return _feed


@pytest.fixture
def feed_input(input_state: InputDecodeState) -> Callable[[bytes], list[ParseResult]]:
    """Feed bytes to the input decoder and collect each result."""
    from termcodec.keys import decode_input

    def _feed(data: bytes) -> list[ParseResult]:
        return [decode_input(input_state, byte) for byte in data]

    return _feed
