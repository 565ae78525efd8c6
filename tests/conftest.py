"""Shared fixtures for inputmask tests."""

import logging
from collections.abc import Callable, Generator

import pytest
import structlog

from inputmask import InputMask, MaskConfig, create_input_mask
from inputmask.core.config import reset_config

ENV_VARS = (
    "INPUTMASK_USE_FILL_INDEX",
    "INPUTMASK_STRICT_MARKERS",
    "INPUTMASK_LOG_OVERFLOW",
    "INPUTMASK_LOG_LEVEL",
    "INPUTMASK_LOG_FORMAT",
    "INPUTMASK_LOG_OUTPUT",
    "INPUTMASK_LOG_FILE",
)


def phone_template(token: str) -> list[str]:
    """US phone number template: (XXX) XXX-XXXX."""
    t = token
    return ["(", t, t, t, ")", " ", t, t, t, "-", t, t, t, t]


@pytest.fixture
def phone_template_fn() -> Callable[[str], list[str]]:
    return phone_template


@pytest.fixture
def phone_mask() -> InputMask:
    """Phone mask using default configuration."""
    return create_input_mask(phone_template, config=MaskConfig())


@pytest.fixture
def scanning_phone_mask() -> InputMask:
    """Phone mask that scans every slot instead of using the fill index."""
    return create_input_mask(phone_template, config=MaskConfig(use_fill_index=False))


@pytest.fixture
def date_mask() -> InputMask:
    """DD.MM.YYYY date mask."""
    return create_input_mask(
        lambda t: [t, t, ".", t, t, ".", t, t, t, t], config=MaskConfig()
    )


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test with a clean environment and no cached configuration."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Undo handler changes made by configure_logging during a test."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    structlog.reset_defaults()
