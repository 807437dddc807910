"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest


@pytest.fixture
def loguru_messages() -> Iterator[list[str]]:
    """Capture loguru output as "LEVEL:message" strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(
            f"{message.record['level'].name}:{message.record['message']}"
        ),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)


@pytest.fixture(autouse=True)
def _clear_artspeople_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ARTSPEOPLE_DATE_FORMAT",
        "ARTSPEOPLE_CUSTOMER_POLICY",
        "ARTSPEOPLE_VALIDATE_HEADER",
        "ARTSPEOPLE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
