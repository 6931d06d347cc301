from __future__ import annotations

import logging

from pydantic import SecretStr

from proclaunch.security.private_string import REDACTION_MARKER, PrivateString


def test_private_value_returns_stored_string() -> None:
    secret = PrivateString("hunter2")
    assert secret.private_value == "hunter2"
    assert secret.public_value == REDACTION_MARKER


def test_display_paths_never_show_the_value() -> None:
    secret = PrivateString("hunter2")
    assert str(secret) == "<hidden>"
    assert "hunter2" not in repr(secret)
    assert f"password={secret}" == "password=<hidden>"
    assert "hunter2" not in f"{[secret]}"


def test_logging_renders_marker(caplog) -> None:
    logger = logging.getLogger("proclaunch.tests")
    with caplog.at_level(logging.INFO, logger="proclaunch.tests"):
        logger.info("token=%s", PrivateString("hunter2"))
    assert "hunter2" not in caplog.text
    assert "token=<hidden>" in caplog.text


def test_equality_compares_values() -> None:
    assert PrivateString("a") == PrivateString("a")
    assert PrivateString("a") != PrivateString("b")
    assert len({PrivateString("a"), PrivateString("a")}) == 1


def test_from_secret_adopts_secret_str() -> None:
    secret = PrivateString.from_secret(SecretStr("pat_123"))
    assert secret.private_value == "pat_123"
    assert str(secret) == REDACTION_MARKER
