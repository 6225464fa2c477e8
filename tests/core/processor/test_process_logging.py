# tests/core/processor/test_process_logging.py
"""
Testes de logging do processor.

Os testes asseguram que:
- o pacote é silencioso por padrão
- com logs habilitados, cada chave processada é registrada
- valores resolvidos nunca aparecem nas mensagens
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from loguru import logger

from envconfig import MultiError, env_field, process


@dataclass
class _Secrets:
    password: str = env_field("password", value="")
    missing: str = env_field("missing", value="")
    retries: int = env_field("retries", value=0)


def test_silent_by_default():
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    try:
        process("APP", _Secrets(), environ={"APP_PASSWORD": "hunter2"})
    finally:
        logger.remove(handler_id)
    assert not [r for r in records if r["name"].startswith("envconfig")]


def test_processed_keys_are_logged_without_values(log_records):
    process("APP", _Secrets(), environ={"APP_PASSWORD": "hunter2"})

    messages = [r["message"] for r in log_records]
    assert any("APP_PASSWORD" in m for m in messages)
    assert any("APP_MISSING" in m for m in messages)
    assert not any("hunter2" in m for m in messages)


def test_aggregate_failure_is_logged(log_records):
    with pytest.raises(MultiError):
        process("APP", _Secrets(), environ={"APP_RETRIES": "x"})

    assert any("1 field error(s)" in r["message"] for r in log_records)
    assert all(r["level"].name == "DEBUG" for r in log_records)
