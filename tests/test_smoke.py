# tests/test_smoke.py
"""
Smoke test: o pacote importa e processa um registro mínimo.
"""

from __future__ import annotations

from dataclasses import dataclass

import envconfig


@dataclass
class _Smoke:
    name: str = envconfig.env_field("name", value="")


def test_import_envconfig():
    assert hasattr(envconfig, "process")
    assert hasattr(envconfig, "load")
    assert issubclass(envconfig.MultiError, envconfig.EnvConfigError)


def test_process_minimal():
    spec = _Smoke()
    envconfig.process("smoke", spec, environ={"SMOKE_NAME": "svc"})
    assert spec.name == "svc"
