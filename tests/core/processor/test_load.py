# tests/core/processor/test_load.py
"""
Testes da conveniência `load`.

Os testes asseguram que:
- `load` constrói a instância e a preenche a partir do ambiente
- campos sem default recebem o valor zero do tipo
- erros de campo e alvos inválidos são levantados como em `process`
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from envconfig import InvalidSpecificationError, MultiError, env_field, load


@dataclass
class _Limits:
    burst: int = env_field("burst", default="10")


@dataclass
class _Config:
    name: str = env_field("name", required=True)
    limits: _Limits = env_field("limits")
    verbose: bool = env_field("verbose", value=False)


def test_load_builds_and_populates_instance():
    cfg = load("svc", _Config, environ={"SVC_NAME": "api", "SVC_LIMITS_BURST": "32"})

    assert isinstance(cfg, _Config)
    assert cfg.name == "api"
    assert cfg.limits.burst == 32
    assert cfg.verbose is False


def test_load_uses_zero_values_for_fields_without_defaults():
    cfg = load("svc", _Config, environ={"SVC_NAME": "api"})
    assert cfg.limits == _Limits(burst=10)


def test_load_reports_field_errors():
    with pytest.raises(MultiError) as excinfo:
        load("svc", _Config, environ={})
    assert [e.key_name for e in excinfo.value.errors] == ["SVC_NAME"]


@pytest.mark.parametrize("target", [_Config(name="x", limits=_Limits(burst=1)), int, "svc"])
def test_load_requires_dataclass_type(target):
    with pytest.raises(InvalidSpecificationError):
        load("svc", target, environ={})
