# tests/conftest.py
"""
Fixtures compartilhados para testes do envconfig.

Este módulo define fixtures reutilizáveis que fornecem:
- um ambiente isolado (mapeamento explícito) para o processor
- limpeza de variáveis do processo para testes via `os.environ`
- captura de registros do loguru

Decisões arquiteturais:
    - A maioria dos testes passa `environ=` explicitamente, sem tocar
      o ambiente real do processo
    - Testes que exercitam `os.environ` usam `monkeypatch`, que restaura
      o estado ao final

Invariantes:
    - Nenhuma fixture escreve no ambiente sem restauração
    - O loguru volta a ficar desabilitado para `envconfig` após cada teste

Limites explícitos:
    - Não contém dataclasses de teste (cada módulo define as suas no nível
      do módulo, para que as anotações sejam resolvíveis)
"""

import pytest


@pytest.fixture
def app_env(monkeypatch):
    """
    Remove do processo qualquer variável com prefixo `APP_` e devolve um
    setter que grava variáveis via `monkeypatch`.
    """
    import os

    for key in list(os.environ):
        if key.startswith("APP_"):
            monkeypatch.delenv(key, raising=False)

    def _set(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)

    return _set


@pytest.fixture
def log_records():
    """
    Habilita os logs do envconfig e coleta os registros emitidos.

    Returns:
        list: registros (`message.record`) na ordem de emissão.
    """
    from loguru import logger

    records = []
    logger.enable("envconfig")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
    logger.disable("envconfig")
