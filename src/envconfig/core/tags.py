# src/envconfig/core/tags.py
"""
Vocabulário de tags por campo.

As tags vivem em `dataclasses.field(metadata=...)` e são reconhecidas
literalmente pelo processor:

    - `envconfig`: sufixo da chave; ausente ou vazio → campo ignorado
    - `default`:   literal usado quando a variável está ausente ou vazia
    - `required`:  só ativa o erro de obrigatoriedade quando vale `"true"`

Exemplo:

    @dataclass
    class Database:
        host: str = field(default="", metadata={"envconfig": "host", "required": "true"})
        port: int = env_field("port", default="5432", value=0)

Os helpers deste módulo apenas produzem o mapeamento de metadata; nenhum
deles consulta o ambiente.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Mapping, Optional, Tuple

ENVCONFIG = "envconfig"
DEFAULT = "default"
REQUIRED = "required"


def tags(key: str, default: Optional[str] = None, required: bool = False) -> Dict[str, str]:
    """Monta o mapeamento de metadata para um campo configurável."""
    out = {ENVCONFIG: key}
    if default is not None:
        out[DEFAULT] = default
    if required:
        out[REQUIRED] = "true"
    return out


def env_field(
    key: str,
    *,
    default: Optional[str] = None,
    required: bool = False,
    value: Any = dataclasses.MISSING,
    factory: Any = dataclasses.MISSING,
    **kwargs: Any,
) -> Any:
    """
    Atalho para `dataclasses.field` com as tags do envconfig.

    `default` é o literal de fallback do ambiente (string), não o default
    da dataclass; este último é passado em `value` ou `factory`.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata.update(tags(key, default=default, required=required))
    return dataclasses.field(default=value, default_factory=factory, metadata=metadata, **kwargs)


def _text(value: Any) -> str:
    # metadata escrita à mão pode trazer valores não textuais (ex.: 8080)
    return "" if value is None else str(value)


def read(metadata: Mapping[str, Any]) -> Tuple[str, str, bool]:
    """Retorna `(key, default, required)` a partir da metadata de um campo."""
    key = _text(metadata.get(ENVCONFIG))
    default = _text(metadata.get(DEFAULT))
    required = metadata.get(REQUIRED) == "true"
    return key, default, required
