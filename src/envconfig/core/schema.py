# src/envconfig/core/schema.py
"""
Tabela estática de descritores de campo.

Este módulo transforma uma dataclass em uma tupla imutável de `FieldSpec`,
na ordem de declaração dos campos. O processor consome apenas essa tabela,
nunca a anotação bruta.

Decisões arquiteturais:
    - A tabela é calculada uma vez por tipo (`lru_cache`, até 128 tipos) e é
      somente leitura
    - Anotações não resolvíveis (tipos locais) caem para `resolve_hints`
    - Campos privados (prefixo `_`) e dataclasses `frozen` não são graváveis
    - Campos sem tag `envconfig` continuam na tabela, marcados por `key == ""`

Invariantes:
    - A ordem da tabela é a ordem de `dataclasses.fields`
    - `nested` só é preenchido para campos do tipo STRUCT

Limites explícitos:
    - Não consulta o ambiente
    - Não converte valores
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Tuple

from . import tags
from .types import Kind, classify, resolve_hints, struct_type


@dataclass(frozen=True)
class FieldSpec:
    """Descritor de um campo configurável."""

    name: str
    kind: Kind
    type_name: str
    bits: int
    key: str
    default: str
    required: bool
    settable: bool
    nested: Optional[type] = None


@lru_cache(maxsize=128)
def describe(cls: type) -> Tuple[FieldSpec, ...]:
    """
    Constrói a tabela de descritores de uma dataclass.

    Args:
        cls (type): Tipo dataclass.

    Returns:
        Tuple[FieldSpec, ...]: Descritores na ordem de declaração.

    Raises:
        TypeError: Se `cls` não for uma dataclass.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise TypeError(f"{cls!r} is not a dataclass type")

    hints = resolve_hints(cls)
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]

    specs = []
    for f in dataclasses.fields(cls):
        annotation: Any = hints.get(f.name, f.type)
        kind, type_name, bits = classify(annotation)
        key, default, required = tags.read(f.metadata)
        specs.append(
            FieldSpec(
                name=f.name,
                kind=kind,
                type_name=type_name,
                bits=bits,
                key=key,
                default=default,
                required=required,
                settable=not frozen and not f.name.startswith("_"),
                nested=struct_type(annotation) if kind is Kind.STRUCT else None,
            )
        )
    return tuple(specs)
