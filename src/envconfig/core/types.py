# src/envconfig/core/types.py
"""
Tipos de campo suportados pelo envconfig.

Este módulo traduz a anotação de tipo de um atributo de dataclass para um
`Kind` canônico, usado pelo processor para decidir a conversão.

Python não possui inteiros e floats com largura fixa; as larguras são
declaradas via `typing.Annotated` com um marcador `Numeric`:

    port: Uint16 = 0
    ratio: Float32 = 0.0

Tipos reconhecidos:
    - str                       → STRING
    - int, Int8 … Int64         → INT   (int = 64 bits)
    - Uint, Uint8 … Uint64      → UINT  (Uint = 64 bits)
    - bool                      → BOOL
    - float, Float32, Float64   → FLOAT (float = 64 bits)
    - dataclass                 → STRUCT
    - urllib.parse.ParseResult  → URL
    - qualquer outro            → OTHER (ignorado)

`Optional[X]` é desembrulhado para `X`.
"""

from __future__ import annotations

import dataclasses
import sys
import types
import typing
from dataclasses import dataclass
from enum import Enum
from typing import Any, Annotated, Dict, Optional, Tuple
from urllib.parse import ParseResult


class Kind(str, Enum):
    STRING = "string"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    FLOAT = "float"
    STRUCT = "struct"
    URL = "url"
    OTHER = "other"


@dataclass(frozen=True)
class Numeric:
    """Marcador de largura para campos numéricos (usado dentro de `Annotated`)."""

    name: str
    kind: Kind
    bits: int


Int8 = Annotated[int, Numeric("int8", Kind.INT, 8)]
Int16 = Annotated[int, Numeric("int16", Kind.INT, 16)]
Int32 = Annotated[int, Numeric("int32", Kind.INT, 32)]
Int64 = Annotated[int, Numeric("int64", Kind.INT, 64)]

Uint = Annotated[int, Numeric("uint", Kind.UINT, 64)]
Uint8 = Annotated[int, Numeric("uint8", Kind.UINT, 8)]
Uint16 = Annotated[int, Numeric("uint16", Kind.UINT, 16)]
Uint32 = Annotated[int, Numeric("uint32", Kind.UINT, 32)]
Uint64 = Annotated[int, Numeric("uint64", Kind.UINT, 64)]

Float32 = Annotated[float, Numeric("float32", Kind.FLOAT, 32)]
Float64 = Annotated[float, Numeric("float64", Kind.FLOAT, 64)]

_UNION_ORIGINS = (typing.Union,) + ((types.UnionType,) if hasattr(types, "UnionType") else ())

_PLAIN = {
    str: Numeric("string", Kind.STRING, 0),
    bool: Numeric("bool", Kind.BOOL, 0),
    int: Numeric("int", Kind.INT, 64),
    float: Numeric("float64", Kind.FLOAT, 64),
}


def _unwrap_optional(tp: Any) -> Tuple[Any, bool]:
    args = typing.get_args(tp)
    if typing.get_origin(tp) in _UNION_ORIGINS:
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1:
            return rest[0], True
    return tp, False


def classify(tp: Any) -> Tuple[Kind, str, int]:
    """
    Classifica uma anotação de tipo.

    Returns:
        (kind, type_name, bits)
    """
    tp, _ = _unwrap_optional(tp)

    if typing.get_origin(tp) is Annotated:
        base, *extras = typing.get_args(tp)
        for extra in extras:
            if isinstance(extra, Numeric):
                return extra.kind, extra.name, extra.bits
        tp = base

    if isinstance(tp, type) and tp in _PLAIN:
        plain = _PLAIN[tp]
        return plain.kind, plain.name, plain.bits
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return Kind.STRUCT, tp.__name__, 0
    if tp is ParseResult:
        return Kind.URL, "ParseResult", 0
    return Kind.OTHER, getattr(tp, "__name__", str(tp)), 0


def zero_value(tp: Any) -> Any:
    """
    Valor zero de uma anotação de tipo.

    Usado para construir instâncias novas de registros aninhados cujos
    campos não possuem default na dataclass.
    """
    base, optional = _unwrap_optional(tp)
    if optional:
        return None
    kind, _, _ = classify(base)
    if kind is Kind.STRING:
        return ""
    if kind in (Kind.INT, Kind.UINT):
        return 0
    if kind is Kind.FLOAT:
        return 0.0
    if kind is Kind.BOOL:
        return False
    if kind is Kind.STRUCT:
        return new_instance(_strip_annotated(base))
    return None


def _strip_annotated(tp: Any) -> Any:
    if typing.get_origin(tp) is Annotated:
        return typing.get_args(tp)[0]
    return tp


def _from_default(f: dataclasses.Field) -> Any:
    if f.default is not dataclasses.MISSING:
        return type(f.default)
    if isinstance(f.default_factory, type):
        return f.default_factory
    return Any


def resolve_hints(cls: type) -> Dict[str, Any]:
    """
    Resolve as anotações dos campos de `cls`.

    Com `from __future__ import annotations`, tipos definidos dentro de uma
    função não são visíveis para `typing.get_type_hints`. Nesse caso cada
    campo é resolvido isoladamente no módulo da classe; um nome que continua
    indefinido é inferido pelo default do campo, ou vira `Any` (OTHER).
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except NameError:
        pass

    module = sys.modules.get(cls.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = dict(vars(cls))
    hints: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        annotation: Any = f.type
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, localns)  # noqa: S307
            except NameError:
                annotation = _from_default(f)
        hints[f.name] = annotation
    return hints


def new_instance(cls: type) -> Any:
    """Constrói uma instância da dataclass `cls` com defaults ou valores zero."""
    hints = resolve_hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        if f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:
            continue
        kwargs[f.name] = zero_value(hints.get(f.name, Any))
    return cls(**kwargs)


def struct_type(tp: Any) -> Optional[type]:
    """Retorna a dataclass por trás de uma anotação STRUCT (ou None)."""
    tp, _ = _unwrap_optional(tp)
    tp = _strip_annotated(tp)
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return tp
    return None
