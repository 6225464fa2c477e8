# tests/core/test_types.py
"""
Testes de classificação de anotações e valores zero.

Os testes asseguram que:
- tipos simples e marcadores de largura produzem o Kind e a largura corretos
- `Optional[X]` é desembrulhado para `X`
- instâncias novas recebem valores zero nos campos sem default
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import ParseResult

from envconfig.core.types import (
    Float32,
    Int8,
    Kind,
    Uint,
    Uint16,
    Uint32,
    classify,
    new_instance,
    zero_value,
)


@dataclass
class _Inner:
    host: str
    port: int
    ratio: float
    on: bool


@dataclass
class _Outer:
    inner: _Inner
    url: Optional[ParseResult]
    name: str = "fixed"
    items: List[str] = field(default_factory=list)


def test_classify_plain_types():
    assert classify(str) == (Kind.STRING, "string", 0)
    assert classify(int) == (Kind.INT, "int", 64)
    assert classify(float) == (Kind.FLOAT, "float64", 64)
    assert classify(bool) == (Kind.BOOL, "bool", 0)


def test_classify_width_markers():
    assert classify(Int8) == (Kind.INT, "int8", 8)
    assert classify(Uint) == (Kind.UINT, "uint", 64)
    assert classify(Uint16) == (Kind.UINT, "uint16", 16)
    assert classify(Uint32) == (Kind.UINT, "uint32", 32)
    assert classify(Float32) == (Kind.FLOAT, "float32", 32)


def test_classify_unwraps_optional():
    assert classify(Optional[int]) == (Kind.INT, "int", 64)
    assert classify(Optional[Float32]) == (Kind.FLOAT, "float32", 32)
    assert classify(Optional[ParseResult])[0] is Kind.URL


def test_classify_struct_and_other():
    assert classify(_Inner) == (Kind.STRUCT, "_Inner", 0)
    assert classify(List[str])[0] is Kind.OTHER
    assert classify(dict)[0] is Kind.OTHER


def test_zero_values():
    assert zero_value(str) == ""
    assert zero_value(Uint16) == 0
    assert zero_value(float) == 0.0
    assert zero_value(bool) is False
    assert zero_value(Optional[int]) is None
    assert zero_value(ParseResult) is None


def test_new_instance_fills_missing_with_zero_values():
    out = new_instance(_Outer)
    assert out.inner == _Inner(host="", port=0, ratio=0.0, on=False)
    assert out.url is None
    assert out.name == "fixed"
    assert out.items == []
