# src/envconfig/core/coerce.py
"""
Conversões de string bruta para valores tipados.

Cada função recebe o valor bruto resolvido do ambiente e devolve o valor
convertido, ou levanta `ValueError` quando o texto não representa um valor
válido para o tipo. O processor transforma o `ValueError` em `ParseError`
(exceto para URLs, ver `parse_url`).

Regras:
    - inteiros: detecção automática de base (`0x`, `0o`, `0b`, `0` octal)
      e separadores `_` entre dígitos; faixa validada pela largura
    - unsigned: mesma sintaxe, sem sinal
    - bool: `1 t T TRUE true True 0 f F FALSE false False`
    - float: decimal, hexadecimal (`0x1p-2`), `inf`/`infinity`/`nan`;
      largura 32 arredonda para precisão simples
    - nenhuma conversão ignora espaços em branco
"""

from __future__ import annotations

import math
import re
import struct
from typing import Tuple
from urllib.parse import ParseResult, urlparse


_DIGITS = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_DEC_FLOAT_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?P<mant>[0-9a-fA-F_]*\.?[0-9a-fA-F_]*)[pP][+-]?[0-9]+"
)
_INF = frozenset({"inf", "+inf", "-inf", "infinity", "+infinity", "-infinity"})

_ESCAPE_RE = re.compile(r"%(?![0-9a-fA-F]{2})")


def _split_base(digits: str) -> Tuple[int, str, bool]:
    if len(digits) > 1 and digits[0] == "0":
        marker = digits[1].lower()
        if marker == "x":
            return 16, digits[2:], True
        if marker == "b":
            return 2, digits[2:], True
        if marker == "o":
            return 8, digits[2:], True
        return 8, digits[1:], True
    return 10, digits, False


def _underscores_ok(body: str, prefixed: bool) -> bool:
    if "__" in body or body.endswith("_"):
        return False
    # após um prefixo de base o primeiro separador é permitido (0x_ff)
    return prefixed or not body.startswith("_")


def _parse_magnitude(digits: str) -> int:
    if not digits:
        raise ValueError("empty number")
    base, body, prefixed = _split_base(digits)
    if not _underscores_ok(body, prefixed):
        raise ValueError(f"invalid digit separator in {digits!r}")
    body = body.replace("_", "")
    if not body or not set(body) <= _DIGITS[base]:
        raise ValueError(f"invalid syntax for base {base}: {digits!r}")
    return int(body, base)


def parse_int(raw: str, bits: int = 64) -> int:
    """Converte um inteiro com sinal, validando a faixa de `bits`."""
    sign = 1
    digits = raw
    if raw[:1] in ("+", "-"):
        sign = -1 if raw[0] == "-" else 1
        digits = raw[1:]
    value = sign * _parse_magnitude(digits)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"value out of range for {bits}-bit signed integer")
    return value


def parse_uint(raw: str, bits: int = 64) -> int:
    """Converte um inteiro sem sinal, validando a faixa de `bits`."""
    value = _parse_magnitude(raw)
    if value >= 1 << bits:
        raise ValueError(f"value out of range for {bits}-bit unsigned integer")
    return value


def parse_bool(raw: str) -> bool:
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"invalid boolean literal {raw!r}")


def parse_float(raw: str, bits: int = 64) -> float:
    """
    Converte um float decimal, hexadecimal ou especial.

    Overflow (ex.: `1e400`, ou `1e39` com largura 32) é erro, não infinito.
    """
    lowered = raw.lower()
    if lowered in _INF:
        return -math.inf if lowered.startswith("-") else math.inf
    if lowered == "nan":
        return math.nan

    if _DEC_FLOAT_RE.fullmatch(raw):
        value = float(raw)
    else:
        match = _HEX_FLOAT_RE.fullmatch(raw)
        if match is None or not any(c not in "._" for c in match.group("mant")):
            raise ValueError(f"invalid float literal {raw!r}")
        value = float.fromhex(raw.replace("_", ""))

    if math.isinf(value):
        raise ValueError(f"value out of range for float{bits}")
    if bits == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError as exc:
            raise ValueError(f"value out of range for float32: {raw!r}") from exc
        # versões recentes do CPython arredondam o overflow para infinito
        if math.isinf(value):
            raise ValueError(f"value out of range for float32: {raw!r}")
    return value


def parse_url(raw: str) -> ParseResult:
    """
    Interpreta `raw` como URL.

    `urlparse` aceita praticamente qualquer texto; as verificações abaixo
    rejeitam caracteres de controle, escapes `%` inválidos, esquema ausente
    antes de `:` e portas inválidas.
    """
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        raise ValueError("invalid control character in URL")
    if _ESCAPE_RE.search(raw):
        raise ValueError("invalid URL escape")
    if raw.startswith(":"):
        raise ValueError("missing protocol scheme")

    parsed = urlparse(raw)
    if not parsed.scheme and ":" in raw.split("/", 1)[0]:
        raise ValueError("first path segment in URL cannot contain colon")
    # .port levanta ValueError para portas não numéricas ou fora da faixa
    _ = parsed.port
    return parsed
