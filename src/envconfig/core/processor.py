# src/envconfig/core/processor.py
"""
Processor canônico do envconfig.

Este módulo preenche os campos de uma instância de dataclass a partir de
variáveis de ambiente, guiado pelas tags de cada campo.

Fluxo por campo (ordem de declaração):
    1. ignora campos não graváveis ou sem tag `envconfig`
    2. chave = upper(prefixo + "_" + sufixo)
    3. valor = ambiente[chave], ou tag `default` quando vazio
    4. valor vazio (exceto STRUCT) → RequiredError se `required="true"`,
       senão o campo é mantido como está
    5. conversão pelo tipo declarado; falha → ParseError
    6. STRUCT → instância nova processada com a chave como prefixo

Decisões arquiteturais:
    - Erros por campo são acumulados e levantados juntos em `MultiError`
    - Falha em um registro aninhado (o `MultiError` dele) é propagada de
      imediato: erros já coletados no registro externo são descartados, o
      campo aninhado não é atribuído e os campos seguintes não são visitados
    - `InvalidSpecificationError` é fatal e levantada antes de qualquer
      mutação; registros aninhados são sempre dataclasses por construção
    - URL inválida não gera erro: o campo permanece inalterado
    - Não existe rollback: campos atribuídos antes de uma falha permanecem

Limites explícitos:
    - Não escreve no ambiente
    - Não valida semântica além de tipo e presença
    - Não lê arquivos de configuração
"""

from __future__ import annotations

import dataclasses
import os
from typing import Any, Callable, Dict, List, Mapping, Optional

from loguru import logger

from . import coerce
from .errors import EnvConfigError, InvalidSpecificationError, MultiError, ParseError, RequiredError
from .schema import FieldSpec, describe
from .types import Kind, new_instance


_SCALARS: Dict[Kind, Callable[[str, FieldSpec], Any]] = {
    Kind.STRING: lambda raw, spec: raw,
    Kind.INT: lambda raw, spec: coerce.parse_int(raw, spec.bits),
    Kind.UINT: lambda raw, spec: coerce.parse_uint(raw, spec.bits),
    Kind.BOOL: lambda raw, spec: coerce.parse_bool(raw),
    Kind.FLOAT: lambda raw, spec: coerce.parse_float(raw, spec.bits),
}


def _is_spec(obj: Any) -> bool:
    return dataclasses.is_dataclass(obj) and not isinstance(obj, type)


def process(prefix: str, spec: Any, *, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Preenche `spec` a partir do ambiente.

    Args:
        prefix (str): Prefixo das chaves (pode ser vazio).
        spec (Any): Instância de dataclass, mutada no lugar.
        environ (Optional[Mapping[str, str]]): Tabela de variáveis;
            `os.environ` quando omitida.

    Raises:
        InvalidSpecificationError: Se `spec` não for instância de dataclass.
        MultiError: Se algum campo falhou na conversão ou é obrigatório e
            está ausente.
    """
    if not _is_spec(spec):
        raise InvalidSpecificationError()
    env = os.environ if environ is None else environ

    errors = _process(prefix, spec, env)
    if errors:
        logger.debug("envconfig: {} field error(s) under prefix {!r}", len(errors), prefix)
        raise MultiError(errors)


def load(prefix: str, cls: type, *, environ: Optional[Mapping[str, str]] = None) -> Any:
    """
    Constrói uma instância nova de `cls` e a preenche com `process`.

    Campos sem default na dataclass recebem o valor zero do seu tipo.
    """
    if not (isinstance(cls, type) and dataclasses.is_dataclass(cls)):
        raise InvalidSpecificationError()
    spec = new_instance(cls)
    process(prefix, spec, environ=environ)
    return spec


def _process(prefix: str, spec: Any, env: Mapping[str, str]) -> List[EnvConfigError]:
    errors: List[EnvConfigError] = []

    for field in describe(type(spec)):
        if not field.settable or not field.key:
            continue

        key = f"{prefix}_{field.key}".upper()
        value = env.get(key, "")
        if value == "" and field.default:
            value = field.default

        if value == "" and field.kind is not Kind.STRUCT:
            if field.required:
                errors.append(RequiredError(key))
            else:
                logger.debug("envconfig: {} not set, keeping {}", key, field.name)
            continue

        logger.debug("envconfig: assigning {} from {}", field.name, key)

        if field.kind in _SCALARS:
            try:
                setattr(spec, field.name, _SCALARS[field.kind](value, field))
            except ValueError:
                errors.append(ParseError(key, field.key, field.type_name, value))

        elif field.kind is Kind.STRUCT:
            nested = new_instance(field.nested)
            # falha no registro aninhado interrompe a chamada externa sem agregar
            process(key, nested, environ=env)
            setattr(spec, field.name, nested)

        elif field.kind is Kind.URL:
            try:
                setattr(spec, field.name, coerce.parse_url(value))
            except ValueError as exc:
                logger.debug("envconfig: ignoring invalid URL in {}: {}", key, exc)

    return errors
