# src/envconfig/core/errors.py
"""
Exceções canônicas do envconfig.

Este módulo define a hierarquia oficial de erros produzidos durante o
preenchimento de um registro a partir de variáveis de ambiente.

Taxonomia:
    - InvalidSpecificationError → alvo não é um registro (fatal, imediato)
    - RequiredError             → chave obrigatória não resolvida (agregado)
    - ParseError                → valor bruto não converte para o tipo (agregado)
    - MultiError                → agregado ordenado dos erros por campo

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros por campo são valores inspecionáveis, não strings achatadas
    - A renderização textual é uma etapa separada (`__str__`)

Invariantes:
    - Todas as exceções herdam de `EnvConfigError`
    - `to_dict()` sempre retorna `type`, `message` e `details`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Sequence


INVALID_SPECIFICATION = "ENVCONFIG_INVALID_SPECIFICATION"
PARSE_ERROR = "ENVCONFIG_PARSE_ERROR"
REQUIRED_MISSING = "ENVCONFIG_REQUIRED_MISSING"
MULTI_ERROR = "ENVCONFIG_MULTI_ERROR"


class EnvConfigError(Exception):
    """
    Exceção base para erros do envconfig.

    Permite captura genérica de qualquer falha do processor sem
    confundi-la com erros de execução da aplicação.
    """

    code = "ENVCONFIG_ERROR"

    def details(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return {"type": self.code, "message": str(self), "details": self.details()}


class InvalidSpecificationError(EnvConfigError):
    """
    Levantada quando o alvo de `process` não é uma instância de dataclass.

    Decisões arquiteturais:
        - Falha fatal, nunca agregada com erros de campo
        - Levantada antes de qualquer mutação do alvo

    Limites explícitos:
        - Não tenta encapsular ou converter o alvo
    """

    code = INVALID_SPECIFICATION

    def __init__(self, message: str = "invalid specification must be a struct") -> None:
        super().__init__(message)


class ParseError(EnvConfigError):
    """
    Um valor de ambiente não pôde ser convertido para o tipo do campo.

    Campos:
        - key_name: variável de ambiente consultada
        - field_name: sufixo da tag `envconfig` do campo
        - type_name: nome do tipo declarado (ex.: `int8`, `float32`)
        - value: valor bruto rejeitado
    """

    code = PARSE_ERROR

    def __init__(self, key_name: str, field_name: str, type_name: str, value: str) -> None:
        self.key_name = key_name
        self.field_name = field_name
        self.type_name = type_name
        self.value = value
        super().__init__(
            f"envconfig.process: assigning {key_name} to {field_name}: "
            f"converting '{value}' to type {type_name}"
        )

    def details(self) -> Dict[str, Any]:
        return {
            "key_name": self.key_name,
            "field_name": self.field_name,
            "type_name": self.type_name,
            "value": self.value,
        }


class RequiredError(EnvConfigError):
    """Uma chave marcada como `required="true"` não foi encontrada no ambiente."""

    code = REQUIRED_MISSING

    def __init__(self, key_name: str) -> None:
        self.key_name = key_name
        super().__init__(f"envconfig.process: required key {key_name} not found")

    def details(self) -> Dict[str, Any]:
        return {"key_name": self.key_name}


class MultiError(EnvConfigError):
    """
    Agregado ordenado de erros por campo.

    Levantado uma única vez, após a varredura completa do registro, para que
    o chamador veja todos os problemas de uma vez.

    Renderização:
        [
         - <mensagem do erro 1>
         - <mensagem do erro 2>
        ]

    Invariantes:
        - A ordem de `errors` segue a ordem de declaração dos campos
        - Nunca é construído vazio pelo processor
    """

    code = MULTI_ERROR

    def __init__(self, errors: Sequence[EnvConfigError]) -> None:
        self.errors: List[EnvConfigError] = list(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        out = "[\n"
        for err in self.errors:
            out += " - " + str(err) + "\n"
        return out + "]"

    def __iter__(self) -> Iterator[EnvConfigError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def details(self) -> Dict[str, Any]:
        return {"errors": [err.to_dict() for err in self.errors]}
