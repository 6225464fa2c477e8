"""
envconfig — preenchimento declarativo de dataclasses a partir do ambiente.

Uso:

    from dataclasses import dataclass, field
    import envconfig

    @dataclass
    class Config:
        debug: bool = envconfig.env_field("debug", value=False)
        port: envconfig.Uint16 = envconfig.env_field("port", default="8080", value=0)
        user: str = field(default="", metadata={"envconfig": "user", "required": "true"})

    cfg = Config()
    envconfig.process("myapp", cfg)   # lê MYAPP_DEBUG, MYAPP_PORT, MYAPP_USER

O pacote registra logs via loguru e fica silencioso por padrão; a aplicação
habilita com `logger.enable("envconfig")`.
"""
# src/envconfig/__init__.py
from loguru import logger

from .core.errors import (
    EnvConfigError,
    InvalidSpecificationError,
    MultiError,
    ParseError,
    RequiredError,
)
from .core.processor import load, process
from .core.tags import env_field, tags
from .core.types import (
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    Uint,
    Uint8,
    Uint16,
    Uint32,
    Uint64,
)

logger.disable("envconfig")

__all__ = [
    "process",
    "load",
    "env_field",
    "tags",
    "EnvConfigError",
    "InvalidSpecificationError",
    "MultiError",
    "ParseError",
    "RequiredError",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Uint",
    "Uint8",
    "Uint16",
    "Uint32",
    "Uint64",
    "Float32",
    "Float64",
]
