# src/envconfig/core/__init__.py
"""
Core do envconfig.

Componentes:
    - errors    → taxonomia de erros e renderização do agregado
    - tags      → vocabulário de tags por campo
    - types     → classificação de anotações e larguras numéricas
    - coerce    → conversão de strings brutas para valores tipados
    - schema    → tabela estática de descritores por dataclass
    - processor → `process` e `load`

Limites explícitos:
    - Não lê arquivos de configuração
    - Não observa nem recarrega o ambiente
"""
