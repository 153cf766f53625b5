# Whitelist de tabelas que podem aparecer interpoladas em SQL (ex.: DELETE FROM {tabela})
from __future__ import annotations

from app.exceptions import DBError

TABELAS_PERMITIDAS: frozenset[str] = frozenset({
    "logs_sistema",
    "papeis",
    "papel_permissao",
    "usuario_papel",
})


def validar_tabela(tabela: str) -> str:
    """Devolve o nome se estiver na whitelist; caso contrário levanta DBError."""
    if tabela not in TABELAS_PERMITIDAS:
        raise DBError(f"Tabela não permitida: {tabela!r}")
    return tabela
