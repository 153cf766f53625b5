# Conexão SQLite e criação das tabelas usadas pelo app (auditoria e RBAC)
import logging
import sqlite3
from pathlib import Path

from app import config
from app.sql_safe import validar_tabela

logger = logging.getLogger(__name__)


def _resolver_caminho(db_path=None) -> Path:
    # config.DB_PATH é lido a cada chamada (testes redirecionam para tmp_path)
    return Path(db_path) if db_path is not None else Path(config.DB_PATH)


def get_conn(db_path=None, timeout_seconds=15):
    """
    Retorna uma conexão SQLite centralizada com:
    - row_factory=sqlite3.Row (acesso por nome de coluna)
    - foreign_keys=ON (integridade referencial)
    - timeout maior (evita locked em escritas concorrentes de abas diferentes)
    """
    path = _resolver_caminho(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), timeout=timeout_seconds, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def inicializar_banco(db_path=None) -> None:
    """Cria as tabelas de auditoria e permissões se não existirem."""
    conn = get_conn(db_path)
    try:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS logs_sistema (
                id TEXT PRIMARY KEY,
                timestamp TEXT NOT NULL,
                usuario_id TEXT NOT NULL,
                usuario_nome TEXT NOT NULL,
                usuario_papel TEXT NOT NULL,
                acao TEXT NOT NULL,
                entidade TEXT NOT NULL,
                entidade_id TEXT,
                descricao TEXT NOT NULL,
                metadados TEXT
            )
        """)
        conn.execute("CREATE INDEX IF NOT EXISTS idx_logs_timestamp ON logs_sistema(timestamp)")
        conn.execute("""
            CREATE TABLE IF NOT EXISTS papeis (
                id TEXT PRIMARY KEY,
                nome TEXT NOT NULL,
                descricao TEXT NOT NULL DEFAULT ''
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS papel_permissao (
                papel_id TEXT NOT NULL,
                permissao_id TEXT NOT NULL,
                PRIMARY KEY (papel_id, permissao_id),
                FOREIGN KEY (papel_id) REFERENCES papeis(id) ON DELETE CASCADE
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS usuario_papel (
                usuario_id TEXT PRIMARY KEY,
                papel_id TEXT NOT NULL,
                FOREIGN KEY (papel_id) REFERENCES papeis(id) ON DELETE CASCADE
            )
        """)
        conn.commit()
    finally:
        conn.close()
    logger.debug("Tabelas verificadas em %s", _resolver_caminho(db_path))


def limpar_tabela(tabela: str, db_path=None) -> int:
    """Remove todas as linhas da tabela (whitelist em sql_safe). Retorna linhas removidas."""
    t = validar_tabela(tabela)
    conn = get_conn(db_path)
    try:
        cur = conn.execute(f"DELETE FROM {t}")
        conn.commit()
        return cur.rowcount
    finally:
        conn.close()
