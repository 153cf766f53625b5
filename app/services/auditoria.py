# app/services/auditoria.py
"""Trilha de auditoria: registra quem fez o quê em qual entidade (tabela logs_sistema)."""
import json
import logging
import secrets
import sqlite3
import string
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

from app.db import get_conn, inicializar_banco, limpar_tabela
from app.models.logs import RegistroLog
from app.services.sessao import UsuarioAtual

logger = logging.getLogger(__name__)

_ALFABETO_ID = string.ascii_lowercase + string.digits


def _novo_id() -> str:
    sufixo = "".join(secrets.choice(_ALFABETO_ID) for _ in range(9))
    return f"log-{int(time.time() * 1000)}-{sufixo}"


def registrar_log(
    usuario: UsuarioAtual,
    acao: str,
    entidade: str,
    descricao: str,
    entidade_id: Optional[str] = None,
    metadados: Optional[Dict[str, Any]] = None,
    db_path=None,
) -> RegistroLog:
    """
    Acrescenta uma entrada na trilha de auditoria.
    Melhor esforço: falha de gravação vai para o log da aplicação e a entrada é devolvida mesmo assim.
    """
    registro = RegistroLog(
        id=_novo_id(),
        timestamp=datetime.now(),
        usuario_id=usuario.id,
        usuario_nome=usuario.nome,
        usuario_papel=usuario.papel,
        acao=acao,
        entidade=entidade,
        entidade_id=entidade_id,
        descricao=descricao,
        metadados=metadados,
    )
    try:
        inicializar_banco(db_path)
        conn = get_conn(db_path)
        try:
            conn.execute(
                """
                INSERT INTO logs_sistema (
                    id, timestamp, usuario_id, usuario_nome, usuario_papel,
                    acao, entidade, entidade_id, descricao, metadados
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    registro.id,
                    registro.timestamp.isoformat(),
                    registro.usuario_id,
                    registro.usuario_nome,
                    registro.usuario_papel,
                    registro.acao,
                    registro.entidade,
                    registro.entidade_id,
                    registro.descricao,
                    json.dumps(metadados, ensure_ascii=False) if metadados is not None else None,
                ),
            )
            conn.commit()
        finally:
            conn.close()
    except sqlite3.Error:
        logger.exception("Falha ao gravar log de auditoria %s (%s %s)", registro.id, acao, entidade)
    else:
        logger.info("[auditoria] %s %s %s por %s", acao, entidade, entidade_id or "-", usuario.id)
    return registro


def _linha_para_registro(row: sqlite3.Row) -> RegistroLog:
    return RegistroLog(
        id=row["id"],
        timestamp=datetime.fromisoformat(row["timestamp"]),
        usuario_id=row["usuario_id"],
        usuario_nome=row["usuario_nome"],
        usuario_papel=row["usuario_papel"],
        acao=row["acao"],
        entidade=row["entidade"],
        entidade_id=row["entidade_id"],
        descricao=row["descricao"],
        metadados=json.loads(row["metadados"]) if row["metadados"] else None,
    )


def listar_logs(db_path=None, entidade: Optional[str] = None) -> List[RegistroLog]:
    """Entradas da mais recente para a mais antiga; filtra por entidade se informada."""
    inicializar_banco(db_path)
    conn = get_conn(db_path)
    try:
        sql = "SELECT * FROM logs_sistema"
        params: tuple = ()
        if entidade:
            sql += " WHERE entidade = ?"
            params = (entidade,)
        sql += " ORDER BY timestamp DESC, rowid DESC"
        rows = conn.execute(sql, params).fetchall()
    finally:
        conn.close()
    return [_linha_para_registro(r) for r in rows]


def entidades_registradas(db_path=None) -> List[str]:
    inicializar_banco(db_path)
    conn = get_conn(db_path)
    try:
        rows = conn.execute("SELECT DISTINCT entidade FROM logs_sistema ORDER BY entidade").fetchall()
    finally:
        conn.close()
    return [r[0] for r in rows]


def limpar_logs(db_path=None) -> int:
    """Apaga toda a trilha. Retorna quantas entradas foram removidas."""
    inicializar_banco(db_path)
    n = limpar_tabela("logs_sistema", db_path)
    logger.warning("Trilha de auditoria limpa (%d entradas)", n)
    return n
