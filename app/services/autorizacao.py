"""
Controle de acesso baseado em papéis (RBAC) - Homecare

Permissões são pares ação × entidade; papéis agrupam permissões e cada
usuário (profissional) recebe um papel. A ação 'manage' concede todas as
ações da entidade.
"""

import logging
import sqlite3
from typing import Dict, List, Optional

from app.db import get_conn, inicializar_banco
from app.exceptions import ValidacaoError
from app.models.auth import AtribuicaoPapel, Papel, Permissao

logger = logging.getLogger(__name__)


# ============================================================================
# CATÁLOGO DE PERMISSÕES
# ============================================================================

def _p(entidade: str, acao: str) -> Permissao:
    return Permissao(id=f"{entidade}:{acao}", acao=acao, entidade=entidade)


PERMISSOES_SISTEMA: List[Permissao] = [
    _p("patients", "view"), _p("patients", "create"), _p("patients", "edit"), _p("patients", "delete"),
    _p("professionals", "view"), _p("professionals", "manage"),
    _p("evolutions", "view"), _p("evolutions", "create"), _p("evolutions", "edit"), _p("evolutions", "delete"),
    _p("prescriptions", "view"), _p("prescriptions", "create"), _p("prescriptions", "edit"),
    _p("stock", "view"), _p("stock", "manage"),
    _p("finances", "view"), _p("finances", "manage"),
    _p("logs", "view"),
    _p("services", "view"), _p("services", "manage"),
    _p("roles", "manage"),
]

_IDS_PERMISSOES = [p.id for p in PERMISSOES_SISTEMA]

PAPEL_ADMIN = "role-admin"


# ============================================================================
# PAPÉIS PADRÃO E ATRIBUIÇÕES INICIAIS
# ============================================================================

PAPEIS_PADRAO: List[Papel] = [
    Papel(id="role-admin", nome="Administrador", descricao="Acesso total ao sistema",
          permissoes=list(_IDS_PERMISSOES)),
    Papel(id="role-doctor", nome="Médico", descricao="Acesso clínico e prescrição",
          permissoes=["patients:view", "professionals:view", "evolutions:view", "evolutions:create",
                      "prescriptions:view", "prescriptions:create", "prescriptions:edit",
                      "stock:view", "finances:view"]),
    Papel(id="role-nurse", nome="Enfermeiro", descricao="Acesso assistencial e evolução",
          permissoes=["patients:view", "professionals:view", "evolutions:view", "evolutions:create",
                      "stock:view", "finances:view"]),
    Papel(id="role-technician", nome="Técnico de Enfermagem", descricao="Visualização e registro de cuidados",
          permissoes=["patients:view", "evolutions:view", "stock:view"]),
    Papel(id="role-logistics", nome="Logística", descricao="Gestão de estoque e materiais",
          permissoes=["stock:view", "stock:manage", "patients:view"]),
    Papel(id="role-financial", nome="Financeiro", descricao="Gestão financeira e orçamentos",
          permissoes=["finances:view", "finances:manage", "services:view", "services:manage",
                      "patients:view", "logs:view"]),
]


def atribuicoes_padrao() -> Dict[str, str]:
    """usuario_id -> papel_id para os profissionais gerados em dados_iniciais."""
    atrib = {"prof-admin": "role-admin"}
    for i in range(15):
        atrib[f"prof-{i * 5 + 2}"] = "role-doctor"
    for i in range(20):
        atrib.setdefault(f"prof-{i * 3 + 3}", "role-nurse")
    for uid in ("prof-40", "prof-41"):
        atrib[uid] = "role-logistics"
    for uid in ("prof-50", "prof-51"):
        atrib[uid] = "role-financial"
    return atrib


# ============================================================================
# INICIALIZAÇÃO
# ============================================================================

def inicializar_autorizacao(db_path=None) -> None:
    """
    Cria tabelas e insere papéis/atribuições padrão na primeira execução.
    O papel de administrador sempre recebe todas as permissões do catálogo.
    """
    inicializar_banco(db_path)
    conn = get_conn(db_path)
    try:
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM papeis")
        if cursor.fetchone()[0] == 0:
            for papel in PAPEIS_PADRAO:
                _gravar_papel(cursor, papel)
            logger.info("Papéis padrão inseridos (%d)", len(PAPEIS_PADRAO))

        cursor.execute("SELECT COUNT(*) FROM usuario_papel")
        if cursor.fetchone()[0] == 0:
            cursor.executemany(
                "INSERT INTO usuario_papel (usuario_id, papel_id) VALUES (?, ?)",
                list(atribuicoes_padrao().items()),
            )

        cursor.execute("SELECT 1 FROM papeis WHERE id = ?", (PAPEL_ADMIN,))
        if cursor.fetchone():
            cursor.executemany(
                "INSERT OR IGNORE INTO papel_permissao (papel_id, permissao_id) VALUES (?, ?)",
                [(PAPEL_ADMIN, pid) for pid in _IDS_PERMISSOES],
            )
        conn.commit()
    finally:
        conn.close()


def restaurar_padroes(db_path=None) -> None:
    """Apaga papéis e atribuições e grava de novo os padrões."""
    conn = get_conn(db_path)
    try:
        conn.execute("DELETE FROM usuario_papel")
        conn.execute("DELETE FROM papeis")
        conn.commit()
    finally:
        conn.close()
    logger.warning("Permissões restauradas para os valores padrão")
    inicializar_autorizacao(db_path)


def _gravar_papel(cursor: sqlite3.Cursor, papel: Papel) -> None:
    permissoes = list(papel.permissoes)
    if papel.id == PAPEL_ADMIN:
        permissoes += _IDS_PERMISSOES
    cursor.execute(
        """
        INSERT INTO papeis (id, nome, descricao) VALUES (?, ?, ?)
        ON CONFLICT(id) DO UPDATE SET nome = excluded.nome, descricao = excluded.descricao
        """,
        (papel.id, papel.nome, papel.descricao),
    )
    cursor.execute("DELETE FROM papel_permissao WHERE papel_id = ?", (papel.id,))
    cursor.executemany(
        "INSERT INTO papel_permissao (papel_id, permissao_id) VALUES (?, ?)",
        [(papel.id, pid) for pid in dict.fromkeys(permissoes)],
    )


# ============================================================================
# CONSULTA E MANUTENÇÃO DE PAPÉIS
# ============================================================================

def listar_papeis(db_path=None) -> List[Papel]:
    conn = get_conn(db_path)
    try:
        papeis = conn.execute("SELECT id, nome, descricao FROM papeis ORDER BY rowid").fetchall()
        perms = conn.execute("SELECT papel_id, permissao_id FROM papel_permissao ORDER BY rowid").fetchall()
    finally:
        conn.close()
    por_papel: Dict[str, List[str]] = {}
    for papel_id, perm_id in perms:
        por_papel.setdefault(papel_id, []).append(perm_id)
    return [
        Papel(id=r["id"], nome=r["nome"], descricao=r["descricao"], permissoes=por_papel.get(r["id"], []))
        for r in papeis
    ]


def salvar_papel(papel: Papel, db_path=None) -> None:
    """Insere ou atualiza o papel e substitui suas permissões."""
    conn = get_conn(db_path)
    try:
        _gravar_papel(conn.cursor(), papel)
        conn.commit()
    finally:
        conn.close()
    logger.info("Papel %s salvo com %d permissões", papel.id, len(papel.permissoes))


def excluir_papel(papel_id: str, db_path=None) -> bool:
    """Remove o papel (atribuições e permissões caem em cascata). O administrador não pode ser removido."""
    if papel_id == PAPEL_ADMIN:
        raise ValidacaoError("O papel de Administrador não pode ser excluído.")
    conn = get_conn(db_path)
    try:
        cur = conn.execute("DELETE FROM papeis WHERE id = ?", (papel_id,))
        conn.commit()
        removido = cur.rowcount > 0
    finally:
        conn.close()
    if removido:
        logger.info("Papel %s excluído", papel_id)
    return removido


def atribuir_papel(usuario_id: str, papel_id: str, db_path=None) -> None:
    conn = get_conn(db_path)
    try:
        conn.execute(
            """
            INSERT INTO usuario_papel (usuario_id, papel_id) VALUES (?, ?)
            ON CONFLICT(usuario_id) DO UPDATE SET papel_id = excluded.papel_id
            """,
            (usuario_id, papel_id),
        )
        conn.commit()
    finally:
        conn.close()


def listar_atribuicoes(db_path=None) -> List[AtribuicaoPapel]:
    conn = get_conn(db_path)
    try:
        rows = conn.execute("SELECT usuario_id, papel_id FROM usuario_papel ORDER BY rowid").fetchall()
    finally:
        conn.close()
    return [AtribuicaoPapel(usuario_id=r["usuario_id"], papel_id=r["papel_id"]) for r in rows]


def papel_do_usuario(usuario_id: str, db_path=None) -> Optional[Papel]:
    conn = get_conn(db_path)
    try:
        row = conn.execute("SELECT papel_id FROM usuario_papel WHERE usuario_id = ?", (usuario_id,)).fetchone()
    finally:
        conn.close()
    if not row:
        return None
    return next((p for p in listar_papeis(db_path) if p.id == row[0]), None)


def tem_permissao(usuario_id: str, acao: str, entidade: str, db_path=None) -> bool:
    """
    Verifica se o usuário pode executar a ação na entidade.

    'manage' na entidade cobre qualquer ação; usuário sem papel não pode nada.
    """
    papel = papel_do_usuario(usuario_id, db_path)
    if papel is None:
        return False
    concedidas = set(papel.permissoes)
    return f"{entidade}:manage" in concedidas or f"{entidade}:{acao}" in concedidas
