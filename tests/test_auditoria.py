"""
Testes da trilha de auditoria em SQLite.
"""

import logging
import re
import sqlite3

import pytest

from app.db import limpar_tabela
from app.exceptions import DBError
from app.services import auditoria
from app.services.auditoria import entidades_registradas, limpar_logs, listar_logs, registrar_log


class TestRegistrarLog:
    """Gravação e leitura das entradas."""

    def test_round_trip(self, usuario):
        registro = registrar_log(usuario, "create", "Budget", "Gerou novo orçamento (PAD) para: Ana",
                                 entidade_id="orc-1", metadados={"versao": 1, "valor_total": 10.5})
        assert re.fullmatch(r"log-\d+-[a-z0-9]{9}", registro.id)

        (lido,) = listar_logs()
        assert lido.id == registro.id
        assert lido.usuario_nome == usuario.nome
        assert lido.usuario_papel == "doctor"
        assert lido.metadados == {"versao": 1, "valor_total": 10.5}
        assert lido.timestamp == registro.timestamp

    def test_mais_recente_primeiro(self, usuario):
        for i in range(3):
            registrar_log(usuario, "create", "Budget", f"entrada {i}")
        assert [r.descricao for r in listar_logs()] == ["entrada 2", "entrada 1", "entrada 0"]

    def test_filtro_por_entidade(self, usuario):
        registrar_log(usuario, "create", "Budget", "orçamento")
        registrar_log(usuario, "create", "Service", "serviço")
        assert [r.descricao for r in listar_logs(entidade="Service")] == ["serviço"]
        assert entidades_registradas() == ["Budget", "Service"]

    def test_limpar(self, usuario):
        registrar_log(usuario, "create", "Budget", "a")
        registrar_log(usuario, "delete", "Budget", "b")
        assert limpar_logs() == 2
        assert listar_logs() == []

    def test_falha_no_banco_nao_interrompe(self, usuario, monkeypatch, caplog):
        def _quebrado(*args, **kwargs):
            raise sqlite3.OperationalError("disk I/O error")

        monkeypatch.setattr(auditoria, "get_conn", _quebrado)
        monkeypatch.setattr(auditoria, "inicializar_banco", lambda db_path=None: None)
        # logger "app" não propaga para o root; o caplog escuta no root
        monkeypatch.setattr(logging.getLogger("app"), "propagate", True)
        caplog.set_level("ERROR", logger="app.services.auditoria")

        registro = registrar_log(usuario, "create", "Budget", "sem banco")

        assert registro.descricao == "sem banco"
        assert "Falha ao gravar log de auditoria" in caplog.text

    def test_db_path_explicito(self, usuario, tmp_path):
        outro = tmp_path / "outro.db"
        registrar_log(usuario, "login", "Session", "entrou", db_path=outro)
        assert len(listar_logs(db_path=outro)) == 1
        assert listar_logs() == []


class TestLimparTabela:
    """Só tabelas da whitelist podem ser limpas."""

    def test_tabela_fora_da_whitelist(self):
        with pytest.raises(DBError):
            limpar_tabela("sqlite_master; DROP TABLE papeis")
