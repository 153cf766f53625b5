"""
Configuração do pytest e fixtures compartilhadas.
"""

import pytest

from app import config
from app.services import dados_iniciais
from app.services.sessao import UsuarioAtual


@pytest.fixture(autouse=True)
def banco_temporario(tmp_path, monkeypatch):
    """Cada teste usa um SQLite próprio em tmp_path."""
    caminho = tmp_path / "homecare_test.db"
    monkeypatch.setattr(config, "DB_PATH", caminho)
    return caminho


@pytest.fixture
def usuario():
    return UsuarioAtual(id="prof-2", nome="Dr. Juliana Costa", papel="doctor")


@pytest.fixture(scope="session")
def servicos():
    return dados_iniciais.gerar_servicos()


@pytest.fixture(scope="session")
def tabelas(servicos):
    return dados_iniciais.gerar_tabelas_preco(servicos)


@pytest.fixture(scope="session")
def pacientes():
    return dados_iniciais.gerar_pacientes(10)


@pytest.fixture
def registrador():
    """Substitui registrar_log: guarda as chamadas em vez de gravar no banco."""
    chamadas = []

    def _registrar(usuario, acao, entidade, descricao, entidade_id=None, metadados=None):
        chamadas.append({
            "usuario": usuario,
            "acao": acao,
            "entidade": entidade,
            "descricao": descricao,
            "entidade_id": entidade_id,
            "metadados": metadados,
        })

    _registrar.chamadas = chamadas
    return _registrar
