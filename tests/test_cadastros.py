"""
Testes da montagem de cadastros a partir dos formulários.
"""

import math
from datetime import datetime

import pytest

from app.exceptions import ValidacaoError
from app.models import Papel
from app.services.cadastros import (
    adicionar_registro,
    montar_notificacao,
    montar_papel,
    montar_profissional,
    montar_servico,
)


class TestNotificacao:
    def test_valores_padrao(self):
        agora = datetime(2024, 5, 1, 9, 0)
        notif = montar_notificacao({"titulo": "  Aviso   geral "}, [], agora=agora)
        assert notif.titulo == "Aviso geral"
        assert (notif.tipo, notif.categoria, notif.lida) == ("info", "system", False)
        assert notif.criada_em == agora
        assert notif.id == "not-1"

    def test_sem_titulo(self):
        with pytest.raises(ValidacaoError):
            montar_notificacao({"mensagem": "texto"}, [])

    def test_tipo_invalido(self):
        with pytest.raises(ValidacaoError) as exc_info:
            montar_notificacao({"titulo": "X", "tipo": "urgente"}, [])
        assert exc_info.value.details


class TestProfissional:
    def test_normaliza(self):
        prof = montar_profissional({"nome": "ana DE souza", "papel": "nurse", "email": "Ana@X.com"}, [])
        assert prof.nome == "Ana de Souza"
        assert prof.email == "ana@x.com"
        assert prof.status == "active"

    def test_proximo_id(self):
        from app.services.dados_iniciais import gerar_profissionais

        existentes = gerar_profissionais(10)
        assert montar_profissional({"nome": "Novo"}, existentes).id == "prof-11"

    def test_sem_nome(self):
        with pytest.raises(ValidacaoError):
            montar_profissional({"papel": "doctor"}, [])


class TestServico:
    def test_cria(self, servicos):
        serv = montar_servico({"codigo": "pro99", "nome": "Fisioterapia Motora", "preco_base": 120.0,
                               "ativo": True}, servicos)
        assert serv.codigo == "PRO99"
        assert serv.id == f"s{len(servicos) + 1}"
        assert serv.categoria == "procedure"
        assert serv.ativo is True

    def test_codigo_duplicado(self, servicos):
        with pytest.raises(ValidacaoError):
            montar_servico({"codigo": servicos[0].codigo.lower(), "nome": "Outro"}, servicos)

    @pytest.mark.parametrize("preco", [math.nan, -1.0, "abc"])
    def test_preco_invalido(self, preco):
        with pytest.raises(ValidacaoError):
            montar_servico({"codigo": "X1", "nome": "Y", "preco_base": preco}, [])

    def test_preco_vazio_vira_zero(self):
        assert montar_servico({"codigo": "X1", "nome": "Y"}, []).preco_base == 0.0


class TestPapel:
    CATALOGO = ["patients:view", "logs:view", "roles:manage"]

    def test_novo(self):
        existentes = [Papel(id="role-admin", nome="Administrador"), Papel(id="role-1", nome="Auditor")]
        papel = montar_papel(
            {"nome": "  Recepção ", "descricao": "Balcão", "permissoes": ["logs:view", "patients:view", "x:y"]},
            existentes,
            self.CATALOGO,
        )
        assert papel.id == "role-2"
        assert papel.nome == "Recepção"
        assert papel.permissoes == ["patients:view", "logs:view"]

    def test_edicao_mantem_id(self):
        papel = montar_papel({"id": "role-doctor", "nome": "Médico", "permissoes": []}, [], self.CATALOGO)
        assert papel.id == "role-doctor"
        assert papel.permissoes == []

    def test_sem_nome(self):
        with pytest.raises(ValidacaoError):
            montar_papel({"nome": "  "}, [], self.CATALOGO)


class TestAdicionarRegistro:
    def test_topo_e_auditoria(self, usuario, registrador, servicos):
        novo = montar_servico({"codigo": "NEW1", "nome": "Novo"}, servicos)
        lista = adicionar_registro(servicos, novo, usuario, "Service", "Cadastrou serviço", registrar=registrador)
        assert lista[0] is novo
        assert len(lista) == len(servicos) + 1
        (chamada,) = registrador.chamadas
        assert (chamada["acao"], chamada["entidade"], chamada["entidade_id"]) == ("create", "Service", novo.id)
