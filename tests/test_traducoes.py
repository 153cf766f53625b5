"""
Testes das traduções de status/papel e do registro do menu.
"""

import importlib

import pytest

from app.menu import MENU_ITEMS, get_menu_labels, item_do_menu
from app.traducoes import (
    ROTULOS_STATUS_ORCAMENTO,
    rotulo,
    traduzir_papel,
    traduzir_papel_para_portugues,
    traduzir_status,
    traduzir_status_movimentacao,
    traduzir_status_para_portugues,
)


class TestTraducoes:
    @pytest.mark.parametrize("pt, en", [("ativo", "active"), ("ferias", "vacation"), ("obito", "deceased")])
    def test_status_ida_e_volta(self, pt, en):
        assert traduzir_status(pt) == en
        assert traduzir_status_para_portugues(en) == pt

    def test_fallbacks(self):
        assert traduzir_status("???") == "active"
        assert traduzir_status_para_portugues("???") == "ativo"
        assert traduzir_papel("???") == "admin"
        assert traduzir_papel_para_portugues("???") == "admin"
        assert traduzir_status_movimentacao("???") == "pending"

    def test_papel(self):
        assert traduzir_papel("fono") == "speechTherapist"
        assert traduzir_papel_para_portugues("nurse") == "enfermeiro"

    def test_rotulo_desconhecido(self):
        assert rotulo(ROTULOS_STATUS_ORCAMENTO, "approved") == "Aprovado"
        assert rotulo(ROTULOS_STATUS_ORCAMENTO, "arquivado") == "arquivado"


class TestMenu:
    def test_rotulos_na_ordem(self):
        assert get_menu_labels()[0] == "🏠 Início"
        assert len(get_menu_labels()) == len(MENU_ITEMS)

    def test_item_inexistente(self):
        assert item_do_menu("Nada") is None

    def test_gestao_de_acesso_e_tabelas(self):
        assert item_do_menu("🛡️ Controle de Acesso") == ("app.pages.autorizacao", "render_autorizacao")
        assert item_do_menu("💲 Tabelas") == ("app.pages.tabelas", "render_tabelas")

    @pytest.mark.parametrize("label, module_path, function_name", MENU_ITEMS)
    def test_paginas_existem(self, label, module_path, function_name):
        assert item_do_menu(label) == (module_path, function_name)
        mod = importlib.import_module(module_path)
        assert callable(getattr(mod, function_name))
