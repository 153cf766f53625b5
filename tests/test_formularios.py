"""
Testes da lógica dos formulários controlados (widgets do Streamlit substituídos).
"""

import contextlib
import math

import pytest

from app.components import formularios
from app.components.formularios import (
    OPCOES_CATEGORIA_NOTIFICACAO,
    OPCOES_CATEGORIA_SERVICO,
    OPCOES_PAPEL,
    OPCOES_STATUS_PROFISSIONAL,
    OPCOES_TIPO_NOTIFICACAO,
    CampoNotificacao,
    CampoProfissional,
    CampoServico,
    _mudou,
    _emitir,
    aplicar_alteracao,
    converter_preco,
    render_formulario_notificacao,
    render_formulario_profissional,
    render_formulario_servico,
    valor_campo,
)


class TestAplicarAlteracao:
    """Alteração de campo devolve um novo dicionário."""

    def test_nao_altera_original(self):
        dados = {"titulo": "A", "tipo": "info"}
        novo = aplicar_alteracao(dados, CampoNotificacao.TITULO, "B")
        assert novo == {"titulo": "B", "tipo": "info"}
        assert dados == {"titulo": "A", "tipo": "info"}
        assert novo is not dados

    def test_campo_novo(self):
        assert aplicar_alteracao({}, CampoServico.ATIVO, True) == {"ativo": True}


class TestConverterPreco:
    """Texto do preço vira float; lixo vira NaN."""

    @pytest.mark.parametrize("texto, esperado", [
        ("150", 150.0),
        ("150.75", 150.75),
        ("  42abc", 42.0),
        ("-3.5", -3.5),
        (".5", 0.5),
        ("1e3", 1000.0),
    ])
    def test_numeros(self, texto, esperado):
        assert converter_preco(texto) == esperado

    @pytest.mark.parametrize("texto", ["abc", "", None, "R$ 10"])
    def test_nan(self, texto):
        assert math.isnan(converter_preco(texto))


class TestValorCampo:
    """Valores padrão dos campos vazios."""

    def test_padroes(self):
        assert valor_campo({}, CampoNotificacao.TIPO) == "info"
        assert valor_campo({}, CampoNotificacao.CATEGORIA) == "system"
        assert valor_campo({}, CampoProfissional.PAPEL) == "technician"
        assert valor_campo({}, CampoProfissional.STATUS) == "active"
        assert valor_campo({}, CampoServico.CATEGORIA) == "procedure"
        assert valor_campo({}, CampoServico.ATIVO) is False

    def test_texto_sem_padrao(self):
        assert valor_campo({"nome": None}, CampoProfissional.NOME) == ""

    def test_valor_preenchido(self):
        assert valor_campo({"papel": "doctor"}, CampoProfissional.PAPEL) == "doctor"


class TestMudou:
    """NaN repetido não dispara nova alteração."""

    def test_nan(self):
        assert _mudou(math.nan, math.nan) is False

    def test_valores(self):
        assert _mudou("a", "b") is True
        assert _mudou(1.0, 1.0) is False


class _StFalso:
    """Widgets que devolvem o valor inicial, como numa primeira renderização sem edição."""

    def text_input(self, label, value="", **kwargs):
        return value

    def text_area(self, label, value="", **kwargs):
        return value

    def selectbox(self, label, opcoes, index=0, **kwargs):
        return opcoes[index]

    def checkbox(self, label, value=False, **kwargs):
        return value

    def columns(self, colunas):
        n = colunas if isinstance(colunas, int) else len(colunas)
        return [contextlib.nullcontext() for _ in range(n)]


class TestFormularioEmBranco:
    """Formulário vazio não emite alteração sem edição do usuário."""

    @pytest.fixture
    def st_falso(self, monkeypatch):
        monkeypatch.setattr(formularios, "st", _StFalso())

    @pytest.mark.parametrize("render", [
        render_formulario_notificacao,
        render_formulario_profissional,
        render_formulario_servico,
    ])
    def test_nao_emite(self, st_falso, render):
        emitidos = []
        render({}, lambda campo, valor: emitidos.append((campo, valor)))
        assert emitidos == []

    def test_categoria_da_notificacao_nao_usa_padrao_do_servico(self):
        assert CampoNotificacao.CATEGORIA == CampoServico.CATEGORIA
        assert valor_campo({}, CampoNotificacao.CATEGORIA) == "system"
        assert valor_campo({}, CampoServico.CATEGORIA) == "procedure"

    def test_categoria_padrao_sem_emitir(self):
        emitidos = []
        _emitir(lambda c, v: emitidos.append((c, v)), {}, CampoNotificacao.CATEGORIA, "system")
        assert emitidos == []

    @pytest.mark.parametrize("campo, opcoes", [
        (CampoNotificacao.TIPO, OPCOES_TIPO_NOTIFICACAO),
        (CampoNotificacao.CATEGORIA, OPCOES_CATEGORIA_NOTIFICACAO),
        (CampoProfissional.PAPEL, OPCOES_PAPEL),
        (CampoProfissional.STATUS, OPCOES_STATUS_PROFISSIONAL),
        (CampoServico.CATEGORIA, OPCOES_CATEGORIA_SERVICO),
    ])
    def test_padrao_esta_nas_opcoes(self, campo, opcoes):
        assert valor_campo({}, campo) in [c for c, _ in opcoes]
