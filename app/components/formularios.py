# Componentes: formulários administrativos (notificação, profissional, serviço)
"""
Formulários controlados: cada widget é preenchido a partir do dicionário de
campos recebido e, quando o usuário altera um valor, o par (campo, valor) é
repassado para `on_change`. Nenhuma validação é feita aqui; quem chama decide
o que fazer com os valores.
"""
import math
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Tuple, Union

import streamlit as st

from app.traducoes import (
    ROTULOS_CATEGORIA_NOTIFICACAO,
    ROTULOS_CATEGORIA_SERVICO,
    ROTULOS_PAPEL,
    ROTULOS_STATUS,
    ROTULOS_TIPO_NOTIFICACAO,
)


class CampoNotificacao(str, Enum):
    TITULO = "titulo"
    TIPO = "tipo"
    CATEGORIA = "categoria"
    MENSAGEM = "mensagem"


class CampoProfissional(str, Enum):
    NOME = "nome"
    PAPEL = "papel"
    NUMERO_CONSELHO = "numero_conselho"
    EMAIL = "email"
    TELEFONE = "telefone"
    STATUS = "status"


class CampoServico(str, Enum):
    CODIGO = "codigo"
    NOME = "nome"
    CATEGORIA = "categoria"
    PRECO_BASE = "preco_base"
    ATIVO = "ativo"


Campo = Union[CampoNotificacao, CampoProfissional, CampoServico]
OnChange = Callable[[Campo, Any], None]

OPCOES_TIPO_NOTIFICACAO: List[Tuple[str, str]] = list(ROTULOS_TIPO_NOTIFICACAO.items())
OPCOES_CATEGORIA_NOTIFICACAO: List[Tuple[str, str]] = list(ROTULOS_CATEGORIA_NOTIFICACAO.items())
OPCOES_PAPEL: List[Tuple[str, str]] = list(ROTULOS_PAPEL.items())
OPCOES_STATUS_PROFISSIONAL: List[Tuple[str, str]] = [
    (s, ROTULOS_STATUS[s]) for s in ("active", "inactive", "vacation")
]
OPCOES_CATEGORIA_SERVICO: List[Tuple[str, str]] = list(ROTULOS_CATEGORIA_SERVICO.items())

# Valor exibido quando o campo ainda não foi preenchido, separado por formulário
PADROES: Dict[type, Dict[str, Any]] = {
    CampoNotificacao: {"tipo": "info", "categoria": "system"},
    CampoProfissional: {"papel": "technician", "status": "active"},
    CampoServico: {"categoria": "procedure", "ativo": False},
}

_RE_NUMERO = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def aplicar_alteracao(dados: Mapping[str, Any], campo: Campo, valor: Any) -> Dict[str, Any]:
    """Devolve uma cópia de `dados` com o campo alterado (o dicionário original não muda)."""
    return {**dados, campo.value: valor}


def converter_preco(texto: Any) -> float:
    """
    Converte o texto do campo de preço em float, lendo o número do início do texto.
    Texto sem número vira NaN e segue adiante sem erro.
    """
    m = _RE_NUMERO.match(str(texto or ""))
    return float(m.group(0)) if m else math.nan


def valor_campo(dados: Mapping[str, Any], campo: Campo) -> Any:
    v = dados.get(campo.value)
    if v is None or v == "":
        return PADROES.get(type(campo), {}).get(campo.value, "")
    return v


def _mudou(atual: Any, novo: Any) -> bool:
    if isinstance(atual, float) and isinstance(novo, float) and math.isnan(atual) and math.isnan(novo):
        return False
    return atual != novo


def _emitir(on_change: OnChange, dados: Mapping[str, Any], campo: Campo, novo: Any) -> None:
    if _mudou(valor_campo(dados, campo), novo):
        on_change(campo, novo)


def _select(label: str, opcoes: List[Tuple[str, str]], atual: str, key: str) -> str:
    codigos = [c for c, _ in opcoes]
    rotulos = dict(opcoes)
    idx = codigos.index(atual) if atual in codigos else 0
    return st.selectbox(label, codigos, index=idx, format_func=lambda c: rotulos.get(c, c), key=key)


def render_formulario_notificacao(dados: Mapping[str, Any], on_change: OnChange, chave: str = "form_notif") -> None:
    titulo = st.text_input("Título", value=valor_campo(dados, CampoNotificacao.TITULO),
                           placeholder="Título da notificação", key=f"{chave}_titulo")
    _emitir(on_change, dados, CampoNotificacao.TITULO, titulo)

    col1, col2 = st.columns(2)
    with col1:
        tipo = _select("Tipo", OPCOES_TIPO_NOTIFICACAO, valor_campo(dados, CampoNotificacao.TIPO), f"{chave}_tipo")
        _emitir(on_change, dados, CampoNotificacao.TIPO, tipo)
    with col2:
        categoria = _select("Categoria", OPCOES_CATEGORIA_NOTIFICACAO,
                            valor_campo(dados, CampoNotificacao.CATEGORIA), f"{chave}_categoria")
        _emitir(on_change, dados, CampoNotificacao.CATEGORIA, categoria)

    mensagem = st.text_area("Mensagem", value=valor_campo(dados, CampoNotificacao.MENSAGEM), height=128,
                            placeholder="Digite o conteúdo da notificação...", key=f"{chave}_mensagem")
    _emitir(on_change, dados, CampoNotificacao.MENSAGEM, mensagem)


def render_formulario_profissional(dados: Mapping[str, Any], on_change: OnChange, chave: str = "form_prof") -> None:
    nome = st.text_input("Nome Completo", value=valor_campo(dados, CampoProfissional.NOME), key=f"{chave}_nome")
    _emitir(on_change, dados, CampoProfissional.NOME, nome)

    col1, col2 = st.columns(2)
    with col1:
        papel = _select("Categoria", OPCOES_PAPEL, valor_campo(dados, CampoProfissional.PAPEL), f"{chave}_papel")
        _emitir(on_change, dados, CampoProfissional.PAPEL, papel)
    with col2:
        conselho = st.text_input("Nº Conselho", value=valor_campo(dados, CampoProfissional.NUMERO_CONSELHO),
                                 placeholder="Ex: COREN-SP 123456", key=f"{chave}_conselho")
        _emitir(on_change, dados, CampoProfissional.NUMERO_CONSELHO, conselho)

    col3, col4 = st.columns(2)
    with col3:
        email = st.text_input("Email", value=valor_campo(dados, CampoProfissional.EMAIL), key=f"{chave}_email")
        _emitir(on_change, dados, CampoProfissional.EMAIL, email)
    with col4:
        telefone = st.text_input("Telefone", value=valor_campo(dados, CampoProfissional.TELEFONE),
                                 key=f"{chave}_telefone")
        _emitir(on_change, dados, CampoProfissional.TELEFONE, telefone)

    status = _select("Status", OPCOES_STATUS_PROFISSIONAL, valor_campo(dados, CampoProfissional.STATUS),
                     f"{chave}_status")
    _emitir(on_change, dados, CampoProfissional.STATUS, status)


def render_formulario_servico(dados: Mapping[str, Any], on_change: OnChange, chave: str = "form_serv") -> None:
    col1, col2 = st.columns([1, 2])
    with col1:
        codigo = st.text_input("Código", value=valor_campo(dados, CampoServico.CODIGO), key=f"{chave}_codigo")
        _emitir(on_change, dados, CampoServico.CODIGO, codigo)
    with col2:
        nome = st.text_input("Nome do Serviço", value=valor_campo(dados, CampoServico.NOME), key=f"{chave}_nome")
        _emitir(on_change, dados, CampoServico.NOME, nome)

    col3, col4 = st.columns(2)
    with col3:
        categoria = _select("Categoria", OPCOES_CATEGORIA_SERVICO, valor_campo(dados, CampoServico.CATEGORIA),
                            f"{chave}_categoria")
        _emitir(on_change, dados, CampoServico.CATEGORIA, categoria)
    with col4:
        preco_atual = dados.get(CampoServico.PRECO_BASE.value)
        # 0, vazio e NaN aparecem como campo em branco
        exibido = "" if not preco_atual or (isinstance(preco_atual, float) and math.isnan(preco_atual)) else str(preco_atual)
        texto = st.text_input("Preço Base (R$)", value=exibido, key=f"{chave}_preco")
        if texto != exibido:
            _emitir(on_change, dados, CampoServico.PRECO_BASE, converter_preco(texto))

    ativo = st.checkbox("Serviço Ativo para Venda", value=bool(valor_campo(dados, CampoServico.ATIVO)),
                        key=f"{chave}_ativo")
    _emitir(on_change, dados, CampoServico.ATIVO, ativo)
