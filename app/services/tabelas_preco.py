# app/services/tabelas_preco.py
"""Tabelas de preço: edição de custo/venda por serviço, margem e gravação com auditoria."""
import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Tuple

from pydantic import ValidationError

from app.exceptions import ValidacaoError
from app.formatters import calcular_margem
from app.models.administrativo import Servico
from app.models.financeiro import ItemTabelaPreco, TabelaPreco
from app.services.auditoria import registrar_log
from app.services.estado import proximo_id
from app.services.sessao import UsuarioAtual
from app.utils import _clean_spaces, contem_texto

logger = logging.getLogger(__name__)

CAMPOS_PRECO = ("preco_custo", "preco_venda")

# Abaixo disso a margem aparece como baixa
MARGEM_MINIMA = 20


def preco_do_servico(tabela: TabelaPreco, servico_id: str) -> ItemTabelaPreco:
    """Item da tabela para o serviço; serviço fora da tabela vale custo 0 e venda 0."""
    return tabela.item_do_servico(servico_id) or ItemTabelaPreco(
        servico_id=servico_id, preco_custo=0.0, preco_venda=0.0
    )


def faixa_margem(margem: float) -> str:
    if margem < 0:
        return "prejuizo"
    if margem < MARGEM_MINIMA:
        return "baixa"
    return "ok"


def linhas_editor(tabela: TabelaPreco, servicos: List[Servico]) -> List[Dict[str, Any]]:
    """Uma linha por serviço do catálogo com os preços desta tabela e a margem calculada."""
    linhas = []
    for s in servicos:
        ref = preco_do_servico(tabela, s.id)
        margem = calcular_margem(ref.preco_custo, ref.preco_venda)
        linhas.append({
            "servico_id": s.id,
            "codigo": s.codigo,
            "servico": s.nome,
            "categoria": s.categoria,
            "preco_custo": ref.preco_custo,
            "preco_venda": ref.preco_venda,
            "margem": margem,
            "faixa": faixa_margem(margem),
        })
    return linhas


def _valor_preco(valor: Any) -> float:
    try:
        v = 0.0 if valor in (None, "") else float(valor)
    except (TypeError, ValueError):
        v = math.nan
    if math.isnan(v) or v < 0:
        raise ValidacaoError(f"Preço inválido: {valor!r}")
    return v


def atualizar_preco(tabela: TabelaPreco, servico_id: str, campo: str, valor: Any) -> TabelaPreco:
    """
    Nova tabela com o custo ou a venda do serviço alterado.
    Serviço que ainda não está na tabela entra com o outro preço em 0.
    """
    if campo not in CAMPOS_PRECO:
        raise ValueError(f"campo de preço desconhecido: {campo}")
    v = _valor_preco(valor)
    itens = list(tabela.itens)
    for i, item in enumerate(itens):
        if item.servico_id == servico_id:
            itens[i] = item.model_copy(update={campo: v})
            break
    else:
        novo = {"preco_custo": 0.0, "preco_venda": 0.0, campo: v}
        itens.append(ItemTabelaPreco(servico_id=servico_id, **novo))
    return tabela.model_copy(update={"itens": itens})


def aplicar_precos(tabela: TabelaPreco, precos: Mapping[str, Tuple[Any, Any]]) -> TabelaPreco:
    """Aplica vários pares (custo, venda) por serviço; só grava o que mudou."""
    atualizada = tabela
    for servico_id, (custo, venda) in precos.items():
        atual = preco_do_servico(atualizada, servico_id)
        if _valor_preco(custo) != atual.preco_custo:
            atualizada = atualizar_preco(atualizada, servico_id, "preco_custo", custo)
        if _valor_preco(venda) != atual.preco_venda:
            atualizada = atualizar_preco(atualizada, servico_id, "preco_venda", venda)
    return atualizada


def filtrar_tabelas(tabelas: List[TabelaPreco], termo: str) -> List[TabelaPreco]:
    return [t for t in tabelas if contem_texto(t.nome, termo)]


def criar_tabela(nome: str, tipo: str, tabelas: List[TabelaPreco]) -> TabelaPreco:
    nome = _clean_spaces(nome or "")
    if not nome:
        raise ValidacaoError("Informe o nome da tabela.")
    try:
        return TabelaPreco(id=proximo_id("t", tabelas, separador=""), nome=nome, tipo=tipo)
    except ValidationError as e:
        raise ValidacaoError("Tabela inválida.", str(e.errors()[0].get("msg"))) from e


def salvar_tabela(
    tabelas: List[TabelaPreco],
    atualizada: TabelaPreco,
    usuario: UsuarioAtual,
    registrar: Callable = registrar_log,
) -> List[TabelaPreco]:
    """
    Substitui a tabela de mesmo id (ou acrescenta no fim se for nova) e registra na auditoria.
    A lista recebida não é alterada.
    """
    existe = any(t.id == atualizada.id for t in tabelas)
    if existe:
        nova_lista = [atualizada if t.id == atualizada.id else t for t in tabelas]
        registrar(usuario, "update", "PriceTable", f"Atualizou preços na tabela: {atualizada.nome}",
                  entidade_id=atualizada.id)
    else:
        nova_lista = [*tabelas, atualizada]
        registrar(usuario, "create", "PriceTable", f"Criou tabela de preço: {atualizada.nome}",
                  entidade_id=atualizada.id)
    logger.info("Tabela %s salva (%d itens)", atualizada.id, len(atualizada.itens))
    return nova_lista
