# app/services/orcamentos.py
"""Orçamentos (PAD): montagem, totais, versionamento (original/aditivo) e gravação com auditoria."""
import logging
import secrets
import time
from datetime import date
from typing import Callable, List, Optional, Tuple

from pydantic import Field

from app.exceptions import ValidacaoError
from app.models.comum import ModeloBase
from app.models.financeiro import ItemOrcamento, Orcamento, TabelaPreco
from app.services.auditoria import registrar_log
from app.services.sessao import UsuarioAtual
from app.utils import _norm_key, nome_proprio_ptbr

logger = logging.getLogger(__name__)


def _agora_ms() -> int:
    return int(time.time() * 1000)


def _novo_item_id() -> str:
    return f"item-{_agora_ms()}-{secrets.token_hex(3)}"


def buscar_tabela(tabelas: List[TabelaPreco], tabela_id: str) -> Optional[TabelaPreco]:
    return next((t for t in tabelas if t.id == tabela_id), None)


def calcular_totais(itens: List[ItemOrcamento], tabela: Optional[TabelaPreco]) -> Tuple[float, float]:
    """
    (valor_total, custo_total) dos itens.
    Custo vem do preço de custo da tabela; serviço fora da tabela custa 0.
    """
    valor = sum(i.total for i in itens)
    custo = 0.0
    for item in itens:
        ref = tabela.item_do_servico(item.servico_id) if tabela else None
        if ref is not None:
            custo += item.quantidade * ref.preco_custo
    return valor, custo


class RascunhoOrcamento(ModeloBase):
    """Estado do formulário 'Novo Orçamento' antes de finalizar."""

    paciente_nome: str = ""
    paciente_id: Optional[str] = None
    tabela_id: str = ""
    itens: List[ItemOrcamento] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(i.total for i in self.itens)

    def selecionar_tabela(self, tabela_id: str) -> bool:
        """Troca a tabela de preço. Retorna True se itens existentes foram descartados."""
        if tabela_id == self.tabela_id:
            return False
        descartou = bool(self.itens)
        self.tabela_id = tabela_id
        self.itens = []
        return descartou

    def adicionar_item(self, servico_id: str, tabelas: List[TabelaPreco]) -> ItemOrcamento:
        if not self.tabela_id:
            raise ValidacaoError("Selecione uma tabela de preço primeiro.")
        tabela = buscar_tabela(tabelas, self.tabela_id)
        ref = tabela.item_do_servico(servico_id) if tabela else None
        preco = ref.preco_venda if ref else 0.0
        item = ItemOrcamento(
            id=_novo_item_id(),
            servico_id=servico_id,
            quantidade=1,
            preco_unitario=preco,
            total=preco,
        )
        self.itens = [*self.itens, item]
        return item

    def atualizar_quantidade(self, item_id: str, quantidade: int) -> None:
        self.itens = [
            i.model_copy(update={"quantidade": quantidade, "total": quantidade * i.preco_unitario})
            if i.id == item_id else i
            for i in self.itens
        ]

    def remover_item(self, item_id: str) -> None:
        self.itens = [i for i in self.itens if i.id != item_id]


def finalizar_rascunho(
    rascunho: RascunhoOrcamento,
    tabelas: List[TabelaPreco],
    hoje: Optional[date] = None,
) -> Orcamento:
    """Gera o orçamento versão 1 (original, rascunho) a partir do formulário."""
    nome = nome_proprio_ptbr(rascunho.paciente_nome)
    if not nome:
        raise ValidacaoError("Informe o paciente.")
    if not rascunho.tabela_id:
        raise ValidacaoError("Selecione uma tabela de preço.")

    valor, custo = calcular_totais(rascunho.itens, buscar_tabela(tabelas, rascunho.tabela_id))
    return Orcamento.criar(
        versao=1,
        id=f"orc-{_agora_ms()}",
        paciente_id=rascunho.paciente_id,
        paciente_nome=nome,
        tabela_id=rascunho.tabela_id,
        status="draft",
        criado_em=(hoje or date.today()).isoformat(),
        itens=list(rascunho.itens),
        valor_total=valor,
        custo_total=custo,
    )


def _mesmo_paciente(a: Orcamento, paciente_id: Optional[str], paciente_nome: str) -> bool:
    if paciente_id and a.paciente_id:
        return a.paciente_id == paciente_id
    return _norm_key(a.paciente_nome) == _norm_key(paciente_nome)


def orcamentos_do_paciente(
    orcamentos: List[Orcamento],
    paciente_nome: str,
    paciente_id: Optional[str] = None,
) -> List[Orcamento]:
    return [o for o in orcamentos if _mesmo_paciente(o, paciente_id, paciente_nome)]


def gerar_aditivo(
    anterior: Orcamento,
    orcamentos: List[Orcamento],
    prorrogacao: bool = False,
    hoje: Optional[date] = None,
) -> Orcamento:
    """
    Clona o orçamento como nova versão da cadeia do paciente.
    A versão é a maior já existente para o paciente + 1; os itens partem da versão anterior.
    """
    cadeia = orcamentos_do_paciente(orcamentos, anterior.paciente_nome, anterior.paciente_id)
    versao = max([o.versao for o in cadeia] + [anterior.versao]) + 1
    itens = [i.model_copy(update={"id": _novo_item_id()}) for i in anterior.itens]
    return Orcamento.criar(
        versao=versao,
        prorrogacao=prorrogacao,
        id=f"orc-{_agora_ms()}",
        paciente_id=anterior.paciente_id,
        paciente_nome=anterior.paciente_nome,
        tabela_id=anterior.tabela_id,
        status="draft",
        criado_em=(hoje or date.today()).isoformat(),
        itens=itens,
        valor_total=anterior.valor_total,
        custo_total=anterior.custo_total,
        orcamento_origem_id=anterior.id,
    )


def descricao_log(orcamento: Orcamento) -> str:
    if orcamento.tipo == "original":
        return f"Gerou novo orçamento (PAD) para: {orcamento.paciente_nome}"
    return f"Gerou {orcamento.tipo} v{orcamento.versao} do orçamento (PAD) para: {orcamento.paciente_nome}"


def salvar_orcamento(
    orcamentos: List[Orcamento],
    novo: Orcamento,
    usuario: UsuarioAtual,
    registrar: Callable = registrar_log,
) -> List[Orcamento]:
    """
    Coloca o novo orçamento no topo da lista e registra na auditoria em nome do usuário da sessão.
    A lista recebida não é alterada; os demais orçamentos seguem na mesma ordem.
    """
    atualizada = [novo, *orcamentos]
    registrar(
        usuario,
        "create",
        "Budget",
        descricao_log(novo),
        entidade_id=novo.id,
        metadados={"versao": novo.versao, "tipo": novo.tipo, "valor_total": novo.valor_total},
    )
    logger.info("Orçamento %s salvo (v%d, %s)", novo.id, novo.versao, novo.tipo)
    return atualizada
