# Componente: lista paginada de orçamentos (PAD) com ações de aditivo e detalhes
from typing import Callable, List, Optional

import pandas as pd
import streamlit as st

from app.components.paginacao import render_paginacao
from app.components.tabelas import Coluna, montar_dataframe, tabela_tabular
from app.config import ITENS_POR_PAGINA_ORCAMENTOS
from app.formatters import formatar_data, formatar_moeda
from app.models.financeiro import Orcamento, TabelaPreco
from app.traducoes import ROTULOS_STATUS_ORCAMENTO, rotulo

TABELA_DESCONHECIDA = "Tabela Desconhecida"


def nome_tabela(tabelas: List[TabelaPreco], tabela_id: str) -> str:
    return next((t.nome for t in tabelas if t.id == tabela_id), TABELA_DESCONHECIDA)


def rotulo_versao(orcamento: Orcamento) -> str:
    return f"v{orcamento.versao} - {orcamento.tipo}"


def colunas_orcamento(tabelas: List[TabelaPreco]) -> List[Coluna]:
    return [
        Coluna("patient", "ID / Paciente", lambda o: f"{o.paciente_nome} ({o.id.upper()})"),
        Coluna("table", "Tabela Aplicada", lambda o: nome_tabela(tabelas, o.tabela_id)),
        Coluna("version", "Versão", rotulo_versao),
        Coluna("date", "Data", lambda o: formatar_data(o.criado_em)),
        Coluna("total", "Valor Total", lambda o: formatar_moeda(o.valor_total), "right"),
        Coluna("status", "Status", lambda o: rotulo(ROTULOS_STATUS_ORCAMENTO, o.status)),
    ]


def linhas_orcamentos(orcamentos: List[Orcamento], tabelas: List[TabelaPreco]) -> pd.DataFrame:
    return montar_dataframe(orcamentos, colunas_orcamento(tabelas))


def _render_detalhes(orcamento: Orcamento, nomes_servicos: dict) -> None:
    itens = pd.DataFrame([
        {
            "Serviço": nomes_servicos.get(i.servico_id, i.servico_id),
            "Qtd.": i.quantidade,
            "Valor unit.": formatar_moeda(i.preco_unitario),
            "Total": formatar_moeda(i.total),
        }
        for i in orcamento.itens
    ])
    tabela_tabular(itens, empty_message="Orçamento sem itens.")
    st.caption(
        f"Custo total: {formatar_moeda(orcamento.custo_total)}"
        + (f" · Origem: {orcamento.orcamento_origem_id}" if orcamento.orcamento_origem_id else "")
    )


def render_lista_orcamentos(
    orcamentos: List[Orcamento],
    tabelas: List[TabelaPreco],
    on_aditivo: Optional[Callable[[Orcamento], None]] = None,
    nomes_servicos: Optional[dict] = None,
    chave: str = "orcamentos",
) -> None:
    """
    Tabela paginada (15 por página, ajustável) com uma linha de ações por orçamento da página:
    'Clonar / Gerar Aditivo' chama on_aditivo; 'Visualizar Detalhes' abre os itens.
    """
    if not orcamentos:
        st.info("Nenhum orçamento cadastrado.")
        return

    pag = render_paginacao(chave, len(orcamentos), ITENS_POR_PAGINA_ORCAMENTOS)
    pagina = pag.fatia(orcamentos)

    st.dataframe(
        linhas_orcamentos(pagina, tabelas),
        use_container_width=True,
        hide_index=True,
    )

    st.markdown("##### Ações")
    for o in pagina:
        with st.expander(f"{o.id.upper()} · {o.paciente_nome} · {rotulo_versao(o)}"):
            col_clone, col_info = st.columns([1, 3])
            with col_clone:
                if st.button("📋 Clonar / Gerar Aditivo", key=f"{chave}_aditivo_{o.id}",
                             disabled=on_aditivo is None):
                    on_aditivo(o)
            with col_info:
                st.markdown("**📄 Visualizar Detalhes**")
                _render_detalhes(o, nomes_servicos or {})
