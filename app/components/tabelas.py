# Componente: tabela de registros com colunas renderizadas (dataframe) e caption
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, Union

import pandas as pd
import streamlit as st


class Coluna(NamedTuple):
    """Coluna de tabela: chave interna, cabeçalho exibido e função que gera o texto da célula."""

    chave: str
    cabecalho: str
    render: Callable[[Any], Any]
    alinhamento: str = "left"


def montar_dataframe(itens: Iterable[Any], colunas: List[Coluna]) -> pd.DataFrame:
    """Uma linha por item, na ordem recebida; colunas nomeadas pelos cabeçalhos."""
    linhas = [{c.cabecalho: c.render(item) for c in colunas} for item in itens]
    return pd.DataFrame(linhas, columns=[c.cabecalho for c in colunas])


def tabela_tabular(
    df: pd.DataFrame,
    caption: Optional[str] = None,
    drop_colunas: Optional[Union[str, List[str]]] = None,
    empty_message: Optional[str] = None,
    **dataframe_kwargs,
) -> None:
    """
    Exibe um DataFrame como tabela Streamlit com layout padrão do app.
    - drop_colunas: coluna(s) a remover antes de exibir (ex.: "id").
    - caption: texto abaixo da tabela (ex.: "Total: 10 itens").
    - empty_message: se o df estiver vazio, exibe st.info(empty_message) em vez da tabela.
    - **dataframe_kwargs: repassados para st.dataframe (ex.: column_config=...).
    """
    if df is None or df.empty:
        if empty_message:
            st.info(empty_message)
        return
    out = df
    if drop_colunas:
        cols = [drop_colunas] if isinstance(drop_colunas, str) else drop_colunas
        out = df.drop(columns=[c for c in cols if c in df.columns])
    kwargs = {"use_container_width": True, "hide_index": True, **dataframe_kwargs}
    st.dataframe(out, **kwargs)
    if caption:
        st.caption(caption)
