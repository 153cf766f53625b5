# Componentes de UI reutilizáveis
from app.components.tabelas import Coluna, montar_dataframe, tabela_tabular
from app.components.metricas import metricas_linha
from app.components.paginacao import Paginador, paginar, render_paginacao

__all__ = [
    "Coluna",
    "montar_dataframe",
    "tabela_tabular",
    "metricas_linha",
    "Paginador",
    "paginar",
    "render_paginacao",
]
