# Componente: linha de indicadores (cards de métrica lado a lado)
from typing import List, Sequence

import streamlit as st


def metricas_linha(metricas: List[Sequence]) -> None:
    """
    Uma st.metric por coluna. Cada item é (rótulo, valor) ou (rótulo, valor, delta).
    Ex.: metricas_linha([("Pacientes Ativos", 142), ("Taxa de Ocupação", "94%", "+2%")])
    """
    if not metricas:
        return
    for col, item in zip(st.columns(len(metricas)), metricas):
        rotulo, valor = item[0], item[1]
        delta = item[2] if len(item) > 2 else None
        with col:
            st.metric(rotulo, valor, delta)
