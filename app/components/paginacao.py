# Componente: paginação client-side (estado puro + controle Streamlit)
import math
from typing import List, Optional, Sequence, TypeVar, Union

import streamlit as st

from app.config import ITENS_POR_PAGINA_PADRAO, OPCOES_ITENS_POR_PAGINA

T = TypeVar("T")

RETICENCIAS = "..."


def paginar(itens: Sequence[T], tamanho: int) -> List[List[T]]:
    """Divide a sequência em páginas de `tamanho` itens (a última pode ser menor)."""
    if tamanho < 1:
        raise ValueError("tamanho da página deve ser >= 1")
    return [list(itens[i:i + tamanho]) for i in range(0, len(itens), tamanho)]


class Paginador:
    """
    Estado da paginação de uma lista.
    - total_paginas = ceil(total_itens / itens_por_pagina)
    - ir_para limita a página ao intervalo [1, total_paginas]
    - trocar itens por página volta para a página 1
    """

    def __init__(self, total_itens: int, itens_por_pagina: int = ITENS_POR_PAGINA_PADRAO, pagina_atual: int = 1):
        if itens_por_pagina < 1:
            raise ValueError("itens_por_pagina deve ser >= 1")
        self.total_itens = total_itens
        self.itens_por_pagina = itens_por_pagina
        self.pagina_atual = pagina_atual

    @property
    def total_paginas(self) -> int:
        return math.ceil(self.total_itens / self.itens_por_pagina)

    def fatia(self, itens: Sequence[T]) -> List[T]:
        inicio = (self.pagina_atual - 1) * self.itens_por_pagina
        return list(itens[inicio:inicio + self.itens_por_pagina])

    def ir_para(self, pagina: int) -> None:
        self.pagina_atual = max(1, min(pagina, self.total_paginas))

    def alterar_itens_por_pagina(self, itens_por_pagina: int) -> None:
        if itens_por_pagina < 1:
            raise ValueError("itens_por_pagina deve ser >= 1")
        self.itens_por_pagina = itens_por_pagina
        self.pagina_atual = 1

    def atualizar_total(self, total_itens: int) -> None:
        self.total_itens = total_itens
        self.ajustar()

    def ajustar(self) -> None:
        """Se a lista encolheu, traz a página atual para a última existente."""
        if self.pagina_atual > self.total_paginas > 0:
            self.pagina_atual = self.total_paginas

    def intervalo_exibido(self) -> tuple:
        """(primeiro, último) item exibido, contando a partir de 1."""
        primeiro = (self.pagina_atual - 1) * self.itens_por_pagina + 1
        ultimo = min(self.pagina_atual * self.itens_por_pagina, self.total_itens)
        return primeiro, ultimo

    def numeros_paginas(self, compacto: bool = False) -> List[Union[int, str]]:
        """Números a exibir no controle, com '...' nos saltos; primeira e última sempre aparecem."""
        total = self.total_paginas
        visiveis = 3 if compacto else 5
        if total <= visiveis + 2:
            return list(range(1, total + 1))

        inicio = max(2, self.pagina_atual - visiveis // 2)
        fim = min(total - 1, inicio + visiveis - 1)
        if fim == total - 1:
            inicio = max(2, fim - visiveis + 1)

        paginas: List[Union[int, str]] = [1]
        if inicio > 2:
            paginas.append(RETICENCIAS)
        paginas.extend(range(inicio, fim + 1))
        if fim < total - 1:
            paginas.append(RETICENCIAS)
        paginas.append(total)
        return paginas


def render_paginacao(
    chave: str,
    total_itens: int,
    itens_por_pagina_inicial: int = ITENS_POR_PAGINA_PADRAO,
    opcoes: Optional[List[int]] = None,
    compacto: bool = False,
) -> Paginador:
    """
    Exibe o controle de paginação e devolve o Paginador guardado em st.session_state.
    Use paginador.fatia(lista) para obter os itens da página atual.
    """
    key_estado = f"paginador_{chave}"
    pag = st.session_state.get(key_estado)
    if pag is None:
        pag = Paginador(total_itens, itens_por_pagina_inicial)
        st.session_state[key_estado] = pag
    pag.atualizar_total(total_itens)

    opcoes = list(opcoes or OPCOES_ITENS_POR_PAGINA)
    if pag.itens_por_pagina not in opcoes:
        opcoes = sorted(set(opcoes) | {pag.itens_por_pagina})

    col_info, col_qtd = st.columns([3, 1])
    with col_info:
        primeiro, ultimo = pag.intervalo_exibido()
        st.caption(f"Mostrando **{primeiro}** a **{ultimo}** de **{total_itens}** resultados")
    with col_qtd:
        novo_qtd = st.selectbox(
            "Itens por página:",
            opcoes,
            index=opcoes.index(pag.itens_por_pagina),
            key=f"{key_estado}_qtd",
        )
        if novo_qtd != pag.itens_por_pagina:
            pag.alterar_itens_por_pagina(novo_qtd)
            st.rerun()

    if pag.total_paginas <= 1:
        return pag

    numeros = pag.numeros_paginas(compacto)
    cols = st.columns(len(numeros) + 4)
    atual, total = pag.pagina_atual, pag.total_paginas
    botoes = [("«", 1, atual == 1, "Primeira página"), ("‹", atual - 1, atual == 1, "Página anterior")]
    botoes += [(str(n), n, n == atual, None) if n != RETICENCIAS else (RETICENCIAS, None, True, None)
               for n in numeros]
    botoes += [("›", atual + 1, atual == total, "Próxima página"), ("»", total, atual == total, "Última página")]

    for i, (col, (rotulo, destino, desabilitado, ajuda)) in enumerate(zip(cols, botoes)):
        with col:
            if st.button(rotulo, key=f"{key_estado}_btn_{i}", disabled=desabilitado, help=ajuda,
                         type="primary" if rotulo == str(atual) else "secondary"):
                pag.ir_para(destino)
                st.rerun()
    return pag
