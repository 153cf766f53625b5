"""
Testes da paginação client-side.
"""

import pytest

from app.components.paginacao import RETICENCIAS, Paginador, paginar


class TestPaginar:
    """Divisão de listas em páginas."""

    @pytest.mark.parametrize("n, tamanho, paginas", [(0, 15, 0), (1, 15, 1), (15, 15, 1), (16, 15, 2), (100, 15, 7)])
    def test_quantidade_de_paginas(self, n, tamanho, paginas):
        assert len(paginar(list(range(n)), tamanho)) == paginas

    def test_concatenacao_reconstroi_lista(self):
        itens = list(range(37))
        paginas = paginar(itens, 10)
        assert [x for p in paginas for x in p] == itens
        assert all(len(p) == 10 for p in paginas[:-1])
        assert len(paginas[-1]) == 7

    def test_tamanho_invalido(self):
        with pytest.raises(ValueError):
            paginar([1, 2], 0)


class TestPaginador:
    """Estado da paginação."""

    def test_total_paginas(self):
        assert Paginador(100, 15).total_paginas == 7
        assert Paginador(0, 15).total_paginas == 0

    def test_fatia(self):
        itens = list(range(100))
        pag = Paginador(100, 15, pagina_atual=7)
        assert pag.fatia(itens) == list(range(90, 100))

    def test_ir_para_limita(self):
        pag = Paginador(100, 15)
        pag.ir_para(99)
        assert pag.pagina_atual == 7
        pag.ir_para(-3)
        assert pag.pagina_atual == 1

    def test_ir_para_sem_itens(self):
        pag = Paginador(0, 10)
        pag.ir_para(5)
        assert pag.pagina_atual == 1

    def test_trocar_itens_por_pagina_volta_ao_inicio(self):
        pag = Paginador(100, 10, pagina_atual=5)
        pag.alterar_itens_por_pagina(25)
        assert (pag.pagina_atual, pag.total_paginas) == (1, 4)

    def test_lista_encolheu(self):
        pag = Paginador(100, 10, pagina_atual=10)
        pag.atualizar_total(35)
        assert pag.pagina_atual == 4

    def test_intervalo_exibido(self):
        assert Paginador(37, 10, pagina_atual=4).intervalo_exibido() == (31, 37)

    def test_itens_por_pagina_invalido(self):
        with pytest.raises(ValueError):
            Paginador(10, 0)


class TestNumerosPaginas:
    """Números exibidos no controle."""

    def test_poucas_paginas(self):
        assert Paginador(50, 10).numeros_paginas() == [1, 2, 3, 4, 5]

    def test_meio(self):
        pag = Paginador(200, 10, pagina_atual=10)
        assert pag.numeros_paginas() == [1, RETICENCIAS, 8, 9, 10, 11, 12, RETICENCIAS, 20]

    def test_inicio(self):
        assert Paginador(200, 10).numeros_paginas() == [1, 2, 3, 4, 5, 6, RETICENCIAS, 20]

    def test_fim(self):
        pag = Paginador(200, 10, pagina_atual=20)
        assert pag.numeros_paginas() == [1, RETICENCIAS, 15, 16, 17, 18, 19, 20]

    def test_compacto(self):
        pag = Paginador(200, 10, pagina_atual=10)
        assert pag.numeros_paginas(compacto=True) == [1, RETICENCIAS, 9, 10, 11, RETICENCIAS, 20]
