# Dados em memória da sessão (pacientes, profissionais, serviços, tabelas, orçamentos, notificações)
"""
Os cadastros vivem em st.session_state enquanto não há backend. `carregar_dados`
preenche cada chave uma única vez com os dados iniciais; as páginas leem e
substituem as listas inteiras (nunca alteram a lista guardada no lugar).
"""
import logging
from typing import Dict, List, MutableMapping

from app.exceptions import RegistroNaoEncontradoError
from app.models.administrativo import Paciente, Servico
from app.models.comum import Profissional
from app.services import dados_iniciais

logger = logging.getLogger(__name__)

CHAVE_PACIENTES = "dados_pacientes"
CHAVE_PROFISSIONAIS = "dados_profissionais"
CHAVE_SERVICOS = "dados_servicos"
CHAVE_TABELAS = "dados_tabelas_preco"
CHAVE_ORCAMENTOS = "dados_orcamentos"
CHAVE_NOTIFICACOES = "dados_notificacoes"


def carregar_dados(session_state: MutableMapping) -> None:
    if CHAVE_PACIENTES in session_state:
        return
    pacientes = dados_iniciais.gerar_pacientes()
    servicos = dados_iniciais.gerar_servicos()
    tabelas = dados_iniciais.gerar_tabelas_preco(servicos)
    session_state[CHAVE_PACIENTES] = pacientes
    session_state[CHAVE_PROFISSIONAIS] = dados_iniciais.gerar_profissionais()
    session_state[CHAVE_SERVICOS] = servicos
    session_state[CHAVE_TABELAS] = tabelas
    session_state[CHAVE_ORCAMENTOS] = dados_iniciais.gerar_orcamentos(pacientes, tabelas)
    session_state[CHAVE_NOTIFICACOES] = dados_iniciais.gerar_notificacoes()
    logger.info("Dados iniciais carregados na sessão (%d pacientes)", len(pacientes))


def obter(session_state: MutableMapping, chave: str) -> List:
    carregar_dados(session_state)
    return session_state[chave]


def substituir(session_state: MutableMapping, chave: str, registros: List) -> None:
    session_state[chave] = list(registros)


def buscar_paciente(session_state: MutableMapping, paciente_id: str) -> Paciente:
    paciente = next((p for p in obter(session_state, CHAVE_PACIENTES) if p.id == paciente_id), None)
    if paciente is None:
        raise RegistroNaoEncontradoError(f"Paciente não encontrado: {paciente_id}")
    return paciente


def buscar_profissional(session_state: MutableMapping, profissional_id: str) -> Profissional:
    prof = next((p for p in obter(session_state, CHAVE_PROFISSIONAIS) if p.id == profissional_id), None)
    if prof is None:
        raise RegistroNaoEncontradoError(f"Profissional não encontrado: {profissional_id}")
    return prof


def nomes_servicos(servicos: List[Servico]) -> Dict[str, str]:
    return {s.id: s.nome for s in servicos}


def proximo_id(prefixo: str, registros: List, separador: str = "-") -> str:
    """Próximo id sequencial `<prefixo><separador><n>` considerando os ids numéricos já usados."""
    inicio = f"{prefixo}{separador}"
    numeros = [int(r.id[len(inicio):]) for r in registros
               if r.id.startswith(inicio) and r.id[len(inicio):].isdigit()]
    return f"{inicio}{max(numeros, default=0) + 1}"
