# Identidade do usuário que opera o sistema (passada explicitamente aos serviços)
from typing import NamedTuple

from app.models.comum import PapelProfissional, Profissional

CHAVE_SESSAO = "usuario_atual"


class UsuarioAtual(NamedTuple):
    id: str
    nome: str
    papel: PapelProfissional

    @classmethod
    def de_profissional(cls, prof: Profissional) -> "UsuarioAtual":
        return cls(id=prof.id, nome=prof.nome, papel=prof.papel)


def usuario_padrao() -> UsuarioAtual:
    """Administrador do sistema: usuário inicial enquanto não há login."""
    return UsuarioAtual(id="prof-admin", nome="Administrador do Sistema", papel="admin")


def obter_usuario_atual(session_state) -> UsuarioAtual:
    """Lê o usuário da sessão Streamlit (ou de um dict nos testes); cria o padrão se ausente."""
    usuario = session_state.get(CHAVE_SESSAO)
    if usuario is None:
        usuario = usuario_padrao()
        session_state[CHAVE_SESSAO] = usuario
    return usuario
