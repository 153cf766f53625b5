# Tela: Início - resumo do sistema e atalhos para os módulos
import pandas as pd
import streamlit as st

from app.components import metricas_linha, tabela_tabular
from app.formatters import formatar_data_hora, formatar_moeda
from app.services import estado
from app.services.sessao import obter_usuario_atual
from app.traducoes import ROTULOS_PAPEL, ROTULOS_TIPO_NOTIFICACAO, rotulo

MODULOS = [
    ("💰 Financeiro", "Orçamentos PAD, aditivos e prorrogações por tabela de preço."),
    ("💲 Tabelas", "Catálogo de serviços e preços de custo e venda por tabela."),
    ("🏢 Cadastros", "Notificações, profissionais e serviços."),
    ("🧑‍⚕️ Paciente", "Dados pessoais, contatos, alergias e orçamentos do paciente."),
    ("👤 Profissional", "Dados do profissional e perfil de acesso."),
    ("🛡️ Controle de Acesso", "Papéis, permissões e vínculo de usuários."),
    ("📜 Logs do Sistema", "Trilha de auditoria das ações realizadas."),
]


def _card(titulo: str, descricao: str) -> None:
    st.markdown(
        f'<div class="hc-card"><h3>{titulo}</h3><p>{descricao}</p></div>',
        unsafe_allow_html=True,
    )


def render_inicio():
    usuario = obter_usuario_atual(st.session_state)
    st.title("🏠 Painel Homecare")
    st.caption(f"Olá, {usuario.nome} ({rotulo(ROTULOS_PAPEL, usuario.papel)})")

    pacientes = estado.obter(st.session_state, estado.CHAVE_PACIENTES)
    profissionais = estado.obter(st.session_state, estado.CHAVE_PROFISSIONAIS)
    orcamentos = estado.obter(st.session_state, estado.CHAVE_ORCAMENTOS)
    notificacoes = estado.obter(st.session_state, estado.CHAVE_NOTIFICACOES)

    metricas_linha([
        ("Pacientes Ativos", sum(1 for p in pacientes if p.status == "active")),
        ("Profissionais Ativos", sum(1 for p in profissionais if p.status == "active")),
        ("Orçamentos em Rascunho", sum(1 for o in orcamentos if o.status == "draft")),
        ("Valor Aprovado", formatar_moeda(sum(o.valor_total for o in orcamentos if o.status == "approved"))),
    ])

    st.markdown("### Módulos")
    cols = st.columns(3)
    for i, (titulo, descricao) in enumerate(MODULOS):
        with cols[i % 3]:
            _card(titulo, descricao)

    st.markdown("### 🔔 Notificações recentes")
    recentes = sorted(notificacoes, key=lambda n: n.criada_em, reverse=True)[:5]
    df = pd.DataFrame([
        {
            "": "●" if not n.lida else "",
            "Título": n.titulo,
            "Tipo": rotulo(ROTULOS_TIPO_NOTIFICACAO, n.tipo),
            "Quando": formatar_data_hora(n.criada_em),
        }
        for n in recentes
    ])
    tabela_tabular(df, empty_message="Nenhuma notificação.")
