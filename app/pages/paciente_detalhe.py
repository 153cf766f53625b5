# Tela: Detalhe do paciente (dados pessoais, contatos, alergias e orçamentos)
from typing import Optional

import pandas as pd
import streamlit as st

from app.components import metricas_linha, tabela_tabular
from app.components.acesso import exigir_permissao, pode
from app.components.lista_orcamentos import linhas_orcamentos
from app.exceptions import RegistroNaoEncontradoError
from app.formatters import calcular_idade, formatar_cpf, formatar_data, formatar_moeda, formatar_telefone
from app.models.administrativo import Paciente
from app.services import estado
from app.services.orcamentos import orcamentos_do_paciente
from app.traducoes import ROTULOS_STATUS, rotulo


def _id_da_rota() -> Optional[str]:
    return st.query_params.get("id") or None


def _selecionar_paciente() -> Optional[str]:
    pacientes = estado.obter(st.session_state, estado.CHAVE_PACIENTES)
    ids = [p.id for p in pacientes]
    nomes = {p.id: f"{p.nome} ({p.id})" for p in pacientes}
    escolhido = st.selectbox("Paciente", [""] + ids, format_func=lambda i: nomes.get(i, "Selecione o paciente..."),
                             key="detalhe_paciente_sel")
    if escolhido:
        st.query_params["id"] = escolhido
    return escolhido or None


def _render_paciente(paciente: Paciente) -> None:
    st.subheader(paciente.nome)
    st.caption(f"{paciente.id} · {rotulo(ROTULOS_STATUS, paciente.status)}")

    metricas_linha([
        ("CPF", formatar_cpf(paciente.cpf)),
        ("Idade", f"{calcular_idade(paciente.nascimento)} anos"),
        ("Nascimento", formatar_data(paciente.nascimento)),
    ])

    col_dados, col_contatos = st.columns(2)
    with col_dados:
        st.markdown("**Diagnóstico**")
        st.write(paciente.diagnostico)
        st.markdown("**Endereço**")
        st.write(paciente.endereco.linha())
        st.markdown("**Alergias**")
        if paciente.alergias:
            st.warning(", ".join(paciente.alergias))
        else:
            st.caption("Nenhuma alergia registrada.")
    with col_contatos:
        st.markdown("**Contatos**")
        df = pd.DataFrame([
            {"Nome": c.nome, "Relação": c.relacao, "Telefone": formatar_telefone(c.telefone)}
            for c in paciente.contatos
        ])
        tabela_tabular(df, empty_message="Nenhum contato cadastrado.")


def _render_orcamentos(paciente: Paciente) -> None:
    st.markdown("### 🧮 Orçamentos (PAD)")
    orcamentos = orcamentos_do_paciente(
        estado.obter(st.session_state, estado.CHAVE_ORCAMENTOS), paciente.nome, paciente.id
    )
    if not orcamentos:
        st.info("Nenhum orçamento para este paciente.")
        return
    tabelas = estado.obter(st.session_state, estado.CHAVE_TABELAS)
    tabela_tabular(
        linhas_orcamentos(orcamentos, tabelas),
        caption=f"{len(orcamentos)} orçamento(s) · Total: {formatar_moeda(sum(o.valor_total for o in orcamentos))}",
    )


def render_paciente_detalhe():
    st.title("🧑‍⚕️ Paciente")
    usuario = exigir_permissao("view", "patients")

    paciente_id = _id_da_rota() or _selecionar_paciente()
    if not paciente_id:
        st.info("Selecione um paciente para ver os detalhes.")
        return

    try:
        paciente = estado.buscar_paciente(st.session_state, paciente_id)
    except RegistroNaoEncontradoError as e:
        st.error(f"❌ {e.message}")
        if st.button("Escolher outro paciente"):
            st.query_params.clear()
            st.rerun()
        return

    _render_paciente(paciente)
    if pode(usuario, "view", "finances"):
        _render_orcamentos(paciente)
