# Tela: Controle de acesso (RBAC) - papéis, permissões e usuários vinculados
import pandas as pd
import streamlit as st

from app.components import tabela_tabular
from app.components.acesso import exigir_permissao
from app.components.paginacao import render_paginacao
from app.exceptions import AppError
from app.services import estado
from app.services.auditoria import registrar_log
from app.services.autorizacao import (
    PAPEL_ADMIN,
    PERMISSOES_SISTEMA,
    atribuir_papel,
    excluir_papel,
    listar_atribuicoes,
    listar_papeis,
    restaurar_padroes,
    salvar_papel,
)
from app.services.cadastros import montar_papel
from app.traducoes import ROTULOS_ACAO_PERMISSAO, ROTULOS_ENTIDADE_PERMISSAO, ROTULOS_PAPEL, rotulo

NOVO = "__novo__"


def _editor_papel(usuario, papeis) -> None:
    ids = [NOVO] + [p.id for p in papeis]
    nomes = {p.id: p.nome for p in papeis}
    escolhido = st.selectbox("Papel", ids, format_func=lambda i: "➕ Novo Papel" if i == NOVO else nomes[i],
                             key="rbac_papel_escolhido")
    papel = next((p for p in papeis if p.id == escolhido), None)
    k = f"rbac_{escolhido}"

    nome = st.text_input("Nome do Papel", value=papel.nome if papel else "", key=f"{k}_nome")
    descricao = st.text_area("Descrição", value=papel.descricao if papel else "", key=f"{k}_descricao", height=80)

    st.markdown("**Permissões**")
    atuais = set(papel.permissoes) if papel else set()
    marcadas = []
    entidades = list(dict.fromkeys(p.entidade for p in PERMISSOES_SISTEMA))
    cols = st.columns(3)
    for i, entidade in enumerate(entidades):
        with cols[i % 3]:
            st.caption(rotulo(ROTULOS_ENTIDADE_PERMISSAO, entidade))
            for perm in (p for p in PERMISSOES_SISTEMA if p.entidade == entidade):
                if st.checkbox(rotulo(ROTULOS_ACAO_PERMISSAO, perm.acao), value=perm.id in atuais,
                               key=f"{k}_perm_{perm.id}", disabled=escolhido == PAPEL_ADMIN):
                    marcadas.append(perm.id)
    if escolhido == PAPEL_ADMIN:
        st.caption("O Administrador sempre tem todas as permissões.")

    col_salvar, col_excluir = st.columns(2)
    with col_salvar:
        if st.button("💾 Salvar Papel", key=f"{k}_salvar", type="primary"):
            dados = {"id": papel.id if papel else None, "nome": nome, "descricao": descricao, "permissoes": marcadas}
            try:
                salvo = montar_papel(dados, papeis, [p.id for p in PERMISSOES_SISTEMA])
                salvar_papel(salvo)
            except AppError as e:
                st.error(f"❌ {e.message}" + (f" ({e.details})" if e.details else ""))
                return
            registrar_log(usuario, "update" if papel else "create", "Role",
                          f"{'Atualizou' if papel else 'Criou'} papel de acesso: {salvo.nome}", entidade_id=salvo.id)
            st.session_state["rbac_msg"] = f"✅ Papel {salvo.nome} salvo."
            st.rerun()
    with col_excluir:
        if papel and papel.id != PAPEL_ADMIN:
            confirmar = st.checkbox("Usuários vinculados perderão o acesso", key=f"{k}_confirmar")
            if st.button("🗑️ Excluir Papel", key=f"{k}_excluir", disabled=not confirmar):
                try:
                    excluir_papel(papel.id)
                except AppError as e:
                    st.error(f"❌ {e.message}")
                    return
                registrar_log(usuario, "delete", "Role", f"Excluiu papel de acesso: {papel.id}",
                              entidade_id=papel.id)
                st.session_state["rbac_msg"] = f"✅ Papel {papel.nome} excluído."
                st.session_state.pop("rbac_papel_escolhido", None)
                st.rerun()


def _vincular_usuario(usuario, papeis, profissionais) -> None:
    nomes_prof = {p.id: p.nome for p in profissionais}
    nomes_papel = {p.id: p.nome for p in papeis}
    col_prof, col_papel = st.columns(2)
    with col_prof:
        prof_id = st.selectbox("Profissional", list(nomes_prof), format_func=lambda i: nomes_prof[i],
                               key="rbac_vinc_prof")
    with col_papel:
        papel_id = st.selectbox("Papel", list(nomes_papel), format_func=lambda i: nomes_papel[i],
                                key="rbac_vinc_papel")
    if st.button("🔗 Vincular", key="rbac_vincular", type="primary", disabled=not (prof_id and papel_id)):
        atribuir_papel(prof_id, papel_id)
        registrar_log(usuario, "update", "UserRole",
                      f"Atribuiu papel {nomes_papel[papel_id]} para o usuário {nomes_prof[prof_id]}",
                      entidade_id=prof_id)
        st.session_state["rbac_msg"] = f"✅ {nomes_prof[prof_id]} agora é {nomes_papel[papel_id]}."
        st.rerun()


def render_autorizacao():
    st.title("🛡️ Controle de Acesso (RBAC)")
    usuario = exigir_permissao("manage", "roles")

    msg = st.session_state.pop("rbac_msg", None)
    if msg:
        st.success(msg)

    papeis = listar_papeis()
    atribuicoes = listar_atribuicoes()
    profissionais = estado.obter(st.session_state, estado.CHAVE_PROFISSIONAIS)

    st.subheader("Papéis e Permissões")
    df = pd.DataFrame([
        {
            "Papel": p.nome,
            "Descrição": p.descricao,
            "Permissões": len(p.permissoes),
            "Usuários": sum(1 for a in atribuicoes if a.papel_id == p.id),
        }
        for p in papeis
    ])
    tabela_tabular(df, empty_message="Nenhum papel cadastrado.")

    with st.expander("✏️ Novo / Editar Papel", expanded=False):
        _editor_papel(usuario, papeis)

    st.subheader("Usuários Vinculados")
    with st.expander("🔗 Vincular Usuário", expanded=False):
        _vincular_usuario(usuario, papeis, profissionais)

    papel_de = {a.usuario_id: a.papel_id for a in atribuicoes}
    nomes_papel = {p.id: p.nome for p in papeis}
    pag = render_paginacao("rbac_usuarios", len(profissionais), 15)
    df_usuarios = pd.DataFrame([
        {
            "Profissional": p.nome,
            "Categoria": rotulo(ROTULOS_PAPEL, p.papel),
            "Perfil de Acesso": nomes_papel.get(papel_de.get(p.id), "Sem perfil de acesso"),
        }
        for p in pag.fatia(profissionais)
    ])
    tabela_tabular(df_usuarios)

    st.markdown("---")
    with st.expander("♻️ Resetar Permissões"):
        st.warning("⚠️ Todos os papéis e vínculos voltam para os valores padrão.")
        confirmar = st.checkbox("Confirmo que desejo resetar as permissões", key="rbac_confirmar_reset")
        if st.button("Resetar", disabled=not confirmar, key="rbac_resetar"):
            restaurar_padroes()
            registrar_log(usuario, "update", "Role", "Resetou papéis e permissões para os valores padrão")
            st.session_state["rbac_msg"] = "✅ Permissões restauradas."
            st.rerun()
