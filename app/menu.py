# Registro central do menu principal: facilita adicionar/remover/reordenar páginas
# Cada item: (rótulo na sidebar, módulo Python, nome da função de render)

MENU_ITEMS = [
    ("🏠 Início", "app.pages.inicio", "render_inicio"),
    ("💰 Financeiro", "app.pages.financeiro", "render_financeiro"),
    ("💲 Tabelas", "app.pages.tabelas", "render_tabelas"),
    ("🏢 Cadastros", "app.pages.cadastros", "render_cadastros"),
    ("🧑‍⚕️ Paciente", "app.pages.paciente_detalhe", "render_paciente_detalhe"),
    ("👤 Profissional", "app.pages.profissional_detalhe", "render_profissional_detalhe"),
    ("🛡️ Controle de Acesso", "app.pages.autorizacao", "render_autorizacao"),
    ("📜 Logs do Sistema", "app.pages.logs", "render_logs"),
]


def get_menu_labels():
    """Lista de rótulos na ordem do menu (para st.sidebar.radio)."""
    return [item[0] for item in MENU_ITEMS]


def item_do_menu(label):
    """(módulo, função) do rótulo escolhido; None se o rótulo não existe."""
    for rotulo, module_path, function_name in MENU_ITEMS:
        if rotulo == label:
            return module_path, function_name
    return None
