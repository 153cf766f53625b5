# Camada de serviços: lógica reutilizável (orçamentos, auditoria, permissões, dados iniciais)
from app.services.auditoria import registrar_log, listar_logs, limpar_logs, entidades_registradas
from app.services.autorizacao import (
    inicializar_autorizacao,
    listar_papeis,
    salvar_papel,
    excluir_papel,
    atribuir_papel,
    listar_atribuicoes,
    papel_do_usuario,
    restaurar_padroes,
    tem_permissao,
)
from app.services.orcamentos import (
    RascunhoOrcamento,
    calcular_totais,
    finalizar_rascunho,
    gerar_aditivo,
    orcamentos_do_paciente,
    salvar_orcamento,
)
from app.services.sessao import UsuarioAtual, obter_usuario_atual, usuario_padrao
from app.services.cadastros import (
    adicionar_registro,
    montar_notificacao,
    montar_papel,
    montar_profissional,
    montar_servico,
)

__all__ = [
    "registrar_log",
    "listar_logs",
    "limpar_logs",
    "entidades_registradas",
    "inicializar_autorizacao",
    "listar_papeis",
    "salvar_papel",
    "excluir_papel",
    "atribuir_papel",
    "listar_atribuicoes",
    "papel_do_usuario",
    "restaurar_padroes",
    "tem_permissao",
    "RascunhoOrcamento",
    "calcular_totais",
    "finalizar_rascunho",
    "gerar_aditivo",
    "orcamentos_do_paciente",
    "salvar_orcamento",
    "UsuarioAtual",
    "obter_usuario_atual",
    "usuario_padrao",
    "adicionar_registro",
    "montar_notificacao",
    "montar_papel",
    "montar_profissional",
    "montar_servico",
]
