# Rótulos em português para a interface; valores internos ficam em inglês
from app.models.comum import PapelProfissional, StatusMovimentacao, StatusRegistro

_STATUS_PT_EN = {
    "ativo": "active",
    "inativo": "inactive",
    "ferias": "vacation",
    "alta": "discharged",
    "obito": "deceased",
}
_STATUS_EN_PT = {v: k for k, v in _STATUS_PT_EN.items()}

_PAPEL_PT_EN = {
    "medico": "doctor",
    "enfermeiro": "nurse",
    "tecnico": "technician",
    "fisio": "physiotherapist",
    "fono": "speechTherapist",
    "admin": "admin",
}
_PAPEL_EN_PT = {v: k for k, v in _PAPEL_PT_EN.items()}

_MOVIMENTACAO_PT_EN = {
    "concluido": "completed",
    "pendente": "pending",
    "aprovado": "approved",
    "rejeitado": "rejected",
    "extraviado": "lost",
}


def traduzir_status(status_pt: str) -> StatusRegistro:
    return _STATUS_PT_EN.get(status_pt, "active")


def traduzir_status_para_portugues(status_en: str) -> str:
    return _STATUS_EN_PT.get(status_en, "ativo")


def traduzir_papel(papel_pt: str) -> PapelProfissional:
    return _PAPEL_PT_EN.get(papel_pt, "admin")


def traduzir_papel_para_portugues(papel_en: str) -> str:
    return _PAPEL_EN_PT.get(papel_en, "admin")


def traduzir_status_movimentacao(status_pt: str) -> StatusMovimentacao:
    return _MOVIMENTACAO_PT_EN.get(status_pt, "pending")


# ---- Rótulos de exibição ----

ROTULOS_STATUS = {
    "active": "Ativo",
    "inactive": "Inativo",
    "vacation": "Férias",
    "discharged": "Alta",
    "deceased": "Óbito",
}

ROTULOS_PAPEL = {
    "doctor": "Médico",
    "nurse": "Enfermeiro",
    "technician": "Técnico",
    "physiotherapist": "Fisioterapeuta",
    "speechTherapist": "Fonoaudiólogo",
    "admin": "Admin",
}

ROTULOS_STATUS_MOVIMENTACAO = {
    "completed": "Concluído",
    "pending": "Pendente",
    "approved": "Aprovado",
    "rejected": "Rejeitado",
    "lost": "Extraviado",
}

ROTULOS_STATUS_ORCAMENTO = {
    "draft": "Rascunho",
    "approved": "Aprovado",
    "rejected": "Rejeitado",
}

ROTULOS_TURNO = {
    "morning": "Manhã",
    "afternoon": "Tarde",
    "night": "Noite",
    "12h": "Plantão 12h",
    "24h": "Plantão 24h",
}

ROTULOS_STATUS_ESCALA = {
    "scheduled": "Agendado",
    "confirmed": "Confirmado",
    "in_progress": "Em Andamento",
    "completed": "Concluído",
    "cancelled": "Cancelado",
    "no_show": "Não Compareceu",
}

ROTULOS_TIPO_NOTIFICACAO = {
    "info": "Informação",
    "success": "Sucesso",
    "warning": "Aviso",
    "error": "Erro",
}

ROTULOS_CATEGORIA_NOTIFICACAO = {
    "system": "Sistema",
    "clinical": "Clínico",
    "financial": "Financeiro",
    "stock": "Estoque",
}

ROTULOS_CATEGORIA_SERVICO = {
    "procedure": "Procedimento",
    "consultation": "Consulta",
    "shift": "Plantão (Hora)",
    "rental": "Locação Equipamento",
}

ROTULOS_ACAO_LOG = {
    "create": "Criação",
    "update": "Atualização",
    "delete": "Exclusão",
    "archive": "Arquivamento",
    "approve": "Aprovação",
    "reject": "Rejeição",
    "login": "Login",
}

ROTULOS_ENTIDADE_PERMISSAO = {
    "patients": "Pacientes",
    "professionals": "Profissionais",
    "evolutions": "Evoluções",
    "prescriptions": "Prescrições",
    "stock": "Estoque",
    "finances": "Financeiro",
    "logs": "Logs",
    "services": "Serviços",
    "roles": "Papéis e Acessos",
}

ROTULOS_ACAO_PERMISSAO = {
    "view": "Visualizar",
    "create": "Criar",
    "edit": "Editar",
    "delete": "Excluir",
    "manage": "Gerenciar (tudo)",
}

ROTULOS_TIPO_TABELA = {
    "particular": "Particular",
    "convenio": "Convênio",
}


def rotulo(mapa: dict, valor) -> str:
    """Rótulo de exibição; valores desconhecidos aparecem como estão."""
    return mapa.get(valor, str(valor))
