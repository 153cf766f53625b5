# Modelos de domínio (pydantic) do sistema de homecare
from app.models.comum import (
    CategoriaServico,
    Contato,
    Endereco,
    PapelProfissional,
    Profissional,
    StatusOrcamento,
    StatusRegistro,
)
from app.models.administrativo import Notificacao, Paciente, Servico
from app.models.financeiro import (
    ItemOrcamento,
    ItemTabelaPreco,
    Orcamento,
    TabelaPreco,
    TipoOrcamento,
)
from app.models.avaliacoes import Avaliacao, CriterioABEMID, QuestaoNEAD, RespostaAvaliacao
from app.models.escala import CheckInOut, ConfigEscalaPaciente, EntradaEscala, GeoLocalizacao, ModeloSemanal
from app.models.auth import AtribuicaoPapel, Papel, Permissao
from app.models.logs import AcaoLog, RegistroLog

__all__ = [
    "CategoriaServico",
    "Contato",
    "Endereco",
    "PapelProfissional",
    "Profissional",
    "StatusOrcamento",
    "StatusRegistro",
    "Notificacao",
    "Paciente",
    "Servico",
    "ItemOrcamento",
    "ItemTabelaPreco",
    "Orcamento",
    "TabelaPreco",
    "TipoOrcamento",
    "Avaliacao",
    "CriterioABEMID",
    "QuestaoNEAD",
    "RespostaAvaliacao",
    "CheckInOut",
    "ConfigEscalaPaciente",
    "EntradaEscala",
    "GeoLocalizacao",
    "ModeloSemanal",
    "AtribuicaoPapel",
    "Papel",
    "Permissao",
    "AcaoLog",
    "RegistroLog",
]
