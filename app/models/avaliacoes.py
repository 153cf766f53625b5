# Avaliações de elegibilidade para homecare (ABEMID e NEAD)
from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import Field

from app.models.comum import ModeloBase

TipoAvaliacao = Literal["ABEMID", "NEAD"]
StatusAvaliacao = Literal["draft", "completed"]
NivelABEMID = Literal["AD1", "AD2", "AD3"]


class CriterioABEMID(ModeloBase):
    codigo: str = Field(..., alias="code")
    descricao: str = Field(..., alias="description")
    nivel: NivelABEMID = Field(..., alias="level")
    categoria: str = Field(..., alias="category")


class QuestaoNEAD(ModeloBase):
    codigo: str = Field(..., alias="code")
    dominio: str = Field(..., alias="domain")
    descricao: str = Field(..., alias="description")
    pontuacao_maxima: int = Field(..., alias="maxScore")


class RespostaAvaliacao(ModeloBase):
    codigo_questao: str = Field(..., alias="questionCode")
    valor: Union[bool, int, float, str] = Field(..., alias="value")
    notas: Optional[str] = Field(None, alias="notes")


class Avaliacao(ModeloBase):
    id: str
    paciente_id: str = Field(..., alias="patientId")
    paciente_nome: str = Field(..., alias="patientName")
    tipo: TipoAvaliacao = Field(..., alias="type")
    realizada_por: str = Field(..., alias="performedBy")
    realizada_por_nome: str = Field(..., alias="performedByName")
    realizada_em: datetime = Field(..., alias="performedAt")
    criada_em: datetime = Field(..., alias="createdAt")
    atualizada_em: Optional[datetime] = Field(None, alias="updatedAt")
    respostas: List[RespostaAvaliacao] = Field(default_factory=list, alias="answers")
    # NEAD: pontuação total; ABEMID: nível determinado
    pontuacao: Optional[int] = Field(None, alias="score")
    nivel: Optional[NivelABEMID] = Field(None, alias="level")
    notas: Optional[str] = Field(None, alias="notes")
    status: StatusAvaliacao = "draft"
