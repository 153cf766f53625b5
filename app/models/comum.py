# Tipos comuns do sistema de homecare (status, papéis, endereço, profissional)
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

StatusRegistro = Literal["active", "inactive", "vacation", "discharged", "deceased"]
StatusMovimentacao = Literal["completed", "pending", "approved", "rejected", "lost"]
StatusPrescricao = Literal["current", "archived"]
StatusOrcamento = Literal["draft", "approved", "rejected"]

PapelProfissional = Literal["doctor", "nurse", "technician", "physiotherapist", "speechTherapist", "admin"]

CategoriaServico = Literal["procedure", "consultation", "shift", "rental"]


class ModeloBase(BaseModel):
    """Aceita tanto os nomes em português quanto os aliases camelCase dos registros originais."""

    model_config = ConfigDict(populate_by_name=True)


class Endereco(ModeloBase):
    cep: str = Field(..., alias="zipCode")
    rua: str = Field(..., alias="street")
    numero: str = Field(..., alias="number")
    bairro: str = Field(..., alias="neighborhood")
    cidade: str = Field(..., alias="city")
    estado: str = Field(..., alias="state")

    def linha(self) -> str:
        return f"{self.rua}, {self.numero} - {self.bairro}, {self.cidade}/{self.estado} - CEP {self.cep}"


class Contato(ModeloBase):
    nome: str = Field(..., alias="name")
    telefone: str = Field(..., alias="phone")
    relacao: str = Field(..., alias="relation")


class Profissional(ModeloBase):
    id: str
    nome: str = Field(..., alias="name")
    papel: PapelProfissional = Field(..., alias="role")
    numero_conselho: str = Field(..., alias="councilNumber")
    status: StatusRegistro = "active"
    telefone: str = Field("", alias="phone")
    email: str = ""
