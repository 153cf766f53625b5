# Controle de acesso: permissões (ação × entidade), papéis e atribuições
from typing import List, Literal

from pydantic import Field, model_validator

from app.models.comum import ModeloBase

AcaoPermissao = Literal["view", "create", "edit", "delete", "manage"]
EntidadePermissao = Literal[
    "patients", "professionals", "services", "evolutions", "prescriptions",
    "finances", "stock", "logs", "roles",
]


class Permissao(ModeloBase):
    id: str
    acao: AcaoPermissao = Field(..., alias="action")
    entidade: EntidadePermissao = Field(..., alias="entity")

    @model_validator(mode="after")
    def validar_id(self):
        esperado = f"{self.entidade}:{self.acao}"
        if self.id != esperado:
            raise ValueError(f'ID da permissão deve ser "{esperado}"')
        return self


class Papel(ModeloBase):
    id: str
    nome: str = Field(..., min_length=1, alias="name")
    descricao: str = Field("", alias="description")
    permissoes: List[str] = Field(default_factory=list, alias="permissions")  # IDs


class AtribuicaoPapel(ModeloBase):
    usuario_id: str = Field(..., alias="userId")
    papel_id: str = Field(..., alias="roleId")
