# Cadastros administrativos: pacientes, serviços e notificações
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.models.comum import CategoriaServico, Contato, Endereco, ModeloBase, StatusRegistro

TipoNotificacao = Literal["info", "success", "warning", "error"]
CategoriaNotificacao = Literal["system", "clinical", "financial", "stock"]


class Paciente(ModeloBase):
    id: str
    nome: str = Field(..., alias="name")
    cpf: str
    nascimento: str = Field(..., alias="birthDate")  # YYYY-MM-DD
    diagnostico: str = Field(..., alias="diagnosis")
    status: StatusRegistro = "active"
    endereco: Endereco = Field(..., alias="address")
    contatos: List[Contato] = Field(default_factory=list, alias="contacts")
    alergias: List[str] = Field(default_factory=list, alias="allergies")


class Servico(ModeloBase):
    id: str
    codigo: str = Field(..., alias="code")
    nome: str = Field(..., alias="name")
    categoria: CategoriaServico = Field(..., alias="category")
    preco_base: float = Field(..., alias="basePrice")
    ativo: bool = Field(True, alias="active")


class Notificacao(ModeloBase):
    id: str
    titulo: str = Field(..., alias="title")
    mensagem: str = Field("", alias="message")
    tipo: TipoNotificacao = Field("info", alias="type")
    categoria: CategoriaNotificacao = Field("system", alias="category")
    lida: bool = Field(False, alias="read")
    criada_em: datetime = Field(default_factory=datetime.now, alias="createdAt")
    link: Optional[str] = None
