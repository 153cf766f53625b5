# Registro da trilha de auditoria
from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import Field

from app.models.comum import ModeloBase, PapelProfissional

AcaoLog = Literal["create", "update", "delete", "archive", "approve", "reject", "login"]


class RegistroLog(ModeloBase):
    id: str
    timestamp: datetime
    usuario_id: str = Field(..., alias="userId")
    usuario_nome: str = Field(..., alias="userName")
    usuario_papel: PapelProfissional = Field(..., alias="userRole")
    acao: AcaoLog = Field(..., alias="action")
    entidade: str = Field(..., alias="entity")  # ex.: 'Budget', 'Patient'
    entidade_id: Optional[str] = Field(None, alias="entityId")
    descricao: str = Field(..., alias="description")
    metadados: Optional[Dict[str, Any]] = Field(None, alias="metadata")
