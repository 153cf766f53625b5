# Tabelas de preço e orçamentos (PAD) com versionamento original/aditivo
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from app.models.comum import ModeloBase, StatusOrcamento

TipoTabelaPreco = Literal["convenio", "particular"]
TipoOrcamento = Literal["original", "aditivo", "prorrogacao"]


class ItemTabelaPreco(ModeloBase):
    servico_id: str = Field(..., alias="serviceId")
    preco_custo: float = Field(..., alias="costPrice")
    preco_venda: float = Field(..., alias="sellPrice")


class TabelaPreco(ModeloBase):
    id: str
    nome: str = Field(..., alias="name")
    tipo: TipoTabelaPreco = Field("particular", alias="type")
    itens: List[ItemTabelaPreco] = Field(default_factory=list, alias="items")

    def item_do_servico(self, servico_id: str) -> Optional[ItemTabelaPreco]:
        return next((i for i in self.itens if i.servico_id == servico_id), None)


class ItemOrcamento(ModeloBase):
    id: str
    servico_id: str = Field(..., alias="serviceId")
    quantidade: int = Field(..., alias="quantity")
    preco_unitario: float = Field(..., alias="unitPrice")
    total: float


class Orcamento(ModeloBase):
    """
    Orçamento assistencial (PAD).

    A versão cresce dentro da cadeia de orçamentos do mesmo paciente:
    a versão 1 é sempre o 'original'; versões seguintes são 'aditivo' ou
    'prorrogacao' e partem dos itens da versão anterior.
    """

    id: str
    paciente_id: Optional[str] = Field(None, alias="patientId")
    paciente_nome: str = Field(..., alias="patientName")
    tabela_id: str = Field(..., alias="tableId")
    versao: int = Field(1, ge=1, alias="version")
    tipo: TipoOrcamento = Field("original", alias="type")
    status: StatusOrcamento = "draft"
    criado_em: str = Field(..., alias="createdAt")  # YYYY-MM-DD
    valido_ate: Optional[str] = Field(None, alias="validUntil")
    itens: List[ItemOrcamento] = Field(default_factory=list, alias="items")
    valor_total: float = Field(0.0, alias="totalValue")
    custo_total: float = Field(0.0, alias="totalCost")
    observacoes: Optional[str] = Field(None, alias="notes")
    orcamento_origem_id: Optional[str] = Field(None, alias="parentId")

    @model_validator(mode="after")
    def validar_versao_tipo(self):
        """tipo == 'original' se e somente se versao == 1."""
        if (self.tipo == "original") != (self.versao == 1):
            raise ValueError(
                f"Versão {self.versao} incompatível com tipo '{self.tipo}': "
                "apenas a versão 1 é original"
            )
        return self

    @classmethod
    def criar(cls, *, versao: int = 1, prorrogacao: bool = False, **dados) -> "Orcamento":
        """Monta o orçamento derivando o tipo a partir da versão."""
        if versao == 1:
            tipo = "original"
        else:
            tipo = "prorrogacao" if prorrogacao else "aditivo"
        return cls(versao=versao, tipo=tipo, **dados)
