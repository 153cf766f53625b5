# app/services/cadastros.py
"""Cadastros administrativos: monta notificações, profissionais, serviços e papéis a partir dos formulários."""
import logging
import math
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional

from pydantic import ValidationError

from app.exceptions import ValidacaoError
from app.models.administrativo import Notificacao, Servico
from app.models.auth import Papel
from app.models.comum import Profissional
from app.services.auditoria import registrar_log
from app.services.estado import proximo_id
from app.services.sessao import UsuarioAtual
from app.utils import _clean_spaces, _norm_key, nome_proprio_ptbr

logger = logging.getLogger(__name__)


def _texto(dados: Mapping[str, Any], campo: str) -> str:
    return _clean_spaces(str(dados.get(campo) or ""))


def _primeiro_erro(e: ValidationError) -> str:
    erro = e.errors()[0]
    campo = ".".join(str(p) for p in erro.get("loc", ()))
    return f"{campo}: {erro.get('msg')}" if campo else erro.get("msg", "dados inválidos")


def montar_notificacao(
    dados: Mapping[str, Any],
    existentes: List[Notificacao],
    agora: Optional[datetime] = None,
) -> Notificacao:
    titulo = _texto(dados, "titulo")
    if not titulo:
        raise ValidacaoError("Informe o título da notificação.")
    try:
        return Notificacao(
            id=proximo_id("not", existentes),
            titulo=titulo,
            mensagem=str(dados.get("mensagem") or "").strip(),
            tipo=dados.get("tipo") or "info",
            categoria=dados.get("categoria") or "system",
            criada_em=agora or datetime.now(),
        )
    except ValidationError as e:
        raise ValidacaoError("Notificação inválida.", _primeiro_erro(e)) from e


def montar_profissional(dados: Mapping[str, Any], existentes: List[Profissional]) -> Profissional:
    nome = nome_proprio_ptbr(_texto(dados, "nome"))
    if not nome:
        raise ValidacaoError("Informe o nome do profissional.")
    try:
        return Profissional(
            id=proximo_id("prof", existentes),
            nome=nome,
            papel=dados.get("papel") or "technician",
            numero_conselho=_texto(dados, "numero_conselho"),
            status=dados.get("status") or "active",
            telefone=_texto(dados, "telefone"),
            email=_texto(dados, "email").lower(),
        )
    except ValidationError as e:
        raise ValidacaoError("Profissional inválido.", _primeiro_erro(e)) from e


def montar_servico(dados: Mapping[str, Any], existentes: List[Servico]) -> Servico:
    """Código e nome obrigatórios; código único (sem diferenciar maiúsculas); preço numérico e >= 0."""
    codigo = _texto(dados, "codigo").upper()
    nome = _texto(dados, "nome")
    if not codigo or not nome:
        raise ValidacaoError("Informe código e nome do serviço.")
    if any(_norm_key(s.codigo) == _norm_key(codigo) for s in existentes):
        raise ValidacaoError(f"Já existe um serviço com o código {codigo}.")
    preco = dados.get("preco_base")
    try:
        preco = 0.0 if preco in (None, "") else float(preco)
    except (TypeError, ValueError):
        preco = math.nan
    if math.isnan(preco) or preco < 0:
        raise ValidacaoError("Preço base inválido.")
    try:
        return Servico(
            id=proximo_id("s", existentes, separador=""),
            codigo=codigo,
            nome=nome,
            categoria=dados.get("categoria") or "procedure",
            preco_base=preco,
            ativo=bool(dados.get("ativo", False)),
        )
    except ValidationError as e:
        raise ValidacaoError("Serviço inválido.", _primeiro_erro(e)) from e


def montar_papel(dados: Mapping[str, Any], existentes: List[Papel], catalogo: List[str]) -> Papel:
    """
    Papel a partir do formulário. Sem `id` nos dados gera um novo (role-<n>);
    permissões fora do catálogo são descartadas.
    """
    nome = _texto(dados, "nome")
    if not nome:
        raise ValidacaoError("Informe o nome do papel.")
    marcadas = set(dados.get("permissoes") or [])
    try:
        return Papel(
            id=dados.get("id") or proximo_id("role", existentes),
            nome=nome,
            descricao=_texto(dados, "descricao"),
            permissoes=[p for p in catalogo if p in marcadas],
        )
    except ValidationError as e:
        raise ValidacaoError("Papel inválido.", _primeiro_erro(e)) from e


def adicionar_registro(
    registros: List,
    novo,
    usuario: UsuarioAtual,
    entidade: str,
    descricao: str,
    registrar: Callable = registrar_log,
) -> List:
    """Nova lista com o registro no topo; grava a criação na auditoria em nome do usuário."""
    registrar(usuario, "create", entidade, descricao, entidade_id=novo.id)
    logger.info("%s %s cadastrado por %s", entidade, novo.id, usuario.id)
    return [novo, *registros]
