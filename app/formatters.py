# Formatação no padrão brasileiro (moeda, data, CPF, telefone) e cálculos simples
"""
Funções puras de exibição usadas por tabelas, formulários e páginas.

Nenhuma delas valida tamanho de entrada: CPF/telefone fora do formato esperado
passam adiante sem erro (o texto volta inalterado ou parcialmente formatado).
"""
import re
from datetime import date, datetime
from typing import Optional, Union

VAZIO = "—"

_RE_CPF = re.compile(r"(\d{3})(\d{3})(\d{3})(\d{2})")
_RE_TELEFONE = re.compile(r"(\d{2})(\d{5})(\d{4})")

DataLike = Union[date, datetime, str, None]


def formatar_moeda(valor: float) -> str:
    """
    Formata valor em Real: ponto no milhar, vírgula nos centavos.
    Ex.: formatar_moeda(1500.5) -> 'R$ 1.500,50'
    """
    v = float(valor)
    texto = f"{abs(v):,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    sinal = "-" if v < 0 and texto.strip("0,.") else ""
    return f"{sinal}R$ {texto}"


def _para_datetime(val: DataLike) -> Optional[datetime]:
    if val is None:
        return None
    if isinstance(val, datetime):
        return val
    if isinstance(val, date):
        return datetime(val.year, val.month, val.day)
    s = str(val).strip()
    if not s:
        return None
    # ISO completo (2025-02-01T14:30:00) ou só a data (2025-02-01)
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        return datetime.strptime(s[:10], "%Y-%m-%d")


def formatar_data(val: DataLike) -> str:
    """
    Formata data para dd/mm/aaaa.
    Aceita: date, datetime, str ISO (YYYY-MM-DD...), None. Vazio/None -> '—'.
    Ex.: formatar_data(date(2025, 2, 1)) -> '01/02/2025'
    """
    dt = _para_datetime(val)
    if dt is None:
        return VAZIO
    return dt.strftime("%d/%m/%Y")


def formatar_data_hora(val: DataLike) -> str:
    """Formata data e hora: dd/mm/aaaa HH:MM. Ex.: '01/02/2025 14:30'"""
    dt = _para_datetime(val)
    if dt is None:
        return VAZIO
    return dt.strftime("%d/%m/%Y %H:%M")


def formatar_cpf(cpf: str) -> str:
    """
    Formata CPF: '12345678900' -> '123.456.789-00'.
    Sem validação de tamanho: só a primeira ocorrência de 11 dígitos é formatada.
    """
    return _RE_CPF.sub(r"\1.\2.\3-\4", cpf, count=1)


def formatar_telefone(telefone: str) -> str:
    """Formata celular: '11999998888' -> '(11) 99999-8888'. Mesmas regras do CPF."""
    return _RE_TELEFONE.sub(r"(\1) \2-\3", telefone, count=1)


def para_iso_local(dt: datetime) -> str:
    """Valor para input datetime-local: '2025-02-01T14:30'."""
    return dt.strftime("%Y-%m-%dT%H:%M")


def calcular_idade(nascimento: Union[str, date], hoje: Optional[date] = None) -> int:
    """
    Anos completos desde o nascimento.
    Subtrai 1 se o mês/dia de hoje ainda não chegou ao mês/dia do aniversário.
    """
    nasc = _para_datetime(nascimento).date()
    hoje = hoje or date.today()
    idade = hoje.year - nasc.year
    if (hoje.month, hoje.day) < (nasc.month, nasc.day):
        idade -= 1
    return idade


def calcular_margem(custo: float, venda: float) -> float:
    """Margem percentual sobre o preço de venda; 0 quando venda == 0."""
    if venda == 0:
        return 0
    return ((venda - custo) / venda) * 100
