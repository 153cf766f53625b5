# Funções utilitárias (texto, normalização) usadas pelos formulários e buscas
import re
import unicodedata


def _clean_spaces(s: str) -> str:
    s = (s or "").strip()
    s = re.sub(r"\s+", " ", s)
    return s


_PREPS = {"da", "de", "do", "das", "dos", "e"}


def nome_proprio_ptbr(s: str) -> str:
    """Converte 'MARIA DE SOUZA' -> 'Maria de Souza'; mantém preposições em minúsculo."""
    s = _clean_spaces(s)
    if not s:
        return s
    out = []
    for i, p in enumerate(s.split(" ")):
        pl = p.lower()
        if i > 0 and pl in _PREPS:
            out.append(pl)
        elif "-" in pl:
            out.append("-".join(x[:1].upper() + x[1:] for x in pl.split("-")))
        else:
            out.append(pl[:1].upper() + pl[1:])
    return " ".join(out)


def _norm_key(s: str) -> str:
    """Normaliza texto para chave (minúsculo, sem acentos, espaços colapsados)."""
    s = (s or "").strip().lower()
    s = " ".join(s.split())
    s = unicodedata.normalize("NFKD", s)
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    return s


def contem_texto(alvo: str, busca: str) -> bool:
    """Busca sem acento e sem diferenciar maiúsculas ('joao' encontra 'João')."""
    b = _norm_key(busca)
    return not b or b in _norm_key(alvo)
