# Configuração central: versão, caminhos, CSS, logging
import logging
import os
from pathlib import Path

VERSAO_DEPLOY = "2026-10-19"

_ROOT = Path(__file__).resolve().parent.parent

# Banco: pasta do projeto (data/homecare.db) ou variável de ambiente
if os.environ.get("HOMECARE_DB_PATH"):
    DB_PATH = Path(os.environ["HOMECARE_DB_PATH"])
else:
    DB_PATH = _ROOT / "data" / "homecare.db"

LOG_LEVEL = os.environ.get("HOMECARE_LOG_LEVEL", "INFO").upper()

# Paginação: BudgetList usa 15 por página; o seletor oferece as opções abaixo
ITENS_POR_PAGINA_ORCAMENTOS = 15
ITENS_POR_PAGINA_PADRAO = 10
OPCOES_ITENS_POR_PAGINA = [10, 25, 50, 100]


# Logging: nível configurável para módulos app.*; saída em stderr (logs do Streamlit Cloud)
def _setup_app_logging():
    log = logging.getLogger("app")
    if not log.handlers:
        log.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s [%(name)s] %(levelname)s: %(message)s"))
        log.addHandler(h)
        log.propagate = False  # evita duplicar no root
_setup_app_logging()


CSS_GLOBAL = """
<style>
    :root {
        --hc-primary: #059669;
        --hc-primary-dark: #065f46;
        --hc-bg: #f8fafc;
        --hc-surface: #ffffff;
        --hc-border: #e2e8f0;
        --hc-text: #1e293b;
        --hc-muted: #64748b;
    }

    #MainMenu, footer {visibility: hidden;}
    .block-container {padding-top: 1.25rem; padding-bottom: 2rem; max-width: 1400px;}
    .stApp { background: var(--hc-bg); color: var(--hc-text); }

    h1 { font-size: 1.8rem !important; font-weight: 700 !important; color: var(--hc-text) !important; }
    h2 { font-size: 1.3rem !important; font-weight: 650 !important; }
    h3 { font-size: 1.05rem !important; font-weight: 600 !important; color: #334155 !important; }

    [data-testid="stSidebar"] { background: #0f172a; }
    [data-testid="stSidebar"] * { color: #f1f5f9; }

    [data-testid="stMetric"] {
        background: var(--hc-surface);
        border: 1px solid var(--hc-border);
        border-radius: 12px;
        padding: 1rem 1.1rem;
        box-shadow: 0 1px 2px rgba(15, 23, 42, 0.06);
    }

    .hc-card {
        background: var(--hc-surface);
        border: 2px solid var(--hc-border);
        border-radius: 12px;
        padding: 1.1rem 1.2rem;
        margin-bottom: 1rem;
        min-height: 150px;
    }
    .hc-card h4 { margin: 0 0 .4rem 0; color: var(--hc-text); }
    .hc-card p { color: var(--hc-muted); font-size: .9rem; }

    .hc-versao {
        padding: 2px 8px;
        border-radius: 6px;
        font-size: .75rem;
        font-weight: 700;
        text-transform: uppercase;
    }

    .stButton > button { border-radius: 10px; font-weight: 600; }
    .stButton > button[kind="primary"] { background: var(--hc-primary); border: 0; color: #fff; }

    [data-testid="stTabs"] [data-baseweb="tab"] {
        border-radius: 10px 10px 0 0;
        background: #f1f5f9;
        padding-left: .9rem;
        padding-right: .9rem;
    }
    [data-testid="stTabs"] [aria-selected="true"] {
        background: #ffffff;
        color: var(--hc-primary);
        font-weight: 600;
    }
</style>
"""
