# app/services/dados_iniciais.py
"""Dados de demonstração determinísticos: pacientes, profissionais, serviços, tabelas, orçamentos."""
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

from app.models.administrativo import Notificacao, Paciente, Servico
from app.models.comum import Contato, Endereco, Profissional
from app.models.financeiro import ItemOrcamento, ItemTabelaPreco, Orcamento, TabelaPreco

# ---- Pacientes ----

_NOMES = ["Maria", "João", "Ana", "Pedro", "Francisca", "José", "Antônia", "Carlos", "Paulo", "Luzia",
          "Rita", "Fernando", "Sebastiana", "Manoel", "Conceição"]
_SOBRENOMES = ["Silva", "Santos", "Souza", "Oliveira", "Costa", "Pereira", "Rodrigues", "Almeida",
               "Nascimento", "Lima", "Araújo", "Fernandes", "Carvalho", "Gomes", "Martins"]
_RUAS = ["Rua das Flores", "Av. Brasil", "Rua Sete de Setembro", "Av. Paulista", "Rua do Comércio",
         "Av. Central", "Rua São João", "Av. Independência", "Rua XV de Novembro", "Av. Getúlio Vargas"]
_BAIRROS = ["Centro", "Jardim Paulista", "Vila Mariana", "Mooca", "Tatuapé", "Santana", "Ipiranga",
            "Lapa", "Pinheiros", "Butantã"]
_DIAGNOSTICOS = [
    "I64 - Acidente Vascular Cerebral",
    "J44 - DPOC",
    "I50 - Insuficiência Cardíaca",
    "E11 - Diabetes Mellitus Tipo 2",
    "N18 - Doença Renal Crônica",
    "G20 - Doença de Parkinson",
    "F03 - Demência não especificada",
    "M81 - Osteoporose",
    "I10 - Hipertensão Arterial",
    "C34 - Neoplasia de Pulmão",
]
_STATUS_PACIENTE = ["active", "active", "active", "discharged", "inactive"]
_RELACOES = ["Filho", "Filha", "Esposo", "Esposa", "Irmão", "Irmã"]


def _telefone(i: int) -> str:
    n = str(i % 9000 + 1000).zfill(4)
    return f"119{n}{n}"


def gerar_pacientes(quantidade: int = 150) -> List[Paciente]:
    pacientes = []
    for i in range(quantidade):
        nome = _NOMES[i % len(_NOMES)]
        meio = f" de {_SOBRENOMES[(i + 5) % len(_SOBRENOMES)]}" if i % 3 == 0 else ""
        segundo = f" {_SOBRENOMES[(i + 7) % len(_SOBRENOMES)]}" if i % 2 == 0 else ""
        contatos = []
        if i % 3 == 0:
            contatos.append(Contato(
                nome=f"{_NOMES[(i + 3) % len(_NOMES)]} {_SOBRENOMES[(i + 2) % len(_SOBRENOMES)]}",
                telefone=_telefone(i),
                relacao=_RELACOES[i % len(_RELACOES)],
            ))
        if i % 4 == 0:
            alergias = ["Dipirona"]
        elif i % 5 == 0:
            alergias = ["Penicilina", "AAS"]
        else:
            alergias = []
        pacientes.append(Paciente(
            id=f"pac-{i + 1}",
            nome=f"{nome}{meio} {_SOBRENOMES[i % len(_SOBRENOMES)]}{segundo}",
            cpf=str(123456789 + i).zfill(9) + str(i % 100).zfill(2),
            nascimento=f"{1930 + i % 60}-{i % 12 + 1:02d}-{i % 28 + 1:02d}",
            diagnostico=_DIAGNOSTICOS[i % len(_DIAGNOSTICOS)],
            status=_STATUS_PACIENTE[i % len(_STATUS_PACIENTE)],
            endereco=Endereco(
                cep=f"{i % 90 + 10:02d}{i % 900 + 100:03d}-{i % 900 + 100:03d}",
                rua=_RUAS[i % len(_RUAS)],
                numero=str(i % 999 + 1),
                bairro=_BAIRROS[i % len(_BAIRROS)],
                cidade="São Paulo",
                estado="SP",
            ),
            contatos=contatos,
            alergias=alergias,
        ))
    return pacientes


# ---- Profissionais ----

_NOMES_PROF = ["Roberto", "Juliana", "Marcos", "Ana", "Carlos", "Patricia", "Fernando", "Mariana",
               "Ricardo", "Camila", "André", "Beatriz", "Rafael", "Lucia", "Paulo"]
_SOBRENOMES_PROF = ["Santos", "Costa", "Oliveira", "Silva", "Ferreira", "Rodrigues", "Almeida", "Martins",
                    "Pereira", "Lima", "Carvalho", "Souza", "Ribeiro", "Mendes", "Barros"]
_PAPEIS = ["doctor", "doctor", "nurse", "nurse", "nurse", "technician", "technician", "technician",
           "physiotherapist", "speechTherapist", "admin"]
_CONSELHOS = {
    "doctor": "CRM-SP",
    "nurse": "COREN-SP",
    "technician": "COREN-SP",
    "physiotherapist": "CREFITO-SP",
    "speechTherapist": "CREFONO-SP",
    "admin": "N/A",
}
_TITULOS = {"doctor": "Dr.", "nurse": "Enf.", "technician": "Tec.", "physiotherapist": "Fisio.",
            "speechTherapist": "Fono.", "admin": ""}
_DOMINIO_EMAIL = {"doctor": "medico", "admin": "sistema"}
_STATUS_PROF = ["active", "active", "active", "active", "vacation", "inactive"]


def gerar_profissionais(quantidade: int = 80) -> List[Profissional]:
    profissionais = []
    for i in range(quantidade):
        nome = _NOMES_PROF[i % len(_NOMES_PROF)]
        sobrenome = _SOBRENOMES_PROF[i % len(_SOBRENOMES_PROF)]
        papel = _PAPEIS[i % len(_PAPEIS)]
        conselho = _CONSELHOS[papel]
        profissionais.append(Profissional(
            id=f"prof-{i + 1}",
            nome=f"{_TITULOS[papel]} {nome} {sobrenome}".strip(),
            papel=papel,
            numero_conselho=f"{conselho} {i % 899999 + 100000}" if conselho != "N/A" else "N/A",
            status=_STATUS_PROF[i % len(_STATUS_PROF)],
            telefone=_telefone(i),
            email=f"{nome.lower()}.{sobrenome.lower()}@{_DOMINIO_EMAIL.get(papel, papel)}.com",
        ))
    # Posição 0 é sempre o administrador (usuário padrão da sessão)
    profissionais[0] = Profissional(
        id="prof-admin",
        nome="Administrador do Sistema",
        papel="admin",
        numero_conselho="N/A",
        status="active",
        telefone="11933333333",
        email="admin@sistema.com",
    )
    return profissionais


# ---- Serviços ----

_SERVICOS_POR_CATEGORIA = {
    "consultation": ["Visita Médica", "Consulta Enfermagem", "Avaliação Nutricional", "Consulta Psicológica",
                     "Avaliação Social"],
    "procedure": ["Curativo Simples", "Curativo Grande Porte", "Aplicação IM/SC", "Coleta de Sangue",
                  "Sondagem Vesical", "Aspiração VAS", "Nebulização", "Troca de Sonda", "Banho no Leito"],
    "shift": ["Plantão Enfermagem 12h", "Plantão Enfermagem 24h", "Plantão Técnico 12h", "Plantão Técnico 24h",
              "Plantão Cuidador 12h", "Plantão Cuidador 24h"],
    "rental": ["Locação Cama Hospitalar", "Locação Concentrador O2", "Locação Aspirador Portátil",
               "Locação Bomba de Infusão", "Locação Monitor Multiparâmetros"],
}


def _preco_base(categoria: str, idx: int) -> float:
    if categoria == "consultation":
        return 200 + idx * 50
    if categoria == "procedure":
        return 80 + idx * 20
    if categoria == "shift":
        return 300 + idx * 100
    return 400 + idx * 150


def gerar_servicos() -> List[Servico]:
    servicos = []
    contador = 1
    for n_cat, (categoria, nomes) in enumerate(_SERVICOS_POR_CATEGORIA.items()):
        for idx, nome in enumerate(nomes):
            servicos.append(Servico(
                id=f"s{contador}",
                codigo=f"{categoria[:3].upper()}{contador:02d}",
                nome=nome,
                categoria=categoria,
                preco_base=_preco_base(categoria, idx),
                # último serviço de cada categoria fica inativo nas categorias ímpares
                ativo=idx < len(nomes) - 1 or n_cat % 2 == 0,
            ))
            contador += 1
    return servicos


# ---- Tabelas de preço ----

_CONVENIOS = ["UNIMED", "Bradesco Saúde", "SulAmérica", "Amil", "Porto Seguro", "Notre Dame",
              "Prevent Senior", "Golden Cross"]


def gerar_tabelas_preco(servicos: Optional[List[Servico]] = None) -> List[TabelaPreco]:
    ativos = [s for s in (servicos or gerar_servicos()) if s.ativo]
    tabelas = [TabelaPreco(
        id="t1",
        nome="Tabela Particular 2024",
        tipo="particular",
        itens=[ItemTabelaPreco(servico_id=s.id, preco_custo=s.preco_base * 0.4, preco_venda=s.preco_base)
               for s in ativos[:20]],
    )]
    for i, convenio in enumerate(_CONVENIOS):
        tabelas.append(TabelaPreco(
            id=f"t{i + 2}",
            nome=f"Convênio {convenio}",
            tipo="convenio",
            itens=[ItemTabelaPreco(servico_id=s.id, preco_custo=s.preco_base * 0.4,
                                   preco_venda=s.preco_base * (0.75 + i * 0.05))
                   for s in ativos[:15]],
        ))
    return tabelas


# ---- Orçamentos ----

_STATUS_ORCAMENTO = ["approved", "approved", "approved", "draft", "rejected"]


def _item(ref: ItemTabelaPreco, item_id: str, quantidade: int) -> ItemOrcamento:
    return ItemOrcamento(
        id=item_id,
        servico_id=ref.servico_id,
        quantidade=quantidade,
        preco_unitario=ref.preco_venda,
        total=quantidade * ref.preco_venda,
    )


def gerar_orcamentos(
    pacientes: List[Paciente],
    tabelas: List[TabelaPreco],
    quantidade: int = 100,
    hoje: Optional[date] = None,
) -> List[Orcamento]:
    """
    Orçamentos de exemplo, do mais recente ao mais antigo (um a cada dois dias).

    Cada paciente tem sua cadeia: a v1 (original) é a mais antiga e cada versão
    seguinte clona os itens da anterior. Aditivos acrescentam um serviço;
    prorrogações repetem os itens.
    """
    hoje = hoje or date.today()
    n_pacientes = min(40, len(pacientes))
    ultimo: Dict[str, Orcamento] = {}
    criados = []
    for c in range(quantidade):
        paciente = pacientes[c % n_pacientes]
        anterior = ultimo.get(paciente.id)
        # c = 0 é o mais antigo; o id menor fica com o mais recente
        orc_id = f"orc-{1000 + quantidade - 1 - c}"
        criado_em = (hoje - timedelta(days=(quantidade - 1 - c) * 2)).isoformat()

        if anterior is None:
            tabela = tabelas[c % len(tabelas)]
            itens = [
                _item(tabela.itens[(c + j) % len(tabela.itens)], f"l-{c}-{j}", 30)
                for j in range(2 + c % 4)
            ]
            versao, prorrogacao = 1, False
        else:
            tabela = next(t for t in tabelas if t.id == anterior.tabela_id)
            versao = anterior.versao + 1
            prorrogacao = (c // n_pacientes + c) % 2 == 0
            itens = [i.model_copy(update={"id": f"l-{c}-{j}"}) for j, i in enumerate(anterior.itens)]
            if not prorrogacao:
                usados = {it.servico_id for it in itens}
                ref = next((r for r in tabela.itens if r.servico_id not in usados), None)
                if ref is not None:
                    itens.append(_item(ref, f"l-{c}-{len(itens)}", 5))

        custo = sum(it.quantidade * tabela.item_do_servico(it.servico_id).preco_custo for it in itens)
        orcamento = Orcamento.criar(
            versao=versao,
            prorrogacao=prorrogacao,
            id=orc_id,
            paciente_id=paciente.id,
            paciente_nome=paciente.nome,
            tabela_id=tabela.id,
            status=_STATUS_ORCAMENTO[c % len(_STATUS_ORCAMENTO)],
            criado_em=criado_em,
            itens=itens,
            valor_total=sum(it.total for it in itens),
            custo_total=custo,
            orcamento_origem_id=anterior.id if anterior else None,
        )
        ultimo[paciente.id] = orcamento
        criados.append(orcamento)
    return list(reversed(criados))


# ---- Notificações ----

def gerar_notificacoes(agora: Optional[datetime] = None) -> List[Notificacao]:
    agora = agora or datetime.now()
    base = [
        ("Estoque baixo de curativos", "Curativo Grande Porte abaixo do estoque mínimo.", "warning", "stock"),
        ("Orçamento aprovado", "PAD orc-1000 aprovado pelo convênio.", "success", "financial"),
        ("Nova evolução registrada", "Evolução de rotina adicionada ao prontuário.", "info", "clinical"),
        ("Falha na sincronização", "Não foi possível sincronizar a escala da semana.", "error", "system"),
        ("Manutenção programada", "O sistema ficará indisponível domingo às 02:00.", "info", "system"),
    ]
    return [
        Notificacao(
            id=f"not-{i + 1}",
            titulo=titulo,
            mensagem=mensagem,
            tipo=tipo,
            categoria=categoria,
            lida=i >= 3,
            criada_em=agora - timedelta(hours=i * 6),
        )
        for i, (titulo, mensagem, tipo, categoria) in enumerate(base)
    ]
