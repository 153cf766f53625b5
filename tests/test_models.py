"""
Testes dos modelos Pydantic (orçamento, permissões, aliases).
"""

import pytest
from pydantic import ValidationError

from app.models import (
    Avaliacao,
    CheckInOut,
    EntradaEscala,
    ModeloSemanal,
    Orcamento,
    Papel,
    Permissao,
    Profissional,
)


def _orcamento(**extra):
    dados = {
        "id": "orc-1",
        "paciente_nome": "Maria Silva",
        "tabela_id": "t1",
        "criado_em": "2024-01-10",
    }
    dados.update(extra)
    return dados


class TestOrcamentoVersao:
    """Versão 1 é sempre original; versões seguintes nunca são."""

    def test_original_v1(self):
        orc = Orcamento(**_orcamento(versao=1, tipo="original"))
        assert orc.tipo == "original"
        assert orc.status == "draft"

    def test_rejeita_aditivo_v1(self):
        with pytest.raises(ValidationError) as exc_info:
            Orcamento(**_orcamento(versao=1, tipo="aditivo"))
        assert "apenas a versão 1 é original" in str(exc_info.value)

    def test_rejeita_original_v2(self):
        with pytest.raises(ValidationError):
            Orcamento(**_orcamento(versao=2, tipo="original"))

    def test_rejeita_versao_zero(self):
        with pytest.raises(ValidationError):
            Orcamento(**_orcamento(versao=0, tipo="aditivo"))

    def test_criar_deriva_tipo(self):
        assert Orcamento.criar(versao=1, **_orcamento()).tipo == "original"
        assert Orcamento.criar(versao=3, **_orcamento()).tipo == "aditivo"
        assert Orcamento.criar(versao=2, prorrogacao=True, **_orcamento()).tipo == "prorrogacao"

    def test_prorrogacao_ignorada_na_v1(self):
        assert Orcamento.criar(versao=1, prorrogacao=True, **_orcamento()).tipo == "original"


class TestAliases:
    """Registros no formato camelCase continuam aceitos."""

    def test_orcamento_camel_case(self):
        orc = Orcamento(
            id="orc-9",
            patientName="João",
            tableId="t2",
            version=2,
            type="aditivo",
            createdAt="2024-03-01",
            totalValue=150.0,
            parentId="orc-1",
        )
        assert orc.paciente_nome == "João"
        assert orc.valor_total == 150.0
        assert orc.orcamento_origem_id == "orc-1"

    def test_profissional_camel_case(self):
        prof = Profissional(id="prof-1", name="Ana", role="nurse", councilNumber="COREN-SP 1")
        assert prof.papel == "nurse"
        assert prof.status == "active"


class TestPermissoes:
    """Permissão = entidade:ação."""

    def test_id_consistente(self):
        p = Permissao(id="patients:view", acao="view", entidade="patients")
        assert p.entidade == "patients"

    def test_id_inconsistente(self):
        with pytest.raises(ValidationError):
            Permissao(id="patients:edit", acao="view", entidade="patients")

    def test_acao_invalida(self):
        with pytest.raises(ValidationError):
            Permissao(id="patients:fly", acao="fly", entidade="patients")

    def test_papel_exige_nome(self):
        with pytest.raises(ValidationError):
            Papel(id="role-x", nome="")


class TestEscalaEAvaliacao:
    """Formatos de escala e avaliação aceitos no formato original."""

    def test_entrada_escala_com_check_in(self):
        entrada = EntradaEscala(
            id="esc-1",
            patientId="pac-1",
            patientName="Maria",
            professionalId="prof-3",
            professionalName="Enf. Marcos",
            professionalRole="nurse",
            date="2024-05-01",
            startTime="07:00",
            endTime="19:00",
            shiftType="12h",
            createdAt="2024-04-30T10:00:00",
            createdBy="prof-admin",
            checkIn={
                "id": "ck-1",
                "type": "check_in",
                "scheduleEntryId": "esc-1",
                "professionalId": "prof-3",
                "professionalName": "Enf. Marcos",
                "patientId": "pac-1",
                "patientName": "Maria",
                "timestamp": "2024-05-01T07:02:00",
                "location": {"latitude": -23.55, "longitude": -46.63},
                "registeredBy": "prof-3",
            },
        )
        assert entrada.status == "scheduled"
        assert entrada.check_in.localizacao.latitude == -23.55
        assert entrada.check_out is None

    def test_check_in_out_tipo_invalido(self):
        with pytest.raises(ValidationError):
            CheckInOut(id="ck", type="pausa", scheduleEntryId="e", professionalId="p", professionalName="P",
                       patientId="pac", patientName="Pac", timestamp="2024-05-01T07:00:00", registeredBy="p")

    def test_modelo_semanal_dia_invalido(self):
        with pytest.raises(ValidationError):
            ModeloSemanal(dayOfWeek=7, shiftType="night", startTime="19:00", endTime="07:00")

    def test_avaliacao_nead(self):
        av = Avaliacao(
            id="av-1",
            patientId="pac-1",
            patientName="Maria",
            type="NEAD",
            performedBy="prof-2",
            performedByName="Dr. Juliana",
            performedAt="2024-05-01T09:00:00",
            createdAt="2024-05-01T09:30:00",
            answers=[{"questionCode": "N1", "value": 3}, {"questionCode": "N2", "value": True}],
            score=12,
        )
        assert av.status == "draft"
        assert [r.valor for r in av.respostas] == [3, True]
        assert av.nivel is None
