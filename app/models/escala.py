# Escala de plantões e registros de check-in/check-out georreferenciados
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from app.models.comum import ModeloBase

TipoTurno = Literal["morning", "afternoon", "night", "12h", "24h"]
StatusEscala = Literal["scheduled", "confirmed", "in_progress", "completed", "cancelled", "no_show"]


class GeoLocalizacao(ModeloBase):
    latitude: float
    longitude: float
    endereco: Optional[str] = Field(None, alias="address")


class CheckInOut(ModeloBase):
    id: str
    tipo: Literal["check_in", "check_out"] = Field(..., alias="type")
    entrada_escala_id: str = Field(..., alias="scheduleEntryId")
    profissional_id: str = Field(..., alias="professionalId")
    profissional_nome: str = Field(..., alias="professionalName")
    paciente_id: str = Field(..., alias="patientId")
    paciente_nome: str = Field(..., alias="patientName")
    timestamp: datetime
    localizacao: Optional[GeoLocalizacao] = Field(None, alias="location")
    foto_url: Optional[str] = Field(None, alias="photoUrl")
    notas: Optional[str] = Field(None, alias="notes")
    registrado_por: str = Field(..., alias="registeredBy")


class EntradaEscala(ModeloBase):
    id: str
    paciente_id: str = Field(..., alias="patientId")
    paciente_nome: str = Field(..., alias="patientName")
    profissional_id: str = Field(..., alias="professionalId")
    profissional_nome: str = Field(..., alias="professionalName")
    profissional_papel: str = Field(..., alias="professionalRole")
    data: str = Field(..., alias="date")  # YYYY-MM-DD
    hora_inicio: str = Field(..., alias="startTime")  # HH:mm
    hora_fim: str = Field(..., alias="endTime")
    turno: TipoTurno = Field(..., alias="shiftType")
    status: StatusEscala = "scheduled"
    notas: Optional[str] = Field(None, alias="notes")
    check_in: Optional[CheckInOut] = Field(None, alias="checkIn")
    check_out: Optional[CheckInOut] = Field(None, alias="checkOut")
    criado_em: datetime = Field(..., alias="createdAt")
    criado_por: str = Field(..., alias="createdBy")
    atualizado_em: Optional[datetime] = Field(None, alias="updatedAt")


class ModeloSemanal(ModeloBase):
    dia_semana: int = Field(..., ge=0, le=6, alias="dayOfWeek")  # 0 = domingo
    turno: TipoTurno = Field(..., alias="shiftType")
    hora_inicio: str = Field(..., alias="startTime")
    hora_fim: str = Field(..., alias="endTime")
    profissional_preferido_id: Optional[str] = Field(None, alias="preferredProfessionalId")


class ConfigEscalaPaciente(ModeloBase):
    paciente_id: str = Field(..., alias="patientId")
    duracao_turno_horas: int = Field(..., alias="defaultShiftDuration")
    papeis_necessarios: List[str] = Field(default_factory=list, alias="requiredRoles")
    modelo_semanal: List[ModeloSemanal] = Field(default_factory=list, alias="weeklyTemplate")
