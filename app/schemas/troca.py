# app/schemas/troca.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.common import blank_to_none

STATUS_MAX_LENGTH = 50
STATUS_PADRAO = "pendente"


class TrocaCreate(BaseModel):
    empresa_solicitante: Optional[str] = None
    empresa_receptora: Optional[str] = None
    categoria_solicitante: Optional[str] = None
    categoria_receptora: Optional[str] = None

    data: Optional[datetime] = None
    status: Optional[str] = None
    observacoes: Optional[str] = None

    @field_validator("data", mode="before")
    @classmethod
    def data_blank(cls, value):
        return blank_to_none(value)


class TrocaStatusUpdate(BaseModel):
    """Só o status é editável. Os demais campos do corpo são ignorados."""

    status: Optional[str] = None


class TrocaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    troca_id: int
    empresa_solicitante: str
    empresa_receptora: str
    data: datetime
    status: str
    observacoes: Optional[str] = None
    categoria_solicitante: str
    categoria_receptora: str


class MensagemOut(BaseModel):
    message: str
