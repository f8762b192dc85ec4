# app/schemas/comunicacao.py

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.schemas.common import blank_to_none


class ComunicacaoCreate(BaseModel):
    troca_id: Optional[int] = None
    empresa_origem_id: Optional[int] = None
    empresa_destino_id: Optional[int] = None
    assunto: Optional[str] = None
    data_contato: Optional[datetime] = None
    duracao: Optional[str] = None

    @field_validator(
        "troca_id", "empresa_origem_id", "empresa_destino_id", "data_contato", mode="before"
    )
    @classmethod
    def blanks(cls, value: Any) -> Any:
        return blank_to_none(value)

    @field_validator("duracao", mode="before")
    @classmethod
    def duracao_as_text(cls, value: Any) -> Any:
        value = blank_to_none(value)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ComunicacaoOut(BaseModel):
    """Linha como gravada em contatos (ids numéricos das empresas)."""

    model_config = ConfigDict(from_attributes=True)

    contato_id: int
    troca_id: Optional[int] = None
    empresa_origem_id: int
    empresa_destino_id: int
    assunto: str
    data_contato: datetime
    duracao: Optional[str] = None


class ComunicacaoDetalheOut(BaseModel):
    """Leitura com o nome das empresas no lugar dos ids."""

    model_config = ConfigDict(from_attributes=True)

    contato_id: int
    troca_id: Optional[int] = None
    assunto: str
    data_contato: datetime
    duracao: Optional[str] = None
    empresa_origem: str
    empresa_destino: str
