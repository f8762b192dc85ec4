# app/schemas/empresa.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.schemas.common import blank_to_none


class EmpresaIn(BaseModel):
    """
    Usado tanto no cadastro quanto na edição (PUT substitui a linha inteira).
    nome, cnpj e telefone são obrigatórios; a checagem fica no service.
    """
    nome: Optional[str] = None
    cnpj: Optional[str] = None
    endereco: Optional[str] = None
    telefone: Optional[str] = None
    email: Optional[str] = None
    responsavel: Optional[str] = None
    ramo: Optional[str] = None
    produtos: Optional[int] = Field(default=None, ge=0)

    @field_validator("produtos", mode="before")
    @classmethod
    def produtos_blank(cls, value):
        return blank_to_none(value)


class EmpresaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    empresa_id: int
    nome: str
    cnpj: str
    endereco: Optional[str] = None
    telefone: str
    email: Optional[str] = None
    responsavel: Optional[str] = None
    ramo: Optional[str] = None
    produtos: int = 0
    data_cadastro: datetime
