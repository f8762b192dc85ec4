# app/schemas/categoria.py

from typing import Optional

from pydantic import BaseModel, ConfigDict


class CategoriaIn(BaseModel):
    # nome é obrigatório, mas a checagem fica no service (400, não 422)
    nome: Optional[str] = None
    descricao: Optional[str] = None


class CategoriaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    categoria_id: int
    nome: str
    descricao: Optional[str] = None


class CategoriaResumoOut(CategoriaOut):
    """Categoria com os totais calculados a partir de empresas.ramo."""

    empresas: int = 0
    produtos: int = 0
