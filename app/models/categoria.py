# app/models/categoria.py

from sqlalchemy import Column, Integer, String, Text
from app.core.database import Base


class Categoria(Base):
    """
    Categoria de produtos. O vínculo com empresas é feito pelo texto:
    empresas.ramo == categorias.nome (não há chave estrangeira).
    """
    __tablename__ = "categorias"

    categoria_id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(100), unique=True, nullable=False)
    descricao = Column(Text, nullable=True)
