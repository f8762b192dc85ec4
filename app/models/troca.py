# app/models/troca.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime
from app.core.database import Base


class Troca(Base):
    __tablename__ = "trocas"

    troca_id = Column(Integer, primary_key=True, index=True)

    # Empresas e categorias são guardadas pelo nome
    empresa_solicitante = Column(String(255), nullable=False)
    empresa_receptora = Column(String(255), nullable=False)
    categoria_solicitante = Column(String(100), nullable=False)
    categoria_receptora = Column(String(100), nullable=False)

    data = Column(DateTime, nullable=False, default=datetime.now)
    status = Column(String(50), nullable=False, default="pendente")
    observacoes = Column(Text, nullable=True)
