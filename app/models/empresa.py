# app/models/empresa.py

from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime
from app.core.database import Base


class Empresa(Base):
    __tablename__ = "empresas"

    empresa_id = Column(Integer, primary_key=True, index=True)

    nome = Column(String(255), nullable=False)
    cnpj = Column(String(20), nullable=False)  # ex.: "12.345.678/0001-90"
    endereco = Column(String(255), nullable=True)
    telefone = Column(String(20), nullable=False)
    email = Column(String(255), nullable=True)
    responsavel = Column(String(255), nullable=True)

    # Texto livre, esperado igual ao nome de uma categoria
    ramo = Column(String(100), nullable=True, index=True)
    produtos = Column(Integer, nullable=False, default=0)

    # Hora local da aplicação, como trocas.data e contatos.data_contato
    data_cadastro = Column(DateTime, nullable=False, default=datetime.now)
