# app/models/usuario.py

from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Usuario(Base):
    """Conta do administrador. A senha fica em texto puro, como no sistema legado."""
    __tablename__ = "usuarios"

    usuario_id = Column(Integer, primary_key=True, index=True)
    nome = Column(String(255), nullable=False)
    login = Column(String(100), unique=True, nullable=False)
    senha = Column(String(255), nullable=False)
