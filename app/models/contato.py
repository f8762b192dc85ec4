# app/models/contato.py

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Contato(Base):
    """
    Registro de comunicação entre duas empresas.
    Com duração é uma chamada; sem duração, uma mensagem.
    """
    __tablename__ = "contatos"

    contato_id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    troca_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("trocas.troca_id", ondelete="SET NULL"), nullable=True
    )

    empresa_origem_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("empresas.empresa_id"), index=True, nullable=False
    )
    empresa_destino_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("empresas.empresa_id"), index=True, nullable=False
    )

    assunto: Mapped[str] = mapped_column(Text, nullable=False)
    data_contato: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)

    # ex.: "15 min"
    duracao: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
