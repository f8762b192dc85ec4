# app/services/trocas.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.database import persistence_guard
from app.core.exceptions import NotFoundError, ValidationError
from app.models.contato import Contato
from app.models.troca import Troca
from app.schemas.troca import STATUS_MAX_LENGTH, STATUS_PADRAO, TrocaCreate, TrocaStatusUpdate

logger = logging.getLogger(__name__)


def _check_status_length(status: Optional[str]) -> None:
    if status and len(status) > STATUS_MAX_LENGTH:
        raise ValidationError(f"O status não pode ter mais de {STATUS_MAX_LENGTH} caracteres")


def _get_or_404(db: Session, troca_id: int) -> Troca:
    troca = db.query(Troca).filter(Troca.troca_id == troca_id).first()
    if troca is None:
        raise NotFoundError("Troca não encontrada")
    return troca


def list_trocas(db: Session) -> List[Troca]:
    with persistence_guard(db, "Erro ao buscar trocas"):
        return db.query(Troca).order_by(Troca.troca_id).all()


def get_troca(db: Session, troca_id: int) -> Troca:
    with persistence_guard(db, "Erro ao buscar troca"):
        return _get_or_404(db, troca_id)


def create_troca(db: Session, payload: TrocaCreate) -> Troca:
    if not (
        payload.empresa_solicitante
        and payload.empresa_receptora
        and payload.categoria_solicitante
        and payload.categoria_receptora
    ):
        raise ValidationError("Empresa solicitante, receptora e categorias são obrigatórias")
    _check_status_length(payload.status)

    troca = Troca(
        empresa_solicitante=payload.empresa_solicitante,
        empresa_receptora=payload.empresa_receptora,
        categoria_solicitante=payload.categoria_solicitante,
        categoria_receptora=payload.categoria_receptora,
        data=payload.data or datetime.now(),
        status=payload.status or STATUS_PADRAO,
        observacoes=payload.observacoes or None,
    )

    with persistence_guard(db, "Erro ao criar troca"):
        db.add(troca)
        db.commit()
        db.refresh(troca)

    logger.info(
        "Troca criada: %s -> %s (id=%s)",
        troca.empresa_solicitante, troca.empresa_receptora, troca.troca_id,
    )
    return troca


def update_troca_status(db: Session, troca_id: int, payload: TrocaStatusUpdate) -> Troca:
    if not payload.status:
        raise ValidationError("Status é obrigatório")
    _check_status_length(payload.status)

    with persistence_guard(db, "Erro ao atualizar troca"):
        troca = _get_or_404(db, troca_id)
        troca.status = payload.status
        db.commit()
        db.refresh(troca)

    logger.info("Troca %s agora está %r", troca_id, troca.status)
    return troca


def delete_troca(db: Session, troca_id: int) -> None:
    with persistence_guard(db, "Erro ao deletar troca"):
        troca = _get_or_404(db, troca_id)

        # Comunicações vinculadas continuam existindo, só perdem a referência
        db.query(Contato).filter(Contato.troca_id == troca_id).update(
            {Contato.troca_id: None}, synchronize_session=False
        )

        db.delete(troca)
        db.commit()

    logger.info("Troca removida: id=%s", troca_id)
