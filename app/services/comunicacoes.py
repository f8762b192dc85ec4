# app/services/comunicacoes.py

from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from sqlalchemy.orm import Query, Session, aliased

from app.core.database import persistence_guard
from app.core.exceptions import NotFoundError, ValidationError
from app.models.contato import Contato
from app.models.empresa import Empresa
from app.models.troca import Troca
from app.schemas.comunicacao import ComunicacaoCreate, ComunicacaoDetalheOut

logger = logging.getLogger(__name__)

TIPO_CHAMADA = "chamada"
TIPO_MENSAGEM = "mensagem"


def tipo_comunicacao(duracao: str | None) -> str:
    """Não existe coluna de tipo: com duração é chamada, sem duração é mensagem."""
    return TIPO_CHAMADA if duracao else TIPO_MENSAGEM


def _query_detalhes(db: Session) -> Query:
    origem = aliased(Empresa)
    destino = aliased(Empresa)
    return (
        db.query(
            Contato.contato_id,
            Contato.troca_id,
            Contato.assunto,
            Contato.data_contato,
            Contato.duracao,
            origem.nome.label("empresa_origem"),
            destino.nome.label("empresa_destino"),
        )
        .join(origem, Contato.empresa_origem_id == origem.empresa_id)
        .join(destino, Contato.empresa_destino_id == destino.empresa_id)
    )


def list_comunicacoes(db: Session) -> List[ComunicacaoDetalheOut]:
    with persistence_guard(db, "Erro ao buscar comunicações"):
        rows = _query_detalhes(db).order_by(Contato.contato_id).all()
    return [ComunicacaoDetalheOut.model_validate(row) for row in rows]


def get_comunicacao(db: Session, contato_id: int) -> ComunicacaoDetalheOut:
    with persistence_guard(db, "Erro ao buscar comunicação"):
        row = _query_detalhes(db).filter(Contato.contato_id == contato_id).first()
    if row is None:
        raise NotFoundError("Comunicação não encontrada")
    return ComunicacaoDetalheOut.model_validate(row)


def create_comunicacao(db: Session, payload: ComunicacaoCreate) -> Contato:
    if not payload.empresa_origem_id or not payload.empresa_destino_id or not payload.assunto:
        raise ValidationError("Empresa origem, empresa destino e assunto são obrigatórios")

    with persistence_guard(db, "Erro ao criar comunicação"):
        # Sem as empresas a comunicação sumiria da listagem (JOIN)
        for empresa_id, papel in (
            (payload.empresa_origem_id, "origem"),
            (payload.empresa_destino_id, "destino"),
        ):
            if db.query(Empresa.empresa_id).filter(Empresa.empresa_id == empresa_id).first() is None:
                raise ValidationError(f"Empresa {papel} não encontrada")

        troca_id = payload.troca_id or None
        if troca_id is not None:
            if db.query(Troca.troca_id).filter(Troca.troca_id == troca_id).first() is None:
                raise ValidationError("Troca não encontrada")

        contato = Contato(
            troca_id=troca_id,
            empresa_origem_id=payload.empresa_origem_id,
            empresa_destino_id=payload.empresa_destino_id,
            assunto=payload.assunto,
            data_contato=payload.data_contato or datetime.now(),
            duracao=payload.duracao or None,
        )
        db.add(contato)
        db.commit()
        db.refresh(contato)

    logger.info(
        "Comunicação registrada (%s): empresa %s -> %s (id=%s)",
        tipo_comunicacao(contato.duracao),
        contato.empresa_origem_id,
        contato.empresa_destino_id,
        contato.contato_id,
    )
    return contato
