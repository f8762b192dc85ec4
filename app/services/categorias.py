# app/services/categorias.py

from __future__ import annotations

import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.database import persistence_guard
from app.core.exceptions import NotFoundError, ValidationError
from app.models.categoria import Categoria
from app.models.empresa import Empresa
from app.schemas.categoria import CategoriaIn, CategoriaResumoOut

logger = logging.getLogger(__name__)


def _require_nome(payload: CategoriaIn) -> str:
    if not payload.nome:
        raise ValidationError("Nome da categoria é obrigatório")
    return payload.nome


def _get_or_404(db: Session, categoria_id: int) -> Categoria:
    categoria = db.query(Categoria).filter(Categoria.categoria_id == categoria_id).first()
    if categoria is None:
        raise NotFoundError("Categoria não encontrada")
    return categoria


def _check_nome_livre(db: Session, nome: str, categoria_id: int | None = None) -> None:
    query = db.query(Categoria).filter(Categoria.nome == nome)
    if categoria_id is not None:
        query = query.filter(Categoria.categoria_id != categoria_id)
    if query.first() is not None:
        raise ValidationError("Já existe uma categoria com esse nome")


def list_categorias(db: Session) -> List[CategoriaResumoOut]:
    """
    Lista as categorias com os totais das empresas do mesmo ramo:
    - empresas: quantidade de empresas com ramo == nome
    - produtos: soma de empresas.produtos (0 quando não há nenhuma)
    """
    empresas_count = (
        select(func.count(Empresa.empresa_id))
        .where(Empresa.ramo == Categoria.nome)
        .correlate(Categoria)
        .scalar_subquery()
    )
    produtos_sum = (
        select(func.coalesce(func.sum(Empresa.produtos), 0))
        .where(Empresa.ramo == Categoria.nome)
        .correlate(Categoria)
        .scalar_subquery()
    )

    with persistence_guard(db, "Erro ao listar categorias"):
        rows = (
            db.query(Categoria, empresas_count.label("empresas"), produtos_sum.label("produtos"))
            .order_by(Categoria.categoria_id)
            .all()
        )

    return [
        CategoriaResumoOut(
            categoria_id=categoria.categoria_id,
            nome=categoria.nome,
            descricao=categoria.descricao,
            empresas=int(empresas or 0),
            produtos=int(produtos or 0),
        )
        for categoria, empresas, produtos in rows
    ]


def create_categoria(db: Session, payload: CategoriaIn) -> Categoria:
    nome = _require_nome(payload)

    with persistence_guard(db, "Erro ao criar categoria"):
        _check_nome_livre(db, nome)

        categoria = Categoria(nome=nome, descricao=payload.descricao or None)
        db.add(categoria)
        db.commit()
        db.refresh(categoria)

    logger.info("Categoria criada: %s (id=%s)", categoria.nome, categoria.categoria_id)
    return categoria


def update_categoria(db: Session, categoria_id: int, payload: CategoriaIn) -> Categoria:
    """
    Renomeia a categoria e leva o novo nome para todas as empresas que
    usavam o nome antigo como ramo. As duas alterações vão no mesmo commit.
    """
    nome = _require_nome(payload)

    with persistence_guard(db, "Erro ao atualizar categoria"):
        categoria = _get_or_404(db, categoria_id)
        _check_nome_livre(db, nome, categoria_id=categoria_id)

        nome_antigo = categoria.nome
        categoria.nome = nome
        categoria.descricao = payload.descricao or None

        empresas_renomeadas = 0
        if nome_antigo != nome:
            empresas_renomeadas = (
                db.query(Empresa)
                .filter(Empresa.ramo == nome_antigo)
                .update({Empresa.ramo: nome}, synchronize_session=False)
            )

        db.commit()
        db.refresh(categoria)

    if empresas_renomeadas:
        logger.info(
            "Categoria %s renomeada de %r para %r (%s empresas atualizadas)",
            categoria_id, nome_antigo, nome, empresas_renomeadas,
        )
    return categoria


def delete_categoria(db: Session, categoria_id: int) -> None:
    # Empresas com esse ramo continuam apontando para o nome antigo
    with persistence_guard(db, "Erro ao deletar categoria"):
        categoria = _get_or_404(db, categoria_id)
        db.delete(categoria)
        db.commit()

    logger.info("Categoria removida: id=%s", categoria_id)
