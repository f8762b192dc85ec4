# app/services/empresas.py

from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.core.database import persistence_guard
from app.core.exceptions import NotFoundError, ValidationError
from app.models.empresa import Empresa
from app.schemas.empresa import EmpresaIn

logger = logging.getLogger(__name__)


def _campos(payload: EmpresaIn) -> Dict[str, Any]:
    if not payload.nome or not payload.cnpj or not payload.telefone:
        raise ValidationError("Nome, CNPJ e telefone são obrigatórios")

    return {
        "nome": payload.nome,
        "cnpj": payload.cnpj,
        "endereco": payload.endereco or None,
        "telefone": payload.telefone,
        "email": payload.email or None,
        "responsavel": payload.responsavel or None,
        "ramo": payload.ramo or None,
        "produtos": payload.produtos or 0,
    }


def _get_or_404(db: Session, empresa_id: int) -> Empresa:
    empresa = db.query(Empresa).filter(Empresa.empresa_id == empresa_id).first()
    if empresa is None:
        raise NotFoundError("Empresa não encontrada")
    return empresa


def list_empresas(db: Session) -> List[Empresa]:
    with persistence_guard(db, "Erro ao listar empresas"):
        return db.query(Empresa).order_by(Empresa.empresa_id).all()


def get_empresa(db: Session, empresa_id: int) -> Empresa:
    with persistence_guard(db, "Erro ao buscar empresa"):
        return _get_or_404(db, empresa_id)


def create_empresa(db: Session, payload: EmpresaIn) -> Empresa:
    data = _campos(payload)

    with persistence_guard(db, "Erro ao criar empresa"):
        empresa = Empresa(**data)
        db.add(empresa)
        db.commit()
        db.refresh(empresa)

    logger.info("Empresa criada: %s (id=%s)", empresa.nome, empresa.empresa_id)
    return empresa


def update_empresa(db: Session, empresa_id: int, payload: EmpresaIn) -> Empresa:
    data = _campos(payload)

    with persistence_guard(db, "Erro ao atualizar empresa"):
        empresa = _get_or_404(db, empresa_id)
        for field, value in data.items():
            setattr(empresa, field, value)

        db.commit()
        db.refresh(empresa)

    return empresa
