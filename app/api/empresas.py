# app/api/empresas.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.empresa import EmpresaIn, EmpresaOut
from app.services import empresas as service


router = APIRouter(prefix="/api/empresas", tags=["empresas"])


@router.get("", response_model=List[EmpresaOut])
def list_empresas(db: Session = Depends(get_db)):
    return service.list_empresas(db)


@router.get("/{empresa_id}", response_model=EmpresaOut)
def get_empresa(empresa_id: int, db: Session = Depends(get_db)):
    return service.get_empresa(db, empresa_id)


@router.post("", response_model=EmpresaOut, status_code=status.HTTP_201_CREATED)
def create_empresa(payload: EmpresaIn, db: Session = Depends(get_db)):
    """
    Cadastra uma empresa. nome, cnpj e telefone são obrigatórios;
    produtos começa em 0 quando não informado.
    """
    return service.create_empresa(db, payload)


@router.put("/{empresa_id}", response_model=EmpresaOut)
def update_empresa(
    empresa_id: int,
    payload: EmpresaIn,
    db: Session = Depends(get_db),
):
    return service.update_empresa(db, empresa_id, payload)
