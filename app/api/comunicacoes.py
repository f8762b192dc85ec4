# app/api/comunicacoes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.comunicacao import ComunicacaoCreate, ComunicacaoDetalheOut, ComunicacaoOut
from app.services import comunicacoes as service


router = APIRouter(prefix="/api/comunicacoes", tags=["comunicacoes"])


@router.get("", response_model=List[ComunicacaoDetalheOut])
def list_comunicacoes(db: Session = Depends(get_db)):
    """
    Lista as comunicações com o nome das empresas de origem e destino.
    """
    return service.list_comunicacoes(db)


@router.get("/{contato_id}", response_model=ComunicacaoDetalheOut)
def get_comunicacao(contato_id: int, db: Session = Depends(get_db)):
    return service.get_comunicacao(db, contato_id)


@router.post("", response_model=ComunicacaoOut, status_code=status.HTTP_201_CREATED)
def create_comunicacao(payload: ComunicacaoCreate, db: Session = Depends(get_db)):
    return service.create_comunicacao(db, payload)
