# app/api/trocas.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.troca import MensagemOut, TrocaCreate, TrocaOut, TrocaStatusUpdate
from app.services import trocas as service


router = APIRouter(prefix="/api/trocas", tags=["trocas"])


@router.get("", response_model=List[TrocaOut])
def list_trocas(db: Session = Depends(get_db)):
    return service.list_trocas(db)


@router.get("/{troca_id}", response_model=TrocaOut)
def get_troca(troca_id: int, db: Session = Depends(get_db)):
    return service.get_troca(db, troca_id)


@router.post("", response_model=TrocaOut, status_code=status.HTTP_201_CREATED)
def create_troca(payload: TrocaCreate, db: Session = Depends(get_db)):
    """
    Inicia uma troca entre duas empresas.
    - data: agora, se não vier
    - status: "pendente", se não vier (máx. 50 caracteres)
    """
    return service.create_troca(db, payload)


@router.put("/{troca_id}", response_model=TrocaOut)
def update_troca(
    troca_id: int,
    payload: TrocaStatusUpdate,
    db: Session = Depends(get_db),
):
    """Altera apenas o status da troca."""
    return service.update_troca_status(db, troca_id, payload)


@router.delete("/{troca_id}", response_model=MensagemOut)
def delete_troca(troca_id: int, db: Session = Depends(get_db)):
    # Diferente de categorias (204), aqui a API sempre respondeu com mensagem
    service.delete_troca(db, troca_id)
    return MensagemOut(message="Troca excluída com sucesso")
