# app/api/categorias.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.categoria import CategoriaIn, CategoriaOut, CategoriaResumoOut
from app.services import categorias as service


router = APIRouter(prefix="/api/categorias", tags=["categorias"])


@router.get("", response_model=List[CategoriaResumoOut])
def list_categorias(db: Session = Depends(get_db)):
    """
    Lista as categorias com a quantidade de empresas do ramo
    e a soma dos produtos dessas empresas.
    """
    return service.list_categorias(db)


@router.post("", response_model=CategoriaOut, status_code=status.HTTP_201_CREATED)
def create_categoria(payload: CategoriaIn, db: Session = Depends(get_db)):
    return service.create_categoria(db, payload)


@router.put("/{categoria_id}", response_model=CategoriaOut)
def update_categoria(
    categoria_id: int,
    payload: CategoriaIn,
    db: Session = Depends(get_db),
):
    """
    Atualiza a categoria. Se o nome mudar, as empresas com o ramo antigo
    passam a usar o novo nome.
    """
    return service.update_categoria(db, categoria_id, payload)


@router.delete("/{categoria_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_categoria(categoria_id: int, db: Session = Depends(get_db)):
    service.delete_categoria(db, categoria_id)
    return None
