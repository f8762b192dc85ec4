# app/api/auth.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.auth import LoginIn, LoginOut, UsuarioPublico
from app.services.auth import authenticate


router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)) -> LoginOut:
    usuario = authenticate(db, payload)
    return LoginOut(
        message="Login bem-sucedido",
        user=UsuarioPublico(id=usuario.usuario_id, nome=usuario.nome, login=usuario.login),
    )
