# app/schemas/auth.py

from typing import Optional

from pydantic import BaseModel


class LoginIn(BaseModel):
    login: Optional[str] = None
    senha: Optional[str] = None


class UsuarioPublico(BaseModel):
    id: int
    nome: str
    login: str


class LoginOut(BaseModel):
    message: str
    user: UsuarioPublico
