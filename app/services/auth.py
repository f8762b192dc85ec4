# app/services/auth.py

from __future__ import annotations

import hmac
import logging

from sqlalchemy.orm import Session

from app.core.database import persistence_guard
from app.core.exceptions import AuthError, ValidationError
from app.models.usuario import Usuario
from app.schemas.auth import LoginIn

logger = logging.getLogger(__name__)


def _senha_confere(armazenada: str, informada: str) -> bool:
    # Senha em texto puro (legado). compare_digest só evita vazar por tempo.
    return hmac.compare_digest(armazenada.encode("utf-8"), informada.encode("utf-8"))


def authenticate(db: Session, payload: LoginIn) -> Usuario:
    if not payload.login or not payload.senha:
        raise ValidationError("Login e senha são obrigatórios")

    with persistence_guard(db, "Erro ao realizar login"):
        usuario = db.query(Usuario).filter(Usuario.login == payload.login).first()

    if usuario is None or not _senha_confere(usuario.senha, payload.senha):
        logger.warning("Tentativa de login inválida para %r", payload.login)
        raise AuthError("Login ou senha inválidos")

    logger.info("Login bem-sucedido: %s", usuario.login)
    return usuario


def create_usuario(db: Session, nome: str, login: str, senha: str) -> Usuario:
    """Cadastra um usuário administrador. Usado pelo script create_admin.py."""
    if not nome or not login or not senha:
        raise ValidationError("Nome, login e senha são obrigatórios")

    with persistence_guard(db, "Erro ao criar usuário"):
        if db.query(Usuario).filter(Usuario.login == login).first() is not None:
            raise ValidationError("Já existe um usuário com esse login")

        usuario = Usuario(nome=nome, login=login, senha=senha)
        db.add(usuario)
        db.commit()
        db.refresh(usuario)

    return usuario
