# app/core/database.py

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> Engine:
    # Para SQLite, é importante usar connect_args={"check_same_thread": False}
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        # Banco em memória: uma única conexão compartilhada, senão cada
        # conexão do pool enxerga um banco vazio diferente
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, future=True, **options)

    return create_engine(
        database_url,
        echo=echo,
        future=True,
        pool_pre_ping=True,
    )


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_database(engine: Engine) -> None:
    """
    Testa a conexão e cria as tabelas que ainda não existem.
    Qualquer falha aqui é fatal: a aplicação não deve subir sem banco.
    """
    # Importa os models para registrá-los no Base.metadata
    from app.models import categoria, contato, empresa, troca, usuario  # noqa: F401

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    logger.info("Conexão com o banco de dados bem-sucedida")

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Dependência dos endpoints: uma sessão por requisição."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def persistence_guard(db: Session, message: str) -> Iterator[None]:
    """
    Converte erros do SQLAlchemy em PersistenceError com uma mensagem
    genérica para o cliente. A exceção do SQLAlchemy vai apenas para o log.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s: %s", message, exc)
        raise PersistenceError(message) from exc
