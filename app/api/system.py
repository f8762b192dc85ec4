# app/api/system.py

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
def root():
    return "Backend EcoStock funcionando!"


@router.get("/health", response_class=PlainTextResponse)
def health_check():
    return "Servidor OK"


@router.get("/db-test")
def db_test(db: Session = Depends(get_db)):
    """Consulta a hora do servidor de banco para confirmar a conexão."""
    try:
        server_time = db.execute(select(func.now())).scalar()
    except SQLAlchemyError:
        logger.exception("Erro ao conectar ao banco de dados")
        return JSONResponse(
            status_code=500,
            content={"error": "Erro ao conectar ao banco de dados"},
        )

    return {
        "message": "Conexão com o banco de dados bem-sucedida!",
        "serverTime": {"now": str(server_time)},
    }
