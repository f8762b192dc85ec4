# app/main.py

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware

from app.api.auth import router as auth_router
from app.api.categorias import router as categorias_router
from app.api.comunicacoes import router as comunicacoes_router
from app.api.empresas import router as empresas_router
from app.api.system import router as system_router
from app.api.trocas import router as trocas_router
from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory, init_database
from app.core.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Monta a aplicação com engine e sessões próprias.
    Sem DATABASE_URL a configuração falha aqui e o processo não sobe.
    """
    settings = (settings or get_settings()).validate()

    app = FastAPI(
        title="EcoStock API",
        version="1.0.0",
    )

    engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # === CORS: aberto por padrão, lista fixa quando FRONTEND_URL é informado ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms) from %s",
            request.method,
            request.url.path,
            response.status_code,
            (time.time() - start_time) * 1000,
            request.headers.get("origin", "-"),
        )
        return response

    @app.on_event("startup")
    def on_startup():
        logger.info("Conectando ao banco de dados (%s)...", engine.url.render_as_string(hide_password=True))
        try:
            init_database(engine)
        except Exception:
            logger.exception("Erro ao conectar ao banco de dados")
            raise

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(auth_router)
    app.include_router(categorias_router)
    app.include_router(empresas_router)
    app.include_router(trocas_router)
    app.include_router(comunicacoes_router)

    return app
