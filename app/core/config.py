# app/core/config.py

import os
from typing import List, Optional

from dotenv import load_dotenv

from app.core.exceptions import ConfigurationError

# Caminho da raiz do projeto (onde está o main.py e o .env)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ENV_PATH = os.path.join(BASE_DIR, ".env")

# Carrega variáveis do arquivo .env, se existir
if os.path.exists(ENV_PATH):
    load_dotenv(ENV_PATH)

# Origens liberadas quando FRONTEND_URL é informado
DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "https://ecostockfinal.vercel.app",
]


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _split_origins(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Settings:
    def __init__(
        self,
        database_url: Optional[str] = None,
        frontend_url: Optional[str] = None,
        port: Optional[int] = None,
        log_level: Optional[str] = None,
        db_echo: Optional[bool] = None,
    ) -> None:
        url = database_url if database_url is not None else os.getenv("DATABASE_URL")
        # Heroku/Render ainda entregam "postgres://", que o SQLAlchemy não aceita
        if url and url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        self.DATABASE_URL: Optional[str] = url or None

        self.FRONTEND_ORIGINS: List[str] = _split_origins(
            frontend_url if frontend_url is not None else os.getenv("FRONTEND_URL")
        )
        self.PORT: int = port if port is not None else int(os.getenv("PORT", "3001"))
        self.LOG_LEVEL: str = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
        self.DB_ECHO: bool = db_echo if db_echo is not None else _as_bool(os.getenv("DB_ECHO"))

    @property
    def cors_origins(self) -> List[str]:
        """
        Sem FRONTEND_URL a API fica aberta para qualquer origem.
        Com FRONTEND_URL, vale a lista fixa + as origens configuradas.
        """
        if not self.FRONTEND_ORIGINS:
            return ["*"]
        origins = list(DEFAULT_ORIGINS)
        for origin in self.FRONTEND_ORIGINS:
            if origin not in origins:
                origins.append(origin)
        return origins

    @property
    def cors_allow_credentials(self) -> bool:
        # "*" não pode ser combinado com credenciais
        return self.cors_origins != ["*"]

    def validate(self) -> "Settings":
        if not self.DATABASE_URL:
            raise ConfigurationError("DATABASE_URL não está definida")
        return self


def get_settings() -> Settings:
    return Settings().validate()
