# app/core/logger.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # O uvicorn já registra cada requisição; o middleware da app faz o mesmo
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
