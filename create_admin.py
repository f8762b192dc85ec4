"""
Script simples para criar o usuário administrador do painel.
Uso: python create_admin.py --login admin --senha admin123 [--nome "Administrador"]
"""

import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import build_engine, build_session_factory, init_database
from app.core.exceptions import AppException, ConfigurationError
from app.core.logger import setup_logging
from app.services.auth import create_usuario

logger = logging.getLogger("create_admin")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Cria o usuário administrador do EcoStock")
    parser.add_argument("--nome", default="Administrador")
    parser.add_argument("--login", required=True)
    parser.add_argument("--senha", required=True)
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Erro: {e}")
        return 1

    setup_logging(settings.LOG_LEVEL)
    engine = build_engine(settings.DATABASE_URL)
    init_database(engine)

    db = build_session_factory(engine)()
    try:
        usuario = create_usuario(db, nome=args.nome, login=args.login, senha=args.senha)
    except AppException as e:
        print(f"Erro: {e.message}")
        return 1
    finally:
        db.close()
        engine.dispose()

    print("Usuário administrador criado com sucesso!")
    print(f"   Nome: {usuario.nome}")
    print(f"   Login: {usuario.login}")
    print("\nIMPORTANTE: a senha fica gravada em texto puro; use apenas em ambiente confiável.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
