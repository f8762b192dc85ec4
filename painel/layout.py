# painel/layout.py

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from painel.api_client import ApiClient
from painel.pages.base import Page
from painel.pages.categorias import CategoriasPage
from painel.pages.comunicacoes import ComunicacoesPage
from painel.pages.dashboard import DashboardPage
from painel.pages.empresas import EmpresasPage
from painel.pages.login import LoginPage
from painel.pages.trocas import TrocasPage
from painel.session import Session

logger = logging.getLogger(__name__)

LOGIN_PATH = "/"
DEFAULT_TITLE = "TrueSwap"

NAV_ITEMS: List[Tuple[str, str]] = [
    ("Dashboard", "/dashboard"),
    ("Empresas", "/empresas"),
    ("Categorias", "/categorias"),
    ("Trocas", "/trocas"),
    ("Comunicações", "/comunicacoes"),
]


class AppLayout:
    """
    Casca do painel: navegação, título da página ativa e logout.
    Páginas protegidas só são montadas com a marca de login presente;
    sem ela o painel volta para a tela de login.
    """

    def __init__(self, api: ApiClient, session: Session):
        self.api = api
        self.session = session
        self.login_page = LoginPage(api, session)
        self.pages: Dict[str, Page] = {
            page.path: page
            for page in (
                DashboardPage(api),
                EmpresasPage(api),
                CategoriasPage(api),
                TrocasPage(api),
                ComunicacoesPage(api),
            )
        }
        self.location = LOGIN_PATH
        self.current: Page = self.login_page

    @property
    def title(self) -> str:
        for name, path in NAV_ITEMS:
            if path == self.location:
                return name
        return DEFAULT_TITLE

    def navigate(self, path: str) -> Optional[Page]:
        if path == LOGIN_PATH:
            return self._show_login()

        page = self.pages.get(path)
        if page is None:
            logger.info("Página não encontrada: %s", path)
            return None

        if not self.session.is_logged_in():
            return self._show_login()

        self.location = path
        self.current = page
        page.mount()
        return page

    def login(self, username: str, password: str) -> Optional[Page]:
        if not self.login_page.submit(username, password):
            return None
        return self.navigate(LoginPage.redirect_to)

    def logout(self) -> Page:
        self.session.clear()
        return self._show_login()

    def _show_login(self) -> Page:
        self.location = LOGIN_PATH
        self.current = self.login_page
        self.login_page.mount()
        return self.login_page

    def render(self) -> str:
        nav = "  ".join(
            f"[{name}]" if path == self.location else name for name, path in NAV_ITEMS
        )
        return "\n".join([nav, "", self.title, "", self.current.render()])
