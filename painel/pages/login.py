# painel/pages/login.py

from __future__ import annotations

from painel.api_client import ApiClient
from painel.pages.base import Page
from painel.session import Session


class LoginPage(Page):
    title = "Entrar"
    path = "/"
    redirect_to = "/categorias"

    def __init__(self, api: ApiClient, session: Session):
        super().__init__(api)
        self.session = session
        self.username = ""
        self.password = ""

    def mount(self) -> None:
        self.error = None

    def submit(self, username: str, password: str) -> bool:
        self.username = username
        self.password = password
        if not username or not password:
            return self._fail("Login e senha são obrigatórios")

        def do_login():
            response = self.api.login(username, password)
            self.session.save_user(response["user"])

        if not self._run(do_login, "Falha no login. Verifique suas credenciais."):
            return False
        self.password = ""
        self.notify("Login realizado com sucesso!")
        return True

    def render(self) -> str:
        return "Acesse a conta Admin para gerenciar os produtos e trocas no EcoStock"
