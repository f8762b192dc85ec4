import pytest

from painel.api_client import ApiClient
from painel.layout import AppLayout
from painel.pages.categorias import CategoriasPage
from painel.pages.login import LoginPage
from painel.session import LocalStorage, Session


@pytest.fixture
def layout(client):
    return AppLayout(ApiClient(http=client), Session(LocalStorage()))


def test_protected_page_redirects_to_login(layout):
    page = layout.navigate("/empresas")

    assert isinstance(page, LoginPage)
    assert layout.location == "/"
    assert layout.title == "TrueSwap"


def test_login_redirects_to_categorias(layout, add_usuario):
    add_usuario(login="admin", senha="admin123")

    page = layout.login("admin", "admin123")

    assert isinstance(page, CategoriasPage)
    assert layout.title == "Categorias"
    assert layout.session.current_user()["login"] == "admin"
    assert "[Categorias]" in layout.render()


def test_login_failure_keeps_login_page(layout, add_usuario):
    add_usuario(login="admin", senha="admin123")

    assert layout.login("admin", "errada") is None
    assert layout.login_page.error == "Login ou senha inválidos"
    assert not layout.session.is_logged_in()

    assert layout.login("", "") is None
    assert layout.login_page.error == "Login e senha são obrigatórios"


def test_logout_clears_marker(layout, add_usuario):
    add_usuario(login="admin", senha="admin123")
    layout.login("admin", "admin123")

    layout.logout()

    assert not layout.session.is_logged_in()
    assert isinstance(layout.navigate("/dashboard"), LoginPage)


def test_unknown_path(layout):
    layout.session.save_user({"id": 1, "nome": "Administrador", "login": "admin"})

    assert layout.navigate("/relatorios") is None
    assert layout.navigate("/trocas").title == "Trocas"
