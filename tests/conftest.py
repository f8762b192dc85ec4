import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.auth import create_usuario


@pytest.fixture
def app():
    # Cada teste recebe uma aplicação com banco SQLite próprio em memória
    return create_app(Settings(database_url="sqlite://", frontend_url=""))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def add_usuario(app, client):
    def _add(nome="Administrador", login="admin", senha="admin123"):
        db = app.state.session_factory()
        try:
            return create_usuario(db, nome=nome, login=login, senha=senha)
        finally:
            db.close()

    return _add


@pytest.fixture
def make_empresa(client):
    def _make(nome="Acme", **fields):
        payload = {"nome": nome, "cnpj": "12.345.678/0001-90", "telefone": "1111-0000"}
        payload.update(fields)
        response = client.post("/api/empresas", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_categoria(client):
    def _make(nome="Eletrônicos", descricao=None):
        response = client.post("/api/categorias", json={"nome": nome, "descricao": descricao})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_troca(client):
    def _make(**fields):
        payload = {
            "empresa_solicitante": "Acme",
            "empresa_receptora": "Globex",
            "categoria_solicitante": "Eletrônicos",
            "categoria_receptora": "Alimentos",
        }
        payload.update(fields)
        response = client.post("/api/trocas", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
