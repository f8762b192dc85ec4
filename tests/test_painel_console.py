import io

from painel.__main__ import main
from painel.session import LocalStorage, Session


def _run(client, storage, lines):
    out = io.StringIO()
    code = main(["--storage", storage], lines=lines, out=out, http=client)
    assert code == 0
    return out.getvalue()


def test_console_session_against_api(client, add_usuario, tmp_path):
    add_usuario(login="admin", senha="admin123")
    storage = str(tmp_path / "painel.json")

    output = _run(
        client,
        storage,
        [
            "ir /empresas",
            "login admin errada",
            "login admin admin123",
            'categoria "Eletrônicos" "Hardware usado"',
            "ir /trocas",
            "categoria Outra",
            "troca Acme Globex Eletrônicos Alimentos",
            "status 1 Em andamento",
            "status",
            "ir /relatorios",
            "foo",
            "excluir 1",
            "logout",
            "sair",
            "ir /dashboard",
        ],
    )

    assert "[ERRO] Login ou senha inválidos" in output
    assert "[OK] Login realizado com sucesso!" in output
    assert "[Categorias]" in output
    assert "Comando disponível apenas na página Categorias" in output
    assert "Em andamento" in output
    assert "Argumentos inválidos para status" in output
    assert "Página não encontrada: /relatorios" in output
    assert "Comando desconhecido: foo" in output
    assert "[OK] Troca excluída com sucesso" in output
    assert "[Dashboard]" not in output

    assert [c["nome"] for c in client.get("/api/categorias").json()] == ["Eletrônicos"]
    assert client.get("/api/trocas").json() == []
    assert not Session(LocalStorage(storage)).is_logged_in()


def test_console_reopens_logged_in_session(client, add_usuario, tmp_path):
    add_usuario(login="admin", senha="admin123")
    storage = str(tmp_path / "painel.json")

    _run(client, storage, ["login admin admin123", "sair"])
    output = _run(client, storage, [])

    assert output.splitlines()[0].startswith("Dashboard")
    assert "[Categorias]" in output


def test_console_protected_pages_need_login(client, tmp_path):
    output = _run(client, str(tmp_path / "painel.json"), ["ir /dashboard", "buscar x"])

    assert "[Dashboard]" not in output
    assert "Acesse a conta Admin" in output
