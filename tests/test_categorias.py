from sqlalchemy import event, text
from sqlalchemy.exc import OperationalError


def _categoria(client, categoria_id):
    for categoria in client.get("/api/categorias").json():
        if categoria["categoria_id"] == categoria_id:
            return categoria
    return None


def test_create_categoria_returns_row_with_id(client):
    response = client.post("/api/categorias", json={"nome": "Eletrônicos", "descricao": "Hardware usado"})

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["categoria_id"], int)
    assert body["nome"] == "Eletrônicos"
    assert body["descricao"] == "Hardware usado"


def test_create_categoria_without_descricao(client):
    response = client.post("/api/categorias", json={"nome": "Móveis", "descricao": ""})

    assert response.status_code == 201
    assert response.json()["descricao"] is None


def test_create_categoria_requires_nome(client):
    for payload in ({}, {"nome": ""}, {"descricao": "sem nome"}):
        response = client.post("/api/categorias", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Nome da categoria é obrigatório"}


def test_create_categoria_rejects_duplicated_nome(client, make_categoria):
    make_categoria("Energia")

    response = client.post("/api/categorias", json={"nome": "Energia"})

    assert response.status_code == 400


def test_list_categorias_aggregates_empresas_by_ramo(client, make_categoria, make_empresa):
    eletronicos = make_categoria("Eletrônicos")
    vazia = make_categoria("Vazia")
    make_empresa("Tecnofix", ramo="Eletrônicos", produtos=5)
    make_empresa("MultiBrasil", ramo="Eletrônicos", produtos=8)
    make_empresa("GreenEnergy", ramo="Energia", produtos=15)

    assert _categoria(client, eletronicos["categoria_id"]) == {
        "categoria_id": eletronicos["categoria_id"],
        "nome": "Eletrônicos",
        "descricao": None,
        "empresas": 2,
        "produtos": 13,
    }
    sem_empresas = _categoria(client, vazia["categoria_id"])
    assert sem_empresas["empresas"] == 0
    assert sem_empresas["produtos"] == 0


def test_rename_categoria_cascades_to_empresas(client, make_categoria, make_empresa):
    categoria = make_categoria("A")
    make_categoria("B-antiga")
    empresa_1 = make_empresa("Um", ramo="A", produtos=2)
    empresa_2 = make_empresa("Dois", ramo="A", produtos=3)
    outra = make_empresa("Tres", ramo="Outro", produtos=7)

    response = client.put(
        f"/api/categorias/{categoria['categoria_id']}", json={"nome": "B", "descricao": "nova"}
    )

    assert response.status_code == 200
    assert response.json() == {"categoria_id": categoria["categoria_id"], "nome": "B", "descricao": "nova"}

    assert client.get(f"/api/empresas/{empresa_1['empresa_id']}").json()["ramo"] == "B"
    assert client.get(f"/api/empresas/{empresa_2['empresa_id']}").json()["ramo"] == "B"
    assert client.get(f"/api/empresas/{outra['empresa_id']}").json()["ramo"] == "Outro"

    renamed = _categoria(client, categoria["categoria_id"])
    assert renamed["empresas"] == 2
    assert renamed["produtos"] == 5


def test_update_categoria_keeping_nome_only_changes_descricao(client, make_categoria, make_empresa):
    categoria = make_categoria("Alimentos", descricao="antes")
    make_empresa("Orgânicos SA", ramo="Alimentos")

    response = client.put(
        f"/api/categorias/{categoria['categoria_id']}", json={"nome": "Alimentos", "descricao": "depois"}
    )

    assert response.status_code == 200
    assert response.json()["descricao"] == "depois"
    assert _categoria(client, categoria["categoria_id"])["empresas"] == 1


def test_update_categoria_validation_and_not_found(client, make_categoria):
    categoria = make_categoria("Energia")

    assert client.put(f"/api/categorias/{categoria['categoria_id']}", json={"nome": ""}).status_code == 400
    response = client.put("/api/categorias/9999", json={"nome": "Nova"})
    assert response.status_code == 404
    assert response.json() == {"error": "Categoria não encontrada"}


def test_delete_categoria(client, make_categoria):
    categoria = make_categoria("Temporária")

    response = client.delete(f"/api/categorias/{categoria['categoria_id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert _categoria(client, categoria["categoria_id"]) is None


def test_delete_unknown_categoria_returns_404(client):
    response = client.delete("/api/categorias/9999")

    assert response.status_code == 404
    assert response.json() == {"error": "Categoria não encontrada"}


def test_delete_categoria_leaves_empresas_untouched(client, make_categoria, make_empresa):
    categoria = make_categoria("Móveis")
    empresa = make_empresa("MultiBrasil", ramo="Móveis")

    client.delete(f"/api/categorias/{categoria['categoria_id']}")

    assert client.get(f"/api/empresas/{empresa['empresa_id']}").json()["ramo"] == "Móveis"


def test_list_categorias_database_failure_returns_generic_500(app, client):
    with app.state.engine.begin() as conn:
        conn.execute(text("DROP TABLE categorias"))

    response = client.get("/api/categorias")

    assert response.status_code == 500
    assert response.json() == {"error": "Erro ao listar categorias"}


def test_rename_categoria_rolls_back_when_cascade_fails(app, client, make_categoria, make_empresa):
    categoria = make_categoria("A")
    empresa = make_empresa("Um", ramo="A")

    def fail_cascade(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("UPDATE EMPRESAS"):
            raise OperationalError(statement, parameters, Exception("disk I/O error"))

    event.listen(app.state.engine, "before_cursor_execute", fail_cascade)
    try:
        response = client.put(f"/api/categorias/{categoria['categoria_id']}", json={"nome": "B"})
    finally:
        event.remove(app.state.engine, "before_cursor_execute", fail_cascade)

    assert response.status_code == 500
    assert response.json() == {"error": "Erro ao atualizar categoria"}
    assert [c["nome"] for c in client.get("/api/categorias").json()] == ["A"]
    assert client.get(f"/api/empresas/{empresa['empresa_id']}").json()["ramo"] == "A"
