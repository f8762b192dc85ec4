from datetime import datetime


def test_create_empresa_example_scenario(client):
    response = client.post(
        "/api/empresas",
        json={"nome": "Acme", "cnpj": "12.345.678/0001-90", "telefone": "1111-0000"},
    )

    assert response.status_code == 201
    created = response.json()
    assert created["produtos"] == 0
    assert created["endereco"] is None
    assert created["email"] is None
    assert created["responsavel"] is None
    assert created["ramo"] is None
    assert created["data_cadastro"]

    fetched = client.get(f"/api/empresas/{created['empresa_id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_empresa_with_all_fields(client):
    payload = {
        "nome": "Tecnofix Ltda",
        "cnpj": "98.765.432/0001-10",
        "endereco": "Rua A, 10",
        "telefone": "2222-0000",
        "email": "contato@tecnofix.com",
        "responsavel": "Ana",
        "ramo": "Eletrônicos",
        "produtos": 12,
    }

    body = client.post("/api/empresas", json=payload).json()

    for field, value in payload.items():
        assert body[field] == value


def test_create_empresa_blank_optional_fields_become_null(client):
    body = client.post(
        "/api/empresas",
        json={
            "nome": "Acme",
            "cnpj": "1",
            "telefone": "2",
            "endereco": "",
            "email": "",
            "responsavel": "",
            "ramo": "",
            "produtos": "",
        },
    ).json()

    assert body["endereco"] is None
    assert body["email"] is None
    assert body["ramo"] is None
    assert body["produtos"] == 0


def test_create_empresa_requires_nome_cnpj_telefone(client):
    base = {"nome": "Acme", "cnpj": "1", "telefone": "2"}
    for missing in base:
        payload = {k: v for k, v in base.items() if k != missing}
        response = client.post("/api/empresas", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Nome, CNPJ e telefone são obrigatórios"}


def test_create_empresa_rejects_negative_produtos(client):
    response = client.post(
        "/api/empresas", json={"nome": "Acme", "cnpj": "1", "telefone": "2", "produtos": -1}
    )

    assert response.status_code == 400
    assert "error" in response.json()


def test_list_empresas(client, make_empresa):
    make_empresa("Acme")
    make_empresa("Globex")

    response = client.get("/api/empresas")

    assert response.status_code == 200
    assert [e["nome"] for e in response.json()] == ["Acme", "Globex"]


def test_get_empresa_not_found(client):
    response = client.get("/api/empresas/9999")

    assert response.status_code == 404
    assert response.json() == {"error": "Empresa não encontrada"}


def test_get_empresa_with_non_numeric_id_is_bad_request(client):
    assert client.get("/api/empresas/abc").status_code == 400


def test_update_empresa_replaces_fields(client, make_empresa):
    empresa = make_empresa("Acme", email="a@acme.com", produtos=4)

    response = client.put(
        f"/api/empresas/{empresa['empresa_id']}",
        json={"nome": "Acme S.A.", "cnpj": "1", "telefone": "3333-0000", "ramo": "Energia"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["nome"] == "Acme S.A."
    assert body["ramo"] == "Energia"
    # PUT substitui a linha: campos omitidos voltam ao padrão
    assert body["email"] is None
    assert body["produtos"] == 0
    assert body["data_cadastro"] == empresa["data_cadastro"]


def test_update_empresa_validation_and_not_found(client, make_empresa):
    empresa = make_empresa()

    response = client.put(f"/api/empresas/{empresa['empresa_id']}", json={"nome": "Sem CNPJ"})
    assert response.status_code == 400

    response = client.put("/api/empresas/9999", json={"nome": "X", "cnpj": "1", "telefone": "2"})
    assert response.status_code == 404


def test_empresas_have_no_delete_route(client, make_empresa):
    empresa = make_empresa()

    response = client.delete(f"/api/empresas/{empresa['empresa_id']}")

    assert response.status_code == 405
    assert client.get(f"/api/empresas/{empresa['empresa_id']}").status_code == 200


def test_data_cadastro_uses_application_local_time(client, make_troca):
    before = datetime.now().replace(microsecond=0)

    empresa = client.post(
        "/api/empresas", json={"nome": "Acme", "cnpj": "1", "telefone": "2"}
    ).json()
    troca = make_troca()

    after = datetime.now()
    data_cadastro = datetime.fromisoformat(empresa["data_cadastro"])
    assert before <= data_cadastro <= after
    assert abs((datetime.fromisoformat(troca["data"]) - data_cadastro).total_seconds()) < 60
