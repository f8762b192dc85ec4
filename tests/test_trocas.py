from datetime import datetime


def test_create_troca_defaults(client):
    before = datetime.now()

    response = client.post(
        "/api/trocas",
        json={
            "empresa_solicitante": "Acme",
            "empresa_receptora": "Globex",
            "categoria_solicitante": "Eletrônicos",
            "categoria_receptora": "Alimentos",
            "data": "",
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["troca_id"], int)
    assert body["status"] == "pendente"
    assert body["observacoes"] is None
    assert datetime.fromisoformat(body["data"]) >= before.replace(microsecond=0)


def test_create_troca_keeps_given_values(make_troca):
    body = make_troca(data="2024-05-01T10:30:00", status="Em andamento", observacoes="Lote 1")

    assert body["data"] == "2024-05-01T10:30:00"
    assert body["status"] == "Em andamento"
    assert body["observacoes"] == "Lote 1"


def test_create_troca_requires_empresas_and_categorias(client):
    base = {
        "empresa_solicitante": "Acme",
        "empresa_receptora": "Globex",
        "categoria_solicitante": "Eletrônicos",
        "categoria_receptora": "Alimentos",
    }
    for missing in base:
        payload = {k: v for k, v in base.items() if k != missing}
        response = client.post("/api/trocas", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Empresa solicitante, receptora e categorias são obrigatórias"}


def test_create_troca_status_length_limit(client, make_troca):
    assert make_troca(status="x" * 50)["status"] == "x" * 50

    response = client.post(
        "/api/trocas",
        json={
            "empresa_solicitante": "Acme",
            "empresa_receptora": "Globex",
            "categoria_solicitante": "Eletrônicos",
            "categoria_receptora": "Alimentos",
            "status": "x" * 51,
        },
    )
    assert response.status_code == 400
    assert response.json() == {"error": "O status não pode ter mais de 50 caracteres"}


def test_list_and_get_troca(client, make_troca):
    troca = make_troca()

    assert client.get("/api/trocas").json() == [troca]
    assert client.get(f"/api/trocas/{troca['troca_id']}").json() == troca
    assert client.get("/api/trocas/9999").status_code == 404


def test_update_troca_only_changes_status(client, make_troca):
    troca = make_troca()

    response = client.put(
        f"/api/trocas/{troca['troca_id']}",
        json={**troca, "status": "Concluída", "empresa_receptora": "Outra"},
    )

    assert response.status_code == 200
    assert response.json() == {**troca, "status": "Concluída"}


def test_update_troca_status_validation(client, make_troca):
    troca = make_troca()
    url = f"/api/trocas/{troca['troca_id']}"

    assert client.put(url, json={}).json() == {"error": "Status é obrigatório"}
    assert client.put(url, json={"status": "x" * 51}).status_code == 400
    assert client.put(url, json={"status": "x" * 50}).status_code == 200
    assert client.put("/api/trocas/9999", json={"status": "ativa"}).status_code == 404


def test_delete_troca_returns_message(client, make_troca):
    troca = make_troca()

    response = client.delete(f"/api/trocas/{troca['troca_id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Troca excluída com sucesso"}
    assert client.get(f"/api/trocas/{troca['troca_id']}").status_code == 404


def test_delete_unknown_troca_returns_404(client):
    response = client.delete("/api/trocas/9999")

    assert response.status_code == 404
    assert response.json() == {"error": "Troca não encontrada"}


def test_delete_troca_keeps_linked_comunicacoes(client, make_troca, make_empresa):
    origem = make_empresa("Acme")
    destino = make_empresa("Globex")
    troca = make_troca()
    contato = client.post(
        "/api/comunicacoes",
        json={
            "troca_id": troca["troca_id"],
            "empresa_origem_id": origem["empresa_id"],
            "empresa_destino_id": destino["empresa_id"],
            "assunto": "Proposta",
        },
    ).json()

    client.delete(f"/api/trocas/{troca['troca_id']}")

    detalhe = client.get(f"/api/comunicacoes/{contato['contato_id']}").json()
    assert detalhe["troca_id"] is None
