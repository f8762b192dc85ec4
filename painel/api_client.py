# painel/api_client.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001"


class ApiError(Exception):
    """Resposta de erro da API (ou falha de rede, com status_code None)."""

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class ApiClient:
    """
    Cliente das rotas /api do backend. Cada método faz uma requisição
    independente e devolve o JSON já decodificado.

    `http` permite injetar qualquer httpx.Client (nos testes, o TestClient
    do FastAPI apontando para a própria aplicação).
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, http: Optional[httpx.Client] = None):
        self._owns_http = http is None
        self._http = http if http is not None else httpx.Client(base_url=base_url)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as exc:
            logger.error("%s %s falhou: %s", method, path, exc)
            raise ApiError(None, "Não foi possível conectar ao servidor") from exc

        if response.is_error:
            try:
                message = response.json().get("error")
            except ValueError:
                message = None
            raise ApiError(response.status_code, message or f"Erro HTTP {response.status_code}")

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # === Auth ===

    def login(self, login: str, senha: str) -> Dict[str, Any]:
        return self._request("POST", "/api/login", {"login": login, "senha": senha})

    # === Categorias ===

    def list_categorias(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/categorias")

    def create_categoria(self, nome: str, descricao: Optional[str] = None) -> Dict[str, Any]:
        return self._request("POST", "/api/categorias", {"nome": nome, "descricao": descricao})

    def update_categoria(self, categoria_id: int, nome: str, descricao: Optional[str] = None) -> Dict[str, Any]:
        return self._request(
            "PUT", f"/api/categorias/{categoria_id}", {"nome": nome, "descricao": descricao}
        )

    def delete_categoria(self, categoria_id: int) -> None:
        self._request("DELETE", f"/api/categorias/{categoria_id}")

    # === Empresas ===

    def list_empresas(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/empresas")

    def get_empresa(self, empresa_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/empresas/{empresa_id}")

    def create_empresa(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/empresas", data)

    def update_empresa(self, empresa_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/api/empresas/{empresa_id}", data)

    # === Trocas ===

    def list_trocas(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/trocas")

    def get_troca(self, troca_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/trocas/{troca_id}")

    def create_troca(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/trocas", data)

    def update_troca_status(self, troca_id: int, status: str) -> Dict[str, Any]:
        return self._request("PUT", f"/api/trocas/{troca_id}", {"status": status})

    def delete_troca(self, troca_id: int) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/trocas/{troca_id}")

    # === Comunicações ===

    def list_comunicacoes(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/comunicacoes")

    def get_comunicacao(self, contato_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/comunicacoes/{contato_id}")

    def create_comunicacao(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/comunicacoes", data)
