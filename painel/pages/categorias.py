# painel/pages/categorias.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from painel.api_client import ApiClient
from painel.pages.base import Page, contains


class CategoriasPage(Page):
    title = "Categorias"
    path = "/categorias"
    headers = ("Nome", "Produtos", "Empresas")

    def __init__(self, api: ApiClient):
        super().__init__(api)
        self.categorias: List[Dict[str, Any]] = []
        self.nome = ""
        self.descricao = ""
        self.editing_id: Optional[int] = None

    def mount(self) -> None:
        self.fetch()

    def fetch(self) -> bool:
        def load():
            self.categorias = self.api.list_categorias()

        return self._run(load, "Erro ao buscar categorias")

    def new(self) -> None:
        self.nome = ""
        self.descricao = ""
        self.editing_id = None

    def edit(self, categoria: Dict[str, Any]) -> None:
        self.nome = categoria["nome"]
        self.descricao = categoria.get("descricao") or ""
        self.editing_id = categoria["categoria_id"]

    def submit(self) -> bool:
        if not self.nome:
            return self._fail("Nome da categoria é obrigatório")

        def save():
            if self.editing_id is not None:
                row = self.api.update_categoria(self.editing_id, self.nome, self.descricao or None)
                # A resposta não traz os totais; a renomeação leva as empresas junto
                anterior = next(
                    (c for c in self.categorias if c["categoria_id"] == self.editing_id), {}
                )
                self.categorias = self._replace(self.categorias, "categoria_id", {**anterior, **row})
            else:
                row = self.api.create_categoria(self.nome, self.descricao or None)
                self.categorias = self.categorias + [{"empresas": 0, "produtos": 0, **row}]

        if not self._run(save, "Erro ao salvar categoria"):
            return False
        self.new()
        return True

    def delete(self, categoria_id: int) -> bool:
        def remove():
            self.api.delete_categoria(categoria_id)
            self.categorias = [c for c in self.categorias if c["categoria_id"] != categoria_id]

        return self._run(remove, "Erro ao deletar categoria")

    def filtered(self) -> List[Dict[str, Any]]:
        return [c for c in self.categorias if contains(c["nome"], self.search_term)]

    def rows(self):
        for c in self.filtered():
            yield c["nome"], c.get("produtos", 0), c.get("empresas", 0)
