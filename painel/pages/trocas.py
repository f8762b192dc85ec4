# painel/pages/trocas.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from painel.api_client import ApiClient
from painel.pages.base import Page, contains

STATUS_MAX_LENGTH = 50
TODOS = "todos"

FORM_VAZIO: Dict[str, Any] = {
    "empresa_solicitante": "",
    "empresa_receptora": "",
    "data": "",
    "status": "pendente",
    "observacoes": "",
    "categoria_solicitante": "",
    "categoria_receptora": "",
}


class TrocasPage(Page):
    title = "Trocas"
    path = "/trocas"
    headers = ("ID", "Solicitante", "Receptora", "Categorias", "Data", "Status")

    def __init__(self, api: ApiClient):
        super().__init__(api)
        self.trocas: List[Dict[str, Any]] = []
        self.empresas: List[Dict[str, Any]] = []
        self.categorias: List[Dict[str, Any]] = []
        self.filter_solicitante = TODOS
        self.filter_receptora = TODOS
        self.form: Dict[str, Any] = dict(FORM_VAZIO)
        self.selected: Optional[Dict[str, Any]] = None

    def mount(self) -> None:
        self.fetch_trocas()
        self.fetch_empresas()
        self.fetch_categorias()

    def fetch_trocas(self) -> bool:
        def load():
            self.trocas = self.api.list_trocas()

        return self._run(load, "Erro ao buscar trocas")

    def fetch_empresas(self) -> bool:
        def load():
            self.empresas = self.api.list_empresas()

        return self._run(load, "Erro ao buscar empresas")

    def fetch_categorias(self) -> bool:
        def load():
            self.categorias = self.api.list_categorias()

        return self._run(load, "Erro ao buscar categorias")

    def reset_form(self) -> None:
        self.form = dict(FORM_VAZIO)

    def receptora_options(self) -> List[Dict[str, Any]]:
        """A empresa receptora não pode ser a própria solicitante."""
        solicitante = self.form["empresa_solicitante"]
        return [e for e in self.empresas if e["nome"] != solicitante]

    def create(self) -> bool:
        if len(self.form["status"] or "") > STATUS_MAX_LENGTH:
            return self._fail(f"O status não pode ter mais de {STATUS_MAX_LENGTH} caracteres.")
        if not self.form["empresa_solicitante"] or not self.form["empresa_receptora"]:
            return self._fail("As empresas solicitante e receptora são obrigatórias.")
        if not self.form["categoria_solicitante"] or not self.form["categoria_receptora"]:
            return self._fail("As categorias de ambas as empresas são obrigatórias.")

        def save():
            row = self.api.create_troca(dict(self.form))
            self.trocas = self.trocas + [row]

        if not self._run(save, "Erro ao criar troca."):
            return False
        self.reset_form()
        return True

    def details(self, troca_id: int) -> bool:
        def load():
            self.selected = self.api.get_troca(troca_id)

        return self._run(load, "Erro ao buscar detalhes da troca")

    def edit_status(self, troca_id: int, status: str) -> bool:
        if not status:
            return self._fail("Status é obrigatório.")
        if len(status) > STATUS_MAX_LENGTH:
            return self._fail(f"O status não pode ter mais de {STATUS_MAX_LENGTH} caracteres.")

        def save():
            row = self.api.update_troca_status(troca_id, status)
            self.trocas = self._replace(self.trocas, "troca_id", row)
            if self.selected and self.selected.get("troca_id") == troca_id:
                self.selected = row

        return self._run(save, "Erro ao atualizar status.")

    def delete(self, troca_id: int) -> bool:
        def remove():
            response = self.api.delete_troca(troca_id)
            self.trocas = [t for t in self.trocas if t["troca_id"] != troca_id]
            if self.selected and self.selected.get("troca_id") == troca_id:
                self.selected = None
            if response and response.get("message"):
                self.notify(response["message"])

        return self._run(remove, "Erro ao deletar troca.")

    def filtered(self) -> List[Dict[str, Any]]:
        def matches(troca: Dict[str, Any]) -> bool:
            if not (
                contains(troca["empresa_solicitante"], self.search_term)
                or contains(troca["empresa_receptora"], self.search_term)
            ):
                return False
            if self.filter_solicitante != TODOS and troca["empresa_solicitante"] != self.filter_solicitante:
                return False
            if self.filter_receptora != TODOS and troca["empresa_receptora"] != self.filter_receptora:
                return False
            return True

        return [t for t in self.trocas if matches(t)]

    def rows(self):
        for t in self.filtered():
            yield (
                t["troca_id"],
                t["empresa_solicitante"],
                t["empresa_receptora"],
                f"{t['categoria_solicitante']} ↔ {t['categoria_receptora']}",
                (t.get("data") or "")[:10],
                t["status"],
            )
