# painel/pages/empresas.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from painel.api_client import ApiClient
from painel.pages.base import Page, contains

FORM_VAZIO: Dict[str, Any] = {
    "nome": "",
    "cnpj": "",
    "endereco": "",
    "telefone": "",
    "email": "",
    "responsavel": "",
    "ramo": "",
    "produtos": 0,
}


class EmpresasPage(Page):
    title = "Empresas"
    path = "/empresas"
    headers = ("Nome", "CNPJ", "Telefone", "Ramo", "Produtos")

    def __init__(self, api: ApiClient):
        super().__init__(api)
        self.empresas: List[Dict[str, Any]] = []
        self.categorias: List[Dict[str, Any]] = []
        self.form: Dict[str, Any] = dict(FORM_VAZIO)
        self.selected: Optional[Dict[str, Any]] = None

    def mount(self) -> None:
        # Buscas independentes: uma falhar não impede a outra
        self.fetch_empresas()
        self.fetch_categorias()

    def fetch_empresas(self) -> bool:
        def load():
            self.empresas = self.api.list_empresas()

        return self._run(load, "Erro ao buscar empresas")

    def fetch_categorias(self) -> bool:
        def load():
            self.categorias = self.api.list_categorias()

        return self._run(load, "Erro ao buscar categorias")

    def ramos(self) -> List[str]:
        """Opções do campo ramo: os nomes das categorias cadastradas."""
        return [c["nome"] for c in self.categorias]

    def reset_form(self) -> None:
        self.form = dict(FORM_VAZIO)
        self.selected = None

    def view(self, empresa: Dict[str, Any]) -> None:
        self.selected = empresa

    def start_edit(self, empresa: Dict[str, Any]) -> None:
        self.selected = empresa
        self.form = {field: empresa.get(field) or default for field, default in FORM_VAZIO.items()}

    def _validate(self) -> Optional[str]:
        if not self.form["nome"] or not self.form["cnpj"] or not self.form["telefone"]:
            return "Nome, CNPJ e telefone são obrigatórios"
        return None

    def create(self) -> bool:
        error = self._validate()
        if error:
            return self._fail(error)

        def save():
            row = self.api.create_empresa(dict(self.form))
            self.empresas = self.empresas + [row]

        if not self._run(save, "Erro ao criar empresa"):
            return False
        self.notify("Empresa cadastrada com sucesso!")
        self.reset_form()
        return True

    def update(self) -> bool:
        if self.selected is None:
            return False
        error = self._validate()
        if error:
            return self._fail(error)
        empresa_id = self.selected["empresa_id"]

        def save():
            row = self.api.update_empresa(empresa_id, dict(self.form))
            self.empresas = self._replace(self.empresas, "empresa_id", row)

        if not self._run(save, "Erro ao atualizar empresa"):
            return False
        self.notify("Empresa atualizada com sucesso!")
        self.reset_form()
        return True

    def filtered(self) -> List[Dict[str, Any]]:
        return [e for e in self.empresas if contains(e["nome"], self.search_term)]

    def rows(self):
        for e in self.filtered():
            yield e["nome"], e["cnpj"], e["telefone"], e.get("ramo"), e.get("produtos", 0)
