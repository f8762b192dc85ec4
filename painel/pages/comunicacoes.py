# painel/pages/comunicacoes.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from painel.api_client import ApiClient
from painel.pages.base import Page, contains

TODOS = "todos"
TELEFONE = "Telefone"
MENSAGEM = "Mensagem"
SEM_TROCA = "nenhuma"

FORM_VAZIO: Dict[str, Any] = {
    "troca_id": SEM_TROCA,
    "empresa_origem_id": "",
    "empresa_destino_id": "",
    "assunto": "",
    "data_contato": "",
    "duracao": "",
    "tipo": MENSAGEM,
}


def tipo_label(comunicacao: Dict[str, Any]) -> str:
    """Chamada quando há duração, mensagem quando não há."""
    return "Chamada" if comunicacao.get("duracao") else "Mensagem"


class ComunicacoesPage(Page):
    title = "Comunicações"
    path = "/comunicacoes"
    headers = ("Tipo", "Origem", "Destino", "Assunto", "Data", "Duração")

    def __init__(self, api: ApiClient):
        super().__init__(api)
        self.comunicacoes: List[Dict[str, Any]] = []
        self.empresas: List[Dict[str, Any]] = []
        self.trocas: List[Dict[str, Any]] = []
        self.filter_tipo = TODOS
        self.form: Dict[str, Any] = dict(FORM_VAZIO)
        self.selected: Optional[Dict[str, Any]] = None

    def mount(self) -> None:
        self.fetch_comunicacoes()
        self.fetch_empresas()
        self.fetch_trocas()

    def fetch_comunicacoes(self) -> bool:
        def load():
            self.comunicacoes = self.api.list_comunicacoes()

        return self._run(load, "Erro ao buscar comunicações")

    def fetch_empresas(self) -> bool:
        def load():
            self.empresas = self.api.list_empresas()

        return self._run(load, "Erro ao buscar empresas")

    def fetch_trocas(self) -> bool:
        def load():
            self.trocas = self.api.list_trocas()

        return self._run(load, "Erro ao buscar trocas")

    def reset_form(self) -> None:
        self.form = dict(FORM_VAZIO)

    def destino_options(self) -> List[Dict[str, Any]]:
        """A empresa de destino não pode ser a própria origem."""
        origem = str(self.form["empresa_origem_id"])
        return [e for e in self.empresas if str(e["empresa_id"]) != origem]

    def _nome_empresa(self, empresa_id: Any) -> str:
        for empresa in self.empresas:
            if str(empresa["empresa_id"]) == str(empresa_id):
                return empresa["nome"]
        return "Desconhecido"

    def create(self) -> bool:
        form = self.form
        if not form["empresa_origem_id"] or not form["empresa_destino_id"] or not form["assunto"]:
            return self._fail("Empresa origem, empresa destino e assunto são obrigatórios.")

        troca_id = form["troca_id"]
        payload = {
            "troca_id": None if troca_id in (SEM_TROCA, "", None) else int(troca_id),
            "empresa_origem_id": int(form["empresa_origem_id"]),
            "empresa_destino_id": int(form["empresa_destino_id"]),
            "assunto": form["assunto"],
            "data_contato": form["data_contato"] or None,
            # Mensagem não tem duração; é a ausência dela que define o tipo
            "duracao": (form["duracao"] or None) if form["tipo"] == TELEFONE else None,
        }

        def save():
            row = self.api.create_comunicacao(payload)
            # O POST devolve os ids; a listagem mostra os nomes
            self.comunicacoes = self.comunicacoes + [
                {
                    "contato_id": row["contato_id"],
                    "troca_id": row.get("troca_id"),
                    "empresa_origem": self._nome_empresa(row["empresa_origem_id"]),
                    "empresa_destino": self._nome_empresa(row["empresa_destino_id"]),
                    "assunto": row["assunto"],
                    "data_contato": row["data_contato"],
                    "duracao": row.get("duracao"),
                }
            ]

        if not self._run(save, "Erro ao criar comunicação."):
            return False
        self.reset_form()
        return True

    def details(self, contato_id: int) -> bool:
        def load():
            self.selected = self.api.get_comunicacao(contato_id)

        return self._run(load, "Erro ao buscar detalhes da comunicação")

    def filtered(self) -> List[Dict[str, Any]]:
        def matches(c: Dict[str, Any]) -> bool:
            if not (
                contains(c.get("empresa_origem"), self.search_term)
                or contains(c.get("empresa_destino"), self.search_term)
                or contains(c.get("assunto"), self.search_term)
            ):
                return False
            if self.filter_tipo == TELEFONE:
                return bool(c.get("duracao"))
            if self.filter_tipo == MENSAGEM:
                return not c.get("duracao")
            return True

        return [c for c in self.comunicacoes if matches(c)]

    def rows(self):
        for c in self.filtered():
            yield (
                tipo_label(c),
                c["empresa_origem"],
                c["empresa_destino"],
                c["assunto"],
                (c.get("data_contato") or "")[:16].replace("T", " "),
                c.get("duracao"),
            )
