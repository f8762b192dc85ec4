# painel/pages/dashboard.py

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo

from painel.api_client import ApiClient
from painel.pages.base import Page
from painel.render import format_table

FUSO_HORARIO = ZoneInfo("America/Sao_Paulo")
STATUS_ATIVOS = ("ativa", "pendente", "Em andamento")


def saudacao(now: Optional[datetime] = None) -> str:
    hour = (now or datetime.now(FUSO_HORARIO)).hour
    if hour < 12:
        return "Bom dia, Admin!"
    if hour < 18:
        return "Boa tarde, Admin!"
    return "Boa noite, Admin!"


def um_mes_antes(moment: datetime) -> datetime:
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _parse_data(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


class DashboardPage(Page):
    title = "Dashboard"
    path = "/dashboard"

    def __init__(self, api: ApiClient):
        super().__init__(api)
        self.categorias: List[Dict[str, Any]] = []
        self.empresas: List[Dict[str, Any]] = []
        self.trocas: List[Dict[str, Any]] = []

    def mount(self) -> None:
        self.fetch_categorias()
        self.fetch_empresas()
        self.fetch_trocas()

    def fetch_categorias(self) -> bool:
        def load():
            self.categorias = self.api.list_categorias()

        return self._run(load, "Erro ao buscar categorias")

    def fetch_empresas(self) -> bool:
        def load():
            self.empresas = self.api.list_empresas()

        return self._run(load, "Erro ao buscar empresas")

    def fetch_trocas(self) -> bool:
        def load():
            self.trocas = self.api.list_trocas()

        return self._run(load, "Erro ao buscar trocas")

    @property
    def total_produtos(self) -> int:
        total = 0
        for categoria in self.categorias:
            try:
                total += int(categoria.get("produtos") or 0)
            except (TypeError, ValueError):
                continue
        return total

    def trocas_ativas(self) -> List[Dict[str, Any]]:
        return [t for t in self.trocas if t.get("status") in STATUS_ATIVOS]

    def trocas_ultimo_mes(self, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        limite = um_mes_antes(now or datetime.now())
        recentes = []
        for troca in self.trocas:
            data = _parse_data(troca.get("data"))
            if data is not None and data >= limite:
                recentes.append(troca)
        return recentes

    def stats(self, now: Optional[datetime] = None) -> Dict[str, int]:
        return {
            "Total de Produtos": self.total_produtos,
            "Empresas Parceiras": len(self.empresas),
            "Categorias": len(self.categorias),
            "Trocas Realizadas": len(self.trocas_ultimo_mes(now)),
        }

    def render(self) -> str:
        parts = [saudacao(), ""]
        parts.extend(f"{title}: {value}" for title, value in self.stats().items())
        parts.append("")
        parts.append("Trocas Recentes")
        parts.append(
            format_table(
                ("Empresas", "Produto", "Status"),
                [
                    (f"{t['empresa_solicitante']} ↔ {t['empresa_receptora']}", t["categoria_solicitante"], t["status"])
                    for t in self.trocas_ativas()
                ],
            )
        )
        parts.append("")
        parts.append("Características por Categoria")
        parts.append(
            format_table(
                ("Categoria", "Empresas Cadastradas", "Produtos"),
                [(c["nome"], c.get("empresas", 0), c.get("produtos", 0)) for c in self.categorias],
            )
        )
        return "\n".join(parts)
