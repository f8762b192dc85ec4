# painel/pages/base.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from painel.api_client import ApiClient, ApiError
from painel.render import format_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    kind: str  # "success" | "error"
    message: str


def contains(value: Optional[str], term: str) -> bool:
    """Busca do painel: substring sem diferenciar maiúsculas."""
    return term.lower() in (value or "").lower()


class Page:
    """
    Estado local de uma página: a lista carregada, os campos do formulário
    e as flags loading/error. Toda ação (buscar, criar, editar, excluir)
    passa por `_run`, que liga `loading`, registra o erro como notificação
    e sempre desliga `loading` no final.
    """

    title: str = ""
    path: str = ""

    def __init__(self, api: ApiClient):
        self.api = api
        self.loading = False
        self.error: Optional[str] = None
        self.notifications: List[Notification] = []
        self.search_term = ""

    def mount(self) -> None:
        raise NotImplementedError

    def notify(self, message: str, kind: str = "success") -> None:
        self.notifications.append(Notification(kind=kind, message=message))

    def pop_notifications(self) -> List[Notification]:
        pending, self.notifications = self.notifications, []
        return pending

    def _fail(self, message: str) -> bool:
        self.error = message
        self.notify(message, kind="error")
        return False

    def _run(self, action: Callable[[], Any], fallback_message: str) -> bool:
        self.loading = True
        self.error = None
        try:
            action()
        except ApiError as exc:
            logger.warning("%s: %s", fallback_message, exc.message)
            return self._fail(exc.message or fallback_message)
        finally:
            self.loading = False
        return True

    @staticmethod
    def _replace(items: List[Dict[str, Any]], key: str, row: Dict[str, Any]) -> List[Dict[str, Any]]:
        return [row if item.get(key) == row.get(key) else item for item in items]

    # === Renderização ===

    headers: Sequence[str] = ()

    def rows(self) -> Iterable[Sequence[Any]]:
        return []

    def render(self) -> str:
        return format_table(self.headers, list(self.rows()))
