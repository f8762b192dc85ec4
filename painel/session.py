# painel/session.py

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

USER_KEY = "user"


class LocalStorage:
    """
    Armazenamento chave/valor do painel, no papel do localStorage do navegador.
    Com `path`, os valores persistem num arquivo JSON; sem `path`, só em memória.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._items: Dict[str, str] = {}
        if path and os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                self._items = json.load(f)

    def _flush(self) -> None:
        if not self.path:
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._items, f)

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._flush()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._flush()


class Session:
    """
    Marca de "logado" do painel: o objeto user devolvido pelo /api/login.
    É só conveniência de interface; a API não exige autenticação.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def save_user(self, user: Dict[str, Any]) -> None:
        self.storage.set_item(USER_KEY, json.dumps(user))

    def current_user(self) -> Optional[Dict[str, Any]]:
        raw = self.storage.get_item(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            return None

    def is_logged_in(self) -> bool:
        return self.current_user() is not None

    def clear(self) -> None:
        self.storage.remove_item(USER_KEY)
