"""
Painel administrativo do EcoStock em modo texto.
Uso: python -m painel [--api http://localhost:3001] [--storage ~/.ecostock/painel.json]

Comandos:
  login <login> <senha>        entra e abre Categorias
  logout                       remove a marca de login
  ir <caminho>                 /dashboard, /empresas, /categorias, /trocas, /comunicacoes
  buscar [termo]               filtra a lista da página atual
  categoria <nome> [descricao] cadastra categoria (página Categorias)
  empresa <nome> <cnpj> <telefone> [ramo]
                               cadastra empresa (página Empresas)
  troca <solicitante> <receptora> <categoria_sol> <categoria_rec>
                               inicia troca (página Trocas)
  status <troca_id> <status>   altera o status da troca (página Trocas)
  excluir <id>                 exclui categoria ou troca da página atual
  ajuda | sair
"""

import argparse
import logging
import os
import shlex
import sys
from typing import Callable, Dict, Iterable, List, Optional, TextIO

import httpx

from painel.api_client import DEFAULT_BASE_URL, ApiClient
from painel.layout import AppLayout
from painel.pages.categorias import CategoriasPage
from painel.pages.empresas import EmpresasPage
from painel.pages.trocas import TrocasPage
from painel.session import LocalStorage, Session

DEFAULT_STORAGE = os.path.join(os.path.expanduser("~"), ".ecostock", "painel.json")


class Console:
    """Interpreta os comandos digitados e imprime a página ativa após cada um."""

    def __init__(self, layout: AppLayout, out: TextIO):
        self.layout = layout
        self.out = out
        self.comandos: Dict[str, Callable[[List[str]], None]] = {
            "login": self.login,
            "logout": self.logout,
            "ir": self.ir,
            "buscar": self.buscar,
            "categoria": self.categoria,
            "empresa": self.empresa,
            "troca": self.troca,
            "status": self.status,
            "excluir": self.excluir,
        }

    def write(self, text: str = "") -> None:
        print(text, file=self.out)

    def show(self) -> None:
        pages = [self.layout.login_page]
        if self.layout.current is not self.layout.login_page:
            pages.append(self.layout.current)
        for n in [n for page in pages for n in page.pop_notifications()]:
            self.write(f"[{'ERRO' if n.kind == 'error' else 'OK'}] {n.message}")
        self.write(self.layout.render())
        self.write()

    def execute(self, line: str) -> bool:
        """Executa uma linha. Devolve False quando o usuário pede para sair."""
        try:
            parts = shlex.split(line)
        except ValueError as exc:
            self.write(f"Comando inválido: {exc}")
            return True
        if not parts:
            return True

        name, args = parts[0].lower(), parts[1:]
        if name == "sair":
            return False
        if name == "ajuda":
            self.write(__doc__.strip())
            return True

        comando = self.comandos.get(name)
        if comando is None:
            self.write(f"Comando desconhecido: {name} (digite ajuda)")
            return True
        try:
            comando(args)
        except (IndexError, ValueError):
            self.write(f"Argumentos inválidos para {name} (digite ajuda)")
            return True
        self.show()
        return True

    def run(self, lines: Iterable[str]) -> None:
        self.show()
        for line in lines:
            if not self.execute(line):
                break

    # === Comandos ===

    def login(self, args: List[str]) -> None:
        login, senha = args[0], args[1]
        # Em caso de falha o painel continua na tela de login
        self.layout.navigate("/")
        self.layout.login(login, senha)

    def logout(self, args: List[str]) -> None:
        self.layout.logout()

    def ir(self, args: List[str]) -> None:
        if self.layout.navigate(args[0]) is None:
            self.write(f"Página não encontrada: {args[0]}")

    def buscar(self, args: List[str]) -> None:
        self.layout.current.search_term = " ".join(args)

    def _page(self, kind):
        page = self.layout.current
        if not isinstance(page, kind):
            self.write(f"Comando disponível apenas na página {kind.title}")
            return None
        return page

    def categoria(self, args: List[str]) -> None:
        page = self._page(CategoriasPage)
        if page is None:
            return
        page.new()
        page.nome = args[0]
        page.descricao = args[1] if len(args) > 1 else ""
        page.submit()

    def empresa(self, args: List[str]) -> None:
        page = self._page(EmpresasPage)
        if page is None:
            return
        page.reset_form()
        page.form.update(nome=args[0], cnpj=args[1], telefone=args[2])
        if len(args) > 3:
            page.form["ramo"] = args[3]
        page.create()

    def troca(self, args: List[str]) -> None:
        page = self._page(TrocasPage)
        if page is None:
            return
        page.reset_form()
        page.form.update(
            empresa_solicitante=args[0],
            empresa_receptora=args[1],
            categoria_solicitante=args[2],
            categoria_receptora=args[3],
        )
        page.create()

    def status(self, args: List[str]) -> None:
        page = self._page(TrocasPage)
        if page is None:
            return
        page.edit_status(int(args[0]), " ".join(args[1:]))

    def excluir(self, args: List[str]) -> None:
        page = self.layout.current
        if not isinstance(page, (CategoriasPage, TrocasPage)):
            self.write("Comando disponível apenas nas páginas Categorias e Trocas")
            return
        page.delete(int(args[0]))


def build_layout(
    base_url: str, storage_path: Optional[str], http: Optional[httpx.Client] = None
) -> AppLayout:
    api = ApiClient(base_url=base_url, http=http)
    return AppLayout(api, Session(LocalStorage(storage_path)))


def main(argv=None, lines: Optional[Iterable[str]] = None, out: Optional[TextIO] = None,
         http: Optional[httpx.Client] = None) -> int:
    parser = argparse.ArgumentParser(description="Painel administrativo do EcoStock")
    parser.add_argument("--api", default=os.getenv("ECOSTOCK_API_URL", DEFAULT_BASE_URL))
    parser.add_argument("--storage", default=os.getenv("ECOSTOCK_PAINEL_STORAGE", DEFAULT_STORAGE))
    args = parser.parse_args(argv)

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    layout = build_layout(args.api, args.storage or None, http=http)
    console = Console(layout, out or sys.stdout)
    # Com a marca de login salva, o painel já abre em Categorias
    if layout.session.is_logged_in():
        layout.navigate("/categorias")
    try:
        console.run(lines if lines is not None else _prompt())
    finally:
        layout.api.close()
    return 0


def _prompt() -> Iterable[str]:
    while True:
        try:
            yield input("ecostock> ")
        except EOFError:
            return


if __name__ == "__main__":
    sys.exit(main())
