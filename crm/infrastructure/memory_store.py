# crm/infrastructure/memory_store.py
from __future__ import annotations

from .config import get_settings
from .log import log
from .repositories.memory_empresa_repo import InMemoryEmpresaRepo
from .seed import carregar_exemplos

_repo: InMemoryEmpresaRepo | None = None


def get_repo() -> InMemoryEmpresaRepo:
    global _repo  # noqa: PLW0603
    if _repo is None:
        _repo = InMemoryEmpresaRepo()
        if get_settings().seed_exemplos:
            carregar_exemplos(_repo)
            log(f"Quadro iniciado com {len(_repo.listar())} empresas de exemplo")
    return _repo


def set_repo(repo: InMemoryEmpresaRepo | None) -> None:
    """Usado em testes para injetar um repo limpo (None recria no proximo get_repo)."""
    global _repo  # noqa: PLW0603
    _repo = repo
