# tests/integration/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from crm.application.services.resumo_service import ResumoService
from crm.infrastructure.repositories.memory_empresa_repo import InMemoryEmpresaRepo
from crm.infrastructure.seed import carregar_exemplos


class GeradorFalso:
    """Gerador deterministico: devolve texto fixo e guarda os prompts."""

    configurado = True

    def __init__(self) -> None:
        self.prompts: list[str] = []

    async def gerar(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return "Resumo falso das interacoes."


@pytest.fixture()
def gerador() -> GeradorFalso:
    return GeradorFalso()


@pytest.fixture()
def client(gerador: GeradorFalso) -> Generator[TestClient, None, None]:
    """TestClient com quadro novo (tres empresas de exemplo) a cada teste."""
    from crm.infrastructure import memory_store
    from crm.interfaces.api import dependencies

    repo = InMemoryEmpresaRepo()
    carregar_exemplos(repo)
    memory_store.set_repo(repo)
    dependencies.set_resumo_service(ResumoService(gerador, timeout=5))

    from crm.interfaces.api.main import app
    with TestClient(app) as c:
        yield c

    memory_store.set_repo(None)
    dependencies.set_resumo_service(None)
