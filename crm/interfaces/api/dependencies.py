# crm/interfaces/api/dependencies.py
from __future__ import annotations

from crm.application.services.empresa_store import EmpresaStore
from crm.application.services.resumo_service import ResumoService
from crm.infrastructure.config import get_settings
from crm.infrastructure.gemini_client import GeminiClient
from crm.infrastructure.memory_store import get_repo

# Compartilhado entre requests: guarda os resumos em andamento.
_resumo_service: ResumoService | None = None


def get_empresa_store() -> EmpresaStore:
    return EmpresaStore(get_repo())


def get_resumo_service() -> ResumoService:
    global _resumo_service  # noqa: PLW0603
    if _resumo_service is None:
        settings = get_settings()
        gerador = GeminiClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout=settings.resumo_timeout,
        )
        _resumo_service = ResumoService(gerador, timeout=settings.resumo_timeout)
    return _resumo_service


def set_resumo_service(service: ResumoService | None) -> None:
    """Usado em testes para injetar um gerador falso."""
    global _resumo_service  # noqa: PLW0603
    _resumo_service = service
