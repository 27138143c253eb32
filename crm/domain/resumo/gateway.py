# crm/domain/resumo/gateway.py
#
# Contract of the external text generator used to summarize a company's
# interaction history.
#
# Design decisions:
#   - The generator only sees a ready-made prompt. The transcript is formatted
#     by ResumoService.
#   - Both failure types are raised by implementations and converted to a
#     fallback sentence by ResumoService. They never reach a route.
from __future__ import annotations

from typing import Protocol


class GeradorIndisponivel(RuntimeError):
    """Gerador sem credencial configurada."""


class GeradorFalhou(RuntimeError):
    """Chamada remota falhou ou devolveu resposta sem texto."""


class GeradorDeResumo(Protocol):
    @property
    def configurado(self) -> bool: ...

    async def gerar(self, prompt: str) -> str: ...
