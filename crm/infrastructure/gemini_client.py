# crm/infrastructure/gemini_client.py
#
# Gemini text generation over the public REST API.
#
# Design decisions:
#   - One POST to models/{model}:generateContent over httpx; the transport is
#     injectable (httpx.MockTransport in tests).
#   - An empty api_key means "unconfigured". gerar() then raises
#     GeradorIndisponivel without opening a connection.
#   - Every transport/HTTP/shape problem is raised as GeradorFalhou, including
#     a 200 whose JSON does not follow the candidates/content/parts layout.
#   - A new AsyncClient per call.
from __future__ import annotations

from typing import Any

import httpx

from crm.domain.resumo.gateway import GeradorFalhou, GeradorIndisponivel


class GeminiClient:
    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def configurado(self) -> bool:
        return bool(self._api_key)

    async def gerar(self, prompt: str) -> str:
        if not self.configurado:
            raise GeradorIndisponivel("GEMINI_API_KEY nao configurada")

        url = f"{self._base_url}/models/{self._model}:generateContent"
        body = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=body, headers={"x-goog-api-key": self._api_key})
                response.raise_for_status()
                payload: Any = response.json()
        except httpx.HTTPStatusError as err:
            raise GeradorFalhou(f"Gemini respondeu {err.response.status_code}") from err
        except httpx.HTTPError as err:
            raise GeradorFalhou(f"Falha de transporte ao chamar Gemini: {err}") from err
        except ValueError as err:
            raise GeradorFalhou("Resposta do Gemini nao e JSON") from err

        try:
            texto = _extrair_texto(payload)
        except (AttributeError, TypeError, KeyError, IndexError) as err:
            raise GeradorFalhou("Resposta do Gemini em formato inesperado") from err
        if not texto:
            raise GeradorFalhou("Resposta do Gemini sem texto")
        return texto


def _extrair_texto(payload: Any) -> str:
    """Concatena as parts de texto do primeiro candidato."""
    candidatos = payload.get("candidates") or []
    if not candidatos:
        return ""
    parts = (candidatos[0].get("content") or {}).get("parts") or []
    return "".join(str(p.get("text", "")) for p in parts if isinstance(p, dict))
