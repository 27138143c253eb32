# crm/application/services/resumo_service.py
#
# Summarization of a company's interaction history through an external text
# generator.
#
# Design decisions:
#   - The caller never sees an exception from the generator. Unconfigured
#     credential, empty history, remote failure and timeout all become a fixed
#     Portuguese sentence, returned as the summary text itself.
#   - The empty-history check happens before any remote call.
#   - The transcript is formatted here, deterministically, and whatever text
#     the generator returns is surfaced untouched.
#   - One summary in flight per company. A second trigger for the same company
#     raises ResumoEmAndamento (the UI keeps the button disabled meanwhile).
#     Other companies and every store mutation stay available.
#   - asyncio.wait_for bounds the wait; the original board had no timeout.
from __future__ import annotations

import asyncio
from collections.abc import Sequence

from crm.domain.empresa.entities import Empresa, Interacao
from crm.domain.resumo.gateway import GeradorDeResumo, GeradorFalhou, GeradorIndisponivel
from crm.infrastructure.log import log

MENSAGEM_NAO_CONFIGURADO = "A chave da API Gemini não está configurada. Não é possível gerar o resumo."
MENSAGEM_SEM_INTERACOES = "Nenhuma interação registrada para resumir."
MENSAGEM_ERRO = "Ocorreu um erro ao tentar gerar o resumo. Por favor, tente novamente."

_INSTRUCOES = (
    "Resuma as seguintes interações com um cliente de forma concisa e objetiva.\n"
    "Destaque os pontos principais e o sentimento geral das conversas.\n"
    "O resumo deve ser em português.\n"
)


class ResumoEmAndamento(RuntimeError):
    def __init__(self, empresa_id: str) -> None:
        super().__init__(f"Resumo ja em andamento para a empresa {empresa_id}")
        self.empresa_id = empresa_id


def formatar_historico(interacoes: Sequence[Interacao]) -> str:
    return "\n\n".join(
        f"- Data do Contato: {i.data_contato.isoformat()}\n"
        f"  Anotações: {i.anotacoes}\n"
        f"  Acompanhamento: {i.data_acompanhamento.isoformat()}"
        for i in interacoes
    )


def montar_prompt(interacoes: Sequence[Interacao]) -> str:
    return f"{_INSTRUCOES}\nHistórico de Interações:\n{formatar_historico(interacoes)}\n"


class ResumoService:
    def __init__(self, gerador: GeradorDeResumo | None, timeout: float = 30.0) -> None:
        self._gerador = gerador
        self._timeout = timeout
        self._em_andamento: set[str] = set()

    @property
    def configurado(self) -> bool:
        return self._gerador is not None and self._gerador.configurado

    def em_andamento(self, empresa_id: str) -> bool:
        return empresa_id in self._em_andamento

    def pode_resumir(self, empresa: Empresa) -> bool:
        """Estado do botao de resumo: desabilitado sem interacoes ou com resumo pendente."""
        return bool(empresa.interacoes) and not self.em_andamento(empresa.id)

    async def resumir(self, interacoes: Sequence[Interacao]) -> str:
        if self._gerador is None or not self._gerador.configurado:
            log("Gerador de resumo nao configurado; resumo desabilitado", "AVISO")
            return MENSAGEM_NAO_CONFIGURADO
        if not interacoes:
            return MENSAGEM_SEM_INTERACOES

        prompt = montar_prompt(interacoes)
        try:
            return await asyncio.wait_for(self._gerador.gerar(prompt), timeout=self._timeout)
        except GeradorIndisponivel:
            log("Gerador de resumo indisponivel", "AVISO")
            return MENSAGEM_NAO_CONFIGURADO
        except GeradorFalhou as err:
            log(f"Erro ao gerar resumo: {err}", "ERRO")
            return MENSAGEM_ERRO
        except TimeoutError:
            log(f"Resumo excedeu {self._timeout}s", "ERRO")
            return MENSAGEM_ERRO
        except Exception as err:
            log(f"Erro inesperado ao gerar resumo: {type(err).__name__}: {err}", "ERRO")
            return MENSAGEM_ERRO

    async def resumir_empresa(self, empresa: Empresa) -> str:
        if empresa.id in self._em_andamento:
            raise ResumoEmAndamento(empresa.id)
        self._em_andamento.add(empresa.id)
        try:
            # Tupla imutavel: mutacoes no store durante a chamada nao afetam o historico enviado.
            return await self.resumir(empresa.interacoes)
        finally:
            self._em_andamento.discard(empresa.id)
