# crm/application/services/dashboard_service.py
"""Agregados do dashboard. Funcoes puras, zero IO.

Cada inscricao (empresa, categoria) e um negocio independente: uma empresa em
duas categorias soma nos dois totais e duas vezes no total geral.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from types import MappingProxyType

from crm.domain.empresa.entities import Empresa
from crm.domain.empresa.enums import ORDEM_CATEGORIAS, ORDEM_STATUS, CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.services import detalhe_inscrito

LIMITE_RECENTES = 5


@dataclass(frozen=True)
class ResumoCategoria:
    categoria: CategoriaEmpresa
    valor_total: Decimal
    contagem_status: Mapping[StatusEmpresa, int]

    @property
    def total_empresas(self) -> int:
        return sum(self.contagem_status.values())


@dataclass(frozen=True)
class Dashboard:
    valor_total: Decimal
    total_empresas: int
    categorias: tuple[ResumoCategoria, ...]

    def categoria(self, categoria: CategoriaEmpresa) -> ResumoCategoria:
        for resumo in self.categorias:
            if resumo.categoria == categoria:
                return resumo
        raise KeyError(categoria)


@dataclass(frozen=True)
class InteracaoRecente:
    id: str
    data_contato: date
    anotacoes: str
    data_acompanhamento: date
    empresa_id: str
    empresa_nome: str


def calcular_dashboard(empresas: Iterable[Empresa]) -> Dashboard:
    snapshot = list(empresas)
    valor_total = Decimal("0")
    resumos: list[ResumoCategoria] = []
    for categoria in ORDEM_CATEGORIAS:
        valor_categoria = Decimal("0")
        contagem = dict.fromkeys(ORDEM_STATUS, 0)
        for empresa in snapshot:
            detalhe = detalhe_inscrito(empresa, categoria)
            if detalhe is None:
                continue
            valor_categoria += detalhe.valor_operacao
            contagem[detalhe.status] += 1
        valor_total += valor_categoria
        resumos.append(ResumoCategoria(
            categoria=categoria,
            valor_total=valor_categoria,
            contagem_status=MappingProxyType(contagem),
        ))
    return Dashboard(valor_total=valor_total, total_empresas=len(snapshot), categorias=tuple(resumos))


def interacoes_recentes(empresas: Iterable[Empresa], limite: int = LIMITE_RECENTES) -> list[InteracaoRecente]:
    """Interacoes de todas as empresas, da mais recente para a mais antiga.

    sorted() e estavel mesmo com reverse=True: empates de data mantem a ordem
    original (ordem do store, depois ordem de criacao).
    """
    todas = [
        InteracaoRecente(
            id=i.id,
            data_contato=i.data_contato,
            anotacoes=i.anotacoes,
            data_acompanhamento=i.data_acompanhamento,
            empresa_id=empresa.id,
            empresa_nome=empresa.nome,
        )
        for empresa in empresas
        for i in empresa.interacoes
    ]
    return sorted(todas, key=lambda r: r.data_contato, reverse=True)[:limite]


def filtrar_por_status(
    empresas: Iterable[Empresa],
    categoria: CategoriaEmpresa,
    status: StatusEmpresa,
) -> list[Empresa]:
    """Drill-down de um contador do dashboard (somente leitura)."""
    resultado = []
    for empresa in empresas:
        detalhe = detalhe_inscrito(empresa, categoria)
        if detalhe is not None and detalhe.status == status:
            resultado.append(empresa)
    return resultado
