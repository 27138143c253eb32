# crm/application/dtos/dashboard_dto.py
from __future__ import annotations

from pydantic import BaseModel

from crm.application.services.dashboard_service import Dashboard, InteracaoRecente, ResumoCategoria
from crm.domain.empresa.entities import Empresa
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa


class ResumoCategoriaDTO(BaseModel):
    categoria: str
    valor_total: str
    total_empresas: int
    contagem_status: dict[str, int]

    @classmethod
    def from_domain(cls, resumo: ResumoCategoria) -> ResumoCategoriaDTO:
        return cls(
            categoria=resumo.categoria.value,
            valor_total=str(resumo.valor_total),
            total_empresas=resumo.total_empresas,
            contagem_status={s.value: n for s, n in resumo.contagem_status.items()},
        )


class InteracaoRecenteDTO(BaseModel):
    id: str
    data_contato: str
    anotacoes: str
    data_acompanhamento: str
    empresa_id: str
    empresa_nome: str

    @classmethod
    def from_domain(cls, recente: InteracaoRecente) -> InteracaoRecenteDTO:
        return cls(
            id=recente.id,
            data_contato=recente.data_contato.isoformat(),
            anotacoes=recente.anotacoes,
            data_acompanhamento=recente.data_acompanhamento.isoformat(),
            empresa_id=recente.empresa_id,
            empresa_nome=recente.empresa_nome,
        )


class DashboardDTO(BaseModel):
    valor_total: str
    total_empresas: int
    categorias: list[ResumoCategoriaDTO]
    interacoes_recentes: list[InteracaoRecenteDTO]

    @classmethod
    def from_domain(cls, dashboard: Dashboard, recentes: list[InteracaoRecente]) -> DashboardDTO:
        return cls(
            valor_total=str(dashboard.valor_total),
            total_empresas=dashboard.total_empresas,
            categorias=[ResumoCategoriaDTO.from_domain(r) for r in dashboard.categorias],
            interacoes_recentes=[InteracaoRecenteDTO.from_domain(i) for i in recentes],
        )


class EmpresaFiltradaDTO(BaseModel):
    id: str
    nome: str
    setor: str
    email: str
    telefone: str
    valor_operacao: str


class FiltroStatusDTO(BaseModel):
    categoria: str
    status: str
    empresas: list[EmpresaFiltradaDTO]

    @classmethod
    def from_domain(
        cls,
        categoria: CategoriaEmpresa,
        status: StatusEmpresa,
        empresas: list[Empresa],
    ) -> FiltroStatusDTO:
        itens = []
        for e in empresas:
            detalhe = e.detalhe(categoria)
            itens.append(EmpresaFiltradaDTO(
                id=e.id,
                nome=e.nome,
                setor=e.setor,
                email=e.email,
                telefone=e.telefone,
                valor_operacao=str(detalhe.valor_operacao) if detalhe else "0",
            ))
        return cls(categoria=categoria.value, status=status.value, empresas=itens)
