# crm/application/dtos/quadro_dto.py
from __future__ import annotations

from pydantic import BaseModel

from crm.application.services.quadro_service import ColunaQuadro, Quadro
from crm.domain.empresa.entities import Empresa
from crm.domain.empresa.enums import CategoriaEmpresa


class CartaoEmpresaDTO(BaseModel):
    """Cartao arrastavel: mostra o valor da operacao na categoria da coluna."""

    id: str
    nome: str
    setor: str
    valor_operacao: str

    @classmethod
    def from_domain(cls, empresa: Empresa, categoria: CategoriaEmpresa) -> CartaoEmpresaDTO:
        detalhe = empresa.detalhe(categoria)
        return cls(
            id=empresa.id,
            nome=empresa.nome,
            setor=empresa.setor,
            valor_operacao=str(detalhe.valor_operacao) if detalhe else "0",
        )


class CelulaDTO(BaseModel):
    status: str
    total: int
    empresas: list[CartaoEmpresaDTO]


class ColunaDTO(BaseModel):
    categoria: str
    total: int
    celulas: list[CelulaDTO]

    @classmethod
    def from_domain(cls, coluna: ColunaQuadro) -> ColunaDTO:
        return cls(
            categoria=coluna.categoria.value,
            total=coluna.total,
            celulas=[
                CelulaDTO(
                    status=celula.status.value,
                    total=len(celula.empresas),
                    empresas=[CartaoEmpresaDTO.from_domain(e, coluna.categoria) for e in celula.empresas],
                )
                for celula in coluna.celulas
            ],
        )


class QuadroDTO(BaseModel):
    colunas: list[ColunaDTO]

    @classmethod
    def from_domain(cls, quadro: Quadro) -> QuadroDTO:
        return cls(colunas=[ColunaDTO.from_domain(c) for c in quadro.colunas])
