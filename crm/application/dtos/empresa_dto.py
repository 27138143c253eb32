# crm/application/dtos/empresa_dto.py
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from crm.domain.empresa.entities import DadosEmpresa, Empresa, Interacao
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.value_objects import DetalheCategoria

# Campo obrigatorio do formulario: vazio ou so espacos e rejeitado.
Obrigatorio = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class DetalheCategoriaDTO(BaseModel):
    status: str
    valor_operacao: str


class InteracaoDTO(BaseModel):
    id: str
    data_contato: str
    anotacoes: str
    data_acompanhamento: str

    @classmethod
    def from_domain(cls, interacao: Interacao) -> InteracaoDTO:
        return cls(
            id=interacao.id,
            data_contato=interacao.data_contato.isoformat(),
            anotacoes=interacao.anotacoes,
            data_acompanhamento=interacao.data_acompanhamento.isoformat(),
        )


class EmpresaDTO(BaseModel):
    id: str
    nome: str
    endereco: str
    email: str
    telefone: str
    setor: str
    descricao: str
    categorias: list[str]
    detalhes: dict[str, DetalheCategoriaDTO]
    interacoes: list[InteracaoDTO]

    @classmethod
    def from_domain(cls, empresa: Empresa) -> EmpresaDTO:
        return cls(
            id=empresa.id,
            nome=empresa.nome,
            endereco=empresa.endereco,
            email=empresa.email,
            telefone=empresa.telefone,
            setor=empresa.setor,
            descricao=empresa.descricao,
            categorias=[c.value for c in empresa.categorias],
            detalhes={
                c.value: DetalheCategoriaDTO(status=d.status.value, valor_operacao=str(d.valor_operacao))
                for c, d in empresa.detalhes.items()
            },
            interacoes=[InteracaoDTO.from_domain(i) for i in empresa.interacoes],
        )


class DetalheCategoriaInputDTO(BaseModel):
    status: StatusEmpresa = StatusEmpresa.PROSPECCAO
    valor_operacao: Decimal = Field(default=Decimal("0"), ge=0)


class EmpresaInputDTO(BaseModel):
    """Formulario de empresa. Email e o unico campo de texto opcional."""

    nome: Obrigatorio
    setor: Obrigatorio
    endereco: Obrigatorio
    telefone: Obrigatorio
    descricao: Obrigatorio
    email: str = ""
    categorias: list[CategoriaEmpresa] = Field(default_factory=list)
    detalhes: dict[CategoriaEmpresa, DetalheCategoriaInputDTO] = Field(default_factory=dict)

    def to_domain(self) -> DadosEmpresa:
        """Raises ValueError se categorias e detalhes nao casarem."""
        return DadosEmpresa(
            nome=self.nome,
            endereco=self.endereco,
            email=self.email,
            telefone=self.telefone,
            setor=self.setor,
            descricao=self.descricao,
            categorias=tuple(self.categorias),
            detalhes={
                c: DetalheCategoria(status=d.status, valor_operacao=d.valor_operacao)
                for c, d in self.detalhes.items()
            },
        )


class DetalheUpdateDTO(BaseModel):
    status: StatusEmpresa | None = None
    valor_operacao: Decimal | None = Field(default=None, ge=0)


class MovimentoDTO(BaseModel):
    categoria: CategoriaEmpresa
    status: StatusEmpresa


class InteracaoInputDTO(BaseModel):
    data_contato: date
    anotacoes: Obrigatorio
    data_acompanhamento: date
