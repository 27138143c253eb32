# crm/domain/empresa/entities.py
#
# Company aggregate for the CRM board.
#
# Design decisions:
#   - Everything is a frozen dataclass. The store replaces whole Empresa
#     instances on every mutation; a snapshot held by a reader never changes.
#   - The editable part of a company (the edit form) lives in DadosEmpresa.
#     Id and interactions are outside it.
#   - detalhes is wrapped in a MappingProxyType: callers read it like a dict
#     but cannot assign into it.
#
# Invariants:
#   - detalhes has a key for C iff C is in categorias (checked on every
#     construction, which covers every mutation path).
#   - categorias has no duplicates; its order is enrolment order.
#   - interacoes is append-only, in creation order.
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from types import MappingProxyType

from .enums import CategoriaEmpresa, StatusEmpresa
from .value_objects import DETALHE_PADRAO, DetalheCategoria


@dataclass(frozen=True)
class Interacao:
    id: str
    data_contato: date
    anotacoes: str
    data_acompanhamento: date


@dataclass(frozen=True)
class DadosEmpresa:
    """Atributos editaveis de uma empresa, incluindo o conjunto de categorias."""

    nome: str
    endereco: str = ""
    email: str = ""
    telefone: str = ""
    setor: str = ""
    descricao: str = ""
    categorias: tuple[CategoriaEmpresa, ...] = ()
    detalhes: Mapping[CategoriaEmpresa, DetalheCategoria] = field(
        default_factory=lambda: MappingProxyType({}),
    )

    def __post_init__(self) -> None:
        categorias = tuple(CategoriaEmpresa(c) for c in self.categorias)
        if len(set(categorias)) != len(categorias):
            raise ValueError("Categoria repetida na empresa")

        detalhes = {CategoriaEmpresa(c): d for c, d in self.detalhes.items()}
        sem_categoria = set(detalhes) - set(categorias)
        if sem_categoria:
            nomes = sorted(c.value for c in sem_categoria)
            raise ValueError(f"Detalhe sem categoria correspondente: {nomes}")
        sem_detalhe = [c for c in categorias if c not in detalhes]
        if sem_detalhe:
            raise ValueError(f"Categoria sem detalhe: {[c.value for c in sem_detalhe]}")

        object.__setattr__(self, "categorias", categorias)
        # Reordena pela ordem de inscricao para uma igualdade deterministica.
        object.__setattr__(self, "detalhes", MappingProxyType({c: detalhes[c] for c in categorias}))

    def com_categoria_alternada(self, categoria: CategoriaEmpresa) -> DadosEmpresa:
        """Liga/desliga a inscricao na categoria.

        Incluir anexa o detalhe padrao (Prospeccao, valor 0). Remover descarta o
        detalhe imediatamente, sem retencao.
        """
        detalhes = dict(self.detalhes)
        if categoria in self.categorias:
            del detalhes[categoria]
            categorias = tuple(c for c in self.categorias if c != categoria)
        else:
            detalhes[categoria] = DETALHE_PADRAO
            categorias = (*self.categorias, categoria)
        return replace(self, categorias=categorias, detalhes=detalhes)

    def com_detalhe_alterado(
        self,
        categoria: CategoriaEmpresa,
        status: StatusEmpresa | None = None,
        valor_operacao: Decimal | None = None,
    ) -> DadosEmpresa:
        atual = self.detalhes.get(categoria)
        if atual is None:
            raise ValueError(f"Empresa nao inscrita na categoria {categoria.value}")
        novo = DetalheCategoria(
            status=status if status is not None else atual.status,
            valor_operacao=valor_operacao if valor_operacao is not None else atual.valor_operacao,
        )
        return replace(self, detalhes={**self.detalhes, categoria: novo})


@dataclass(frozen=True)
class Empresa:
    """Aggregate Root. Imutavel; o store troca a instancia a cada mutacao."""

    id: str
    dados: DadosEmpresa
    interacoes: tuple[Interacao, ...] = ()

    @property
    def nome(self) -> str:
        return self.dados.nome

    @property
    def endereco(self) -> str:
        return self.dados.endereco

    @property
    def email(self) -> str:
        return self.dados.email

    @property
    def telefone(self) -> str:
        return self.dados.telefone

    @property
    def setor(self) -> str:
        return self.dados.setor

    @property
    def descricao(self) -> str:
        return self.dados.descricao

    @property
    def categorias(self) -> tuple[CategoriaEmpresa, ...]:
        return self.dados.categorias

    @property
    def detalhes(self) -> Mapping[CategoriaEmpresa, DetalheCategoria]:
        return self.dados.detalhes

    def detalhe(self, categoria: CategoriaEmpresa) -> DetalheCategoria | None:
        return self.dados.detalhes.get(categoria)

    def com_dados(self, dados: DadosEmpresa) -> Empresa:
        return replace(self, dados=dados)

    def com_interacao(self, interacao: Interacao) -> Empresa:
        return replace(self, interacoes=(*self.interacoes, interacao))
