# crm/application/services/quadro_service.py
"""Projecao do quadro categoria x status. Funcao pura, zero IO.

Uma empresa aparece na celula (C, S) somente se estiver inscrita em C e seu
detalhe para C tiver status S. Dentro da celula vale a ordem do store.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from crm.domain.empresa.entities import Empresa
from crm.domain.empresa.enums import ORDEM_CATEGORIAS, ORDEM_STATUS, CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.services import detalhe_inscrito


@dataclass(frozen=True)
class CelulaQuadro:
    categoria: CategoriaEmpresa
    status: StatusEmpresa
    empresas: tuple[Empresa, ...]


@dataclass(frozen=True)
class ColunaQuadro:
    categoria: CategoriaEmpresa
    celulas: tuple[CelulaQuadro, ...]

    @property
    def total(self) -> int:
        """Empresas inscritas na categoria (contador do cabecalho da coluna)."""
        return sum(len(c.empresas) for c in self.celulas)


@dataclass(frozen=True)
class Quadro:
    colunas: tuple[ColunaQuadro, ...]

    def coluna(self, categoria: CategoriaEmpresa) -> ColunaQuadro:
        for coluna in self.colunas:
            if coluna.categoria == categoria:
                return coluna
        raise KeyError(categoria)

    def celula(self, categoria: CategoriaEmpresa, status: StatusEmpresa) -> tuple[Empresa, ...]:
        for celula in self.coluna(categoria).celulas:
            if celula.status == status:
                return celula.empresas
        raise KeyError((categoria, status))

    def total_categoria(self, categoria: CategoriaEmpresa) -> int:
        return self.coluna(categoria).total


def montar_quadro(
    empresas: Iterable[Empresa],
    categorias: Sequence[CategoriaEmpresa] = ORDEM_CATEGORIAS,
    status: Sequence[StatusEmpresa] = ORDEM_STATUS,
) -> Quadro:
    snapshot = list(empresas)
    colunas: list[ColunaQuadro] = []
    for categoria in categorias:
        celulas = []
        for s in status:
            na_celula = []
            for empresa in snapshot:
                detalhe = detalhe_inscrito(empresa, categoria)
                if detalhe is not None and detalhe.status == s:
                    na_celula.append(empresa)
            celulas.append(CelulaQuadro(categoria=categoria, status=s, empresas=tuple(na_celula)))
        colunas.append(ColunaQuadro(categoria=categoria, celulas=tuple(celulas)))
    return Quadro(colunas=tuple(colunas))
