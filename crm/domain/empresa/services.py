# crm/domain/empresa/services.py
#
# Read-side helpers shared by the board projection and the dashboard.
#
# Design decisions:
#   - Projections are total functions. A detail whose category is not in the
#     company's membership (possible only if something upstream bypassed
#     DadosEmpresa) is read as "not enrolled" instead of raising.
#   - Typed against a Protocol: any snapshot exposing categorias/detalhes
#     is accepted.
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from .enums import CategoriaEmpresa
from .value_objects import DetalheCategoria


class InscricoesEmpresa(Protocol):
    @property
    def categorias(self) -> Sequence[CategoriaEmpresa]: ...

    @property
    def detalhes(self) -> Mapping[CategoriaEmpresa, DetalheCategoria]: ...


def detalhe_inscrito(empresa: InscricoesEmpresa, categoria: CategoriaEmpresa) -> DetalheCategoria | None:
    """Detalhe da categoria somente se a empresa estiver inscrita nela."""
    if categoria not in empresa.categorias:
        return None
    return empresa.detalhes.get(categoria)
