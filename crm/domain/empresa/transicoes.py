# crm/domain/empresa/transicoes.py
#
# Drag-and-drop transition of a company across the category x status board.
# Pure function, no IO.
#
# Design decisions:
#   - aplicar_movimento works on the raw (categorias, detalhes) pair. The
#     "member without detail" branch is reachable there even though
#     DadosEmpresa never lets that state be constructed.
#   - Returns None when nothing changes. Dropping a company onto a category it
#     never joined is a no-op: joining a category only happens through the
#     edit form.
#   - Only the target category's detail is touched; valor_operacao survives a
#     status change.
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import replace
from decimal import Decimal

from .entities import Empresa
from .enums import CategoriaEmpresa, StatusEmpresa
from .value_objects import DetalheCategoria


def aplicar_movimento(
    categorias: Sequence[CategoriaEmpresa],
    detalhes: Mapping[CategoriaEmpresa, DetalheCategoria],
    nova_categoria: CategoriaEmpresa,
    novo_status: StatusEmpresa,
) -> dict[CategoriaEmpresa, DetalheCategoria] | None:
    """Novos detalhes apos o movimento, ou None se o movimento e no-op."""
    detalhe = detalhes.get(nova_categoria)
    if detalhe is not None:
        return {**detalhes, nova_categoria: detalhe.com_status(novo_status)}
    if nova_categoria in categorias:
        return {**detalhes, nova_categoria: DetalheCategoria(status=novo_status, valor_operacao=Decimal("0"))}
    return None


def mover(empresa: Empresa, nova_categoria: CategoriaEmpresa, novo_status: StatusEmpresa) -> Empresa:
    detalhes = aplicar_movimento(empresa.categorias, empresa.detalhes, nova_categoria, novo_status)
    if detalhes is None:
        return empresa
    return empresa.com_dados(replace(empresa.dados, detalhes=detalhes))
