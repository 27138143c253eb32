# crm/interfaces/api/routes/empresa_routes.py
from fastapi import APIRouter, Depends, HTTPException, Response

from crm.application.dtos.empresa_dto import (
    DetalheUpdateDTO,
    EmpresaDTO,
    EmpresaInputDTO,
    InteracaoInputDTO,
    MovimentoDTO,
)
from crm.application.services.empresa_store import EmpresaStore
from crm.domain.empresa.entities import DadosEmpresa
from crm.domain.empresa.enums import CategoriaEmpresa
from crm.domain.empresa.errors import EmpresaNaoEncontrada
from crm.interfaces.api.dependencies import get_empresa_store

router = APIRouter()


def _dados(payload: EmpresaInputDTO) -> DadosEmpresa:
    try:
        return payload.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err


@router.get("/empresas", response_model=list[EmpresaDTO])
def listar_empresas(
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> list[EmpresaDTO]:
    return [EmpresaDTO.from_domain(e) for e in store.listar_empresas()]


@router.post("/empresas", response_model=EmpresaDTO, status_code=201)
def criar_empresa(
    payload: EmpresaInputDTO,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO:
    return EmpresaDTO.from_domain(store.criar_empresa(_dados(payload)))


@router.get("/empresas/{empresa_id}", response_model=EmpresaDTO)
def obter_empresa(
    empresa_id: str,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO:
    try:
        return EmpresaDTO.from_domain(store.obter_empresa(empresa_id))
    except EmpresaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail="Empresa nao encontrada") from err


@router.put("/empresas/{empresa_id}", response_model=EmpresaDTO)
def atualizar_empresa(
    empresa_id: str,
    payload: EmpresaInputDTO,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO:
    try:
        return EmpresaDTO.from_domain(store.atualizar_empresa(empresa_id, _dados(payload)))
    except EmpresaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail="Empresa nao encontrada") from err


@router.post("/empresas/{empresa_id}/categorias/{categoria}/alternar", response_model=EmpresaDTO)
def alternar_categoria(
    empresa_id: str,
    categoria: CategoriaEmpresa,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO:
    try:
        return EmpresaDTO.from_domain(store.alternar_categoria(empresa_id, categoria))
    except EmpresaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail="Empresa nao encontrada") from err


@router.patch("/empresas/{empresa_id}/categorias/{categoria}", response_model=EmpresaDTO)
def alterar_detalhe(
    empresa_id: str,
    categoria: CategoriaEmpresa,
    payload: DetalheUpdateDTO,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = store.alterar_detalhe(
            empresa_id, categoria, status=payload.status, valor_operacao=payload.valor_operacao,
        )
    except EmpresaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail="Empresa nao encontrada") from err
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return EmpresaDTO.from_domain(empresa)


@router.post("/empresas/{empresa_id}/mover", response_model=EmpresaDTO)
def mover_empresa(
    empresa_id: str,
    payload: MovimentoDTO,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO | Response:
    empresa = store.mover_empresa(empresa_id, payload.categoria, payload.status)
    if empresa is None:
        # Id desconhecido: no-op silencioso, igual ao soltar um cartao que sumiu.
        return Response(status_code=204)
    return EmpresaDTO.from_domain(empresa)


@router.post("/empresas/{empresa_id}/interacoes", response_model=EmpresaDTO, status_code=201)
def adicionar_interacao(
    empresa_id: str,
    payload: InteracaoInputDTO,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> EmpresaDTO:
    try:
        empresa = store.adicionar_interacao(
            empresa_id,
            data_contato=payload.data_contato,
            anotacoes=payload.anotacoes,
            data_acompanhamento=payload.data_acompanhamento,
        )
    except EmpresaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail="Empresa nao encontrada") from err
    return EmpresaDTO.from_domain(empresa)
