# crm/interfaces/api/routes/dashboard_routes.py
from fastapi import APIRouter, Depends, Query

from crm.application.dtos.dashboard_dto import DashboardDTO, FiltroStatusDTO
from crm.application.services.dashboard_service import (
    calcular_dashboard,
    filtrar_por_status,
    interacoes_recentes,
)
from crm.application.services.empresa_store import EmpresaStore
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa
from crm.interfaces.api.dependencies import get_empresa_store

router = APIRouter()


@router.get("/dashboard", response_model=DashboardDTO)
def get_dashboard(
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> DashboardDTO:
    empresas = store.listar_empresas()
    return DashboardDTO.from_domain(calcular_dashboard(empresas), interacoes_recentes(empresas))


@router.get("/dashboard/filtro", response_model=FiltroStatusDTO)
def get_filtro_status(
    categoria: CategoriaEmpresa = Query(...),  # noqa: B008
    status: StatusEmpresa = Query(...),  # noqa: B008
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> FiltroStatusDTO:
    empresas = filtrar_por_status(store.listar_empresas(), categoria, status)
    return FiltroStatusDTO.from_domain(categoria, status, empresas)
