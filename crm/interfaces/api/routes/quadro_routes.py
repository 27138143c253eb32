# crm/interfaces/api/routes/quadro_routes.py
from fastapi import APIRouter, Depends

from crm.application.dtos.quadro_dto import QuadroDTO
from crm.application.services.empresa_store import EmpresaStore
from crm.application.services.quadro_service import montar_quadro
from crm.interfaces.api.dependencies import get_empresa_store

router = APIRouter()


@router.get("/quadro", response_model=QuadroDTO)
def get_quadro(
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
) -> QuadroDTO:
    return QuadroDTO.from_domain(montar_quadro(store.listar_empresas()))
