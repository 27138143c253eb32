# crm/interfaces/api/routes/resumo_routes.py
from fastapi import APIRouter, Depends, HTTPException

from crm.application.dtos.resumo_dto import ResumoDTO
from crm.application.services.empresa_store import EmpresaStore
from crm.application.services.resumo_service import ResumoEmAndamento, ResumoService
from crm.domain.empresa.errors import EmpresaNaoEncontrada
from crm.interfaces.api.dependencies import get_empresa_store, get_resumo_service

router = APIRouter()


@router.post("/empresas/{empresa_id}/resumo", response_model=ResumoDTO)
async def resumir_interacoes(
    empresa_id: str,
    store: EmpresaStore = Depends(get_empresa_store),  # noqa: B008
    service: ResumoService = Depends(get_resumo_service),  # noqa: B008
) -> ResumoDTO:
    try:
        empresa = store.obter_empresa(empresa_id)
    except EmpresaNaoEncontrada as err:
        raise HTTPException(status_code=404, detail="Empresa nao encontrada") from err

    try:
        texto = await service.resumir_empresa(empresa)
    except ResumoEmAndamento as err:
        raise HTTPException(status_code=409, detail="Resumo ja em andamento") from err
    return ResumoDTO(empresa_id=empresa_id, texto=texto)
