# crm/application/dtos/resumo_dto.py
from pydantic import BaseModel


class ResumoDTO(BaseModel):
    empresa_id: str
    texto: str
