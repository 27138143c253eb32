# crm/domain/empresa/errors.py
from __future__ import annotations


class EmpresaNaoEncontrada(LookupError):
    """Operacao referenciou um id de empresa ausente do store."""

    def __init__(self, empresa_id: str) -> None:
        super().__init__(f"Empresa nao encontrada: {empresa_id}")
        self.empresa_id = empresa_id
