# crm/domain/empresa/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Empresa


class EmpresaRepository(Protocol):
    def listar(self) -> list[Empresa]: ...
    def buscar_por_id(self, empresa_id: str) -> Empresa | None: ...
    def adicionar(self, empresa: Empresa) -> None: ...
    def substituir(self, empresa: Empresa) -> None: ...
    def proximo_id_empresa(self) -> str: ...
    def proximo_id_interacao(self) -> str: ...
