# crm/domain/empresa/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .enums import StatusEmpresa


@dataclass(frozen=True)
class DetalheCategoria:
    """Status e valor de operacao de uma empresa dentro de uma categoria.

    Valor em Decimal. Nunca float. Nunca negativo.
    """

    status: StatusEmpresa = StatusEmpresa.PROSPECCAO
    valor_operacao: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if not isinstance(self.valor_operacao, Decimal):
            object.__setattr__(self, "valor_operacao", Decimal(str(self.valor_operacao)))
        if not self.valor_operacao.is_finite():
            raise ValueError("Valor de operacao deve ser finito")
        if self.valor_operacao < Decimal("0"):
            raise ValueError("Valor de operacao nao pode ser negativo")

    def com_status(self, status: StatusEmpresa) -> DetalheCategoria:
        return DetalheCategoria(status=status, valor_operacao=self.valor_operacao)


DETALHE_PADRAO = DetalheCategoria()
