# crm/domain/empresa/enums.py
from enum import StrEnum


class CategoriaEmpresa(StrEnum):
    CAPTACAO = "Captação"
    CREDITO = "Crédito"
    SERVICOS = "Serviços"
    ADIMPLENCIA = "Adimplência"


class StatusEmpresa(StrEnum):
    PROSPECCAO = "Prospecção"
    FECHAMENTO = "Fechamento"
    CONCLUIDO = "Concluído"


# Ordem das colunas do quadro e das contagens do dashboard.
ORDEM_CATEGORIAS: tuple[CategoriaEmpresa, ...] = tuple(CategoriaEmpresa)
ORDEM_STATUS: tuple[StatusEmpresa, ...] = tuple(StatusEmpresa)
