# tests/application/test_quadro_service.py
from decimal import Decimal

from crm.application.services.quadro_service import montar_quadro
from crm.domain.empresa.entities import DadosEmpresa, Empresa
from crm.domain.empresa.enums import ORDEM_CATEGORIAS, ORDEM_STATUS, CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.value_objects import DetalheCategoria
from crm.infrastructure.seed import empresas_exemplo

CAPTACAO = CategoriaEmpresa.CAPTACAO
CREDITO = CategoriaEmpresa.CREDITO


def _empresa(empresa_id: str, detalhes: dict[CategoriaEmpresa, DetalheCategoria]) -> Empresa:
    return Empresa(
        id=empresa_id,
        dados=DadosEmpresa(nome=f"Empresa {empresa_id}", categorias=tuple(detalhes), detalhes=detalhes),
    )


def test_quadro_tem_todas_as_colunas_e_celulas_na_ordem():
    quadro = montar_quadro([])
    assert [c.categoria for c in quadro.colunas] == list(ORDEM_CATEGORIAS)
    for coluna in quadro.colunas:
        assert [c.status for c in coluna.celulas] == list(ORDEM_STATUS)
        assert coluna.total == 0


def test_empresa_aparece_so_na_celula_do_seu_status():
    quadro = montar_quadro(empresas_exemplo())
    assert [e.nome for e in quadro.celula(CAPTACAO, StatusEmpresa.PROSPECCAO)] == ["InovaTech Soluções"]
    assert quadro.celula(CAPTACAO, StatusEmpresa.FECHAMENTO) == ()
    assert [e.nome for e in quadro.celula(CREDITO, StatusEmpresa.FECHAMENTO)] == ["ConstruBem"]
    assert quadro.total_categoria(CategoriaEmpresa.ADIMPLENCIA) == 0


def test_empresa_em_duas_categorias_aparece_nas_duas_colunas():
    e = _empresa("1", {
        CAPTACAO: DetalheCategoria(StatusEmpresa.PROSPECCAO, Decimal("50")),
        CREDITO: DetalheCategoria(StatusEmpresa.CONCLUIDO, Decimal("75")),
    })
    quadro = montar_quadro([e])
    assert quadro.celula(CAPTACAO, StatusEmpresa.PROSPECCAO) == (e,)
    assert quadro.celula(CREDITO, StatusEmpresa.CONCLUIDO) == (e,)
    assert quadro.total_categoria(CAPTACAO) == 1
    assert quadro.total_categoria(CREDITO) == 1


def test_ordem_dentro_da_celula_segue_o_store():
    empresas = [
        _empresa(str(n), {CREDITO: DetalheCategoria(StatusEmpresa.PROSPECCAO, Decimal("1"))})
        for n in (3, 1, 2)
    ]
    quadro = montar_quadro(empresas)
    assert [e.id for e in quadro.celula(CREDITO, StatusEmpresa.PROSPECCAO)] == ["3", "1", "2"]


def test_ordem_customizada_de_categorias_e_status():
    quadro = montar_quadro(
        empresas_exemplo(),
        categorias=(CREDITO,),
        status=(StatusEmpresa.FECHAMENTO,),
    )
    assert len(quadro.colunas) == 1
    assert [e.nome for e in quadro.celula(CREDITO, StatusEmpresa.FECHAMENTO)] == ["ConstruBem"]
