# tests/application/test_dashboard_service.py
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from crm.application.dtos.dashboard_dto import ResumoCategoriaDTO
from crm.application.services.dashboard_service import (
    calcular_dashboard,
    filtrar_por_status,
    interacoes_recentes,
)
from crm.domain.empresa.entities import DadosEmpresa, Empresa, Interacao
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.value_objects import DetalheCategoria
from crm.infrastructure.seed import empresas_exemplo

CAPTACAO = CategoriaEmpresa.CAPTACAO
CREDITO = CategoriaEmpresa.CREDITO
SERVICOS = CategoriaEmpresa.SERVICOS


def _empresa(
    empresa_id: str,
    detalhes: dict[CategoriaEmpresa, DetalheCategoria] | None = None,
    interacoes: tuple[Interacao, ...] = (),
) -> Empresa:
    detalhes = detalhes or {}
    return Empresa(
        id=empresa_id,
        dados=DadosEmpresa(nome=f"Empresa {empresa_id}", categorias=tuple(detalhes), detalhes=detalhes),
        interacoes=interacoes,
    )


def _detalhe(valor: str, status: StatusEmpresa = StatusEmpresa.PROSPECCAO) -> DetalheCategoria:
    return DetalheCategoria(status, Decimal(valor))


def _interacao(interacao_id: str, dia: date) -> Interacao:
    return Interacao(interacao_id, dia, f"nota {interacao_id}", dia)


# ---------- totais ----------


def test_total_da_categoria_soma_valores_das_empresas_inscritas():
    dash = calcular_dashboard([
        _empresa("1", {CREDITO: _detalhe("100")}),
        _empresa("2", {CREDITO: _detalhe("150")}),
    ])
    assert dash.categoria(CREDITO).valor_total == Decimal("250")
    assert dash.valor_total == Decimal("250")


def test_empresa_em_duas_categorias_conta_nas_duas():
    """Cada inscricao e um negocio independente: total geral conta duas vezes."""
    dash = calcular_dashboard([
        _empresa("1", {CAPTACAO: _detalhe("50"), CREDITO: _detalhe("75")}),
    ])
    assert dash.categoria(CAPTACAO).valor_total == Decimal("50")
    assert dash.categoria(CREDITO).valor_total == Decimal("75")
    assert dash.valor_total == Decimal("125")
    assert dash.total_empresas == 1


def test_contagem_por_status_dentro_da_categoria():
    dash = calcular_dashboard([
        _empresa("1", {CREDITO: _detalhe("1", StatusEmpresa.PROSPECCAO)}),
        _empresa("2", {CREDITO: _detalhe("1", StatusEmpresa.FECHAMENTO)}),
        _empresa("3", {CREDITO: _detalhe("1", StatusEmpresa.FECHAMENTO)}),
    ])
    contagem = dash.categoria(CREDITO).contagem_status
    assert contagem[StatusEmpresa.PROSPECCAO] == 1
    assert contagem[StatusEmpresa.FECHAMENTO] == 2
    assert contagem[StatusEmpresa.CONCLUIDO] == 0
    assert dash.categoria(CREDITO).total_empresas == 3


def test_dashboard_vazio_zera_tudo():
    dash = calcular_dashboard([])
    assert dash.valor_total == Decimal("0")
    assert all(r.valor_total == Decimal("0") for r in dash.categorias)
    assert all(n == 0 for r in dash.categorias for n in r.contagem_status.values())


def test_dashboard_dos_exemplos():
    dash = calcular_dashboard(empresas_exemplo())
    assert dash.valor_total == Decimal("420000")
    assert dash.categoria(SERVICOS).contagem_status[StatusEmpresa.CONCLUIDO] == 1


def test_detalhe_sem_inscricao_e_tratado_como_nao_inscrito():
    """Estado inconsistente vindo de fora nao quebra o dashboard."""
    inconsistente = SimpleNamespace(
        id="x",
        nome="Inconsistente",
        categorias=(),
        detalhes={CREDITO: _detalhe("999")},
        interacoes=(),
    )
    dash = calcular_dashboard([inconsistente])  # type: ignore[list-item]
    assert dash.valor_total == Decimal("0")
    assert filtrar_por_status([inconsistente], CREDITO, StatusEmpresa.PROSPECCAO) == []  # type: ignore[list-item]


# ---------- interacoes recentes ----------


def test_recentes_em_ordem_decrescente_de_data():
    empresas = [
        _empresa("1", interacoes=(_interacao("a", date(2024, 7, 10)),)),
        _empresa("2", interacoes=(
            _interacao("b", date(2024, 6, 20)),
            _interacao("c", date(2024, 7, 15)),
        )),
    ]
    recentes = interacoes_recentes(empresas)
    assert [r.data_contato for r in recentes] == [date(2024, 7, 15), date(2024, 7, 10), date(2024, 6, 20)]
    assert [r.empresa_nome for r in recentes] == ["Empresa 2", "Empresa 1", "Empresa 2"]


def test_recentes_limita_a_cinco():
    interacoes = tuple(_interacao(f"i{n}", date(2024, 1, n + 1)) for n in range(8))
    recentes = interacoes_recentes([_empresa("1", interacoes=interacoes)])
    assert len(recentes) == 5
    assert recentes[0].id == "i7"
    assert recentes[-1].id == "i3"


def test_recentes_empate_de_data_mantem_ordem_original():
    dia = date(2024, 7, 1)
    empresas = [
        _empresa("1", interacoes=(_interacao("a", dia), _interacao("b", dia))),
        _empresa("2", interacoes=(_interacao("c", dia),)),
    ]
    assert [r.id for r in interacoes_recentes(empresas)] == ["a", "b", "c"]


def test_recentes_sem_interacoes():
    assert interacoes_recentes([_empresa("1")]) == []


# ---------- drill-down ----------


def test_filtro_retorna_exatamente_as_empresas_com_o_status():
    empresas = [
        _empresa("1", {CAPTACAO: _detalhe("1", StatusEmpresa.PROSPECCAO)}),
        _empresa("2", {CAPTACAO: _detalhe("1", StatusEmpresa.FECHAMENTO)}),
        _empresa("3", {CREDITO: _detalhe("1", StatusEmpresa.PROSPECCAO)}),
        _empresa("4", {
            CAPTACAO: _detalhe("1", StatusEmpresa.PROSPECCAO),
            CREDITO: _detalhe("1", StatusEmpresa.CONCLUIDO),
        }),
    ]
    filtradas = filtrar_por_status(empresas, CAPTACAO, StatusEmpresa.PROSPECCAO)
    assert [e.id for e in filtradas] == ["1", "4"]


# ---------- DTO ----------


def test_resumo_categoria_dto_serializa_valores_e_contagens():
    dash = calcular_dashboard([
        _empresa("1", {CREDITO: _detalhe("100.50", StatusEmpresa.FECHAMENTO)}),
        _empresa("2", {CREDITO: _detalhe("150")}),
    ])
    dto = ResumoCategoriaDTO.from_domain(dash.categoria(CREDITO))
    assert dto.categoria == "Crédito"
    assert dto.valor_total == "250.50"
    assert dto.total_empresas == 2
    assert dto.contagem_status == {"Prospecção": 1, "Fechamento": 1, "Concluído": 0}
