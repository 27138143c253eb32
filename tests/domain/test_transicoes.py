# tests/domain/test_transicoes.py
#
# Drag-and-drop transition across the category x status board.
# All tests are pure: no IO, no store.
from decimal import Decimal

from crm.domain.empresa.entities import DadosEmpresa, Empresa
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.transicoes import aplicar_movimento, mover
from crm.domain.empresa.value_objects import DetalheCategoria

CAPTACAO = CategoriaEmpresa.CAPTACAO
CREDITO = CategoriaEmpresa.CREDITO
SERVICOS = CategoriaEmpresa.SERVICOS


def _empresa() -> Empresa:
    return Empresa(
        id="1",
        dados=DadosEmpresa(
            nome="Empresa",
            categorias=(CAPTACAO, CREDITO),
            detalhes={
                CAPTACAO: DetalheCategoria(StatusEmpresa.PROSPECCAO, Decimal("50")),
                CREDITO: DetalheCategoria(StatusEmpresa.FECHAMENTO, Decimal("75")),
            },
        ),
    )


def test_mover_categoria_inscrita_troca_so_o_status() -> None:
    movida = mover(_empresa(), CAPTACAO, StatusEmpresa.CONCLUIDO)
    assert movida.detalhe(CAPTACAO) == DetalheCategoria(StatusEmpresa.CONCLUIDO, Decimal("50"))


def test_mover_nao_toca_outras_categorias() -> None:
    movida = mover(_empresa(), CAPTACAO, StatusEmpresa.CONCLUIDO)
    assert movida.detalhe(CREDITO) == DetalheCategoria(StatusEmpresa.FECHAMENTO, Decimal("75"))
    assert movida.categorias == (CAPTACAO, CREDITO)


def test_mover_para_categoria_nunca_inscrita_e_no_op() -> None:
    """Entrar numa categoria so pelo formulario de edicao; arrastar nao inscreve."""
    empresa = _empresa()
    movida = mover(empresa, SERVICOS, StatusEmpresa.FECHAMENTO)
    assert movida is empresa
    assert SERVICOS not in movida.categorias
    assert movida.detalhe(SERVICOS) is None


def test_aplicar_movimento_sem_inscricao_retorna_none() -> None:
    assert aplicar_movimento((), {}, SERVICOS, StatusEmpresa.CONCLUIDO) is None


def test_membro_sem_detalhe_recebe_detalhe_com_valor_zero() -> None:
    """Inconsistencia recuperavel: categoria inscrita sem detalhe."""
    detalhes = aplicar_movimento((CREDITO,), {}, CREDITO, StatusEmpresa.FECHAMENTO)
    assert detalhes == {CREDITO: DetalheCategoria(StatusEmpresa.FECHAMENTO, Decimal("0"))}


def test_mover_duas_vezes_equivale_a_mover_uma() -> None:
    uma = mover(_empresa(), CREDITO, StatusEmpresa.CONCLUIDO)
    duas = mover(uma, CREDITO, StatusEmpresa.CONCLUIDO)
    assert duas == uma


def test_mover_preserva_id_e_interacoes() -> None:
    empresa = _empresa()
    movida = mover(empresa, CREDITO, StatusEmpresa.PROSPECCAO)
    assert movida.id == empresa.id
    assert movida.interacoes == empresa.interacoes
