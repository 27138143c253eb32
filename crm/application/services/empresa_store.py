# crm/application/services/empresa_store.py
#
# Company Store: the only entry point for mutating the board's companies.
#
# Design decisions:
#   - Imperative shell around the pure domain: it fetches from the repository,
#     calls DadosEmpresa / transicoes helpers, and writes the new instance
#     back. Every mutation builds a new DadosEmpresa, which
#     checks the membership invariant.
#   - Every operation returns the full updated Empresa.
#   - mover_empresa on an unknown id is a silent no-op (returns None). Every
#     other operation raises EmpresaNaoEncontrada.
#   - No presentation concern lives here: no DTOs, no HTTP.
from __future__ import annotations

from datetime import date
from decimal import Decimal

from crm.domain.empresa.entities import DadosEmpresa, Empresa, Interacao
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.errors import EmpresaNaoEncontrada
from crm.domain.empresa.repository import EmpresaRepository
from crm.domain.empresa.transicoes import mover
from crm.infrastructure.log import log


class EmpresaStore:
    def __init__(self, repo: EmpresaRepository) -> None:
        self._repo = repo

    def listar_empresas(self) -> list[Empresa]:
        """Snapshot em ordem de insercao."""
        return self._repo.listar()

    def obter_empresa(self, empresa_id: str) -> Empresa:
        empresa = self._repo.buscar_por_id(empresa_id)
        if empresa is None:
            raise EmpresaNaoEncontrada(empresa_id)
        return empresa

    def criar_empresa(self, dados: DadosEmpresa) -> Empresa:
        empresa = Empresa(id=self._repo.proximo_id_empresa(), dados=dados)
        self._repo.adicionar(empresa)
        log(f"Empresa criada: id={empresa.id} nome={empresa.nome!r}")
        return empresa

    def atualizar_empresa(self, empresa_id: str, dados: DadosEmpresa) -> Empresa:
        """Troca atributos, categorias e detalhes de uma vez. Id e interacoes ficam."""
        atualizada = self.obter_empresa(empresa_id).com_dados(dados)
        self._repo.substituir(atualizada)
        return atualizada

    def alternar_categoria(self, empresa_id: str, categoria: CategoriaEmpresa) -> Empresa:
        empresa = self.obter_empresa(empresa_id)
        if categoria in empresa.categorias:
            # Descarta status e valor da categoria, sem retencao.
            log(f"Empresa {empresa_id} removida de {categoria.value}; detalhe descartado")
        return self.atualizar_empresa(empresa_id, empresa.dados.com_categoria_alternada(categoria))

    def alterar_detalhe(
        self,
        empresa_id: str,
        categoria: CategoriaEmpresa,
        status: StatusEmpresa | None = None,
        valor_operacao: Decimal | None = None,
    ) -> Empresa:
        empresa = self.obter_empresa(empresa_id)
        dados = empresa.dados.com_detalhe_alterado(categoria, status=status, valor_operacao=valor_operacao)
        return self.atualizar_empresa(empresa_id, dados)

    def mover_empresa(
        self,
        empresa_id: str,
        categoria: CategoriaEmpresa,
        status: StatusEmpresa,
    ) -> Empresa | None:
        empresa = self._repo.buscar_por_id(empresa_id)
        if empresa is None:
            log(f"Movimento ignorado: empresa {empresa_id} inexistente")
            return None

        movida = mover(empresa, categoria, status)
        if movida is empresa:
            log(f"Movimento ignorado: empresa {empresa_id} nao inscrita em {categoria.value}")
            return empresa

        self._repo.substituir(movida)
        return movida

    def adicionar_interacao(
        self,
        empresa_id: str,
        data_contato: date,
        anotacoes: str,
        data_acompanhamento: date,
    ) -> Empresa:
        empresa = self.obter_empresa(empresa_id)
        interacao = Interacao(
            id=self._repo.proximo_id_interacao(),
            data_contato=data_contato,
            anotacoes=anotacoes,
            data_acompanhamento=data_acompanhamento,
        )
        atualizada = empresa.com_interacao(interacao)
        self._repo.substituir(atualizada)
        return atualizada
