# crm/infrastructure/seed.py
#
# Bootstrap sample loaded at startup: the three example companies of the
# reference board. A real deployment replaces this with external persistence.
from __future__ import annotations

from datetime import date
from decimal import Decimal

from crm.domain.empresa.entities import DadosEmpresa, Empresa, Interacao
from crm.domain.empresa.enums import CategoriaEmpresa, StatusEmpresa
from crm.domain.empresa.repository import EmpresaRepository
from crm.domain.empresa.value_objects import DetalheCategoria


def empresas_exemplo() -> list[Empresa]:
    return [
        Empresa(
            id="1",
            dados=DadosEmpresa(
                nome="InovaTech Soluções",
                endereco="Rua das Inovações, 123, São Paulo, SP",
                email="contato@inovatech.com",
                telefone="(11) 98765-4321",
                setor="Tecnologia",
                descricao="Desenvolvimento de software e soluções em nuvem.",
                categorias=(CategoriaEmpresa.CAPTACAO,),
                detalhes={
                    CategoriaEmpresa.CAPTACAO: DetalheCategoria(StatusEmpresa.PROSPECCAO, Decimal("50000")),
                },
            ),
            interacoes=(
                Interacao(
                    id="i1",
                    data_contato=date(2024, 7, 10),
                    anotacoes="Primeiro contato, apresentamos a proposta.",
                    data_acompanhamento=date(2024, 7, 17),
                ),
            ),
        ),
        Empresa(
            id="2",
            dados=DadosEmpresa(
                nome="ConstruBem",
                endereco="Avenida das Obras, 456, Rio de Janeiro, RJ",
                email="orcamento@construbem.com",
                telefone="(21) 91234-5678",
                setor="Construção Civil",
                descricao="Construções e reformas residenciais e comerciais.",
                categorias=(CategoriaEmpresa.CREDITO,),
                detalhes={
                    CategoriaEmpresa.CREDITO: DetalheCategoria(StatusEmpresa.FECHAMENTO, Decimal("250000")),
                },
            ),
        ),
        Empresa(
            id="3",
            dados=DadosEmpresa(
                nome="AgroForte",
                endereco="Rodovia dos Grãos, 789, Cuiabá, MT",
                email="vendas@agroforte.com.br",
                telefone="(65) 99988-7766",
                setor="Agronegócio",
                descricao="Distribuidor de insumos agrícolas e sementes.",
                categorias=(CategoriaEmpresa.SERVICOS,),
                detalhes={
                    CategoriaEmpresa.SERVICOS: DetalheCategoria(StatusEmpresa.CONCLUIDO, Decimal("120000")),
                },
            ),
            interacoes=(
                Interacao(
                    id="i2",
                    data_contato=date(2024, 6, 20),
                    anotacoes="Fechamento do contrato de fornecimento.",
                    data_acompanhamento=date(2024, 8, 20),
                ),
                Interacao(
                    id="i3",
                    data_contato=date(2024, 7, 15),
                    anotacoes="Acompanhamento da primeira entrega.",
                    data_acompanhamento=date(2024, 7, 22),
                ),
            ),
        ),
    ]


def carregar_exemplos(repo: EmpresaRepository) -> None:
    for empresa in empresas_exemplo():
        repo.adicionar(empresa)
