# crm/infrastructure/repositories/memory_empresa_repo.py
#
# Process-lifetime company collection. Lost on restart.
#
# Design decisions:
#   - A plain list keeps insertion order, which is the order used by every
#     board cell and drill-down listing. An index dict maps id -> position.
#   - Ids come from monotonic counters ("1", "2", ... for companies and
#     "i1", "i2", ... for interactions). A candidate already seen (seed data,
#     or an id injected by a test) is skipped, so an id is never issued twice.
#
# Invariants:
#   - listar() returns a new list; mutating it does not affect the repo.
#   - Every interaction id ever stored is remembered in _ids_interacao.
from __future__ import annotations

from itertools import count

from crm.domain.empresa.entities import Empresa


class InMemoryEmpresaRepo:
    def __init__(self) -> None:
        self._empresas: list[Empresa] = []
        self._posicao: dict[str, int] = {}
        self._ids_interacao: set[str] = set()
        self._contador_empresa = count(1)
        self._contador_interacao = count(1)

    def listar(self) -> list[Empresa]:
        return list(self._empresas)

    def buscar_por_id(self, empresa_id: str) -> Empresa | None:
        pos = self._posicao.get(empresa_id)
        return self._empresas[pos] if pos is not None else None

    def adicionar(self, empresa: Empresa) -> None:
        if empresa.id in self._posicao:
            raise ValueError(f"Empresa ja cadastrada: {empresa.id}")
        self._posicao[empresa.id] = len(self._empresas)
        self._empresas.append(empresa)
        self._registrar_interacoes(empresa)

    def substituir(self, empresa: Empresa) -> None:
        pos = self._posicao.get(empresa.id)
        if pos is None:
            raise KeyError(empresa.id)
        self._empresas[pos] = empresa
        self._registrar_interacoes(empresa)

    def proximo_id_empresa(self) -> str:
        while True:
            candidato = str(next(self._contador_empresa))
            if candidato not in self._posicao:
                return candidato

    def proximo_id_interacao(self) -> str:
        while True:
            candidato = f"i{next(self._contador_interacao)}"
            if candidato not in self._ids_interacao:
                # Reservado ja na emissao: dois pedidos seguidos nunca colidem.
                self._ids_interacao.add(candidato)
                return candidato

    def _registrar_interacoes(self, empresa: Empresa) -> None:
        self._ids_interacao.update(i.id for i in empresa.interacoes)
