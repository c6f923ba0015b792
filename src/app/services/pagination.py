"""Paginação client-side sobre a janela recente buscada do provider.

O gateway busca UMA janela limitada (50 registros mais recentes) por
requisição e fatia em memória. Não há consulta ao provider por página.

Limitação conhecida: `total` e `total_pages` refletem apenas a janela.
Com histórico maior que a janela, a última página da janela aparece como
última página real. Mantido para não estourar o rate limit do provider;
a resposta HTTP expõe `window_limited` para o consumidor.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import TypeVar

from app.domain.fax import Page

T = TypeVar("T")

MIN_PER_PAGE = 1
MAX_PER_PAGE = 50
DEFAULT_PER_PAGE = 10


def clamp_per_page(per_page: int) -> int:
    return max(MIN_PER_PAGE, min(MAX_PER_PAGE, per_page))


def clamp_page(page: int) -> int:
    return max(1, page)


def paginate(items: Sequence[T], page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Page:
    """Fatia `items` e calcula metadados de paginação.

    `per_page` é limitado a [1, 50] e `page` a >= 1 ANTES do cálculo do
    offset.
    """
    per_page = clamp_per_page(per_page)
    page = clamp_page(page)
    offset = (page - 1) * per_page

    total = len(items)
    total_pages = math.ceil(total / per_page)
    has_next = page < total_pages
    has_previous = page > 1

    return Page(
        items=tuple(items[offset:offset + per_page]),
        current_page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages,
        has_next=has_next,
        has_previous=has_previous,
        next_page=page + 1 if has_next else None,
        previous_page=page - 1 if has_previous else None,
        from_index=offset + 1,
        to_index=min(offset + per_page, total),
    )


def sort_newest_first(items: Sequence[T], key: Callable[[T], str | None]) -> list[T]:
    """Ordena por timestamp decrescente; itens sem timestamp vão para o fim.

    Estável: empates preservam a ordem recebida do provider.
    """
    dated = [item for item in items if key(item)]
    undated = [item for item in items if not key(item)]
    dated.sort(key=lambda item: key(item) or "", reverse=True)
    return dated + undated
