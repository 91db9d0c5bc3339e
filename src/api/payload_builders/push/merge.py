"""Merge raso (last-write-wins) de fragmentos no documento.

O merge NÃO é recursivo: numa colisão de chave o valor novo substitui o
antigo por inteiro. Consequência direta para settings: configurar a mesma
plataforma duas vezes descarta os campos da primeira chamada que não foram
repetidos na segunda. Plataformas diferentes se somam.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_shallow(
    existing: Mapping[str, Any],
    incoming: Mapping[str, Any],
) -> dict[str, Any]:
    """União das chaves; em colisão vence `incoming`.

    Não altera nenhum dos argumentos.
    """
    merged = dict(existing)
    merged.update(incoming)
    return merged


def attach_section(
    document: dict[str, Any],
    section: str,
    fragment: Mapping[str, Any],
) -> bool:
    """Anexa um fragmento a uma seção de topo do documento.

    - fragmento vazio: nada a fazer
    - seção ausente: o fragmento vira o valor da seção
    - seção presente: merge raso dentro da seção

    Returns:
        True se o documento foi alterado.
    """
    if not fragment:
        return False

    current = document.get(section)
    if isinstance(current, Mapping):
        document[section] = merge_shallow(current, fragment)
    else:
        document[section] = dict(fragment)
    return True
