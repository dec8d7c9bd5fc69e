"""Similaridade fuzzy de titulos em escala 0-100 (razao de Levenshtein).

score = round_half_up(100 * (len_a + len_b - dist) / (len_a + len_b))

onde `dist` e a distancia de edicao com substituicao custando 2 (equivale
a uma remocao + uma insercao). Strings iguais valem 100; se um dos lados
fica vazio apos o pre-processamento, o score e 0.

Pre-processamento: minusculas, nao-alfanumericos viram espaco, trim.
"""

from __future__ import annotations

import math


def preprocess(text: str) -> str:
    """Normaliza texto para comparacao (case-insensitive, sem pontuacao)."""
    lowered = (text or "").lower()
    return "".join(ch if ch.isalnum() else " " for ch in lowered).strip()


def indel_distance(a: str, b: str) -> int:
    """Distancia de edicao com custo 1 para insercao/remocao e 2 para troca."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            substitution = previous[j - 1] + (0 if char_a == char_b else 2)
            current.append(min(previous[j] + 1, current[j - 1] + 1, substitution))
        previous = current
    return previous[-1]


def ratio(a: str, b: str) -> float:
    """Razao nao arredondada (0.0-100.0) entre strings ja processadas."""
    total = len(a) + len(b)
    if not a or not b:
        return 0.0
    return 100.0 * (total - indel_distance(a, b)) / total


def title_similarity(a: str, b: str) -> int:
    """Score inteiro 0-100 entre dois titulos (meio arredonda para cima)."""
    return math.floor(ratio(preprocess(a), preprocess(b)) + 0.5)


__all__ = ["indel_distance", "preprocess", "ratio", "title_similarity"]
