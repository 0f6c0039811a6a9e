"""Agregação de confiança por palavra do fullTextAnnotation do Vision."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def iter_words(annotation: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Percorre pages > blocks > paragraphs > words."""
    for page in annotation.get("pages") or []:
        for block in page.get("blocks") or []:
            for paragraph in block.get("paragraphs") or []:
                yield from paragraph.get("words") or []


def _is_score(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def average_word_confidence(annotation: dict[str, Any]) -> tuple[float, int]:
    """Média da confiança das palavras, em porcentagem com 1 casa.

    Palavras sem `confidence` não entram na média.

    Returns:
        (confiança_percentual, quantidade_de_palavras_com_confiança)
    """
    scores = [
        float(word["confidence"])
        for word in iter_words(annotation)
        if _is_score(word.get("confidence"))
    ]
    if not scores:
        return 0.0, 0
    return round(sum(scores) / len(scores) * 100, 1), len(scores)
