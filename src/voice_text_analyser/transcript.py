"""
Накопитель расшифровки речи.

Распознаватель речи выдаёт завершённые фразы, которые дописываются
в общую расшифровку перед каждым запуском анализа.
"""

from typing import Optional
from .interfaces.text_processor import AnalysisResult
from .text_processor import TextAnalyser


class Transcript:
    """Текущая расшифровка: фразы распознавателя и ручные правки."""

    def __init__(self, text: str = ""):
        self._text = text or ""

    @property
    def text(self) -> str:
        return self._text

    def append(self, utterance: Optional[str]) -> str:
        """
        Дописывает фразу через пробел (пустые фразы игнорируются).

        Returns:
            Обновлённый текст расшифровки
        """
        if not utterance or not utterance.strip():
            return self._text
        self._text = f"{self._text} {utterance}" if self._text else utterance
        return self._text

    def replace(self, text: Optional[str]) -> None:
        """Заменяет текст целиком (ручное редактирование)."""
        self._text = text or ""

    def clear(self) -> None:
        self._text = ""

    @property
    def word_count(self) -> int:
        return len(self._text.split())

    @property
    def char_count(self) -> int:
        return len(self._text)

    def is_blank(self) -> bool:
        return not self._text.strip()

    def analyze(self, analyser: Optional[TextAnalyser] = None) -> AnalysisResult:
        """Запускает анализ текущей расшифровки."""
        return (analyser or TextAnalyser()).analyze_text(self._text)

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)
