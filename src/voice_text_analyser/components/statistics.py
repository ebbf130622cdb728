"""
Компонент для подсчёта сводной статистики по тексту.

Считает предложения и слова по исходному тексту, а уникальные слова
и среднюю длину слова - по отфильтрованным токенам.
"""

import re
from typing import Optional, Sequence
from ..interfaces.text_processor import StatisticsCalculatorInterface, TextStatistics, round_half_up

_SENTENCE_SPLIT_PATTERN = re.compile(r'[.!?]+')


class StatisticsCalculator(StatisticsCalculatorInterface):
    """Калькулятор статистики текста."""

    def compute(self, text: Optional[str], filtered_tokens: Sequence[str]) -> TextStatistics:
        """
        Считает статистику.
        
        Args:
            text: Исходный текст (с пунктуацией и стоп-словами)
            filtered_tokens: Токены после фильтрации стоп-слов и коротких слов
            
        Returns:
            TextStatistics
        """
        text = text or ''
        sentences = self.count_sentences(text)
        total_words = self.count_words(text)

        if sentences > 0:
            average_words_per_sentence = round_half_up(total_words / sentences)
        else:
            average_words_per_sentence = 0

        if filtered_tokens:
            total_length = sum(len(token) for token in filtered_tokens)
            average_word_length = round_half_up(total_length / len(filtered_tokens))
        else:
            average_word_length = 0

        return TextStatistics(
            total_words=total_words,
            unique_words=len(set(filtered_tokens)),
            sentences=sentences,
            average_words_per_sentence=average_words_per_sentence,
            average_word_length=average_word_length,
        )

    @staticmethod
    def count_sentences(text: str) -> int:
        """Количество непустых фрагментов между знаками . ! ?"""
        return sum(1 for segment in _SENTENCE_SPLIT_PATTERN.split(text) if segment.strip())

    @staticmethod
    def count_words(text: str) -> int:
        """Количество слов, разделённых пробелами (пунктуация остаётся при словах)."""
        return len(text.split())
