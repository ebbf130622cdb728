"""
Компонент для оценки тональности текста по словарям.

Работает с исходным (не отфильтрованным по стоп-словам) текстом:
каждое слово очищается от не-буквенных символов и проверяется
по словарям положительных и отрицательных слов.
"""

import re
import logging
from typing import AbstractSet, Optional
from ..interfaces.text_processor import (
    SentimentScorerInterface,
    SentimentResult,
    LABEL_POSITIVE,
    LABEL_NEGATIVE,
    LABEL_NEUTRAL,
)
from ..lexicons import POSITIVE_WORDS, NEGATIVE_WORDS

logger = logging.getLogger(__name__)

# Оценки в пределах (-0.1, 0.1) считаются нейтральными
NEUTRAL_BAND = 0.1
# Доля тональных слов усиливается в 5 раз, затем ограничивается единицей
CONFIDENCE_AMPLIFIER = 5
# Уверенность для непустого текста без единого тонального слова
NO_SIGNAL_CONFIDENCE = 0.5

_WHITESPACE_PATTERN = re.compile(r'\s+')
_NON_WORD_PATTERN = re.compile(r'[^\w]')


class SentimentScorer(SentimentScorerInterface):
    """Оценщик тональности на основе словарей."""

    def __init__(self,
                 positive_words: Optional[AbstractSet[str]] = None,
                 negative_words: Optional[AbstractSet[str]] = None):
        self.positive_words = POSITIVE_WORDS if positive_words is None else positive_words
        self.negative_words = NEGATIVE_WORDS if negative_words is None else negative_words

    def score(self, text: Optional[str]) -> SentimentResult:
        """
        Оценивает тональность текста.
        
        Args:
            text: Исходный текст
            
        Returns:
            SentimentResult с оценкой в [-1, 1] и уверенностью в [0, 1]
        """
        words = _WHITESPACE_PATTERN.split((text or '').lower())
        positive_count = 0
        negative_count = 0

        for word in words:
            clean_word = _NON_WORD_PATTERN.sub('', word)
            if clean_word in self.positive_words:
                positive_count += 1
            if clean_word in self.negative_words:
                negative_count += 1

        total_sentiment_words = positive_count + negative_count
        logger.debug(
            f"Тональность: положительных={positive_count}, отрицательных={negative_count}, "
            f"слов всего={len(words)}"
        )

        if total_sentiment_words == 0:
            return SentimentResult(score=0.0, label=LABEL_NEUTRAL, confidence=NO_SIGNAL_CONFIDENCE)

        score = (positive_count - negative_count) / total_sentiment_words
        confidence = min(total_sentiment_words / len(words) * CONFIDENCE_AMPLIFIER, 1.0)

        return SentimentResult(score=score, label=self.get_label(score), confidence=confidence)

    @staticmethod
    def get_label(score: float) -> str:
        """Переводит числовую оценку в метку с нейтральной зоной ±0.1."""
        if score > NEUTRAL_BAND:
            return LABEL_POSITIVE
        elif score < -NEUTRAL_BAND:
            return LABEL_NEGATIVE
        return LABEL_NEUTRAL
