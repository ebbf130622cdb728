"""
Модуль движка анализа текста

Собирает четыре независимых этапа в единый вызов:
- Токенизация (стоп-слова и короткие слова отбрасываются)
- Подсчёт частотности по отфильтрованным токенам
- Оценка тональности по исходному тексту
- Статистика и рейтинг самых частых слов
"""

import logging
from typing import Optional
from .config import config
from .components.tokenizer import TokenProcessor
from .components.frequency_analyzer import FrequencyAnalyzer
from .components.sentiment_scorer import SentimentScorer
from .components.statistics import StatisticsCalculator
from .interfaces.text_processor import TextProcessor, AnalysisResult

logger = logging.getLogger(__name__)


class TextAnalyser(TextProcessor):
    """Движок анализа текста. Не хранит состояние между вызовами."""

    def __init__(self,
                 top_words_limit: Optional[int] = None,
                 tokenizer: Optional[TokenProcessor] = None,
                 frequency_analyzer: Optional[FrequencyAnalyzer] = None,
                 sentiment_scorer: Optional[SentimentScorer] = None,
                 statistics_calculator: Optional[StatisticsCalculator] = None):
        """
        Args:
            top_words_limit: Длина рейтинга слов (по умолчанию из config)
        """
        if top_words_limit is None:
            top_words_limit = config.get_top_words_limit()
        self.top_words_limit = max(0, top_words_limit)
        self.tokenizer = tokenizer or TokenProcessor()
        self.frequency_analyzer = frequency_analyzer or FrequencyAnalyzer()
        self.sentiment_scorer = sentiment_scorer or SentimentScorer()
        self.statistics_calculator = statistics_calculator or StatisticsCalculator()

    def analyze_text(self, text: Optional[str]) -> AnalysisResult:
        """
        Анализирует текст и возвращает результат.

        Пустой текст (или None) даёт канонический нулевой результат
        с уверенностью 0, в отличие от непустого текста без тональных
        слов, где уверенность 0.5.

        Args:
            text: Исходный текст

        Returns:
            Новый объект AnalysisResult
        """
        if not text or not text.strip():
            return AnalysisResult.empty()

        tokens = self.tokenizer.tokenize(text)
        word_frequency = self.frequency_analyzer.count_frequency(tokens)
        sentiment = self.sentiment_scorer.score(text)
        statistics = self.statistics_calculator.compute(text, tokens)
        top_words = self.frequency_analyzer.get_top_words(word_frequency, self.top_words_limit)

        logger.debug(
            f"Анализ завершён: слов={statistics.total_words}, уникальных={statistics.unique_words}, "
            f"тональность={sentiment.label}"
        )
        return AnalysisResult(
            word_frequency=word_frequency,
            sentiment=sentiment,
            statistics=statistics,
            top_words=tuple(top_words),
        )


def analyze_text(text: Optional[str], top_words_limit: Optional[int] = None) -> AnalysisResult:
    """Анализирует текст движком с настройками по умолчанию."""
    return TextAnalyser(top_words_limit=top_words_limit).analyze_text(text)
