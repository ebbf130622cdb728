"""
Абстрактные интерфейсы и модели данных для движка анализа текста.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций.
Все модели результатов неизменяемы: каждый вызов анализа создаёт новый объект.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

LABEL_POSITIVE = 'positive'
LABEL_NEGATIVE = 'negative'
LABEL_NEUTRAL = 'neutral'


def round_half_up(value: float) -> int:
    """Округление с половиной вверх (для неотрицательных значений)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class SentimentResult:
    """Тональность текста: оценка, метка и уверенность."""
    score: float
    label: str
    confidence: float

    @property
    def confidence_percent(self) -> int:
        """Уверенность в процентах, как её показывает слой отображения."""
        return round_half_up(self.confidence * 100)

    def to_dict(self) -> Dict[str, Any]:
        return {'score': self.score, 'label': self.label, 'confidence': self.confidence}


@dataclass(frozen=True)
class TextStatistics:
    """Сводная статистика по тексту."""
    total_words: int = 0
    unique_words: int = 0
    sentences: int = 0
    average_words_per_sentence: int = 0
    average_word_length: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'totalWords': self.total_words,
            'uniqueWords': self.unique_words,
            'sentences': self.sentences,
            'averageWordsPerSentence': self.average_words_per_sentence,
            'averageWordLength': self.average_word_length,
        }


@dataclass(frozen=True)
class WordCount:
    """Слово и количество его вхождений."""
    word: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'word': self.word, 'count': self.count}


@dataclass(frozen=True)
class AnalysisResult:
    """Результат анализа текста."""
    word_frequency: Mapping[str, int]
    sentiment: SentimentResult
    statistics: TextStatistics
    top_words: Tuple[WordCount, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Словарь частот доступен только на чтение, список топ-слов - кортеж
        if not isinstance(self.word_frequency, MappingProxyType):
            object.__setattr__(self, 'word_frequency', MappingProxyType(dict(self.word_frequency)))
        if not isinstance(self.top_words, tuple):
            object.__setattr__(self, 'top_words', tuple(self.top_words))

    @classmethod
    def empty(cls) -> 'AnalysisResult':
        """Канонический нулевой результат для пустого текста."""
        return cls(
            word_frequency={},
            sentiment=SentimentResult(score=0.0, label=LABEL_NEUTRAL, confidence=0.0),
            statistics=TextStatistics(),
            top_words=(),
        )

    @property
    def is_empty(self) -> bool:
        return not self.word_frequency and self.statistics.total_words == 0

    def top(self, limit: int) -> List[WordCount]:
        """
        Возвращает первые limit слов рейтинга (для графиков и сокращённых списков).

        Args:
            limit: Максимальное количество слов

        Returns:
            Список WordCount в порядке рейтинга
        """
        return list(self.top_words[:max(0, limit)])

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует результат в формат, ожидаемый слоем отображения."""
        return {
            'wordFrequency': dict(self.word_frequency),
            'sentiment': self.sentiment.to_dict(),
            'statistics': self.statistics.to_dict(),
            'topWords': [item.to_dict() for item in self.top_words],
        }


class TokenProcessorInterface(ABC):
    """Интерфейс для токенизации текста."""

    @abstractmethod
    def tokenize(self, text: str) -> List[str]:
        """Разбивает текст на токены."""
        pass

    @abstractmethod
    def is_valid_token(self, token: str) -> bool:
        """Проверяет валидность токена."""
        pass

    @abstractmethod
    def filter_tokens(self, tokens: List[str]) -> List[str]:
        """Фильтрует токены по критериям."""
        pass


class FrequencyAnalyzerInterface(ABC):
    """Интерфейс для анализа частотности слов."""

    @abstractmethod
    def count_frequency(self, words: Sequence[str]) -> Dict[str, int]:
        """Подсчитывает частоту появления слов."""
        pass

    @abstractmethod
    def get_top_words(self, word_frequency: Mapping[str, int], limit: int = 10) -> List[WordCount]:
        """Возвращает limit самых частых слов."""
        pass


class SentimentScorerInterface(ABC):
    """Интерфейс для оценки тональности."""

    @abstractmethod
    def score(self, text: str) -> SentimentResult:
        """Оценивает тональность исходного текста."""
        pass


class StatisticsCalculatorInterface(ABC):
    """Интерфейс для подсчёта статистики текста."""

    @abstractmethod
    def compute(self, text: str, filtered_tokens: Sequence[str]) -> TextStatistics:
        """Считает статистику по тексту и отфильтрованным токенам."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта результатов."""

    @abstractmethod
    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в Excel формат."""
        pass

    @abstractmethod
    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """Экспортирует результат в JSON формат."""
        pass

    @abstractmethod
    def export_summary_report(self, result: AnalysisResult, filepath: Union[str, Path],
                              transcript: Optional[str] = None) -> Path:
        """Экспортирует текстовый отчёт."""
        pass


class TextProcessor(ABC):
    """Основной интерфейс для обработки текста."""

    @abstractmethod
    def analyze_text(self, text: Optional[str]) -> AnalysisResult:
        """Анализирует текст и возвращает результат."""
        pass
