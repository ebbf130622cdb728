"""
Компоненты движка анализа текста.

Каждый компонент отвечает за одну конкретную задачу:
- TokenProcessor - токенизация текста
- FrequencyAnalyzer - подсчёт частотности и рейтинг слов
- SentimentScorer - оценка тональности по словарям
- StatisticsCalculator - сводная статистика
- ResultExporter - экспорт результатов
"""

from .tokenizer import TokenProcessor
from .frequency_analyzer import FrequencyAnalyzer
from .sentiment_scorer import SentimentScorer
from .statistics import StatisticsCalculator
from .exporter import ResultExporter

__all__ = [
    'TokenProcessor',
    'FrequencyAnalyzer',
    'SentimentScorer',
    'StatisticsCalculator',
    'ResultExporter',
]
