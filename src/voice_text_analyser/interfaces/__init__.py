"""
Интерфейсы и модели данных для компонентов анализа текста.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    TextProcessor,
    TokenProcessorInterface,
    FrequencyAnalyzerInterface,
    SentimentScorerInterface,
    StatisticsCalculatorInterface,
    ResultExporterInterface,
    AnalysisResult,
    SentimentResult,
    TextStatistics,
    WordCount,
)

__all__ = [
    'TextProcessor',
    'TokenProcessorInterface',
    'FrequencyAnalyzerInterface',
    'SentimentScorerInterface',
    'StatisticsCalculatorInterface',
    'ResultExporterInterface',
    'AnalysisResult',
    'SentimentResult',
    'TextStatistics',
    'WordCount',
]
