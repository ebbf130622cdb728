"""
Voice Text Analyser - движок анализа расшифрованной речи и набранного текста

Этот модуль предоставляет инструменты для:
- Токенизации и подсчёта частотности слов
- Оценки тональности по словарям
- Подсчёта сводной статистики и рейтинга слов
- Накопления расшифровки речи
- Экспорта результатов (Excel, JSON, текстовый отчёт)
"""

__version__ = "0.1.0"

from .text_processor import TextAnalyser, analyze_text
from .transcript import Transcript
from .interfaces.text_processor import AnalysisResult, SentimentResult, TextStatistics, WordCount

__all__ = [
    "TextAnalyser",
    "analyze_text",
    "Transcript",
    "AnalysisResult",
    "SentimentResult",
    "TextStatistics",
    "WordCount",
]
