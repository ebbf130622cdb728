"""
Компонент для анализа частотности слов.

Отвечает за подсчёт частоты появления слов и построение
рейтинга самых частых слов.
"""

from collections import Counter
from typing import Dict, List, Mapping, Sequence
from ..interfaces.text_processor import FrequencyAnalyzerInterface, WordCount


class FrequencyAnalyzer(FrequencyAnalyzerInterface):
    """Анализатор частотности слов."""
    
    def count_frequency(self, words: Sequence[str]) -> Dict[str, int]:
        """
        Подсчитывает частоту появления слов.
        
        Args:
            words: Список слов для анализа
            
        Returns:
            Словарь с частотой каждого слова (в порядке первого появления)
        """
        if not words:
            return {}
        
        return dict(Counter(words))
    
    def get_top_words(self, word_frequency: Mapping[str, int], limit: int = 10) -> List[WordCount]:
        """
        Возвращает limit самых частых слов.
        
        Сортировка стабильная: слова с одинаковой частотой сохраняют
        порядок, в котором они встречаются в словаре частот.
        
        Args:
            word_frequency: Словарь частот
            limit: Количество слов для возврата
            
        Returns:
            Список WordCount по убыванию частоты
        """
        if not word_frequency or limit <= 0:
            return []
        
        ranked = sorted(word_frequency.items(), key=lambda x: x[1], reverse=True)
        return [WordCount(word=word, count=count) for word, count in ranked[:limit]]