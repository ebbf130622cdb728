"""
Компонент для токенизации английского текста.

Отвечает за разбивку текста на токены, валидацию и фильтрацию
по длине и списку стоп-слов.
"""

import re
import logging
from typing import AbstractSet, List, Optional
from ..interfaces.text_processor import TokenProcessorInterface
from ..lexicons import STOPWORDS

logger = logging.getLogger(__name__)

# Всё, что не является символом слова или пробелом, заменяется на пробел
_PUNCTUATION_PATTERN = re.compile(r'[^\w\s]')


class TokenProcessor(TokenProcessorInterface):
    """Процессор для токенизации текста."""
    
    def __init__(self, min_length: int = 2, stopwords: Optional[AbstractSet[str]] = None):
        """
        Инициализирует процессор токенизации.
        
        Args:
            min_length: Минимальная длина токена (короче - отбрасываются)
            stopwords: Множество стоп-слов (по умолчанию общий лексикон)
        """
        self.min_length = min_length
        self.stopwords = STOPWORDS if stopwords is None else stopwords
    
    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Разбивает текст на токены.
        
        Порядок и повторы сохраняются: результат служит основой
        для подсчёта частот и статистики.
        
        Args:
            text: Исходный текст
            
        Returns:
            Список отфильтрованных токенов
        """
        if not text or not text.strip():
            return []
        
        normalized = _PUNCTUATION_PATTERN.sub(' ', text.lower())
        tokens = self.filter_tokens(normalized.split())
        logger.debug(f"Токенизация: {len(tokens)} токенов после фильтрации")
        return tokens
    
    def is_valid_token(self, token: str) -> bool:
        """
        Проверяет валидность токена.
        
        Args:
            token: Токен для проверки (в нижнем регистре)
            
        Returns:
            True если токен достаточно длинный и не является стоп-словом
        """
        if not token:
            return False
        if len(token) < self.min_length:
            return False
        return token not in self.stopwords
    
    def filter_tokens(self, tokens: List[str]) -> List[str]:
        """
        Фильтрует токены по критериям валидности.
        
        Args:
            tokens: Список токенов для фильтрации
            
        Returns:
            Отфильтрованный список токенов
        """
        if not tokens:
            return []
        
        return [token for token in tokens if self.is_valid_token(token)]
