"""
Фиксированные словари (лексиконы) для анализа английского текста.

Три неизменяемых множества, создаются один раз при импорте модуля:
- STOPWORDS - служебные слова, исключаемые из частотного анализа
- POSITIVE_WORDS - слова с положительной окраской
- NEGATIVE_WORDS - слова с отрицательной окраской
"""

from typing import FrozenSet

STOPWORDS: FrozenSet[str] = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with',
    'by', 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her', 'us', 'them',
    'my', 'your', 'his', 'its', 'our', 'their', 'this', 'that', 'these', 'those',
    'am', 'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had',
    'do', 'does', 'did', 'will', 'would', 'could', 'should', 'may', 'might', 'must',
    'can', 'shall', 'not', 'no', 'yes', 'from', 'up', 'out', 'if', 'about', 'into',
    'through', 'during', 'before', 'after', 'above', 'below', 'between', 'among',
})

POSITIVE_WORDS: FrozenSet[str] = frozenset({
    'good', 'great', 'excellent', 'amazing', 'wonderful', 'fantastic', 'awesome', 'love',
    'like', 'enjoy', 'happy', 'joy', 'pleased', 'satisfied', 'perfect', 'beautiful',
    'brilliant', 'outstanding', 'remarkable', 'superb', 'delighted', 'thrilled',
    'excited', 'grateful', 'thankful', 'blessed', 'lucky', 'successful', 'winner',
    'victory', 'triumph', 'celebrate', 'proud', 'confident', 'optimistic', 'hope',
})

NEGATIVE_WORDS: FrozenSet[str] = frozenset({
    'bad', 'terrible', 'awful', 'horrible', 'hate', 'dislike', 'angry', 'sad',
    'disappointed', 'upset', 'frustrated', 'annoyed', 'worried', 'concerned',
    'problem', 'issue', 'trouble', 'difficulty', 'wrong', 'error', 'mistake',
    'fail', 'failure', 'lose', 'loss', 'defeat', 'reject', 'denial', 'refuse',
    'impossible', 'never', 'nothing', 'nobody', 'worthless', 'useless', 'hopeless',
})
