import sys
from pathlib import Path

import pytest

# Пакет лежит в src/: добавляем путь, чтобы тесты работали и без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_texts():
    """Наборы английских текстов для тестирования."""
    from .fixtures.sample_texts import (
        SAMPLE_NEUTRAL_TEXT,
        SAMPLE_POSITIVE_TEXT,
        SAMPLE_MIXED_TEXT,
        SAMPLE_RANKING_TEXT,
        SAMPLE_LONG_TEXT,
    )

    return {
        "neutral": SAMPLE_NEUTRAL_TEXT,
        "positive": SAMPLE_POSITIVE_TEXT,
        "mixed": SAMPLE_MIXED_TEXT,
        "ranking": SAMPLE_RANKING_TEXT,
        "long": SAMPLE_LONG_TEXT,
    }


@pytest.fixture
def analyser():
    """Движок с длиной рейтинга по умолчанию (10)."""
    from voice_text_analyser.text_processor import TextAnalyser

    return TextAnalyser(top_words_limit=10)


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
    config.addinivalue_line("markers", "performance: тесты производительности")
