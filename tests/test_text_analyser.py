"""
Тесты движка анализа текста: инварианты и сценарии.
"""

import dataclasses

import pytest

from voice_text_analyser import analyze_text, TextAnalyser, AnalysisResult
from voice_text_analyser.components.tokenizer import TokenProcessor
from voice_text_analyser.interfaces.text_processor import WordCount, TextStatistics
from voice_text_analyser.lexicons import STOPWORDS


class TestEmptyInput:
    """Пустой ввод даёт канонический нулевой результат."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t ", None])
    def test_canonical_empty_result(self, analyser, text):
        result = analyser.analyze_text(text)
        assert dict(result.word_frequency) == {}
        assert result.statistics == TextStatistics(0, 0, 0, 0, 0)
        assert result.sentiment.score == 0
        assert result.sentiment.label == "neutral"
        assert result.sentiment.confidence == 0
        assert result.top_words == ()
        assert result == AnalysisResult.empty()
        assert result.is_empty

    def test_empty_differs_from_no_signal(self, analyser):
        """Пустой текст: уверенность 0; текст без тональных слов: 0.5."""
        assert analyser.analyze_text("").sentiment.confidence == 0
        assert analyser.analyze_text("...").sentiment.confidence == 0.5


class TestScenarios:
    """Сценарии из описания поведения движка."""

    def test_neutral_no_lexicon_hits(self, analyser, sample_texts):
        result = analyser.analyze_text(sample_texts["neutral"])
        assert list(result.word_frequency) == ["cat", "sat", "mat"]
        assert result.sentiment.label == "neutral"
        assert result.sentiment.confidence == 0.5
        assert result.sentiment.score == 0
        assert result.statistics.sentences == 1
        assert result.statistics.total_words == 6
        assert result.statistics.unique_words == 3
        assert result.statistics.average_words_per_sentence == 6
        assert result.statistics.average_word_length == 3

    def test_positive(self, analyser, sample_texts):
        result = analyser.analyze_text(sample_texts["positive"])
        assert result.sentiment.score == 1
        assert result.sentiment.label == "positive"
        for word in ("great", "wonderful", "love"):
            assert word in result.word_frequency

    def test_mixed(self, analyser, sample_texts):
        result = analyser.analyze_text(sample_texts["mixed"])
        assert result.sentiment.score == pytest.approx(-1 / 3)
        assert result.sentiment.label == "negative"

    def test_ranking(self, sample_texts):
        result = TextAnalyser(top_words_limit=2).analyze_text(sample_texts["ranking"])
        assert dict(result.word_frequency) == {"run": 3, "jump": 2, "play": 1}
        assert list(result.top_words) == [WordCount("run", 3), WordCount("jump", 2)]

    def test_display_subset(self, analyser, sample_texts):
        result = analyser.analyze_text(sample_texts["ranking"])
        assert result.top(1) == [WordCount("run", 3)]
        assert result.top(8) == list(result.top_words)


class TestInvariants:
    """Инварианты, которые выполняются для любого текста."""

    TEXTS = [
        "The cat sat on the mat.",
        "This is great and wonderful, I love it!",
        "It was good but also terrible and sad.",
        "run run run jump jump play",
        "One. Two! Three? ... a b c",
        "Ünïcödé wörds, café & naïve résumé; 123 456 123",
        "the the the and or but",
    ]

    @pytest.mark.parametrize("text", TEXTS)
    def test_determinism(self, analyser, text):
        assert analyser.analyze_text(text) == analyser.analyze_text(text)
        assert analyser.analyze_text(text).to_dict() == analyze_text(text).to_dict()

    @pytest.mark.parametrize("text", TEXTS)
    def test_frequency_sum_matches_filtered_tokens(self, analyser, text):
        result = analyser.analyze_text(text)
        assert sum(result.word_frequency.values()) == len(TokenProcessor().tokenize(text))

    @pytest.mark.parametrize("text", TEXTS)
    def test_top_words_subset_of_frequency(self, text):
        for limit in (0, 1, 2, 5, 10):
            result = TextAnalyser(top_words_limit=limit).analyze_text(text)
            assert len(result.top_words) <= limit
            for item in result.top_words:
                assert result.word_frequency[item.word] == item.count
            counts = [item.count for item in result.top_words]
            assert counts == sorted(counts, reverse=True)

    @pytest.mark.parametrize("text", TEXTS)
    def test_sentiment_bounds(self, analyser, text):
        sentiment = analyser.analyze_text(text).sentiment
        assert -1 <= sentiment.score <= 1
        assert 0 <= sentiment.confidence <= 1
        assert 0 <= sentiment.confidence_percent <= 100

    @pytest.mark.parametrize("text", TEXTS)
    def test_unique_words_counts_frequency_keys(self, analyser, text):
        result = analyser.analyze_text(text)
        assert result.statistics.unique_words == len(result.word_frequency)

    def test_stopwords_never_counted(self, analyser):
        result = analyser.analyze_text("THE The the And CAT cat Is dog")
        assert dict(result.word_frequency) == {"cat": 2, "dog": 1}
        assert not set(result.word_frequency) & STOPWORDS

    def test_default_limit_is_ten(self):
        text = " ".join(f"word{i}" for i in range(15))
        result = analyze_text(text)
        assert len(result.top_words) == 10


class TestAnalysisResult:
    """Неизменяемость и сериализация результата."""

    def test_result_is_immutable(self, analyser):
        result = analyser.analyze_text("run run jump")
        with pytest.raises(TypeError):
            result.word_frequency["run"] = 10
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.top_words = ()
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.sentiment.label = "positive"

    def test_new_result_per_call(self, analyser):
        first = analyser.analyze_text("good day")
        second = analyser.analyze_text("bad day")
        assert first.sentiment.label == "positive"
        assert second.sentiment.label == "negative"
        assert first.word_frequency is not second.word_frequency

    def test_to_dict(self, analyser, sample_texts):
        data = analyser.analyze_text(sample_texts["ranking"]).to_dict()
        assert set(data) == {"wordFrequency", "sentiment", "statistics", "topWords"}
        assert data["wordFrequency"] == {"run": 3, "jump": 2, "play": 1}
        assert data["topWords"][0] == {"word": "run", "count": 3}
        assert data["statistics"] == {
            "totalWords": 6,
            "uniqueWords": 3,
            "sentences": 1,
            "averageWordsPerSentence": 6,
            "averageWordLength": 4,
        }
        assert data["sentiment"] == {"score": 0.0, "label": "neutral", "confidence": 0.5}

    def test_confidence_percent(self, analyser, sample_texts):
        assert analyser.analyze_text(sample_texts["positive"]).sentiment.confidence_percent == 100
        assert analyser.analyze_text(sample_texts["neutral"]).sentiment.confidence_percent == 50
        assert AnalysisResult.empty().sentiment.confidence_percent == 0

    def test_negative_limit_clamped(self):
        assert TextAnalyser(top_words_limit=-1).analyze_text("cat cat dog").top_words == ()
