"""
Тесты для компонента SentimentScorer
"""

import unittest

from voice_text_analyser.components.sentiment_scorer import (
    SentimentScorer,
    NO_SIGNAL_CONFIDENCE,
)


class TestSentimentScorer(unittest.TestCase):
    """Тесты для класса SentimentScorer"""

    def setUp(self):
        self.scorer = SentimentScorer()

    def test_no_sentiment_words(self):
        """Непустой текст без тональных слов: нейтрально, уверенность 0.5"""
        result = self.scorer.score("The cat sat on the mat.")
        self.assertEqual(result.score, 0)
        self.assertEqual(result.label, "neutral")
        self.assertEqual(result.confidence, NO_SIGNAL_CONFIDENCE)
        self.assertEqual(result.confidence, 0.5)

    def test_empty_text(self):
        """Пустой текст у самого оценщика попадает в ветку без сигнала"""
        for text in ("", None):
            result = self.scorer.score(text)
            self.assertEqual(result.label, "neutral")
            self.assertEqual(result.confidence, 0.5)

    def test_positive_text(self):
        result = self.scorer.score("This is great and wonderful, I love it!")
        self.assertEqual(result.score, 1)
        self.assertEqual(result.label, "positive")
        # 3 тональных слова из 8: 3/8*5 > 1, ограничено единицей
        self.assertEqual(result.confidence, 1.0)

    def test_mixed_text(self):
        result = self.scorer.score("It was good but also terrible and sad.")
        self.assertAlmostEqual(result.score, -1 / 3)
        self.assertEqual(result.label, "negative")

    def test_confidence_scaling(self):
        """Уверенность: доля тональных слов, умноженная на 5"""
        result = self.scorer.score("good cat sat mat today fine ok now here there")
        self.assertAlmostEqual(result.confidence, 1 / 10 * 5)
        self.assertEqual(result.label, "positive")

    def test_balanced_is_neutral(self):
        """Равное число положительных и отрицательных слов - нейтрально"""
        result = self.scorer.score("good bad")
        self.assertEqual(result.score, 0)
        self.assertEqual(result.label, "neutral")
        self.assertEqual(result.confidence, 1.0)

    def test_punctuation_stripped_before_lookup(self):
        result = self.scorer.score("GOOD!!! (terrible) ...never")
        self.assertAlmostEqual(result.score, (1 - 2) / 3)

    def test_label_thresholds(self):
        """Нейтральная зона: границы ±0.1 включительно нейтральны"""
        self.assertEqual(SentimentScorer.get_label(0.1), "neutral")
        self.assertEqual(SentimentScorer.get_label(-0.1), "neutral")
        self.assertEqual(SentimentScorer.get_label(0.0), "neutral")
        self.assertEqual(SentimentScorer.get_label(0.11), "positive")
        self.assertEqual(SentimentScorer.get_label(-0.11), "negative")

    def test_near_zero_score_is_neutral(self):
        """6 положительных и 5 отрицательных: 1/11 < 0.1 - нейтрально"""
        text = "good great happy joy love hope bad sad awful upset wrong"
        result = self.scorer.score(text)
        self.assertAlmostEqual(result.score, 1 / 11)
        self.assertEqual(result.label, "neutral")

    def test_bounds(self):
        texts = [
            "bad bad bad",
            "good",
            "nothing here is fine",
            "a b c d e f g h i j k l m n o p q r s t u v w x y z good",
        ]
        for text in texts:
            result = self.scorer.score(text)
            self.assertGreaterEqual(result.score, -1)
            self.assertLessEqual(result.score, 1)
            self.assertGreaterEqual(result.confidence, 0)
            self.assertLessEqual(result.confidence, 1)

    def test_custom_lexicons(self):
        scorer = SentimentScorer(positive_words={"sunny"}, negative_words={"rainy"})
        self.assertEqual(scorer.score("sunny sunny rainy good").label, "positive")
        self.assertAlmostEqual(scorer.score("sunny sunny rainy good").score, 1 / 3)


if __name__ == '__main__':
    unittest.main()
