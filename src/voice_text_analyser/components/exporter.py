"""
Компонент для экспорта результатов анализа.

Отвечает за экспорт результатов в различные форматы:
Excel, JSON, текстовый отчёт и сохранение исходной расшифровки.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Union
import pandas as pd
from ..config import config
from ..interfaces.text_processor import ResultExporterInterface, AnalysisResult
import logging

logger = logging.getLogger(__name__)


class ResultExporter(ResultExporterInterface):
    """Экспортёр результатов анализа."""

    def __init__(self, output_dir: Optional[str] = None):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов (по умолчанию из config)
        """
        self.output_dir = Path(output_dir or config.get_results_folder())

    @staticmethod
    def _prepare_path(filepath: Union[str, Path], suffix: str) -> Path:
        filepath = Path(filepath)
        if not filepath.suffix:
            filepath = filepath.with_suffix(suffix)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        return filepath

    def export_to_excel(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в Excel формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к записанному файлу
        """
        filepath = self._prepare_path(filepath, '.xlsx')
        excel_cfg = config.get_excel_config()
        stats = result.statistics

        stats_df = pd.DataFrame({
            'Metric': [
                'Total Words',
                'Unique Words',
                'Sentences',
                'Average Words per Sentence',
                'Average Word Length',
            ],
            'Value': [
                stats.total_words,
                stats.unique_words,
                stats.sentences,
                stats.average_words_per_sentence,
                stats.average_word_length,
            ],
        })
        sentiment_df = pd.DataFrame({
            'Metric': ['Label', 'Score', 'Confidence', 'Confidence (%)'],
            'Value': [
                result.sentiment.label,
                result.sentiment.score,
                result.sentiment.confidence,
                result.sentiment.confidence_percent,
            ],
        })
        top_df = pd.DataFrame(
            [{'Rank': i, 'Word': item.word, 'Count': item.count} for i, item in enumerate(result.top_words, 1)],
            columns=['Rank', 'Word', 'Count'],
        )
        freq_df = pd.DataFrame(
            list(result.word_frequency.items()),
            columns=['Word', 'Count'],
        ).sort_values('Count', ascending=False, kind='stable')

        try:
            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                stats_df.to_excel(writer, sheet_name=excel_cfg.get('statistics_sheet_name', 'Statistics'), index=False)
                sentiment_df.to_excel(writer, sheet_name=excel_cfg.get('sentiment_sheet_name', 'Sentiment'), index=False)
                top_df.to_excel(writer, sheet_name=excel_cfg.get('top_words_sheet_name', 'Top Words'), index=False)
                freq_df.to_excel(writer, sheet_name=excel_cfg.get('frequency_sheet_name', 'Frequency'), index=False)
        except (OSError, ValueError) as e:
            logger.error(f"Ошибка экспорта в Excel {filepath}: {e}")
            raise

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_to_json(self, result: AnalysisResult, filepath: Union[str, Path]) -> Path:
        """
        Экспортирует результат в JSON формат.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла

        Returns:
            Путь к записанному файлу
        """
        filepath = self._prepare_path(filepath, '.json')
        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
            },
            'analysis': result.to_dict(),
        }

        try:
            with open(filepath, 'w', encoding='utf-8') as jsonfile:
                json.dump(json_data, jsonfile, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON {filepath}: {e}")
            raise

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def format_summary_report(self, result: AnalysisResult, transcript: Optional[str] = None,
                              generated_at: Optional[datetime] = None) -> str:
        """
        Формирует текст отчёта по результатам анализа.

        Args:
            result: Результат анализа
            transcript: Исходная расшифровка (добавляется в конец отчёта)
            generated_at: Время формирования (по умолчанию текущее)

        Returns:
            Текст отчёта
        """
        generated_at = generated_at or datetime.now()
        stats = result.statistics
        lines: List[str] = [
            config.get_report_title(),
            "=" * 50,
            "",
            f"Generated on: {generated_at.strftime('%Y-%m-%d')}",
            "",
            "Text Statistics:",
            f"Total Words: {stats.total_words}",
            f"Unique Words: {stats.unique_words}",
            f"Sentences: {stats.sentences}",
            f"Average Words per Sentence: {stats.average_words_per_sentence}",
            f"Average Word Length: {stats.average_word_length}",
            "",
            "Sentiment Analysis:",
            f"Overall Sentiment: {result.sentiment.label.upper()}",
            f"Confidence Score: {result.sentiment.confidence_percent}%",
            "",
            "Top Words:",
        ]
        for i, item in enumerate(result.top(config.get_report_max_top_words()), 1):
            lines.append(f"{i}. {item.word}: {item.count}")

        if transcript and config.is_report_transcript_enabled():
            lines.extend(["", "Transcription:", transcript])

        return "\n".join(lines) + "\n"

    def export_summary_report(self, result: AnalysisResult, filepath: Union[str, Path],
                              transcript: Optional[str] = None) -> Path:
        """
        Экспортирует краткий отчёт по результатам.

        Args:
            result: Результат анализа
            filepath: Путь для сохранения файла
            transcript: Исходная расшифровка

        Returns:
            Путь к записанному файлу
        """
        filepath = self._prepare_path(filepath, '.txt')
        try:
            filepath.write_text(self.format_summary_report(result, transcript), encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка экспорта отчёта {filepath}: {e}")
            raise

        logger.info(f"Краткий отчёт сохранён: {filepath}")
        return filepath

    def export_transcript(self, text: str, filepath: Union[str, Path]) -> Path:
        """
        Сохраняет исходную расшифровку в текстовый файл.

        Args:
            text: Текст расшифровки
            filepath: Путь для сохранения файла

        Returns:
            Путь к записанному файлу
        """
        filepath = self._prepare_path(filepath, '.txt')
        try:
            filepath.write_text(text or "", encoding='utf-8')
        except OSError as e:
            logger.error(f"Ошибка сохранения расшифровки {filepath}: {e}")
            raise

        logger.info(f"Расшифровка сохранена: {filepath}")
        return filepath

    def export_all_formats(self, result: AnalysisResult, base_filename: Optional[str] = None,
                           transcript: Optional[str] = None) -> Dict[str, Path]:
        """
        Экспортирует результат во все доступные форматы.

        Args:
            result: Результат анализа
            base_filename: Базовое имя файла без расширения (по умолчанию из config)
            transcript: Исходная расшифровка

        Returns:
            Словарь с путями к экспортированным файлам
        """
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        base_filename = f"{base_filename or config.get_results_filename_prefix()}_{timestamp}"

        exported_files = {
            'excel': self.export_to_excel(result, self.output_dir / f"{base_filename}.xlsx"),
            'json': self.export_to_json(result, self.output_dir / f"{base_filename}.json"),
            'report': self.export_summary_report(
                result, self.output_dir / f"{base_filename}_report.txt", transcript
            ),
        }
        if transcript:
            exported_files['transcript'] = self.export_transcript(
                transcript,
                self.output_dir / f"{config.get_transcript_filename_prefix()}_{timestamp}.txt",
            )

        logger.info(f"Результат экспортирован во все форматы в папку: {self.output_dir}")
        return exported_files
