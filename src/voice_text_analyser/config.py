"""
Модуль для работы с конфигурацией проекта

Функции:
- Загрузка config.yaml (+ профили: config.prod.yaml, config.test.yaml)
- ENV-переопределения (префикс VOICE_TEXT_ANALYSER_, вложенность через __)
- Валидация значений
- Настройка логирования
"""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dotenv import load_dotenv
import logging
from datetime import datetime

logger = logging.getLogger(__name__)

ENV_PREFIX = 'VOICE_TEXT_ANALYSER_'
ENV_PROFILE_KEY = 'VOICE_TEXT_ANALYSER_ENV'


class Config:
    """Класс для работы с конфигурацией проекта"""

    def __init__(self, config_path: Optional[str] = None, configure_logging: bool = True):
        """
        Инициализация конфигурации

        Args:
            config_path: Путь к файлу конфигурации
            configure_logging: Настраивать ли корневой логгер по конфигурации
        """
        self._explicit_path = config_path is not None
        if config_path:
            self.config_path = Path(config_path)
        else:
            # Ищем config.yaml в текущей директории и выше
            current_dir = Path.cwd()
            candidate = current_dir / "config.yaml"
            while not candidate.exists() and current_dir.parent != current_dir:
                current_dir = current_dir.parent
                candidate = current_dir / "config.yaml"
            self.config_path = candidate if candidate.exists() else Path.cwd() / "config.yaml"

        self.config_data: Dict[str, Any] = {}
        self.env_data: Dict[str, Any] = {}

        self._load_env()
        self._load_config()
        self._apply_env_overrides()
        self._validate()
        if configure_logging:
            self._configure_logging_if_needed()

    def _load_env(self) -> None:
        """Загружает переменные окружения из .env файла"""
        load_dotenv()
        self.env_data = {
            key: val for key, val in os.environ.items() if key.startswith(ENV_PREFIX)
        }

    # --- Профили/ENV overrides/валидация/логирование ---
    def _resolve_config_path(self) -> Path:
        if self._explicit_path:
            return self.config_path
        env = os.getenv(ENV_PROFILE_KEY, '').lower().strip()
        root = self.config_path.parent
        if env == 'production':
            candidate = root / 'config.prod.yaml'
        elif env == 'testing':
            candidate = root / 'config.test.yaml'
        else:
            candidate = root / 'config.yaml'
        if candidate.exists():
            return candidate
        # Фолбэк на исходный путь
        return self.config_path

    def _load_config(self) -> None:
        """Загружает конфигурацию из YAML файла поверх значений по умолчанию"""
        self.config_data = self._get_default_config()
        self.config_path = self._resolve_config_path()
        if not self.config_path.exists():
            logger.debug(f"Файл конфигурации {self.config_path} не найден, используются значения по умолчанию")
            return
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Ошибка загрузки конфигурации {self.config_path}: {e}; используются значения по умолчанию")
            return
        if not isinstance(loaded, dict):
            logger.warning(f"Файл конфигурации {self.config_path} не содержит словаря, игнорируется")
            return
        self._merge(self.config_data, loaded)
        logger.info(f"Конфигурация загружена: {self.config_path}")

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def _set_nested(self, data: Dict[str, Any], dotted: str, value: Any) -> None:
        cur = data
        keys = dotted.split('.')
        for k in keys[:-1]:
            if k not in cur or not isinstance(cur[k], dict):
                cur[k] = {}
            cur = cur[k]
        cur[keys[-1]] = value

    def _apply_env_overrides(self) -> None:
        """Переопределяет конфиг значениями из ENV (VOICE_TEXT_ANALYSER_*)."""
        for key, val in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # Пропускаем служебные (ENV/DEBUG)
            if key in (ENV_PROFILE_KEY, ENV_PREFIX + 'DEBUG'):
                continue
            tail = key[len(ENV_PREFIX):]
            # Вложенность разделяется двойным подчёркиванием
            dotted = tail.replace('__', '.').lower()
            parsed: Any = val
            if val.lower() in ('true', 'false'):
                parsed = (val.lower() == 'true')
            else:
                try:
                    if '.' in val:
                        parsed = float(val)
                    else:
                        parsed = int(val)
                except ValueError:
                    parsed = val
            self._set_nested(self.config_data, dotted, parsed)
        if os.getenv(ENV_PROFILE_KEY):
            logger.info(f"Активирован профиль: {os.getenv(ENV_PROFILE_KEY)}")

    def _validate(self) -> None:
        """Проверяет диапазоны числовых параметров."""
        for key, default in (
            ('text_analysis.top_words_limit', 10),
            ('text_analysis.display_top_words', 5),
            ('text_analysis.chart_top_words', 8),
            ('report.max_top_words', 10),
        ):
            try:
                value = int(self.get(key, default))
            except (TypeError, ValueError):
                logger.warning(f"{key}: некорректное значение, установлено {default}")
                value = default
            if value < 0:
                logger.warning(f"{key} < 0, принудительно установлено в 0")
                value = 0
            self._set_nested(self.config_data, key, value)

    def _configure_logging_if_needed(self, force: bool = False) -> None:
        """Инициализирует/переинициализирует базовое логирование по config.

        Повторная конфигурация выполняется, если:
          - ранее не конфигурировалось, или
          - изменился уровень/формат/файл логирования, или
          - явно указан force=True
        """
        root = logging.getLogger()

        console_level_name = str(self.get_console_logging_level()).upper()
        file_level_name = str(self.get_file_logging_level()).upper()
        console_level = getattr(logging, console_level_name, logging.INFO)
        file_level = getattr(logging, file_level_name, logging.DEBUG)

        desired_fmt = self.get_logging_format()
        desired_file = self.get_logging_file() if self.is_logging_to_file_enabled() else None

        if getattr(root, "_voice_text_analyser_configured", False) and not force:
            if (
                getattr(root, "_voice_text_analyser_console_level", None) == console_level_name and
                getattr(root, "_voice_text_analyser_file_level", None) == file_level_name and
                getattr(root, "_voice_text_analyser_format", None) == desired_fmt and
                getattr(root, "_voice_text_analyser_file", None) == desired_file
            ):
                return

        handlers: List[logging.Handler] = []
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(desired_fmt))
        handlers.append(console)

        if desired_file:
            self.cleanup_old_log_files()
            log_file = Path(desired_file)
            try:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                fh = logging.FileHandler(log_file, encoding='utf-8')
                fh.setLevel(file_level)
                fh.setFormatter(logging.Formatter(desired_fmt))
                handlers.append(fh)
            except OSError as e:
                logger.warning(f"Не удалось открыть файл лога {log_file}: {e}")

        root_level = min(console_level, file_level) if desired_file else console_level
        logging.basicConfig(level=root_level, handlers=handlers, format=desired_fmt, force=True)
        setattr(root, "_voice_text_analyser_configured", True)
        setattr(root, "_voice_text_analyser_console_level", console_level_name)
        setattr(root, "_voice_text_analyser_file_level", file_level_name)
        setattr(root, "_voice_text_analyser_format", desired_fmt)
        setattr(root, "_voice_text_analyser_file", desired_file)

    def _get_default_config(self) -> Dict[str, Any]:
        """Возвращает конфигурацию по умолчанию"""
        return copy.deepcopy({
            'text_analysis': {
                # Длина основного рейтинга слов в результате анализа
                'top_words_limit': 10,
                # Сокращённые рейтинги для отображения
                'display_top_words': 5,
                'chart_top_words': 8,
            },
            'files': {
                'results_folder': "data/results",
                'results_filename_prefix': "nlp-analysis-report",
                'transcript_filename_prefix': "transcription",
            },
            'report': {
                'title': "Voice to Text NLP Analysis Report",
                'max_top_words': 10,
                'include_transcript': True,
            },
            'excel': {
                'statistics_sheet_name': "Statistics",
                'sentiment_sheet_name': "Sentiment",
                'top_words_sheet_name': "Top Words",
                'frequency_sheet_name': "Frequency",
            },
            'logging': {
                'level': "WARNING",
                'format': "%(asctime)s - %(levelname)s - %(message)s",
                'log_to_file': False,
                'log_file': "logs/voice_text_analyser.log",
                'max_log_files': 10,
            },
        })

    def get(self, key: str, default: Any = None) -> Any:
        """
        Получает значение конфигурации по ключу

        Args:
            key: Ключ в формате 'section.subsection.parameter'
            default: Значение по умолчанию

        Returns:
            Значение параметра или default
        """
        try:
            value = self.config_data
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_env(self, key: str, default: Any = None) -> Any:
        """Получает значение переменной окружения с префиксом проекта"""
        return self.env_data.get(key, default)

    def get_text_analysis_config(self) -> Dict[str, Any]:
        """Получает конфигурацию анализа текста"""
        return self.config_data.get('text_analysis', {})

    def get_top_words_limit(self) -> int:
        """Длина рейтинга слов в результате анализа"""
        return int(self.get('text_analysis.top_words_limit', 10))

    def get_display_top_words(self) -> int:
        """Количество слов в кратком рейтинге"""
        return int(self.get('text_analysis.display_top_words', 5))

    def get_chart_top_words(self) -> int:
        """Количество слов для столбчатой диаграммы"""
        return int(self.get('text_analysis.chart_top_words', 8))

    def get_results_folder(self) -> str:
        """Получает папку для результатов"""
        return self.get('files.results_folder', "data/results")

    def get_results_filename_prefix(self) -> str:
        """Получает префикс для файлов результатов"""
        return self.get('files.results_filename_prefix', "nlp-analysis-report")

    def get_transcript_filename_prefix(self) -> str:
        """Получает префикс для файлов расшифровки"""
        return self.get('files.transcript_filename_prefix', "transcription")

    def get_report_title(self) -> str:
        return self.get('report.title', "Voice to Text NLP Analysis Report")

    def get_report_max_top_words(self) -> int:
        return int(self.get('report.max_top_words', 10))

    def is_report_transcript_enabled(self) -> bool:
        return bool(self.get('report.include_transcript', True))

    def get_excel_config(self) -> Dict[str, Any]:
        """Получает конфигурацию Excel"""
        return self.config_data.get('excel', {})

    def get_console_logging_level(self) -> str:
        """Получает уровень логирования для консоли"""
        return self.get('logging.console_level', self.get('logging.level', "WARNING"))

    def get_file_logging_level(self) -> str:
        """Получает уровень логирования для файла"""
        return self.get('logging.file_level', "DEBUG")

    def get_logging_level(self) -> str:
        return self.get_console_logging_level()

    def get_logging_format(self) -> str:
        """Получает формат логов"""
        return self.get('logging.format', "%(asctime)s - %(levelname)s - %(message)s")

    def get_logging_file(self) -> str:
        """Получает путь к файлу логов ({timestamp} заменяется временной меткой сессии)"""
        template = self.get('logging.log_file', "logs/voice_text_analyser.log")
        if "{timestamp}" in template:
            return template.replace("{timestamp}", datetime.now().strftime("%Y%m%d_%H%M%S"))
        return template

    def is_logging_to_file_enabled(self) -> bool:
        """Проверяет, включено ли логирование в файл"""
        return bool(self.get('logging.log_to_file', False))

    def get_max_log_files(self) -> int:
        """Получает максимальное количество файлов логов для хранения"""
        return int(self.get('logging.max_log_files', 10))

    def cleanup_old_log_files(self) -> None:
        """Удаляет старые файлы логов, оставляя только последние max_log_files"""
        logs_dir = Path(self.get('logging.log_file', "logs/voice_text_analyser.log")).parent
        if not logs_dir.exists():
            return

        log_files = sorted(logs_dir.glob("voice_text_analyser*.log"), key=lambda f: f.stat().st_mtime)
        max_files = self.get_max_log_files()
        if len(log_files) <= max_files:
            return

        for old_file in log_files[:-max_files]:
            try:
                old_file.unlink()
                logger.debug(f"Удален старый лог файл: {old_file}")
            except OSError as e:
                logger.debug(f"Не удалось удалить лог файл {old_file}: {e}")


# Глобальный экземпляр конфигурации
config = Config()
