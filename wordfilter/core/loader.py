# wordfilter/core/loader.py

"""Resource loaders for the character set configuration and the word list."""

import yaml
import logging
from pathlib import Path
from typing import Dict, List, Any, Optional, Tuple, Union

from wordfilter.core.definitions import Defaults
from wordfilter.core.exceptions import ConfigurationError
from wordfilter.logic.validators import ValidationLogic

logger = logging.getLogger(__name__)

RESOURCE_DIR = Path(__file__).parent


class CharsetLoader:
    """Singleton loader for the matchable script ranges.

    Loads charsets.yaml once and caches it for the application lifecycle.
    """

    _instance: Optional["CharsetLoader"] = None
    _config: Dict[str, Any] = {}
    _loaded: bool = False

    def __new__(cls) -> "CharsetLoader":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not CharsetLoader._loaded:
            self._load_config()

    def _load_config(self) -> None:
        """Loads charsets.yaml from the module directory.

        Raises:
            ConfigurationError: If file is missing, invalid, or empty.
        """
        config_path = RESOURCE_DIR / Defaults.CHARSETS

        try:
            if not config_path.exists():
                error_msg = f"Configuration file not found: {config_path}"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

            with open(config_path, "r", encoding="utf-8") as f:
                CharsetLoader._config = yaml.safe_load(f)

            if not CharsetLoader._config:
                raise ConfigurationError("Configuration file is empty or invalid")

            self._validate_config()

            CharsetLoader._loaded = True
            logger.info(
                "Charset configuration loaded",
                extra={
                    "config_path": str(config_path),
                    "script_count": len(CharsetLoader._config["scripts"]),
                },
            )

        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to parse {Defaults.CHARSETS}: {e}") from e
        except Exception as e:
            if isinstance(e, ConfigurationError):
                raise
            logger.error(f"Configuration loading failed: {e}", exc_info=True)
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

    def _validate_config(self) -> None:
        """Validates that every script declares an ordered integer range.

        Raises:
            ConfigurationError: If the scripts section is missing or malformed.
        """
        scripts = CharsetLoader._config.get("scripts")
        if not isinstance(scripts, dict) or not scripts:
            raise ConfigurationError("Missing required configuration section: scripts")

        for name, entry in scripts.items():
            start = entry.get("start") if isinstance(entry, dict) else None
            end = entry.get("end") if isinstance(entry, dict) else None
            if not isinstance(start, int) or not isinstance(end, int) or start > end:
                error_msg = f"Invalid code point range for script '{name}'"
                logger.error(error_msg)
                raise ConfigurationError(error_msg)

    @classmethod
    def get_instance(cls) -> "CharsetLoader":
        """Returns the singleton instance of CharsetLoader."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def script_names(self) -> List[str]:
        """Returns the names of all declared scripts."""
        return list(self._config.get("scripts", {}))

    def get_range(self, script: str) -> Tuple[int, int]:
        """Returns the inclusive code point range of a script.

        Args:
            script: Script name (e.g., Script.CJK)

        Raises:
            ConfigurationError: If the script is not declared.
        """
        entry = self._config.get("scripts", {}).get(script)
        if entry is None:
            raise ConfigurationError(f"Unknown matchable script: '{script}'")
        return entry["start"], entry["end"]


def load_keywords(path: Optional[Union[str, Path]] = None) -> List[str]:
    """Reads a line-delimited keyword list.

    Surrounding whitespace is stripped and blank lines are skipped. A read
    failure is logged and the keywords read before it are returned, so a
    broken word list degrades to a partial (or empty) dictionary.

    Args:
        path: Word list file; the bundled list is used when omitted

    Returns:
        Keywords in file order
    """
    source = Path(path) if path else RESOURCE_DIR / Defaults.WORD_LIST
    keywords: List[str] = []

    try:
        with open(source, "r", encoding="utf-8-sig") as f:
            for line in f:
                keyword = ValidationLogic.clean_keyword(line)
                if keyword:
                    keywords.append(keyword)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            f"Failed to load sensitive word list: {e}",
            extra={"source": str(source), "keywords_read": len(keywords)},
        )
        return keywords

    logger.info(
        "Sensitive word list loaded",
        extra={"source": str(source), "keyword_count": len(keywords)},
    )
    return keywords
