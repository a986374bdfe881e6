"""Settings for the ELIZA responder and interactive loop."""

from dataclasses import dataclass, field
import json
from typing import Any, Dict

from eliza.eliza_error import ElizaSettingsError, ErrorMessageBuilder


DEFAULT_VIEWPOINT_SWAPS = {
    "I": "you",
    "you": "I",
    "me": "you",
    "am": "are",
}

SETTINGS_KEYS = [
    "caseSensitive",
    "viewpointSwaps",
    "prompt",
    "quitWord",
    "fallbackResponse",
    "rulesPath",
]


@dataclass
class ElizaSettings:
    """
    Configuration for matching, responding and the interactive loop.
    """
    case_sensitive: bool = True
    viewpoint_swaps: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_VIEWPOINT_SWAPS))
    prompt: str = "ELIZA> "
    quit_word: str = "quit"
    fallback_response: str | None = None  # None means print nothing when no rule matches
    rules_path: str | None = None  # None means use the built-in rules

    @classmethod
    def create_default(cls) -> "ElizaSettings":
        """Create a new ElizaSettings object with default values."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "ElizaSettings":
        """
        Load settings from a JSON file.

        Keys that are missing from the file keep their default values.

        Args:
            path: Path to the settings file

        Returns:
            ElizaSettings object with loaded values

        Raises:
            ElizaSettingsError: If the file cannot be read, is not valid JSON, or has values of the wrong type
        """
        settings = cls.create_default()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except OSError as e:
            raise ElizaSettingsError(
                message=f"Cannot read settings file: {path}",
                context=str(e),
                suggestion="Check that the file exists and is readable"
            ) from e

        except json.JSONDecodeError as e:
            raise ElizaSettingsError(
                message=f"Settings file is not valid JSON: {path}",
                context=str(e),
                position=e.pos,
                example='{"caseSensitive": false, "prompt": "> "}'
            ) from e

        if not isinstance(data, dict):
            raise ElizaSettingsError(
                message="Settings file must contain a JSON object",
                received=f"Found: {type(data).__name__}",
                example='{"caseSensitive": false, "prompt": "> "}'
            )

        for key in data:
            if key not in SETTINGS_KEYS:
                similar = ErrorMessageBuilder.suggest_similar_names(key, SETTINGS_KEYS)
                raise ElizaSettingsError(
                    message=f"Unknown setting: '{key}'",
                    suggestion=f"Did you mean '{similar[0]}'?" if similar else None,
                    expected=", ".join(SETTINGS_KEYS)
                )

        settings.case_sensitive = cls._get_typed(data, "caseSensitive", bool, settings.case_sensitive)
        settings.prompt = cls._get_typed(data, "prompt", str, settings.prompt)
        settings.quit_word = cls._get_typed(data, "quitWord", str, settings.quit_word)
        settings.fallback_response = cls._get_typed(data, "fallbackResponse", str, settings.fallback_response)
        settings.rules_path = cls._get_typed(data, "rulesPath", str, settings.rules_path)

        swaps = cls._get_typed(data, "viewpointSwaps", dict, None)
        if swaps is not None:
            if not all(isinstance(k, str) and isinstance(v, str) for k, v in swaps.items()):
                raise ElizaSettingsError(
                    message="viewpointSwaps must map words to words",
                    received=f"Found: {swaps!r}",
                    example='{"viewpointSwaps": {"I": "you", "you": "I"}}'
                )

            settings.viewpoint_swaps = dict(swaps)

        return settings

    @staticmethod
    def _get_typed(data: Dict[str, Any], key: str, expected_type: type, default: Any) -> Any:
        """Fetch an optional key, checking its type."""
        if key not in data or data[key] is None:
            return default

        value = data[key]
        if not isinstance(value, expected_type):
            raise ElizaSettingsError(
                message=f"Setting '{key}' has the wrong type",
                received=f"{key}: {value!r} ({type(value).__name__})",
                expected=expected_type.__name__
            )

        return value
