"""Key-based message lookup for user-facing text.

Messages are stored as a flat mapping of dotted message keys to text. Missing
messages never raise: `translate` falls back to the joined key so the UI still
renders something recognizable.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Final

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES_FILE: Final[Path] = Path(__file__).resolve().parent / "data" / "messages.yaml"


class MessageBundle:
    """A loaded set of messages for one locale."""

    def __init__(self, messages: Mapping[str, str]) -> None:
        self._messages: dict[str, str] = {str(key): str(value) for key, value in messages.items()}

    def __len__(self) -> int:
        return len(self._messages)

    def translate(self, *keys: str) -> str:
        """Return the message for the dot-joined keys, or the joined key itself.

        Args:
            *keys: Message key parts, e.g. ("metric", "ncloc", "name").

        Returns:
            The translated message, or the message key when missing.
        """

        message_key = ".".join(keys)
        message = self._messages.get(message_key)
        if message is None:
            logger.debug("No message for key %r", message_key)
            return message_key
        return message

    def translate_with_parameters(self, message_key: str, *parameters: object) -> str:
        """Return a message with `{0}`, `{1}`, ... replaced by parameters.

        When the message is missing the result is the message key followed by
        the parameters, all joined with dots.
        """

        message = self._messages.get(message_key)
        if message is None:
            logger.debug("No message for key %r", message_key)
            return ".".join([message_key, *(str(parameter) for parameter in parameters)])
        for index, parameter in enumerate(parameters):
            message = message.replace(f"{{{index}}}", str(parameter))
        return message


def load_message_bundle(path: Path | str = DEFAULT_MESSAGES_FILE) -> MessageBundle:
    """Load a MessageBundle from a YAML mapping file."""

    with Path(path).open(encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Message bundle {str(path)!r} must contain a mapping.")
    bundle = MessageBundle(payload)
    logger.info("Loaded %d messages from %s", len(bundle), path)
    return bundle


@lru_cache(maxsize=1)
def default_bundle() -> MessageBundle:
    """Return the packaged English message bundle."""

    return load_message_bundle(DEFAULT_MESSAGES_FILE)


def translate(*keys: str) -> str:
    """Translate dot-joined keys with the default bundle."""

    return default_bundle().translate(*keys)


def translate_with_parameters(message_key: str, *parameters: object) -> str:
    """Translate a parameterized message with the default bundle."""

    return default_bundle().translate_with_parameters(message_key, *parameters)
