"""
Animation configuration with JSON persistence.
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Union

from .core.easing import EASING_PRESETS, SIMPLE_EASINGS
from .core.exceptions import ConfigurationError
from .core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class AnimationConfig:
    """
    Playback settings for a single animation.

    Attributes:
        duration: Seconds for one playthrough
        easing: Easing name (see list_easings)
        loop: Restart from the beginning after reaching the end
        reverse: Play from the end towards the start
    """
    duration: float = 1.0
    easing: str = "linear"
    loop: bool = False
    reverse: bool = False

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise ConfigurationError for values no animation can use."""
        if not isinstance(self.duration, (int, float)) or isinstance(self.duration, bool):
            raise ConfigurationError("duration must be a number", field_name="duration",
                                     value=self.duration)
        if self.duration < 0:
            raise ConfigurationError("duration must not be negative", field_name="duration",
                                     value=self.duration)
        if self.easing not in SIMPLE_EASINGS and self.easing not in EASING_PRESETS:
            raise ConfigurationError(f"Unknown easing '{self.easing}'", field_name="easing")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnimationConfig":
        """Create from dict; unknown keys are ignored."""
        unknown = set(data) - {"duration", "easing", "loop", "reverse"}
        if unknown:
            logger.warning(f"Ignoring unknown animation config keys: {sorted(unknown)}")
        return cls(
            duration=data.get("duration", 1.0),
            easing=data.get("easing", "linear"),
            loop=bool(data.get("loop", False)),
            reverse=bool(data.get("reverse", False)),
        )

    def save(self, path: Union[str, Path]) -> None:
        """Save config to JSON file."""
        path = Path(path)
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved animation config to {path}")

    @classmethod
    def load(cls, path: Union[str, Path]) -> "AnimationConfig":
        """Load config from JSON file."""
        path = Path(path)
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a JSON object in {path}")
        return cls.from_dict(data)


__all__ = ["AnimationConfig"]
