# hs_deckstring/config.py

"""
Configuration models and YAML utilities for deckstring encoding and deck editing.

Classes:
    CodecMeta: Settings used when writing deckstrings.
    LimitsMeta: Copy limits enforced when adding cards to a decklist.
    DeckstringConfig: Top-level configuration.
"""
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field

DEFAULT_TRAILER = "# To use this deck, copy it to your clipboard and create a new deck in Hearthstone"


class CodecMeta(BaseModel):
    """
    Settings used when writing deckstrings.

    Attributes:
        version: Version number written after the header byte.
        trailer: Text line written after the payload when a deck name is given.
    """

    version: int = Field(0, ge=0)
    trailer: str = DEFAULT_TRAILER


class LimitsMeta(BaseModel):
    """
    Copy limits enforced when adding cards to a decklist.

    Attributes:
        slot_limit: Maximum copies of a single card, None for no limit.
        card_limit: Maximum cards in the whole deck, None for no limit.
    """

    slot_limit: Optional[int] = Field(2, ge=1)
    card_limit: Optional[int] = Field(30, ge=1)


class DeckstringConfig(BaseModel):
    """Main configuration class for deckstring tools."""

    codec: CodecMeta = Field(default_factory=CodecMeta)
    limits: LimitsMeta = Field(default_factory=LimitsMeta)

    @classmethod
    def from_yaml(cls, path_or_str: Union[str, Path]) -> "DeckstringConfig":
        """
        Create a DeckstringConfig from a YAML file or a YAML string.

        A Path must point at an existing file. A str is read as a file when
        such a file exists and parsed as YAML text otherwise.

        Raises:
            FileNotFoundError: If a Path is given that doesn't exist.
            ValueError: If the YAML content is not a valid configuration.
        """
        if isinstance(path_or_str, Path):
            if not path_or_str.exists():
                raise FileNotFoundError(f"YAML file not found: {path_or_str}")
            with open(path_or_str, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        elif "\n" not in path_or_str and Path(path_or_str).is_file():
            with open(path_or_str, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        else:
            data = yaml.safe_load(path_or_str)
        return cls.from_dict(data or {})

    def to_yaml(self, path: Optional[Union[str, Path]] = None) -> Optional[str]:
        """
        Convert the configuration to YAML.

        Args:
            path: Optional path to write the YAML to.

        Returns:
            YAML string if path is None, None otherwise.
        """
        yaml_str = yaml.dump(self.model_dump(), default_flow_style=False)
        if path:
            with open(path, "w", encoding="utf-8") as f:
                f.write(yaml_str)
            return None
        return yaml_str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeckstringConfig":
        """Create a DeckstringConfig from a dictionary.

        Raises:
            ValueError: If data is invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"Invalid deckstring configuration: expected a mapping, got {type(data).__name__}")
        try:
            return cls.model_validate(data)
        except Exception as e:
            raise ValueError(f"Invalid deckstring configuration: {e}")

    @property
    def version(self) -> int:
        """Version number written into new deckstrings."""
        return self.codec.version

    @property
    def trailer(self) -> str:
        """Trailer line written after named deckstrings."""
        return self.codec.trailer

    @property
    def slot_limit(self) -> Optional[int]:
        """Maximum copies of one card."""
        return self.limits.slot_limit

    @property
    def card_limit(self) -> Optional[int]:
        """Maximum cards in a deck."""
        return self.limits.card_limit


def default_config() -> DeckstringConfig:
    """Return a configuration holding the default settings."""
    return DeckstringConfig()
