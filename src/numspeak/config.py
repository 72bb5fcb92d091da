from pathlib import Path

from pydantic import BaseModel

from .utils import read_yaml


class VerbalizerConfig(BaseModel):
    locale: str = "en"
    fallback_on_error: str | None = None
    locale_paths: list[Path] = []
    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: str | Path, key_to_config: tuple[str, ...] = ("numspeak",)) -> "VerbalizerConfig":
        """
        Load a VerbalizerConfig instance from a YAML configuration file.

        Parameters:
            path: Path to the YAML configuration file
            key_to_config: Tuple of keys to navigate nested configuration

        Returns:
            VerbalizerConfig: Configuration object with validated settings

        Raises:
            OSError: If the file cannot be read
            KeyError: If a key in ``key_to_config`` is missing
            pydantic.ValidationError: If the configuration is invalid
        """
        config = read_yaml(path)
        for key in key_to_config:
            config = config[key]

        return cls.model_validate(config or {})
