from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: str | Path) -> Any:
    """
    Parse a YAML file, retrying with ``utf-8-sig`` when a byte order mark gets in the way.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 under either encoding
        yaml.YAMLError: If the text is not valid YAML
    """
    path = Path(path)

    for encoding in ["utf-8", "utf-8-sig"]:
        try:
            return yaml.safe_load(path.read_text(encoding=encoding))
        except UnicodeDecodeError:
            if encoding == "utf-8-sig":
                raise
    return None
