"""Write a JSON document atomically."""

import json
import tempfile
from pathlib import Path
from typing import Any


def write_json_file(path: Path, data: Any) -> None:
    """Write data as indented JSON to path, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    # Write via NamedTemporaryFile in target directory to avoid cross-device issues
    content = json.dumps(data, indent=2)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        prefix=f"{path.name}.",
        suffix=".tmp",
    ) as fh:
        tmp_path = Path(fh.name)
        fh.write(content)

    tmp_path.replace(path)
