from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from ..config import SUMMARY_FILE, VIEW_FILES
from ..views import ViewPayload


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False)


def write_views(payloads: List[ViewPayload], summary: Dict[str, Any], out_dir: Path) -> List[Path]:
    """
    Write one JSON file per view plus the page summary.

    Returns the written paths, summary last.
    """
    written: List[Path] = []
    for payload in payloads:
        target = out_dir / VIEW_FILES[payload.view]
        write_json(target, payload.to_dict())
        written.append(target)

    target = out_dir / SUMMARY_FILE
    write_json(target, summary)
    written.append(target)
    return written
