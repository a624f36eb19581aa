from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def fetch(cfg: Dict[str, Any]) -> List[str]:
    """Resolve the local input file for the run; nothing is downloaded."""
    path = Path(cfg["paths"]["data_path"])
    if not path.exists():
        raise FileNotFoundError(f"realestate_tx input not found: {path}")
    logger.info("Using realestate_tx input %s", path)
    return [str(path)]
