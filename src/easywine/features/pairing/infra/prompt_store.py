from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from easywine.features.pairing.domain.prompts import SOMMELIER_PROMPT

log = logging.getLogger("pairing")


def load_prompt_template(path: Optional[str] = None) -> str:
    """
    Return the sommelier prompt template. A file configured through
    PAIRING_PROMPT_FILE replaces the built-in one; it is read on every call so
    edits apply without a restart.
    """
    if not path:
        return SOMMELIER_PROMPT
    text = Path(path).expanduser().read_text(encoding="utf-8")
    if not text.strip():
        log.warning("prompt file %s is empty, using built-in template", path)
        return SOMMELIER_PROMPT
    return text
