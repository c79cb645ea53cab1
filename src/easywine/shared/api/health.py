from __future__ import annotations
import time
from fastapi import APIRouter, Depends

from easywine.shared.config.settings import Settings, get_settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health(cfg: Settings = Depends(get_settings)):
    return {
        "ok": True,
        "ts": time.time(),
        "model": cfg.GEMINI_MODEL,
        "llm_configured": bool(cfg.GOOGLE_API_KEY),
    }
