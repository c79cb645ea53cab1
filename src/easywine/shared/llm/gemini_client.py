from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import httpx

from easywine.shared.config.settings import settings
from easywine.shared.concurrency import LLM_SEMAPHORE

log = logging.getLogger("gemini")


class LLMNotConfigured(RuntimeError):
    """Raised when no API key is available for the upstream model."""


class LLMResponseError(RuntimeError):
    """Raised when the upstream answer carries no usable text."""


@dataclass(frozen=True)
class ImagePart:
    data: bytes
    mime_type: str = "image/jpeg"


def _generate_url(base_url: str, model: str) -> str:
    return f"{base_url.rstrip('/')}/models/{model}:generateContent"


def _headers(api_key: str) -> Dict[str, str]:
    return {
        "x-goog-api-key": api_key,
        "Content-Type": "application/json",
    }


def _build_parts(prompt: str, images: Sequence[ImagePart]) -> List[Dict[str, Any]]:
    parts: List[Dict[str, Any]] = [{"text": prompt}]
    for img in images:
        parts.append({
            "inline_data": {
                "mime_type": img.mime_type,
                "data": base64.b64encode(img.data).decode("ascii"),
            }
        })
    return parts


def _extract_text(data: Dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        reason = (data.get("promptFeedback") or {}).get("blockReason")
        raise LLMResponseError(f"no candidates returned (blockReason={reason})")
    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(p.get("text", "") for p in parts if isinstance(p, dict))
    if not text:
        raise LLMResponseError(
            f"empty completion (finishReason={candidates[0].get('finishReason')})"
        )
    return text


async def generate_content(
    prompt: str,
    *,
    images: Sequence[ImagePart] = (),
    api_key: Optional[str] = None,
    model: Optional[str] = None,
    base_url: Optional[str] = None,
    temperature: Optional[float] = None,
    max_tokens: Optional[int] = None,
    request_timeout: Optional[int] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """
    Send one prompt (plus optional inline images) to the Generative Language API
    and return the text of the first candidate.
    """
    key = api_key if api_key is not None else settings.GOOGLE_API_KEY
    if not key:
        raise LLMNotConfigured("GOOGLE_API_KEY is not set")

    used_model = model or settings.GEMINI_MODEL
    payload = {
        "contents": [{"role": "user", "parts": _build_parts(prompt, images)}],
        "generationConfig": {
            "temperature": temperature if temperature is not None else settings.TEMPERATURE,
            "maxOutputTokens": max_tokens if max_tokens is not None else settings.MAX_TOKENS,
        },
    }
    url = _generate_url(base_url or settings.GEMINI_BASE_URL, used_model)
    timeout = httpx.Timeout(request_timeout or settings.LLM_REQUEST_TIMEOUT)

    async with LLM_SEMAPHORE:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            resp = await client.post(url, headers=_headers(key), json=payload)
            resp.raise_for_status()
            data = resp.json()

    text = _extract_text(data)
    log.debug("model=%s images=%d chars=%d", used_model, len(images), len(text))
    return text
