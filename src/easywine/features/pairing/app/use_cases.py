"""
Pairing use case: fill the sommelier prompt, forward it (with the dish photo
when there is one) to the model and hand back the cleaned JSON text.

The route layer only maps the exceptions raised here to HTTP statuses.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Awaitable, Callable, List

from easywine.features.pairing.api.schemas import PairingPayload
from easywine.features.pairing.domain.prompts import render_prompt
from easywine.features.pairing.infra.images import decode_image
from easywine.features.pairing.infra.prompt_store import load_prompt_template
from easywine.shared.config.settings import Settings
from easywine.shared.llm.gemini_client import ImagePart, LLMNotConfigured

log = logging.getLogger("pairing")

Generator = Callable[..., Awaitable[str]]

_RE_FENCE_OPEN = re.compile(r"^\s*```[\w-]*[ \t]*\n?")
_RE_FENCE_CLOSE = re.compile(r"\n?[ \t]*```\s*$")


class InvalidUpstreamOutput(ValueError):
    """The model answered, but not with a JSON object."""


def strip_code_fences(text: str) -> str:
    """
    "```json\\n{...}\\n```" -> "{...}". Text without fences is only trimmed.
    """
    out = _RE_FENCE_OPEN.sub("", text or "", count=1)
    out = _RE_FENCE_CLOSE.sub("", out, count=1)
    return out.strip()


def build_prompt(payload: PairingPayload, template: str) -> str:
    return render_prompt(
        template,
        user_name=payload.user_name or "",
        category=payload.category or "",
        description=payload.ingredients or "",
    )


async def harmonize(payload: PairingPayload, *, cfg: Settings, generate: Generator) -> str:
    """
    Run one pairing request end to end and return the JSON body to relay.

    Raises LLMNotConfigured before any upstream call when the key is missing,
    InvalidImage for an undecodable photo and InvalidUpstreamOutput when the
    completion is not a JSON object. Anything the model call raises propagates as is.
    """
    if not cfg.GOOGLE_API_KEY:
        raise LLMNotConfigured("GOOGLE_API_KEY is not set")

    prompt = build_prompt(payload, load_prompt_template(cfg.PAIRING_PROMPT_FILE))

    images: List[ImagePart] = []
    if payload.image:
        images.append(decode_image(payload.image, default_mime=cfg.DEFAULT_IMAGE_MIME))

    text = await generate(
        prompt,
        images=images,
        api_key=cfg.GOOGLE_API_KEY,
        model=cfg.GEMINI_MODEL,
        base_url=cfg.GEMINI_BASE_URL,
        temperature=cfg.TEMPERATURE,
        max_tokens=cfg.MAX_TOKENS,
        request_timeout=cfg.LLM_REQUEST_TIMEOUT,
    )

    clean = strip_code_fences(text)
    try:
        parsed = json.loads(clean)
    except json.JSONDecodeError as e:
        log.error("model returned non-JSON output: %r", clean[:200])
        raise InvalidUpstreamOutput(str(e)) from e
    if not isinstance(parsed, dict):
        log.error("model returned a JSON %s instead of an object", type(parsed).__name__)
        raise InvalidUpstreamOutput("completion is not a JSON object")

    log.info("pairing ok category=%r image=%s", payload.category or "", bool(images))
    return clean
