from __future__ import annotations
import logging
from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from easywine.shared.config.settings import Settings, get_settings
from easywine.shared.llm.gemini_client import LLMNotConfigured, generate_content
from easywine.features.pairing.app.use_cases import Generator, InvalidUpstreamOutput, harmonize
from easywine.features.pairing.infra.images import InvalidImage
from .schemas import ErrorBody, PairingPayload, PairingResult

log = logging.getLogger("pairing")

router = APIRouter(tags=["pairing"])

PAIRING_FAILED = "Erro ao harmonizar."
INVALID_IMAGE = "Imagem inválida."
INVALID_UPSTREAM = "Resposta inválida do Sommelier."


def get_generator() -> Generator:
    return generate_content


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/harmonize",
    response_model=PairingResult,
    responses={400: {"model": ErrorBody}, 500: {"model": ErrorBody}, 502: {"model": ErrorBody}},
)
async def create_pairing(
    payload: PairingPayload,
    cfg: Settings = Depends(get_settings),
    generate: Generator = Depends(get_generator),
):
    try:
        body = await harmonize(payload, cfg=cfg, generate=generate)
    except LLMNotConfigured:
        log.error("GOOGLE_API_KEY is not configured on the server")
        return _error(500, PAIRING_FAILED)
    except InvalidImage as e:
        log.warning("rejected image: %s", e)
        return _error(400, INVALID_IMAGE)
    except InvalidUpstreamOutput:
        return _error(502, INVALID_UPSTREAM)
    except Exception:
        log.exception("pairing failed")
        return _error(500, PAIRING_FAILED)
    return Response(content=body, media_type="application/json")
