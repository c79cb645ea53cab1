import asyncio
import json

import pytest

from easywine.features.pairing.api.schemas import PairingPayload
from easywine.features.pairing.app.use_cases import (
    InvalidUpstreamOutput,
    harmonize,
    strip_code_fences,
)
from easywine.features.pairing.domain.prompts import SOMMELIER_PROMPT, render_prompt
from easywine.shared.llm.gemini_client import LLMNotConfigured

from conftest import FEIJOADA_RESULT, FakeModel, make_settings


@pytest.mark.parametrize(
    "raw, expected",
    [
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ('```\n{"a": 1}\n```', '{"a": 1}'),
        ('  ```json{"a": 1}```  ', '{"a": 1}'),
        ('{"a": 1}', '{"a": 1}'),
        ('\n{"a": "x```y"}\n', '{"a": "x```y"}'),
    ],
)
def test_strip_code_fences(raw, expected):
    assert strip_code_fences(raw) == expected


def test_render_prompt_keeps_json_example_braces():
    out = render_prompt(SOMMELIER_PROMPT, user_name="  João ", category="", description="Sushi")

    assert "Cliente: João." in out
    assert "Categoria: Não informada." in out
    assert "Descrição/Prato: Sushi." in out
    assert '"caracteristicas": { "corpo": 5, "acidez": 5, "taninos": 0, "docura": 1 }' in out
    assert "{CLIENTE}" not in out


def test_prompt_carries_tone_and_honesty_rules():
    assert "PROTOCOLO DE HONESTIDADE" in SOMMELIER_PROMPT
    assert "Fast Food" in SOMMELIER_PROMPT
    assert "Caipirinha" in SOMMELIER_PROMPT


def test_harmonize_returns_clean_json_text():
    inner = json.dumps(FEIJOADA_RESULT, ensure_ascii=False)
    model = FakeModel(reply=f"```json\n{inner}\n```")
    payload = PairingPayload(ingredients="feijoada", userName="Ana")

    out = asyncio.run(harmonize(payload, cfg=make_settings(), generate=model))

    assert out == inner
    assert len(model.calls) == 1


def test_harmonize_without_key_raises_before_calling_model():
    model = FakeModel(reply="{}")

    with pytest.raises(LLMNotConfigured):
        asyncio.run(harmonize(PairingPayload(ingredients="x"), cfg=make_settings(GOOGLE_API_KEY=""), generate=model))
    assert model.calls == []


def test_harmonize_rejects_non_json_output():
    model = FakeModel(reply="```json\nnão é json\n```")

    with pytest.raises(InvalidUpstreamOutput):
        asyncio.run(harmonize(PairingPayload(ingredients="x"), cfg=make_settings(), generate=model))


def test_payload_accepts_camel_and_snake_case_name():
    assert PairingPayload(userName="Ana").user_name == "Ana"
    assert PairingPayload(user_name="Ana").user_name == "Ana"
