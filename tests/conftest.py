import json
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from easywine.app import app
from easywine.features.pairing.api.routes import get_generator
from easywine.shared.config.settings import Settings, get_settings

FEIJOADA_RESULT: Dict[str, Any] = {
    "estilo": "Espumante Brut",
    "caracteristicas": {"corpo": 2, "acidez": 5, "taninos": 0, "docura": 1},
    "perfil": "Cítricos, Maçã Verde, Brioche",
    "explicacao": "Ana, embora a caipirinha seja a alma deste prato, um Espumante Brut traz uma leveza surpreendente.",
    "temperatura": "6-8°C",
    "paises": ["Brasil", "França"],
}


class FakeModel:
    """Stands in for gemini_client.generate_content and records every call."""

    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def __call__(self, prompt, *, images=(), api_key=None, model=None, **kwargs):
        self.calls.append({"prompt": prompt, "images": list(images), "api_key": api_key, "model": model, **kwargs})
        if self.error is not None:
            raise self.error
        return self.reply


def make_settings(**overrides) -> Settings:
    values = {"GOOGLE_API_KEY": "test-key", "GEMINI_MODEL": "gemini-test"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def fake_model():
    return FakeModel(reply=json.dumps(FEIJOADA_RESULT, ensure_ascii=False))


@pytest.fixture
def cfg():
    return make_settings()


@pytest.fixture
def client(fake_model, cfg):
    app.dependency_overrides[get_generator] = lambda: fake_model
    app.dependency_overrides[get_settings] = lambda: cfg
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
