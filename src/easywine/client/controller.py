"""
Client-side state for EasyWine: name screen, pairing form and result view.

The controller owns no I/O of its own; the display name goes through a
NameStore and pairing requests through a gateway object exposing
``harmonize(request) -> dict``.
"""
from __future__ import annotations

import base64
import logging
import mimetypes
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from easywine.client.gateway import GatewayUnavailable
from easywine.client.session import MIN_NAME_LENGTH, NameStore
from easywine.features.pairing.domain.categories import category_label, find_category

log = logging.getLogger("client")

MISSING_INPUT_MESSAGE = "Por favor, me dê uma dica: foto, texto ou categoria."
UNAVAILABLE_MESSAGE = "O Sommelier está indisponível no momento. Tente novamente."
LOGOUT_PROMPT = "Até logo, {name}! Deseja sair?"

CHARACTERISTICS = ("corpo", "acidez", "taninos", "docura")
DOT_SCALE = 7


class Gateway(Protocol):
    def harmonize(self, request: Dict[str, Any]) -> Dict[str, Any]: ...


class PairingError(Exception):
    """Base for failures shown to the user as a plain message."""


class EmptyPairingInput(PairingError):
    def __init__(self) -> None:
        super().__init__(MISSING_INPUT_MESSAGE)


class SommelierUnavailable(PairingError):
    def __init__(self) -> None:
        super().__init__(UNAVAILABLE_MESSAGE)


class PairingInProgress(PairingError):
    pass


class EasyWineApp:
    def __init__(self, store: NameStore, gateway: Gateway) -> None:
        self.store = store
        self.gateway = gateway

        self.user_name: str = ""
        self.is_name_set: bool = False
        self.image: Optional[str] = None
        self.ingredients: str = ""
        self.selected_filter: Optional[str] = None
        self.pairing: Optional[Dict[str, Any]] = None
        self.loading: bool = False

        saved = store.load()
        if saved:
            self.user_name = saved
            self.is_name_set = True

    # ---- name screen ----

    def submit_name(self, name: str) -> bool:
        name = (name or "").strip()
        if len(name) < MIN_NAME_LENGTH:
            return False
        self.store.save(name)
        self.user_name = name
        self.is_name_set = True
        return True

    def logout(self, confirm: Callable[[str], bool]) -> bool:
        if not confirm(LOGOUT_PROMPT.format(name=self.user_name)):
            return False
        self.store.clear()
        self.is_name_set = False
        self.user_name = ""
        self.pairing = None
        return True

    # ---- form ----

    @property
    def has_input(self) -> bool:
        return bool(self.image or self.ingredients or self.selected_filter)

    def set_ingredients(self, text: str) -> None:
        self.ingredients = text or ""

    def toggle_category(self, category_id: str) -> None:
        if find_category(category_id) is None:
            raise ValueError(f"unknown category: {category_id}")
        self.selected_filter = None if category_id == self.selected_filter else category_id

    def attach_image(self, path: str | Path) -> None:
        p = Path(path).expanduser()
        mime = mimetypes.guess_type(p.name)[0] or "image/jpeg"
        encoded = base64.b64encode(p.read_bytes()).decode("ascii")
        self.image = f"data:{mime};base64,{encoded}"

    def clear_image(self) -> None:
        self.image = None

    def build_request(self) -> Dict[str, Any]:
        return {
            "image": self.image,
            "ingredients": self.ingredients,
            "category": category_label(self.selected_filter),
            "userName": self.user_name,
        }

    def analyze(self) -> Dict[str, Any]:
        """
        Send the current form as one pairing request and switch to the result
        view. On failure the form is left exactly as it was.
        """
        if self.loading:
            raise PairingInProgress("Consultando...")
        if not self.has_input:
            raise EmptyPairingInput()

        self.loading = True
        self.pairing = None
        try:
            result = self.gateway.harmonize(self.build_request())
        except GatewayUnavailable as e:
            log.error("pairing unavailable: %s", e)
            raise SommelierUnavailable() from e
        finally:
            self.loading = False

        self.pairing = result
        return result

    def reset(self) -> None:
        self.image = None
        self.ingredients = ""
        self.pairing = None
        self.selected_filter = None


# ---- result rendering helpers ----

def render_dots(level: int, scale: int = DOT_SCALE) -> str:
    level = max(0, min(scale, int(level or 0)))
    return "●" * level + "○" * (scale - level)


def profile_tags(pairing: Dict[str, Any]) -> List[str]:
    return [t.strip() for t in str(pairing.get("perfil") or "").split(",") if t.strip()]


def visible_characteristics(pairing: Dict[str, Any]) -> List[Tuple[str, int]]:
    values = pairing.get("caracteristicas") or {}
    out: List[Tuple[str, int]] = []
    for attr in CHARACTERISTICS:
        try:
            level = int(values.get(attr) or 0)
        except (TypeError, ValueError):
            continue
        if level > 0:
            out.append((attr, level))
    return out
