from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class PairingPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: Optional[str] = None
    ingredients: Optional[str] = None
    category: Optional[str] = None
    user_name: Optional[str] = Field(default=None, alias="userName")

class Caracteristicas(BaseModel):
    corpo: int = 0
    acidez: int = 0
    taninos: int = 0
    docura: int = 0

class PairingResult(BaseModel):
    estilo: str
    caracteristicas: Caracteristicas = Field(default_factory=Caracteristicas)
    perfil: str = ""
    explicacao: str = ""
    temperatura: str = ""
    paises: List[str] = Field(default_factory=list)

class ErrorBody(BaseModel):
    error: str
