from pydantic import BaseModel


class MakesResponseDTO(BaseModel):
    makes: list[str]


class ModelsResponseDTO(BaseModel):
    make: str
    models: list[str]
