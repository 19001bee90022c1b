from pydantic import BaseModel, Field


class TerritoryRead(BaseModel):
    index: int = Field(..., ge=1, description="1-based position in the registry")
    name: str = Field(..., min_length=1, description="Territory name")
    owner_color: str = Field(..., min_length=1, description="Color of the army holding it")
    troops: int = Field(..., ge=0, description="Troops stationed in the territory")
