from pydantic import BaseModel, Field


class MissionRead(BaseModel):
    kind: str = Field(..., description="Victory condition type (destroy_army/conquer_threshold)")
    target_color: str | None = Field(
        None, description="Army to destroy (only set for destroy-army missions)"
    )
    description: str = Field(..., description="Player-facing mission text")
