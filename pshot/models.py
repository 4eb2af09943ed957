from pydantic import BaseModel, ConfigDict, Field, field_validator

from pshot.config import Config


class Tile(BaseModel):
    """One viewport capture and the canvas row its top edge belongs on."""

    model_config = ConfigDict(frozen=True)

    image: bytes
    top: int = Field(ge=0)


class CaptureSession(BaseModel):
    url: str
    viewport_width: int = Field(gt=0)
    viewport_height: int = Field(gt=0)
    scroll_delay_ms: int = Field(0, ge=0)
    page_height: int = 0
    offset: int = 0

    @field_validator("offset")
    @classmethod
    def offset_not_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("scroll offset must be >= 0")
        return v

    @property
    def tile_height(self) -> int:
        return self.viewport_height

    @classmethod
    def from_config(cls, url: str, config: Config) -> "CaptureSession":
        return cls(
            url=url,
            viewport_width=config.viewport_width,
            viewport_height=config.viewport_height,
            scroll_delay_ms=config.scroll_delay_ms,
        )

    def advance_to(self, offset: int) -> None:
        """Move the session to the next planned offset, never backwards."""
        if offset < self.offset:
            raise ValueError(
                f"scroll offset moved backwards: {self.offset} -> {offset}"
            )
        self.offset = offset
