from functools import lru_cache
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsError

from pshot.console import console
from pshot.errors import ConfigError


class Config(BaseSettings):
    # Viewport, one tile per viewport height
    viewport_width: int = Field(1280, gt=0)
    viewport_height: int = Field(800, gt=0)

    # Settle delays (ms)
    scroll_delay_ms: int = Field(500, ge=0)
    load_settle_ms: int = Field(2000, ge=0)
    suppress_settle_ms: int = Field(500, ge=0)
    navigation_timeout_ms: int = Field(60000, gt=0)

    # Output
    default_basename: str = Field("index", min_length=1)

    # Browser
    headless: bool = True
    browser_args: list[str] = Field(default_factory=lambda: ["--no-sandbox"])

    class Config:
        env_prefix = "PSHOT_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def viewport(self) -> dict:
        return {"width": self.viewport_width, "height": self.viewport_height}


@lru_cache()
def get_config() -> Config:
    """Get cached config instance."""

    try:
        config = Config()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
    except SettingsError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    console.log(config)
    return config
