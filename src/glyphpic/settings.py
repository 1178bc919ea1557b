from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    max_dimension: int = 30
    font_size: int = 16
    spacing_factor: float = 0.75
    font_path: str | Path | None = None

    @property
    def cell_size(self) -> float:
        """Side of one square output cell in pixels for the raster renderer."""
        return self.font_size * self.spacing_factor


DEFAULT_SETTINGS = Settings()
