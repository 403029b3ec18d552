"""Configuration management."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Arithmetic
    max_coordinate: Optional[int] = Field(
        default=None,
        description="Largest accepted absolute site coordinate. None disables the check",
    )

    # Scenarios
    random_coordinate_range: int = Field(
        default=100, description="Random points fall strictly inside (-range, range)"
    )

    # Rendering
    default_output_path: str = Field(default="voronoi.svg", description="Output image path")
    image_size_px: int = Field(default=1024, description="Width and height of the output image")
    image_dpi: int = Field(default=100, description="Output image resolution")
    ray_extension: float = Field(
        default=2.0, description="Rays are drawn this many times the view size"
    )
    point_size: float = Field(default=4.0, description="Marker size for sites and vertices")

    class Config:
        env_prefix = "VORONOI_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
