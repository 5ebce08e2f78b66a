"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from akira_rgb.model_manager.persistence import PydanticPersistence

from .lighting import LightingConfiguration

CONFIG_DIR = Path.home() / ".akira-rgb"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.json"


class AppConfig(BaseModel):
    """Application configuration and settings."""

    model_config = ConfigDict(validate_assignment=True)

    # Frame cadence (the host render loop, not the device settle delay)
    frame_interval: float = Field(
        default=0.03,
        gt=0,
        le=1.0,
        description="Seconds between rendered frames",
    )

    # Lighting parameters applied at startup
    lighting: LightingConfiguration = Field(
        default_factory=LightingConfiguration,
        description="Lighting mode, forced color and shutdown color",
    )

    # Canvas source for Canvas mode
    canvas_file: Path | None = Field(
        default=None,
        description="Optional .npy file holding a (6, 15, 3) uint8 canvas",
    )

    # Shutdown behaviour
    system_suspending_on_exit: bool = Field(
        default=False,
        description="Treat exit as a system suspend (turn LEDs off instead of shutdown color)",
    )

    @field_serializer("canvas_file")
    def serialize_path(self, path: Path | None) -> str | None:
        """Serialize Path to string."""
        return str(path) if path is not None else None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.akira-rgb/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
