"""Constants and configuration for sync path management."""

from typing import Final

# Where samples are authored, relative to the project root
DEFAULT_SOURCE_DIR: Final[str] = "Assets/BJSamples"

# Where samples are shipped inside the package, relative to the project root
DEFAULT_DESTINATION_DIR: Final[str] = "Packages/blueberry-jam-core/Samples~"

# Environment variables
ENV_VARS: Final[dict[str, str]] = {
    "root": "SAMPLESYNC_ROOT",
    "source": "SAMPLESYNC_SOURCE",
    "destination": "SAMPLESYNC_DESTINATION",
    "refresh_command": "SAMPLESYNC_REFRESH_COMMAND",
}

ENV_FILE_NAME: Final[str] = ".env"
