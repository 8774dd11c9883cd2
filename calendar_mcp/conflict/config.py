"""
Conflict Detection Configuration

Thresholds and weights used by the detector. They are passed explicitly to
ConflictDetector rather than read from globals, so a detector can be built
with any configuration in tests.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from calendar_mcp.utils.config import get_config
from calendar_mcp.utils.logger import get_logger

logger = get_logger(__name__)

# Similarity at or above which an existing event is reported as a possible duplicate
DEFAULT_DUPLICATE_THRESHOLD = 0.7

# Similarity at or above which creation is refused unless allow_duplicates is set
BLOCKING_THRESHOLD = 0.95


class ConflictDetectionConfig(BaseModel):
    """Immutable detector settings with documented defaults."""
    model_config = ConfigDict(frozen=True)

    default_duplicate_threshold: float = Field(DEFAULT_DUPLICATE_THRESHOLD, ge=0.0, le=1.0)
    blocking_threshold: float = Field(BLOCKING_THRESHOLD, ge=0.0, le=1.0)

    # Window around the candidate that is searched for existing events
    search_padding_hours: int = Field(24, ge=0)

    # Start-time difference at which temporal proximity reaches zero
    proximity_window_minutes: int = Field(120, gt=0)

    title_weight: float = Field(0.6, ge=0.0)
    time_weight: float = Field(0.3, ge=0.0)
    location_weight: float = Field(0.1, ge=0.0)

    # Upper bound on concurrent per-calendar fetches
    max_workers: int = Field(8, ge=1)

    @model_validator(mode="after")
    def _check_thresholds(self) -> "ConflictDetectionConfig":
        if self.blocking_threshold < self.default_duplicate_threshold:
            raise ValueError(
                f"blocking_threshold ({self.blocking_threshold}) must be >= "
                f"default_duplicate_threshold ({self.default_duplicate_threshold})"
            )
        return self


def load_detection_config(overrides: Optional[Dict[str, Any]] = None) -> ConflictDetectionConfig:
    """
    Build the detector configuration from the ``conflict_detection`` section of config.yaml.

    Args:
        overrides (Optional[Dict[str, Any]]): Values that take precedence over the file.

    Returns:
        ConflictDetectionConfig: The validated configuration.
    """
    values = dict(get_config().get("conflict_detection") or {})
    if overrides:
        values.update(overrides)

    known = {k: v for k, v in values.items() if k in ConflictDetectionConfig.model_fields}
    unknown = sorted(set(values) - set(known))
    if unknown:
        logger.warning(f"Ignoring unknown conflict_detection settings: {', '.join(unknown)}")

    return ConflictDetectionConfig(**known)
