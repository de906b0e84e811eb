"""Event context and detection result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from changegate.config import Settings
from changegate.errors import ConfigError


class EventType(str, Enum):
    """GitHub Actions events changegate knows how to inspect."""

    PULL_REQUEST = "pull_request"
    PUSH = "push"


SUPPORTED_EVENTS = ", ".join(e.value for e in EventType)

# Environment variable names required per event, in the order they are reported.
REQUIRED_BY_EVENT: Dict[EventType, Tuple[str, ...]] = {
    EventType.PULL_REQUEST: ("GITHUB_REPOSITORY", "GITHUB_PR_NUMBER"),
    EventType.PUSH: ("GITHUB_REPOSITORY", "GITHUB_EVENT_BEFORE", "GITHUB_EVENT_AFTER"),
}


class EventContext(BaseModel):
    """Immutable description of the event being inspected."""

    model_config = ConfigDict(frozen=True)

    event_type: EventType
    repository: str
    output_path: str
    pr_number: Optional[str] = None
    before_sha: Optional[str] = None
    after_sha: Optional[str] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "EventContext":
        """Build the context from runner settings, validating once.

        Args:
            settings: Loaded runner settings.

        Returns:
            The event context for the active event type.

        Raises:
            ConfigError: If a required value is missing or the event is
                not supported.
        """
        if not settings.github_output:
            raise ConfigError("GITHUB_OUTPUT environment variable not set")
        if not settings.github_event_name:
            raise ConfigError("GITHUB_EVENT_NAME environment variable not set")

        try:
            event_type = EventType(settings.github_event_name)
        except ValueError:
            raise ConfigError(
                f"Unsupported event type: {settings.github_event_name}. "
                f"Supported events: {SUPPORTED_EVENTS}"
            ) from None

        values = {
            "GITHUB_REPOSITORY": settings.github_repository,
            "GITHUB_PR_NUMBER": settings.github_pr_number,
            "GITHUB_EVENT_BEFORE": settings.github_event_before,
            "GITHUB_EVENT_AFTER": settings.github_event_after,
        }
        required = REQUIRED_BY_EVENT[event_type]
        missing = [name for name in required if not values[name]]
        if missing:
            raise ConfigError(
                f"Missing {', '.join(missing)} for {event_type.value} event"
            )

        if event_type is EventType.PULL_REQUEST:
            return cls(
                event_type=event_type,
                repository=settings.github_repository,
                output_path=settings.github_output,
                pr_number=settings.github_pr_number,
            )
        return cls(
            event_type=event_type,
            repository=settings.github_repository,
            output_path=settings.github_output,
            before_sha=settings.github_event_before,
            after_sha=settings.github_event_after,
        )


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of matching a changed-file listing against a pattern."""

    pattern: str
    matched_files: Tuple[str, ...] = field(default_factory=tuple)
    file_count: int = 0

    @property
    def matched(self) -> bool:
        return bool(self.matched_files)
