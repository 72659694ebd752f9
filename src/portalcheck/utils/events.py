"""Scenario event log for portalcheck.

This module provides the observability hook owned by the session lifecycle.
Instead of printing diagnostics from individual helpers, every notable step
(navigation, settle waits, actions, teardown problems) is emitted as a named
event with structured fields. It includes:
- ScenarioEvent dataclass for a single recorded event
- EventLog class for collecting events, logging them and persisting to JSON
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Events that flush the log to disk. Others are written on complete().
LIFECYCLE_EVENTS = frozenset({"session_started", "session_closed"})


@dataclass
class ScenarioEvent:
    """Records one named event during a scenario.

    Attributes:
        timestamp: ISO format timestamp of when the event occurred.
        name: Event name (e.g., navigated, action, settled).
        fields: Event-specific data such as url, target or duration.
    """

    timestamp: str
    name: str
    fields: dict[str, Any] = field(default_factory=dict)


class EventLog:
    """Collects scenario events and optionally writes them to JSON.

    Every event is also sent to the ``portalcheck.utils.events`` logger at
    INFO level so it shows up in pytest's captured log output.

    Attributes:
        scenario_id: Unique identifier for this scenario run.
        scenario_dir: Directory where events.json is written, or None.
        data: Dictionary containing all scenario data.
    """

    def __init__(self, scenario: str, output_dir: Path | None = None) -> None:
        """Initialize a new event log.

        Args:
            scenario: Name of the scenario (typically the pytest node name).
            output_dir: Parent directory for persisted logs. Nothing is written
                when None.
        """
        safe_name = "".join(c if c.isalnum() or c in "-_" else "_" for c in scenario)
        self.scenario_id = f"{safe_name}_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}"
        self.scenario_dir: Path | None = None
        if output_dir is not None:
            self.scenario_dir = output_dir / self.scenario_id
            self.scenario_dir.mkdir(parents=True, exist_ok=True)

        self.data: dict[str, Any] = {
            "scenario_id": self.scenario_id,
            "scenario": scenario,
            "started_at": datetime.now().isoformat(),
            "completed_at": None,
            "result": None,
            "events": [],
            "error": None,
        }

    def emit(self, name: str, **fields: Any) -> ScenarioEvent:
        """Record a named event.

        Args:
            name: The event name.
            **fields: Structured event data.

        Returns:
            The recorded ScenarioEvent.
        """
        event = ScenarioEvent(
            timestamp=datetime.now().isoformat(),
            name=name,
            fields=dict(fields),
        )
        self.data["events"].append(asdict(event))
        logger.info(f"[{self.data['scenario']}] {name} {fields}")
        if name in LIFECYCLE_EVENTS:
            self._save()
        return event

    def events(self, name: str | None = None) -> list[dict[str, Any]]:
        """Return recorded events, optionally filtered by name."""
        if name is None:
            return list(self.data["events"])
        return [e for e in self.data["events"] if e["name"] == name]

    def complete(self, result: str, error: str | None = None) -> None:
        """Mark the scenario complete.

        Args:
            result: The scenario outcome (e.g., passed, failed).
            error: Optional error message if the scenario failed.
        """
        self.data["completed_at"] = datetime.now().isoformat()
        self.data["result"] = result
        self.data["error"] = error
        self._save()

    def _save(self) -> None:
        """Write scenario data to JSON file."""
        if self.scenario_dir is None:
            return
        log_path = self.scenario_dir / "events.json"
        with open(log_path, "w", encoding="utf-8") as f:
            json.dump(self.data, f, indent=2, default=str)
