"""Static scenario datasets."""

from portalcheck.data.scenarios import (
    EdgeCaseInput,
    NavigationScenario,
    ScenarioDataset,
    SearchScenario,
    ServiceLink,
    load_dataset,
)

__all__ = [
    "EdgeCaseInput",
    "NavigationScenario",
    "ScenarioDataset",
    "SearchScenario",
    "ServiceLink",
    "load_dataset",
]
