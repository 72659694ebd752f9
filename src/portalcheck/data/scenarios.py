"""Scenario input tables for the portal suite.

These are read-only parametrization inputs. ``load_dataset`` builds the
dataset once per process and returns the same instance afterwards.
"""

from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SearchScenario:
    query: str
    expected_keywords: tuple[str, ...]
    description: str


@dataclass(frozen=True)
class NavigationScenario:
    label: str
    path: str
    description: str


@dataclass(frozen=True)
class ServiceLink:
    name: str
    path: str
    description: str


@dataclass(frozen=True)
class EdgeCaseInput:
    query: str
    description: str


@dataclass(frozen=True)
class ScenarioDataset:
    """All named inputs for portal scenarios."""

    searches: tuple[SearchScenario, ...]
    navigation: tuple[NavigationScenario, ...]
    critical_links: tuple[ServiceLink, ...]
    edge_cases: tuple[EdgeCaseInput, ...]


@lru_cache(maxsize=1)
def load_dataset() -> ScenarioDataset:
    """Return the USA.gov scenario dataset."""
    return ScenarioDataset(
        searches=(
            SearchScenario(
                "passport",
                ("passport", "travel", "document"),
                "Search for passport information",
            ),
            SearchScenario(
                "unemployment benefits",
                ("unemployment", "benefits", "employment"),
                "Search for unemployment benefits",
            ),
            SearchScenario(
                "federal student aid",
                ("student", "aid", "education", "federal"),
                "Search for federal student aid information",
            ),
            SearchScenario(
                "social security",
                ("social", "security"),
                "Search for social security information",
            ),
            SearchScenario(
                "tax filing",
                ("tax", "filing", "irs"),
                "Search for tax filing information",
            ),
            SearchScenario(
                "medicare",
                ("medicare", "health", "insurance"),
                "Search for medicare information",
            ),
            SearchScenario(
                "disability services",
                ("disability", "services", "assistance"),
                "Search for disability services",
            ),
            SearchScenario(
                "housing assistance",
                ("housing", "assistance", "rent"),
                "Search for housing assistance programs",
            ),
        ),
        navigation=(
            NavigationScenario(
                "The U.S. and its government",
                "/about-the-us",
                "Navigate to U.S. government information",
            ),
            NavigationScenario(
                "Government benefits",
                "/benefits",
                "Navigate to government benefits section",
            ),
            NavigationScenario(
                "Immigration and U.S. citizenship",
                "/immigration-and-citizenship",
                "Navigate to immigration information",
            ),
            NavigationScenario(
                "Money and credit", "/money", "Navigate to money and credit section"
            ),
            NavigationScenario("Taxes", "/taxes", "Navigate to taxes section"),
            NavigationScenario("Travel", "/travel", "Navigate to travel section"),
            NavigationScenario(
                "Education", "/education", "Navigate to education section"
            ),
            NavigationScenario(
                "Jobs, labor laws, and unemployment",
                "/jobs-labor-laws-unemployment",
                "Navigate to jobs and labor information",
            ),
            NavigationScenario("Health", "/health", "Navigate to health information"),
            NavigationScenario(
                "Military and veterans",
                "/military-and-veterans",
                "Navigate to military and veterans services",
            ),
        ),
        critical_links=(
            ServiceLink("Get or renew a passport", "/passport", "Passport services"),
            ServiceLink(
                "Find unclaimed money", "/unclaimed-money", "Unclaimed money service"
            ),
            ServiceLink("Find how to get a REAL ID", "/real-id", "REAL ID information"),
            ServiceLink(
                "File for unemployment benefits",
                "/unemployment-benefits",
                "Unemployment benefits filing",
            ),
        ),
        edge_cases=(
            EdgeCaseInput("", "Empty search"),
            EdgeCaseInput(" ", "Whitespace only"),
            EdgeCaseInput("!@#$%^&*()", "Special characters"),
            EdgeCaseInput("a" * 1000, "Very long search term"),
            EdgeCaseInput("中文", "Non-English characters"),
            EdgeCaseInput("xyzabc123notfound", "Non-existent term"),
        ),
    )
