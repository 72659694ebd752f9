"""Integration tests: helpers against the local portal fixture pages.

Tests cover:
- Home page content, navigation, footer and accessibility queries
- Image alt and heading checks on the conformant and broken fixtures
- Search flow, empty search round trip and clear_search idempotence
- Form filling and submission
- Job listing filters, pagination and file upload
"""

from pathlib import Path

import pytest
import requests

from portalcheck.core.session import Session
from portalcheck.helpers import (
    all_links_have_href,
    all_links_have_text,
    all_nav_items_have_href,
    apply_filter,
    clear_search,
    click_button,
    click_nav_item,
    collect_hrefs,
    count_images_missing_alt,
    count_main_links,
    count_search_results,
    count_topic_links,
    fill_form_input,
    form_inputs_have_labels,
    get_input_value,
    get_main_heading_text,
    get_search_value,
    get_title,
    get_url,
    has_lang_attribute,
    has_main_landmarks,
    has_readable_text,
    has_skip_link,
    heading_hierarchy_valid,
    heading_levels,
    internal_links_valid,
    is_footer_present,
    is_input_required,
    is_search_box_visible,
    iter_result_pages,
    links_keyboard_accessible,
    list_footer_nav_labels,
    list_primary_nav_labels,
    list_result_titles,
    no_results_shown,
    perform_search,
    search_results_displayed,
    upload_files,
)
from portalcheck.services.mock import MockServer
from portalcheck.utils.exceptions import ElementNotFound


class TestMockServerProbe:
    """The fixture server answers before any browser work starts."""

    def test_home_page_served(self, mock_server: MockServer) -> None:
        response = requests.get(f"{mock_server.base_url}/", timeout=5)
        assert response.status_code == 200
        assert "Primary navigation" in response.text


class TestHomePage:
    """Queries on the conformant home page."""

    @pytest.mark.asyncio
    async def test_content(self, portal: Session) -> None:
        assert "Making government services easier to find" in await get_title(portal)
        assert await get_main_heading_text(portal) == (
            "Making government services easier to find"
        )
        assert await count_topic_links(portal) == 4
        assert await has_readable_text(portal) is True

    @pytest.mark.asyncio
    async def test_navigation(self, portal: Session) -> None:
        assert await list_primary_nav_labels(portal) == [
            "Benefits",
            "Taxes",
            "Housing",
            "Passports",
            "Voting and elections",
        ]
        assert await all_nav_items_have_href(portal) is True
        assert await is_footer_present(portal) is True
        assert "Privacy policy" in await list_footer_nav_labels(portal)

    @pytest.mark.asyncio
    async def test_accessibility(self, portal: Session) -> None:
        assert await has_main_landmarks(portal) is True
        assert await has_skip_link(portal) is True
        assert await has_lang_attribute(portal) is True
        assert await count_images_missing_alt(portal) == 0
        assert await heading_levels(portal) == [1, 2, 3, 2]
        assert await heading_hierarchy_valid(portal) is True
        assert await form_inputs_have_labels(portal) is True
        assert await links_keyboard_accessible(portal) is True

    @pytest.mark.asyncio
    async def test_links(self, portal: Session) -> None:
        assert await all_links_have_text(portal) is True
        assert await all_links_have_href(portal) is True
        assert await internal_links_valid(portal) is True
        hrefs = await collect_hrefs(portal, limit=2)
        assert hrefs == ["/topics/benefits", "/topics/money"]

    @pytest.mark.asyncio
    async def test_absent_elements_are_negative(self, portal: Session) -> None:
        assert await search_results_displayed(portal) is False
        assert await count_search_results(portal) == 0
        assert await list_result_titles(portal) == []


class TestBrokenPages:
    """Queries on fixtures that violate accessibility rules."""

    @pytest.mark.asyncio
    async def test_missing_alt_counted(self, portal: Session) -> None:
        await portal.goto("/missing_alt")
        assert await count_images_missing_alt(portal) == 1

    @pytest.mark.asyncio
    async def test_skipped_heading_level(self, portal: Session) -> None:
        await portal.goto("/bad_headings")
        assert await heading_levels(portal) == [1, 3]
        assert await heading_hierarchy_valid(portal) is False


class TestSearchFlow:
    """Search helpers against the fixture search form."""

    @pytest.mark.asyncio
    async def test_search_shows_results(self, portal: Session) -> None:
        assert await is_search_box_visible(portal) is True
        await perform_search(portal, "passport")
        assert "/search" in portal.url
        assert await search_results_displayed(portal) is True
        assert await count_search_results(portal) == 3
        assert portal.state.searched.is_active

        url = await get_url(portal)
        assert url != portal.base_url or await get_title(portal) != ""
        assert await count_main_links(portal) > 0
        assert await no_results_shown(portal) is False

    @pytest.mark.asyncio
    async def test_no_results_page(self, portal: Session) -> None:
        await portal.goto("/no_results")
        assert await no_results_shown(portal) is True
        assert await count_search_results(portal) == 0

    @pytest.mark.asyncio
    async def test_empty_search_round_trip(self, portal: Session) -> None:
        await perform_search(portal, "")
        assert await get_search_value(portal) == ""

    @pytest.mark.asyncio
    async def test_clear_search_is_idempotent(self, portal: Session) -> None:
        box = await portal.locator.resolve(portal.site.selectors.search_box)
        await portal.executor.fill(box, "medicare")
        await clear_search(portal)
        assert await get_search_value(portal) == ""
        await clear_search(portal)
        assert await get_search_value(portal) == ""


class TestNavigationFlow:
    """Clicking through the primary navigation."""

    @pytest.mark.asyncio
    async def test_click_nav_item(self, portal: Session) -> None:
        await click_nav_item(portal, "Benefits")
        assert portal.url.endswith("/benefits")
        assert await get_main_heading_text(portal) == "Government benefits"

    @pytest.mark.asyncio
    async def test_click_missing_nav_item(self, portal: Session) -> None:
        with pytest.raises(ElementNotFound):
            await click_nav_item(portal, "Lottery")


class TestFormFlow:
    """Form helpers against the benefit finder fixture."""

    @pytest.mark.asyncio
    async def test_fill_by_label_and_aria_label(self, portal: Session) -> None:
        await portal.goto("/form")
        await fill_form_input(portal, "Email address", "user@example.gov")
        await fill_form_input(portal, "Zip code", "20001")
        assert await get_input_value(portal, "#email") == "user@example.gov"
        assert await get_input_value(portal, "#zip") == "20001"
        assert await is_input_required(portal, "#email") is True
        assert await is_input_required(portal, "#zip") is False

    @pytest.mark.asyncio
    async def test_submit_by_button_name(self, portal: Session) -> None:
        await portal.goto("/form")
        await fill_form_input(portal, "Email address", "user@example.gov")
        await click_button(portal, "Find benefits")
        assert "/benefits" in portal.url


class TestListingFlow:
    """Filters and pagination on the job listing fixture."""

    @pytest.mark.asyncio
    async def test_filter_by_location(self, portal: Session) -> None:
        await portal.goto("/jobs")
        await apply_filter(
            portal, "#filterLocation", "#locationInput", "New York", "#applyFilter"
        )
        assert await list_result_titles(portal) == ["Software Engineer"]

        await apply_filter(portal, "#filterLocation", "#locationInput", "", "#applyFilter")
        assert len(await list_result_titles(portal)) == 3

    @pytest.mark.asyncio
    async def test_pagination(self, portal: Session) -> None:
        await portal.goto("/jobs")
        pages = [titles async for titles in iter_result_pages(portal, max_pages=5)]
        assert len(pages) == 2
        assert all("Software Engineer" in titles for titles in pages)

    @pytest.mark.asyncio
    async def test_upload(self, portal: Session, tmp_path: Path) -> None:
        resume = tmp_path / "resume.pdf"
        resume.write_bytes(b"%PDF-1.4\n")
        await portal.goto("/jobs")
        await upload_files(portal, "#resume", [resume])
        file_names = await portal.evaluate(
            "() => Array.from(document.querySelector('#resume').files, f => f.name)"
        )
        assert file_names == ["resume.pdf"]
