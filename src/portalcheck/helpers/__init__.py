"""Page helpers grouped by domain.

Query helpers are permissive and return a negative result when their element
is absent. Mutating helpers are strict and raise ElementNotFound or Timeout.
"""

from portalcheck.helpers.accessibility import (
    ConsoleErrorCollector,
    assert_main_landmarks,
    count_images_missing_alt,
    form_inputs_have_labels,
    get_lang_attribute,
    has_lang_attribute,
    has_main_landmarks,
    has_readable_text,
    has_skip_link,
    heading_hierarchy_valid,
    heading_levels,
    levels_are_hierarchical,
    links_keyboard_accessible,
    main_images_have_alt_text,
)
from portalcheck.helpers.base import permissive
from portalcheck.helpers.content import (
    click_topic,
    count_headings,
    count_topic_links,
    get_main_heading_text,
    get_title,
    get_url,
    is_main_heading_visible,
    page_contains_text,
    topic_exists,
    wait_until_loaded,
)
from portalcheck.helpers.forms import (
    clear_input,
    click_button,
    fill_form_input,
    form_input_count,
    get_input_value,
    is_input_required,
    submit_form,
)
from portalcheck.helpers.links import (
    all_links_have_href,
    all_links_have_text,
    collect_hrefs,
    count_external_links,
    count_main_links,
    has_valid_protocol,
    internal_links_valid,
)
from portalcheck.helpers.listings import (
    apply_filter,
    iter_result_pages,
    list_result_titles,
    upload_files,
)
from portalcheck.helpers.navigation import (
    all_nav_items_have_href,
    click_logo,
    click_nav_item,
    count_footer_links,
    count_primary_nav_items,
    is_footer_present,
    link_points_to,
    list_footer_nav_labels,
    list_primary_nav_labels,
    nav_item_exists,
)
from portalcheck.helpers.search import (
    clear_search,
    count_search_results,
    get_search_value,
    is_search_box_visible,
    no_results_shown,
    perform_search,
    search_input_accepts_text,
    search_results_displayed,
    submit_search_with_enter,
)

__all__ = [
    "ConsoleErrorCollector",
    "all_links_have_href",
    "all_links_have_text",
    "all_nav_items_have_href",
    "apply_filter",
    "assert_main_landmarks",
    "clear_input",
    "clear_search",
    "click_button",
    "click_logo",
    "click_nav_item",
    "click_topic",
    "collect_hrefs",
    "count_external_links",
    "count_footer_links",
    "count_headings",
    "count_images_missing_alt",
    "count_main_links",
    "count_primary_nav_items",
    "count_search_results",
    "count_topic_links",
    "fill_form_input",
    "form_input_count",
    "form_inputs_have_labels",
    "get_input_value",
    "get_lang_attribute",
    "get_main_heading_text",
    "get_search_value",
    "get_title",
    "get_url",
    "has_lang_attribute",
    "has_main_landmarks",
    "has_readable_text",
    "has_skip_link",
    "has_valid_protocol",
    "heading_hierarchy_valid",
    "heading_levels",
    "internal_links_valid",
    "is_footer_present",
    "is_input_required",
    "is_main_heading_visible",
    "is_search_box_visible",
    "iter_result_pages",
    "levels_are_hierarchical",
    "link_points_to",
    "links_keyboard_accessible",
    "list_footer_nav_labels",
    "list_primary_nav_labels",
    "list_result_titles",
    "main_images_have_alt_text",
    "nav_item_exists",
    "no_results_shown",
    "page_contains_text",
    "perform_search",
    "permissive",
    "search_input_accepts_text",
    "search_results_displayed",
    "submit_form",
    "submit_search_with_enter",
    "topic_exists",
    "upload_files",
    "wait_until_loaded",
]
