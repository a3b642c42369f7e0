import pytest

from admin_panel.dashboards import Dashboard
from admin_panel.exceptions import MenuConfigurationError
from admin_panel.menu import ComputedBadge, LiteralBadge, MenuGroup, MenuItem, MenuSection, make_badge


class AnalyticsDashboard(Dashboard):
    def icon(self):
        return "chart-line"


class MainDashboard(Dashboard):
    pass


class OrderItemResource:
    pass


class CustomResource:
    @staticmethod
    def uri_key():
        return "custom-things"

    @staticmethod
    def label():
        return "Custom Things"


def test_link_and_make_keep_literal_url():
    assert MenuItem.link("Dashboard", "/admin/dashboard").url == "/admin/dashboard"
    assert MenuItem.make("Docs").url is None


def test_resource_item_derives_label_and_url():
    users = MenuItem.resource("UserResource")
    categories = MenuItem.resource("App\\Admin\\CategoryResource")
    order_items = MenuItem.resource(OrderItemResource)
    custom = MenuItem.resource(CustomResource)

    assert (users.label, users.url) == ("Users", "/admin/resources/users")
    assert (categories.label, categories.url) == ("Categories", "/admin/resources/categories")
    assert (order_items.label, order_items.url) == ("Order Items", "/admin/resources/order-items")
    assert (custom.label, custom.url) == ("Custom Things", "/admin/resources/custom-things")
    assert users.meta == {"type": "resource", "resource": "UserResource"}


def test_lens_item():
    item = MenuItem.lens("UserResource", "MostValuableUsers")

    assert item.label == "Most Valuable Users"
    assert item.url == "/admin/resources/users/lens/most-valuable-users"
    assert item.meta["lens"] == "MostValuableUsers"


def test_external_link_records_method_and_target():
    item = (
        MenuItem.external_link("API Action", "https://api.example.com/action")
        .method("post", {"action": "sync"}, {"Content-Type": "application/json"})
        .open_in_new_tab()
    )

    assert item.url == "https://api.example.com/action"
    assert item.meta["external"] is True
    assert item.meta["openInNewTab"] is True
    assert item.meta["method"] == "POST"
    assert item.meta["data"] == {"action": "sync"}
    assert item.meta["headers"] == {"Content-Type": "application/json"}


def test_external_link_rejects_unknown_method():
    with pytest.raises(MenuConfigurationError):
        MenuItem.external_link("Bad", "https://example.com").method("TRACE")


def test_dashboard_item_follows_dashboard_authorization(make_context):
    item = MenuItem.dashboard(AnalyticsDashboard().can_see(lambda ctx: ctx.is_admin))
    main = MenuItem.dashboard(MainDashboard)

    assert item.label == "Analytics"
    assert item.url == "/admin/dashboards/analytics"
    assert item.icon == "chart-line"
    assert item.meta == {"dashboard": True, "dashboard_uri_key": "analytics"}
    assert item.is_visible(make_context(is_admin=True)) is True
    assert item.is_visible(make_context(is_admin=False)) is False
    assert main.url == "/admin"


def test_meta_merges_instead_of_replacing():
    item = MenuItem.make("Item", "/item").with_meta({"a": 1, "b": 2}).with_meta({"b": 3}, c=4)

    assert item.meta == {"a": 1, "b": 3, "c": 4}
    assert list(item.meta) == ["a", "b", "c"]


def test_badge_variants():
    literal = make_badge(5, "info")
    computed = make_badge(lambda: "x", "success")

    assert isinstance(literal, LiteralBadge) and literal.resolve() == 5
    assert isinstance(computed, ComputedBadge) and computed.resolve() == "x"
    assert make_badge(literal) is literal

    with pytest.raises(MenuConfigurationError):
        make_badge("New", "rainbow")


def test_with_badge_if_only_applies_when_condition_holds():
    shown = MenuItem.make("A", "/a").with_badge_if("New", "success", lambda: True)
    hidden = MenuItem.make("B", "/b").with_badge_if("New", "success", lambda: False)

    assert shown.resolve_badge() == "New"
    assert shown.badge_type == "success"
    assert hidden.badge is None
    assert hidden.badge_type is None


def test_section_path_and_collapsible_are_exclusive():
    with pytest.raises(MenuConfigurationError):
        MenuSection.make("Reports").with_path("/reports").collapsible()

    with pytest.raises(MenuConfigurationError):
        MenuSection.make("Reports").collapsible().with_path("/reports")

    # turning collapsible off is always allowed
    section = MenuSection.make("Reports").with_path("/reports").collapsible(False)
    assert section.path == "/reports"


def test_state_ids_default_from_name():
    assert MenuSection.make("User Management").state_id == "menu_section_user_management"
    assert MenuGroup.make("Billing & Plans").state_id == "menu_group_billing_plans"
    assert MenuGroup.make("Billing").with_state_id("custom").state_id == "custom"


def test_section_factories():
    dashboard_section = MenuSection.dashboard(AnalyticsDashboard)
    resource_section = MenuSection.resource("InvoiceResource")

    assert dashboard_section.name == "Analytics"
    assert dashboard_section.path == "/admin/dashboards/analytics"
    assert dashboard_section.icon == "chart-line"
    assert dashboard_section.meta["dashboard_uri_key"] == "analytics"
    assert resource_section.name == "Invoices"
    assert resource_section.path == "/admin/resources/invoices"


def test_cache_ttl_must_be_positive():
    with pytest.raises(MenuConfigurationError):
        MenuItem.make("A", "/a").cache_auth(0)
    with pytest.raises(MenuConfigurationError):
        MenuItem.make("A", "/a").cache_badge(-1)
