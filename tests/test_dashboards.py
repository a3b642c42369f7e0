import logging

import pytest

from admin_panel.dashboards import Card, Dashboard, DashboardRegistry
from admin_panel.exceptions import DashboardForbiddenError, DashboardNotFoundError, MenuConfigurationError
from admin_panel.menu.builder import (
    build_dashboard_menu_section,
    build_default_menu,
    build_main_dashboard_menu_item,
)


class MainDashboard(Dashboard):
    def cards(self):
        return [Card.make("Welcome", {"message": "hi"})]


class SalesDashboard(Dashboard):
    def category(self):
        return "Sales"

    def icon(self):
        return "trending-up"

    def cards(self):
        return [
            Card.make("Revenue", lambda ctx: {"total": 1200}),
            Card.make("Margins", {"pct": 40}).can_see(lambda ctx: ctx.is_admin),
        ]


class UserInsightsDashboard(Dashboard):
    label = "User Insights"

    def category(self):
        return "Users"


class ForecastDashboard(Dashboard):
    def category(self):
        return "Sales"


class AdminOnlyDashboard(Dashboard):
    def __init__(self):
        super().__init__()
        self.can_see(lambda ctx: ctx is not None and ctx.is_admin)


class BrokenCard(Card):
    def data(self, context):
        raise ValueError("metrics store offline")


class FlakyDashboard(Dashboard):
    def cards(self):
        return [Card.make("Fine", {"ok": True}), BrokenCard()]


def test_registry_keeps_order_and_duplicates():
    registry = DashboardRegistry().register(MainDashboard).register_many([SalesDashboard, MainDashboard])

    assert registry.list() == [MainDashboard, SalesDashboard, MainDashboard]
    assert len(registry) == 3


def test_registry_hands_out_copies():
    registry = DashboardRegistry([MainDashboard])

    snapshot = registry.list()
    snapshot.append(SalesDashboard)

    assert registry.list() == [MainDashboard]


def test_panel_dashboards_appends(panel):
    panel.dashboards([MainDashboard]).dashboards([SalesDashboard])

    assert panel.get_dashboards() == [MainDashboard, SalesDashboard]
    assert [d.uri_key() for d in panel.get_dashboard_instances()] == ["main", "sales"]


def test_dashboard_instances_are_fresh(panel):
    panel.dashboards([SalesDashboard])

    assert panel.get_dashboard_instances()[0] is not panel.get_dashboard_instances()[0]


def test_factories_and_instances_are_accepted(panel):
    shared = ForecastDashboard()
    panel.dashboards([lambda: UserInsightsDashboard(), shared])

    instances = panel.get_dashboard_instances()

    assert instances[0].name() == "User Insights"
    assert instances[0].uri_key() == "user-insights"
    assert instances[1] is shared


def test_unresolvable_reference_raises(panel):
    panel.dashboards(["not-a-dashboard"])

    with pytest.raises(MenuConfigurationError):
        panel.get_dashboard_instances()


def test_navigation_filters_by_authorization(panel, make_context, guest):
    panel.dashboards([MainDashboard, AdminOnlyDashboard])

    assert [d.uri_key() for d in panel.get_navigation_dashboards(guest)] == ["main"]
    assert [d.uri_key() for d in panel.get_navigation_dashboards(make_context(is_admin=True))] == ["main", "admin-only"]


def test_find_dashboard_errors(panel, guest):
    panel.dashboards([MainDashboard, AdminOnlyDashboard])

    assert panel.find_dashboard("main", guest).name() == "Main"
    with pytest.raises(DashboardNotFoundError):
        panel.find_dashboard("missing", guest)
    with pytest.raises(DashboardForbiddenError):
        panel.find_dashboard("admin-only", guest)


def test_cards_respect_their_own_authorization(make_context):
    dashboard = SalesDashboard()

    regular = dashboard.resolve_cards(make_context())
    admin = dashboard.resolve_cards(make_context(is_admin=True))

    assert [c["title"] for c in regular] == ["Revenue"]
    assert [c["title"] for c in admin] == ["Revenue", "Margins"]
    assert regular[0] == {"component": "card", "title": "Revenue", "uriKey": "revenue", "width": "1/3", "data": {"total": 1200}}


def test_failing_card_is_dropped_and_logged(guest, caplog):
    with caplog.at_level(logging.WARNING, logger="admin_panel.dashboards.dashboard"):
        cards = FlakyDashboard().resolve_cards(guest)

    assert [c["title"] for c in cards] == ["Fine"]
    assert "broken" in caplog.text
    assert "flaky" in caplog.text


def test_dashboard_serialization():
    payload = SalesDashboard().serialize()

    assert payload == {
        "name": "Sales",
        "uriKey": "sales",
        "showRefreshButton": False,
        "description": None,
        "icon": "trending-up",
        "category": "Sales",
    }


def test_default_menu_groups_by_category(panel, make_context):
    panel.dashboards([MainDashboard, SalesDashboard, UserInsightsDashboard, ForecastDashboard, AdminOnlyDashboard])

    menu = build_default_menu(panel, make_context())

    assert menu[0].label == "Main"
    assert menu[0].url == "/admin"
    assert menu[0].meta["main_dashboard"] is True
    assert [s.name for s in menu[1:]] == ["Sales", "Users"]
    assert [i.label for i in menu[1].items] == ["Sales", "Forecast"]
    assert menu[1].icon == "trending-up"
    assert menu[2].icon == "users"


def test_default_menu_without_categories(panel, make_context):
    panel.dashboards([MainDashboard, SalesDashboard, AdminOnlyDashboard])

    menu = build_default_menu(panel, make_context(is_admin=True), group_by_category=False)

    assert menu[0].label == "Main"
    assert menu[1].name == "Dashboards"
    assert menu[1].is_collapsible is True
    assert [i.label for i in menu[1].items] == ["Sales", "Admin Only"]


def test_default_menu_items_carry_dashboard_metadata(panel, guest):
    panel.dashboards([SalesDashboard])

    (section,) = build_default_menu(panel, guest)
    (item,) = section.items

    assert section.name == "Sales"
    assert item.url == "/admin/dashboards/sales"
    assert item.meta["dashboard_uri_key"] == "sales"
    assert item.meta["dashboard_category"] == "Sales"


def test_main_item_requires_authorization(panel, guest):
    class GuardedMainDashboard(Dashboard):
        def uri_key(self):
            return "main"

    panel.dashboards([GuardedMainDashboard().can_see(lambda ctx: False)])

    assert build_main_dashboard_menu_item(panel, guest) is None


def test_dashboard_menu_section_helper(guest):
    section = build_dashboard_menu_section(
        "Insights",
        [SalesDashboard, ForecastDashboard],
        icon="chart-pie",
        collapsible=True,
        badge={"value": 2, "type": "info"},
    )

    assert section.name == "Insights"
    assert section.icon == "chart-pie"
    assert section.is_collapsible is True
    assert section.resolve_badge() == 2
    assert section.badge_type == "info"
    assert [i.label for i in section.items] == ["Sales", "Forecast"]
    assert build_dashboard_menu_section("Empty", []) is None


def test_plain_cards_are_keyed_by_title():
    assert Card.make("Active Users").uri_key() == "active-users"
    assert BrokenCard().uri_key() == "broken"


def test_resolve_serializes_authorized_dashboards_with_cards(panel, make_context):
    panel.dashboards([SalesDashboard, FlakyDashboard, AdminOnlyDashboard])

    payload = panel.resolve_dashboards(make_context())

    assert [d["uriKey"] for d in payload] == ["sales", "flaky"]
    sales, flaky = payload
    assert sales["name"] == "Sales"
    assert sales["category"] == "Sales"
    assert [c["uriKey"] for c in sales["cards"]] == ["revenue"]
    assert flaky["cards"] == [{"component": "card", "title": "Fine", "uriKey": "fine", "width": "1/3", "data": {"ok": True}}]

    admin_payload = panel.dashboard_registry.resolve(make_context(is_admin=True))
    assert [d["uriKey"] for d in admin_payload] == ["sales", "flaky", "admin-only"]
    assert [c["title"] for c in admin_payload[0]["cards"]] == ["Revenue", "Margins"]
