"""URL derivation for resource, filtered-resource and dashboard menu entries."""

import re
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from admin_panel.dependencies.panel import get_settings
from admin_panel.utils.helpers import class_basename, headline, kebab_case, pluralize, snake_case, strip_suffix

# Parameter names that qualify a filter key, checked in this order
FILTER_QUALIFIERS = ("column", "field", "operator")


def panel_path() -> str:
    return get_settings().panel_path


def resource_identifier(resource: Any) -> str:
    return resource if isinstance(resource, str) else class_basename(resource)


def _resource_base_name(resource: Any) -> str:
    return strip_suffix(class_basename(resource), "Resource")


def resource_uri_key(resource: Any) -> str:
    uri_key = getattr(resource, "uri_key", None)
    if callable(uri_key):
        return uri_key()
    if isinstance(uri_key, str):
        return uri_key

    parts = kebab_case(_resource_base_name(resource)).split("-")
    parts[-1] = pluralize(parts[-1])
    return "-".join(parts)


def resource_label(resource: Any) -> str:
    label = getattr(resource, "label", None)
    if callable(label):
        return label()
    if isinstance(label, str):
        return label
    return pluralize(headline(_resource_base_name(resource)))


def resource_url(resource: Any) -> str:
    return f"{panel_path()}/resources/{resource_uri_key(resource)}"


def dashboard_url(uri_key: str) -> str:
    if uri_key == "main":
        return panel_path() or "/"
    return f"{panel_path()}/dashboards/{uri_key}"


def filter_query_key(filter_name: Any, parameters: Mapping[str, Any] | None = None) -> str:
    """
    Query key for one applied filter.

    'StatusFilter' -> 'status'; with {'column': 'user_status'} -> 'status_user_status';
    'AmountFilter' with {'operator': '>='} -> 'amount_>='.
    """
    name = re.sub(r"\s*Filter$", "", class_basename(filter_name))
    key = snake_case(name) or snake_case(class_basename(filter_name))

    for qualifier in FILTER_QUALIFIERS:
        value = (parameters or {}).get(qualifier)
        if value not in (None, ""):
            return f"{key}_{value}"
    return key


def _query_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, list | tuple):
        return ",".join(_query_value(v) for v in value)
    return str(value)


def filtered_url(base_url: str, filters: Sequence[Mapping[str, Any]]) -> str:
    """Append ``filters[<key>]=<value>`` pairs in the order the filters were applied."""
    if not filters:
        return base_url

    pairs = [
        f"filters[{quote(filter_query_key(entry['filter'], entry.get('parameters')), safe='')}]="
        f"{quote(_query_value(entry['value']), safe='')}"
        for entry in filters
    ]
    separator = "&" if "?" in base_url else "?"
    return base_url + separator + "&".join(pairs)
