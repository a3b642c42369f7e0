"""String helpers shared by menu items, sections and dashboards."""

import re

_SEPARATORS = re.compile(r"[\s\-]+")
_LOWER_UPPER = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_ACRONYM_WORD = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")
_NON_SLUG = re.compile(r"[^a-z0-9]+")

_UNCOUNTABLE = {"data", "media", "news", "information", "equipment", "series", "species"}


def class_basename(ref) -> str:
    """Return the short class name for a class, an instance or a dotted/namespaced string."""
    if isinstance(ref, str):
        return re.split(r"[.\\]", ref)[-1]
    if isinstance(ref, type):
        return ref.__name__
    return type(ref).__name__


def strip_suffix(value: str, suffix: str) -> str:
    if value.endswith(suffix) and value != suffix:
        return value[: -len(suffix)]
    return value


def snake_case(value: str) -> str:
    value = _SEPARATORS.sub("_", value.strip())
    value = _LOWER_UPPER.sub("_", value)
    value = _ACRONYM_WORD.sub("_", value)
    return re.sub(r"_+", "_", value).strip("_").lower()


def kebab_case(value: str) -> str:
    return snake_case(value).replace("_", "-")


def slugify(value: str, separator: str = "-") -> str:
    return _NON_SLUG.sub(separator, value.lower()).strip(separator)


def pluralize(word: str) -> str:
    """Naive English pluralization, enough for resource labels and URI keys."""
    if not word:
        return word
    lower = word.lower()
    if lower in _UNCOUNTABLE:
        return word
    if re.search(r"[^aeiou]y$", lower):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", lower):
        return word + "es"
    return word + "s"


def headline(value: str) -> str:
    """'UserProfile' -> 'User Profile'."""
    return " ".join(part.capitalize() for part in snake_case(value).split("_") if part)
