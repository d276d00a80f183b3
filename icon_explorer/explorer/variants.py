"""Icon variant vocabulary and file name parsing."""

from __future__ import annotations

from icon_explorer.modules.icons import SUPPORTED_EXTENSION

# Ordered by preference, most preferred first.
VARIANTS: tuple[str, ...] = (
    "filled",
    "solid",
    "stroke",
    "duo_solid",
    "duo_stroke",
    "contrast",
    "bold",
)
DEFAULT_VARIANT = "filled"

VARIANT_LABELS = {
    "filled": "Filled",
    "solid": "Solid",
    "stroke": "Stroke",
    "duo_solid": "Duo Solid",
    "duo_stroke": "Duo Stroke",
    "contrast": "Contrast",
    "bold": "Bold",
}

_SUFFIXES_LONGEST_FIRST = sorted(VARIANTS, key=len, reverse=True)


def parse_icon_name(name: str) -> tuple[str, str]:
    """Split an icon name into ``(base_name, variant)``.

    ``name`` may carry the ``.svg`` extension. Names without a recognised
    ``-<variant>`` suffix belong to the default variant.
    """
    stem = name
    if stem.lower().endswith(SUPPORTED_EXTENSION):
        stem = stem[: -len(SUPPORTED_EXTENSION)]

    for variant in _SUFFIXES_LONGEST_FIRST:
        suffix = f"-{variant}"
        if stem.endswith(suffix) and len(stem) > len(suffix):
            return stem[: -len(suffix)], variant
    return stem, DEFAULT_VARIANT


def variant_rank(variant: str) -> int:
    try:
        return VARIANTS.index(variant)
    except ValueError:
        return len(VARIANTS)


def should_prefer_variant(candidate: str, current: str | None) -> bool:
    """Return True when ``candidate`` should replace ``current`` as a group's pick."""
    if current is None:
        return True
    if candidate == current:
        return False
    if candidate == DEFAULT_VARIANT:
        return True
    if current == DEFAULT_VARIANT:
        return False
    return variant_rank(candidate) < variant_rank(current)


def variant_label(variant: str) -> str:
    label = VARIANT_LABELS.get(variant)
    if label:
        return label
    return variant.replace("_", " ").replace("-", " ").title()


def order_variants(variants) -> list[str]:
    return sorted(variants, key=variant_rank)
