"""Tests for grouping icon files into icon groups."""

from icon_explorer.explorer import group_icons


def test_variants_share_one_group(make_icon):
    groups = group_icons([make_icon("arrow-filled.svg"), make_icon("arrow-stroke.svg")])
    assert list(groups) == ["arrow"]
    assert set(groups["arrow"].variants) == {"filled", "stroke"}


def test_filled_selected_regardless_of_order(make_icon):
    icons = [make_icon("arrow-filled.svg"), make_icon("arrow-stroke.svg")]
    for ordering in (icons, list(reversed(icons))):
        assert group_icons(ordering)["arrow"].selected_variant == "filled"


def test_priority_order_without_default(make_icon):
    groups = group_icons(
        [make_icon("bell-bold.svg"), make_icon("bell-duo_solid.svg"), make_icon("bell-solid.svg")]
    )
    assert groups["bell"].selected_variant == "solid"


def test_grouping_is_idempotent(make_icon):
    icons = [
        make_icon("arrow-stroke.svg"),
        make_icon("arrow-filled.svg"),
        make_icon("home-duo_solid.svg"),
        make_icon("calendar.svg"),
    ]
    first = group_icons(icons)
    second = group_icons(icons)
    assert list(first) == list(second)
    assert {name: g.selected_variant for name, g in first.items()} == {
        name: g.selected_variant for name, g in second.items()
    }


def test_first_seen_icon_wins_duplicate_variant(make_icon):
    groups = group_icons([make_icon("home.svg", size=1), make_icon("home-filled.svg", size=2)])
    assert groups["home"].filename == "home.svg"
    assert groups["home"].size == 1


def test_group_metadata_follows_selection(make_icon):
    groups = group_icons(
        [
            make_icon("arrow-filled.svg", size=500, dimensions="24×24"),
            make_icon("arrow-stroke.svg", size=200, dimensions="16×16"),
        ]
    )
    group = groups["arrow"]
    assert group.size == 500
    assert group.select("stroke")
    assert group.size == 200
    assert group.dimensions == "16×16"
    assert group.url == "/icons/arrow-stroke.svg"
    assert group.download_url == "/api/download/arrow-stroke.svg"


def test_select_unknown_variant_is_rejected(make_icon):
    group = group_icons([make_icon("arrow-filled.svg")])["arrow"]
    assert not group.select("bold")
    assert group.selected_variant == "filled"


def test_variant_options_are_ordered_and_labelled(make_icon):
    group = group_icons(
        [make_icon("x-duo_stroke.svg"), make_icon("x-stroke.svg"), make_icon("x.svg")]
    )["x"]
    assert group.variant_options() == [
        ("filled", "Filled"),
        ("stroke", "Stroke"),
        ("duo_stroke", "Duo Stroke"),
    ]
