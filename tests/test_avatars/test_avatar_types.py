"""Tests for avatar icons, themes, and AvatarModel."""

import uuid
from pathlib import Path

import pytest

from src.avatars.types import (
    BACKGROUND_RGB,
    DEFAULT_GROUP_ICONS,
    DEFAULT_PROFILE_ICONS,
    FOREGROUND_RGB,
    ICON_THEME,
    AvatarIcon,
    AvatarModel,
    AvatarTheme,
    IconAvatar,
    ImageAvatar,
    TextAvatar,
)


class TestAvatarIcon:
    def test_count(self) -> None:
        assert len(AvatarIcon) == 24

    def test_is_str_enum(self) -> None:
        assert isinstance(AvatarIcon.CAT, str)
        assert AvatarIcon.CAT == "cat"

    def test_image_name(self) -> None:
        assert AvatarIcon.ABSTRACT01.image_name == "avatar_abstract01"
        assert AvatarIcon.SOCCERBALL.image_name == "avatar_soccerball"

    def test_default_lists_partition_all_icons(self) -> None:
        assert len(DEFAULT_GROUP_ICONS) == 12
        assert len(DEFAULT_PROFILE_ICONS) == 12
        assert set(DEFAULT_GROUP_ICONS) | set(DEFAULT_PROFILE_ICONS) == set(AvatarIcon)

    def test_default_list_order(self) -> None:
        assert DEFAULT_GROUP_ICONS[0] is AvatarIcon.HEART
        assert DEFAULT_PROFILE_ICONS[:4] == (
            AvatarIcon.ABSTRACT01,
            AvatarIcon.ABSTRACT02,
            AvatarIcon.ABSTRACT03,
            AvatarIcon.CAT,
        )
        assert DEFAULT_PROFILE_ICONS[-1] is AvatarIcon.GHOST


class TestAvatarTheme:
    def test_default(self) -> None:
        assert AvatarTheme.default() is AvatarTheme.A100

    def test_every_theme_has_colors(self) -> None:
        for theme in AvatarTheme:
            assert theme in FOREGROUND_RGB, f"Missing foreground for {theme}"
            assert theme in BACKGROUND_RGB, f"Missing background for {theme}"

    def test_color_values(self) -> None:
        assert AvatarTheme.A100.foreground_rgb == 0x3838F5
        assert AvatarTheme.A100.background_rgb == 0xE3E3FE
        assert AvatarTheme.A130.foreground_hex == "#067906"
        assert AvatarTheme.A210.background_hex == "#D7D7D9"

    def test_every_icon_has_a_theme(self) -> None:
        for icon in AvatarIcon:
            assert icon in ICON_THEME, f"Missing theme for {icon}"

    @pytest.mark.parametrize(
        "icon,theme",
        [
            (AvatarIcon.ABSTRACT01, AvatarTheme.A130),
            (AvatarIcon.CAT, AvatarTheme.A190),
            (AvatarIcon.DOG, AvatarTheme.A140),
            (AvatarIcon.GHOST, AvatarTheme.A100),
            (AvatarIcon.MELON, AvatarTheme.A110),
            (AvatarIcon.FOOTBALL, AvatarTheme.A210),
        ],
    )
    def test_for_icon(self, icon: AvatarIcon, theme: AvatarTheme) -> None:
        assert AvatarTheme.for_icon(icon) is theme

    def test_proto_color(self) -> None:
        assert AvatarTheme.A150.proto_color == "a150"

    def test_from_proto_color(self) -> None:
        for theme in AvatarTheme:
            assert AvatarTheme.from_proto_color(theme.proto_color) is theme

    @pytest.mark.parametrize("color", ["UNRECOGNIZED", "a999", ""])
    def test_from_unrecognized_proto_color(self, color: str) -> None:
        assert AvatarTheme.from_proto_color(color) is None


class TestAvatarKinds:
    def test_editable_and_deletable(self) -> None:
        image = ImageAvatar(Path("a.png"))
        icon = IconAvatar(AvatarIcon.CAT)
        text = TextAvatar("AB")
        assert (image.is_editable, image.is_deletable) == (False, True)
        assert (icon.is_editable, icon.is_deletable) == (True, False)
        assert (text.is_editable, text.is_deletable) == (True, True)

    def test_image_equality_by_path(self) -> None:
        assert ImageAvatar(Path("x/a.png")) == ImageAvatar(Path("x/a.png"))
        assert ImageAvatar(Path("x/a.png")) != ImageAvatar(Path("x/b.png"))

    def test_different_kinds_are_not_equal(self) -> None:
        assert TextAvatar("cat") != IconAvatar(AvatarIcon.CAT)


class TestAvatarModel:
    def test_icon_identifier_is_icon_value(self) -> None:
        model = AvatarModel(type=IconAvatar(AvatarIcon.SLOTH), theme=AvatarTheme.A160)
        assert model.identifier == "sloth"

    def test_matching_icon_identifier_accepted(self) -> None:
        model = AvatarModel(type=IconAvatar(AvatarIcon.SLOTH), identifier="sloth")
        assert model.identifier == "sloth"

    def test_mismatched_icon_identifier_rejected(self) -> None:
        with pytest.raises(ValueError, match="does not match"):
            AvatarModel(type=IconAvatar(AvatarIcon.SLOTH), identifier="pig")

    def test_text_gets_random_uuid(self) -> None:
        first = AvatarModel(type=TextAvatar("AB"))
        second = AvatarModel(type=TextAvatar("AB"))
        uuid.UUID(first.identifier)
        assert first.identifier != second.identifier

    def test_explicit_identifier_kept(self) -> None:
        assert AvatarModel(type=TextAvatar("AB"), identifier="mine").identifier == "mine"

    def test_for_icon(self) -> None:
        model = AvatarModel.for_icon(AvatarIcon.TUCAN)
        assert model.type == IconAvatar(AvatarIcon.TUCAN)
        assert model.theme is AvatarTheme.A120

    def test_is_frozen(self) -> None:
        model = AvatarModel.for_icon(AvatarIcon.CAT)
        with pytest.raises((AttributeError, TypeError)):
            model.theme = AvatarTheme.A200  # type: ignore[misc]
