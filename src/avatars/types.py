"""Avatar icons, color themes, and the avatar value type attached to chat threads."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class AvatarIcon(str, Enum):
    """Built-in avatar icons.  Values double as asset names and identifiers."""

    ABSTRACT01 = "abstract01"
    ABSTRACT02 = "abstract02"
    ABSTRACT03 = "abstract03"
    CAT = "cat"
    DINOSAUR = "dinosaur"
    DOG = "dog"
    FOX = "fox"
    GHOST = "ghost"
    INCOGNITO = "incognito"
    PIG = "pig"
    SLOTH = "sloth"
    TUCAN = "tucan"

    HEART = "heart"
    HOUSE = "house"
    MELON = "melon"
    DRINK = "drink"
    CELEBRATION = "celebration"
    BALLOON = "balloon"
    BOOK = "book"
    BRIEFCASE = "briefcase"
    SUNSET = "sunset"
    SURFBOARD = "surfboard"
    SOCCERBALL = "soccerball"
    FOOTBALL = "football"

    @property
    def image_name(self) -> str:
        return f"avatar_{self.value}"


DEFAULT_GROUP_ICONS: tuple[AvatarIcon, ...] = (
    AvatarIcon.HEART,
    AvatarIcon.HOUSE,
    AvatarIcon.MELON,
    AvatarIcon.DRINK,
    AvatarIcon.CELEBRATION,
    AvatarIcon.BALLOON,
    AvatarIcon.BOOK,
    AvatarIcon.BRIEFCASE,
    AvatarIcon.SUNSET,
    AvatarIcon.SURFBOARD,
    AvatarIcon.SOCCERBALL,
    AvatarIcon.FOOTBALL,
)

DEFAULT_PROFILE_ICONS: tuple[AvatarIcon, ...] = (
    AvatarIcon.ABSTRACT01,
    AvatarIcon.ABSTRACT02,
    AvatarIcon.ABSTRACT03,
    AvatarIcon.CAT,
    AvatarIcon.DOG,
    AvatarIcon.FOX,
    AvatarIcon.TUCAN,
    AvatarIcon.SLOTH,
    AvatarIcon.DINOSAUR,
    AvatarIcon.PIG,
    AvatarIcon.INCOGNITO,
    AvatarIcon.GHOST,
)


class AvatarTheme(str, Enum):
    """Avatar color theme.  Each theme pairs a foreground and a background color."""

    A100 = "A100"
    A110 = "A110"
    A120 = "A120"
    A130 = "A130"
    A140 = "A140"
    A150 = "A150"
    A160 = "A160"
    A170 = "A170"
    A180 = "A180"
    A190 = "A190"
    A200 = "A200"
    A210 = "A210"

    @classmethod
    def default(cls) -> "AvatarTheme":
        return cls.A100

    @classmethod
    def for_icon(cls, icon: AvatarIcon) -> "AvatarTheme":
        """Return the theme an icon is shown with when none is chosen explicitly."""
        return ICON_THEME[icon]

    @classmethod
    def from_proto_color(cls, color: str) -> "AvatarTheme | None":
        """Map a wire color name (``"a100"`` ...) back to a theme.

        Unrecognized names, including ``"UNRECOGNIZED"``, return None.
        """
        try:
            return cls(color.upper())
        except ValueError:
            return None

    @property
    def proto_color(self) -> str:
        """Wire color name used by sync and backup payloads."""
        return self.value.lower()

    @property
    def foreground_rgb(self) -> int:
        return FOREGROUND_RGB[self]

    @property
    def background_rgb(self) -> int:
        return BACKGROUND_RGB[self]

    @property
    def foreground_hex(self) -> str:
        return f"#{self.foreground_rgb:06X}"

    @property
    def background_hex(self) -> str:
        return f"#{self.background_rgb:06X}"


# ── Color tables ───────────────────────────────────────────────────────────────

FOREGROUND_RGB: dict[AvatarTheme, int] = {
    AvatarTheme.A100: 0x3838F5,
    AvatarTheme.A110: 0x1251D3,
    AvatarTheme.A120: 0x086DA0,
    AvatarTheme.A130: 0x067906,
    AvatarTheme.A140: 0x661AFF,
    AvatarTheme.A150: 0x9F00F0,
    AvatarTheme.A160: 0xB8057C,
    AvatarTheme.A170: 0xBE0404,
    AvatarTheme.A180: 0x836B01,
    AvatarTheme.A190: 0x7D6F40,
    AvatarTheme.A200: 0x4F4F6D,
    AvatarTheme.A210: 0x5C5C5C,
}

BACKGROUND_RGB: dict[AvatarTheme, int] = {
    AvatarTheme.A100: 0xE3E3FE,
    AvatarTheme.A110: 0xDDE7FC,
    AvatarTheme.A120: 0xD8E8F0,
    AvatarTheme.A130: 0xCDE4CD,
    AvatarTheme.A140: 0xEAE0FD,
    AvatarTheme.A150: 0xF5E3FE,
    AvatarTheme.A160: 0xF6D8EC,
    AvatarTheme.A170: 0xF5D7D7,
    AvatarTheme.A180: 0xFEF5D0,
    AvatarTheme.A190: 0xEAE6D5,
    AvatarTheme.A200: 0xD2D2DC,
    AvatarTheme.A210: 0xD7D7D9,
}

ICON_THEME: dict[AvatarIcon, AvatarTheme] = {
    AvatarIcon.ABSTRACT01: AvatarTheme.A130,
    AvatarIcon.ABSTRACT02: AvatarTheme.A120,
    AvatarIcon.ABSTRACT03: AvatarTheme.A170,
    AvatarIcon.CAT: AvatarTheme.A190,
    AvatarIcon.DOG: AvatarTheme.A140,
    AvatarIcon.FOX: AvatarTheme.A190,
    AvatarIcon.TUCAN: AvatarTheme.A120,
    AvatarIcon.SLOTH: AvatarTheme.A160,
    AvatarIcon.DINOSAUR: AvatarTheme.A130,
    AvatarIcon.PIG: AvatarTheme.A180,
    AvatarIcon.INCOGNITO: AvatarTheme.A210,
    AvatarIcon.GHOST: AvatarTheme.A100,
    AvatarIcon.HEART: AvatarTheme.A180,
    AvatarIcon.HOUSE: AvatarTheme.A120,
    AvatarIcon.MELON: AvatarTheme.A110,
    AvatarIcon.DRINK: AvatarTheme.A170,
    AvatarIcon.CELEBRATION: AvatarTheme.A100,
    AvatarIcon.BALLOON: AvatarTheme.A210,
    AvatarIcon.BOOK: AvatarTheme.A100,
    AvatarIcon.BRIEFCASE: AvatarTheme.A180,
    AvatarIcon.SUNSET: AvatarTheme.A120,
    AvatarIcon.SURFBOARD: AvatarTheme.A110,
    AvatarIcon.SOCCERBALL: AvatarTheme.A130,
    AvatarIcon.FOOTBALL: AvatarTheme.A210,
}


# ── Avatar kinds ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ImageAvatar:
    """A user-supplied image.  Two image avatars are equal when their paths are."""

    path: Path

    is_editable = False
    is_deletable = True


@dataclass(frozen=True)
class IconAvatar:
    icon: AvatarIcon

    is_editable = True
    is_deletable = False


@dataclass(frozen=True)
class TextAvatar:
    """Initials or short text drawn on the theme background."""

    text: str

    is_editable = True
    is_deletable = True


AvatarType = ImageAvatar | IconAvatar | TextAvatar


@dataclass(frozen=True)
class AvatarModel:
    """An avatar choice: what is drawn (type) and how it is colored (theme).

    Icon avatars are identified by their icon value; every other kind gets a
    fresh random identifier unless one is supplied.

    Usage::

        avatar = AvatarModel(type=TextAvatar("BC"), theme=AvatarTheme.A110)
        cat = AvatarModel.for_icon(AvatarIcon.CAT)
    """

    type: AvatarType
    theme: AvatarTheme = AvatarTheme.A100
    identifier: str = field(default="")

    def __post_init__(self) -> None:
        if isinstance(self.type, IconAvatar):
            if self.identifier and self.identifier != self.type.icon.value:
                raise ValueError(
                    f"Icon avatar identifier {self.identifier!r} "
                    f"does not match icon {self.type.icon.value!r}"
                )
            object.__setattr__(self, "identifier", self.type.icon.value)
        elif not self.identifier:
            object.__setattr__(self, "identifier", str(uuid.uuid4()))

    @classmethod
    def for_icon(cls, icon: AvatarIcon) -> "AvatarModel":
        return cls(type=IconAvatar(icon), theme=AvatarTheme.for_icon(icon))
