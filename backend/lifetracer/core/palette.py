"""
Category palette.

Colors and icons are closed sets; the front end maps each name to its
own classes, the backend only needs the names and labels.
"""
from enum import Enum


class CategoryColor(str, Enum):
    ROSE = "rose"
    EMERALD = "emerald"
    BLUE = "blue"
    AMBER = "amber"
    CYAN = "cyan"
    INDIGO = "indigo"


DEFAULT_COLOR = CategoryColor.INDIGO

COLOR_LABELS: dict[CategoryColor, str] = {
    CategoryColor.ROSE: "Rose",
    CategoryColor.EMERALD: "Vert",
    CategoryColor.BLUE: "Bleu",
    CategoryColor.AMBER: "Ambre",
    CategoryColor.CYAN: "Cyan",
    CategoryColor.INDIGO: "Indigo",
}

# Tailwind utility for the marker dot of each color
COLOR_CLASSES: dict[CategoryColor, str] = {
    color: f"bg-{color.value}-500" for color in CategoryColor
}


class CategoryIcon(str, Enum):
    HEART = "heart"
    BRIEFCASE = "briefcase"
    GLOBE = "globe"
    HOME = "home"
    GRADUATION = "graduation"
    DUMBBELL = "dumbbell"
    MUSIC = "music"
    CAMERA = "camera"
    STAR = "star"
    USERS = "users"
    LEAF = "leaf"
    CAR = "car"
    LIGHTBULB = "lightbulb"
    PALETTE = "palette"
    COFFEE = "coffee"


DEFAULT_ICON = CategoryIcon.HEART


def palette() -> dict:
    """Colors and icons offered by the category editor."""
    return {
        "colors": [
            {"name": color.value, "label": COLOR_LABELS[color], "class": COLOR_CLASSES[color]}
            for color in CategoryColor
        ],
        "icons": [icon.value for icon in CategoryIcon],
        "default_color": DEFAULT_COLOR.value,
        "default_icon": DEFAULT_ICON.value,
    }
