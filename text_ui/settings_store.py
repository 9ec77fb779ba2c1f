import configparser
from pathlib import Path

from spider.Core import GameConfig
from text_ui.ui_config import CARD_STYLE_ORDER, SUIT_COUNT_ORDER

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "suit_count": "4",
    "card_style": "Text",
    "seed": "",
}


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: str(v) for k, v in settings.items() if k in DEFAULT_SETTINGS and v is not None})

    try:
        suit_count = int(data["suit_count"])
    except ValueError:
        suit_count = int(DEFAULT_SETTINGS["suit_count"])
    if suit_count not in SUIT_COUNT_ORDER:
        suit_count = int(DEFAULT_SETTINGS["suit_count"])
    data["suit_count"] = str(suit_count)

    if data["card_style"] not in CARD_STYLE_ORDER:
        data["card_style"] = DEFAULT_SETTINGS["card_style"]

    # an empty seed means a fresh shuffle every game
    seed = data["seed"].strip()
    try:
        data["seed"] = str(int(seed)) if seed else ""
    except ValueError:
        data["seed"] = ""
    return data


def load_settings(path: Path | None = None):
    path = Path(path) if path is not None else SETTINGS_PATH
    if not path.exists():
        return dict(DEFAULT_SETTINGS)
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error:
        return dict(DEFAULT_SETTINGS)
    if "ui" not in parser:
        return dict(DEFAULT_SETTINGS)
    return _sanitize(dict(parser["ui"]))


def save_settings(settings, path: Path | None = None):
    path = Path(path) if path is not None else SETTINGS_PATH
    parser = configparser.ConfigParser()
    parser["ui"] = _sanitize(settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)


def build_config(settings) -> GameConfig:
    data = _sanitize(settings)
    seed = int(data["seed"]) if data["seed"] else None
    return GameConfig(suits=int(data["suit_count"]), seed=seed)
