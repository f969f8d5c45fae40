# uadetect/engine.py

import re
from typing import Callable, List, Tuple

from uadetect.schemas import EngineResult, RenderingEngine

PRESTO = re.compile(r"presto", re.IGNORECASE)
LEGACY_EDGE = re.compile(r"\bedge/\d+", re.IGNORECASE | re.ASCII)
CHROMIUM_EDGE = re.compile(r"\bedg/\d+", re.IGNORECASE | re.ASCII)
EDGE_TOKEN = re.compile(r"edge/", re.IGNORECASE)
BLINK_WEBKIT = re.compile(r"webkit/537\.36", re.IGNORECASE)
CHROME_TOKEN = re.compile(r"chrome/", re.IGNORECASE)
CHROME_WORD = re.compile(r"chrome", re.IGNORECASE)
TRIDENT = re.compile(r"trident", re.IGNORECASE)
GECKO = re.compile(r"gecko", re.IGNORECASE)
LIKE_GECKO = re.compile(r"like gecko", re.IGNORECASE)
WEBKIT = re.compile(r"webkit", re.IGNORECASE)


def is_edgehtml(user_agent: str) -> bool:
    # "Edge/18" but not the Chromium "Edg/119"
    return bool(LEGACY_EDGE.search(user_agent)) and not CHROMIUM_EDGE.search(user_agent)


def is_blink(user_agent: str) -> bool:
    return (
        bool(BLINK_WEBKIT.search(user_agent))
        and bool(CHROME_TOKEN.search(user_agent))
        and not EDGE_TOKEN.search(user_agent)
    )


def is_gecko(user_agent: str) -> bool:
    return bool(GECKO.search(user_agent)) and not LIKE_GECKO.search(user_agent)


def is_webkit(user_agent: str) -> bool:
    return bool(WEBKIT.search(user_agent)) and not CHROME_WORD.search(user_agent)


# Checked in order - first match wins
ENGINE_RULES: List[Tuple[RenderingEngine, Callable[[str], bool]]] = [
    (RenderingEngine.PRESTO, lambda ua: bool(PRESTO.search(ua))),
    (RenderingEngine.EDGEHTML, is_edgehtml),
    (RenderingEngine.BLINK, is_blink),
    (RenderingEngine.TRIDENT, lambda ua: bool(TRIDENT.search(ua))),
    (RenderingEngine.GECKO, is_gecko),
    (RenderingEngine.WEBKIT, is_webkit),
]


def determine_engine(user_agent: str) -> RenderingEngine:
    for engine, matches in ENGINE_RULES:
        if matches(user_agent):
            return engine

    return RenderingEngine.UNKNOWN


def detect_engine(user_agent: str) -> EngineResult:
    return EngineResult(engine=determine_engine(user_agent))
