"""
Human-readable metadata for the integer codes found in the
"Keywords SERP Features" and "Intent" columns.

Presentation only: decoding never consults these tables, so unknown codes
are valid data and get a generic label.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List


@dataclass(frozen=True)
class TagInfo:
    code: int
    name: str
    tooltip: str
    paid: bool = False
    zero_click: bool = False


def _serp(code: int, name: str, tooltip: str, *, paid: bool = False, zero_click: bool = False) -> TagInfo:
    return TagInfo(code=code, name=name, tooltip=tooltip, paid=paid, zero_click=zero_click)


SERP_FEATURES: Dict[int, TagInfo] = {
    t.code: t
    for t in [
        _serp(0, "Instant answer", "Direct answer box shown above organic results", zero_click=True),
        _serp(1, "Knowledge panel", "Entity panel with facts from the Knowledge Graph", zero_click=True),
        _serp(2, "Carousel", "Horizontally scrollable list of entities"),
        _serp(3, "Local pack", "Map with nearby business listings"),
        _serp(4, "Top stories", "News results block"),
        _serp(5, "Image pack", "Row of image results"),
        _serp(6, "Sitelinks", "Extra links under the top result"),
        _serp(7, "Reviews", "Star ratings shown in a result snippet"),
        _serp(8, "Tweet", "Embedded posts from X / Twitter"),
        _serp(9, "Video", "Video thumbnail in a result"),
        _serp(10, "Featured video", "Large video shown above organic results"),
        _serp(11, "Featured snippet", "Extracted answer with source link", zero_click=True),
        _serp(12, "AMP", "Accelerated Mobile Pages result"),
        _serp(13, "Image", "Single image result"),
        _serp(14, "Ads top", "Paid ads above organic results", paid=True),
        _serp(15, "Ads bottom", "Paid ads below organic results", paid=True),
        _serp(16, "Shopping ads", "Product listing ads", paid=True),
        _serp(17, "Hotels pack", "Hotel prices and availability"),
        _serp(18, "Jobs search", "Job listings block"),
        _serp(19, "Featured images", "Images attached to a featured result"),
        _serp(20, "Video carousel", "Scrollable list of videos"),
        _serp(21, "People also ask", "Expandable related questions"),
        _serp(22, "FAQ", "FAQ rich result in a snippet"),
        _serp(23, "Flights", "Flight search widget", zero_click=True),
        _serp(24, "Find results on", "Links to third-party listing sites"),
        _serp(25, "Recipes", "Recipe cards"),
        _serp(26, "Related topics", "Related topics block"),
        _serp(27, "Twitter carousel", "Scrollable list of posts from X / Twitter"),
        _serp(28, "Indented", "Second result from the same domain, indented"),
        _serp(29, "News panel", "Side panel with news about the query"),
    ]
}

INTENTS: Dict[int, TagInfo] = {
    t.code: t
    for t in [
        TagInfo(0, "Commercial", "The user wants to investigate brands or services"),
        TagInfo(1, "Informational", "The user wants to find an answer to a specific question"),
        TagInfo(2, "Navigational", "The user wants to find a specific page or site"),
        TagInfo(3, "Transactional", "The user wants to complete an action (conversion)"),
    ]
}


def serp_feature_info(code: int) -> TagInfo:
    info = SERP_FEATURES.get(code)
    if info is None:
        return TagInfo(code, f"Unknown feature (code {code})", "No description available for this SERP feature")
    return info


def intent_info(code: int) -> TagInfo:
    info = INTENTS.get(code)
    if info is None:
        return TagInfo(code, f"Unknown intent (code {code})", "No description available for this intent")
    return info


def tag_labels(codes: Iterable[int], *, intent: bool = False) -> List[str]:
    lookup = intent_info if intent else serp_feature_info
    return [lookup(c).name for c in codes]
