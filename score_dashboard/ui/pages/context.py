from __future__ import annotations

from dataclasses import dataclass

from score_dashboard.config import Settings


@dataclass
class PageContext:
    settings: Settings
    force_refresh: bool = False
    view_changed: bool = False
