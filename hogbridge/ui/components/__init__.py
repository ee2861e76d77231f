from __future__ import annotations

from ui.components.page_header import PageHeader
from ui.components.section_card import SectionCard

__all__ = ["PageHeader", "SectionCard"]
