from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..domain.models import Guide, GuideCategory
from ..data.sample_data import INSTRUCTION_GUIDES


@dataclass
class GuideFilter:
    """
    Criteria for listing guides. None on any field means "All".

    Attributes:
        search: Case-insensitive text matched against title, summary and category.
    """
    search: Optional[str] = None
    category: Optional[GuideCategory] = None
    brand: Optional[str] = None
    model: Optional[str] = None

    def matches(self, guide: Guide) -> bool:
        if self.search:
            term = self.search.lower()
            haystacks = (guide.title, guide.summary, guide.category)
            if not any(term in text.lower() for text in haystacks):
                return False
        if self.category and guide.category != self.category:
            return False
        if self.brand and guide.machine_brand != self.brand:
            return False
        if self.model and guide.machine_model != self.model:
            return False
        return True


# The Interface
class GuideRepository(ABC):
    """
    The Guide Catalog. Read-only from the troubleshooting core's point of view.
    """

    @abstractmethod
    def lookup_guide(self, guide_id: str) -> Optional[Guide]:
        """Returns the guide, or None if absent."""
        pass

    @abstractmethod
    def list_guides(self, guide_filter: Optional[GuideFilter] = None) -> List[Guide]:
        """Returns guides in catalog order, optionally filtered."""
        pass

    def find_guide(
        self, brand: str, model: str, category: GuideCategory
    ) -> Optional[Guide]:
        """First guide (catalog order) for exactly this brand, model and category."""
        matches = self.list_guides(
            GuideFilter(category=category, brand=brand, model=model)
        )
        return matches[0] if matches else None

    def has_guide(self, guide_id: str) -> bool:
        return self.lookup_guide(guide_id) is not None


class StaticGuideRepository(GuideRepository):
    """
    Get guides from a hardcoded list in memory.
    """

    def __init__(self, guides: Optional[Iterable[Guide]] = None):
        guides = INSTRUCTION_GUIDES if guides is None else guides
        # Index for O(1) lookup; dicts keep catalog order for listing
        self._index: Dict[str, Guide] = {guide.id: guide for guide in guides}

    def lookup_guide(self, guide_id: str) -> Optional[Guide]:
        return self._index.get(guide_id)

    def list_guides(self, guide_filter: Optional[GuideFilter] = None) -> List[Guide]:
        guides = list(self._index.values())
        if guide_filter is None:
            return guides
        return [guide for guide in guides if guide_filter.matches(guide)]
