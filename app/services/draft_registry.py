"""In-memory registry of open authoring drafts."""

from collections import OrderedDict
from typing import TypeVar
from uuid import UUID

from app.core.app_exceptions import not_found
from app.core.config import settings
from app.core.logging import get_logger
from app.services.exam_drafts import CSVExamDraft, ManualExamDraft

logger = get_logger(__name__)

Draft = CSVExamDraft | ManualExamDraft
DraftT = TypeVar("DraftT", CSVExamDraft, ManualExamDraft)


class DraftRegistry:
    """Drafts keyed by id, owned by one application instance.

    At most ``max_drafts`` are held; opening one more evicts the draft that
    was least recently used. Nothing is written anywhere else.
    """

    def __init__(self, max_drafts: int | None = None) -> None:
        self.max_drafts = max_drafts or settings.MAX_OPEN_DRAFTS
        self._drafts: OrderedDict[UUID, Draft] = OrderedDict()

    def __len__(self) -> int:
        return len(self._drafts)

    def create_csv(self) -> CSVExamDraft:
        return self._add(CSVExamDraft())

    def create_manual(self, duration: int | None = None) -> ManualExamDraft:
        return self._add(ManualExamDraft(duration=duration))

    def get(self, draft_id: UUID, draft_type: type[DraftT]) -> DraftT:
        """
        Look up a draft of the expected type and mark it as recently used.

        Raises:
            AppError: DRAFT_NOT_FOUND if missing, evicted or of another type
        """
        draft = self._drafts.get(draft_id)
        if not isinstance(draft, draft_type):
            raise not_found("DRAFT_NOT_FOUND", "Draft not found", {"draft_id": str(draft_id)})
        self._drafts.move_to_end(draft_id)
        return draft

    def discard(self, draft_id: UUID, draft_type: type[DraftT]) -> None:
        draft = self.get(draft_id, draft_type)
        del self._drafts[draft.id]
        logger.info("Draft discarded", extra={"draft_id": str(draft_id), "source": draft.kind})

    def _add(self, draft: DraftT) -> DraftT:
        while len(self._drafts) >= self.max_drafts:
            evicted_id, evicted = self._drafts.popitem(last=False)
            logger.warning(
                "Draft evicted",
                extra={"draft_id": str(evicted_id), "source": evicted.kind, "limit": self.max_drafts},
            )
        self._drafts[draft.id] = draft
        logger.info("Draft created", extra={"draft_id": str(draft.id), "source": draft.kind})
        return draft
