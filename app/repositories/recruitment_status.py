import logging

from pymongo import ReturnDocument

from app.database import RECRUITMENT_STATUS_COLLECTION
from app.models.recruitment_status import (
    DEFAULT_IS_RECRUITMENT_OPEN,
    RECRUITMENT_STATUS_ID,
    STATUS_FIELD,
    RecruitmentStatus,
)

logger = logging.getLogger(__name__)

MAX_TOGGLE_ATTEMPTS = 5


class RecruitmentStatusRepository:
    """The singleton open/closed flag for the recruitment window."""

    def __init__(self, db):
        self.collection = db[RECRUITMENT_STATUS_COLLECTION]

    async def _ensure(self) -> dict:
        # The unique _id index makes concurrent first-use upserts insert one document
        await self.collection.update_one(
            {"_id": RECRUITMENT_STATUS_ID},
            {"$setOnInsert": {STATUS_FIELD: DEFAULT_IS_RECRUITMENT_OPEN}},
            upsert=True,
        )
        return await self.collection.find_one({"_id": RECRUITMENT_STATUS_ID})

    async def get(self) -> bool:
        document = await self._ensure()
        return RecruitmentStatus.model_validate(document).is_recruitment_open

    async def toggle(self) -> bool:
        """Flip the flag with a compare-and-set so concurrent toggles serialize."""
        for _ in range(MAX_TOGGLE_ATTEMPTS):
            document = await self._ensure()
            current = RecruitmentStatus.model_validate(document).is_recruitment_open

            updated = await self.collection.find_one_and_update(
                {"_id": document["_id"], STATUS_FIELD: document.get(STATUS_FIELD)},
                {"$set": {STATUS_FIELD: not current}},
                return_document=ReturnDocument.AFTER,
            )
            if updated is not None:
                logger.info("Recruitment is now %s", "open" if updated[STATUS_FIELD] else "closed")
                return updated[STATUS_FIELD]

            logger.debug("Recruitment status changed concurrently; retrying toggle")

        raise RuntimeError("Could not toggle recruitment status after %d attempts" % MAX_TOGGLE_ATTEMPTS)
