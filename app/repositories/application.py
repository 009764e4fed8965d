import logging
from datetime import datetime
from typing import Any, List, Mapping

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from app.database import APPLICATIONS_COLLECTION
from app.errors import ApplicationNotFound
from app.models.application import Application, to_document
from app.schemas.application import ApplicationCreate, ApplicationUpdate, validate_application_fields

logger = logging.getLogger(__name__)


class ApplicationRepository:
    """CRUD over the candidate application collection."""

    def __init__(self, db):
        self.collection = db[APPLICATIONS_COLLECTION]

    @staticmethod
    def _object_id(application_id: str) -> ObjectId:
        if not ObjectId.is_valid(application_id):
            raise ApplicationNotFound(application_id)
        return ObjectId(application_id)

    async def list(self) -> List[Application]:
        documents = await self.collection.find({}).sort("submissionDate", DESCENDING).to_list(length=None)
        return [Application.from_document(doc) for doc in documents]

    async def get(self, application_id: str) -> Application:
        document = await self.collection.find_one({"_id": self._object_id(application_id)})
        if not document:
            raise ApplicationNotFound(application_id)
        return Application.from_document(document)

    async def create(self, fields: Mapping[str, Any]) -> Application:
        application = validate_application_fields(fields, ApplicationCreate)
        document = to_document(application, submission_date=datetime.utcnow())

        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        logger.info("Stored application %s for %s", result.inserted_id, application.nim)
        return Application.from_document(document)

    async def update(self, application_id: str, fields: Mapping[str, Any]) -> Application:
        object_id = self._object_id(application_id)
        application = validate_application_fields(fields, ApplicationUpdate)

        document = await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": to_document(application)},
            return_document=ReturnDocument.AFTER,
        )
        if not document:
            raise ApplicationNotFound(application_id)
        logger.info("Updated application %s", application_id)
        return Application.from_document(document)

    async def delete(self, application_id: str) -> None:
        result = await self.collection.delete_one({"_id": self._object_id(application_id)})
        if result.deleted_count == 0:
            raise ApplicationNotFound(application_id)
        logger.info("Deleted application %s", application_id)
