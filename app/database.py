import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorGridFSBucket

from app.config import get_database_name, get_mongo_uri
from app.errors import ConfigurationError

logger = logging.getLogger(__name__)

APPLICATIONS_COLLECTION = "Praetorian"
RECRUITMENT_STATUS_COLLECTION = "recruitmentstatuses"
RESUME_BUCKET = "resumes"

client = None
db = None
fs_bucket = None


async def connect_to_mongo():
    global client, db, fs_bucket

    mongo_uri = get_mongo_uri()
    if not mongo_uri:
        raise ConfigurationError("MONGO_URI environment variable is not set! Check your .env file.")

    client = AsyncIOMotorClient(mongo_uri)
    db = client[get_database_name()]
    fs_bucket = AsyncIOMotorGridFSBucket(db, bucket_name=RESUME_BUCKET)
    await client.admin.command("ping")

    if "mongodb+srv" in mongo_uri:
        logger.info("Connected to MongoDB Atlas (database %s)", get_database_name())
    else:
        logger.info("Connected to local MongoDB (database %s)", get_database_name())


async def close_mongo_connection():
    if client:
        client.close()
        logger.info("MongoDB connection closed")


def get_fs_bucket():
    return fs_bucket


def get_db():
    return db
