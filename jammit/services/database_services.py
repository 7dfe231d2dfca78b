"""
Jammit.database_services
-------------------------
This module provides database interfaces and custom DB utilities

Key Features:
    - Initializes the database connection
    - Links the database to the internal Beanie Documents

Dependencies:
    - motor
    - beanie
"""
# Basics
import os
# Database utilities
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
# Models
from jammit.models.gathering_models import GatheringModel
from jammit.models.review_models import ReviewModel
from jammit.models.user_models import UserModel
# Services
from jammit.services.config_services import cfg
from jammit.services.logging_services import logger_service as logger

DOCUMENT_MODELS = [UserModel, GatheringModel, ReviewModel]

# Establish a mongodb connection dict with the values from the config file
mongo_conn = {
    "host": os.getenv("DOCKER_DB_HOST",
                      cfg.get('MONGODB', 'DB_HOST', fallback='localhost')),
    "port": cfg.get('MONGODB', 'PORT', fallback='27017'),
    "user": cfg.get('MONGODB', 'DB_USER', fallback='jammit'),
    "password": cfg.get('MONGODB', 'DB_PASS', fallback='jammit'),
    "auth_db": cfg.get('MONGODB', 'AUTH_DB', fallback='admin'),
    "name": cfg.get('MONGODB', 'DB_NAME', fallback='Jammit')
}


async def setup(database=None):
    """Initialize the database"""
    if database is None:
        database = client[mongo_conn['name']]
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)
    logger.info(f"Database '{database.name}' initialized.")
    logger.new_section()


URI = (
    f"mongodb://{mongo_conn['user']}:{mongo_conn['password']}@"
    f"{mongo_conn['host']}:{mongo_conn['port']}/?authSource={mongo_conn['auth_db']}")
client = AsyncIOMotorClient(URI)
