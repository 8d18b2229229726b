"""
Daily Word Store

Key-value persistence of the word chosen for each date. MongoDB is used when
a connection string is configured; otherwise words live in process memory
and are lost on restart.
"""

from typing import Dict, Iterable, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..utils.game_logger import game_logger


class InMemoryWordStore:
    """Dictionary-backed store used when no database is configured."""

    persistent = False

    def __init__(self):
        self.words: Dict[str, str] = {}

    def get(self, date_key: str) -> Optional[str]:
        return self.words.get(date_key)

    def set(self, date_key: str, word: str) -> None:
        self.words[date_key] = word

    def get_many(self, date_keys: Iterable[str]) -> Dict[str, str]:
        return {key: self.words[key] for key in date_keys if key in self.words}


class MongoWordStore:
    """
    MongoDB-backed store: one document per date in the daily_words collection.

    Writes for the same date replace each other (last write wins).
    """

    persistent = True

    def __init__(self, mongo_uri: str, db_name: str = "punjabi_wordle"):
        """
        Initialize the store with a MongoDB connection.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the daily_words collection
        """
        self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.db = self.client[db_name]
        self.words_collection = self.db.daily_words

        # Test connection
        try:
            self.client.admin.command('ping')
            game_logger.logger.info("Connected to MongoDB word store")
        except Exception as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise

        self.words_collection.create_index("date", unique=True)

    def get(self, date_key: str) -> Optional[str]:
        document = self.words_collection.find_one({"date": date_key})
        if not document:
            return None
        return document.get("word")

    def set(self, date_key: str, word: str) -> None:
        self.words_collection.replace_one(
            {"date": date_key},
            {"date": date_key, "word": word},
            upsert=True
        )

    def get_many(self, date_keys: Iterable[str]) -> Dict[str, str]:
        cursor = self.words_collection.find({"date": {"$in": list(date_keys)}})
        return {document["date"]: document["word"] for document in cursor}


def create_word_store(mongo_uri: Optional[str], db_name: str = "punjabi_wordle"):
    """Return a MongoWordStore when a URI is configured, else an in-memory store."""
    if mongo_uri:
        return MongoWordStore(mongo_uri, db_name)
    game_logger.logger.warning("MONGO_URI not configured - daily words will not be persisted")
    return InMemoryWordStore()
