import logging

from pymongo.errors import DuplicateKeyError

from ..extensions import store
from ..utils import delete_result, parse_object_id

logger = logging.getLogger(__name__)

ADDED = 'added'
ALREADY_ADDED = 'Already added'


class KitchenService:
    """Service class for the saved-recipe ("kitchen") collection"""

    @staticmethod
    def list_entries(email):
        if not email:
            return []
        return list(store.kitchen.find({'email': email}))

    @staticmethod
    def add_entry(entry):
        """
        Save a recipe to a user's kitchen unless it is already there.

        The insert is a single upsert keyed on (recipieId, email), backed by
        the unique index created at startup, so concurrent calls cannot
        produce duplicates.

        Args:
            entry (KitchenEntryCreate): validated entry from the request body.

        Returns:
            dict: ``acknowledged``, ``insertedId`` (the new or existing entry id)
            and ``status`` ("added" or "Already added").
        """
        document = entry.to_document()
        key = {'recipieId': document['recipieId'], 'email': document['email']}

        try:
            result = store.kitchen.update_one(key, {'$setOnInsert': document}, upsert=True)
        except DuplicateKeyError:
            # Lost the race to a concurrent insert of the same pair
            logger.info(f"Concurrent add-to-kitchen for {key}; keeping existing entry")
            result = None

        if result is not None and result.upserted_id is not None:
            return {'acknowledged': True, 'insertedId': result.upserted_id, 'status': ADDED}

        existing = store.kitchen.find_one(key, {'_id': 1})
        return {
            'acknowledged': True,
            'insertedId': existing['_id'] if existing else None,
            'status': ALREADY_ADDED,
        }

    @staticmethod
    def delete_entry(entry_id):
        result = store.kitchen.delete_one({'_id': parse_object_id(entry_id)})
        return delete_result(result)
