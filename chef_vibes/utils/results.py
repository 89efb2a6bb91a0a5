"""Shape pymongo write results the way the API has always returned them."""


def insert_result(result):
    return {
        'acknowledged': result.acknowledged,
        'insertedId': result.inserted_id,
    }


def update_result(result):
    return {
        'acknowledged': result.acknowledged,
        'matchedCount': result.matched_count,
        'modifiedCount': result.modified_count,
        'upsertedCount': 1 if result.upserted_id is not None else 0,
        'upsertedId': result.upserted_id,
    }


def delete_result(result):
    return {
        'acknowledged': result.acknowledged,
        'deletedCount': result.deleted_count,
    }
