"""MongoDB index management utilities.

Shared index creation with conflict resolution, used by each MongoXxxRepository.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)

# IndexOptionsConflict, IndexKeySpecsConflict
_INDEX_CONFLICT_CODES = {85, 86}


def _is_index_conflict(error: PyMongoError) -> bool:
    if getattr(error, 'code', None) in _INDEX_CONFLICT_CODES:
        return True
    message = str(error)
    return "already exists" in message or "Conflict" in message or "same name" in message


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create index with conflict resolution.

    Handles three conflict scenarios:
    - Same name but different key spec (schema migration)
    - Same key spec but different name (rename)
    - Same name and keys but a different `unique` option (e.g. an email
      index created before uniqueness was enforced)

    In each case, drops the conflicting index and recreates with the desired spec.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if not _is_index_conflict(e):
            raise
        return _resolve_conflict(collection, keys, name, **kwargs)


def _resolve_conflict(collection, keys: list, name: str, **kwargs) -> bool:
    """Drop conflicting index and recreate."""
    keys_dict = dict(keys)
    want_unique = bool(kwargs.get('unique', False))

    for idx_name, idx_info in collection.index_information().items():
        if idx_name == '_id_':
            continue

        idx_keys = dict(idx_info.get('key', []))
        same_name = idx_name == name
        same_keys = idx_keys == keys_dict
        same_unique = bool(idx_info.get('unique', False)) == want_unique

        if (same_name and not (same_keys and same_unique)) or (same_keys and not same_name):
            logger.warning(f"Dropping conflicting index: {idx_name}")
            collection.drop_index(idx_name)
            collection.create_index(keys, name=name, **kwargs)
            logger.info(f"Recreated index: {name}")
            return True

    logger.error(f"Failed to resolve index conflict for {name}")
    return False


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
    ]
    return all(results)
