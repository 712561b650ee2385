"""
Registry of the databases the diary API owns.

``registry.sync_registry`` writes one document per manifest into
``db_registry`` and a ``_metadata`` document into each database.
"""

DB_NAME = "system_db"

# Bumped when the shape of registry documents changes
REGISTRY_SCHEMA_VERSION = "1.0"

# _id of the per-database metadata document
METADATA_DOC_ID = "db_metadata"


class Collections:
    DB_REGISTRY = "db_registry"
    METADATA = "_metadata"


DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Registry of diary API databases",
    "collections": [Collections.DB_REGISTRY, Collections.METADATA],
    "access_level": "system",
}
