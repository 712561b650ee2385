"""
Diary database configuration.
Stores diary entries, each owned by exactly one user.
"""

DB_NAME = "diary_db"


class Collections:
    """Collection names in diary_db."""
    ENTRIES = "entries"
    COUNTERS = "counters"
    METADATA = "_metadata"

    INDEXES = {
        "entries": [
            {"keys": [("user_id", 1)]},
            {"keys": [("user_id", 1), ("date", -1)]},
        ],
    }


ENTRY_ID_SEQUENCE = "entry_id"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Personal diary entries",
    "collections": [Collections.ENTRIES, Collections.COUNTERS, Collections.METADATA],
    "access_level": "standard",
}
