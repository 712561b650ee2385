"""
Auth database configuration.
Stores user accounts and the id sequence used to number them.
"""

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"
    COUNTERS = "counters"
    METADATA = "_metadata"

    # The unique username index is what makes registration race-free
    INDEXES = {
        "users": [
            {"keys": [("username", 1)], "unique": True},
        ],
    }


# Sequence names stored in the counters collection
USER_ID_SEQUENCE = "user_id"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "User credentials and contact details",
    "collections": [Collections.USERS, Collections.COUNTERS, Collections.METADATA],
    "access_level": "restricted",
}
