"""
Numeric id sequences backed by a counters collection.
"""
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument


async def next_sequence(counters: AsyncIOMotorCollection, name: str) -> int:
    """
    Atomically increment and return the named counter.

    The counter document is created on first use, so the first value is 1.
    Ids taken by a failed insert are not reused.
    """
    doc = await counters.find_one_and_update(
        {"_id": name},
        {"$inc": {"seq": 1}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return doc["seq"]
