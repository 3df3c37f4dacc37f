"""
Basic utilkit usage example.

This example demonstrates the everyday helpers:
- Deep cloning with shared references and cycles
- Debounced and throttled callbacks
- Date boundaries and formatting
- Session storage with JSON values
"""

import asyncio
import time
from datetime import timezone

from utilkit import (
    Kind,
    Symbol,
    animal_of_year,
    debounce,
    deep_clone,
    first_day_of_month,
    format_time,
    last_day_of_week,
    path_to_camel,
    throttle,
    type_of,
    use_session_storage,
)


def clone_example():
    """Demonstrate deep cloning"""
    print("Deep clone")
    print("=" * 30)

    shared = {"retries": 3}
    settings = {"primary": shared, "fallback": shared, "tag": Symbol("settings")}
    settings["self"] = settings

    copy = deep_clone(settings)
    print(f"✓ Shared branch kept shared: {copy['primary'] is copy['fallback']}")
    print(f"✓ Cycle reproduced: {copy['self'] is copy}")
    print(f"✓ Original untouched after edit: {shared['retries'] == 3}")
    print(f"✓ Kind of clone: {type_of(copy).value} ({type_of(copy) is Kind.MAP})")


def decorator_example():
    """Demonstrate debounce and throttle"""
    print("\nDebounce / throttle")
    print("=" * 30)

    saved = []

    @debounce(0.1)
    def save(text):
        saved.append(text)

    for text in ("h", "he", "hello"):
        save(text)
    time.sleep(0.3)
    print(f"✓ Debounced saves: {saved}")

    @throttle(0.1)
    def report(value):
        return value

    results = [report(i) for i in range(3)]
    print(f"✓ Throttled results: {results}")


async def async_decorator_example():
    """Debounce a coroutine on the running loop"""
    fetched = []

    @debounce(0.1)
    async def fetch(query):
        fetched.append(query)

    for query in ("u", "ut", "util"):
        await fetch(query)
    await asyncio.sleep(0.3)
    print(f"✓ Debounced coroutine calls: {fetched}")


def date_example():
    """Demonstrate calendar helpers"""
    print("\nDates")
    print("=" * 30)

    print(f"✓ Epoch: {format_time(0, 'yyyy-MM-dd hh:mm:ss', tz=timezone.utc)}")
    print(f"✓ First day of this month: {first_day_of_month()}")
    print(f"✓ Last day of this week: {last_day_of_week()}")
    print(f"✓ Zodiac animal for 2024: {animal_of_year(2024, lang='en')}")
    print(f"✓ Route name: {path_to_camel('/user/list')}")


def storage_example():
    """Demonstrate session storage"""
    print("\nStorage")
    print("=" * 30)

    storage = use_session_storage()
    storage.set("profile", {"name": "Ann", "roles": ["admin"]})
    print(f"✓ Stored text: {storage.get_item('profile')}")
    print(f"✓ Decoded value: {storage.get('profile')}")
    storage.remove("profile")
    print(f"✓ After remove: {storage.get('profile', 'gone')}")


if __name__ == "__main__":
    clone_example()
    decorator_example()
    asyncio.run(async_decorator_example())
    date_example()
    storage_example()
