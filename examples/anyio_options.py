"""
Async combinators under AnyIO: the same code runs on asyncio or trio.

This example requires `anyio` to be installed.

Run: python examples/anyio_options.py
"""
import anyio

from optionpy import Option, from_nullish

USERS = {1: "ada", 2: "grace"}


async def fetch_user(uid: int):
    await anyio.sleep(0.01)
    return USERS.get(uid)


async def main():
    for uid in (1, 3):
        name = (await Option.from_(uid).map_async(fetch_user)).and_then(from_nullish)
        greeting = await name.or_else_async(lambda: Option.from_("stranger"))
        print(f"user {uid} =>", greeting.map(str.title).unwrap())


if __name__ == "__main__":
    anyio.run(main)
