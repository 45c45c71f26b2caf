# Look up the newest cosmetic by ID using a shared httpx client.

import asyncio

import httpx

from fortnite_api import FortniteAPIClient


async def main() -> None:
    async with httpx.AsyncClient(timeout=10.0) as http_client:
        client = FortniteAPIClient(http_client=http_client)

        new = await client.get_cosmetics_new_v2()
        print(f"Build {new.build}: {len(new.items)} new cosmetics")
        if not new.items:
            return

        cosmetic = await client.get_cosmetic_by_id_v2(new.items[0].id, language="en")
        print(f"{cosmetic.id}: {cosmetic.name} ({cosmetic.rarity.display_value})")


if __name__ == "__main__":
    asyncio.run(main())
