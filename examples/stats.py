# Fetch player stats. Requires FORTNITE_API_KEY in the environment.

import asyncio
import os
import sys

from fortnite_api import (
    ClientConfig,
    FortniteAPIClient,
    FortniteAPIClientError,
    StatsAccountType,
    StatsTimeWindow,
)


async def main() -> int:
    api_key = os.environ.get("FORTNITE_API_KEY")
    if not api_key:
        print("Please set the FORTNITE_API_KEY environment variable")
        return 1

    name = sys.argv[1] if len(sys.argv) > 1 else "Test"
    async with FortniteAPIClient(ClientConfig(api_key=api_key)) as client:
        try:
            stats = await client.get_stats_v2(
                name,
                account_type=StatsAccountType.EPIC,
                time_window=StatsTimeWindow.SEASON,
            )
        except FortniteAPIClientError as e:
            print(f"Request failed: {e}")
            return 1

    overall = stats.stats.all.overall if stats.stats.all else None
    print(f"{stats.account.name} (battle pass level {stats.battle_pass.level})")
    if overall is not None:
        print(f"wins={overall.wins} kills={overall.kills} kd={overall.kd:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
