# Fetch the news feeds of every game mode.

import asyncio
import logging

from fortnite_api import FortniteAPIClient


async def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    async with FortniteAPIClient() as client:
        news = await client.get_news_v2()
        for mode, feed in (("br", news.br), ("stw", news.stw), ("creative", news.creative)):
            if feed is None:
                print(f"{mode}: no news")
                continue
            titles = [motd.title for motd in feed.motds or []]
            print(f"{mode}: {len(titles)} motds {titles}")


if __name__ == "__main__":
    asyncio.run(main())
