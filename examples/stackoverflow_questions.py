#!/usr/bin/env python3
"""
Stack Overflow example
Fetches the questions page and prints the top 5 questions in page order
"""

import asyncio
import sys
import os

import aiohttp

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from foliage import Class, Document, LogManager

URL = 'https://stackoverflow.com/questions'


async def fetch(url: str) -> str:
    headers = {'User-Agent': 'foliage-example/0.1'}
    timeout = aiohttp.ClientTimeout(total=30)
    async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
        async with session.get(url) as response:
            response.raise_for_status()
            return await response.text()


async def main():
    """Print title, votes, answers and tags of the top questions"""
    log_manager = LogManager(log_level="INFO")
    print(f"🌐 Fetching {URL}")
    document = Document.from_html(await fetch(URL))

    questions = document.find(Class("s-post-summary"))[:5]
    for position, question in enumerate(questions, start=1):
        link = question.find(Class("s-link")).first()
        stats = question.find(Class("s-post-summary--stats-item-number")).texts()
        tags = question.find(Class("post-tag")).texts()

        votes = stats[0] if stats else '?'
        answers = stats[1] if len(stats) > 1 else '?'
        print(f" {position}. {link.text().strip() if link else '(no title)'}")
        print(f"    votes: {votes}, answers: {answers}")
        print(f"    tags: {', '.join(tags)}")

    log_manager.log_query_event("questions", url=URL, found=len(questions))
    if not questions:
        print("No questions found; the page layout may have changed.")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\n🛑 Stopped by user")
    except aiohttp.ClientError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
