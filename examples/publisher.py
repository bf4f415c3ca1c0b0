"""Publish a few messages through QStash.

Requires QSTASH_TOKEN and RECEIVER_URL in the environment.
"""

import asyncio
import os
import uuid

import structlog

from qstash_client import BatchEntry, PublishOptions, QStashClient, configure_logging

RECEIVER_URL = os.environ.get("RECEIVER_URL", "")

logger = structlog.get_logger("publisher")


async def main():
    if not RECEIVER_URL:
        raise SystemExit("RECEIVER_URL required")

    configure_logging()

    async with QStashClient() as client:
        job_id = str(uuid.uuid4())

        # Dedup by job_id to prevent double-processing
        result = await client.messages.publish_json(
            RECEIVER_URL,
            {"job_id": job_id, "content": "Hello, this is a test."},
            options=PublishOptions(retries=3, delay=10, deduplication_id=job_id),
        )
        logger.info("published", result=result)

        results = await client.messages.batch(
            [
                BatchEntry(destination=RECEIVER_URL, body=f'{{"n": {n}}}', headers={"Content-Type": "application/json"})
                for n in range(3)
            ]
        )
        logger.info("batch_published", count=len(results))


if __name__ == "__main__":
    asyncio.run(main())
