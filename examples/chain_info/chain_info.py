#!/usr/bin/env python3
"""
Example eCash RPC consumer.

This example demonstrates how to query a node with the Python client:
chain state, the tip block, and avalanche finality of that block.
"""

import asyncio
import logging
import os

from ecashrpc import Config, ECashClient, RPCError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Main consumer application."""
    config = Config(
        host=os.getenv("ECASH_RPC_HOST", "http://127.0.0.1"),
        username=os.getenv("ECASH_RPC_USER", "user"),
        password=os.getenv("ECASH_RPC_PASSWORD", "password"),
        port=int(os.getenv("ECASH_RPC_PORT", "8332")),
    )

    async with ECashClient(config) as client:
        # Independent calls can run concurrently
        chain_info, height = await asyncio.gather(
            client.get_blockchain_info(),
            client.get_block_count(),
        )
        logger.info(f"Chain: {chain_info['chain']}, height: {height}")

        tip_hash = await client.get_block_hash(height)
        block = await client.get_block(tip_hash)
        logger.info(f"Tip {tip_hash} has {len(block['tx'])} transactions")

        try:
            final = await client.is_final_block(tip_hash)
            logger.info(f"Tip finalized by avalanche: {final}")
        except RPCError as e:
            logger.error(f"Finality check failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
