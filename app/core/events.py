from contextlib import asynccontextmanager
from fastapi import FastAPI
from ..codewars import codewars_client
from ..logger import get_logger
import asyncio

logger = get_logger()

async def startup_event():
    """Open the Codewars HTTP client"""
    try:
        await codewars_client.initialize()
        logger.info("Codewars client ready")
    except Exception as e:
        logger.error(f"Failed to initialize Codewars client: {e}")
        raise

async def shutdown_event():
    """Close the Codewars HTTP client"""
    try:
        # Set a timeout for the shutdown process
        async with asyncio.timeout(5.0):
            await codewars_client.close()
            logger.info("Codewars client closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, dropping HTTP client")
        codewars_client.client = None
        codewars_client._initialized = False
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")

@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup_event()
    try:
        yield
    finally:
        await shutdown_event()
