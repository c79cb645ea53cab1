import asyncio
from easywine.shared.config.settings import settings

LLM_SEMAPHORE = asyncio.Semaphore(settings.LLM_MAX_CONCURRENCY)
