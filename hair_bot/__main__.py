import asyncio
import logging
from aiogram import Bot, Dispatcher

from hair_bot.core.config import load_config
from hair_bot.database.engine import db
from hair_bot.middleware.db import DbSessionMiddleware
from hair_bot.handlers.commands import router as commands_router
from hair_bot.handlers.hairstyle import router as hairstyle_router
from hair_integration.generation import AssetEncoder, HairstyleClient, HairstyleGenerator, SessionRegistry

config = load_config()

# Logging setup
logging.basicConfig(
    level=logging.DEBUG if config.debug else getattr(logging, config.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def on_startup(dispatcher: Dispatcher):
    """Bot startup actions."""
    logger.info("Initializing database...")
    await db.init_db()
    logger.info("Database initialized.")


bot = Bot(token=config.bot_token)
dp = Dispatcher()

dp.startup.register(on_startup)

# DbSessionMiddleware provides the session and the access code store to handlers
dp.message.middleware(DbSessionMiddleware(session_pool=db.session_maker))
dp.callback_query.middleware(DbSessionMiddleware(session_pool=db.session_maker))

dp.include_router(commands_router)
dp.include_router(hairstyle_router)


async def main():
    client = HairstyleClient(
        base_url=config.generation.proxy_base_url,
        endpoint=config.generation.proxy_endpoint,
        timeout=config.generation.request_timeout,
    )
    encoder = AssetEncoder(config.generation.style_assets_dir, http_client=client.client)
    generator = HairstyleGenerator(client, encoder)

    logger.info("Bot started...")
    try:
        await dp.start_polling(bot, generator=generator, sessions=SessionRegistry())
    finally:
        await client.close()
        await db.close()
        await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
