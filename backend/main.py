import logging

import uvicorn

from portfolio_backend import create_app
from portfolio_backend.config import Settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

settings = Settings.from_env()
app = create_app(settings)


if __name__ == "__main__":
    logger.info(f"Server is running and serving the portfolio at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
