import logging

import uvicorn

from app import create_app
from config import Settings

logging.basicConfig(level=Settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = create_app(Settings)

if __name__ == "__main__":
    uvicorn.run("main:app", host=Settings.APP_HOST, port=Settings.APP_PORT)
