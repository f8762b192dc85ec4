# main.py

import uvicorn

from app.core.config import get_settings
from app.core.logger import setup_logging
from app.main import create_app

settings = get_settings()
setup_logging(settings.LOG_LEVEL)

app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
