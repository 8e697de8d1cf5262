import logging

import uvicorn
from fastapi import FastAPI

from tictactoe.state import Session

from . import config
from .api import router as api_router
from .page import router as page_router


logger = logging.getLogger(__name__)


def create_app(session=None):
    app = FastAPI(title="Tic-Tac-Toe")
    app.state.session = session if session is not None else Session(theme=config.DEFAULT_THEME)
    app.include_router(page_router)
    app.include_router(api_router)
    return app


app = create_app()


def run():
    logging.basicConfig(level=config.LOG_LEVEL)
    logger.info("Serving Tic-Tac-Toe on http://%s:%d", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
