import logging

import uvicorn
from fastapi import FastAPI

from autoradar.api.cars import router as cars_router
from autoradar.config import API_HOST, API_PORT, LOG_LEVEL


logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title="Autoradar API")

app.include_router(cars_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


def run() -> None:
    logger.info("Autoradar API starting on %s:%s", API_HOST, API_PORT)
    uvicorn.run(app, host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
