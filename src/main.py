import logging

from fastapi import FastAPI

import settings
from badminton.router import router as badminton_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Badminton Queue")
app.include_router(badminton_router)


@app.get("/")
async def index():
    return {"app": app.title, "modes": "/badminton/modes"}
