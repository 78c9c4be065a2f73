import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.v1.endpoints import router as api_router
from app.core.config import INVALID_REQUEST, settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("services")

app = FastAPI(title="Agent Chat Relay")
app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    # Clients only ever see 400/500 with an "error" body
    logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_REQUEST})


@app.get("/")
async def root():
    return {"status": "ok"}


def run() -> None:
    uvicorn.run(app, host="0.0.0.0", port=settings.default_port)


if __name__ == "__main__":
    run()
