from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from routers.icp import router as icp_router
from services.report import PresentationError
from services.session import ICPSession
from config import settings
import logging

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

app = FastAPI(
    title="ICP Strategy Engine",
    description="Ideal Customer Profile and outreach generator powered by Gemini",
    version="0.1.0",
)

app.state.session = ICPSession()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(icp_router)


@app.exception_handler(PresentationError)
async def presentation_error_handler(request: Request, exc: PresentationError):
    # State may be inconsistent after a display failure; start over from scratch.
    logger.error(f"Presentation failure on {request.url.path}: {exc}", exc_info=exc)
    request.app.state.session = ICPSession()
    return JSONResponse(
        status_code=500,
        content={
            "error": "Something went wrong",
            "detail": "We encountered an issue displaying the results. The data format might be unexpected.",
            "recovery": "reload",
        },
    )


@app.get("/", include_in_schema=False)
async def serve_ui():
    return FileResponse(STATIC_DIR / "index.html")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8001, reload=True)
