import os, logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from .errors import ResumeServiceError
from .schemas import HealthOut

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Tailored Resume PDF Service")

origins_env = os.getenv("CORS_ORIGINS")
origins = [o.strip() for o in (origins_env or "").split(",") if o.strip()]
if not origins:
    # Sensible default for local dev (Next.js 3000, Vite 5173)
    origins = ["http://localhost:3000", "http://localhost:5173"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)


@app.exception_handler(ResumeServiceError)
async def resume_service_error_handler(request: Request, exc: ResumeServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health", response_model=HealthOut)
def health():
    return HealthOut(ok=True, ai_configured=bool(os.getenv("OPENAI_API_KEY")))


from .api.routes_resume import router as resume_router
app.include_router(resume_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
