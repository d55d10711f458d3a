from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from core.config import settings
from core.exceptions import PodcastGenerationError
from routes import podcast  # Import the podcast router

# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API for turning uploaded PDF documents into a two-person podcast dialogue",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(podcast.router, prefix=settings.API_PREFIX)

@app.exception_handler(PodcastGenerationError)
async def podcast_generation_error_handler(request: Request, exc: PodcastGenerationError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

@app.get("/", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "message": "PodcastGen API is running"}

