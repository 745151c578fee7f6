from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from .config import server
from .core.events import lifespan
from .routes import health, leaderboard, page

app = FastAPI(
    default_response_class=ORJSONResponse,
    title="Codewars Leaderboard",
    description="Fetches Codewars profiles and ranks them overall or by language",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(page.router)
app.include_router(leaderboard.router)
app.include_router(health.router)

def run():
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=server.HOST,
        port=server.PORT,
        log_level=server.LOG_LEVEL.lower()
    )

if __name__ == "__main__":
    run()
