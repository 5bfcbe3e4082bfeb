import logging

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.routes.auth.auth_routers import auth_router
from app.routes.card.card_routers import card_router
from app.routes.session.session_routers import session_router
from app.routes.quiz.quiz_routers import quiz_router
from app.routes.feedback.feedback_routers import feedback_router
from app.routes.analytics.analytics_routers import analytics_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(title="Fluffy Trivia API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(card_router)
app.include_router(session_router)
app.include_router(quiz_router)
app.include_router(feedback_router)
app.include_router(analytics_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Fluffy Trivia</title>
        </head>
        <body>
            <h1>Fluffy Trivia API</h1>
            <p>Check the API docs <a href="/docs">here</a>.</p>
        </body>
    </html>
    """


@app.get("/health")
def health():
    return {"status": "ok"}
