from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from dotenv import load_dotenv

from agent_suggestions.routes import router as agent_suggestions_router

load_dotenv()

logging.basicConfig(level=logging.INFO)
logging.info("App starting")

app = FastAPI(title="Ivy Agent Suggestions")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(agent_suggestions_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
