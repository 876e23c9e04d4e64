"""
Quiz Ingest API — Main Application
FastAPI application serving generated coding quizzes.
"""

from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI

from routers import quiz

logging.basicConfig(level=logging.INFO, format="%(asctime)s  %(levelname)s  %(message)s")

app = FastAPI(
    title="Quiz Ingest API",
    description="Topic resolution and LLM question ingestion for coding quizzes",
    version="0.1.0",
)

app.include_router(quiz.router)


@app.get("/health")
def health_check():
    return {"status": "healthy"}
