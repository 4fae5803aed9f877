"""
Entry point to run the Research Paper Assistant backend with one command.

Usage:
    pip install -e .
    python main.py

Then, in a separate terminal:
    streamlit run ui_app.py
"""

import logging

import uvicorn

from research_assistant.backend import app
from research_assistant.config import settings


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host="0.0.0.0", port=8000)
