"""
FastAPI backend for the Research Paper Assistant.

Exposes:
- Title suggestion for a user query
- Research task orchestration endpoints for the web UI
- Research type catalogue, history and Markdown export
"""

import logging
import uuid
from typing import Dict, List

from fastapi import BackgroundTasks, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .agent import history_store, research_agent, task_store
from .errors import MissingAPIKeyError, ResearchAPIError, UnknownResearchTypeError
from .export import export_filename, render_markdown
from .models import ResearchRecord, ResearchRequest, ResearchStatus, TitleRequest, TitleResponse
from .research_types import RESEARCH_MODES, base_research_types, total_sections


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Research Paper Assistant", version="0.1.0")

    # Allow local UIs (Streamlit) to talk to the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.get("/research/types")
    async def research_types() -> List[Dict]:
        """Selectable research types with their section counts per mode."""
        return [
            {
                "name": name,
                "title": config.title,
                "description": config.description,
                "total_sections": {mode: total_sections(name, mode) for mode in RESEARCH_MODES},
            }
            for name, config in base_research_types().items()
        ]

    @app.post("/research/title", response_model=TitleResponse)
    async def suggest_title(payload: TitleRequest) -> TitleResponse:
        if not payload.query.strip():
            raise HTTPException(status_code=400, detail="Query must not be empty.")
        try:
            title = await research_agent.suggest_title(payload.query, payload.api_key)
        except MissingAPIKeyError as exc:
            raise HTTPException(status_code=400, detail=exc.message) from exc
        except ResearchAPIError as exc:
            raise HTTPException(status_code=502, detail=exc.message) from exc
        return TitleResponse(query=payload.query, title=title)

    @app.post("/research/start", response_model=ResearchStatus)
    async def start_research(payload: ResearchRequest, background_tasks: BackgroundTasks) -> ResearchStatus:
        """
        Start a research task for an accepted title and return the initial status.
        """
        if not payload.query.strip() or not payload.title.strip():
            raise HTTPException(status_code=400, detail="Query and title must not be empty.")

        task_id = str(uuid.uuid4())
        try:
            status = research_agent.create_task(task_id, payload)
        except (MissingAPIKeyError, UnknownResearchTypeError) as exc:
            raise HTTPException(status_code=400, detail=exc.message) from exc

        response = status.model_copy(deep=True)
        background_tasks.add_task(research_agent.run_task, task_id, payload)
        logger.info("Queued research task %s for %r", task_id, payload.title)
        return response

    @app.get("/research/status/{task_id}", response_model=ResearchStatus)
    async def get_status(task_id: str) -> ResearchStatus:
        status = task_store.get(task_id)
        if status is None:
            raise HTTPException(status_code=404, detail="Unknown task_id")
        return status

    @app.get("/research/history", response_model=List[ResearchRecord])
    async def get_history() -> List[ResearchRecord]:
        return history_store.all_records()

    @app.delete("/research/history")
    async def clear_history() -> Dict[str, str]:
        history_store.clear()
        return {"status": "cleared"}

    @app.get("/research/history/{record_id}/markdown", response_class=PlainTextResponse)
    async def download_markdown(record_id: str) -> PlainTextResponse:
        record = history_store.get(record_id)
        if record is None:
            raise HTTPException(status_code=404, detail="Unknown record_id")
        return PlainTextResponse(
            render_markdown(record),
            media_type="text/markdown",
            headers={"Content-Disposition": f'attachment; filename="{export_filename(record.title)}"'},
        )

    return app


app = create_app()
