"""FastAPI web interface."""

from typing import Optional
from uuid import UUID
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..database import (
    IdeaCreate, IdeaUpdate, ResearchReport, Status,
    IdeaRepository, get_repository
)
from ..processors.pipeline import RealityCheckPipeline, get_pipeline
from ..reasoning import (
    ResearchGenerator, get_research_generator,
    PRDGenerator, get_prd_generator
)
from ..utils import (
    get_settings, get_logger,
    InvalidIdeaError, IdeaNotFoundError, LLMNotConfiguredError
)

logger = get_logger(__name__)

VERSION = "0.1.0"

app = FastAPI(
    title="Seedbed",
    description="Idea board with market reality checks and AI research",
    version=VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request models
class IdeaRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    idea_id: Optional[str] = None


class GeneratePromptRequest(BaseModel):
    title: Optional[str] = None
    research: Optional[ResearchReport] = None


def _title_required() -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Title is required"})


def _failure(e: Exception, default: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"success": False, "error": str(e) or default}
    )


def _unwrap(result):
    """Map a repository command result onto the HTTP response."""
    if result.ok:
        return result.value
    if result.not_found:
        raise HTTPException(status_code=404, detail=result.reason)
    if result.invalid:
        raise HTTPException(status_code=400, detail=result.reason)
    raise HTTPException(status_code=502, detail=result.reason)


# Health check
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": VERSION,
        "name": "Seedbed",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


# Ideas endpoints
@app.get("/ideas")
async def list_ideas(
    status: Optional[Status] = None,
    repository: IdeaRepository = Depends(get_repository)
):
    """List ideas, newest first, optionally for one board column."""
    ideas = await repository.list()
    if status:
        ideas = [i for i in ideas if i.status == status]
    return {"ideas": [i.model_dump(mode="json") for i in ideas], "count": len(ideas)}


@app.get("/ideas/stats")
async def get_idea_stats(repository: IdeaRepository = Depends(get_repository)):
    """Counts per status and ideas created this week."""
    stats = await repository.stats()
    return stats.model_dump()


@app.get("/ideas/{idea_id}")
async def get_idea(idea_id: UUID, repository: IdeaRepository = Depends(get_repository)):
    """Get a single idea by ID."""
    idea = await repository.get(idea_id)
    if idea is None:
        raise HTTPException(status_code=404, detail="Idea not found")
    return idea.model_dump(mode="json")


@app.post("/ideas", status_code=201)
async def create_idea(
    data: IdeaCreate,
    repository: IdeaRepository = Depends(get_repository)
):
    """Create an idea."""
    if not data.title.strip():
        raise HTTPException(status_code=400, detail="Title is required")
    idea = _unwrap(await repository.create(data))
    return idea.model_dump(mode="json")


@app.patch("/ideas/{idea_id}")
async def update_idea(
    idea_id: UUID,
    update: IdeaUpdate,
    repository: IdeaRepository = Depends(get_repository)
):
    """Update an idea, e.g. move it to another column.

    An explicit null title, status or priority fails request validation (422).
    """
    idea = _unwrap(await repository.update(idea_id, update))
    return idea.model_dump(mode="json")


@app.delete("/ideas/{idea_id}")
async def delete_idea(idea_id: UUID, repository: IdeaRepository = Depends(get_repository)):
    """Delete an idea."""
    deleted_id = _unwrap(await repository.delete(idea_id))
    return {"deleted": str(deleted_id)}


# Reality check endpoints
@app.post("/reality-check")
async def reality_check(
    request: IdeaRequest,
    pipeline: RealityCheckPipeline = Depends(get_pipeline)
):
    """Scan GitHub, Hacker News and npm for similar projects and score the idea."""
    if not (request.title or "").strip():
        return _title_required()

    try:
        report = await pipeline.run(
            request.title,
            request.description,
            idea_id=request.idea_id or ""
        )
        return {"success": True, "reality_check": report.model_dump(mode="json")}
    except InvalidIdeaError:
        return _title_required()
    except Exception as e:
        logger.error("Reality check error", error=str(e), error_type=type(e).__name__)
        return _failure(e, "Reality check failed")


@app.post("/ideas/{idea_id}/reality-check")
async def reality_check_idea(
    idea_id: UUID,
    repository: IdeaRepository = Depends(get_repository),
    pipeline: RealityCheckPipeline = Depends(get_pipeline)
):
    """Scan a stored idea and save the report onto it."""
    try:
        report = await pipeline.run_for_idea(repository, idea_id)
        return {"success": True, "reality_check": report.model_dump(mode="json")}
    except IdeaNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidIdeaError:
        return _title_required()
    except Exception as e:
        logger.error("Reality check error", idea_id=str(idea_id), error=str(e))
        return _failure(e, "Reality check failed")


# Research endpoints
@app.post("/research")
async def research(
    request: IdeaRequest,
    generator: ResearchGenerator = Depends(get_research_generator)
):
    """Generate an AI research report for an idea."""
    if not (request.title or "").strip():
        return _title_required()

    try:
        report = await generator.generate(
            request.title.strip(),
            (request.description or "").strip(),
            idea_id=request.idea_id or ""
        )
        return {"success": True, "research": report.model_dump(mode="json")}
    except LLMNotConfiguredError as e:
        return _failure(e, "LLM API key not configured")
    except Exception as e:
        logger.error("Research error", error=str(e), error_type=type(e).__name__)
        return _failure(e, "Research failed")


@app.post("/ideas/{idea_id}/research")
async def research_idea(
    idea_id: UUID,
    repository: IdeaRepository = Depends(get_repository),
    generator: ResearchGenerator = Depends(get_research_generator)
):
    """Research a stored idea and save the report onto it."""
    idea = await repository.get(idea_id)
    if idea is None:
        raise HTTPException(status_code=404, detail="Idea not found")

    try:
        report = await generator.generate(idea.title, idea.description, idea_id=str(idea.id))
    except Exception as e:
        logger.error("Research error", idea_id=str(idea_id), error=str(e))
        return _failure(e, "Research failed")

    _unwrap(await repository.update(idea.id, IdeaUpdate(research_report=report)))
    return {"success": True, "research": report.model_dump(mode="json")}


# Document generation
@app.post("/generate-prompt")
async def generate_prompt(
    request: GeneratePromptRequest,
    generator: PRDGenerator = Depends(get_prd_generator)
):
    """Generate a PRD from an idea title and optional research findings."""
    if not (request.title or "").strip():
        return _title_required()

    try:
        prd = await generator.generate(request.title.strip(), request.research)
        return {"success": True, "prd": prd}
    except Exception as e:
        logger.error("Generate PRD error", error=str(e), error_type=type(e).__name__)
        return _failure(e, "Failed to generate PRD")
