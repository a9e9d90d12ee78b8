from typing import Dict
import logging

from fastapi import APIRouter, Depends, HTTPException

from journal_prompts.core.dependency import get_prompt_engine
from journal_prompts.prompts.progression import advance_level, level_description, level_tips
from journal_prompts.prompts.schemas import (
    BaselinePromptRequest,
    ContextualPromptRequest,
    OfflinePromptRequest,
    PromptResponse,
    ProgressionRequest,
    ProgressionResponse,
    VisualizationPromptRequest,
)
from journal_prompts.prompts.service import PromptEngine

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/prompts", tags=["Prompts"])


@router.post(
    "/visualization",
    response_model=PromptResponse,
    summary="Generate a goal visualization prompt",
    description="Generate a vivid prompt for imagining life after the goal is reached. Falls back to a static prompt when generation is unavailable.",
    responses={
        200: {"description": "Prompt generated (possibly from the offline pool)."},
        500: {"description": "Prompt generation failed."},
    },
)
async def visualization_prompt_route(
    body: VisualizationPromptRequest,
    engine: PromptEngine = Depends(get_prompt_engine),
) -> PromptResponse:
    try:
        engine.reset_error()
        prompt = await engine.generate_visualization_prompt(body.goal, body.time_of_day)
        return PromptResponse(prompt=prompt, error_message=engine.error_message)
    except Exception as e:
        logger.error(f"Failed to build visualization prompt for goal {body.goal.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate prompt")


@router.post(
    "/offline",
    response_model=PromptResponse,
    summary="Generate an offline goal prompt",
    description="Match the goal text against life-domain keywords and return a static prompt without calling the AI service. Unmatched goals get a prompt for the requested time of day.",
)
def offline_prompt_route(
    body: OfflinePromptRequest,
    engine: PromptEngine = Depends(get_prompt_engine),
) -> PromptResponse:
    return PromptResponse(prompt=engine.generate_offline_prompt(body.goal, body.time_of_day))


@router.post(
    "/baseline",
    response_model=PromptResponse,
    summary="Generate a baseline question for a new interest",
    responses={
        200: {"description": "Question generated (possibly from the static list)."},
        500: {"description": "Prompt generation failed."},
    },
)
async def baseline_prompt_route(
    body: BaselinePromptRequest,
    engine: PromptEngine = Depends(get_prompt_engine),
) -> PromptResponse:
    try:
        engine.reset_error()
        prompt = await engine.generate_baseline_prompt(body.interest)
        return PromptResponse(prompt=prompt, error_message=engine.error_message)
    except Exception as e:
        logger.error(f"Failed to build baseline prompt for interest {body.interest.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate prompt")


@router.post(
    "/contextual",
    response_model=PromptResponse,
    summary="Generate a contextual daily prompt",
    description="Generate a morning or evening prompt from the interest's history, progression level and recurring themes.",
    responses={
        200: {"description": "Prompt generated (possibly from the static banks)."},
        500: {"description": "Prompt generation failed."},
    },
)
async def contextual_prompt_route(
    body: ContextualPromptRequest,
    engine: PromptEngine = Depends(get_prompt_engine),
) -> PromptResponse:
    try:
        engine.reset_error()
        prompt = await engine.generate_contextual_prompt(
            body.interest, body.previous_session, body.sessions, body.is_evening
        )
        return PromptResponse(prompt=prompt, error_message=engine.error_message)
    except Exception as e:
        logger.error(f"Failed to build contextual prompt for interest {body.interest.id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate prompt")


@router.post(
    "/progression",
    response_model=ProgressionResponse,
    summary="Record a progress score and check for level advancement",
    description="Adds the score to the interest's rolling window and, when the advancement rule fires, moves the interest up one level.",
)
def progression_route(
    body: ProgressionRequest,
    engine: PromptEngine = Depends(get_prompt_engine),
) -> ProgressionResponse:
    interest = body.interest
    advanced = engine.check_and_advance_level(interest, body.score)
    if advanced:
        advance_level(interest, engine.clock())
    return ProgressionResponse(
        advanced=advanced,
        level_description=level_description(interest.current_level),
        level_tips=level_tips(interest.current_level),
        interest=interest,
    )


@router.delete(
    "/cache",
    response_model=Dict[str, str],
    summary="Clear the prompt cache",
    responses={
        200: {"description": "Cache cleared."},
        500: {"description": "Failed to clear cache."},
    },
)
def clear_cache_route(engine: PromptEngine = Depends(get_prompt_engine)) -> Dict[str, str]:
    try:
        engine.clear_cache()
        return {"detail": "Prompt cache cleared."}
    except Exception as e:
        logger.error(f"Failed to clear prompt cache: {e}")
        raise HTTPException(status_code=500, detail="Failed to clear prompt cache")
