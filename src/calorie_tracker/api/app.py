"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from calorie_tracker.api.admin import router as admin_router
from calorie_tracker.api.ai import router as ai_router
from calorie_tracker.api.dashboard import router as dashboard_router
from calorie_tracker.api.models import (
    GoalsRequest,
    ProfileUpdateRequest,
    ProfileValidationRequest,
    RecommendedGoalsRequest,
    TargetsRequest,
)
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import ValidationError
from calorie_tracker.domain.goals import DailyGoals
from calorie_tracker.domain.profile import Profile, UnitSystem
from calorie_tracker.services.tutorial import TutorialService
from calorie_tracker.services.validation import validate_profile_form

HTTP_UNPROCESSABLE_ENTITY = 422


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)
    app.include_router(ai_router)
    app.include_router(dashboard_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected input: field=%s reason=%s", exc.field, exc.reason)
        return JSONResponse(
            status_code=HTTP_UNPROCESSABLE_ENTITY,
            content=exc.to_dict(),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/targets")
    async def calculate_targets(
        payload: TargetsRequest, request: Request
    ) -> dict[str, object]:
        """Calculate BMR, TDEE and macro targets for a profile."""
        calculator = _container(request).calculator
        profile = Profile(
            gender=payload.gender,
            age_years=payload.age_years,
            height_cm=payload.height_cm,
            weight_kg=payload.weight_kg,
        )
        bmr = calculator.compute_bmr(profile)
        tdee = calculator.compute_tdee(profile, payload.activity_level)
        targets = calculator.derive_macros(tdee)
        return {
            "bmr": bmr,
            "tdee": tdee,
            "activity_level": payload.activity_level,
            "targets": asdict(targets),
        }

    @app.post("/profile/validate")
    async def validate_profile(payload: ProfileValidationRequest) -> dict[str, object]:
        """Validate raw profile form input field by field."""
        result = validate_profile_form(
            payload.gender, payload.height, payload.weight, payload.unit_system
        )
        return {
            "can_continue": result.can_continue,
            "fields": {
                "height": asdict(result.height),
                "weight": asdict(result.weight),
            },
            "messages": result.messages,
        }

    @app.get("/profile")
    async def get_profile(
        request: Request, unit_system: UnitSystem | None = None
    ) -> dict[str, object]:
        """Return the stored profile in the requested unit system."""
        goals_service = _container(request).goals_service
        return {
            "profile": asdict(goals_service.profile_for_display(unit_system)),
            "onboarding_complete": goals_service.is_onboarding_complete(),
        }

    @app.put("/profile")
    async def update_profile(
        payload: ProfileUpdateRequest, request: Request
    ) -> dict[str, object]:
        """Store the profile, converting imperial input to metric."""
        goals_service = _container(request).goals_service
        goals_service.save_profile_input(
            gender=payload.gender,
            date_of_birth=payload.date_of_birth,
            height=payload.height,
            weight=payload.weight,
            unit_system=payload.unit_system,
        )
        return {"profile": asdict(goals_service.profile_for_display())}

    @app.get("/goals")
    async def get_goals(request: Request) -> dict[str, object]:
        """Return the current daily goals."""
        return {"goals": asdict(_container(request).goals_service.get_goals())}

    @app.put("/goals")
    async def update_goals(payload: GoalsRequest, request: Request) -> dict[str, object]:
        """Store user-adjusted goals."""
        goals = _container(request).goals_service.update_goals(
            DailyGoals(
                calories=payload.calories,
                protein_g=payload.protein_g,
                carbs_g=payload.carbs_g,
                fat_g=payload.fat_g,
            )
        )
        return {"goals": asdict(goals)}

    @app.post("/goals/recommended")
    async def recommended_goals(
        payload: RecommendedGoalsRequest, request: Request
    ) -> dict[str, object]:
        """Recommend goals from the stored profile, optionally applying them."""
        goals_service = _container(request).goals_service
        if payload.apply:
            goals = goals_service.apply_recommended_goals(payload.activity_level)
        else:
            goals = goals_service.recommended_goals(payload.activity_level)
        return {"goals": asdict(goals), "applied": payload.apply}

    @app.post("/onboarding/complete")
    async def complete_onboarding(request: Request) -> dict[str, bool]:
        """Mark onboarding as finished."""
        _container(request).goals_service.complete_onboarding()
        return {"onboarding_complete": True}

    @app.get("/tutorial")
    async def tutorial_state(request: Request) -> dict[str, object]:
        """Return the current tutorial step."""
        return _tutorial_state(_container(request).tutorial_service)

    @app.post("/tutorial/start")
    async def tutorial_start(request: Request) -> dict[str, object]:
        """Start the tutorial from the first step."""
        tutorial = _container(request).tutorial_service
        tutorial.start()
        return _tutorial_state(tutorial)

    @app.post("/tutorial/next")
    async def tutorial_next(request: Request) -> dict[str, object]:
        """Advance the tutorial."""
        tutorial = _container(request).tutorial_service
        tutorial.next_step()
        return _tutorial_state(tutorial)

    @app.post("/tutorial/skip")
    async def tutorial_skip(request: Request) -> dict[str, object]:
        """End the tutorial."""
        tutorial = _container(request).tutorial_service
        tutorial.skip()
        return _tutorial_state(tutorial)

    @app.post("/tutorial/reset")
    async def tutorial_reset(request: Request) -> dict[str, object]:
        """Make every tip appear as new again."""
        tutorial = _container(request).tutorial_service
        version = tutorial.reset()
        return {**_tutorial_state(tutorial), "tip_version": version}

    return app


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _tutorial_state(tutorial: TutorialService) -> dict[str, object]:
    current = tutorial.current
    return {
        "is_showing": tutorial.is_showing,
        "step": tutorial.step_number,
        "total_steps": tutorial.total_steps,
        "progress": tutorial.progress,
        "coach_mark": asdict(current) if current else None,
        "has_seen_tutorial": tutorial.repository.has_seen_tutorial(),
    }
