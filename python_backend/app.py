"""
FastAPI backend for the workout calorie tracker
Estimates calories burned, stores workouts in a JSON file and reports per-user stats
Serve with `tracker serve` or `uvicorn python_backend.app:create_app --factory`
"""

import json
from typing import Any, Optional

from fastapi import APIRouter, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.concurrency import run_in_threadpool

from tracker.config.constants import SECURITY_HEADERS, SERVICE_NAME, load_config
from tracker.config.logging import setup_logger
from tracker.errors import ValidationError
from tracker.service import TrackerService


def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status)


async def _read_json_body(request: Request) -> Any:
    body = await request.body()
    return json.loads(body.decode("utf-8"))


def _build_router(service: TrackerService) -> APIRouter:
    router = APIRouter()

    @router.post("/calculate-calories")
    async def calculate_calories(request: Request):
        """Estimate calories for a workout and duration"""
        try:
            payload = await _read_json_body(request)
            return await run_in_threadpool(service.calculate_calories, payload)
        except ValidationError as exc:
            return _error(400, str(exc))
        except Exception:
            logger.exception("Error calculating calories")
            return _error(500, "Failed to calculate calories")

    @router.get("/workouts")
    def list_workouts(name: Optional[str] = Query(None, description="Only workouts logged under this name")):
        """List workouts; with a name, also group them by type and add stats"""
        try:
            return service.list_workouts(name)
        except Exception:
            logger.exception("Error reading workouts")
            return _error(500, "Failed to read workouts")

    @router.post("/workouts")
    async def create_workout(request: Request):
        """Store a workout and return it with its assigned id and timestamp"""
        try:
            payload = await _read_json_body(request)
            return await run_in_threadpool(service.record_workout, payload)
        except ValidationError as exc:
            return _error(400, str(exc))
        except Exception:
            logger.exception("Error saving workout")
            return _error(500, "Failed to save workout")

    @router.delete("/workouts")
    def delete_workout(workout_id: Optional[str] = Query(None, alias="id", description="Workout id")):
        """Delete a workout by id; unknown ids still succeed"""
        try:
            return service.delete_workout(workout_id)
        except ValidationError as exc:
            return _error(400, str(exc))
        except Exception:
            logger.exception("Error deleting workout")
            return _error(500, "Failed to delete workout")

    return router


def create_app(service: Optional[TrackerService] = None) -> FastAPI:
    if service is None:
        config = load_config()
        setup_logger(config)
        service = TrackerService.from_config(config)

    app = FastAPI(title="Workout Calorie Tracker API", version="1.0.0")
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        logger.debug(f"Request: {request.method} {request.url.path}")
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers[header] = value
        logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
        return response

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": SERVICE_NAME}

    router = _build_router(service)
    app.include_router(router)
    # The web client calls the same routes under /api.
    app.include_router(router, prefix="/api")

    logger.info(f"Workout tracker API ready (LLM estimates {'on' if service.gateway.enabled else 'off'})")
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
