from fastapi import APIRouter

from src.taskboard.api.routes import auth, projects, tasks

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(projects.router)
api_router.include_router(tasks.router)
