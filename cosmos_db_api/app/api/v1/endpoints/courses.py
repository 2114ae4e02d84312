"""
Course endpoints for API v1.

Courses can only be created.  The body is passed through unchanged
apart from the mandatory ``category`` field.
"""

from typing import Union

from fastapi import APIRouter, Depends

from cosmos_db_api.app.api.v1.responses import execute
from cosmos_db_api.app.core.cosmos import get_cosmos_service
from cosmos_db_api.app.schemas.course import Course
from cosmos_db_api.app.schemas.response import Err, Ok
from cosmos_db_api.app.services.cosmos_service import CosmosService

router = APIRouter()


@router.post("", response_model=Union[Ok[Course], Err])
async def create_course(course: Course, service: CosmosService = Depends(get_cosmos_service)):
    return await execute(
        "creating the course",
        course.category,
        lambda: service.create_course(course),
        "Course created successfully.",
    )
