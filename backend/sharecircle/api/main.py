from fastapi import APIRouter

from sharecircle.api.routes import (
    comments,
    friends,
    me,
    posts,
    profiles,
)

api_router = APIRouter()
api_router.include_router(me.router)
api_router.include_router(profiles.router)
api_router.include_router(posts.router)
api_router.include_router(comments.router)
api_router.include_router(friends.router)
