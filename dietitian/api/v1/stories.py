"""
用户评价路由模块
公开页只展示已审核的评价
"""

from fastapi import APIRouter, Depends, Query

from ...core.error_handler import create_success_response
from ...core.security import Session, require_admin
from ...models.user import User
from ...schemas.order import StoryCreateRequest
from ...services.story_service import StoryService
from ..deps import get_current_user

router = APIRouter()


@router.get("")
def public_stories():
    return create_success_response(StoryService().list_public())


@router.get("/top")
def top_stories(limit: int = Query(3, ge=1, le=20)):
    """首页展示的高分评价"""
    return create_success_response(StoryService().top_stories(limit))


@router.post("")
def submit_story(request: StoryCreateRequest, user: User = Depends(get_current_user)):
    story = StoryService().add_story(user, request.content, request.rating)
    message = "Story published" if story.approved else "Story submitted for review"
    return create_success_response(story, message)


@router.get("/all")
def all_stories(admin: Session = Depends(require_admin)):
    """全部评价，含待审核（管理员）"""
    return create_success_response(StoryService().list_all())


@router.post("/{story_id}/approve")
def approve_story(story_id: int, admin: Session = Depends(require_admin)):
    return create_success_response(StoryService().approve(story_id), "Story approved")


@router.delete("/{story_id}")
def delete_story(story_id: int, admin: Session = Depends(require_admin)):
    StoryService().delete(story_id)
    return create_success_response({"story_id": story_id}, "Story deleted")
