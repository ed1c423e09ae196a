"""
评价服务
用户提交评价需管理员审核后公开；管理员本人发布的评价直接公开
"""

import logging
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

from ..core.database import DatabaseManager, db_manager
from ..core.exceptions import StoryNotFoundError
from ..models.story import Story
from ..models.user import User, UserRole

logger = logging.getLogger(__name__)

STORY_COLUMNS = "story_id, user_id, author_name, content, rating, approved, date, image, role"
AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=random"


class StoryService:
    """评价服务"""

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager

    def add_story(self, user: User, content: str, rating: int) -> Story:
        approved = user.role == UserRole.ADMIN.value
        story_id = self.db.execute_one(
            """
            INSERT INTO stories(user_id, author_name, content, rating, approved, date, image, role)
            VALUES (?,?,?,?,?,?,?,?) RETURNING story_id
            """,
            [user.id, user.name, content, rating, approved, date.today().isoformat(),
             AVATAR_URL.format(name=quote_plus(user.name)), user.role]
        )[0]
        logger.info("Story %s submitted by user %s (approved=%s)", story_id, user.id, approved)
        return self.get_story(story_id)

    def get_story(self, story_id: int) -> Story:
        rows = self.db.fetch_dicts(f"SELECT {STORY_COLUMNS} FROM stories WHERE story_id = ?", [story_id])
        if not rows:
            raise StoryNotFoundError(f"Story {story_id} not found", details={"story_id": story_id})
        return self._row_to_story(rows[0])

    def list_all(self) -> List[Story]:
        """后台列表，最新在前"""
        rows = self.db.fetch_dicts(f"SELECT {STORY_COLUMNS} FROM stories ORDER BY story_id DESC")
        return [self._row_to_story(row) for row in rows]

    def list_public(self) -> List[Story]:
        return [story for story in self.list_all() if story.approved]

    def top_stories(self, limit: int = 3) -> List[Story]:
        """首页展示：已审核、评分从高到低"""
        stories = self.list_public()
        stories.sort(key=lambda s: s.rating, reverse=True)
        return stories[:limit]

    def approve(self, story_id: int) -> Story:
        """只修改审核标记"""
        self.get_story(story_id)
        self.db.execute_query("UPDATE stories SET approved = TRUE WHERE story_id = ?", [story_id])
        logger.info("Story %s approved", story_id)
        return self.get_story(story_id)

    def delete(self, story_id: int) -> None:
        self.get_story(story_id)
        self.db.execute_query("DELETE FROM stories WHERE story_id = ?", [story_id])
        logger.info("Story %s deleted", story_id)

    def count_pending(self) -> int:
        return self.db.execute_one("SELECT COUNT(*) FROM stories WHERE NOT approved")[0]

    def _row_to_story(self, row: Dict[str, Any]) -> Story:
        return Story(
            id=row["story_id"],
            user_id=row["user_id"],
            author_name=row["author_name"],
            content=row["content"],
            rating=row["rating"],
            approved=bool(row["approved"]),
            date=row["date"],
            image=row["image"],
            role=row["role"],
        )
