"""
演示数据
空库启动时写入演示用户、餐品和已审核的评价
"""

import logging
from typing import Optional

from .constants import DEFAULT_MEAL_IMAGE, DEMO_MEALS, DEMO_STORIES, DEMO_USERS
from .core.database import DatabaseManager, db_manager
from .models.meal import MealCreate
from .services.meal_service import MealService
from .services.user_service import UserService

logger = logging.getLogger(__name__)


def seed(db: Optional[DatabaseManager] = None) -> bool:
    """写入演示数据；库中已有用户时跳过，返回是否写入"""
    db = db or db_manager
    if db.execute_one("SELECT COUNT(*) FROM users")[0] > 0:
        return False

    users = UserService(db)
    for item in DEMO_USERS:
        users.create_user(**item)

    meals = MealService(db)
    for item in DEMO_MEALS:
        meals.create_meal(MealCreate(image=DEFAULT_MEAL_IMAGE, **item))

    for item in DEMO_STORIES:
        db.execute_query(
            """
            INSERT INTO stories(user_id, author_name, content, rating, approved, date, role)
            VALUES (NULL,?,?,?,TRUE,?,'user')
            """,
            [item["author_name"], item["content"], item["rating"], item["date"]]
        )

    logger.info("Seeded %d users, %d meals, %d stories", len(DEMO_USERS), len(DEMO_MEALS), len(DEMO_STORIES))
    return True
