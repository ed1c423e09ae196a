"""
状态流转记录
订单和预约每次状态变化都追加一条记录，已有记录永不修改
"""

from collections import defaultdict
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from ..core.database import DatabaseManager
from ..core.exceptions import InvalidStatusTransitionError
from ..models.base import ActionTrail


def check_transition(transitions: Dict, current: str, target: str, entity: str):
    """
    校验状态流转是否合法

    Raises:
        InvalidStatusTransitionError: 目标状态与当前相同，或当前为终态/不允许到达目标
    """
    allowed = set()
    for state, targets in transitions.items():
        if state.value == current:
            allowed = {s.value for s in targets}
    if target == current or target not in allowed:
        raise InvalidStatusTransitionError(
            f"Cannot move {entity} from {current} to {target}",
            details={"current": current, "target": target, "allowed": sorted(allowed)})


def append_entry(conn, entity_type: str, entity_id: int, status: str,
                 note: Optional[str] = None, at: Optional[datetime] = None) -> ActionTrail:
    """在调用方事务内追加一条记录"""
    at = at or datetime.now()
    conn.execute(
        "INSERT INTO status_history(entity_type, entity_id, status, note, created_at) VALUES (?,?,?,?,?)",
        [entity_type, entity_id, status, note, at]
    )
    return ActionTrail(status=status, timestamp=at, note=note)


def load_histories(db: DatabaseManager, entity_type: str,
                   entity_ids: Iterable[int]) -> Dict[int, List[ActionTrail]]:
    """批量读取记录，按插入顺序排列"""
    ids = list(entity_ids)
    result: Dict[int, List[ActionTrail]] = defaultdict(list)
    if not ids:
        return result

    placeholders = ",".join(["?"] * len(ids))
    rows = db.execute_query(
        f"""
        SELECT entity_id, status, note, created_at FROM status_history
        WHERE entity_type = ? AND entity_id IN ({placeholders})
        ORDER BY history_id
        """,
        [entity_type] + ids
    )
    for entity_id, status, note, created_at in rows:
        result[entity_id].append(ActionTrail(status=status, timestamp=created_at, note=note))
    return result
