"""
Techo REST 백엔드 클라이언트

requests.Session 기반이며, 테스트에서는 같은 인터페이스를 가진
세션(예: fastapi.testclient.TestClient)을 주입할 수 있습니다.
"""

from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import requests

from utils.logger import get_logger

logger = get_logger(__name__)

DateLike = Union[date, str]


class TechoAPIError(Exception):
    """4xx/5xx 응답"""

    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail}")


def _iso(value: Optional[DateLike]) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    return value.isoformat()


class TechoClient:
    """Techo 백엔드와 통신하는 클라이언트"""

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        session: Optional[Any] = None,
        timeout: float = 30,
    ):
        """
        Args:
            base_url: API 서버 주소 (기본: http://localhost:3001)
            session: HTTP 세션 (없으면 requests.Session 생성)
            timeout: 요청 타임아웃 (초)
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}{path}"

        # None 값 제거 (쿼리 파라미터만, 본문의 null은 그대로 전송)
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        response = self.session.request(method, url, json=json, params=params or None, timeout=self.timeout)

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            logger.warning("[⚠️] %s %s failed: %s %s", method, path, response.status_code, detail)
            raise TechoAPIError(response.status_code, detail)

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # ========================================================================
    # Health
    # ========================================================================

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/")

    # ========================================================================
    # Generic list resources (todos, wish-items, routines, feature-requests, habits)
    # ========================================================================

    def list_items(self, resource: str, **params) -> List[Dict[str, Any]]:
        """
        목록 조회

        Args:
            resource: 리소스 경로 (예: "todos", "wish-items")
            **params: 필터 (예: type="bucket", day=1)
        """
        return self._request("GET", f"/api/{resource}", params=params)

    def create_item(self, resource: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", f"/api/{resource}", json=fields)

    def update_item(self, resource: str, item_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        부분 수정

        fields에 넣은 키만 전송합니다. 값이 None인 키도 null로 전송되므로
        바꾸지 않을 필드는 아예 넣지 마세요.
        """
        return self._request("PATCH", f"/api/{resource}/{item_id}", json=fields)

    def delete_item(self, resource: str, item_id: int) -> None:
        self._request("DELETE", f"/api/{resource}/{item_id}")

    def reorder(self, resource: str, orders: Iterable[Tuple[int, int]]) -> Dict[str, Any]:
        """(id, sort_order) 쌍을 한 번에 적용"""
        payload = {"orders": [{"id": item_id, "sort_order": sort_order} for item_id, sort_order in orders]}
        return self._request("POST", f"/api/{resource}/reorder", json=payload)

    # ========================================================================
    # Goals
    # ========================================================================

    def list_goals(self, date_from: Optional[DateLike] = None, date_to: Optional[DateLike] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/goals", params={"from": _iso(date_from), "to": _iso(date_to)})

    def get_goal_tree(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/goals/tree")

    def get_goal(self, goal_id: int) -> Dict[str, Any]:
        return self._request("GET", f"/api/goals/{goal_id}")

    def create_goal(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/goals", json=fields)

    def update_goal(self, goal_id: int, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PATCH", f"/api/goals/{goal_id}", json=fields)

    def delete_goal(self, goal_id: int) -> None:
        self._request("DELETE", f"/api/goals/{goal_id}")

    # ========================================================================
    # Habits
    # ========================================================================

    def toggle_habit_log(self, habit_id: int, log_date: DateLike) -> Dict[str, Any]:
        """기록이 없으면 추가, 있으면 삭제 (응답의 deleted로 구분)"""
        return self._request("POST", f"/api/habits/{habit_id}/logs", json={"date": _iso(log_date)})

    def list_habit_logs(self, date_from: Optional[DateLike] = None, date_to: Optional[DateLike] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/habits/logs", params={"from": _iso(date_from), "to": _iso(date_to)})

    # ========================================================================
    # Diary / schedules / calendar
    # ========================================================================

    def get_diary(self, entry_date: DateLike) -> Dict[str, Any]:
        return self._request("GET", f"/api/diary/{_iso(entry_date)}")

    def put_diary(self, entry_date: DateLike, content: str) -> Dict[str, Any]:
        return self._request("PUT", f"/api/diary/{_iso(entry_date)}", json={"content": content})

    def list_schedules(self, on_date: Optional[DateLike] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/schedules", params={"date": _iso(on_date)})

    def create_schedule(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/api/schedules", json=fields)

    def get_week_layout(self, target_date: DateLike) -> Dict[str, Any]:
        """target_date가 속한 주의 중첩 밴드 레이아웃"""
        return self._request("GET", "/api/calendar/week", params={"date": _iso(target_date)})
