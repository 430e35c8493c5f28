"""
CRUD 계층 예외

단건 조회/수정은 기존 방식대로 None을 반환하고,
일괄 작업이나 계층 검증처럼 None으로 표현하기 어려운 실패만 예외로 올립니다.
"""


class NotFoundError(LookupError):
    """참조한 레코드가 없음"""

    def __init__(self, resource: str, record_id):
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} {record_id} not found")


class InvalidHierarchyError(ValueError):
    """부모 지정이 순환을 만들거나 자기 자신을 가리킴"""
