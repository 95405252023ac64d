from typing import Any, Mapping, NamedTuple

from utils.errors import BadRequestError


class SetClause(NamedTuple):
    fragment: str
    values: list[Any]


def resolve_column(field_name: str, column_map: Mapping[str, str]) -> str:
    """필드명 -> DB 컬럼명 (매핑이 없으면 필드명 그대로)"""
    column_name = column_map.get(field_name)
    if column_name is None:
        return field_name
    return column_name


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def build_set_clause(
    update_fields: Mapping[str, Any],
    column_map: Mapping[str, str]
) -> SetClause:
    """
    부분 수정용 UPDATE SET 절 생성.

    Args:
        update_fields: 업데이트할 필드와 값 {"firstName": "Aliya", ...}
            순서가 곧 파라미터 순서
        column_map: 필드 -> DB 컬럼 매핑 {"firstName": "first_name"}
            매핑에 없는 필드는 필드명을 컬럼명으로 사용

    Returns:
        SetClause(fragment, values)
        - fragment: '"first_name" = $1, "age" = $2'
        - values: ["Aliya", 30]

    Raises:
        BadRequestError: update_fields가 비어 있는 경우

    Example:
        >>> fragment, values = build_set_clause({"age": 30}, {})
        >>> fragment
        '"age" = $1'
        >>> values
        [30]

    WHERE 절을 이어 붙일 때는 다음 위치로 len(values) + 1을 사용한다.
    """
    if not update_fields:
        raise BadRequestError("No data")

    set_parts = []
    values = []

    for position, (field_name, value) in enumerate(update_fields.items(), start=1):
        column_name = resolve_column(field_name, column_map)
        set_parts.append(f"{quote_identifier(column_name)} = ${position}")
        values.append(value)

    return SetClause(", ".join(set_parts), values)
