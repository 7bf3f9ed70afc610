# blog_api/schemas/common.py
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    # JSON em camelCase (avatarUrl, techStacks...), atributos em snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class DataId(CamelModel):
    data_id: int


class PageInfo(CamelModel):
    end_cursor: Optional[int] = None
    has_next_page: bool = False


class Page(CamelModel, Generic[T]):
    list: List[T]
    total_count: int
    page_info: PageInfo
