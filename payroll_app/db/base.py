from typing import Any

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    def as_dict(self, exclude: tuple[str, ...] = ()) -> dict[str, Any]:
        return {
            c.key: getattr(self, c.key)
            for c in self.__mapper__.column_attrs
            if c.key not in exclude
        }
