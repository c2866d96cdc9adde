"""Plain value objects."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Rectangle(BaseModel):
    model_config = ConfigDict(extra="allow")

    width: int | float
    height: int | float

    def __init__(self, *args: Any, **data: Any) -> None:
        # Rectangle(10, 20) as well as Rectangle(width=10, height=20)
        if len(args) > 2:
            raise TypeError(f"Rectangle takes at most 2 positional arguments ({len(args)} given)")
        data.update(zip(("width", "height"), args))
        super().__init__(**data)

    def area(self) -> int | float:
        return self.width * self.height
