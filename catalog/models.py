# catalog/models.py
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(strict=True)

    id: str
    name: str = Field(min_length=1)
    description: str
    price: Union[int, float]
    category: str = Field(min_length=1)
    in_stock: bool = Field(alias="inStock")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
