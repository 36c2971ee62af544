from json import load
from typing import Literal

from pydantic import BaseModel, field_validator

from ..data.tree import PairedTree, from_level_order, from_sorted


class TreePayload(BaseModel):
    leaves: list[int | float]
    layout: Literal['level', 'sorted'] = 'level'

    @field_validator('leaves')
    @classmethod
    def perfect_leaf_count(cls, leaves: list[int | float]) -> list[int | float]:
        if (len(leaves) + 1) & len(leaves):
            raise ValueError(f'A perfect tree holds 2^d - 1 leaves, got {len(leaves)}.')
        return leaves

    def to_tree(self) -> PairedTree[int | float]:
        match self.layout:
            case 'level': return from_level_order(self.leaves)
            case 'sorted': return from_sorted(sorted(self.leaves))
            case _: raise ValueError(f'Unrecognized layout {self.layout}')


def read_json(file):
    with open(file, 'r') as f:
        return load(f)
