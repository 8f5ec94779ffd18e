"""
Example 02: Collections and Model Mapping

This example decodes set, list and map columns with caller-supplied element
codecs, then maps rows onto a dataclass and a Pydantic model.
"""

import struct
from dataclasses import dataclass

from pydantic import BaseModel

from row_result import ModelMapper, UntypedResultSet
from row_result.marshal import INT32, UTF8


def frame(elements):
    """Encode collection elements the way a query pipeline would hand them over."""
    out = struct.pack(">i", len(elements))
    for element in elements:
        out += struct.pack(">i", len(element)) + element
    return out


@dataclass
class Team:
    name: str
    size: int | None


class TeamModel(BaseModel):
    name: str
    size: int


def main():
    result = UntypedResultSet.from_rows(
        [
            {
                "name": b"core",
                "size": struct.pack(">i", 3),
                "members": frame([b"ann", b"bo", b"cy"]),
                "tags": frame([b"infra", b"infra", b"oncall"]),
                "scores": struct.pack(">i", 2)
                + struct.pack(">i", 3) + b"ann" + struct.pack(">i", 4) + struct.pack(">i", 90)
                + struct.pack(">i", 2) + b"bo" + struct.pack(">i", 4) + struct.pack(">i", 75),
            },
            {"name": b"docs", "size": None, "members": None},
        ]
    )

    print("=== Collection columns ===\n")
    for row in result:
        print(f"{row.get_string('name')}:")
        print(f"  members: {row.get_list('members', UTF8)}")
        print(f"  tags:    {sorted(row.get_set('tags', UTF8))}")
        print(f"  scores:  {row.get_map('scores', UTF8, INT32)}")
    print()

    print("=== Model mapping ===\n")
    columns = {"name": UTF8, "size": INT32}
    for team in ModelMapper(Team, columns).map_many(result):
        print(f"  dataclass: {team}")

    core = ModelMapper(TeamModel, columns).map_one(next(iter(result)))
    print(f"  pydantic:  {core!r}")


if __name__ == "__main__":
    main()
