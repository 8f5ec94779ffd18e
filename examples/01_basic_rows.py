"""
Example 01: Reading Rows

This example wraps a structured batch and a list of row maps in
UntypedResultSet and reads typed values back out of each row.
"""

import struct
import uuid

from row_result import ColumnSpecification, ResultMetadata, ResultSet, UntypedResultSet
from row_result.marshal import INT32, UTF8, UUID


def main():
    # A structured batch: one shared list of columns, positional values
    columns = [
        ColumnSpecification("app", "users", "id", UUID),
        ColumnSpecification("app", "users", "name", UTF8),
        ColumnSpecification("app", "users", "age", INT32),
    ]
    batch = ResultSet(
        ResultMetadata(columns),
        [
            [uuid.uuid4().bytes, b"Alice", struct.pack(">i", 31)],
            [uuid.uuid4().bytes, b"Bob", None],
        ],
    )

    print("=== Structured batch ===\n")
    users = UntypedResultSet.from_result_set(batch)
    print(f"{len(users)} rows, columns: {[str(c) for c in columns]}")
    for row in users:
        age = row.get_int("age") if row.has("age") else "unknown"
        print(f"  - {row.get_string('name')} ({row.get_uuid('id')}), age {age}")
    print()

    # Independent row maps: no shared schema, columns may differ per row
    print("=== Independent row maps ===\n")
    settings = UntypedResultSet.from_rows(
        [
            {"key": b"cluster_name", "value": b"Test Cluster"},
            {"key": b"partitioner", "value": None},
        ]
    )
    for row in settings:
        print(f"  {row.get_string('key')} = {row.get_bytes('value')!r}")
    print()

    # one() requires exactly one row
    single = UntypedResultSet.from_rows([{"count": struct.pack(">i", 42)}])
    print(f"one(): count = {single.one().get_int('count')}")


if __name__ == "__main__":
    main()
