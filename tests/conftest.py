from typing import Any

import pytest

from schemakit import Schema


@pytest.fixture(scope="function")
def user_schema():
    return Schema.object(
        {
            "id": Schema.number().integer().positive(),
            "username": Schema.string().min_length(3).max_length(20).pattern(r"^[a-zA-Z0-9_]+$"),
            "email": Schema.string().email(),
            "age": Schema.number().integer().min(13).max(120).optional(),
            "is_active": Schema.boolean(),
            "tags": Schema.array(Schema.string()).max_length(10),
            "address": Schema.object(
                {
                    "street": Schema.string().min_length(1),
                    "city": Schema.string().min_length(1),
                    "zip": Schema.string().pattern(r"^\d{5}(-\d{4})?$"),
                }
            ).optional(),
        }
    )


@pytest.fixture(scope="function")
def valid_user() -> dict[str, Any]:
    return {
        "id": 1,
        "username": "john_doe",
        "email": "john@example.com",
        "age": 30,
        "is_active": True,
        "tags": ["developer", "python"],
        "address": {"street": "123 Main St", "city": "Anytown", "zip": "12345"},
    }
