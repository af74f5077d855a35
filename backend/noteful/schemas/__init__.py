# Schemas package init
"""
Noteful Backend — Pydantic Request/Response Schemas
=====================================================

Request models declare every field as optional: presence rules live in
`noteful.services.validation` so that missing fields produce the API's
own 400 messages instead of FastAPI's generic 422.
"""
