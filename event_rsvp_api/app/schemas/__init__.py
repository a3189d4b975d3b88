"""
Pydantic schema definitions for API payloads and stored records.

Each domain (admins, events, participations) defines its own models.
Request models forbid unknown fields so that a payload carrying
anything outside its allow-list is rejected with 400.  Field names
are snake_case in Python and camelCase on the wire.
"""
