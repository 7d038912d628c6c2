# MongoDB collection: users
# This file documents the expected document shape
# Actual operations are handled via pymongo in service.py

"""
Expected document structure:
- _id: ObjectId (primary key)
- name: string (as submitted, unvalidated)
- email: string (unique, enforced by a pre-check and a unique index)
- password: string (bcrypt hash, never the plain password)

Users are created at registration and read at login. They are never
updated or deleted through the API.
"""

USERS_COLLECTION = "users"
