"""Resolver package for GraphQL schema.

Functions here are referenced by the GraphQL types, queries and mutations and
reach the database only through the DocumentStore found on the request context.
"""

# Intentionally empty; functions are defined in sibling modules.
