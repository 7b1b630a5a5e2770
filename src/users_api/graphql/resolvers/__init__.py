"""Resolver package for the GraphQL schema.

Resolvers read the user store from ``info.context["store"]`` and convert
store records into GraphQL types.
"""
