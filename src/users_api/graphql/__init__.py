"""
GraphQL API for the user directory
"""
