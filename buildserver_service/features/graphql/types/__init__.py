"""Strawberry types of the build server graph.

Import types from their modules:

    from buildserver_service.features.graphql.types.buildserver import AgentPoolType
"""
