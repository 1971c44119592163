"""GraphQL API over the build server connections.

Connections follow the Relay shape (edges, pageInfo, totalCount). An
edge whose node fails to resolve is left out of ``edges`` and reported in
the response ``errors`` with code OPERATION_FAILED, its position and its
cursor, while ``data`` keeps every other edge.
"""
