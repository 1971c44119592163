"""ACL patterns guarding agent pool actions."""

from __future__ import annotations


def authorize_agents(pool_id: int) -> str:
    return f"agent_pools.{pool_id}.authorize_agents"


def enable_agents(pool_id: int) -> str:
    return f"agent_pools.{pool_id}.enable_agents"


def manage_projects(pool_id: int) -> str:
    return f"agent_pools.{pool_id}.manage_projects"


def manage_agents(pool_id: int) -> str:
    return f"agent_pools.{pool_id}.manage_agents"
