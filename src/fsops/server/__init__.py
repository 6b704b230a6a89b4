"""HTTP liveness endpoint for uptime monitors."""

from fsops.server.liveness import ALIVE_MESSAGE, create_app, run_liveness_server

__all__ = ["ALIVE_MESSAGE", "create_app", "run_liveness_server"]
